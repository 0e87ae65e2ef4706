"""
Infrastructure layer for the task management backend.

This layer contains the implementation details behind the domain ports:
- Database (async SQLAlchemy on SQLite or PostgreSQL)
- Authentication (JWT access tokens, Argon2 password hashes)
- Service container wiring
- HTTP surface (FastAPI routers and error handling)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
