#!/usr/bin/env python3
"""
Database management script for the Taskflow backend.
Creates, drops and maintains the schema.
"""

import sys
import asyncio

from taskflow.config import get_settings
from taskflow.infrastructure.container import build_container
from taskflow.infrastructure.db.database import create_tables, drop_tables


async def create_schema():
    """Create all tables."""
    container = build_container(get_settings())
    try:
        print("Creating tables...")
        await create_tables(container.engine)
    finally:
        await container.dispose()


async def drop_schema():
    """Drop all tables."""
    container = build_container(get_settings())
    try:
        print("Dropping tables...")
        await drop_tables(container.engine)
    finally:
        await container.dispose()


async def reset_schema():
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() != 'yes':
        print("Database reset cancelled.")
        return

    await drop_schema()
    await create_schema()


async def purge_tokens():
    """Remove revoked tokens that have expired."""
    container = build_container(get_settings())
    try:
        removed = await container.user_service.purge_expired_tokens()
        print(f"Removed {removed} expired revoked tokens")
    finally:
        await container.dispose()


COMMANDS = {
    "create": create_schema,
    "drop": drop_schema,
    "reset": reset_schema,
    "purge-tokens": purge_tokens,
}


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create         - Create all tables")
        print("  drop           - Drop all tables")
        print("  reset          - Reset database (WARNING: drops all data)")
        print("  purge-tokens   - Remove expired revoked tokens")
        return

    command_name = sys.argv[1]
    command = COMMANDS.get(command_name)
    if command is None:
        print(f"Unknown command: {command_name}")
        return

    asyncio.run(command())


if __name__ == "__main__":
    main()
