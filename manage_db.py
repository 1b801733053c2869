#!/usr/bin/env python3
"""
Database management script for the taskboard backend.
Handles table creation, resets and role administration.
"""

import sys
import asyncio

from taskboard.application.use_cases.user_use_cases import ChangeUserRoleUseCase
from taskboard.config import get_settings
from taskboard.domain.models.base import DomainException
from taskboard.domain.models.user import UserRole
from taskboard.infrastructure.db.database import Database
from taskboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_database() -> Database:
    settings = get_settings()
    return Database(settings.database_url_async)


async def create_tables(database: Database):
    """Create all tables."""
    print("Creating tables...")
    await database.create_all()


async def drop_tables(database: Database):
    """Drop all tables - WARNING: This will drop all data!"""
    print("Dropping tables...")
    await database.drop_all()


async def reset_database(database: Database):
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Resetting database...")
        await database.drop_all()
        await database.create_all()
    else:
        print("Database reset cancelled.")


async def change_role(database: Database, email: str, role: UserRole) -> int:
    """Grant or revoke the admin role for the user with the given email."""
    try:
        async with database.session() as session:
            user = await ChangeUserRoleUseCase(SQLAlchemyUserRepository(session)).execute(email, role)
    except DomainException as e:
        print(f"Error: {e.message}")
        return 1

    print(f"{user.email} is now {user.role}")
    return 0


async def run(command_name: str, args) -> int:
    database = get_database()
    try:
        if command_name == "create":
            await create_tables(database)
        elif command_name == "drop":
            await drop_tables(database)
        elif command_name == "reset":
            await reset_database(database)
        elif command_name in ("promote", "demote"):
            if not args:
                print(f"Usage: python manage_db.py {command_name} <email>")
                return 1
            role = UserRole.ADMIN if command_name == "promote" else UserRole.USER
            return await change_role(database, args[0], role)
        else:
            print(f"Unknown command: {command_name}")
            return 1
    finally:
        await database.dispose()
    return 0


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create          - Create all tables")
        print("  drop            - Drop all tables (WARNING: drops all data)")
        print("  reset           - Drop and recreate tables (WARNING: drops all data)")
        print("  promote <email> - Grant the admin role")
        print("  demote <email>  - Revoke the admin role")
        return 0

    return asyncio.run(run(sys.argv[1], sys.argv[2:]))


if __name__ == "__main__":
    sys.exit(main())
