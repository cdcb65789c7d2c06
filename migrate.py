#!/usr/bin/env python3
"""Script to create the teams table from the SQL migration."""

import asyncio
import sys
from pathlib import Path

from sqlalchemy import text

from app.core.exceptions import StorageError
from app.database import Database

MIGRATION_PATH = Path(__file__).parent / "migrations" / "001_create_teams.sql"


def split_statements(script: str) -> list[str]:
    """Split a SQL script into statements, dropping comment lines."""
    lines = [line for line in script.splitlines() if not line.strip().startswith("--")]
    return [statement.strip() for statement in "\n".join(lines).split(";") if statement.strip()]


async def main() -> int:
    """Main function."""
    print("🔄 Starting database migration")
    print("=" * 60)

    database = Database()

    try:
        if not await database.test_connection():
            print("\n💡 TIP: Check that PostgreSQL is running and the database settings are correct")
            return 1

        print("📝 Running migration...")
        for statement in split_statements(MIGRATION_PATH.read_text(encoding="utf-8")):
            await database.execute(text(statement))

        print("✅ Migration completed successfully!")
        return 0
    except StorageError as e:
        print("\n❌ ERROR DURING MIGRATION:")
        print(e)
        return 1
    finally:
        await database.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
