#!/usr/bin/env python3
"""Script to import every football-data.org team into the database."""

import asyncio
import sys
import time

from app.core.config import settings
from app.services.importer import TeamImporter, describe_failure


async def main() -> int:
    """Main function."""
    print("🏈 FOOTBALL API DATA IMPORTER")
    print("=" * 60)

    if not settings.FOOTBALL_API_KEY:
        print("❌ FOOTBALL_API_KEY is not configured")
        print("💡 Get a key at: https://www.football-data.org/client/register")
        return 1

    if not settings.DATABASE_URL and not settings.DB_PASSWORD:
        print("❌ DB_PASSWORD is not configured")
        return 1

    print("🔧 Settings:")
    print(f"   📡 API URL: {settings.FOOTBALL_API_URL}")
    print(f"   🗄️  Database: {settings.DB_NAME}@{settings.DB_HOST}:{settings.DB_PORT}")
    print(f"   📦 Batch Size: {settings.BATCH_SIZE}")
    print(f"   ⏱️  Delay: {settings.DELAY_BETWEEN_REQUESTS}ms")
    print("=" * 60)

    start_time = time.monotonic()

    try:
        importer = TeamImporter.from_settings()
        await importer.run()
    except Exception as e:
        print("\n❌ ERROR DURING IMPORT:")
        print(e)
        hint = describe_failure(e)
        if hint:
            print(f"\n💡 TIP: {hint}")
        return 1

    duration = round(time.monotonic() - start_time)
    print("=" * 40)
    print(f"⏱️  Total time: {duration} seconds")
    print("✅ Import completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
