"""Shared fixtures: a temporary SQLite database seeded with Premier League teams."""

import asyncio
from typing import Any

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from app.core.exceptions import StorageError
from app.database import Database, init_db
from app.models import teams_table

TEAMS: list[dict[str, Any]] = [
    {
        "id": 57,
        "name": "Arsenal FC",
        "short_name": "Arsenal",
        "tla": "ARS",
        "crest": "https://crests.football-data.org/57.png",
        "venue": "Emirates Stadium",
        "founded": 1886,
        "address": "75 Drayton Park London N5 1BU",
        "website": "http://www.arsenal.com",
        "club_colors": "Red / White",
    },
    {
        "id": 61,
        "name": "Chelsea FC",
        "short_name": "Chelsea",
        "tla": "CHE",
        "crest": "https://crests.football-data.org/61.png",
        "venue": "Stamford Bridge",
        "founded": 1905,
        "address": "Fulham Road London SW6 1HS",
        "website": "http://www.chelseafc.com",
        "club_colors": "Royal Blue / White",
    },
    {
        "id": 65,
        "name": "Manchester City FC",
        "short_name": "Man City",
        "tla": "MCI",
        "crest": "https://crests.football-data.org/65.png",
        "venue": "Etihad Stadium",
        "founded": 1880,
        "address": "SportCity Manchester M11 3FF",
        "website": "https://www.mancity.com",
        "club_colors": "Sky Blue / White",
    },
    {
        "id": 66,
        "name": "Manchester United FC",
        "short_name": "Man United",
        "tla": "MUN",
        "crest": "https://crests.football-data.org/66.png",
        "venue": "Old Trafford",
        "founded": 1878,
        "address": "Sir Matt Busby Way Manchester M16 0RA",
        "website": "http://www.manutd.com",
        "club_colors": "Red / White",
    },
    {
        "id": 73,
        "name": "Tottenham Hotspur FC",
        "short_name": "Tottenham",
        "tla": "TOT",
        "crest": "https://crests.football-data.org/73.png",
        "venue": None,
        "founded": 1882,
        "address": "Lilywhite House London N17 0AP",
        "website": "http://www.tottenhamhotspur.com",
        "club_colors": "Navy Blue / White",
    },
    {
        "id": 76,
        "name": "Wolverhampton Wanderers FC",
        "short_name": "Wolverhampton",
        "tla": "WOL",
        "crest": "https://crests.football-data.org/76.png",
        "venue": "",
        "founded": None,
        "address": None,
        "website": None,
        "club_colors": "Gold / Black",
    },
]


def make_database(path: str) -> Database:
    # NullPool: tests drive the engine from several event loops
    url = f"sqlite+aiosqlite:///{path}"
    return Database(url, engine=create_async_engine(url, poolclass=NullPool))


@pytest.fixture
def empty_database(tmp_path) -> Database:
    """Database with an empty teams table."""
    database = make_database(str(tmp_path / "teams.db"))
    asyncio.run(init_db(database))
    yield database
    asyncio.run(database.engine.dispose())


@pytest.fixture
def database(empty_database: Database) -> Database:
    """Database seeded with TEAMS."""
    asyncio.run(empty_database.execute(insert(teams_table).values(TEAMS)))
    return empty_database


class FailingDatabase:
    """Stands in for a database whose queries always fail."""

    def __init__(self, message: str = "connection reset by peer") -> None:
        self.message = message

    async def query(self, statement: Any) -> list[Any]:
        raise StorageError(f"Database query failed: {self.message}")

    async def test_connection(self) -> bool:
        return False
