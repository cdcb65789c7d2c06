"""Idempotent insert-or-update of external team records."""

from typing import Any

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite

from app.database import Database
from app.models import teams_table
from app.services.football_data import FootballDataService

UPSERT_COLUMNS = (
    "name",
    "short_name",
    "tla",
    "crest",
    "address",
    "website",
    "founded",
    "club_colors",
    "venue",
)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}
SUPPORTED_DIALECTS = frozenset(_DIALECT_INSERTS)


class TeamWriter:
    """Writes football-data.org teams into the teams table."""

    def __init__(self, database: Database) -> None:
        self.database = database
        dialect = database.engine.dialect.name
        if dialect not in SUPPORTED_DIALECTS:
            raise ValueError(f"Upsert is not supported on {dialect}")
        self._insert = _DIALECT_INSERTS[dialect]

    def build_upsert(self, team: dict[str, Any]) -> Any:
        """Build the INSERT ... ON CONFLICT (id) DO UPDATE statement for a parsed team."""
        values = {"id": team["id"], **{column: team.get(column) for column in UPSERT_COLUMNS}}
        statement = self._insert(teams_table).values(**values, updated_at=func.current_timestamp())
        return statement.on_conflict_do_update(
            index_elements=[teams_table.c.id],
            set_={
                **{column: statement.excluded[column] for column in UPSERT_COLUMNS},
                "updated_at": func.current_timestamp(),
            },
        )

    async def upsert(self, team_data: dict[str, Any] | None) -> bool:
        """
        Insert or update one team by its external id.

        Args:
            team_data: Raw team as returned by football-data.org

        Returns:
            False when the record has no id and was skipped, True otherwise
        """
        if not team_data or team_data.get("id") is None:
            return False

        team = FootballDataService.parse_team(team_data)
        await self.database.execute(self.build_upsert(team))
        return True
