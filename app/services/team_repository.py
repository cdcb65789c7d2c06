"""Read access to stored teams, shaped for the API."""

import asyncio
from typing import Any

from sqlalchemy import func, select

from app.core.exceptions import MissingIdentifierError, StorageError, TeamQueryError, ValidationError
from app.database import Database
from app.models import teams_table
from app.services.query_builder import MAX_INTEGER, PageOptions, build_envelope, build_team_query
from app.services.translator import to_display_record


class TeamRepository:
    """Runs team queries against the database and maps the results."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def list_teams(self, options: PageOptions) -> dict[str, Any]:
        """
        List teams with filtering, sorting and pagination.

        Args:
            options: Page, limit, sort, order and filters

        Returns:
            Envelope with "dados" and "paginacao"
        """
        query = build_team_query(options)

        try:
            rows, count_rows = await asyncio.gather(
                self.database.query(query.statement),
                self.database.query(query.count_statement),
            )
        except StorageError as e:
            raise TeamQueryError(f"Error fetching teams: {e.message}", details=e.message) from e

        total = int(count_rows[0]["total"])
        return build_envelope([to_display_record(row) for row in rows], total, options)

    async def get_team_by_id(self, team_id: Any) -> dict[str, Any] | None:
        """
        Get a single team.

        Returns:
            The team, or None when no row matches
        """
        if team_id is None or not str(team_id).strip():
            raise MissingIdentifierError()

        try:
            parsed_id = int(str(team_id).strip())
        except ValueError:
            raise ValidationError("Team ID must be an integer") from None

        if not 1 <= parsed_id <= MAX_INTEGER:
            return None

        statement = select(teams_table).where(teams_table.c.id == parsed_id)
        try:
            rows = await self.database.query(statement)
        except StorageError as e:
            raise TeamQueryError(f"Error fetching team: {e.message}", details=e.message) from e

        return to_display_record(rows[0]) if rows else None

    async def count_teams(self) -> int:
        """Count every stored team."""
        statement = select(func.count().label("total")).select_from(teams_table)
        try:
            rows = await self.database.query(statement)
        except StorageError as e:
            raise TeamQueryError(f"Error counting teams: {e.message}", details=e.message) from e
        return int(rows[0]["total"])
