"""Database models package."""

from app.models.team import Team, teams_table

__all__ = ["Team", "teams_table"]
