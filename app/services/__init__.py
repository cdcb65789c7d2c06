"""Services package."""

from app.services.football_data import FootballDataService
from app.services.importer import TeamImporter
from app.services.team_repository import TeamRepository
from app.services.team_writer import TeamWriter

__all__ = ["FootballDataService", "TeamImporter", "TeamRepository", "TeamWriter"]
