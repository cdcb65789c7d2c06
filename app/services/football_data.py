"""football-data.org service for fetching team data."""

import httpx
from typing import Any

from app.core.config import settings


class FootballDataService:
    """Service to interact with the football-data.org v4 API."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize football-data.org service."""
        self.base_url = (base_url or settings.FOOTBALL_API_URL).rstrip("/")
        self.headers = {
            "X-Auth-Token": api_key if api_key is not None else settings.FOOTBALL_API_KEY,
        }
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, headers=self.headers, transport=self.transport)

    async def get_teams(self, offset: int = 0, limit: int = 100) -> list[dict[str, Any]]:
        """
        Get one page of teams.

        Args:
            offset: Number of teams to skip
            limit: Page size

        Returns:
            List of teams (shorter than limit, or empty, on the last page)
        """
        url = f"{self.base_url}/teams"
        params = {"offset": offset, "limit": limit}

        async with self._client() as client:
            try:
                response = await client.get(url, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                print(f"❌ HTTP Error {e.response.status_code}: {e.response.text}")
                raise
            data = response.json()
            return data.get("teams") or []

    async def get_team(self, team_id: int) -> dict[str, Any] | None:
        """
        Get a specific team by ID.

        Returns:
            Team data or None when the API does not know it
        """
        url = f"{self.base_url}/teams/{team_id}"

        async with self._client() as client:
            response = await client.get(url)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()

    @staticmethod
    def parse_team(team_data: dict[str, Any]) -> dict[str, Any]:
        """
        Parse team data from API response into table columns.

        Args:
            team_data: Raw team data from API

        Returns:
            Parsed team data
        """
        return {
            "id": team_data.get("id"),
            "name": team_data.get("name"),
            "short_name": team_data.get("shortName"),
            "tla": team_data.get("tla"),
            "crest": team_data.get("crest"),
            "address": team_data.get("address"),
            "website": team_data.get("website"),
            "founded": team_data.get("founded"),
            "club_colors": team_data.get("clubColors"),
            "venue": team_data.get("venue"),
        }
