"""Batch import of football-data.org teams into the database."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from sqlalchemy.engine import make_url

from app.core.config import settings
from app.core.exceptions import PageRetryLimitError, StorageConnectionError, TeamQueryError
from app.database import Database
from app.services.football_data import FootballDataService
from app.services.pacer import FixedDelayPacer
from app.services.team_repository import TeamRepository
from app.services.team_writer import SUPPORTED_DIALECTS, TeamWriter


class ImportState(str, Enum):
    CONNECTING = "connecting"
    FETCHING_PAGE = "fetching_page"
    PROCESSING_RECORDS = "processing_records"
    DELAY = "delay"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ImportReport:
    """Running counters of an import run."""

    state: ImportState = ImportState.CONNECTING
    processed: int = 0
    skipped: int = 0
    errors: int = 0
    pages: int = 0
    total_teams: int | None = None


class TeamImporter:
    """
    Pages through the football-data.org teams feed and upserts every team.

    Records are handled strictly one after another with a pause between
    them. A failing record is counted and skipped; a failing page is
    counted and retried at the same offset after a longer pause.
    """

    def __init__(
        self,
        database: Database,
        client: FootballDataService,
        writer: TeamWriter,
        pacer: FixedDelayPacer,
        batch_size: int = 50,
        max_page_retries: int | None = None,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self.database = database
        self.client = client
        self.writer = writer
        self.pacer = pacer
        self.batch_size = batch_size
        self.max_page_retries = max_page_retries
        self.report = ImportReport()

    @classmethod
    def from_settings(cls) -> "TeamImporter":
        """Wire an importer from application settings."""
        dialect = make_url(settings.database_url).get_backend_name()
        if dialect not in SUPPORTED_DIALECTS:
            raise ValueError(f"Upsert is not supported on {dialect}")

        database = Database()
        return cls(
            database=database,
            client=FootballDataService(),
            writer=TeamWriter(database),
            pacer=FixedDelayPacer(settings.DELAY_BETWEEN_REQUESTS, settings.PAGE_RETRY_BACKOFF),
            batch_size=settings.BATCH_SIZE,
            max_page_retries=settings.MAX_PAGE_RETRIES,
        )

    async def run(self) -> ImportReport:
        """
        Import every team, then release the database.

        Raises:
            StorageConnectionError: if the database is unreachable (nothing is fetched)
            PageRetryLimitError: if max_page_retries is set and a page keeps failing
        """
        self.report = ImportReport()

        try:
            if not await self.database.test_connection():
                raise StorageConnectionError("Could not connect to the database")

            print("🏈 Starting team import from football-data.org")
            await self._import_pages()
            await self._collect_stats()

            print("=" * 60)
            print("🎉 Import finished!")
            print(f"✅ Teams processed: {self.report.processed}")
            print(f"❌ Errors: {self.report.errors}")
            return self.report
        except Exception as e:
            self.report.state = ImportState.FAILED
            print(f"❌ Error during import: {e}")
            raise
        finally:
            await self.database.close()

    async def _import_pages(self) -> None:
        offset = 0
        failed_attempts = 0

        while True:
            self.report.state = ImportState.FETCHING_PAGE
            print(f"📡 Fetching teams... Offset: {offset}, Limit: {self.batch_size}")

            try:
                teams = await self.client.get_teams(offset, self.batch_size)
            except Exception as e:
                self.report.errors += 1
                failed_attempts += 1
                print(f"❌ Error fetching page at offset {offset}: {e}")

                if self.max_page_retries is not None and failed_attempts > self.max_page_retries:
                    raise PageRetryLimitError(offset, failed_attempts) from e

                self.report.state = ImportState.DELAY
                await self.pacer.backoff()
                continue

            failed_attempts = 0
            self.report.pages += 1
            if not teams:
                break

            for team in teams:
                await self._process_team(team)

            offset += self.batch_size
            if len(teams) < self.batch_size:
                break

        self.report.state = ImportState.DONE

    async def _process_team(self, team: dict[str, Any] | None) -> None:
        self.report.state = ImportState.PROCESSING_RECORDS
        name = (team or {}).get("name", "<unnamed>")

        try:
            saved = await self.writer.upsert(team)
            self.report.processed += 1
            if saved:
                print(f"✅ Team {name} saved")
            else:
                self.report.skipped += 1
                print("⚠️  Skipped team without id")
        except Exception as e:
            self.report.errors += 1
            print(f"❌ Error processing team {name}: {e}")

        self.report.state = ImportState.DELAY
        await self.pacer.pause()

    async def _collect_stats(self) -> None:
        try:
            self.report.total_teams = await TeamRepository(self.database).count_teams()
            print(f"🏟️  Teams stored: {self.report.total_teams}")
        except TeamQueryError as e:
            print(f"❌ Error fetching final statistics: {e}")


def describe_failure(exc: BaseException) -> str | None:
    """Actionable hint for a failed import, looking through chained causes."""
    current: BaseException | None = exc
    while current is not None:
        if isinstance(current, httpx.HTTPStatusError):
            status = current.response.status_code
            if status == 403:
                return "Check that your FOOTBALL_API_KEY is correct and active"
            if status == 429:
                return "Rate limit exceeded. Try again in a few minutes"
        if isinstance(current, (StorageConnectionError, ConnectionRefusedError)):
            return "Check that PostgreSQL is running and the database settings are correct"
        if isinstance(current, httpx.ConnectError):
            return "Check your network connection and FOOTBALL_API_URL"
        current = current.__cause__
    return None
