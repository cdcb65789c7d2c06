"""Teams routes - paginated listing and lookup by id."""

from fastapi import APIRouter, Depends, Query, Request

from app.api.deps import get_database
from app.core.exceptions import NotFoundError
from app.database import Database
from app.schemas.team import ErrorResponse, TeamOut, TeamPage
from app.services.query_builder import DEFAULT_LIMIT, DEFAULT_PAGE, DEFAULT_SORT, DEFAULT_ORDER, PageOptions
from app.services.team_repository import TeamRepository

router = APIRouter()

RESERVED_PARAMS = {"page", "limit", "sort", "order"}


def _parse_int(value: str | None, default: int) -> int:
    """Parse a query string integer, falling back to the default when absent or malformed."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


@router.get(
    "",
    response_model=TeamPage,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_teams(
    request: Request,
    page: str | None = Query(None, description="Page number"),
    limit: str | None = Query(None, description="Items per page"),
    sort: str | None = Query(None, description="Field to sort by, e.g. nome, fundado"),
    order: str | None = Query(None, description="Sort order: asc or desc"),
    database: Database = Depends(get_database),
) -> dict:
    """
    Get all teams with pagination, sorting and filtering.

    Any other query parameter named after a team field (nome, sigla,
    cores_clube, fundado...) filters the listing.
    """
    filters = {
        key: value for key, value in request.query_params.items() if key not in RESERVED_PARAMS
    }
    options = PageOptions(
        page=_parse_int(page, DEFAULT_PAGE),
        limit=_parse_int(limit, DEFAULT_LIMIT),
        sort=sort or DEFAULT_SORT,
        order=order or DEFAULT_ORDER,
        filters=filters,
    )
    return await TeamRepository(database).list_teams(options)


@router.get(
    "/{team_id}",
    response_model=TeamOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_team(team_id: str, database: Database = Depends(get_database)) -> dict:
    """Get a specific team by ID."""
    team = await TeamRepository(database).get_team_by_id(team_id)
    if team is None:
        raise NotFoundError("Team not found")
    return team
