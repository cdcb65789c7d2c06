"""Filtered, sorted and paginated queries over the teams table."""

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from sqlalchemy import ColumnElement, Select, String, and_, case, cast, func, or_, select

from app.core.exceptions import ValidationError
from app.models import teams_table
from app.services.translator import (
    COLORS_FIELD,
    FIELDS_BY_COLUMN,
    get_field,
    translate_color_value_to_internal,
)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT = "nome"
DEFAULT_ORDER = "asc"
FALLBACK_SORT_COLUMN = "name"
# Largest value an INTEGER column or bound parameter holds
MAX_INTEGER = 2**31 - 1

INVALID_PAGINATION_MESSAGE = "Invalid pagination parameters. Page and limit must be positive numbers."


@dataclass
class PageOptions:
    """Listing parameters as received from the API (Portuguese field names)."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort: str = DEFAULT_SORT
    order: str = DEFAULT_ORDER
    filters: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not (1 <= self.page <= MAX_INTEGER and 1 <= self.limit <= MAX_INTEGER):
            raise ValidationError(INVALID_PAGINATION_MESSAGE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class SortSpec:
    column: str
    descending: bool


@dataclass(frozen=True)
class TeamQuery:
    statement: Select
    count_statement: Select
    options: PageOptions


def resolve_sort(sort: str | None, order: str | None) -> SortSpec:
    """Resolve an API sort key and direction, falling back to name ascending."""
    sort_field = get_field(sort) if sort else None
    column = sort_field.column if sort_field else FALLBACK_SORT_COLUMN
    descending = (order or "").upper() == "DESC"
    return SortSpec(column=column, descending=descending)


def build_filter_conditions(filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """
    Build WHERE predicates from API filters, in insertion order.

    Unknown keys and non-string values are ignored. Digit-only values on
    integer fields compare by equality when they fit the column, everything
    else is a case-insensitive contains match.
    """
    conditions: list[ColumnElement[bool]] = []

    for key, value in filters.items():
        team_field = get_field(key)
        if team_field is None or not isinstance(value, str):
            continue

        if key == COLORS_FIELD:
            value = translate_color_value_to_internal(value)

        column = teams_table.c[team_field.column]
        if team_field.is_integer and value.isascii() and value.isdigit() and int(value) <= MAX_INTEGER:
            conditions.append(column == int(value))
        elif team_field.is_integer:
            conditions.append(cast(column, String).ilike(f"%{value}%"))
        else:
            conditions.append(column.ilike(f"%{value}%"))

    return conditions


def _empty_last(column_name: str) -> ColumnElement[int]:
    column = teams_table.c[column_name]
    if FIELDS_BY_COLUMN[column_name].is_integer:
        is_empty = column.is_(None)
    else:
        is_empty = or_(column.is_(None), column == "")
    return case((is_empty, 1), else_=0)


def build_team_query(options: PageOptions) -> TeamQuery:
    """Build the page query and its matching count query."""
    conditions = build_filter_conditions(options.filters)
    sort = resolve_sort(options.sort, options.order)
    sort_column = teams_table.c[sort.column]

    statement = select(teams_table)
    count_statement = select(func.count().label("total")).select_from(teams_table)
    if conditions:
        where_clause = and_(*conditions)
        statement = statement.where(where_clause)
        count_statement = count_statement.where(where_clause)

    statement = (
        statement
        .order_by(_empty_last(sort.column), sort_column.desc() if sort.descending else sort_column.asc())
        .limit(options.limit)
        .offset(options.offset)
    )

    return TeamQuery(statement=statement, count_statement=count_statement, options=options)


def build_pagination(total: int, options: PageOptions) -> dict[str, Any]:
    """Paging metadata for a listing."""
    total_pages = math.ceil(total / options.limit)
    return {
        "total": total,
        "totalPaginas": total_pages,
        "paginaAtual": options.page,
        "limite": options.limit,
        "temProximaPagina": options.page < total_pages,
        "temPaginaAnterior": options.page > 1,
    }


def build_envelope(records: list[dict[str, Any]], total: int, options: PageOptions) -> dict[str, Any]:
    return {
        "dados": records,
        "paginacao": build_pagination(total, options),
    }
