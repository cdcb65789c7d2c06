"""Field and color translation between storage (English) and API (Portuguese)."""

import re
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class TeamField:
    """A recognized team field: API name, stored column and how to filter it."""

    display: str
    column: str
    is_integer: bool = False


TEAM_FIELDS: tuple[TeamField, ...] = (
    TeamField("id", "id", is_integer=True),
    TeamField("nome", "name"),
    TeamField("nome_curto", "short_name"),
    TeamField("sigla", "tla"),
    TeamField("escudo", "crest"),
    TeamField("estadio", "venue"),
    TeamField("cores_clube", "club_colors"),
    TeamField("fundado", "founded", is_integer=True),
    TeamField("endereco", "address"),
    TeamField("site", "website"),
)

FIELDS_BY_DISPLAY: dict[str, TeamField] = {field.display: field for field in TEAM_FIELDS}
FIELDS_BY_COLUMN: dict[str, TeamField] = {field.column: field for field in TEAM_FIELDS}

COLORS_FIELD = "cores_clube"

COLOR_MAPPINGS: dict[str, str] = {
    "white": "branco",
    "black": "preto",
    "red": "vermelho",
    "blue": "azul",
    "yellow": "amarelo",
    "green": "verde",
    "orange": "laranja",
    "purple": "roxo",
    "pink": "rosa",
    "brown": "marrom",
    "grey": "cinza",
    "gold": "dourado",
    "silver": "prata",
    "navy": "azul marinho",
}

# Spellings that display the same but never come back from a reverse lookup
COLOR_ALIASES: dict[str, str] = {
    "gray": "cinza",
}

REVERSE_COLOR_MAPPINGS: dict[str, str] = {pt: en for en, pt in COLOR_MAPPINGS.items()}

_COLOR_SEPARATOR = re.compile(r"\s*[/,]\s*")


def get_field(display_name: str) -> TeamField | None:
    """Get the field definition for an API field name."""
    return FIELDS_BY_DISPLAY.get(display_name)


def to_display_name(internal_field: str) -> str | None:
    """Translate a stored column name to its API name."""
    field = FIELDS_BY_COLUMN.get(internal_field)
    return field.display if field else None


def to_internal_column(display_field: str) -> str | None:
    """Translate an API field name to its stored column name."""
    field = FIELDS_BY_DISPLAY.get(display_field)
    return field.column if field else None


def translate_color_to_display(color: str) -> str:
    """Translate one English color to Portuguese, keeping unknown colors as given."""
    clean_color = color.strip().lower()
    return COLOR_MAPPINGS.get(clean_color) or COLOR_ALIASES.get(clean_color) or color.strip()


def translate_colors_to_display(colors: str | None) -> str | None:
    """
    Translate a stored club colors string into Portuguese.

    "Red / White" -> "vermelho / branco", "Blue, Claret" -> "azul / Claret".
    """
    if not colors:
        return colors
    return " / ".join(translate_color_to_display(color) for color in _COLOR_SEPARATOR.split(colors))


def translate_color_value_to_internal(color: str) -> str:
    """Translate a single Portuguese color (as typed in a filter) back to English."""
    clean_color = color.strip().lower()
    return REVERSE_COLOR_MAPPINGS.get(clean_color, color.strip())


def to_display_record(row: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Map a stored team row to the API representation."""
    if row is None:
        return None

    record = {field.display: row.get(field.column) for field in TEAM_FIELDS}
    record[COLORS_FIELD] = translate_colors_to_display(record[COLORS_FIELD])
    return record
