"""Tests for field and color translation."""

import pytest

from app.services.translator import (
    COLOR_MAPPINGS,
    TEAM_FIELDS,
    to_display_name,
    to_display_record,
    to_internal_column,
    translate_color_to_display,
    translate_color_value_to_internal,
    translate_colors_to_display,
)


def test_field_names_translate_both_ways() -> None:
    """Every known field maps to its column and back."""
    for field in TEAM_FIELDS:
        assert to_internal_column(field.display) == field.column
        assert to_display_name(field.column) == field.display


def test_unknown_field_names_are_not_recognized() -> None:
    assert to_internal_column("name") is None
    assert to_internal_column("senha") is None
    assert to_display_name("updated_at") is None


@pytest.mark.parametrize(
    ("colors", "expected"),
    [
        ("Red / White", "vermelho / branco"),
        ("Red/White", "vermelho / branco"),
        ("Blue, Claret", "azul / Claret"),
        ("  GOLD /black ", "dourado / preto"),
        ("Navy / Sky Blue", "azul marinho / Sky Blue"),
        ("Gray", "cinza"),
    ],
)
def test_translate_colors_to_display(colors: str, expected: str) -> None:
    assert translate_colors_to_display(colors) == expected


def test_translate_colors_keeps_empty_values() -> None:
    assert translate_colors_to_display(None) is None
    assert translate_colors_to_display("") == ""


def test_color_round_trip_for_every_mapped_color() -> None:
    """English -> Portuguese -> English gives back the canonical color."""
    for english in COLOR_MAPPINGS:
        portuguese = translate_colors_to_display(english)
        assert translate_color_value_to_internal(portuguese) == english


def test_reverse_lookup_normalizes_case_and_whitespace() -> None:
    assert translate_color_value_to_internal("  Vermelho ") == "red"
    assert translate_color_value_to_internal("AZUL MARINHO") == "navy"
    assert translate_color_value_to_internal("cinza") == "grey"


def test_unmapped_color_passes_through_both_ways() -> None:
    assert translate_colors_to_display("Claret") == "Claret"
    assert translate_color_value_to_internal(" Claret ") == "Claret"
    assert translate_color_value_to_internal("grená") == "grená"


def test_to_display_record() -> None:
    row = {
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
        "updated_at": "2024-01-01 00:00:00",
    }

    assert to_display_record(row) == {
        "id": 57,
        "nome": "Arsenal FC",
        "nome_curto": "Arsenal",
        "sigla": "ARS",
        "escudo": "https://crests.football-data.org/57.png",
        "estadio": "Emirates Stadium",
        "cores_clube": "vermelho / branco",
        "fundado": 1886,
        "endereco": "75 Drayton Park London N5 1BU",
        "site": "http://www.arsenal.com",
    }


def test_to_display_record_without_row() -> None:
    assert to_display_record(None) is None


def test_translate_single_color() -> None:
    assert translate_color_to_display("  Red ") == "vermelho"
    assert translate_color_to_display("Gray") == "cinza"
    assert translate_color_to_display(" Claret ") == "Claret"
