"""Unit tests for text and date helpers."""

import pytest
import sys
from datetime import datetime
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from vademecum.utils import (
    digits_only,
    extract_article_parts,
    fold_text,
    format_date_br,
    normalize_text,
    parse_int,
    parse_timestamp,
)


class TestText:
    """Tests for text helpers."""

    def test_normalize_text_collapses_whitespace(self):
        assert normalize_text("  Art.  5º\n Todos ") == "Art. 5º Todos"

    def test_normalize_text_keeps_ordinal_indicator(self):
        assert normalize_text("5º") == "5º"

    def test_fold_text(self):
        assert fold_text(" Código PENAL ") == "codigo penal"
        assert fold_text(None) == ""

    @pytest.mark.parametrize("value,expected", [
        ("42", 42),
        (" 7 ", 7),
        ("4a", None),
        ("", None),
        (None, None),
    ])
    def test_parse_int(self, value, expected):
        assert parse_int(value) == expected

    def test_digits_only(self):
        assert digits_only("1.230-A") == "1230"
        assert digits_only(None) == ""

    @pytest.mark.parametrize("normativo,label,body", [
        ("Art. 5º Todos são iguais", "Art. 5º", "Todos são iguais"),
        ("Artigo 10 O texto", "Artigo 10", "O texto"),
        ("Art. 1.230. Texto", "Art. 1.230.", "Texto"),
        ("Sem rótulo", "fallback", "Sem rótulo"),
        ("", "fallback", ""),
    ])
    def test_extract_article_parts(self, normativo, label, body):
        assert extract_article_parts(normativo, "fallback") == (label, body)


class TestDates:
    """Tests for timestamp parsing and formatting."""

    def test_iso_timestamp(self):
        parsed = parse_timestamp("2024-03-05T10:20:30Z")
        assert (parsed.year, parsed.month, parsed.day) == (2024, 3, 5)

    def test_day_first_with_slashes(self):
        assert parse_timestamp("05/03/2024") == datetime(2024, 3, 5)

    @pytest.mark.parametrize("value", [None, "", "   ", "ontem"])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None

    def test_format_date_br(self):
        assert format_date_br("2024-03-05T10:20:30Z") == "05/03/2024"

    def test_format_date_br_fallbacks(self):
        assert format_date_br(None) == "-"
        assert format_date_br("") == "-"
        assert format_date_br("ontem") == "ontem"
