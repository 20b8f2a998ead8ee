"""Shared text and date helpers."""

from .text import (
    normalize_text,
    strip_accents,
    fold_text,
    parse_int,
    digits_only,
    extract_article_parts,
)
from .dates import parse_timestamp, format_date_br

__all__ = [
    "normalize_text",
    "strip_accents",
    "fold_text",
    "parse_int",
    "digits_only",
    "extract_article_parts",
    "parse_timestamp",
    "format_date_br",
]
