"""Catalog entries: response normalization, grouping and filtering."""

from .models import CatalogEntry, CatalogGroup, CatalogSummary, ACTIVE_STATUS, GENERAL_GROUP
from .normalize import extract_items, normalize_record, normalize_collection, ENVELOPE_KEYS
from .index import (
    group_by,
    group_by_book,
    group_by_code,
    sort_groups,
    filter_entries,
    filter_groups,
    summarize,
    section_buckets,
)
from .client import CatalogClient

__all__ = [
    "CatalogEntry",
    "CatalogGroup",
    "CatalogSummary",
    "ACTIVE_STATUS",
    "GENERAL_GROUP",
    "extract_items",
    "normalize_record",
    "normalize_collection",
    "ENVELOPE_KEYS",
    "group_by",
    "group_by_book",
    "group_by_code",
    "sort_groups",
    "filter_entries",
    "filter_groups",
    "summarize",
    "section_buckets",
    "CatalogClient",
]
