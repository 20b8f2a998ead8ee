#!/usr/bin/env python3
"""Fetch the Vade Mecum catalog and print its groups."""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

load_dotenv()

from vademecum.catalog import (
    CatalogClient,
    filter_entries,
    group_by_book,
    sort_groups,
    summarize,
)
from vademecum.errors import CatalogFetchError
from vademecum.utils.dates import format_date_br

logging.basicConfig(level=logging.INFO)


def main():
    parser = argparse.ArgumentParser(description="Fetch and summarize the catalog")
    parser.add_argument("--code", default=None, help="Only entries of this code (nomecodigo)")
    parser.add_argument("--status", default="all", choices=["all", "active", "inactive"])
    parser.add_argument("--search", default="", help="Substring to look for")
    args = parser.parse_args()

    client = CatalogClient()
    try:
        entries = client.fetch_entries(nomecodigo=args.code)
    except CatalogFetchError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    entries = filter_entries(entries, status=args.status, search_term=args.search)
    summary = summarize(entries)

    print("\n=== Vade Mecum Catalog ===")
    print(f"Total de registros: {summary.total_records}")
    print(f"Codigos distintos:  {summary.distinct_codes}")
    print(f"Secoes distintas:   {summary.distinct_sections}")

    print("\n--- Livros ---")
    for group in sort_groups(group_by_book(entries).values()):
        print(f"{group.label:40} {group.count:6} registros  (atualizado {format_date_br(group.updated_at)})")


if __name__ == "__main__":
    main()
