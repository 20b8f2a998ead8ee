#!/usr/bin/env python3
"""Parse a legal text (HTML) into the JSON corpus directory."""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

load_dotenv()

from vademecum.config import get_settings
from vademecum.corpus.parser import parse_legal_text

logging.basicConfig(level=logging.INFO)


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Parse a Planalto legal text into the corpus")
    parser.add_argument("input_file", help="HTML file downloaded from Planalto")
    parser.add_argument("--key", required=True, help="Document key, e.g. CP")
    parser.add_argument("--title", required=True, help="Display title")
    parser.add_argument(
        "--kind",
        default="code",
        choices=["constitution", "code", "law", "jurisprudence", "oab", "statute"],
    )
    parser.add_argument("--encoding", default="utf-8", help="Planalto pages are often iso-8859-1")
    parser.add_argument("--output-dir", default=str(settings.corpus_dir))
    args = parser.parse_args()

    input_path = Path(args.input_file)
    if not input_path.exists():
        print(f"ERROR: {input_path} not found")
        sys.exit(1)

    document = parse_legal_text(
        input_path,
        args.output_dir,
        key=args.key,
        title=args.title,
        kind=args.kind,
        encoding=args.encoding,
    )

    print(f"\n=== {document.key}: {document.title} ===")
    print(f"Titles:   {len(document.titles)}")
    print(f"Articles: {document.article_count}")
    if document.article_count == 0:
        print("WARNING: no articles found, check the input encoding")
        sys.exit(1)


if __name__ == "__main__":
    main()
