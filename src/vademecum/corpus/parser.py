"""Hierarchical parser for Brazilian legal texts published as HTML."""

from typing import Iterable, List, Optional
from pathlib import Path
from bs4 import BeautifulSoup
import logging

from .builder import DocumentBuilder
from .models import DocumentKind, LegalDocument
from .patterns import detect_component_type
from ..utils.text import normalize_text

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class LegalTextParser:
    """Parser for Planalto-style legal documents (codes, constitution, laws).

    Titles, chapters and articles open new nodes; paragraphs (§) and items
    (incisos) attach to the open article; sections are flattened into their
    chapter. Plain text either names the structural header right above it or
    continues the last component.
    """

    def __init__(self):
        self._reset()

    def _reset(self):
        self.builder = DocumentBuilder()
        self._pending_name = None  # Title/chapter draft waiting for its name
        self._skip_next_plain = False  # Section names are dropped
        self._last_kind: Optional[str] = None
        self.stats = {
            "titles": 0,
            "chapters": 0,
            "sections": 0,
            "articles": 0,
            "paragraphs": 0,
            "items": 0,
            "skipped": 0,
        }

    def parse_file(
        self,
        filepath: str | Path,
        key: str,
        title: str,
        kind: DocumentKind = "code",
        encoding: str = "utf-8",
    ) -> LegalDocument:
        """Parse a legal text HTML file."""
        filepath = Path(filepath)
        logger.info(f"Parsing: {filepath}")
        content = filepath.read_text(encoding=encoding)
        return self.parse_html(content, key=key, title=title, kind=kind)

    def parse_html(
        self,
        html: str,
        key: str,
        title: str,
        kind: DocumentKind = "code",
    ) -> LegalDocument:
        """Parse HTML markup into a LegalDocument."""
        soup = BeautifulSoup(html, 'lxml')
        blocks = self._extract_paragraphs(soup)
        logger.info(f"Found {len(blocks)} text blocks")
        return self.parse_blocks(blocks, key=key, title=title, kind=kind)

    def parse_blocks(
        self,
        blocks: Iterable[str],
        key: str,
        title: str,
        kind: DocumentKind = "code",
    ) -> LegalDocument:
        """Parse already extracted text blocks, one component per block."""
        self._reset()
        for text in blocks:
            text = normalize_text(text)
            if text:
                self._parse_text_block(text)

        document = self.builder.build(key=key, title=title, kind=kind)
        logger.info(f"Parsing complete: {self.stats}")
        return document

    def _extract_paragraphs(self, soup: BeautifulSoup) -> List[str]:
        """Extract text paragraphs from HTML."""
        results = []

        for p in soup.find_all('p'):
            # Get text content
            text = p.get_text(separator=' ', strip=True)
            if not text or len(text) < 2:
                continue
            results.append(text)

        return results

    def _parse_text_block(self, text: str) -> None:
        """Parse a single text block into the document being built."""
        detection = detect_component_type(text)

        if not detection:
            self._continue(text)
            return

        comp_type, number, remaining = detection

        # Update stats
        stat_key = comp_type + "s"
        if stat_key in self.stats:
            self.stats[stat_key] += 1

        self._pending_name = None
        self._skip_next_plain = False

        if comp_type == "title":
            draft = self.builder.open_title(number, remaining)
            self._pending_name = None if remaining else draft
        elif comp_type == "chapter":
            draft = self.builder.open_chapter(number, remaining)
            self._pending_name = None if remaining else draft
        elif comp_type == "section":
            self._skip_next_plain = not remaining
        elif comp_type == "article":
            self.builder.add_article(number, remaining)
        elif self.builder.current_article is None:
            # Paragraph or item outside any article
            self.stats["skipped"] += 1
            logger.debug(f"Dropping orphan {comp_type}: {text[:40]}")
            return
        elif comp_type == "paragraph":
            self.builder.current_article.paragraphs.append(text)
        elif comp_type == "item":
            self.builder.current_article.items.append(text)

        self._last_kind = comp_type

    def _continue(self, text: str) -> None:
        """Attach plain text to whatever is open."""
        if self._pending_name is not None:
            self._pending_name.name = text
            self._pending_name = None
            return

        if self._skip_next_plain:
            self._skip_next_plain = False
            return

        article = self.builder.current_article
        if article is None:
            self.stats["skipped"] += 1
            return

        if self._last_kind == "paragraph" and article.paragraphs:
            article.paragraphs[-1] = f"{article.paragraphs[-1]} {text}"
        elif self._last_kind == "item" and article.items:
            article.items[-1] = f"{article.items[-1]} {text}"
        else:
            article.text = f"{article.text} {text}".strip()


def parse_legal_text(
    input_file: str | Path,
    output_dir: str | Path,
    key: str,
    title: str,
    kind: DocumentKind = "code",
    encoding: str = "utf-8",
) -> LegalDocument:
    """Parse a legal text and save it to the JSON corpus directory."""
    parser = LegalTextParser()
    document = parser.parse_file(input_file, key=key, title=title, kind=kind, encoding=encoding)

    output_path = Path(output_dir) / f"{key}.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")

    logger.info(f"Saved {key} ({document.article_count} articles) to {output_path}")
    return document
