"""Keyed lookup of complete legal documents.

A source returns the whole tree for a document key, or None when the key is
unknown. There is no partial loading.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from pydantic import ValidationError

from ..catalog.models import CatalogEntry
from ..utils.text import extract_article_parts, parse_int
from .builder import DocumentBuilder
from .models import DocumentKind, LegalDocument

logger = logging.getLogger(__name__)

ARTICLE_PREFIX = re.compile(r"^Art(?:igo)?\.?\s*", re.IGNORECASE)


class CorpusSource(Protocol):
    def get(self, key: str) -> Optional[LegalDocument]: ...

    def keys(self) -> List[str]: ...


class InMemoryCorpus:
    """Documents held in a dict, keyed by document key."""

    def __init__(self, documents: Iterable[LegalDocument] = ()):
        self._documents: Dict[str, LegalDocument] = {d.key: d for d in documents}

    def add(self, document: LegalDocument) -> None:
        self._documents[document.key] = document

    def get(self, key: str) -> Optional[LegalDocument]:
        return self._documents.get(key)

    def keys(self) -> List[str]:
        return list(self._documents)


class JsonCorpus:
    """Documents stored as ``<key>.json`` files in a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def get(self, key: str) -> Optional[LegalDocument]:
        # Keys are plain codes; anything path-like is unknown
        if not key or Path(key).name != key:
            return None

        path = self.directory / f"{key}.json"
        if not path.exists():
            return None

        try:
            return LegalDocument.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning(f"Cannot load document {key} from {path}: {e}")
            return None

    def keys(self) -> List[str]:
        if not self.directory.exists():
            return []
        return sorted(p.stem for p in self.directory.glob("*.json"))


def _node_key(*values: str) -> tuple:
    return tuple(v.strip() for v in values)


def sort_by_ordem(entries: Sequence[CatalogEntry]) -> List[CatalogEntry]:
    """Numbered entries first by ``ordem``; the rest keep their relative order."""
    numbered = []
    unnumbered = []
    for entry in entries:
        order = parse_int(entry.ordem)
        if order is None:
            unnumbered.append(entry)
        else:
            numbered.append((order, entry))
    numbered.sort(key=lambda pair: pair[0])
    return [entry for _, entry in numbered] + unnumbered


def build_document_from_entries(
    key: str,
    title: str,
    entries: Sequence[CatalogEntry],
    kind: DocumentKind = "code",
) -> LegalDocument:
    """
    Build a document tree from flat catalog records.

    Consecutive records with the same title fields share a Title, and
    consecutive records with the same chapter fields share a Chapter.
    Records without chapter fields hang directly off their Title.

    Args:
        key: Document key
        title: Display title
        entries: Records of one code, in any order
        kind: Document kind

    Returns:
        The assembled LegalDocument
    """
    builder = DocumentBuilder()
    current_title_key = None
    current_chapter_key = None

    for index, entry in enumerate(sort_by_ordem(entries)):
        title_key = _node_key(entry.idtitulo, entry.titulo, entry.titulotexto)
        if builder.current_title is None or title_key != current_title_key:
            builder.open_title(entry.titulo.strip() or entry.idtitulo.strip(), entry.titulotexto.strip())
            current_title_key = title_key
            current_chapter_key = None

        chapter_key = _node_key(entry.idcapitulo, entry.capitulo, entry.capitulotexto)
        if any(chapter_key) and chapter_key != current_chapter_key:
            builder.open_chapter(
                entry.capitulo.strip() or entry.idcapitulo.strip(),
                entry.capitulotexto.strip(),
            )
            current_chapter_key = chapter_key

        number = entry.num_artigo.strip()
        label, body = extract_article_parts(entry.normativo, number)
        if not number:
            number = ARTICLE_PREFIX.sub("", label)  # "Art. 5º" -> "5º"
        article_id = entry.id.strip() or f"{key}-{index}"
        builder.add_article(number, body, article_id=article_id)

    document = builder.build(key=key, title=title, kind=kind)
    logger.info(f"Built {key} from {len(entries)} records ({len(document.titles)} titles)")
    return document
