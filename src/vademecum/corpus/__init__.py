"""Legal document hierarchy, sources and article resolution."""

from .models import (
    Article,
    Chapter,
    ArticleTitle,
    ChapterTitle,
    Title,
    LegalDocument,
    DocumentKind,
)
from .patterns import detect_component_type, roman_to_int, ordinal_key
from .builder import DocumentBuilder
from .parser import LegalTextParser, parse_legal_text
from .sources import (
    CorpusSource,
    InMemoryCorpus,
    JsonCorpus,
    build_document_from_entries,
    sort_by_ordem,
)
from .resolver import (
    ArticleResolver,
    resolve,
    filter_articles,
    normalize_query,
    normalize_article_number,
)

__all__ = [
    "Article",
    "Chapter",
    "ArticleTitle",
    "ChapterTitle",
    "Title",
    "LegalDocument",
    "DocumentKind",
    "detect_component_type",
    "roman_to_int",
    "ordinal_key",
    "DocumentBuilder",
    "LegalTextParser",
    "parse_legal_text",
    "CorpusSource",
    "InMemoryCorpus",
    "JsonCorpus",
    "build_document_from_entries",
    "sort_by_ordem",
    "ArticleResolver",
    "resolve",
    "filter_articles",
    "normalize_query",
    "normalize_article_number",
]
