"""Article lookup by a free-form numeric reference.

Printed article numbers carry decorations ("3º", "1.230", "121-A") that do not
matter for equality, so both the query and each article number are reduced to
a bare integer before comparing:

- query: every "." is removed, then the rest must be a base-10 integer
- article: every non-digit is removed, then the digits are parsed

Numbers may repeat inside a document; the first article in traversal order
wins.
"""

import logging
from typing import Iterable, List, Optional

from ..errors import AmbiguousArticleError
from ..utils.text import digits_only, parse_int
from .models import Article, LegalDocument

logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> Optional[int]:
    """Turn a user query into an article number ("1.230" -> 1230)."""
    if query is None:
        return None
    return parse_int(query.replace(".", ""))


def normalize_article_number(number: Optional[str]) -> Optional[int]:
    """Turn a printed article number into an integer ("3º" -> 3)."""
    digits = digits_only(number)
    return int(digits) if digits else None


class ArticleResolver:
    """
    Locates articles inside a LegalDocument.

    Args:
        strict: When True, a number matching more than one article raises
            AmbiguousArticleError instead of returning the first match
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def resolve_article(self, query: str, document: LegalDocument) -> Optional[Article]:
        """Find the article a query refers to.

        Returns:
            The matching Article, or None when the query is not numeric or
            nothing matches
        """
        number = normalize_query(query)
        if number is None:
            return None

        if self.strict:
            return self._resolve_unique(number, document)

        for article in document.iter_articles():
            if normalize_article_number(article.number) == number:
                return article
        return None

    def resolve(self, query: str, document: LegalDocument) -> Optional[str]:
        """Find the identifier of the article a query refers to."""
        article = self.resolve_article(query, document)
        if article is None:
            logger.debug(f"No article for query {query!r} in {document.key}")
            return None
        return article.article_id

    def _resolve_unique(self, number: int, document: LegalDocument) -> Optional[Article]:
        matches = [
            article for article in document.iter_articles()
            if normalize_article_number(article.number) == number
        ]
        if len(matches) > 1:
            raise AmbiguousArticleError(number, [a.article_id for a in matches])
        return matches[0] if matches else None


def resolve(query: str, document: LegalDocument) -> Optional[str]:
    """Resolve a query with the default first-match resolver."""
    return ArticleResolver().resolve(query, document)


def filter_articles(query: Optional[str], articles: Iterable[Article]) -> List[Article]:
    """Live filter for a navigation panel.

    Args:
        query: Substring to look for in article numbers (case-insensitive)
        articles: Articles to filter

    Returns:
        Articles whose number contains the query; all of them for an empty query
    """
    term = (query or "").strip().lower()
    if not term:
        return list(articles)
    return [a for a in articles if term in a.number.lower()]
