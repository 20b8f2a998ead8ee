"""Exception hierarchy for the Vade Mecum core."""

from typing import Optional


class VadeMecumError(Exception):
    """Base class for all errors raised by this package."""


class StorageError(VadeMecumError):
    """The key-value persistence layer could not be read or written."""


class CatalogFetchError(VadeMecumError):
    """The catalog API request failed or returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AmbiguousArticleError(VadeMecumError):
    """More than one article matched a query in strict resolution mode."""

    def __init__(self, number: int, article_ids: list[str]):
        super().__init__(
            f"Article number {number} matches {len(article_ids)} articles: "
            f"{', '.join(article_ids)}"
        )
        self.number = number
        self.article_ids = article_ids
