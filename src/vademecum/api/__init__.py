"""HTTP API for the Vade Mecum core."""

from .main import app, get_store, get_corpus

__all__ = ["app", "get_store", "get_corpus"]
