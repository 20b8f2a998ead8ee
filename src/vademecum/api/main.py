"""FastAPI surface over the priority store and the legal corpus."""

import logging
from typing import Any, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from ..config import get_settings
from ..corpus.models import Article, LegalDocument
from ..corpus.resolver import ArticleResolver
from ..corpus.sources import CorpusSource, JsonCorpus
from ..priority.defaults import DEFAULT_VADE_PRIORITY
from ..priority.storage import JsonFileStorage
from ..priority.store import PriorityStore

logger = logging.getLogger(__name__)

app = FastAPI(title="Vade Mecum Core", version="0.1.0")


class PriorityUpdate(BaseModel):
    # Anything goes: the store reconciles it
    order: List[Any]


class PriorityResponse(BaseModel):
    order: List[str]


class ResolveResponse(BaseModel):
    document: str
    query: str
    article_id: Optional[str] = None
    article: Optional[Article] = None


_store: PriorityStore | None = None
_corpus: CorpusSource | None = None


def get_store() -> PriorityStore:
    global _store
    if _store is None:
        _store = PriorityStore(JsonFileStorage(get_settings().storage_path))
    return _store


def get_corpus() -> CorpusSource:
    global _corpus
    if _corpus is None:
        _corpus = JsonCorpus(get_settings().corpus_dir)
    return _corpus


def _load_document(key: str, corpus: CorpusSource) -> LegalDocument:
    document = corpus.get(key)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Document {key!r} not found")
    return document


@app.get("/priority", response_model=PriorityResponse)
def read_priority(
    limit: Optional[int] = Query(default=None, ge=1, le=len(DEFAULT_VADE_PRIORITY)),
    store: PriorityStore = Depends(get_store),
):
    """Current priority ordering, optionally truncated for display."""
    order = store.load()
    limit = limit or min(get_settings().priority_limit, store.size)
    return PriorityResponse(order=order[:limit])


@app.put("/priority", response_model=PriorityResponse)
def update_priority(update: PriorityUpdate, store: PriorityStore = Depends(get_store)):
    return PriorityResponse(order=store.save(update.order))


@app.post("/priority/reset", response_model=PriorityResponse)
def reset_priority(store: PriorityStore = Depends(get_store)):
    return PriorityResponse(order=store.reset())


@app.get("/documents", response_model=List[str])
def list_documents(corpus: CorpusSource = Depends(get_corpus)):
    return corpus.keys()


@app.get("/documents/{key}", response_model=LegalDocument)
def read_document(key: str, corpus: CorpusSource = Depends(get_corpus)):
    return _load_document(key, corpus)


@app.get("/documents/{key}/resolve", response_model=ResolveResponse)
def resolve_article(
    key: str,
    q: str = Query(default=""),
    corpus: CorpusSource = Depends(get_corpus),
):
    """Locate an article by number; no match is not an error."""
    document = _load_document(key, corpus)
    article = ArticleResolver().resolve_article(q, document)
    return ResolveResponse(
        document=key,
        query=q,
        article_id=article.article_id if article else None,
        article=article,
    )
