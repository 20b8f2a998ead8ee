"""Derived views over a flat catalog collection.

Every function here is pure: it reads a sequence of entries and returns new
lists/dicts, so views can be recomputed whenever the collection or the
filter criteria change.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..utils.text import fold_text
from .models import CatalogEntry, CatalogGroup, CatalogSummary

KeyFn = Callable[[CatalogEntry], str]

STATUS_FILTERS = ("all", "active", "inactive")
NO_SECTION = "Sem secao"


def group_by(
    entries: Iterable[CatalogEntry],
    key_fn: KeyFn,
    label_fn: Optional[KeyFn] = None,
    description_fn: Optional[KeyFn] = None,
) -> Dict[str, CatalogGroup]:
    """
    Group entries in a single pass.

    Groups appear in order of the first occurrence of their key, and take
    label, description and timestamps from that first entry.

    Args:
        entries: Catalog entries
        key_fn: Grouping key of an entry
        label_fn: Group label from the first entry (defaults to the key)
        description_fn: Group description from the first entry

    Returns:
        Ordered mapping of key -> CatalogGroup
    """
    groups: Dict[str, CatalogGroup] = {}
    for entry in entries:
        key = key_fn(entry)
        group = groups.get(key)
        if group is None:
            group = CatalogGroup(
                key=key,
                label=label_fn(entry) if label_fn else key,
                description=description_fn(entry) if description_fn else "",
                created_at=entry.created_at,
                updated_at=entry.updated_at,
            )
            groups[key] = group
        group.entries.append(entry)
    return groups


def group_by_book(entries: Iterable[CatalogEntry]) -> Dict[str, CatalogGroup]:
    """Group by ``livro``; entries without a book go to the general group."""
    return group_by(
        entries,
        key_fn=lambda e: e.group_key,
        label_fn=lambda e: e.livro or "Documentos",
        description_fn=lambda e: e.cabecalho or "Agrupado automaticamente",
    )


def group_by_code(entries: Iterable[CatalogEntry]) -> Dict[str, CatalogGroup]:
    """Group by kind and code name, as the public listing shows them."""

    def code_key(entry: CatalogEntry) -> str:
        tipo = entry.tipo.strip() or "Outros"
        codigo = entry.nomecodigo.strip() or entry.id
        return f"{tipo}::{codigo}"

    return group_by(
        entries,
        key_fn=code_key,
        label_fn=lambda e: e.nomecodigo or f"Codigo {e.id}",
        description_fn=lambda e: e.cabecalho,
    )


def sort_groups(groups: Iterable[CatalogGroup]) -> List[CatalogGroup]:
    """Sort groups by label, ignoring case and accents."""
    return sorted(groups, key=lambda g: (fold_text(g.label), g.label))


def filter_entries(
    entries: Iterable[CatalogEntry],
    group: Optional[str] = None,
    status: Optional[str] = None,
    search_term: Optional[str] = None,
) -> List[CatalogEntry]:
    """
    Filter entries; all given criteria must hold.

    Args:
        entries: Catalog entries
        group: Book group key (``livro`` or "geral")
        status: "all", "active" or "inactive"
        search_term: Case-insensitive substring looked up in code name,
            normative text, title, book, chapter and article number

    Returns:
        Matching entries in their original order
    """
    if status is not None and status not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter: {status!r}")

    term = (search_term or "").strip().lower()
    result = []
    for entry in entries:
        if group and entry.group_key != group:
            continue
        if status == "active" and not entry.is_active:
            continue
        if status == "inactive" and entry.is_active:
            continue
        if term and not _matches(entry, term):
            continue
        result.append(entry)
    return result


def _matches(entry: CatalogEntry, term: str) -> bool:
    fields = [
        entry.nomecodigo,
        entry.normativo,
        entry.titulo,
        entry.livro,
        entry.capitulo,
        entry.num_artigo,
    ]
    return any(term in value.lower() for value in fields if value)


def filter_groups(groups: Iterable[CatalogGroup], search_term: Optional[str]) -> List[CatalogGroup]:
    """Keep groups whose label or description contains the search term."""
    groups = list(groups)
    term = (search_term or "").strip().lower()
    if not term:
        return groups
    return [
        g for g in groups
        if term in g.label.lower() or term in (g.description or "").lower()
    ]


def summarize(entries: Sequence[CatalogEntry]) -> CatalogSummary:
    """Counts shown on the catalog dashboard."""
    codes = {e.nomecodigo or e.id for e in entries}
    sections = {e.secao for e in entries if e.secao}
    return CatalogSummary(
        total_records=len(entries),
        distinct_codes=len({c for c in codes if c}),
        distinct_sections=len(sections),
    )


def section_buckets(entries: Iterable[CatalogEntry]) -> List[Tuple[str, List[CatalogEntry]]]:
    """Bucket entries by section name, sorted by name."""
    buckets: Dict[str, List[CatalogEntry]] = {}
    for entry in entries:
        section = entry.secao.strip() or NO_SECTION
        buckets.setdefault(section, []).append(entry)
    return sorted(buckets.items(), key=lambda item: (fold_text(item[0]), item[0]))
