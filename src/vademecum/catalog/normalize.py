"""Normalization of catalog API responses.

The API answers with a bare list or with the list wrapped under one of a few
envelope keys. Everything is reduced to a list of CatalogEntry; unrecognized
shapes become an empty list instead of an error.
"""

from collections.abc import Mapping
from typing import Any, List, Sequence

from .models import CatalogEntry

# Checked in this order
ENVELOPE_KEYS = ("data", "content", "items")


def extract_items(payload: Any) -> List[Any]:
    """Unwrap a response payload into its raw list of items.

    Args:
        payload: Decoded JSON body

    Returns:
        The bare list, or the list found under the first recognized envelope
        key; an empty list for anything else
    """
    if not payload:
        return []
    if isinstance(payload, list):
        return list(payload)
    if isinstance(payload, Mapping):
        for key in ENVELOPE_KEYS:
            candidate = payload.get(key)
            if isinstance(candidate, list):
                return list(candidate)
    return []


def get_string(record: Mapping, key: str) -> str:
    value = record.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def get_first_string(record: Mapping, keys: Sequence[str], fallback: str = "") -> str:
    """Return the first non-empty string value among alternative key spellings."""
    for key in keys:
        value = get_string(record, key)
        if value:
            return value
    return fallback


def normalize_record(item: Any, index: int) -> CatalogEntry:
    """Convert one raw API item into a CatalogEntry.

    Args:
        item: Raw item; non-mapping values produce a placeholder entry
        index: Position in the response, used for fallback ids and names
    """
    record = item if isinstance(item, Mapping) else {}
    simple_fields = [
        "idlivro", "livro", "livrotexto",
        "idtitulo", "titulo", "titulotexto",
        "idsubtitulo", "subtitulo", "subtitulotexto",
        "idcapitulo", "capitulo", "capitulotexto",
        "idsecao", "secao", "secaotexto",
        "idsubsecao", "subsecao", "subsecaotexto",
        "num_artigo",
    ]
    values = {name: get_string(record, name) for name in simple_fields}

    return CatalogEntry(
        id=get_first_string(record, ["id", "uuid"], str(index)),
        tipo=get_first_string(record, ["tipo", "Tipo"]),
        nomecodigo=get_first_string(record, ["nomecodigo", "titulo"], f"Codigo {index + 1}"),
        cabecalho=get_first_string(record, ["cabecalho", "Cabecalho"]),
        parte=get_first_string(record, ["parte", "PARTE"]),
        normativo=get_first_string(record, ["Normativo", "normativo"]),
        ordem=get_first_string(record, ["Ordem", "ordem"]),
        status=get_first_string(record, ["status", "Status"]),
        updated_at=get_first_string(
            record, ["updated_at", "updatedAt", "atualizado_em", "created_at"]
        ) or None,
        created_at=get_first_string(record, ["created_at", "createdAt"]) or None,
        **values,
    )


def normalize_collection(payload: Any) -> List[CatalogEntry]:
    """Normalize any supported response shape into catalog entries."""
    return [normalize_record(item, index) for index, item in enumerate(extract_items(payload))]
