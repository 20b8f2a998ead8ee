"""Text processing utilities."""

import re
import unicodedata
from typing import Optional


def normalize_text(text: str) -> str:
    """Normalize text by removing extra whitespace and normalizing unicode.

    Args:
        text: Text to normalize

    Returns:
        Normalized text
    """
    if not text:
        return ""

    # NFC, not NFKC: compatibility folding turns "5º" into "5o"
    text = unicodedata.normalize("NFC", text)

    # Replace multiple whitespace with single space
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def strip_accents(text: str) -> str:
    """Remove combining diacritics ("Código" -> "Codigo")."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold_text(text: Optional[str]) -> str:
    """Accent- and case-insensitive form of a string, used for comparisons.

    Args:
        text: Text to fold (None is treated as empty)

    Returns:
        Lowercased text without diacritics and surrounding whitespace
    """
    if not text:
        return ""
    return strip_accents(text).lower().strip()


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a whole string as a non-negative base-10 integer, or return None."""
    if value is None:
        return None
    value = value.strip()
    if not re.fullmatch(r"[0-9]+", value):
        return None
    return int(value)


def digits_only(text: Optional[str]) -> str:
    """Keep only the ASCII digits of a string ("1.230" -> "1230")."""
    if not text:
        return ""
    return re.sub(r"[^0-9]", "", text)


def extract_article_parts(normativo: str, fallback_label: str) -> tuple[str, str]:
    """Split a normative text into its article label and body.

    Handles formats like:
    - "Art. 5º Todos são iguais..."
    - "Artigo 10 O texto..."

    Args:
        normativo: Full article text as stored in the catalog
        fallback_label: Label to use when the text has no "Art." prefix

    Returns:
        Tuple of (label, body)
    """
    text = (normativo or "").lstrip()
    match = re.match(r"^(Art(?:igo)?\.?\s*\d+\S*)", text, re.IGNORECASE)
    if match:
        label = match.group(0).strip()
        body = text[match.end():].lstrip()
        return label, body
    return fallback_label, text
