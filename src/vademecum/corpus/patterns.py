"""Regex patterns for legal text parsing."""

import re

from ..utils.text import strip_accents

# Planalto pages mix encodings, so accented letters also accept their
# mis-decoded forms (ç/ş, ã/ă, ú/ű)
PATTERNS = {
    "title": re.compile(
        r'^T[IÍ]TULO\s+([IVXLCDM]+)\b\s*[-–—.]?\s*',
        re.IGNORECASE
    ),
    "chapter": re.compile(
        r'^CAP[IÍ]TULO\s+([IVXLCDM]+|[ÚU]NICO)\b\s*[-–—.]?\s*',
        re.IGNORECASE
    ),
    "section": re.compile(
        r'^(?:Sub)?se[çcş][ãaă]o\s+([IVXLCDM]+|[ÚU]NICA)\b\s*[-–—.]?\s*',
        re.IGNORECASE
    ),
    "article": re.compile(
        r'^Art(?:igo)?\.?\s*(\d+(?:\.\d{3})*\s*[º°]?(?:-[A-Z]\b)?)\s*[-–—.]?\s*',
        re.IGNORECASE
    ),
    "paragraph": re.compile(
        r'^§\s*(\d+)[º°]?\s*[-.]?\s*|^Par[áaă]grafo\s+[úuű]nico\s*[-.]?\s*',
        re.IGNORECASE
    ),
    "item": re.compile(
        r'^([IVXLCDM]+)\s*[-–—]\s*',
        re.IGNORECASE
    ),
}


ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_int(roman: str) -> int:
    """Value of a Roman numeral ("XIV" -> 14); unknown letters count as 0."""
    values = [ROMAN_VALUES.get(ch, 0) for ch in roman.upper()]
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def detect_component_type(text: str) -> tuple[str, str, str] | None:
    """
    Detect the component type from text.

    Structural headers keep their printed numeral ("IV", "ÚNICO"); articles
    keep their printed number ("5º", "1.230", "121-A").

    Returns:
        Tuple of (component_type, number, remaining_text) or None
    """
    text = text.strip()

    # Title, chapter, section
    for comp_type in ["title", "chapter", "section"]:
        match = PATTERNS[comp_type].match(text)
        if match:
            number = match.group(1).upper()
            remaining = text[match.end():].strip()
            return (comp_type, number, remaining)

    # Article
    match = PATTERNS["article"].match(text)
    if match:
        number = re.sub(r"\s+", "", match.group(1))
        remaining = text[match.end():].strip()
        return ("article", number, remaining)

    # Paragraph
    match = PATTERNS["paragraph"].match(text)
    if match:
        if "nico" in text[:20].lower():  # "único" with encoding variations
            number = "unico"
        else:
            number = match.group(1) if match.lastindex and match.group(1) else "unico"
        return ("paragraph", number, text)

    # Inciso
    match = PATTERNS["item"].match(text)
    if match:
        return ("item", match.group(1).upper(), text)

    return None


def ordinal_key(number: str) -> str:
    """Build an identifier fragment from a printed number.

    "5º" -> "5", "1.230" -> "1230", "121-A" -> "121a", "IV" -> "04",
    "TÍTULO II" -> "02"
    """
    tokens = number.split()
    if tokens and re.fullmatch(r"[IVXLCDM]+", tokens[-1], re.IGNORECASE):
        return str(roman_to_int(tokens[-1])).zfill(2)
    number = re.sub(r"[º°]", "", number)
    key = re.sub(r"[^0-9a-z]", "", strip_accents(number).lower())
    return key or "unico"
