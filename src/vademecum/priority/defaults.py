"""Canonical priority ordering of Vade Mecum documents."""

from typing import List

DEFAULT_VADE_PRIORITY: List[str] = [
    "Código de Processo Penal - Decreto-Lei nº 3.689, de 3 de outubro de 1941.",
    "Código do Consumidor - Lei nº 8.078, de 11 de setembro de 1990",
    "Código Penal - Decreto-Lei nº 2.848, de 7 de dezembro de 1940",
    "Código Florestal - Lei nº 12.651, de 25 de maio de 2012",
    "Código de Processo Civil - Lei nº 13.105, de 16 de março de 2015",
    "Código Eleitoral - Lei nº 4.737, de 15 de julho de 1965",
    "Consolidação das Leis de Trabalho - Decreto-Lei n° 5.452, de 1° de maio de 1943",
    "Código Civil - Lei nº 10.406, de 10 de janeiro de 2002",
    "Código Tributário Nacional - CTN - Lei nº 5.172, de 25 de outubro de 1966",
]

STORAGE_KEY = "pantheon:vadePriority"
PRIORITY_CHANGED = "pantheon-vade-priority-changed"
