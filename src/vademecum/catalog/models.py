"""Pydantic models for catalog entries served by the Vade Mecum API."""

from typing import List, Optional

from pydantic import BaseModel, Field

ACTIVE_STATUS = "ATIVO"
GENERAL_GROUP = "geral"


class CatalogEntry(BaseModel):
    """One flat catalog record (usually one article of one code).

    Field names follow the API's Portuguese column names.
    """

    id: str
    tipo: str = ""
    nomecodigo: str = ""
    cabecalho: str = ""
    parte: str = ""
    idlivro: str = ""
    livro: str = ""
    livrotexto: str = ""
    idtitulo: str = ""
    titulo: str = ""
    titulotexto: str = ""
    idsubtitulo: str = ""
    subtitulo: str = ""
    subtitulotexto: str = ""
    idcapitulo: str = ""
    capitulo: str = ""
    capitulotexto: str = ""
    idsecao: str = ""
    secao: str = ""
    secaotexto: str = ""
    idsubsecao: str = ""
    subsecao: str = ""
    subsecaotexto: str = ""
    num_artigo: str = ""
    normativo: str = ""
    ordem: str = ""
    status: str = ""
    updated_at: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS

    @property
    def group_key(self) -> str:
        """Book grouping key; entries without a book share the general group."""
        return self.livro or GENERAL_GROUP


class CatalogGroup(BaseModel):
    """Entries sharing a grouping key, labelled from the first one seen."""

    key: str
    label: str
    description: str = ""
    entries: List[CatalogEntry] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.entries)


class CatalogSummary(BaseModel):
    total_records: int = 0
    distinct_codes: int = 0
    distinct_sections: int = 0
