"""Pydantic models for the legal document hierarchy.

A document owns Titles; a Title holds either Articles directly or Chapters
(each holding Articles). The two Title layouts are separate models joined in a
discriminated union on ``layout``.
"""

from typing import Annotated, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DocumentKind = Literal[
    "constitution", "code", "law", "jurisprudence", "oab", "statute"
]


class Article(BaseModel):
    """A single article with its paragraphs (§) and items (incisos)."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "article_id": "tit_02_cap_01_art_5",
                "number": "5º",
                "text": "Todos são iguais perante a lei...",
                "paragraphs": ["§ 1º As normas definidoras..."],
                "items": ["I - homens e mulheres são iguais..."],
            }
        },
    )

    article_id: str
    number: str  # As printed: "5º", "1.230"
    text: str = ""
    paragraphs: List[str] = Field(default_factory=list)
    items: List[str] = Field(default_factory=list)


class Chapter(BaseModel):
    model_config = ConfigDict(frozen=True)

    chapter_id: str
    number: str  # Display only: "I", "II"
    name: str = ""
    articles: List[Article] = Field(default_factory=list)


class ArticleTitle(BaseModel):
    """A Title whose articles hang directly off it."""

    model_config = ConfigDict(frozen=True)

    layout: Literal["articles"] = "articles"
    title_id: str
    number: str
    name: str = ""
    articles: List[Article] = Field(default_factory=list)


class ChapterTitle(BaseModel):
    """A Title divided into Chapters."""

    model_config = ConfigDict(frozen=True)

    layout: Literal["chapters"] = "chapters"
    title_id: str
    number: str
    name: str = ""
    chapters: List[Chapter] = Field(default_factory=list)


Title = Annotated[Union[ArticleTitle, ChapterTitle], Field(discriminator="layout")]


class LegalDocument(BaseModel):
    """A complete legal document, immutable once built."""

    model_config = ConfigDict(frozen=True)

    key: str  # Short code: "CF", "CP", "CPC"
    title: str
    kind: DocumentKind = "code"
    titles: List[Title] = Field(default_factory=list)

    def iter_articles(self) -> Iterator[Article]:
        """Yield every article in display (and resolution) order."""
        for title in self.titles:
            if isinstance(title, ArticleTitle):
                yield from title.articles
            else:
                for chapter in title.chapters:
                    yield from chapter.articles

    @property
    def article_count(self) -> int:
        return sum(1 for _ in self.iter_articles())

    def find_article(self, article_id: str) -> Optional[Article]:
        for article in self.iter_articles():
            if article.article_id == article_id:
                return article
        return None
