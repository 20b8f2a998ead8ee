"""Incremental construction of LegalDocument trees.

Parsers and record importers feed components in source order; the builder
keeps the open Title/Chapter/Article, assigns stable identifiers and freezes
everything into pydantic models at the end.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .models import Article, ArticleTitle, Chapter, ChapterTitle, DocumentKind, LegalDocument
from .patterns import ordinal_key


@dataclass
class _ArticleDraft:
    article_id: str
    number: str
    text: str = ""
    paragraphs: List[str] = field(default_factory=list)
    items: List[str] = field(default_factory=list)

    def freeze(self) -> Article:
        return Article(
            article_id=self.article_id,
            number=self.number,
            text=self.text,
            paragraphs=list(self.paragraphs),
            items=list(self.items),
        )


@dataclass
class _ChapterDraft:
    chapter_id: str
    number: str
    name: str = ""
    articles: List[_ArticleDraft] = field(default_factory=list)


@dataclass
class _TitleDraft:
    title_id: str
    number: str
    name: str = ""
    articles: List[_ArticleDraft] = field(default_factory=list)
    chapters: List[_ChapterDraft] = field(default_factory=list)


class DocumentBuilder:
    """Builds one LegalDocument from components fed in document order."""

    def __init__(self):
        self.titles: List[_TitleDraft] = []
        self.current_article: Optional[_ArticleDraft] = None
        self._ids: set[str] = set()

    def _unique_id(self, candidate: str) -> str:
        """Suffix repeated identifiers: art_5, art_5_2, art_5_3..."""
        unique = candidate
        counter = 2
        while unique in self._ids:
            unique = f"{candidate}_{counter}"
            counter += 1
        self._ids.add(unique)
        return unique

    @property
    def current_title(self) -> Optional[_TitleDraft]:
        return self.titles[-1] if self.titles else None

    @property
    def current_chapter(self) -> Optional[_ChapterDraft]:
        title = self.current_title
        if title and title.chapters:
            return title.chapters[-1]
        return None

    def open_title(self, number: str, name: str = "") -> _TitleDraft:
        key = ordinal_key(number) if number else "00"
        title = _TitleDraft(
            title_id=self._unique_id(f"tit_{key}"),
            number=number,
            name=name,
        )
        self.titles.append(title)
        self.current_article = None
        return title

    def open_chapter(self, number: str, name: str = "") -> _ChapterDraft:
        title = self.current_title or self.open_title("")

        # A Title cannot hold articles and chapters side by side; articles
        # seen before its first chapter move into a leading unnamed chapter.
        if title.articles and not title.chapters:
            leading = _ChapterDraft(
                chapter_id=self._unique_id(f"{title.title_id}_cap_00"),
                number="",
                articles=title.articles,
            )
            title.articles = []
            title.chapters.append(leading)

        key = ordinal_key(number) if number else "00"
        chapter = _ChapterDraft(
            chapter_id=self._unique_id(f"{title.title_id}_cap_{key}"),
            number=number,
            name=name,
        )
        title.chapters.append(chapter)
        self.current_article = None
        return chapter

    def add_article(
        self,
        number: str,
        text: str = "",
        article_id: Optional[str] = None,
    ) -> _ArticleDraft:
        """Append an article to the open chapter, or to the open title.

        Args:
            number: Printed article number ("5º")
            text: Article body (caput)
            article_id: Explicit identifier; derived from the parent otherwise
        """
        title = self.current_title or self.open_title("")
        chapter = self.current_chapter
        parent_id = chapter.chapter_id if chapter else title.title_id

        candidate = article_id or f"{parent_id}_art_{ordinal_key(number)}"
        article = _ArticleDraft(
            article_id=self._unique_id(candidate),
            number=number,
            text=text,
        )
        if chapter:
            chapter.articles.append(article)
        else:
            title.articles.append(article)
        self.current_article = article
        return article

    def build(self, key: str, title: str, kind: DocumentKind = "code") -> LegalDocument:
        titles = []
        for draft in self.titles:
            if draft.chapters:
                titles.append(ChapterTitle(
                    title_id=draft.title_id,
                    number=draft.number,
                    name=draft.name,
                    chapters=[
                        Chapter(
                            chapter_id=c.chapter_id,
                            number=c.number,
                            name=c.name,
                            articles=[a.freeze() for a in c.articles],
                        )
                        for c in draft.chapters
                    ],
                ))
            else:
                titles.append(ArticleTitle(
                    title_id=draft.title_id,
                    number=draft.number,
                    name=draft.name,
                    articles=[a.freeze() for a in draft.articles],
                ))

        return LegalDocument(key=key, title=title, kind=kind, titles=titles)
