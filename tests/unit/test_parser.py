"""Unit tests for the legal text parser and document builder."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from vademecum.corpus import (
    ArticleTitle,
    ChapterTitle,
    DocumentBuilder,
    LegalDocument,
    LegalTextParser,
    resolve,
)

SAMPLE_HTML = """
<html><body>
<p>TÍTULO I</p>
<p>DOS PRINCÍPIOS FUNDAMENTAIS</p>
<p>Art. 1º A República Federativa do Brasil tem como fundamentos:</p>
<p>I - a soberania;</p>
<p>II - a cidadania;</p>
<p>Parágrafo único. Todo o poder emana do povo.</p>
<p>TÍTULO II</p>
<p>DOS DIREITOS E GARANTIAS FUNDAMENTAIS</p>
<p>CAPÍTULO I</p>
<p>DOS DIREITOS E DEVERES INDIVIDUAIS E COLETIVOS</p>
<p>Art. 5º Todos são iguais perante a lei.</p>
<p>§ 1º As normas definidoras dos direitos</p>
<p>têm aplicação imediata.</p>
<p>CAPÍTULO II</p>
<p>DOS DIREITOS SOCIAIS</p>
<p>Seção I</p>
<p>Disposições Gerais</p>
<p>Art. 6º São direitos sociais a educação,</p>
<p>a saúde e a alimentação.</p>
</body></html>
"""


@pytest.fixture
def document():
    parser = LegalTextParser()
    return parser.parse_html(SAMPLE_HTML, key="CF", title="Constituição Federal", kind="constitution")


class TestLegalTextParser:
    """Tests for parsing HTML into a document tree."""

    def test_document_metadata(self, document):
        assert isinstance(document, LegalDocument)
        assert document.key == "CF"
        assert document.kind == "constitution"

    def test_title_layouts(self, document):
        first, second = document.titles
        assert isinstance(first, ArticleTitle)
        assert isinstance(second, ChapterTitle)
        assert first.title_id == "tit_01"
        assert first.name == "DOS PRINCÍPIOS FUNDAMENTAIS"
        assert second.name == "DOS DIREITOS E GARANTIAS FUNDAMENTAIS"

    def test_article_components(self, document):
        article = document.titles[0].articles[0]
        assert article.article_id == "tit_01_art_1"
        assert article.number == "1º"
        assert article.text == "A República Federativa do Brasil tem como fundamentos:"
        assert article.items == ["I - a soberania;", "II - a cidadania;"]
        assert article.paragraphs == ["Parágrafo único. Todo o poder emana do povo."]

    def test_chapters(self, document):
        chapters = document.titles[1].chapters
        assert [c.chapter_id for c in chapters] == ["tit_02_cap_01", "tit_02_cap_02"]
        assert chapters[0].name == "DOS DIREITOS E DEVERES INDIVIDUAIS E COLETIVOS"
        assert chapters[1].name == "DOS DIREITOS SOCIAIS"

    def test_paragraph_continuation(self, document):
        article = document.titles[1].chapters[0].articles[0]
        assert article.article_id == "tit_02_cap_01_art_5"
        assert article.paragraphs == [
            "§ 1º As normas definidoras dos direitos têm aplicação imediata."
        ]

    def test_section_is_flattened(self, document):
        article = document.titles[1].chapters[1].articles[0]
        assert article.number == "6º"
        assert article.text == "São direitos sociais a educação, a saúde e a alimentação."

    def test_stats(self):
        parser = LegalTextParser()
        parser.parse_html(SAMPLE_HTML, key="CF", title="Constituição Federal")
        assert parser.stats["titles"] == 2
        assert parser.stats["chapters"] == 2
        assert parser.stats["sections"] == 1
        assert parser.stats["articles"] == 3
        assert parser.stats["paragraphs"] == 2
        assert parser.stats["items"] == 2

    def test_parsed_document_resolves(self, document):
        assert resolve("5", document) == "tit_02_cap_01_art_5"
        assert document.article_count == 3

    def test_orphan_components_are_skipped(self):
        parser = LegalTextParser()
        document = parser.parse_blocks(
            ["§ 1º Sem artigo", "Texto solto", "Art. 1º Primeiro"],
            key="L", title="Lei",
        )
        assert parser.stats["skipped"] == 2
        assert document.article_count == 1
        assert document.titles[0].articles[0].paragraphs == []

    def test_parser_is_reusable(self):
        parser = LegalTextParser()
        parser.parse_blocks(["Art. 1º Um"], key="A", title="A")
        document = parser.parse_blocks(["Art. 2º Dois"], key="B", title="B")
        assert [a.number for a in document.iter_articles()] == ["2º"]


class TestDocumentBuilder:
    """Tests for identifier assignment and tree assembly."""

    def test_articles_without_title_get_implicit_title(self):
        builder = DocumentBuilder()
        builder.add_article("1º", "Texto")
        document = builder.build("L", "Lei")
        assert document.titles[0].title_id == "tit_00"
        assert document.titles[0].articles[0].article_id == "tit_00_art_1"

    def test_repeated_numbers_get_unique_ids(self):
        builder = DocumentBuilder()
        builder.open_title("I")
        builder.add_article("5º")
        builder.add_article("5º")
        builder.add_article("5º")
        ids = [a.article_id for a in builder.build("L", "Lei").iter_articles()]
        assert ids == ["tit_01_art_5", "tit_01_art_5_2", "tit_01_art_5_3"]

    def test_articles_before_first_chapter_move_to_leading_chapter(self):
        builder = DocumentBuilder()
        builder.open_title("I")
        builder.add_article("1º")
        builder.open_chapter("I", "Primeiro")
        builder.add_article("2º")
        title = builder.build("L", "Lei").titles[0]

        assert isinstance(title, ChapterTitle)
        assert [c.chapter_id for c in title.chapters] == ["tit_01_cap_00", "tit_01_cap_01"]
        assert title.chapters[0].number == ""
        assert [a.number for a in title.chapters[0].articles] == ["1º"]

    def test_explicit_article_id(self):
        builder = DocumentBuilder()
        builder.add_article("1º", article_id="abc")
        assert builder.build("L", "Lei").find_article("abc") is not None

    def test_built_document_is_frozen(self):
        builder = DocumentBuilder()
        builder.add_article("1º")
        document = builder.build("L", "Lei")
        with pytest.raises(Exception):
            document.key = "X"

    def test_json_round_trip_keeps_layouts(self):
        builder = DocumentBuilder()
        builder.open_title("I")
        builder.add_article("1º")
        builder.open_title("II")
        builder.open_chapter("I")
        builder.add_article("2º")
        document = builder.build("L", "Lei")

        restored = LegalDocument.model_validate_json(document.model_dump_json())

        assert restored == document
        assert isinstance(restored.titles[1], ChapterTitle)
