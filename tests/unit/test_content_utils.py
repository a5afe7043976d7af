"""
Unit tests for page text extraction used by the URL analyzer.
"""

import pytest
from bs4 import BeautifulSoup

from shared.content_utils import (
    MAX_CONTENT_LENGTH,
    content_preview,
    extract_page_content,
)


def _soup(html):
    return BeautifulSoup(html, 'html.parser')


class TestExtractPageContent:
    """Tests for extract_page_content()"""

    def test_removes_non_content_nodes(self):
        html = """
        <html><head><style>.a { color: red }</style><script>var x = 1;</script></head>
        <body>
            <header>Header text</header>
            <nav>Menu</nav>
            <p>Body text</p>
            <footer>Footer text</footer>
        </body></html>
        """
        assert extract_page_content(_soup(html)) == "Body text"

    def test_main_preferred_over_article(self):
        html = "<body><article>Article text</article><main>Main text</main></body>"
        assert extract_page_content(_soup(html)) == "Main text"

    def test_article_before_content_class(self):
        html = '<body><div class="content">Class content</div><article>Article text</article></body>'
        assert extract_page_content(_soup(html)) == "Article text"

    def test_content_class_before_content_id(self):
        html = '<body><div id="content">Id content</div><div class="content">Class content</div></body>'
        assert extract_page_content(_soup(html)) == "Class content"

    def test_content_id_before_body(self):
        html = '<body><p>Outside</p><div id="content">Id content</div></body>'
        assert extract_page_content(_soup(html)) == "Id content"

    def test_falls_back_to_body(self):
        html = "<body><p>Just a paragraph</p></body>"
        assert extract_page_content(_soup(html)) == "Just a paragraph"

    def test_collapses_whitespace(self):
        html = "<body><p>  Hello\n\n   world </p>\t<p>again</p></body>"
        assert extract_page_content(_soup(html)) == "Hello world again"

    def test_inline_markup_does_not_split_words(self):
        html = "<body><main><p>日本<b>語</b>です</p></main></body>"
        assert extract_page_content(_soup(html)) == "日本語です"

    def test_inline_link_inside_word(self):
        html = "<body><p>re<a href='#'>quest</a>s library</p></body>"
        assert extract_page_content(_soup(html)) == "requests library"

    def test_truncates_to_limit(self):
        html = "<body><p>" + ("あ" * (MAX_CONTENT_LENGTH + 100)) + "</p></body>"
        content = extract_page_content(_soup(html))
        assert len(content) == MAX_CONTENT_LENGTH
        assert MAX_CONTENT_LENGTH == 4000

    def test_empty_document(self, empty_soup):
        assert extract_page_content(empty_soup) == ""

    def test_none_soup(self):
        assert extract_page_content(None) == ""

    def test_only_boilerplate(self):
        html = "<body><nav>Menu</nav><footer>Footer</footer></body>"
        assert extract_page_content(_soup(html)) == ""


class TestContentPreview:
    """Tests for content_preview()"""

    def test_long_text_is_cut_to_500(self):
        preview = content_preview("x" * 600)
        assert preview == "x" * 500 + "..."

    def test_short_text_still_gets_ellipsis(self):
        assert content_preview("short") == "short..."
