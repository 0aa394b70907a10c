"""Integration tests for the public conversion API.

These tests run complete documents through parsing, traversal and layout.
"""

from io import BytesIO
from unittest.mock import patch

import pytest
from bs4 import BeautifulSoup, FeatureNotFound
from bs4.builder import ParserRejectedMarkup

from textcanvas import (
    DependencyError,
    InvalidOptionsError,
    ParserConfig,
    ParsingError,
    get_text,
    html_to_text,
    parse_html,
    render_tree,
)

STRICT = ParserConfig(css_profile="strict")

IMAGES_HTML = """<html>
  <body>
    <img src="test1" alt="Ein Test Bild" title="Hallo" />
    <img src="test2" alt="Ein Test Bild" title="Juhu" />
    <img src="test3" alt="Ein zweites Bild" title="Echo" />
  </body>
</html>"""

LINKS_HTML = """<html>
  <body>
    <a name="first">first</a>
    <a href="second">second</a>
    <a href="third">third</a>
  </body>
</html>"""


@pytest.mark.integration
class TestBlockLayout:
    """Test block elements in complete documents."""

    @pytest.mark.parametrize(
        "html, expected",
        [
            ("<body>Thomas<div>Anton</div>Maria</body>", "Thomas\nAnton\nMaria"),
            ("<body>Thomas<div>Anna <b>läuft</b> weit weg.</div>", "Thomas\nAnna läuft weit weg."),
            ("<body>Thomas <ul><li><div>Anton</div>Maria</ul></body>", "Thomas\n  * Anton\n    Maria"),
            ("<body>Thomas <ul><li>  <div>Anton</div>Maria</ul></body>", "Thomas\n  * Anton\n    Maria"),
            ("<body>Thomas <ul><li> a  <div>Anton</div>Maria</ul></body>", "Thomas\n  * a\n    Anton\n    Maria"),
        ],
    )
    def test_divs(self, html, expected):
        assert html_to_text(html, STRICT) == expected

    def test_content(self):
        assert html_to_text("<html><body>first</body></html>") == "first"

    def test_paragraphs(self):
        assert html_to_text("<p>Hello</p><p>World</p>", STRICT) == "Hello\n\nWorld"

    def test_leading_line_break(self):
        assert html_to_text("<html><body><br>first</p></body></html>") == "\nfirst"

    def test_xml_declaration(self):
        assert html_to_text('<?xml version="1.0" encoding="UTF-8" ?> Hallo?>') == "Hallo?>"

    def test_complete_document(self, sample_html):
        expected = (
            "Report\n"
            "\n"
            "Intro text spanning lines.\n"
            "\n"
            "  * first\n"
            "  * second\n"
            "Name    Count\n"
            "apples      3\n"
            "\n"
            "Done."
        )

        assert html_to_text(sample_html, STRICT) == expected


@pytest.mark.integration
class TestWhitespace:
    """Test whitespace handling across elements."""

    @pytest.mark.parametrize(
        "mode, expected",
        [("normal", "12 3"), ("nowrap", "12 3"), ("pre", "12\n3"), ("pre-line", "12\n3"), ("pre-wrap", "12\n3")],
    )
    def test_white_space_property(self, mode, expected):
        html = f'<body><span style="white-space: {mode}"><i>1</i>2\n3</span></body>'

        assert html_to_text(html, STRICT) == expected

    def test_preformatted_span_between_collapsed_text(self):
        html = '<body>a   b<span style="white-space: pre"><i>1</i>2\n3</span> c   d</body>'

        assert html_to_text(html, STRICT) == "a b12\n3 c d"

    def test_span_affixes_inside_pre(self):
        html = """<html>
  <body>
    hallo<span>echo</span>
    <pre>def <span>hallo</span>():
   print("echo")
    </pre>
  </body>
</html>"""

        assert html_to_text(html) == 'hallo echo\ndef hallo():\n   print("echo")'


@pytest.mark.integration
class TestTables:
    """Test tables in complete documents."""

    def test_forgotten_cell_close_tag(self):
        html = "<body>hallo<table><tr><td>1<td>2</tr></table>echo</body>"

        assert html_to_text(html) == "hallo\n1  2\necho"

    def test_forgotten_cell_close_tag_two_rows(self):
        html = "<body>hallo<table><tr><td>1<td>2<tr><td>3<td>4</table>echo</body>"

        assert html_to_text(html) == "hallo\n1  2\n3  4\necho"

    def test_nested_table(self):
        html = (
            "<table><tr><td>outer</td><td>"
            "<table><tr><td>a</td><td>b</td></tr><tr><td>c</td><td>d</td></tr></table>"
            "</td></tr></table>"
        )

        assert html_to_text(html, STRICT) == "outer  a  b\n       c  d"

    def test_multi_line_cells(self):
        html = "<table><tr><td>one<br>two<br>three</td><td>x</td></tr></table>"

        assert html_to_text(html, STRICT) == "one     \ntwo    x\nthree"

    @pytest.mark.parametrize("parser", ["lxml", "html5lib"])
    def test_other_tree_builders(self, parser):
        pytest.importorskip(parser)
        html = "<body>hallo<table><tr><td>1<td>2<tr><td>3<td>4</table>echo</body>"

        assert html_to_text(html, html_parser=parser) == "hallo\n1  2\n3  4\necho"


@pytest.mark.integration
class TestLinksAndImages:
    """Test link, anchor and image rendering."""

    def test_images(self):
        assert html_to_text(IMAGES_HTML, display_images=True) == "[Ein Test Bild] [Ein Test Bild] [Ein zweites Bild]"

    def test_deduplicated_images(self):
        text = html_to_text(IMAGES_HTML, display_images=True, deduplicate_captions=True)

        assert text == "[Ein Test Bild] [Ein zweites Bild]"

    def test_anchors(self):
        assert html_to_text(LINKS_HTML, display_anchors=True) == "[first](first) second third"

    def test_links_and_anchors(self):
        text = html_to_text(LINKS_HTML, display_links=True, display_anchors=True)

        assert text == "[first](first) [second](second) [third](third)"

    def test_successive_links(self):
        joined = '<a href="first">first</a><a href="second">second</a>'
        separated = '<a href="first">first</a>\n<a href="second">second</a>'

        assert html_to_text(joined) == "firstsecond"
        assert html_to_text(separated) == "first second"
        assert html_to_text(joined, display_links=True) == "[first](first)[second](second)"
        assert html_to_text(separated, display_links=True) == "[first](first) [second](second)"


@pytest.mark.integration
class TestApi:
    """Test the API entry points."""

    @pytest.mark.parametrize("html", ["", "   ", "\n\t"])
    def test_blank_input(self, html):
        assert get_text(html) == ""

    def test_get_text(self):
        assert get_text("test") == "test"
        assert get_text("<div>x</div>", STRICT) == "x"

    def test_bytes_and_files(self, tmp_path):
        html_file = tmp_path / "page.html"
        html_file.write_bytes("<p>café</p>".encode("utf-8"))

        assert html_to_text(b"<p>bytes</p>") == "bytes"
        assert html_to_text(BytesIO(b"<p>stream</p>")) == "stream"
        assert html_to_text(html_file, encoding="utf-8") == "café"
        assert html_to_text(b"") == ""

    def test_keyword_overrides(self):
        config = ParserConfig(display_links=True)

        assert html_to_text('<a href="x">t</a>', config) == "[t](x)"
        assert html_to_text('<a href="x">t</a>', config, display_links=False) == "t"
        assert config.display_links is True

    def test_unknown_keyword(self):
        with pytest.raises(InvalidOptionsError, match="Unknown option: width"):
            html_to_text("<p></p>", width=80)

    def test_render_tree(self):
        soup = BeautifulSoup("<div>x</div>", "html.parser")

        assert render_tree(soup) == "  x"
        assert render_tree(soup, css_profile="strict") == "x"

    def test_parse_html(self):
        soup = parse_html("<p>x</p>", STRICT)

        assert soup.p.get_text() == "x"

    def test_missing_tree_builder(self):
        config = ParserConfig(html_parser="lxml")
        with patch("textcanvas.api.BeautifulSoup", side_effect=FeatureNotFound("lxml")):
            with pytest.raises(DependencyError) as exc_info:
                parse_html("<p>x</p>", config)

        assert exc_info.value.parser_name == "lxml"
        assert exc_info.value.missing_packages == ["lxml"]
        assert "pip install lxml" in str(exc_info.value)

    def test_rejected_markup(self):
        with patch("textcanvas.api.BeautifulSoup", side_effect=ParserRejectedMarkup("broken")):
            with pytest.raises(ParsingError, match="Failed to parse HTML"):
                parse_html("<p>x</p>", STRICT)
