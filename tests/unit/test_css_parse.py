"""Unit tests for inline style and attribute handling."""

import pytest

from textcanvas.css.parse import apply_attributes, attr_display, attr_style, get_em
from textcanvas.model import Display, ElementStyle, HorizontalAlignment, VerticalAlignment, WhiteSpace


@pytest.mark.unit
class TestGetEm:
    """Test conversion of CSS lengths."""

    @pytest.mark.parametrize(
        "length, expected",
        [
            ("2em", 2),
            ("3rem", 3),
            ("4qem", 4),
            ("1.4em", 1),
            ("1.5em", 2),
            ("16px", 2),
            ("12px", 2),
            ("11px", 1),
            ("4pt", 1),
            ("-16px", -2),
            ("auto", 0),
            ("", 0),
            ("1.2.3em", 0),
        ],
    )
    def test_lengths(self, length, expected):
        assert get_em(length) == expected


@pytest.mark.unit
class TestDisplay:
    """Test the display property."""

    @pytest.mark.parametrize(
        "value, expected",
        [("block", Display.BLOCK), ("none", Display.NONE), ("inline", Display.INLINE), ("flex", Display.INLINE)],
    )
    def test_values(self, value, expected):
        assert attr_display(value, ElementStyle(tag="div", display=Display.BLOCK)).display is expected

    def test_hidden_element_stays_hidden(self):
        hidden = ElementStyle(tag="div", display=Display.NONE)

        assert attr_display("block", hidden).display is Display.NONE


@pytest.mark.unit
class TestStyleAttribute:
    """Test parsing of style attribute declarations."""

    def test_multiple_declarations(self):
        style = attr_style(
            "display: block; margin-top: 2em; margin-bottom: 16px; padding-left: 4em",
            ElementStyle(tag="span"),
        )

        assert style.display is Display.BLOCK
        assert style.margin_before == 2
        assert style.margin_after == 2
        assert style.padding_inline == 4

    @pytest.mark.parametrize("value", ["pre", "pre-line", "pre-wrap"])
    def test_preformatted_white_space(self, value):
        assert attr_style(f"white-space: {value}", ElementStyle()).whitespace is WhiteSpace.PRE

    @pytest.mark.parametrize("value", ["normal", "nowrap"])
    def test_normal_white_space(self, value):
        style = ElementStyle(whitespace=WhiteSpace.PRE)

        assert attr_style(f"white-space: {value}", style).whitespace is WhiteSpace.NORMAL

    def test_unsupported_white_space_is_ignored(self):
        style = ElementStyle(whitespace=WhiteSpace.PRE)

        assert attr_style("white-space: break-spaces", style).whitespace is WhiteSpace.PRE

    def test_vendor_prefix_is_removed(self):
        assert attr_style("-webkit-display: block", ElementStyle()).display is Display.BLOCK

    def test_declarations_are_case_insensitive(self):
        assert attr_style("DISPLAY: Block", ElementStyle()).display is Display.BLOCK

    def test_malformed_declarations_are_skipped(self):
        style = attr_style("garbage; color: red;; display: none;", ElementStyle())

        assert style.display is Display.NONE
        assert style == ElementStyle(display=Display.NONE)

    def test_vertical_align(self):
        assert attr_style("vertical-align: top", ElementStyle()).valign is VerticalAlignment.TOP


@pytest.mark.unit
class TestApplyAttributes:
    """Test presentational attributes."""

    def test_align_and_valign(self):
        style = apply_attributes({"align": "Right", "valign": "bottom"}, ElementStyle(tag="td"))

        assert style.align is HorizontalAlignment.RIGHT
        assert style.valign is VerticalAlignment.BOTTOM

    def test_unsupported_alignment_is_ignored(self):
        style = apply_attributes({"align": "justify", "valign": "baseline"}, ElementStyle(tag="td"))

        assert style.align is HorizontalAlignment.LEFT
        assert style.valign is VerticalAlignment.MIDDLE

    def test_attribute_pairs_are_applied_in_order(self):
        style = apply_attributes(
            [("style", "display: block"), ("style", "display: inline")],
            ElementStyle(tag="span"),
        )

        assert style.display is Display.INLINE

    def test_other_attributes_are_ignored(self):
        base = ElementStyle(tag="td")

        assert apply_attributes({"class": ["a", "b"], "id": "x", "align": None}, base) == base

    def test_multi_valued_attribute_is_joined(self):
        style = apply_attributes({"style": ["display:", "block"]}, ElementStyle(tag="span"))

        assert style.display is Display.BLOCK

    def test_input_style_is_not_modified(self):
        base = ElementStyle(tag="td")
        apply_attributes({"align": "center"}, base)

        assert base.align is HorizontalAlignment.LEFT
