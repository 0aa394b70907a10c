#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/renderer.py
"""Render a parsed HTML tree as layout-preserving plain text.

The renderer walks a BeautifulSoup tree depth-first. For every element it
pushes an :class:`ElementStyle` onto a stack; text nodes are written through
the style on top of the stack into the canvas that style is bound to.

Block elements are opened and closed on the canvas of their parent, while
their content is written to their own canvas. The two only differ for tables
and table cells: a ``<table>`` element collects stray text on a fresh canvas,
every ``<td>``/``<th>`` writes into the canvas of a new :class:`TableCell`,
and the laid out table is spliced back into the enclosing canvas as
preformatted text once the table is closed.

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> renderer = HtmlTextRenderer(ParserConfig(css_profile="strict"))
    >>> renderer.render(BeautifulSoup("<p>Hello</p><p>World</p>", "html.parser"))
    'Hello\\n\\nWorld'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, ClassVar, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from textcanvas.constants import OL_BULLET_FORMAT, UL_BULLETS
from textcanvas.css.parse import apply_attributes
from textcanvas.model.canvas import Canvas
from textcanvas.model.element import DEFAULT_ELEMENT_STYLE, Display, ElementStyle, refine
from textcanvas.model.table import Table, TableCell
from textcanvas.options import ParserConfig

logger = logging.getLogger(__name__)

# either a bullet glyph (unordered lists) or the next number (ordered lists)
BulletSource = Union[str, int]


@dataclass
class RenderState:
    """Mutable traversal state of a single render call.

    Attributes
    ----------
    canvas : Canvas
        The document canvas
    tags : list[ElementStyle]
        Effective styles of the open elements; ``tags[0]`` is the root style
        bound to the document canvas
    tables : list[Table]
        Tables that are currently open, innermost last
    li_counter : list[str | int]
        Bullet source per open list, innermost last
    last_caption : str or None
        The most recently written image caption
    link_target : str
        Target of the currently open link, empty if none is rendered

    """

    canvas: Canvas
    tags: list[ElementStyle]
    tables: list[Table] = field(default_factory=list)
    li_counter: list[BulletSource] = field(default_factory=list)
    last_caption: str | None = None
    link_target: str = ""


class HtmlTextRenderer:
    """Render HTML trees as plain text.

    Parameters
    ----------
    config : ParserConfig, optional
        Rendering options. Defaults to ``ParserConfig()``.

    Notes
    -----
    A renderer holds no per-document state; all traversal state lives in a
    :class:`RenderState` created by :meth:`render`. One renderer can
    therefore be reused for many documents.

    """

    # Dispatch tables mapping element names to handler methods
    _START_HANDLERS: ClassVar[dict[str, str]] = {
        "table": "_start_table",
        "tr": "_start_tr",
        "td": "_start_td",
        "th": "_start_td",
        "ul": "_start_ul",
        "ol": "_start_ol",
        "li": "_start_li",
        "br": "_newline",
        "a": "_start_a",
        "img": "_start_img",
    }
    _END_HANDLERS: ClassVar[dict[str, str]] = {
        "table": "_end_table",
        "ul": "_end_list",
        "ol": "_end_list",
        "a": "_end_a",
    }

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self._css = self.config.css

    def render(self, tree: PageElement) -> str:
        """Render ``tree`` and return its text.

        Parameters
        ----------
        tree : PageElement
            A BeautifulSoup document, element or string

        Returns
        -------
        str
            The rendered text without trailing whitespace

        """
        state = self.create_state()
        self.walk(tree, state)
        return state.canvas.get_text().rstrip()

    def create_state(self) -> RenderState:
        """Create the traversal state for a new document."""
        root = self._css.get("body", DEFAULT_ELEMENT_STYLE)
        canvas = Canvas()
        return RenderState(canvas=canvas, tags=[root.with_canvas(canvas)])

    def walk(self, node: PageElement, state: RenderState) -> None:
        """Render ``node`` and its descendants into ``state``."""
        if isinstance(node, BeautifulSoup):
            for child in node.children:
                self.walk(child, state)
        elif isinstance(node, Tag):
            self.handle_start_tag(node, state)
            for child in node.children:
                self.walk(child, state)
            self.handle_end_tag(node, state)
        elif isinstance(node, NavigableString):
            # comments, doctypes, CDATA sections, declarations and processing instructions
            if isinstance(node, PreformattedString):
                return
            state.tags[-1].write(str(node))

    def handle_start_tag(self, node: Tag, state: RenderState) -> None:
        """Push the effective style of ``node`` and open its box."""
        name = node.name
        base = self._css.get(name, DEFAULT_ELEMENT_STYLE)
        if base.tag != name:
            base = replace(base, tag=name)
        base = apply_attributes(node.attrs, base)

        parent = state.tags[-1]
        state.tags.append(refine(parent, base))

        handler = self._get_handler(self._START_HANDLERS, name)
        if handler is not None:
            handler(node, state)

        if parent.canvas is not None:
            parent.canvas.open_tag(state.tags[-1])

    def handle_end_tag(self, node: Tag, state: RenderState) -> None:
        """Run the closing behavior of ``node``, close its box and pop its style."""
        handler = self._get_handler(self._END_HANDLERS, node.name)
        if handler is not None:
            handler(node, state)

        parent = state.tags[-2]
        if parent.canvas is not None:
            parent.canvas.close_tag(state.tags[-1])
        state.tags.pop()

    def _get_handler(self, handlers: dict[str, str], name: str) -> Callable[[Tag, RenderState], None] | None:
        handler_name = handlers.get(name)
        if handler_name is None:
            return None
        return getattr(self, handler_name)

    def _start_table(self, node: Tag, state: RenderState) -> None:
        state.tables.append(Table(self.config.table_cell_separator))
        state.tags[-1] = state.tags[-1].with_canvas(Canvas())

    def _start_tr(self, node: Tag, state: RenderState) -> None:
        if not state.tables:
            logger.debug("Ignoring <tr> outside of a table")
            return
        state.tables[-1].add_row()

    def _start_td(self, node: Tag, state: RenderState) -> None:
        if not state.tables:
            logger.debug("Ignoring <%s> outside of a table", node.name)
            return
        style = state.tags[-1]
        cell = TableCell(style.align, style.valign)
        state.tags[-1] = style.with_canvas(cell.canvas)
        state.tables[-1].add_cell(cell)

    def _start_ul(self, node: Tag, state: RenderState) -> None:
        state.li_counter.append(UL_BULLETS[len(state.li_counter) % len(UL_BULLETS)])

    def _start_ol(self, node: Tag, state: RenderState) -> None:
        state.li_counter.append(1)

    def _start_li(self, node: Tag, state: RenderState) -> None:
        bullet: BulletSource = state.li_counter[-1] if state.li_counter else UL_BULLETS[0]
        if isinstance(bullet, int):
            state.li_counter[-1] = bullet + 1
            bullet = OL_BULLET_FORMAT.format(bullet)
        state.tags[-1] = replace(state.tags[-1], list_bullet=bullet)

    def _newline(self, node: Tag, state: RenderState) -> None:
        style = state.tags[-1]
        if style.display is not Display.NONE and style.canvas is not None:
            style.canvas.write_newline()

    def _start_a(self, node: Tag, state: RenderState) -> None:
        if not (self.config.display_links or self.config.display_anchors):
            return

        state.link_target = ""
        if self.config.display_links:
            state.link_target = _get_attribute(node, "href")
        if self.config.display_anchors and not state.link_target:
            state.link_target = _get_attribute(node, "name")

        if state.link_target:
            state.tags[-1].write("[")

    def _end_a(self, node: Tag, state: RenderState) -> None:
        if not (self.config.display_links or self.config.display_anchors):
            return
        if state.link_target:
            state.tags[-1].write(f"]({state.link_target})")

    def _start_img(self, node: Tag, state: RenderState) -> None:
        if not self.config.display_images:
            return

        caption = _get_attribute(node, "alt") if node.has_attr("alt") else _get_attribute(node, "title")
        if not caption:
            return
        if self.config.deduplicate_captions and caption == state.last_caption:
            return

        state.tags[-1].write(f"[{caption}]")
        state.last_caption = caption

    def _end_list(self, node: Tag, state: RenderState) -> None:
        if state.li_counter:
            state.li_counter.pop()

    def _end_table(self, node: Tag, state: RenderState) -> None:
        if not state.tables:
            logger.debug("Ignoring </table> without an open table")
            return

        table = state.tables.pop()
        table_style, parent = state.tags[-1], state.tags[-2]
        if table_style.display is Display.NONE or table_style.canvas is None or parent.canvas is None:
            return

        # text within the table but outside of its cells precedes the table
        out_of_table_text = table_style.canvas.get_text().strip()
        if out_of_table_text:
            parent.write(out_of_table_text)
            parent.canvas.write_newline()

        table_text = table.get_text()
        # the canvas' line join terminates the table's last line
        if table_text.endswith("\n"):
            table_text = table_text[:-1]
        parent.write_verbatim_text(table_text)
        parent.canvas.flush_inline()


def _get_attribute(node: Tag, name: str) -> str:
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)
