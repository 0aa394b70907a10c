#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/element.py
"""Style records of HTML elements and their inheritance rules.

Every element on the traversal stack carries an :class:`ElementStyle`: the
base style looked up in the CSS profile, with the element's inline style
applied, and *refined* against its parent's effective style by
:func:`refine`. Styles are immutable; changing a field (assigning a list
bullet, binding a new canvas) produces a new record.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from textcanvas.utils.text import is_blank

if TYPE_CHECKING:
    from textcanvas.model.canvas import Canvas


class Display(Enum):
    """Whether content is rendered inline, as a block, or not at all."""

    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class WhiteSpace(Enum):
    """Whitespace handling of an element.

    NORMAL collapses runs of whitespace into a single space, PRE keeps them.
    """

    NORMAL = "normal"
    PRE = "pre"


class HorizontalAlignment(Enum):
    """Horizontal alignment of table cell content."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VerticalAlignment(Enum):
    """Vertical alignment of table cell content."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class ElementStyle:
    """Layout properties of a single HTML element.

    Parameters
    ----------
    tag : str
        Element name, used for dispatch and diagnostics
    display : Display, default Display.INLINE
        Display strategy; NONE suppresses the element and all descendants
    whitespace : WhiteSpace or None, default None
        Whitespace handling; None inherits the parent's setting
    prefix, suffix : str, default ""
        Text written around every piece of the element's textual content
    margin_before, margin_after : int, default 0
        Blank lines required before/after a block element
    padding_inline : int, default 0
        Left indentation the element adds for its descendants
    list_bullet : str, default ""
        Bullet emitted once at the start of the block's first line
    limit_whitespace_affixes : bool, default False
        Drop whitespace-only prefix/suffix inside PRE content
    align : HorizontalAlignment, default HorizontalAlignment.LEFT
        Horizontal alignment when the element becomes a table cell
    valign : VerticalAlignment, default VerticalAlignment.MIDDLE
        Vertical alignment when the element becomes a table cell
    previous_margin_after : int, default 0
        Bottom margin handed over from the enclosing block element
    canvas : Canvas or None
        The surface the element's text is written to

    """

    tag: str = "default"
    display: Display = Display.INLINE
    whitespace: WhiteSpace | None = None
    prefix: str = ""
    suffix: str = ""
    margin_before: int = 0
    margin_after: int = 0
    padding_inline: int = 0
    list_bullet: str = ""
    limit_whitespace_affixes: bool = False
    align: HorizontalAlignment = HorizontalAlignment.LEFT
    valign: VerticalAlignment = VerticalAlignment.MIDDLE
    previous_margin_after: int = 0
    canvas: Canvas | None = field(default=None, compare=False, repr=False)

    @property
    def has_list_bullet(self) -> bool:
        """Whether the element carries a list bullet."""
        return bool(self.list_bullet)

    def with_canvas(self, canvas: Canvas) -> ElementStyle:
        """Return a copy of this style bound to ``canvas``."""
        return replace(self, canvas=canvas)

    def write(self, text: str | None) -> None:
        """Write ``text`` wrapped in the element's affixes to its canvas.

        Nothing is written for elements (or descendants of elements) with
        ``display: none``.
        """
        if not text or self.display is Display.NONE or self.canvas is None:
            return
        self.canvas.write(self, f"{self.prefix}{text}{self.suffix}")

    def write_verbatim_text(self, text: str | None) -> None:
        """Write ``text`` as preformatted content, keeping all whitespace.

        For block elements the text is placed on lines of its own, separated
        by the element's margins. The element's indentation has already been
        registered when it was opened and is not registered again.
        """
        if not text or self.display is Display.NONE or self.canvas is None:
            return

        if self.display is Display.BLOCK:
            self.canvas.flush_inline()
            self.canvas.write_margin(max(self.previous_margin_after, self.margin_before))

        self.canvas.write(self, text, WhiteSpace.PRE)

        if self.display is Display.BLOCK:
            self.canvas.flush_inline()
            self.canvas.close_block(self)


DEFAULT_ELEMENT_STYLE = ElementStyle()


def refine(parent: ElementStyle, child: ElementStyle) -> ElementStyle:
    """Compute the effective style of ``child`` within ``parent``.

    Parameters
    ----------
    parent : ElementStyle
        The effective style of the enclosing element
    child : ElementStyle
        The base style of the element being opened

    Returns
    -------
    ElementStyle
        The child's effective style. It writes to the parent's canvas,
        inherits ``display: none`` and an unset whitespace mode, drops
        whitespace-only affixes in PRE content if requested, and receives the
        parent's bottom margin when both are block elements.

    """
    # display: none hides the whole subtree, no further rules apply
    if parent.display is Display.NONE:
        return replace(child, canvas=parent.canvas, display=Display.NONE)

    whitespace = child.whitespace if child.whitespace is not None else parent.whitespace
    prefix, suffix = child.prefix, child.suffix
    if child.limit_whitespace_affixes and whitespace is WhiteSpace.PRE:
        if is_blank(prefix):
            prefix = ""
        if is_blank(suffix):
            suffix = ""

    previous_margin_after = child.previous_margin_after
    if child.display is Display.BLOCK and parent.display is Display.BLOCK:
        previous_margin_after = parent.margin_after

    return replace(
        child,
        canvas=parent.canvas,
        whitespace=whitespace,
        prefix=prefix,
        suffix=suffix,
        previous_margin_after=previous_margin_after,
    )
