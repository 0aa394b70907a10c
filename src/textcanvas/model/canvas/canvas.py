#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/canvas/canvas.py
"""The drawing board an HTML document is rendered onto.

A :class:`Canvas` collects finished lines (``blocks``) and the line that is
currently being written (``current_block``). Block elements flush the
current line and request vertical margins; adjacent margins collapse, i.e.
the canvas tracks the distance that has already been satisfied (``margin``)
and only ever adds the missing blank lines.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textcanvas.constants import INITIAL_CANVAS_MARGIN
from textcanvas.model.canvas.block import Block
from textcanvas.model.canvas.prefix import Prefix
from textcanvas.model.element import Display, WhiteSpace

if TYPE_CHECKING:
    from textcanvas.model.element import ElementStyle

logger = logging.getLogger(__name__)


class Canvas:
    """Line buffer of one rendering surface (the document or a table cell).

    Attributes
    ----------
    margin : int
        Number of line breaks already separating the next content from the
        previous one
    current_block : Block
        The line currently being written
    blocks : list[str]
        Finished lines; a line may contain embedded newlines

    """

    def __init__(self) -> None:
        self.margin = INITIAL_CANVAS_MARGIN
        self.current_block = Block(0, Prefix())
        self.blocks: list[str] = []

    @property
    def left_margin(self) -> int:
        """Length of the current line's left indentation."""
        return self.current_block.prefix.current_padding

    def open_tag(self, tag: ElementStyle) -> None:
        """Register that ``tag`` has been opened."""
        if tag.display is Display.BLOCK:
            self.open_block(tag)

    def open_block(self, tag: ElementStyle) -> None:
        """Open a block element: flush pending text, register its prefix, write its top margin."""
        # a list item that has not written anything yet still owns its bullet
        if not self.flush_inline() and tag.has_list_bullet:
            self.write_unconsumed_bullet()
        self.current_block.prefix.register_prefix(tag.padding_inline, tag.list_bullet)

        required_margin = max(tag.previous_margin_after, tag.margin_before)
        self.write_margin(required_margin)

    def close_tag(self, tag: ElementStyle) -> None:
        """Register that ``tag`` has been closed."""
        if tag.display is Display.BLOCK:
            if not self.flush_inline() and tag.has_list_bullet:
                self.write_unconsumed_bullet()
            self.current_block.prefix.remove_last_prefix()
            self.close_block(tag)

    def close_block(self, tag: ElementStyle) -> None:
        """Write the bottom margin of the block element ``tag``."""
        self.write_margin(tag.margin_after)

    def write_margin(self, required_margin: int) -> None:
        """Ensure that at least ``required_margin`` blank lines precede the next content."""
        if required_margin > self.margin:
            required_newlines = required_margin - self.margin
            self.current_block.idx += required_newlines
            # joining the lines already contributes one line break
            self.blocks.append("\n" * (required_newlines - 1))
            self.margin = required_margin

    def write(self, tag: ElementStyle, text: str, whitespace: WhiteSpace | None = None) -> None:
        """Write ``text`` using ``whitespace`` or, if unset, the whitespace handling of ``tag``."""
        self.current_block.merge(text, whitespace or tag.whitespace)

    def write_newline(self) -> None:
        """Force a line break; an empty line is written if nothing is pending."""
        if not self.flush_inline():
            self.blocks.append("")
            self.current_block = self.current_block.new_block()

    def write_unconsumed_bullet(self) -> None:
        """Write a pending bullet of an element that has no content on its own line."""
        bullet = self.current_block.prefix.get_unconsumed_bullet()
        if bullet:
            self.blocks.append(bullet)
            self.current_block.idx += len(bullet)
            self.current_block = self.current_block.new_block()
            self.margin = 0

    def flush_inline(self) -> bool:
        """Move the content of the current block into ``blocks``.

        Returns
        -------
        bool
            True if content has been flushed, False if the current block was
            empty (in which case nothing changes).

        """
        if self.current_block.is_empty():
            return False

        self.blocks.append(self.current_block.get_content())
        self.current_block = self.current_block.new_block()
        self.margin = 0
        return True

    def get_text(self) -> str:
        """Flush pending content and return the canvas' text."""
        self.flush_inline()
        return "\n".join(self.blocks)
