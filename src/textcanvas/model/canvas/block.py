#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/canvas/block.py
"""The line of text currently being assembled on a canvas.

A block usually corresponds to one line of output. Preformatted content
merged into a block may span several physical lines; those are indented with
the prefix's padding so they stay aligned with the block.
"""

from __future__ import annotations

from textcanvas.model.canvas.prefix import Prefix
from textcanvas.model.element import WhiteSpace


class Block:
    """In-progress content of a single output line.

    Parameters
    ----------
    idx : int
        Running character index at which the block starts
    prefix : Prefix
        Indentation and bullet state shared by all blocks of a canvas

    Attributes
    ----------
    collapsible_whitespace : bool
        True if the content ends in a (virtual) collapsed space, i.e. the next
        whitespace character is dropped. A fresh block starts collapsible so
        that leading whitespace never reaches the output.

    """

    __slots__ = ("idx", "prefix", "_content", "collapsible_whitespace")

    def __init__(self, idx: int, prefix: Prefix):
        self.idx = idx
        self.prefix = prefix
        self._content = ""
        self.collapsible_whitespace = True

    def merge(self, text: str, whitespace: WhiteSpace | None) -> None:
        """Merge ``text`` into the block using the given whitespace handling."""
        if whitespace is WhiteSpace.PRE:
            self._merge_pre_text(text)
        else:
            self._merge_normal_text(text)

    def _merge_normal_text(self, text: str) -> None:
        # every whitespace run (including no-break spaces) becomes one space
        normalized: list[str] = []
        for char in text:
            if not char.isspace():
                normalized.append(char)
                self.collapsible_whitespace = False
            elif not self.collapsible_whitespace:
                normalized.append(" ")
                self.collapsible_whitespace = True

        if normalized:
            if self.is_empty():
                self._add(self.prefix.get_first())
            self._add("".join(normalized))

    def _merge_pre_text(self, text: str) -> None:
        # empty text leaves the bullet for the next content, as in the normal mode
        if text:
            self._add(self.prefix.get_first() + text.replace("\n", "\n" + self.prefix.rest))
        self.collapsible_whitespace = False

    def _add(self, text: str) -> None:
        self._content += text
        self.idx += len(text)

    def is_empty(self) -> bool:
        """Whether nothing has been written to the block yet."""
        return not self._content

    def get_content(self) -> str:
        """Return the block's text without a trailing collapsed space."""
        if self.collapsible_whitespace and self._content.endswith(" "):
            self._content = self._content[:-1]
            self.idx -= 1
        return self._content

    def new_block(self) -> Block:
        """Return the block that follows this one and reset the line prefix."""
        self.prefix.consumed = False
        return Block(idx=self.idx + 1, prefix=self.prefix)
