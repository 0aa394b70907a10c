#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/canvas/prefix.py
"""Left indentation and list bullets of canvas lines.

Every open block element registers its inline padding and (optional) list
bullet. The first line written within a block is prefixed with the total
padding and the innermost pending bullet; subsequent physical lines of
preformatted content only receive the padding.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class PrefixItem:
    """Padding and bullet contributed by one open block element."""

    padding: int
    bullet: str = ""


class Prefix:
    """Stack of paddings and bullets for the currently open block elements.

    Attributes
    ----------
    current_padding : int
        Sum of the paddings of all registered items
    items : list[PrefixItem]
        One entry per open block element, innermost last
    consumed : bool
        Whether the prefix of the current line has already been emitted

    """

    def __init__(self) -> None:
        self.current_padding = 0
        self.items: list[PrefixItem] = []
        self.consumed = False

    def register_prefix(self, padding_inline: int, bullet: str) -> None:
        """Register the padding and bullet of a block element that has been opened."""
        if padding_inline < 0:
            logger.warning("Ignoring negative inline padding %d", padding_inline)
            padding_inline = 0
        self.current_padding += padding_inline
        self.items.append(PrefixItem(padding_inline, bullet))

    def remove_last_prefix(self) -> None:
        """Remove the item registered by the most recently opened block element."""
        if not self.items:
            logger.warning("Unbalanced prefix removal ignored")
            return
        self.current_padding = max(0, self.current_padding - self.items.pop().padding)

    def pop_next_bullet(self) -> str:
        """Take the innermost pending bullet, or return an empty string.

        A bullet can only be taken once; the slot is cleared afterwards.
        """
        for item in reversed(self.items):
            if item.bullet:
                bullet = item.bullet
                item.bullet = ""
                return bullet
        return ""

    def get_first(self) -> str:
        """Prefix of the first line of a block: padding plus pending bullet.

        Returns an empty string once the prefix of the current line has been
        consumed.
        """
        if self.consumed:
            return ""

        self.consumed = True
        bullet = self.pop_next_bullet()
        return " " * (self.current_padding - len(bullet)) + bullet

    def get_unconsumed_bullet(self) -> str:
        """Bullet of an element that has been closed without writing content.

        The bullet is padded relative to the innermost item's padding level.
        """
        if self.consumed or not self.items:
            return ""

        bullet = self.pop_next_bullet()
        if not bullet:
            return ""

        padding = self.current_padding - self.items[-1].padding
        return " " * (padding - len(bullet)) + bullet

    @property
    def rest(self) -> str:
        """Prefix of subsequent physical lines within a block (padding only)."""
        return " " * self.current_padding
