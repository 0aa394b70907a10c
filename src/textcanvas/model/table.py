#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/table.py
"""Text-mode table layout.

Tables are collected while the document is traversed: every ``<td>``/``<th>``
element writes its content to the :class:`Canvas` owned by a
:class:`TableCell`. Once the table element is closed, :meth:`Table.get_text`
lays the table out in two passes:

1. Row heights: all cells are split into one entry per visual line and padded
   to the height of the tallest cell of their row, honoring the cell's
   vertical alignment.
2. Column widths: every cell is padded to the width of the widest cell of its
   column, honoring the cell's horizontal alignment.

Cells are never truncated and rows with fewer cells than others are not
back-filled.
"""

from __future__ import annotations

import logging

from textcanvas.constants import DEFAULT_TABLE_CELL_SEPARATOR
from textcanvas.model.canvas import Canvas
from textcanvas.model.element import HorizontalAlignment, VerticalAlignment
from textcanvas.utils.text import pad_center, pad_left, pad_right, split_lines

logger = logging.getLogger(__name__)


class TableCell:
    """A table cell: a nested canvas plus its alignment.

    Parameters
    ----------
    align : HorizontalAlignment, default HorizontalAlignment.LEFT
        Horizontal alignment applied by :meth:`set_width`
    valign : VerticalAlignment, default VerticalAlignment.MIDDLE
        Vertical alignment applied by :meth:`set_height`

    Attributes
    ----------
    canvas : Canvas
        The surface the cell's content is written to
    line_width : list[int]
        Width of every line before horizontal padding was applied
    vertical_padding : int
        Number of blank lines prepended by vertical alignment

    """

    def __init__(
        self,
        align: HorizontalAlignment = HorizontalAlignment.LEFT,
        valign: VerticalAlignment = VerticalAlignment.MIDDLE,
    ):
        self.canvas = Canvas()
        self.align = align
        self.valign = valign
        self._width: int | None = None
        self.line_width: list[int] = []
        self.vertical_padding = 0

    @property
    def blocks(self) -> list[str]:
        """The lines rendered into the cell."""
        return self.canvas.blocks

    @property
    def height(self) -> int:
        """Number of lines of the cell; an empty cell still occupies one line."""
        return len(self.canvas.blocks) or 1

    @property
    def width(self) -> int:
        """The width set by :meth:`set_width`, or the length of the longest line."""
        if self._width is not None:
            return self._width
        return max((len(line) for block in self.canvas.blocks for line in split_lines(block)), default=0)

    def normalize_blocks(self) -> int:
        """Split multi-line blocks into single lines.

        Returns
        -------
        int
            The height of the normalized cell

        """
        self.canvas.flush_inline()
        lines = [line for block in self.canvas.blocks for line in split_lines(block)]
        self.canvas.blocks = lines or [""]
        return len(self.canvas.blocks)

    def set_height(self, height: int) -> None:
        """Pad the cell with blank lines until it is ``height`` lines high."""
        missing = height - len(self.canvas.blocks)
        if missing <= 0:
            return

        if self.valign is VerticalAlignment.BOTTOM:
            prepend, append = missing, 0
        elif self.valign is VerticalAlignment.MIDDLE:
            prepend, append = missing // 2, (missing + 1) // 2
        else:
            prepend, append = 0, missing

        self.vertical_padding = prepend
        self.canvas.blocks = [""] * prepend + self.canvas.blocks + [""] * append

    def set_width(self, width: int) -> None:
        """Pad every line of the cell to ``width`` characters."""
        self._width = width
        self.line_width = [len(line) for line in self.canvas.blocks]

        if self.align is HorizontalAlignment.RIGHT:
            pad = pad_left
        elif self.align is HorizontalAlignment.CENTER:
            pad = pad_center
        else:
            pad = pad_right
        self.canvas.blocks = [pad(line, width) for line in self.canvas.blocks]


class TableRow:
    """An ordered sequence of table cells."""

    def __init__(self, cell_separator: str = DEFAULT_TABLE_CELL_SEPARATOR):
        self.columns: list[TableCell] = []
        self.cell_separator = cell_separator

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def width(self) -> int:
        """Width of the row including cell separators."""
        if not self.columns:
            return 0
        return sum(cell.width for cell in self.columns) + len(self.cell_separator) * (len(self.columns) - 1)

    def get_text(self) -> str:
        """Join the cells line by line; all cells are expected to share one height."""
        if not self.columns:
            return ""

        height = self.columns[-1].height
        lines = [self.cell_separator.join(cell.blocks[index] for cell in self.columns) for index in range(height)]
        return "\n".join(lines)


class Table:
    """A table under construction.

    Parameters
    ----------
    cell_separator : str, default "  "
        String placed between adjacent cells of a row

    """

    def __init__(self, cell_separator: str = DEFAULT_TABLE_CELL_SEPARATOR):
        self.rows: list[TableRow] = []
        self.cell_separator = cell_separator

    def add_row(self) -> None:
        """Append an empty row."""
        self.rows.append(TableRow(self.cell_separator))

    def add_cell(self, cell: TableCell) -> None:
        """Append ``cell`` to the last row, creating the row if none exists yet."""
        if not self.rows:
            self.add_row()
        self.rows[-1].columns.append(cell)

    def get_text(self) -> str:
        """Lay out the table and return its text, terminated by a newline."""
        if not self.rows:
            return "\n"

        self._set_row_height()
        self._set_column_width()
        logger.debug("Laid out table with %d rows and %d columns", len(self.rows), max(len(row) for row in self.rows))

        return "\n".join(row.get_text() for row in self.rows) + "\n"

    def _set_row_height(self) -> None:
        for row in self.rows:
            height = max((cell.normalize_blocks() for cell in row.columns), default=0)
            for cell in row.columns:
                cell.set_height(height)

    def _set_column_width(self) -> None:
        column_count = max(len(row) for row in self.rows)
        for index in range(column_count):
            cells = [row.columns[index] for row in self.rows if len(row) > index]
            width = max(cell.width for cell in cells)
            for cell in cells:
                cell.set_width(width)
