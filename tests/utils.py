"""Test utilities for the textcanvas test suite.

This module provides helpers for building canvases, table cells and tables
in a known state, and for rendering HTML snippets.
"""

from bs4 import BeautifulSoup

from textcanvas.model import Table, TableCell
from textcanvas.options import ParserConfig
from textcanvas.renderer import HtmlTextRenderer


def make_cell(*lines: str, **kwargs) -> TableCell:
    """Create a table cell whose canvas already holds ``lines``."""
    cell = TableCell(**kwargs)
    cell.canvas.blocks.extend(lines)
    return cell


def make_table(rows, cell_separator: str = "  ") -> Table:
    """Create a table from a list of rows, each a list of cell texts."""
    table = Table(cell_separator)
    for row in rows:
        table.add_row()
        for text in row:
            table.add_cell(make_cell(text))
    return table


def render(html: str, **options) -> str:
    """Render ``html`` parsed with the bundled ``html.parser`` tree builder."""
    soup = BeautifulSoup(html, "html.parser")
    return HtmlTextRenderer(ParserConfig(**options)).render(soup)
