#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/__init__.py
"""Layout model of the text renderer.

The model consists of the element styles pushed while traversing a document,
the canvases that collect the rendered lines and the table layout engine.
"""

from textcanvas.model.element import (
    DEFAULT_ELEMENT_STYLE,
    Display,
    ElementStyle,
    HorizontalAlignment,
    VerticalAlignment,
    WhiteSpace,
    refine,
)
from textcanvas.model.canvas import Block, Canvas, Prefix, PrefixItem
from textcanvas.model.table import Table, TableCell, TableRow

__all__ = [
    "DEFAULT_ELEMENT_STYLE",
    "Block",
    "Canvas",
    "Display",
    "ElementStyle",
    "HorizontalAlignment",
    "Prefix",
    "PrefixItem",
    "Table",
    "TableCell",
    "TableRow",
    "VerticalAlignment",
    "WhiteSpace",
    "refine",
]
