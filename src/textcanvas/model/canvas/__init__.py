#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/model/canvas/__init__.py
"""Line buffer, current line and indentation stack of a rendering surface."""

from textcanvas.model.canvas.block import Block
from textcanvas.model.canvas.canvas import Canvas
from textcanvas.model.canvas.prefix import Prefix, PrefixItem

__all__ = ["Block", "Canvas", "Prefix", "PrefixItem"]
