#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/utils/__init__.py
"""Utility modules for the textcanvas package.

This package contains the string helpers used by the layout engine and the
input handling shared by the public API and the command line interface.
"""

from textcanvas.utils.text import is_blank, pad_center, pad_left, pad_right, split_bounded, split_lines

__all__ = [
    "is_blank",
    "pad_center",
    "pad_left",
    "pad_right",
    "split_bounded",
    "split_lines",
]
