#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcanvas/css/__init__.py
"""CSS profiles and inline style handling."""

from textcanvas.css.parse import apply_attributes, attr_style, get_em
from textcanvas.css.profiles import CSS_PROFILES, RELAXED_CSS_PROFILE, STRICT_CSS_PROFILE

__all__ = [
    "CSS_PROFILES",
    "RELAXED_CSS_PROFILE",
    "STRICT_CSS_PROFILE",
    "apply_attributes",
    "attr_style",
    "get_em",
]
