#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the textcanvas library.

This module centralizes the hardcoded values used across textcanvas so
that the rendering engine, the options dataclasses and the command line
interface agree on a single set of defaults.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and CLI
2. Rendering Defaults - Default values of ``ParserConfig``
3. Layout Constants - Values used by the canvas and table layout
4. CSS Constants - Values used when interpreting inline styles
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

CssProfileName = Literal["strict", "relaxed"]
HtmlParser = Literal["html.parser", "lxml", "html5lib"]

CSS_PROFILE_NAMES: tuple[str, ...] = ("strict", "relaxed")
HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

# Parser backends that are not bundled with Python, as (install_name, import_name)
HTML_PARSER_PACKAGES: dict[str, tuple[str, str]] = {
    "lxml": ("lxml", "lxml"),
    "html5lib": ("html5lib", "html5lib"),
}

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_CSS_PROFILE: CssProfileName = "relaxed"
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_DISPLAY_LINKS = False
DEFAULT_DISPLAY_ANCHORS = False
DEFAULT_DISPLAY_IMAGES = False
DEFAULT_DEDUPLICATE_CAPTIONS = False
DEFAULT_TABLE_CELL_SEPARATOR = "  "
DEFAULT_INPUT_ENCODING = "utf-8"

# =============================================================================
# Layout Constants
# =============================================================================

# Margin reported by a fresh canvas; large enough that the first block of a
# surface never emits leading blank lines.
INITIAL_CANVAS_MARGIN = 1000

# Bullets for unordered lists, rotated by nesting depth
UL_BULLETS: tuple[str, ...] = ("* ", "+ ", "o ", "- ")

# Format of ordered list numbers
OL_BULLET_FORMAT = "{0}. "

# =============================================================================
# CSS Constants
# =============================================================================

# Units that already are expressed in lines/characters
CSS_RELATIVE_UNITS = frozenset({"em", "qem", "rem"})

# Divisor used to convert absolute units (px, pt, ...) into lines/characters
CSS_ABSOLUTE_UNIT_DIVISOR = 8

WHITE_SPACE_NORMAL_VALUES = frozenset({"normal", "nowrap"})
WHITE_SPACE_PRE_VALUES = frozenset({"pre", "pre-line", "pre-wrap"})

# Vendor prefix stripped from style declarations
CSS_VENDOR_PREFIX = "-webkit-"

# =============================================================================
# CLI / Configuration
# =============================================================================

ENV_VAR_PREFIX = "TEXTCANVAS_"
CONFIG_FILENAMES: tuple[str, ...] = (
    ".textcanvas.toml",
    ".textcanvas.yaml",
    ".textcanvas.yml",
    ".textcanvas.json",
)
PYPROJECT_TOOL_SECTION = "textcanvas"
