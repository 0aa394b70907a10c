"""Pytest configuration and shared fixtures for the textcanvas test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from textcanvas.logging_utils import PACKAGE_LOGGER, TRACE_LOGGERS
from textcanvas.model import Canvas, ElementStyle, WhiteSpace
from textcanvas.options import ParserConfig

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _clear_textcanvas_env(monkeypatch):
    """Remove TEXTCANVAS_* variables so that the environment cannot leak into tests."""
    for key in list(os.environ):
        if key.startswith("TEXTCANVAS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def restore_logging():
    """Undo the logger changes made by ``configure_logging``."""
    names = (PACKAGE_LOGGER, *TRACE_LOGGERS)
    saved = {name: logging.getLogger(name) for name in names}
    state = {name: (lg.level, lg.propagate, list(lg.handlers)) for name, lg in saved.items()}
    yield saved[PACKAGE_LOGGER]
    for name, lg in saved.items():
        level, propagate, handlers = state[name]
        for handler in lg.handlers:
            if handler not in handlers:
                handler.close()
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


@pytest.fixture
def strict_config() -> ParserConfig:
    """Configuration using the browser-like CSS profile."""
    return ParserConfig(css_profile="strict")


@pytest.fixture
def relaxed_config() -> ParserConfig:
    """Configuration using the relaxed CSS profile."""
    return ParserConfig(css_profile="relaxed")


@pytest.fixture
def canvas() -> Canvas:
    """A fresh canvas."""
    return Canvas()


@pytest.fixture
def bound_style(canvas) -> ElementStyle:
    """An inline style with normal whitespace handling bound to ``canvas``."""
    return ElementStyle(tag="body", whitespace=WhiteSpace.NORMAL).with_canvas(canvas)


@pytest.fixture
def sample_html() -> str:
    """A small document exercising blocks, lists and a table."""
    return """<html>
<head><title>Ignored</title><style>p { color: red }</style></head>
<body>
<h1>Report</h1>
<p>Intro text
   spanning lines.</p>
<ul>
  <li>first</li>
  <li>second</li>
</ul>
<table>
  <tr><th>Name</th><th>Count</th></tr>
  <tr><td>apples</td><td align="right">3</td></tr>
</table>
<p>Done.</p>
</body>
</html>
"""
