"""Custom argparse Action classes for the textcanvas CLI.

The actions read ``TEXTCANVAS_<DEST>`` environment variables and use their
values as defaults. Options that are neither given on the command line nor
set in the environment keep a default of ``None`` so that configuration file
values can be told apart from explicit settings.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os

from textcanvas.constants import ENV_VAR_PREFIX

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Name of the environment variable providing the default of ``dest``."""
    return f"{ENV_VAR_PREFIX}{dest.upper().replace('-', '_')}"


def _dest_from_option_strings(option_strings, dest=None):
    if dest is not None:
        return dest
    # '--html-parser' -> 'html_parser'
    for option in option_strings:
        if option.startswith("--"):
            return option[2:].replace("-", "_")
    for option in option_strings:
        if option.startswith("-"):
            return option[1:]
    return None


class EnvironmentAwareAction(argparse.Action):
    """Store action that supports environment variable defaults."""

    def __init__(self, option_strings, dest=None, **kwargs):
        dest = _dest_from_option_strings(option_strings, dest)

        if dest:
            env_key = env_key_for(dest)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                try:
                    kwargs["default"] = self._convert_env_value(env_value, kwargs)
                except (ValueError, TypeError, argparse.ArgumentTypeError) as e:
                    logger.warning("Invalid environment variable %s=%s: %s", env_key, env_value, e)

        super().__init__(option_strings, dest, **kwargs)

    @staticmethod
    def _convert_env_value(env_value, kwargs):
        """Convert an environment variable string like a command line value."""
        value_type = kwargs.get("type")
        value = value_type(env_value) if value_type is not None else env_value
        choices = kwargs.get("choices")
        if choices is not None and value not in choices:
            raise ValueError(f"expected one of {', '.join(map(str, choices))}")
        return value

    def __call__(self, parser, namespace, values, option_string=None):
        """Standard action processing."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """Boolean flag that supports environment variable defaults."""

    def __init__(self, option_strings, dest=None, **kwargs):
        dest = _dest_from_option_strings(option_strings, dest)
        kwargs.setdefault("default", None)

        if dest:
            env_value = os.environ.get(env_key_for(dest))
            if env_value is not None:
                kwargs["default"] = env_value.strip().lower() in TRUE_VALUES

        super().__init__(option_strings, dest, **kwargs)
