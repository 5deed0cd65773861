"""python-talk2m exceptions."""

from __future__ import annotations


class Talk2MException(Exception):
    """Base exception for library errors."""


class InvalidConfigError(Talk2MException):
    """Exception for credential configurations that cannot be loaded."""
