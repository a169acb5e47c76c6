"""Exceptions raised by board construction and parsing."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An absent or malformed board was passed to a constructor."""


class BoardFormatError(InvalidArgumentError):
    """Board text could not be parsed into a grid."""
