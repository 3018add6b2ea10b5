"""Errors raised by the configuration core."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An argument value has the wrong shape and cannot be applied."""
