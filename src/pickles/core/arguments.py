"""Flat argument bundle produced by an external argument parser."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class Arguments:
    """Already-parsed values the configuration store may overlay.

    Every field is optional; an empty string or None means "not given".
    """

    exclude_tags: str | None = ""
    hide_tags: str | None = ""
    system_under_test_name: str | None = ""
    test_results_format: str | None = ""
    language: str | None = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Arguments":
        """Build a bundle from a plain mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})
