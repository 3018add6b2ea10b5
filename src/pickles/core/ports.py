"""Core ports (interfaces) for Pickles configuration.

Everything the configuration store needs from outside itself: where the
default language comes from, how result files are checked, where skipped
files get reported, and the global experimental switch. Tests hand the
store in-memory fakes of these.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LanguageRegistry(Protocol):
    """Source of the default feature-file language."""

    def default_language(self) -> str:
        """Return the language code used when none is supplied."""


@runtime_checkable
class FileSystem(Protocol):
    """File existence oracle."""

    def exists(self, path) -> bool:
        """Return True if the file exists; never raises."""

    def full_name(self, path) -> str:
        """Return the absolute path used in diagnostic messages."""


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives non-fatal problems found while configuring."""

    def error(self, message: str, *args) -> None:
        """Record an error-level message with lazy formatting args."""


@runtime_checkable
class FeatureSwitch(Protocol):
    """Process-wide switch consulted for experimental behaviour."""

    def force_all_enabled(self) -> None:
        """Treat every feature as enabled."""

    def force_all_disabled(self) -> None:
        """Treat every feature as disabled."""
