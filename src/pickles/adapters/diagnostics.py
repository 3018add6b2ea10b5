"""Diagnostic sink adapter backed by stdlib logging."""

from __future__ import annotations

import logging


class LoggingDiagnosticSink:
    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger("pickles.diagnostics")

    def error(self, message: str, *args) -> None:
        self._logger.error(message, *args)
