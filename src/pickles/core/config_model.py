"""Core configuration model (read-only view for the rendering pipeline)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .formats import DocumentationFormat, TestResultsFormat


@dataclass(frozen=True)
class ConfigurationSnapshot:
    feature_folder: Any
    output_folder: Any
    documentation_format: DocumentationFormat
    test_results_files: tuple
    system_under_test_name: str
    system_under_test_version: str
    exclude_tags: str
    hide_tags: str
    test_results_format: TestResultsFormat | None
    language: str
    should_include_experimental_features: bool
    should_enable_comments: bool

    @property
    def has_test_results(self) -> bool:
        return len(self.test_results_files) > 0

    @property
    def test_results_file(self):
        """Primary result file; raises IndexError when none were registered."""
        if not self.test_results_files:
            raise IndexError("No test result files have been registered")
        return self.test_results_files[0]
