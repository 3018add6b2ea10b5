"""Runtime configuration store for Pickles.

Accumulates settings from direct assignment and from a parsed argument
bundle during start-up, then serves as a read-only view for the
documentation pipeline. Collaborators are injected via ports; omitted ones
fall back to the local adapters.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from .arguments import Arguments
from .config_model import ConfigurationSnapshot
from .feature_flags import get_feature_flags
from .formats import DocumentationFormat, TestResultsFormat
from .ports import DiagnosticSink, FeatureSwitch, FileSystem, LanguageRegistry


logger = logging.getLogger(__name__)

MISSING_RESULT_FILE_MESSAGE = "A test result file could not be found, it will be skipped: %s"


class Configuration:
    """Settings for a single documentation run."""

    def __init__(
        self,
        language_registry: LanguageRegistry | None = None,
        *,
        file_system: FileSystem | None = None,
        diagnostics: DiagnosticSink | None = None,
        feature_flags: FeatureSwitch | None = None,
    ):
        if language_registry is None:
            from ..adapters.languages import LanguageServicesRegistry

            language_registry = LanguageServicesRegistry()
        if file_system is None:
            from ..adapters.filesystem import LocalFileSystem

            file_system = LocalFileSystem()
        if diagnostics is None:
            from ..adapters.diagnostics import LoggingDiagnosticSink

            diagnostics = LoggingDiagnosticSink()

        self._file_system = file_system
        self._diagnostics = diagnostics
        self._feature_flags = feature_flags if feature_flags is not None else get_feature_flags()

        self._test_results_files: list = []
        self._language: str = language_registry.default_language()
        self._exclude_tags: str = ""
        self._hide_tags: str = ""
        self._test_results_format: TestResultsFormat | None = None
        self._should_include_experimental_features = False
        self._should_enable_comments = True

        self.feature_folder = None
        self.output_folder = None
        self.documentation_format = DocumentationFormat.HTML
        self.system_under_test_name: str = ""
        self.system_under_test_version: str = ""

    # Test results

    @property
    def has_test_results(self) -> bool:
        return len(self._test_results_files) > 0

    @property
    def test_results_file(self):
        """The primary (first registered) result file.

        Raises:
            IndexError: if no result file has been registered.
        """
        if not self._test_results_files:
            raise IndexError("No test result files have been registered")
        return self._test_results_files[0]

    @property
    def test_results_files(self) -> tuple:
        return tuple(self._test_results_files)

    def add_test_result_file(self, path) -> None:
        self._add_test_result_file_if_it_exists(path)

    def add_test_result_files(self, paths: Iterable | None) -> None:
        for path in paths or ():
            self._add_test_result_file_if_it_exists(path)

    def _add_test_result_file_if_it_exists(self, path) -> None:
        if self._file_system.exists(path):
            self._test_results_files.append(path)
        else:
            self._diagnostics.error(MISSING_RESULT_FILE_MESSAGE, self._file_system.full_name(path))

    # Toggles

    @property
    def should_include_experimental_features(self) -> bool:
        return self._should_include_experimental_features

    def enable_experimental_features(self) -> None:
        self._should_include_experimental_features = True
        self._feature_flags.force_all_enabled()

    def disable_experimental_features(self) -> None:
        self._should_include_experimental_features = False
        self._feature_flags.force_all_disabled()

    @property
    def should_enable_comments(self) -> bool:
        return self._should_enable_comments

    def enable_comments(self) -> None:
        self._should_enable_comments = True

    def disable_comments(self) -> None:
        self._should_enable_comments = False

    # Argument overlay

    @property
    def exclude_tags(self) -> str:
        return self._exclude_tags

    @property
    def hide_tags(self) -> str:
        return self._hide_tags

    @property
    def test_results_format(self) -> TestResultsFormat | None:
        return self._test_results_format

    @property
    def language(self) -> str:
        return self._language

    def apply_arguments(self, arguments: Arguments) -> None:
        """Overlay the non-empty fields of ``arguments`` onto the current settings.

        Fields are applied one at a time, in declaration order. An unknown
        test-results format raises InvalidArgumentError; fields applied
        before it stay applied and later ones are skipped.
        """
        if arguments.exclude_tags:
            self._exclude_tags = arguments.exclude_tags
        if arguments.hide_tags:
            self._hide_tags = arguments.hide_tags
        if arguments.system_under_test_name:
            self.system_under_test_name = arguments.system_under_test_name
        if arguments.test_results_format:
            self._test_results_format = TestResultsFormat.parse(arguments.test_results_format)
        if arguments.language:
            self._language = arguments.language

        logger.debug(
            "Arguments applied: language=%s test_results_format=%s",
            self._language,
            self._test_results_format.token if self._test_results_format else None,
        )

    def snapshot(self) -> ConfigurationSnapshot:
        return ConfigurationSnapshot(
            feature_folder=self.feature_folder,
            output_folder=self.output_folder,
            documentation_format=self.documentation_format,
            test_results_files=self.test_results_files,
            system_under_test_name=self.system_under_test_name,
            system_under_test_version=self.system_under_test_version,
            exclude_tags=self._exclude_tags,
            hide_tags=self._hide_tags,
            test_results_format=self._test_results_format,
            language=self._language,
            should_include_experimental_features=self._should_include_experimental_features,
            should_enable_comments=self._should_enable_comments,
        )
