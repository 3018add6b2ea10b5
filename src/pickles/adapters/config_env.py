"""Env configuration adapter producing an argument bundle and structural settings."""

from __future__ import annotations

from ..config import Config, get_config
from ..core.arguments import Arguments
from ..core.configuration import Configuration
from ..core.formats import DocumentationFormat


def load_arguments(source: Config | None = None) -> Arguments:
    if source is None:
        source = get_config()
    return Arguments(
        exclude_tags=source.EXCLUDE_TAGS,
        hide_tags=source.HIDE_TAGS,
        system_under_test_name=source.SUT_NAME,
        test_results_format=source.TEST_RESULTS_FORMAT,
        language=source.LANGUAGE,
    )


def configure_from_env(configuration: Configuration, source: Config | None = None) -> Configuration:
    """Run the whole configuration phase from environment settings.

    Structural settings are assigned directly; the overlay fields go
    through ``apply_arguments`` last.
    """
    if source is None:
        source = get_config()

    if source.FEATURE_DIRECTORY:
        configuration.feature_folder = source.FEATURE_DIRECTORY
    if source.OUTPUT_DIRECTORY:
        configuration.output_folder = source.OUTPUT_DIRECTORY
    if source.DOCUMENTATION_FORMAT:
        configuration.documentation_format = DocumentationFormat.parse(source.DOCUMENTATION_FORMAT)
    if source.SUT_VERSION:
        configuration.system_under_test_version = source.SUT_VERSION

    if source.EXPERIMENTAL:
        configuration.enable_experimental_features()
    if source.ENABLE_COMMENTS:
        configuration.enable_comments()
    else:
        configuration.disable_comments()

    configuration.add_test_result_files(source.TEST_RESULTS_FILES)
    configuration.apply_arguments(load_arguments(source))
    return configuration
