"""Environment configuration for Pickles"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def parse_bool(value, name: str) -> bool:
    """Strict boolean parsing; accepts true/false/1/0/yes/no (case-insensitive)."""
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in {"true", "1", "yes"}:
        return True
    if normalized in {"false", "0", "no"}:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


class Config:
    """Settings read from PICKLES_* environment variables"""

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ

        # Argument overlay
        self.EXCLUDE_TAGS = env.get("PICKLES_EXCLUDE_TAGS", "")
        self.HIDE_TAGS = env.get("PICKLES_HIDE_TAGS", "")
        self.SUT_NAME = env.get("PICKLES_SUT_NAME", "")
        self.TEST_RESULTS_FORMAT = env.get("PICKLES_TEST_RESULTS_FORMAT", "")
        self.LANGUAGE = env.get("PICKLES_LANGUAGE", "")

        # Structural settings
        self.FEATURE_DIRECTORY = env.get("PICKLES_FEATURE_DIRECTORY", "")
        self.OUTPUT_DIRECTORY = env.get("PICKLES_OUTPUT_DIRECTORY", "")
        self.DOCUMENTATION_FORMAT = env.get("PICKLES_DOCUMENTATION_FORMAT", "")
        self.SUT_VERSION = env.get("PICKLES_SUT_VERSION", "")
        # Multiple files separated by ';'
        self.TEST_RESULTS_FILES = [
            part.strip()
            for part in env.get("PICKLES_TEST_RESULTS_FILES", "").split(";")
            if part.strip()
        ]
        self.EXPERIMENTAL = parse_bool(env.get("PICKLES_EXPERIMENTAL", "false"), "PICKLES_EXPERIMENTAL")
        self.ENABLE_COMMENTS = parse_bool(
            env.get("PICKLES_ENABLE_COMMENTS", "true"), "PICKLES_ENABLE_COMMENTS"
        )

        self.DEBUG = parse_bool(env.get("PICKLES_DEBUG", "false"), "PICKLES_DEBUG")


# Cached default instance, read from the environment on first use
_config: Config | None = None


def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config


def clear_config_cache() -> None:
    """Forget the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None


def configure_logging(source: Config | None = None) -> None:
    if source is None:
        source = get_config()
    logging.basicConfig(
        level=logging.DEBUG if source.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
