"""Process-wide switch for experimental features.

Other components consult the shared instance to decide whether an
experimental behaviour is available. The configuration store receives it
by reference, so tests can pass an isolated ``FeatureFlags`` instead.
"""

from __future__ import annotations

from enum import Enum, auto
import logging


logger = logging.getLogger(__name__)


class FeatureMode(Enum):
    DEFAULT = auto()
    ALWAYS_ENABLED = auto()
    ALWAYS_DISABLED = auto()


class FeatureFlags:
    def __init__(self):
        self._mode = FeatureMode.DEFAULT
        self._defaults: dict[str, bool] = {}

    @property
    def mode(self) -> FeatureMode:
        return self._mode

    def register(self, name: str, enabled: bool = False) -> None:
        """Record the state a feature has while no global override is active."""
        self._defaults[name] = enabled

    def is_enabled(self, name: str) -> bool:
        if self._mode is FeatureMode.ALWAYS_ENABLED:
            return True
        if self._mode is FeatureMode.ALWAYS_DISABLED:
            return False
        return self._defaults.get(name, False)

    def force_all_enabled(self) -> None:
        self._set_mode(FeatureMode.ALWAYS_ENABLED)

    def force_all_disabled(self) -> None:
        self._set_mode(FeatureMode.ALWAYS_DISABLED)

    def reset(self) -> None:
        self._set_mode(FeatureMode.DEFAULT)

    def _set_mode(self, mode: FeatureMode) -> None:
        if mode is not self._mode:
            logger.debug("Feature flags: %s -> %s", self._mode.name, mode.name)
        self._mode = mode


# Shared process-wide instance (last writer wins)
feature_flags = FeatureFlags()


def get_feature_flags() -> FeatureFlags:
    return feature_flags
