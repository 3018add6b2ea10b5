import pytest

from pickles.core.configuration import Configuration
from pickles.core.feature_flags import FeatureFlags

from fakes import _Diagnostics, _FileSystem, _Languages


@pytest.fixture
def diagnostics():
    return _Diagnostics()


@pytest.fixture
def flags():
    return FeatureFlags()


@pytest.fixture
def make_configuration(diagnostics, flags):
    def _make(existing=(), default_language="en"):
        return Configuration(
            _Languages(default_language),
            file_system=_FileSystem(existing),
            diagnostics=diagnostics,
            feature_flags=flags,
        )

    return _make
