from pickles.core.feature_flags import FeatureFlags, FeatureMode, feature_flags, get_feature_flags


def test_default_mode_uses_registered_state():
    flags = FeatureFlags()
    flags.register("gherkin_tables", enabled=True)

    assert flags.mode is FeatureMode.DEFAULT
    assert flags.is_enabled("gherkin_tables") is True
    assert flags.is_enabled("unknown") is False


def test_forced_modes_override_registration():
    flags = FeatureFlags()
    flags.register("gherkin_tables", enabled=True)

    flags.force_all_disabled()
    assert flags.is_enabled("gherkin_tables") is False

    flags.force_all_enabled()
    assert flags.is_enabled("unknown") is True

    flags.reset()
    assert flags.mode is FeatureMode.DEFAULT
    assert flags.is_enabled("unknown") is False


def test_shared_instance():
    assert get_feature_flags() is feature_flags
