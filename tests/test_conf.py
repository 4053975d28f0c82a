import pytest

from alexadate.conf import Settings, apply_settings, check_settings, settings
from alexadate.exceptions import SettingValidationError


@apply_settings
def _settings_seen(settings=None):
    return settings


class TestSettings:

    def test_defaults(self):
        assert settings.HEMISPHERE == "northern"
        assert settings._default

    def test_replace(self):
        southern = settings.replace(HEMISPHERE="southern")
        assert southern.HEMISPHERE == "southern"
        assert not southern._default
        assert settings.HEMISPHERE == "northern"

    def test_replace_with_defaults_stays_default(self):
        assert settings.replace({"HEMISPHERE": "northern"})._default

    def test_replace_nothing(self):
        assert settings.replace() is settings

    def test_replace_none_value(self):
        with pytest.raises(TypeError):
            settings.replace(HEMISPHERE=None)

    def test_unknown_key(self):
        with pytest.raises(SettingValidationError, match='"FOO" is not a valid setting'):
            Settings({"FOO": 1})

    def test_check_settings(self):
        with pytest.raises(SettingValidationError, match='it should be: "northern" or "southern"'):
            check_settings(Settings({"HEMISPHERE": "eastern"}))
        with pytest.raises(SettingValidationError, match='"HEMISPHERE" must be "str", not "int".'):
            check_settings(Settings({"HEMISPHERE": 3}))


class TestApplySettings:

    def test_default(self):
        assert _settings_seen() is settings

    def test_dict(self):
        assert _settings_seen(settings={"HEMISPHERE": "southern"}).HEMISPHERE == "southern"

    def test_instance(self):
        southern = Settings({"HEMISPHERE": "southern"})
        assert _settings_seen(settings=southern) is southern

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="settings can only be either dict or instance of Settings class"):
            _settings_seen(settings=["southern"])
