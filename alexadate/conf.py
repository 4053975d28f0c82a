from functools import wraps

from .exceptions import SettingValidationError

default_settings = {
    "HEMISPHERE": "northern",
}

_SETTINGS_RULES = {
    "HEMISPHERE": {
        "type": str,
        "values": ("northern", "southern"),
    },
}


class Settings:
    """Control and configure default conversion behavior of the converter.

    Currently supported settings:

    * `HEMISPHERE`: ``"northern"`` (default) or ``"southern"``. Picks which
      built-in meteorological season dictionary is used when a converter is
      not given one explicitly.
    """

    def __init__(self, settings=None):
        values = dict(default_settings)
        if settings:
            for key in settings:
                if key not in default_settings:
                    raise SettingValidationError('"{}" is not a valid setting'.format(key))
            values.update(settings)
        for key, value in values.items():
            setattr(self, key, value)
        self._default = self.as_dict() == default_settings

    def replace(self, mod_settings=None, **kwds):
        for key, value in kwds.items():
            if value is None:
                raise TypeError('Invalid {{"{}": {}}}'.format(key, value))

        kwds.update(mod_settings or {})
        if not kwds:
            return self

        values = self.as_dict()
        values.update(kwds)
        return Settings(values)

    def as_dict(self):
        return {key: getattr(self, key) for key in default_settings}

    def __eq__(self, other):
        return isinstance(other, Settings) and self.as_dict() == other.as_dict()

    def __repr__(self):
        return "Settings(%r)" % self.as_dict()


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if kwargs.get("settings") is None:
            kwargs["settings"] = settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(mod_settings=kwargs["settings"])

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        return f(*args, **kwargs)

    return wrapper


def check_settings(settings):
    """Check if provided settings are valid, if not it raises `SettingValidationError`."""
    for key, value in settings.as_dict().items():
        rule = _SETTINGS_RULES[key]
        if not isinstance(value, rule["type"]):
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    key, rule["type"].__name__, type(value).__name__
                )
            )
        if value not in rule["values"]:
            raise SettingValidationError(
                '"{}" is not a valid value for "{}", it should be: "{}"'.format(
                    value, key, '" or "'.join(rule["values"])
                )
            )
