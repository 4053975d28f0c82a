__version__ = "1.0.0"

from .conf import apply_settings, Settings
from .converter import AlexaDateConverter
from .exceptions import (
    AlexaDateError,
    InvalidDateStringError,
    DateStringFormatError,
    SettingValidationError,
)
from .patterns import Category
from .seasons import (
    SeasonCode,
    SeasonAnchor,
    SeasonStarts,
    NORTHERN_METEOROLOGICAL_SEASON_STARTS,
    SOUTHERN_METEOROLOGICAL_SEASON_STARTS,
    DEFAULT_SEASON_STARTS,
)

_default_converter = AlexaDateConverter()


def _converter_for(settings):
    if settings._default:
        return _default_converter
    return AlexaDateConverter(settings=settings)


@apply_settings
def classify(date_string, settings=None):
    """Classify an AMAZON.DATE slot value.

    :param date_string:
        An AMAZON.DATE slot value, e.g. "2015-11-24", "2015-W48-WE" or "201X".
    :type date_string: str

    :return: The matching :class:`alexadate.patterns.Category`, or None.
    """
    if not isinstance(date_string, str):
        raise TypeError("Input type must be str")
    return _converter_for(settings).classify(date_string)


@apply_settings
def convert_to_day(date_string, settings=None):
    """Convert an AMAZON.DATE slot value to a ``datetime.date``.

    :param date_string:
        An AMAZON.DATE slot value.
    :type date_string: str

    :param settings:
        Configure customized behavior using settings defined in :mod:`alexadate.conf.Settings`.
    :type settings: dict

    :return: The first day of the period the value names.
    :rtype: datetime.date

    :raises:
        ``InvalidDateStringError``: the value fits no AMAZON.DATE category,
        ``DateStringFormatError``: the value is malformed for its category,
        ``SettingValidationError``: A provided setting is not valid.

    Example usage::

        >>> import alexadate
        >>> alexadate.convert_to_day("2009-W01")
        datetime.date(2009, 1, 5)
        >>> alexadate.convert_to_day("2009-SU")
        datetime.date(2009, 6, 1)
        >>> alexadate.convert_to_day("2009-SU", settings={"HEMISPHERE": "southern"})
        datetime.date(2009, 2, 1)
    """
    return _converter_for(settings).convert_to_day(date_string)
