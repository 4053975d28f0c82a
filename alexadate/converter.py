import logging
import warnings
from datetime import date
from typing import Optional

from .conf import apply_settings, check_settings
from .exceptions import InvalidDateStringError
from .patterns import Category, classify
from .resolvers import (
    day_to_date,
    decade_to_date,
    month_to_date,
    season_to_date,
    week_to_date,
    weekend_to_date,
    year_to_date,
)
from .seasons import SEASON_STARTS_BY_HEMISPHERE, SeasonStarts

logger = logging.getLogger(__name__)

START_OF_WEEK_DEPRECATION = (
    "options.startOfWeek is deprecated since ISO-8601 specifies that weeks start on Monday"
)


class AlexaDateConverter:
    """
    Class which converts AMAZON.DATE slot values into a single ``datetime.date``.

    :param season_starts:
        Start-of-season dictionary used for season strings such as "2017-WI".
        Defaults to the meteorological seasons of the hemisphere named by the
        ``HEMISPHERE`` setting.
    :type season_starts: :class:`alexadate.seasons.SeasonStarts`

    :param start_of_week:
        Deprecated and ignored. ISO weeks always start on Monday; passing any
        value emits a ``DeprecationWarning``.

    :param settings:
        Configure customized behavior using settings defined in :mod:`alexadate.conf.Settings`.
    :type settings: dict

    :raises:
        ``TypeError``: season_starts is not a SeasonStarts,
        ``SettingValidationError``: A provided setting is not valid.
    """

    @apply_settings
    def __init__(self, season_starts=None, start_of_week=None, settings=None):
        if season_starts is not None and not isinstance(season_starts, SeasonStarts):
            raise TypeError(
                "season_starts argument must be a SeasonStarts (%r given)"
                % type(season_starts)
            )

        check_settings(settings)

        if start_of_week is not None:
            warnings.warn(START_OF_WEEK_DEPRECATION, DeprecationWarning, stacklevel=3)

        if season_starts is None:
            season_starts = SEASON_STARTS_BY_HEMISPHERE[settings.HEMISPHERE]

        self._settings = settings
        self._season_starts = season_starts

    @property
    def season_starts(self) -> SeasonStarts:
        return self._season_starts

    @property
    def settings(self):
        return self._settings

    def classify(self, date_string: str) -> Optional[Category]:
        """Return the AMAZON.DATE category of ``date_string``, or None."""
        return classify(date_string)

    def convert_to_day(self, date_string: str) -> date:
        """
        Convert an AMAZON.DATE value to the first day of the period it names.

        :param date_string:
            An AMAZON.DATE slot value, e.g. "2015-W48" or "2017-WI".
        :type date_string: str

        :return: a ``datetime.date``

        :raises: ``InvalidDateStringError`` if the string fits no category,
            ``DateStringFormatError`` if a category resolver rejects it, and
            ``ValueError`` for a day string that is not a real calendar date.
        """
        if not isinstance(date_string, str):
            raise TypeError("Input type must be str")

        category = self.classify(date_string)

        if category is None:
            raise InvalidDateStringError(date_string)

        logger.debug(f"Resolving '{date_string}' as {category.value}")
        if category is Category.SPECIFIC_DAY:
            return day_to_date(date_string)
        if category is Category.SPECIFIC_WEEK:
            return week_to_date(date_string)
        if category is Category.WEEKEND:
            return weekend_to_date(date_string)
        if category is Category.MONTH_OF_YEAR:
            return month_to_date(date_string)
        if category is Category.YEAR:
            return year_to_date(date_string)
        if category is Category.DECADE:
            return decade_to_date(date_string)
        return season_to_date(date_string, self._season_starts)

    def __repr__(self):
        return "%s(season_starts=%r)" % (self.__class__.__name__, self._season_starts)
