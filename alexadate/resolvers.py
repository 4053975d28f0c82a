"""
Resolvers turning a classified AMAZON.DATE string into a single anchor date.

Every resolver returns the first day of the period the string names:

- week     -> the Monday that begins the week
- weekend  -> the Saturday of that week
- month    -> the 1st of the month
- year     -> January 1
- decade   -> January 1 of the decade's first year
- season   -> the season's start day in that year

Resolvers raise ``DateStringFormatError`` with a message specific to what went
wrong, so callers can tell a malformed week apart from an unknown season.
"""

import calendar
import logging
from datetime import date, timedelta

from .exceptions import DateStringFormatError
from .patterns import Category, classify
from .seasons import SeasonCode, SeasonStarts
from .utils import days_until_weekday, iso_weeks_in_year

logger = logging.getLogger(__name__)

WEEKEND_SIGNIFIER = "WE"


def _not_exclusive(date_string, pattern):
    return DateStringFormatError(
        f"Something went wrong in classifyAmazonDotDate since {date_string} "
        f"did not exclusively match {pattern} pattern"
    )


def _check_year_range(year_num, date_string):
    if not date.min.year <= year_num <= date.max.year:
        raise DateStringFormatError(
            f'Incorrect date string. Year {year_num} of "{date_string}" is out of range'
        )


def day_to_date(date_string: str) -> date:
    """
    Build the date for a "YYYY-MM-DD" string.

    The day grammar allows day 31 in any month, so "2019-02-31" reaches this
    point; ``datetime.date`` rejects it with its own ``ValueError``.
    """
    year_str, month_str, day_str = date_string.split("-")
    return date(int(year_str), int(month_str), int(day_str))


def week_to_date(date_string: str) -> date:
    """
    Resolve a week string ("2009-W01") to the Monday beginning that week.

    Weeks run Monday to Sunday. The week holding January 1 is week 0 and
    week ``nn`` starts ``nn`` weeks after its Monday, so "2009-W01" is
    2009-01-05. Week numbers are bounded by the ISO week count (52 or 53) of
    ``YYYY``.

    Args:
        date_string: "YYYY-Wnn"

    Returns:
        The Monday starting week ``nn`` of ``YYYY``.

    Raises:
        DateStringFormatError: if the string has extra segments, the week
            segment lacks its "W" prefix, or the week number does not exist
            in that week-based year.
    """
    segments = date_string.split("-")
    if len(segments) != 2:
        raise _not_exclusive(date_string, "YYYY-WXX")

    year_str, week_str = segments
    year_num = int(year_str)
    week_digits = week_str[1:] if week_str.startswith("W") else ""
    if not week_digits.isdecimal():
        raise DateStringFormatError(
            f'Something went wrong with getting the number from the week portion '
            f'("{week_str}") of "{date_string}"'
        )

    week_num = int(week_digits)
    if week_num < 1:
        raise DateStringFormatError(
            f"Incorrect date string. The week number for ISO weeks starts on 1, "
            f'but we derived {week_num} for the week section of "{date_string}"'
        )

    _check_year_range(year_num, date_string)

    weeks_in_year = iso_weeks_in_year(year_num)
    if week_num > weeks_in_year:
        raise DateStringFormatError(
            f"Incorrect date string. ISO week-based year {year_num} has "
            f"{weeks_in_year} weeks, but we derived {week_num} for the week "
            f'section of "{date_string}"'
        )

    start_of_year = date(year_num, 1, 1)
    week_zero = start_of_year - timedelta(days=start_of_year.weekday())
    try:
        return week_zero + timedelta(weeks=week_num)
    except OverflowError:
        raise DateStringFormatError(
            f'Incorrect date string. Week {week_num} of "{date_string}" is out of range'
        )


def weekend_to_date(date_string: str) -> date:
    """Resolve "YYYY-Wnn-WE" to the Saturday that starts that week's weekend."""
    segments = date_string.split("-")
    if len(segments) != 3 or segments[2] != WEEKEND_SIGNIFIER:
        raise _not_exclusive(date_string, "YYYY-WXX-WE")

    year_str, week_str, _ = segments
    monday = week_to_date(f"{year_str}-{week_str}")
    try:
        return monday + timedelta(days=days_until_weekday(monday, calendar.SATURDAY))
    except OverflowError:
        raise DateStringFormatError(
            f'Incorrect date string. The weekend of "{date_string}" is out of range'
        )


def month_to_date(date_string: str) -> date:
    year_str, month_str = date_string.split("-")
    year_num = int(year_str)
    _check_year_range(year_num, date_string)
    return date(year_num, int(month_str), 1)


def year_to_date(date_string: str) -> date:
    """January 1 of a "YYYY" year string."""
    if classify(date_string) is not Category.YEAR:
        raise DateStringFormatError(
            f"The string {date_string} was not actually a year string since it "
            f"didn't exclusively match the YYYY pattern"
        )
    return date(int(date_string), 1, 1)


def decade_to_date(date_string: str) -> date:
    """January 1 of the first year of a decade string such as "201X"."""
    return year_to_date(date_string.replace("X", "0"))


def season_to_date(date_string: str, season_starts: SeasonStarts) -> date:
    """
    Resolve "YYYY-SS" to the day season ``SS`` starts in year ``YYYY``.

    Anchors are month/day pairs within the same calendar year, so the result
    always falls inside ``YYYY``.

    Args:
        date_string: e.g. "2017-WI"
        season_starts: Start-of-season dictionary to anchor against

    Raises:
        DateStringFormatError: on extra segments, an unknown season code, or a
            year segment that is not a valid year.
    """
    segments = date_string.split("-")
    if len(segments) != 2:
        raise _not_exclusive(date_string, "YYYY-SS")

    year_str, season_str = segments

    if season_str not in SeasonCode.codes():
        raise DateStringFormatError(
            f'Expected the season portion ("{season_str}") of the input '
            f'("{date_string}") to be one of the following: '
            f'{", ".join(SeasonCode.codes())}'
        )

    start_of_year = year_to_date(year_str)
    anchor = season_starts[season_str]
    logger.debug(f"Anchoring season {season_str} of {start_of_year.year} at {anchor!r}")
    return anchor.at_year(start_of_year.year)
