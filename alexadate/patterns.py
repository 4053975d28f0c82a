"""
AMAZON.DATE Pattern Classification

An AMAZON.DATE slot value takes one of seven shapes:

- Specific day:        "2015-11-24"
- Specific week:       "2015-W48"
- Weekend of a week:   "2015-W49-WE"
- Month of year:       "2015-11"
- Year:                "2015"
- Decade:              "201X"
- Season:              "2017-WI"

Each shape has its own full-string grammar. The grammars are disjoint, so at
most one matches; they are still tried in declaration order and the first
match wins.

See https://developer.amazon.com/docs/custom-skills/slot-type-reference.html#date
"""

import logging
from enum import Enum
from typing import Optional

import regex as re

from .seasons import SeasonCode

logger = logging.getLogger(__name__)


class Category(Enum):
    """AMAZON.DATE categories, in classification priority order."""
    SPECIFIC_DAY = "specific day"
    SPECIFIC_WEEK = "specific week"
    WEEKEND = "weekend for a specific week"
    MONTH_OF_YEAR = "month of year"
    YEAR = "year"
    DECADE = "decade"
    SEASON = "season"


_YEAR = r"[12][0-9]{3}"
_ANY_YEAR = r"[0-9]{4}"
_MONTH = r"(?:0[1-9]|1[0-2])"
_DAY = r"(?:0[1-9]|[12][0-9]|3[01])"
_WEEK = r"W(?:0[1-9]|[1-4][0-9]|5[0-3])"
_SEASON = r"(?:%s)" % "|".join(SeasonCode.codes())

PATTERNS = {
    Category.SPECIFIC_DAY: re.compile(r"%s-%s-%s" % (_YEAR, _MONTH, _DAY)),
    Category.SPECIFIC_WEEK: re.compile(r"%s-%s" % (_ANY_YEAR, _WEEK)),
    Category.WEEKEND: re.compile(r"%s-%s-WE" % (_ANY_YEAR, _WEEK)),
    Category.MONTH_OF_YEAR: re.compile(r"%s-%s" % (_ANY_YEAR, _MONTH)),
    Category.YEAR: re.compile(_YEAR),
    Category.DECADE: re.compile(r"[0-9]{3}X"),
    Category.SEASON: re.compile(r"%s-%s" % (_YEAR, _SEASON)),
}


def classify(date_string: str) -> Optional[Category]:
    """
    Find which AMAZON.DATE category ``date_string`` belongs to.

    Args:
        date_string: Raw slot value, e.g. "2015-W48"

    Returns:
        The matching Category, or None if the string fits no grammar.
    """
    for category in Category:
        if PATTERNS[category].fullmatch(date_string):
            logger.debug(f"Classified '{date_string}' as {category.value}")
            return category
    logger.debug(f"'{date_string}' matched no AMAZON.DATE pattern")
    return None
