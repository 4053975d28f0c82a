"""
Meteorological season anchors.

A season is anchored by the month and day it starts on, independent of any
year. A ``SeasonStarts`` dictionary holds one anchor for each of the four
AMAZON.DATE season codes; every field is mandatory so a partial dictionary
cannot be built.
"""

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterator, Tuple, Union

from dateutil.relativedelta import relativedelta


class SeasonCode(Enum):
    """Two-letter season codes as sent in an AMAZON.DATE slot."""
    WINTER = "WI"
    SPRING = "SP"
    SUMMER = "SU"
    FALL = "FA"

    @classmethod
    def codes(cls) -> Tuple[str, ...]:
        """All wire codes, sorted alphabetically."""
        return tuple(sorted(member.value for member in cls))


@dataclass(frozen=True)
class SeasonAnchor:
    """
    The first day of a season, as a month and day-of-month with no year.

    Feb 29 is accepted; bound to a non-leap year it falls back to Feb 28.
    """
    month: int
    day: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        # 2000 is a leap year, so Feb 29 passes
        last_day = calendar.monthrange(2000, self.month)[1]
        if not 1 <= self.day <= last_day:
            raise ValueError(
                f"day must be in 1..{last_day} for month {self.month}, got {self.day}"
            )

    def at_year(self, year: int) -> date:
        """Bind this anchor to ``year``."""
        return date(year, 1, 1) + relativedelta(month=self.month, day=self.day)

    def __repr__(self) -> str:
        return f"SeasonAnchor(month={self.month}, day={self.day})"


_FIELD_BY_CODE = {
    SeasonCode.SPRING: "spring",
    SeasonCode.SUMMER: "summer",
    SeasonCode.FALL: "fall",
    SeasonCode.WINTER: "winter",
}


@dataclass(frozen=True)
class SeasonStarts:
    """Start-of-season dictionary covering all four season codes."""
    spring: SeasonAnchor
    summer: SeasonAnchor
    fall: SeasonAnchor
    winter: SeasonAnchor

    def __getitem__(self, code: Union[SeasonCode, str]) -> SeasonAnchor:
        return getattr(self, _FIELD_BY_CODE[SeasonCode(code)])

    def items(self) -> Iterator[Tuple[SeasonCode, SeasonAnchor]]:
        for code in SeasonCode:
            yield code, self[code]


NORTHERN_METEOROLOGICAL_SEASON_STARTS = SeasonStarts(
    spring=SeasonAnchor(month=3, day=1),
    summer=SeasonAnchor(month=6, day=1),
    fall=SeasonAnchor(month=9, day=1),
    winter=SeasonAnchor(month=12, day=1),
)

SOUTHERN_METEOROLOGICAL_SEASON_STARTS = SeasonStarts(
    spring=SeasonAnchor(month=9, day=1),
    summer=SeasonAnchor(month=2, day=1),
    fall=SeasonAnchor(month=3, day=1),
    winter=SeasonAnchor(month=6, day=1),
)

DEFAULT_SEASON_STARTS = NORTHERN_METEOROLOGICAL_SEASON_STARTS

SEASON_STARTS_BY_HEMISPHERE = {
    "northern": NORTHERN_METEOROLOGICAL_SEASON_STARTS,
    "southern": SOUTHERN_METEOROLOGICAL_SEASON_STARTS,
}
