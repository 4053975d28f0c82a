from datetime import date


def days_until_weekday(start: date, weekday: int) -> int:
    """Days from ``start`` forward to the next ``weekday`` (0=Monday .. 6=Sunday).

    Returns 0 when ``start`` already falls on ``weekday``.
    """
    return (weekday - start.weekday()) % 7


def iso_weeks_in_year(year: int) -> int:
    """Number of ISO weeks (52 or 53) in ISO week-based ``year``."""
    # Dec 28 always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]
