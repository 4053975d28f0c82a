"""
Tests for AMAZON.DATE pattern classification.

Each grammar is full-string and the seven grammars are disjoint, so every
string lands in exactly one category or none.
"""

import pytest

import alexadate
from alexadate.patterns import Category, PATTERNS, classify


class TestClassify:
    """Tests for classifying well-formed AMAZON.DATE values."""

    @pytest.mark.parametrize("date_string, expected", [
        ("2019-12-25", Category.SPECIFIC_DAY),
        ("2019-02-31", Category.SPECIFIC_DAY),
        ("2009-W01", Category.SPECIFIC_WEEK),
        ("2019-W10", Category.SPECIFIC_WEEK),
        ("2015-W53", Category.SPECIFIC_WEEK),
        ("2009-W01-WE", Category.WEEKEND),
        ("2015-W49-WE", Category.WEEKEND),
        ("2019-12", Category.MONTH_OF_YEAR),
        ("0999-05", Category.MONTH_OF_YEAR),
        ("2019", Category.YEAR),
        ("1066", Category.YEAR),
        ("201X", Category.DECADE),
        ("200X", Category.DECADE),
        ("2017-WI", Category.SEASON),
        ("2009-SU", Category.SEASON),
        ("1999-FA", Category.SEASON),
        ("2000-SP", Category.SEASON),
    ])
    def test_category(self, date_string, expected):
        """Test that each shape is classified into its category."""
        assert classify(date_string) is expected

    def test_category_values(self):
        """Test the human-readable category names."""
        assert Category.WEEKEND.value == "weekend for a specific week"
        assert Category.SPECIFIC_DAY.value == "specific day"

    def test_priority_order(self):
        """Test that categories are declared in classification priority order."""
        assert [c.value for c in Category] == [
            "specific day",
            "specific week",
            "weekend for a specific week",
            "month of year",
            "year",
            "decade",
            "season",
        ]


class TestUnclassifiable:
    """Tests for strings that fit no grammar."""

    @pytest.mark.parametrize("date_string", [
        "",
        "19",
        "20XX",
        "2019-13",
        "2019-00",
        "2019-12-99",
        "2019-12-00",
        "3019-12-25",
        "2019-W00",
        "2019-W54",
        "2019-W00-WE",
        "2019-W01-SA",
        "2009-W1",
        "2019-FL",
        "2019-su",
        "3019-SU",
        "0999",
        " 2019",
        "2019 ",
        "2019-12-25T10:00",
        "next winter",
    ])
    def test_no_category(self, date_string):
        """Test that malformed values are not classified."""
        assert classify(date_string) is None


class TestDisjointness:
    """Tests that at most one grammar accepts any sample string."""

    @pytest.mark.parametrize("date_string", [
        "2019-12-25", "2009-W01", "2009-W01-WE", "2019-12", "2019",
        "201X", "2009-SU", "2019-FL", "2019-W00", "0000-W01",
    ])
    def test_at_most_one_grammar(self, date_string):
        matches = [c for c, pattern in PATTERNS.items() if pattern.fullmatch(date_string)]
        assert len(matches) <= 1

    def test_deterministic(self):
        """Test that repeated classification gives the same answer."""
        results = {alexadate.classify("2015-W49-WE") for _ in range(5)}
        assert results == {Category.WEEKEND}
