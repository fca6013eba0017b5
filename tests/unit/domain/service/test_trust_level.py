"""Unit tests for trust level computation."""

import pytest

from margin.domain.service.trust_level import (
    DEFAULT_THRESHOLDS,
    get_level,
    parse_thresholds,
)


class TestParseThresholds:
    def test_parses_comma_separated_list(self):
        assert parse_thresholds("0, 5, 15") == [0, 5, 15]

    @pytest.mark.parametrize("raw", [None, "", "a,b", "0,10,5", "0,10,10", "-1,3"])
    def test_invalid_lists_fall_back_to_defaults(self, raw):
        assert parse_thresholds(raw) == list(DEFAULT_THRESHOLDS)


class TestGetLevel:
    """Levels against the default thresholds 0,10,20,50,100,200."""

    @pytest.mark.parametrize(
        "count,level",
        [
            (0, 0),
            (9, 0),
            (10, 1),
            (19, 1),
            (20, 2),
            (50, 3),
            (99, 3),
            (100, 4),
            (199, 4),
            (200, 5),
            (10_000, 5),
        ],
    )
    def test_level_for_count(self, count, level):
        assert get_level(count, list(DEFAULT_THRESHOLDS)) == level

    def test_count_below_first_threshold_is_level_zero(self):
        assert get_level(2, [5, 10]) == 0

    def test_count_past_last_threshold_keeps_top_level(self):
        assert get_level(500, [0, 10, 20]) == 2

    def test_single_threshold(self):
        assert get_level(100, [0]) == 0
