"""Tests for employment gap detection."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from core.gaps import detect_employment_gaps, detect_live_gaps, detect_reportable_gaps


def test_single_gap_between_two_positions(make_job, today) -> None:
    intervals = [
        make_job("a", date(2020, 1, 1), date(2020, 6, 30)),
        make_job("b", date(2020, 9, 1), date(2021, 1, 1)),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    assert len(gaps) == 1
    gap = gaps[0]
    assert gap.start_date == date(2020, 7, 1)
    assert gap.end_date == date(2020, 8, 31)
    assert gap.days == 62
    assert gap.preceding_index == 0
    assert gap.preceding_interval_id == "a"
    assert gap.following_index == 1
    assert gap.following_interval_id == "b"


def test_threshold_above_gap_length_hides_gap(make_job, today) -> None:
    intervals = [
        make_job("a", date(2020, 1, 1), date(2020, 6, 30)),
        make_job("b", date(2020, 9, 1), date(2021, 1, 1)),
    ]

    assert detect_employment_gaps(intervals, min_days=90, today=today) == []


def test_input_order_does_not_change_result(make_job, today) -> None:
    first = make_job("a", date(2018, 1, 1), date(2018, 12, 31))
    second = make_job("b", date(2019, 3, 1), date(2019, 12, 31))
    third = make_job("c", date(2020, 2, 1), date(2020, 12, 31))

    ordered = detect_employment_gaps([first, second, third], min_days=1, today=today)
    shuffled = detect_employment_gaps([third, first, second], min_days=1, today=today)

    assert [(g.start_date, g.end_date, g.days) for g in ordered] == [
        (g.start_date, g.end_date, g.days) for g in shuffled
    ]
    assert [g.preceding_interval_id for g in shuffled] == ["a", "b"]
    # Indices refer to the caller's ordering.
    assert [g.preceding_index for g in shuffled] == [1, 2]


@pytest.mark.parametrize("count", [0, 1])
def test_fewer_than_two_valid_intervals_yield_no_gaps(make_job, today, count) -> None:
    intervals = [make_job("a", date(2022, 1, 1), current=True)][:count]
    intervals.append(make_job("incomplete", None, date(2023, 1, 1)))

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_single_current_position_has_no_gap(make_job, today) -> None:
    intervals = [make_job("a", date(2022, 1, 1), current=True)]

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_touching_intervals_have_no_gap(make_job, today) -> None:
    intervals = [
        make_job("b", date(2020, 7, 1), date(2020, 12, 31)),
        make_job("a", date(2020, 1, 1), date(2020, 6, 30)),
    ]

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_overlapping_intervals_have_no_gap(make_job, today) -> None:
    intervals = [
        make_job("a", date(2020, 1, 1), date(2020, 8, 31)),
        make_job("b", date(2020, 6, 1), date(2020, 12, 31)),
    ]

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_one_uncovered_day_is_a_gap(make_job, today) -> None:
    intervals = [
        make_job("a", date(2020, 1, 1), date(2020, 6, 30)),
        make_job("b", date(2020, 7, 2), date(2020, 12, 31)),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    assert len(gaps) == 1
    assert gaps[0].start_date == gaps[0].end_date == date(2020, 7, 1)
    assert gaps[0].days == 1


@pytest.mark.parametrize("threshold", [1, 7, 31, 90])
def test_threshold_boundary(make_job, today, threshold) -> None:
    end = date(2021, 1, 31)
    below = [
        make_job("a", date(2020, 1, 1), end),
        make_job("b", end + timedelta(days=threshold), date(2023, 1, 1)),
    ]
    at = [
        make_job("a", date(2020, 1, 1), end),
        make_job("b", end + timedelta(days=threshold + 1), date(2023, 1, 1)),
    ]

    assert detect_employment_gaps(below, min_days=threshold, today=today) == []
    gaps = detect_employment_gaps(at, min_days=threshold, today=today)
    assert len(gaps) == 1
    assert gaps[0].days == threshold


def test_gap_one_day_short_of_threshold_is_hidden(make_job, today) -> None:
    intervals = [
        make_job("a", date(2021, 1, 1), date(2021, 1, 31)),
        make_job("b", date(2021, 3, 3), date(2021, 12, 31)),
    ]

    assert detect_employment_gaps(intervals, min_days=31, today=today) == []
    gaps = detect_employment_gaps(intervals, min_days=30, today=today)
    assert [gap.days for gap in gaps] == [30]


def test_current_position_never_precedes_a_gap(make_job, today) -> None:
    intervals = [
        make_job("current", date(2020, 1, 1), current=True),
        make_job("side", date(2022, 1, 1), date(2022, 3, 31)),
    ]

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_gap_before_current_position_is_reported(make_job, today) -> None:
    intervals = [
        make_job("a", date(2019, 1, 1), date(2019, 6, 30)),
        make_job("current", date(2019, 9, 1), current=True),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    assert [(g.start_date, g.end_date, g.days) for g in gaps] == [
        (date(2019, 7, 1), date(2019, 8, 31), 62)
    ]
    assert gaps[0].following_interval_id == "current"


def test_current_flag_overrides_stored_end_date(make_job, today) -> None:
    intervals = [
        make_job("a", date(2018, 1, 1), date(2018, 1, 31), current=True),
        make_job("b", date(2020, 1, 1), date(2020, 12, 31)),
    ]

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_current_position_ends_today(make_job) -> None:
    intervals = [
        make_job("a", date(2023, 1, 1), current=True),
        make_job("b", date(2024, 3, 1), date(2024, 12, 31)),
    ]

    assert detect_employment_gaps(intervals, min_days=1, today=date(2024, 1, 1)) == []


def test_nested_interval_does_not_open_gap(make_job, today) -> None:
    intervals = [
        make_job("long", date(2020, 1, 1), date(2021, 12, 31)),
        make_job("short", date(2020, 3, 1), date(2020, 6, 30)),
        make_job("next", date(2022, 1, 1), date(2022, 12, 31)),
    ]

    assert detect_employment_gaps(intervals, min_days=1, today=today) == []


def test_gap_after_nested_interval_is_anchored_to_longest_cover(make_job, today) -> None:
    intervals = [
        make_job("long", date(2020, 1, 1), date(2021, 12, 31)),
        make_job("short", date(2020, 3, 1), date(2020, 6, 30)),
        make_job("next", date(2022, 3, 1), date(2022, 12, 31)),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    assert len(gaps) == 1
    assert gaps[0].start_date == date(2022, 1, 1)
    assert gaps[0].preceding_interval_id == "long"


def test_equal_start_dates_keep_input_order(make_job, today) -> None:
    intervals = [
        make_job("first", date(2020, 1, 1), date(2020, 12, 31)),
        make_job("second", date(2020, 1, 1), date(2020, 12, 31)),
        make_job("later", date(2021, 3, 1), date(2021, 12, 31)),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    assert [gap.preceding_interval_id for gap in gaps] == ["first"]


def test_incomplete_intervals_are_excluded(make_job, today) -> None:
    intervals = [
        make_job("a", date(2020, 1, 1), date(2020, 3, 31)),
        make_job("no-end", date(2020, 4, 1)),
        make_job("no-start", None, date(2020, 12, 31)),
        make_job("c", date(2020, 6, 1), date(2020, 12, 31)),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    assert len(gaps) == 1
    assert gaps[0].start_date == date(2020, 4, 1)
    assert gaps[0].end_date == date(2020, 5, 31)
    assert gaps[0].following_index == 3


def test_gaps_are_chronological(make_job, today) -> None:
    intervals = [
        make_job("c", date(2022, 1, 1), date(2022, 12, 31)),
        make_job("a", date(2018, 1, 1), date(2018, 12, 31)),
        make_job("b", date(2020, 1, 1), date(2020, 12, 31)),
    ]

    gaps = detect_employment_gaps(intervals, min_days=1, today=today)

    starts = [gap.start_date for gap in gaps]
    assert starts == sorted(starts)
    assert len(gaps) == 2


def test_detection_is_repeatable_and_does_not_mutate_input(make_job, today) -> None:
    intervals = [
        make_job("b", date(2020, 9, 1), date(2021, 1, 1)),
        make_job("a", date(2020, 1, 1), date(2020, 6, 30)),
        make_job("c", date(2021, 6, 1), current=True),
    ]
    before = [interval.model_dump() for interval in intervals]

    first = detect_employment_gaps(intervals, min_days=1, today=today)
    second = detect_employment_gaps(intervals, min_days=1, today=today)

    assert first == second
    assert [interval.model_dump() for interval in intervals] == before
    assert [interval.id for interval in intervals] == ["b", "a", "c"]


def test_editing_one_interval_keeps_unrelated_gaps(make_job, today) -> None:
    intervals = [
        make_job("a", date(2018, 1, 1), date(2018, 6, 30)),
        make_job("b", date(2018, 9, 1), date(2019, 6, 30)),
        make_job("c", date(2019, 9, 1), date(2020, 6, 30)),
    ]
    before = detect_employment_gaps(intervals, min_days=1, today=today)

    intervals[2] = intervals[2].model_copy(update={"start_date": date(2019, 10, 1)})
    after = detect_employment_gaps(intervals, min_days=1, today=today)

    assert after[0] == before[0]
    assert after[1].start_date == before[1].start_date
    assert after[1].end_date == date(2019, 9, 30)


@pytest.mark.parametrize("min_days", [0, -5])
def test_min_days_must_be_positive(make_job, today, min_days) -> None:
    with pytest.raises(ValueError):
        detect_employment_gaps([], min_days=min_days, today=today)


def test_configured_thresholds(make_job, today, monkeypatch) -> None:
    import config

    monkeypatch.setattr(config, "LIVE_GAP_THRESHOLD_DAYS", 1)
    monkeypatch.setattr(config, "REFERENCE_GAP_THRESHOLD_DAYS", 31)
    intervals = [
        make_job("a", date(2020, 1, 1), date(2020, 1, 31)),
        make_job("b", date(2020, 2, 11), date(2020, 6, 30)),
        make_job("c", date(2020, 9, 1), date(2020, 12, 31)),
    ]

    live = detect_live_gaps(intervals, today=today)
    reportable = detect_reportable_gaps(intervals, today=today)

    assert [gap.days for gap in live] == [10, 62]
    assert [gap.days for gap in reportable] == [62]
