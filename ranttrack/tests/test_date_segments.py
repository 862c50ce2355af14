from datetime import datetime

import pytest

from ranttrack.services.date_segments import (
    DateSegment,
    days_since_last_entry,
    extract_dates,
    group_segments_by_date,
    has_missed_days,
    segment_by_date,
)

# Wednesday
REF = datetime(2024, 3, 20, 12, 0)


def _only(text):
    [marker] = extract_dates(text, REF)
    return marker


def test_relative_days():
    marker = _only("Yesterday my head hurt")
    assert marker.date == datetime(2024, 3, 19)
    assert (marker.start, marker.end) == (0, 9)
    assert marker.confidence == 0.9
    assert marker.date_label == "Yesterday"
    assert _only("2 days ago it started").date == datetime(2024, 3, 18)
    assert _only("three days back").date == datetime(2024, 3, 17)
    assert _only("a few days ago").date == datetime(2024, 3, 17)
    assert _only("the day before yesterday was rough").date == datetime(2024, 3, 18)


def test_weekdays_are_in_the_past():
    marker = _only("Monday I crashed")
    assert marker.date == datetime(2024, 3, 18)
    assert marker.confidence == 0.8
    assert marker.date_label == "Monday, March 18"
    assert _only("Wednesday was ok").date_label == "Today"
    assert _only("last Wednesday was bad").date == datetime(2024, 3, 13)


@pytest.mark.parametrize(
    "text,expected,confidence",
    [
        ("March 15th was bad", datetime(2024, 3, 15), 0.85),
        ("15 March 2023 was bad", datetime(2023, 3, 15), 1.0),
        ("on 3/15 I slept all day", datetime(2024, 3, 15), 0.85),
        ("March 25th", datetime(2024, 3, 18), 0.85),
    ],
)
def test_month_day_forms(text, expected, confidence):
    marker = _only(text)
    assert marker.date == expected
    assert marker.confidence == confidence


def test_ratings_are_not_dates():
    assert extract_dates("pain 7/10 today", REF)[0].matched_text == "today"
    assert extract_dates("pain 7/10", REF) == []


def test_segments_split_on_markers():
    text = "Felt okay. Monday I crashed. Yesterday my head hurt."
    preface, monday, yesterday = segment_by_date(text, REF)
    assert preface.text == "Felt okay."
    assert preface.explicit is False
    assert preface.date == REF
    assert monday.text == "I crashed."
    assert (monday.start, monday.end) == (17, 29)
    assert monday.explicit is True
    assert yesterday.text == "my head hurt."
    assert yesterday.date == datetime(2024, 3, 19)


def test_no_markers_gives_single_segment():
    [segment] = segment_by_date("just tired", REF)
    assert segment.text == "just tired"
    assert segment.explicit is False
    assert segment.date == REF


def test_empty_segments_are_skipped():
    assert [s.text for s in segment_by_date("Yesterday. Today", REF)] == ["."]


def test_grouping_merges_same_day():
    segments = segment_by_date("Yesterday I was dizzy. Last night my head hurt.", REF)
    [day] = group_segments_by_date(segments)
    assert day.text == "I was dizzy. my head hurt."
    assert day.date == datetime(2024, 3, 19)
    assert day.explicit is True


def test_grouping_sorts_oldest_first():
    segments = [
        DateSegment(date=datetime(2024, 3, 20, 9), date_label="Today", text="b", start=5, end=6, explicit=False),
        DateSegment(date=datetime(2024, 3, 18, 9), date_label="Monday", text="a", start=0, end=1, explicit=True),
    ]
    grouped = group_segments_by_date(segments)
    assert [s.text for s in grouped] == ["a", "b"]
    assert grouped[0].date == datetime(2024, 3, 18)
    assert segments[0].date == datetime(2024, 3, 20, 9)


def test_missed_days():
    assert has_missed_days(datetime(2024, 3, 16, 12), now=REF) is True
    assert has_missed_days(datetime(2024, 3, 16, 12), threshold=5, now=REF) is False
    assert days_since_last_entry(datetime(2024, 3, 18, 18), now=REF) == 1


@pytest.mark.parametrize("count", ["1000000", "9" * 5000])
def test_out_of_range_counts_are_skipped(count):
    text = count + " days ago I crashed"
    assert extract_dates(text, REF) == []
    [segment] = segment_by_date(text, REF)
    assert segment.explicit is False
    assert segment.text == text
