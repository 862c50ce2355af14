import pytest

from ranttrack.services.spoons import energy_level, extract_spoon_count


def test_started_and_used():
    count = extract_spoon_count("Started with 5 spoons, used 3")
    assert count.started == 5
    assert count.used == 3
    assert count.current == 2
    assert count.energy_level == 1.7


def test_current_count():
    count = extract_spoon_count("I only have 2 spoons left today")
    assert count.current == 2
    assert count.started is None


@pytest.mark.parametrize("text", ["Completely out of spoons", "no spoons left", "zero spoons today"])
def test_zero_spoon_idioms(text):
    count = extract_spoon_count(text)
    assert count.current == 0
    assert count.energy_level == 0


def test_started_only_and_used_only():
    assert extract_spoon_count("woke up with 10 spoons").current == 10
    count = extract_spoon_count("that errand used 4 spoons")
    assert count.used == 4
    assert count.current == 5


def test_no_spoon_talk():
    assert extract_spoon_count("so tired") is None
    assert extract_spoon_count("I collect spoons") is None


def test_energy_scale():
    assert energy_level(12) == 10.0
    assert energy_level(20) == 10.0
    assert energy_level(6) == 5.0
    assert energy_level(0) == 0.0


@pytest.mark.parametrize("digits", [400, 5000])
def test_huge_counts_are_clamped(digits):
    count = extract_spoon_count("I have " + "9" * digits + " spoons left")
    assert count.current == 100
    assert count.energy_level == 10.0
