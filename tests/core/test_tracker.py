"""Tests for change tracker variants and operations."""

from collections.abc import Hashable
from types import MappingProxyType

import pytest
from hypothesis import given
from hypothesis import strategies as st

from liveassigns.core.tracker import (
    ABSENT,
    BooleanMarks,
    Disabled,
    TrackingMode,
    ValueMarks,
    changed_keys,
    checkpoint,
    from_changed_slot,
    get_baseline,
    is_changed,
    record_change,
    to_changed_slot,
    tracking_mode,
)

keys = st.text(min_size=1, max_size=8)
values = st.one_of(st.integers(), st.text(), st.dictionaries(st.text(max_size=3), st.integers()))


def test_disabled_reports_everything_changed():
    """Disabled tracking is conservative: callers can never assume stability."""
    tracker = Disabled()
    assert is_changed(tracker, "anything")
    assert record_change(tracker, "key", 1) is tracker
    assert changed_keys(tracker) is None


def test_boolean_marks_membership():
    tracker = record_change(BooleanMarks(), "title", "old")
    assert is_changed(tracker, "title")
    assert not is_changed(tracker, "other")
    assert changed_keys(tracker) == frozenset({"title"})


def test_boolean_marks_idempotent():
    tracker = record_change(BooleanMarks(), "title", "a")
    assert record_change(tracker, "title", "b") is tracker


def test_value_marks_keep_first_baseline():
    """CRITICAL: Only the first change in an epoch records the baseline.

    Why: Differs compare baseline vs. current; intermediate values are noise.
    """
    tracker = record_change(ValueMarks(), "map", {"foo": "bar"})
    tracker = record_change(tracker, "map", {"foo": "baz"})
    assert get_baseline(tracker, "map") == {"foo": "bar"}


def test_value_marks_new_key_baseline_is_absent():
    tracker = record_change(ValueMarks(), "fresh", ABSENT)
    assert is_changed(tracker, "fresh")
    assert get_baseline(tracker, "fresh") is ABSENT


def test_get_baseline_default_for_other_modes():
    tracker = record_change(BooleanMarks(), "key", "old")
    assert get_baseline(tracker, "key") is ABSENT
    assert get_baseline(tracker, "key", None) is None
    assert get_baseline(ValueMarks(), "missing", "fallback") == "fallback"


@pytest.mark.parametrize(
    ("tracker", "expected"),
    [
        (Disabled(), Disabled()),
        (BooleanMarks(frozenset({"a", "b"})), BooleanMarks()),
        (ValueMarks({"a": 1}), ValueMarks()),
    ],
    ids=["disabled", "boolean", "value"],
)
def test_checkpoint_empties_marks_and_keeps_mode(tracker, expected):
    result = checkpoint(tracker)
    assert result == expected
    assert tracking_mode(result) is tracking_mode(tracker)


def test_checkpoint_disabled_is_identity():
    tracker = Disabled()
    assert checkpoint(tracker) is tracker


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (TrackingMode.DISABLED, Disabled()),
        (TrackingMode.BOOLEAN, BooleanMarks()),
        (TrackingMode.VALUE, ValueMarks()),
    ],
)
def test_empty_tracker_for_mode(mode, expected):
    assert mode.empty_tracker() == expected


def test_value_marks_are_read_only():
    tracker = ValueMarks({"a": 1})
    with pytest.raises(TypeError):
        tracker.baselines["b"] = 2  # type: ignore[index]


def test_value_marks_do_not_alias_source():
    source = {"a": 1}
    tracker = ValueMarks(source)
    source["b"] = 2
    assert "b" not in tracker.baselines

    proxied = {"a": 1}
    tracker = ValueMarks(MappingProxyType(proxied))
    proxied["a"] = 2
    assert tracker.baselines["a"] == 1


def test_value_marks_are_unhashable():
    """Baselines hold arbitrary values, so the tracker does not claim hashability."""
    assert not isinstance(ValueMarks(), Hashable)
    with pytest.raises(TypeError):
        hash(ValueMarks({"a": [1]}))


def test_changed_slot_rendering():
    assert to_changed_slot(Disabled()) is None
    assert to_changed_slot(BooleanMarks(frozenset({"b", "a"}))) == {"a": True, "b": True}
    assert to_changed_slot(ValueMarks({"new": ABSENT, "map": {"foo": "bar"}})) == {
        "new": True,
        "map": {"foo": "bar"},
    }


def test_changed_slot_parsing():
    assert from_changed_slot(None) == Disabled()
    assert from_changed_slot({"map": {"foo": "bar"}}) == ValueMarks({"map": {"foo": "bar"}})


def test_changed_slot_parsing_rejects_garbage():
    from liveassigns.core.errors import InvalidAssignsError

    with pytest.raises(InvalidAssignsError):
        from_changed_slot(["map"])  # type: ignore[arg-type]


@given(history=st.lists(st.tuples(keys, values), max_size=20))
def test_value_marks_baseline_is_first_recorded(history):
    """PROPERTY: Each key's baseline equals the first old value recorded for it."""
    tracker = ValueMarks()
    first: dict = {}
    for key, old in history:
        tracker = record_change(tracker, key, old)
        first.setdefault(key, old)

    assert dict(tracker.baselines) == first
    assert changed_keys(tracker) == frozenset(first)


@given(marked=st.lists(keys, max_size=10), probe=keys)
def test_boolean_and_value_marks_agree(marked, probe):
    """PROPERTY: Both representations report the same changed keys."""
    boolean, value = BooleanMarks(), ValueMarks()
    for key in marked:
        boolean = record_change(boolean, key, None)
        value = record_change(value, key, None)

    assert is_changed(boolean, probe) == is_changed(value, probe) == (probe in marked)
