"""Hypothesis property-based tests for ticket pick parsing and checking."""

from __future__ import annotations

import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lottodesk.core.constants import PICK_COUNT, PICK_MAX, PICK_MIN
from lottodesk.core.exceptions import ValidationError
from lottodesk.services.tickets import check_picks_strict, parse_picks

json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=10)
valid_picks = st.lists(
    st.integers(min_value=PICK_MIN, max_value=PICK_MAX), min_size=PICK_COUNT, max_size=PICK_COUNT
)


@given(picks=st.lists(json_scalars, max_size=8))
@settings(max_examples=200)
def test_any_json_array_parses_back(picks: list):
    """Any JSON array is accepted and decoded unchanged."""
    assert parse_picks(json.dumps(picks)) == picks


@given(value=json_scalars | st.dictionaries(st.text(max_size=5), st.integers(), max_size=3))
@settings(max_examples=200)
def test_non_array_json_rejected(value: object):
    with pytest.raises(ValidationError):
        parse_picks(json.dumps(value))


@given(raw=st.text(max_size=20).filter(lambda s: not s.strip().startswith("[")))
@settings(max_examples=200)
def test_text_that_is_not_an_array_rejected(raw: str):
    with pytest.raises(ValidationError):
        parse_picks(raw)


@given(picks=valid_picks)
def test_strict_accepts_four_in_range(picks: list[int]):
    check_picks_strict(picks)


@given(picks=valid_picks, bad=st.integers().filter(lambda n: not PICK_MIN <= n <= PICK_MAX))
def test_strict_rejects_out_of_range(picks: list[int], bad: int):
    picks[0] = bad
    with pytest.raises(ValidationError, match="between"):
        check_picks_strict(picks)


@given(
    picks=st.lists(st.integers(min_value=PICK_MIN, max_value=PICK_MAX), max_size=10).filter(
        lambda p: len(p) != PICK_COUNT
    )
)
def test_strict_rejects_wrong_count(picks: list[int]):
    with pytest.raises(ValidationError, match="exactly 4"):
        check_picks_strict(picks)


def test_strict_rejects_bool_and_float():
    with pytest.raises(ValidationError):
        check_picks_strict([True, 2, 3, 4])
    with pytest.raises(ValidationError):
        check_picks_strict([1.0, 2, 3, 4])
