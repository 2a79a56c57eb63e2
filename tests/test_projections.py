import pytest

from utilkit.errors import InvalidArgumentKind
from utilkit.merge import UNDEFINED
from utilkit.projections import inclusive_pick, omit, pick

SAMPLE = {"a": 1, "b": "2", "c": 3}


def test_pick_keeps_requested_keys():
    assert pick(SAMPLE, ["a", "c"]) == {"a": 1, "c": 3}


def test_pick_drops_missing_keys():
    assert pick(SAMPLE, ["a", "z"]) == {"a": 1}


def test_inclusive_pick_includes_missing_keys():
    result = inclusive_pick(SAMPLE, ["c", "z"])

    assert result["c"] == 3
    assert result["z"] is UNDEFINED


def test_omit_drops_requested_keys():
    assert omit(SAMPLE, ["a", "c"]) == {"b": "2"}


def test_pick_and_omit_partition_entries():
    keys = ["a", "b"]
    picked = pick(SAMPLE, keys)
    omitted = omit(SAMPLE, keys)

    assert picked.keys().isdisjoint(omitted.keys())
    assert {**picked, **omitted} == SAMPLE


def test_projections_do_not_mutate():
    source = {"a": {"nested": 1}, "b": 2}
    pick(source, ["a"])
    omit(source, ["a"])

    assert source == {"a": {"nested": 1}, "b": 2}


def test_projections_reject_bad_arguments():
    with pytest.raises(InvalidArgumentKind):
        pick(["a"], ["a"])
    with pytest.raises(InvalidArgumentKind):
        omit(SAMPLE, "a")
