import dataclasses

import pytest

from errlift import Failure, Success, UnwrapError


def test_success_flags_and_unwrap():
    r = Success(3)
    assert r.is_success() and not r.is_failure()
    assert r.unwrap() == 3
    assert r.or_else(0) == 3


def test_failure_flags_and_or_else():
    r = Failure("bad")
    assert r.is_failure() and not r.is_success()
    assert r.or_else(0) == 0
    assert r.unwrap_error() == "bad"


def test_map_only_touches_success():
    assert Success(2).map(lambda v: v * 10) == Success(20)
    f = Failure("e")
    assert f.map(lambda v: v * 10) is f


def test_map_error_only_touches_failure():
    assert Failure("e").map_error(str.upper) == Failure("E")
    s = Success(1)
    assert s.map_error(str.upper) is s


def test_and_then_is_flat_map():
    assert Success(4).and_then(lambda v: Success(v + 1)) == Success(5)
    assert Success(4).and_then(lambda v: Failure("no")) == Failure("no")
    f = Failure("first")
    assert f.and_then(lambda v: Success(v)) is f


def test_map_does_not_swallow_exceptions():
    with pytest.raises(ZeroDivisionError):
        Success(1).map(lambda v: v / 0)


def test_unwrap_failure_raises():
    with pytest.raises(UnwrapError) as info:
        Failure("boom").unwrap()
    assert info.value.result == Failure("boom")
    assert isinstance(info.value, ValueError)


def test_unwrap_error_on_success_raises():
    with pytest.raises(UnwrapError):
        Success(1).unwrap_error()


def test_results_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Success(1).value = 2
    assert Success(1) != Failure(1)
