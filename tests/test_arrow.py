"""Tests for the Kleisli arrow wrapper."""

from dataclasses import FrozenInstanceError

import pytest

from kleisli import Kleisli, compose_kleisli

from fakes import NOTHING, Just, get, parse_json, to_upper


def inc(x: int) -> Just[int]:
    return Just(x + 1)


def double(x: int) -> Just[int]:
    return Just(x * 2)


class TestKleisli:
    def test_call_applies_function(self):
        assert Kleisli(inc)(1) == Just(2)

    def test_is_immutable(self):
        arrow = Kleisli(inc)
        with pytest.raises(FrozenInstanceError):
            arrow.fn = double  # type: ignore[misc]

    def test_then_runs_left_to_right(self):
        assert Kleisli(inc).then(double)(3) == Just(8)

    def test_then_accepts_arrow(self):
        assert Kleisli(inc).then(Kleisli(double))(3) == Just(8)

    def test_after_runs_right_to_left(self):
        assert Kleisli(inc).after(double)(3) == Just(7)
        assert Kleisli(inc).after(Kleisli(double))(3) == Just(7)

    def test_then_short_circuits(self):
        arrow = Kleisli(lambda _: NOTHING).then(inc)
        assert arrow(3) == NOTHING

    def test_lift(self):
        lifted = Kleisli(inc).lift()
        assert lifted(Just(1)) == Just(2)
        assert lifted(NOTHING) == NOTHING

    def test_compose(self):
        arrow = Kleisli.compose(to_upper, get("state"), parse_json)
        assert arrow('{"state": "ny"}') == Just("NY")
        assert arrow("not json") == NOTHING

    def test_compose_matches_compose_kleisli(self):
        arrow = Kleisli.compose(inc, double)
        assert arrow(3) == compose_kleisli(inc)(double(3))

    def test_compose_single_function(self):
        assert Kleisli.compose(inc)(1) == Just(2)

    def test_compose_requires_functions(self):
        with pytest.raises(ValueError, match="at least one function"):
            Kleisli.compose()
