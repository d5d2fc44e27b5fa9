"""Monad laws for the test monads and for the built-in list/awaitable binds."""

import pytest

from kleisli.combinators.laws import (
    associativity,
    kleisli_associativity,
    left_identity,
    right_identity,
)

from fakes import NOTHING, Err, Just, Ok


def maybe_half(x: int):
    return Just(x // 2) if x % 2 == 0 else NOTHING


def maybe_inc(x: int):
    return Just(x + 1)


def result_half(x: int):
    return Ok(x // 2) if x % 2 == 0 else Err(x)


def result_inc(x: int):
    return Ok(x + 1)


def list_split(x: int):
    return [x, x + 1]


def list_evens(x: int):
    return [x] if x % 2 == 0 else []


def list_unit(x: int):
    return [x]


MONADS = [
    pytest.param(Just.of, maybe_half, maybe_inc, [Just(4), Just(3), NOTHING], id="maybe"),
    pytest.param(Ok.of, result_half, result_inc, [Ok(4), Ok(3), Err("e")], id="result"),
    pytest.param(list_unit, list_split, list_evens, [[], [1, 2], [4]], id="list"),
]


@pytest.mark.parametrize("of, f, g, samples", MONADS)
class TestMonadLaws:
    def test_left_identity(self, of, f, g, samples):
        for value in (0, 3, 8):
            lhs, rhs = left_identity(of, f, value)
            assert lhs == rhs

    def test_right_identity(self, of, f, g, samples):
        for m in samples:
            lhs, rhs = right_identity(of, m)
            assert lhs == rhs

    def test_associativity(self, of, f, g, samples):
        for m in samples:
            lhs, rhs = associativity(m, f, g)
            assert lhs == rhs

    def test_kleisli_associativity(self, of, f, g, samples):
        for m in samples:
            lhs, rhs = kleisli_associativity(f, g, f, m)
            assert lhs == rhs
