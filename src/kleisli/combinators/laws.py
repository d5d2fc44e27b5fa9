"""Monad and Kleisli-category laws as executable checks."""

# Every check returns a (lhs, rhs) pair; the law holds when lhs == rhs
# under the monad's own notion of equality.
#
# 1. Left identity: chain(f, of(x)) == f(x)
#
# 2. Right identity: chain(of, m) == m
#
# 3. Associativity: chain(g, chain(f, m)) == chain(lambda x: chain(g, f(x)), m)
#
# 4. Kleisli associativity: grouping of compose_kleisli does not matter
#    compose(compose_kleisli(f, g), chain(h)) == compose(chain(f), compose_kleisli(g, h))

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kleisli.combinators.ops import chain, compose, compose_kleisli

Pair = tuple[Any, Any]


def left_identity(of: Callable[[Any], Any], f: Callable[[Any], Any], value: Any) -> Pair:
    return chain(f, of(value)), f(value)


def right_identity(of: Callable[[Any], Any], m: Any) -> Pair:
    return chain(of, m), m


def associativity(m: Any, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Pair:
    return chain(g, chain(f, m)), chain(lambda value: chain(g, f(value)), m)


def kleisli_associativity(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    m: Any,
) -> Pair:
    left = compose(compose_kleisli(f, g), chain(h))
    right = compose(chain(f), compose_kleisli(g, h))
    return left(m), right(m)
