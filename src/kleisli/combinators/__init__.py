"""Combinators - function and Kleisli composition primitives."""

from kleisli.combinators.arrow import Kleisli
from kleisli.combinators.ops import (
    chain,
    compose,
    compose_kleisli,
    identity,
    map_each,
    pipe,
    pipe_kleisli,
)

__all__ = [
    "Kleisli",
    "chain",
    "compose",
    "compose_kleisli",
    "identity",
    "map_each",
    "pipe",
    "pipe_kleisli",
]
