"""Capability protocols for monadic values - pure abstractions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

A = TypeVar("A")


@runtime_checkable
class Chainable(Protocol[A]):
    """A value supporting bind.

    ``m.chain(f)`` feeds the wrapped value(s) of ``m`` to ``f`` and
    returns the flattened result. ``f`` must return a value of the same
    monad.
    """

    def chain(self, f: Callable[[A], Any]) -> Any: ...


@runtime_checkable
class Pointed(Protocol[A]):
    """Lift a plain value into the monad."""

    @classmethod
    def of(cls, value: A) -> Pointed[A]: ...
