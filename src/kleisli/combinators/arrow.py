"""Kleisli arrow - an immutable wrapper around a ``value -> monad`` function."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from kleisli.combinators.ops import chain, compose_kleisli

A = TypeVar("A")


@dataclass(frozen=True)
class Kleisli(Generic[A]):
    """Kleisli arrow.

    Calling the arrow applies ``fn`` to a plain value. Arrows compose
    with :meth:`then` (left to right) and :meth:`after` (right to left),
    threading :func:`chain` between stages.

    Example:
        >>> halve = Kleisli(lambda x: [x // 2] if x % 2 == 0 else [])
        >>> halve.then(lambda x: [x, -x])(8)
        [4, -4]
    """

    fn: Callable[[A], Any]

    def __call__(self, value: A) -> Any:
        return self.fn(value)

    def then(self, other: Callable[[Any], Any]) -> Kleisli[A]:
        """Run this arrow, then bind ``other`` over its result.

        Args:
            other: A Kleisli arrow or any ``value -> monad`` function

        Returns:
            New arrow ``x -> chain(other, self(x))``
        """
        def run(value: A) -> Any:
            return chain(other, self.fn(value))

        return Kleisli(run)

    def after(self, other: Callable[[Any], Any]) -> Kleisli[Any]:
        """Run ``other`` first, then bind this arrow over its result."""
        return _as_arrow(other).then(self)

    def lift(self) -> Callable[[Any], Any]:
        """Return the ``monad -> monad`` form of this arrow."""
        return chain(self.fn)

    @staticmethod
    def compose(*fns: Callable[[Any], Any]) -> Kleisli[Any]:
        """Build an arrow from ``value -> monad`` functions, right to left.

        ``Kleisli.compose(f, g, h)(x) == compose_kleisli(f, g)(h(x))``.

        Raises:
            ValueError: If no functions are given
        """
        if not fns:
            raise ValueError("Kleisli.compose requires at least one function")
        first = fns[-1]
        rest = compose_kleisli(*fns[:-1])

        def run(value: Any) -> Any:
            return rest(first(value))

        return Kleisli(run)


def _as_arrow(fn: Callable[[Any], Any]) -> Kleisli[Any]:
    if isinstance(fn, Kleisli):
        return fn
    return Kleisli(fn)
