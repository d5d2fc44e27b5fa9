"""Combinator primitives: identity, compose, pipe, map_each, chain, compose_kleisli, pipe_kleisli."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from functools import partial
from typing import Any, TypeVar

from kleisli.kernel.errors import NotChainableError
from kleisli.kernel.registry import ChainRegistry, default_registry

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


def identity(value: T) -> T:
    """Return the argument unchanged."""
    return value


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary callables from right to left.

    ``compose(f, g, h)(x) == f(g(h(x)))``. With no functions the result
    is :func:`identity`.

    Example:
        >>> inc_then_double = compose(lambda x: x * 2, lambda x: x + 1)
        >>> inc_then_double(3)
        8
    """
    if not fns:
        return identity

    def composed(value: Any) -> Any:
        for fn in reversed(fns):
            value = fn(value)
        return value

    return composed


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary callables from left to right."""
    return compose(*reversed(fns))


def map_each(fn: Callable[[T], U], items: Iterable[T]) -> list[U]:
    """Apply ``fn`` to each element and return a list in the same order."""
    return [fn(item) for item in items]


def chain(
    f: Callable[[Any], Any],
    m: Any = _MISSING,
    *,
    registry: ChainRegistry | None = None,
) -> Any:
    """Bind ``f`` over the monadic value ``m``.

    Called with ``f`` alone, returns the lifted function ``m -> chain(f, m)``.

    Dispatch, first match wins:
        - a bind registered for ``type(m)`` (or a base class) in ``registry``
        - ``m.chain(f)`` when ``m`` has a callable ``chain`` attribute
        - awaitables: a coroutine awaiting ``m`` then ``f`` of its value
        - lists and tuples: ``f`` applied to each element, results concatenated
        - callables (reader monad): ``lambda x: f(m(x))(x)``

    Args:
        f: Continuation mapping a plain value to a monadic value
        m: The monadic value to bind over
        registry: Registry to consult, defaults to default_registry()

    Returns:
        The flattened monadic value, or the lifted function when ``m`` is omitted

    Raises:
        NotChainableError: If ``m`` matches none of the above
    """
    if m is _MISSING:
        return partial(chain, f, registry=registry)

    used_registry = registry if registry is not None else default_registry()
    bind = used_registry.resolve(type(m))
    if bind is not None:
        return bind(f, m)

    method = getattr(m, "chain", None)
    if callable(method):
        return method(f)

    if inspect.isawaitable(m):
        return _chain_awaitable(f, m)

    if isinstance(m, (list, tuple)):
        return _chain_sequence(f, m)

    if callable(m):
        return lambda value: f(m(value))(value)

    raise NotChainableError(m)


async def _chain_awaitable(f: Callable[[Any], Any], m: Any) -> Any:
    value = await m
    result = f(value)
    if inspect.isawaitable(result):
        return await result
    return result


def _chain_sequence(f: Callable[[Any], Any], m: list[Any] | tuple[Any, ...]) -> list[Any] | tuple[Any, ...]:
    flat: list[Any] = []
    for item in m:
        result = f(item)
        # str and bytes are iterable but not list-like
        if not isinstance(result, (list, tuple)):
            raise NotChainableError(result)
        flat.extend(result)
    if isinstance(m, tuple):
        return tuple(flat)
    return flat


def compose_kleisli(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Right-to-left Kleisli composition.

    Each function maps a plain value to a monadic value. Every function
    is lifted through :func:`chain` and the lifted functions are
    composed right to left, so ``compose_kleisli(h, g, f)`` equals
    ``compose(chain(h), chain(g), chain(f))``. The returned function
    takes a monadic value.

    With no functions the result is :func:`identity`.

    Nothing is validated here; errors surface when the returned function
    is called and propagate unchanged.

    Example:
        >>> first_even = compose_kleisli(
        ...     lambda x: [x] if x % 2 == 0 else [],
        ...     lambda x: [x, x + 1],
        ... )
        >>> first_even([1, 4])
        [2, 4]
    """
    if not fns:
        return identity
    return compose(*map_each(chain, fns))


def pipe_kleisli(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right Kleisli composition.

    ``pipe_kleisli(f, g, h) == compose_kleisli(h, g, f)``.
    """
    return compose_kleisli(*reversed(fns))
