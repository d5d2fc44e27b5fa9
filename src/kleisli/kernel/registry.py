"""Registry of bind implementations for foreign monad types."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Bind = Callable[[Callable[[Any], Any], Any], Any]


class ChainRegistry:
    """Registry mapping types to ``bind(f, m)`` implementations.

    Used by :func:`kleisli.combinators.ops.chain` for monads that do not
    expose a ``chain`` method of their own. Lookup follows the MRO, so a
    bind registered for a base class also covers its subclasses.
    """

    def __init__(self, binds: dict[type, Bind] | None = None) -> None:
        self._binds: dict[type, Bind] = dict(binds or {})

    def register(self, type_: type, bind: Bind) -> None:
        """Register a bind implementation for a type."""
        self._binds[type_] = bind
        logger.debug("Registered chain for %s", type_.__qualname__)

    def unregister(self, type_: type) -> None:
        if type_ not in self._binds:
            raise KeyError(f"No chain registered for '{type_.__qualname__}'")
        del self._binds[type_]
        logger.debug("Unregistered chain for %s", type_.__qualname__)

    def resolve(self, type_: type) -> Bind | None:
        """Return the bind for ``type_`` or its nearest registered base."""
        for klass in type_.__mro__:
            bind = self._binds.get(klass)
            if bind is not None:
                return bind
        return None

    def __contains__(self, type_: object) -> bool:
        return type_ in self._binds

    def __len__(self) -> int:
        return len(self._binds)


_default = ChainRegistry()


def default_registry() -> ChainRegistry:
    """Return the process-wide registry consulted by ``chain``."""
    return _default
