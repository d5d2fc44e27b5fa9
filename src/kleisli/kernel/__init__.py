"""Kernel layer - capability protocols, errors and the chain registry."""

from kleisli.kernel.errors import NotChainableError
from kleisli.kernel.ports import Chainable, Pointed
from kleisli.kernel.registry import Bind, ChainRegistry, default_registry

__all__ = [
    "Chainable",
    "Pointed",
    "NotChainableError",
    # Registry
    "Bind",
    "ChainRegistry",
    "default_registry",
]
