from .combinators import (
    Kleisli,
    chain,
    compose,
    compose_kleisli,
    identity,
    map_each,
    pipe,
    pipe_kleisli,
)
from .kernel import (
    Chainable,
    ChainRegistry,
    NotChainableError,
    Pointed,
    default_registry,
)

__all__ = [
    # Kleisli composition
    "compose_kleisli",
    "pipe_kleisli",
    "Kleisli",
    # Primitives
    "chain",
    "compose",
    "pipe",
    "map_each",
    "identity",
    # Capabilities
    "Chainable",
    "Pointed",
    "ChainRegistry",
    "default_registry",
    # Errors
    "NotChainableError",
]
