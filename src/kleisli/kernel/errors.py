"""Error types for chain dispatch."""

from __future__ import annotations


class NotChainableError(TypeError):
    """Raised when a value has no bind capability.

    The offending value is preserved for debugging.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"{type(value).__name__} value does not support chain: {value!r}")

    def __repr__(self) -> str:
        return f"NotChainableError(value={self.value!r})"
