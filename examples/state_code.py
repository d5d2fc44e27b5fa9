from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from kleisli import ChainRegistry, chain, compose, compose_kleisli, default_registry


@dataclass(frozen=True)
class Maybe:
    """Minimal optional value; ``None`` marks absence."""

    value: Any = None

    @property
    def is_nothing(self) -> bool:
        return self.value is None


def bind_maybe(f, m: Maybe) -> Maybe:
    return m if m.is_nothing else f(m.value)


def parse_json(text: str) -> Maybe:
    try:
        return Maybe(json.loads(text))
    except json.JSONDecodeError:
        return Maybe()


def get(key: str):
    def lookup(obj: Any) -> Maybe:
        if isinstance(obj, dict):
            return Maybe(obj.get(key))
        return Maybe()

    return lookup


get_state_code = compose_kleisli(
    compose(Maybe, str.upper),
    get("state"),
    get("address"),
    get("user"),
    parse_json,
)


def main() -> None:
    registry: ChainRegistry = default_registry()
    registry.register(Maybe, bind_maybe)

    print(get_state_code(Maybe('{"user":{"address":{"state":"ny"}}}')))
    print(get_state_code(Maybe("[Invalid JSON]")))

    # a single stage is a plain chain
    print(chain(parse_json, Maybe('{"user": "x"}')))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
