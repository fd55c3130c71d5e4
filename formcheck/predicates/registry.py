"""Registry of named predicates resolvable from rule descriptors."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .builtin import BUILTIN_PREDICATES

Predicate = Callable[[str, Any], Any]


class PredicateRegistry:
    """Open mapping from predicate name to predicate callable.

    Applications extend it without touching the engine:

        registry = default_registry()

        @registry.register("PostCode")
        def post_code(value, args):
            return value.isdigit() and len(value) == 5
    """

    def __init__(self, predicates: dict[str, Predicate] | None = None):
        self._predicates: dict[str, Predicate] = dict(predicates or {})

    def register(self, name: str, predicate: Predicate | None = None):
        """Register ``predicate`` under ``name``.

        Without a predicate, returns a decorator.
        """
        if predicate is not None:
            self._predicates[name] = predicate
            return predicate

        def decorator(fn: Predicate) -> Predicate:
            self._predicates[name] = fn
            return fn

        return decorator

    def unregister(self, name: str) -> None:
        self._predicates.pop(name, None)

    def get(self, name: str) -> Predicate | None:
        """Get a predicate by name, or None if it is not registered."""
        return self._predicates.get(name)

    def names(self) -> list[str]:
        return sorted(self._predicates)

    def copy(self) -> PredicateRegistry:
        return PredicateRegistry(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)


def default_registry() -> PredicateRegistry:
    """Fresh registry holding the built-in predicates."""
    return PredicateRegistry(BUILTIN_PREDICATES)
