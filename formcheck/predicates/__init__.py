"""Predicate layer - named built-in checks and their registry."""

from .builtin import (
    BUILTIN_PREDICATES,
    email,
    required,
    valid_chars,
    valid_chars_ext1,
)
from .registry import Predicate, PredicateRegistry, default_registry

__all__ = [
    "BUILTIN_PREDICATES",
    "email",
    "required",
    "valid_chars",
    "valid_chars_ext1",
    "Predicate",
    "PredicateRegistry",
    "default_registry",
]
