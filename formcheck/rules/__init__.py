"""Rules domain - rule maps, evaluation records and rule map loading."""

from .service import (
    # Models
    NamedPredicate,
    InlinePredicate,
    RuleDescriptor,
    RuleMap,
    BoundRule,
    FormEvaluation,
    FieldEvaluation,
    # Services
    RuleLoader,
)

__all__ = [
    "NamedPredicate",
    "InlinePredicate",
    "RuleDescriptor",
    "RuleMap",
    "BoundRule",
    "FormEvaluation",
    "FieldEvaluation",
    "RuleLoader",
]
