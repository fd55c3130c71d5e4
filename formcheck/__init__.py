"""formcheck - declarative field validation over rule maps.

A rule map binds field keys to ordered rules. The validation engine runs
those rules against live form values, either for the whole form (all
failures reported at once) or for one field (stops at the first failure),
and reports results through a notification sink.
"""

__version__ = "0.1.0"

from .core import RuleConfigurationError, UnknownValidatorError
from .forms import FieldLabel, Form, FormField, ModelFormEnvironment, trim_all
from .notifications import MarkerSink, NotificationSink
from .predicates import PredicateRegistry, default_registry
from .rules import (
    BoundRule,
    FieldEvaluation,
    FormEvaluation,
    InlinePredicate,
    NamedPredicate,
    RuleDescriptor,
    RuleLoader,
    RuleMap,
)
from .runtime import ValidationEngine

__all__ = [
    # Errors
    "RuleConfigurationError",
    "UnknownValidatorError",
    # Forms
    "FieldLabel",
    "Form",
    "FormField",
    "ModelFormEnvironment",
    "trim_all",
    # Notifications
    "MarkerSink",
    "NotificationSink",
    # Predicates
    "PredicateRegistry",
    "default_registry",
    # Rules
    "BoundRule",
    "FieldEvaluation",
    "FormEvaluation",
    "InlinePredicate",
    "NamedPredicate",
    "RuleDescriptor",
    "RuleLoader",
    "RuleMap",
    # Engine
    "ValidationEngine",
]
