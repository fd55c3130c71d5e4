"""Form models, value normalization and the environment accessor contract."""

from .environment import FormEnvironment, ModelFormEnvironment
from .model import FieldLabel, Form, FormField, Marked
from .text import trim_all

__all__ = [
    "FormEnvironment",
    "ModelFormEnvironment",
    "FieldLabel",
    "Form",
    "FormField",
    "Marked",
    "trim_all",
]
