"""Notification hooks through which evaluation results reach presentation."""

from __future__ import annotations

from typing import Any

from formcheck.core.config import get_settings
from formcheck.forms.environment import FormEnvironment, ModelFormEnvironment
from formcheck.rules.service import BoundRule


class NotificationSink:
    """Presentation hooks called by the validation engine.

    The engine only calls these at fixed points; the form-level hooks' return
    value becomes the engine's own return value. Subclass and override any
    hook to change presentation without touching evaluation.
    """

    def on_field_success(self, check: BoundRule) -> bool:
        return True

    def on_field_error(self, check: BoundRule) -> bool:
        return False

    def on_form_success(self, form: Any) -> bool:
        return True

    def on_form_error(self, form: Any, failures: list[BoundRule]) -> bool:
        return False


class MarkerSink(NotificationSink):
    """Marks invalid fields and their labels with CSS classes and ARIA state.

    Works against the ``FormField`` model: the field gets the invalid field
    class, its label gets the invalid label class, ``aria_invalid`` is set and
    the failing rule's message is shown.
    """

    def __init__(
        self,
        environment: FormEnvironment | None = None,
        field_class: str | None = None,
        label_class: str | None = None,
    ):
        settings = get_settings()
        self.environment = environment or ModelFormEnvironment()
        self.field_class = field_class or settings.invalid_field_class
        self.label_class = label_class or settings.invalid_label_class

    def mark(self, field: Any, message: str | None = None) -> None:
        field.add_class(self.field_class)
        if field.label is not None:
            field.label.add_class(self.label_class)
        field.aria_invalid = True
        field.error_message = message or None

    def clear(self, field: Any) -> None:
        field.remove_class(self.field_class)
        if field.label is not None:
            field.label.remove_class(self.label_class)
        field.aria_invalid = False
        field.error_message = None

    def on_field_success(self, check: BoundRule) -> bool:
        self.clear(check.field)
        return True

    def on_field_error(self, check: BoundRule) -> bool:
        self.mark(check.field, check.message)
        return False

    def on_form_success(self, form: Any) -> bool:
        for field in self.environment.iter_fields(form):
            self.clear(field)
        return True

    def on_form_error(self, form: Any, failures: list[BoundRule]) -> bool:
        for field in self.environment.iter_fields(form):
            self.clear(field)
        # first failing rule of a field supplies its message
        for check in reversed(failures):
            self.mark(check.field, check.message)
        return False
