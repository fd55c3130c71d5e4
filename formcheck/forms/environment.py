"""Environment accessors the engine uses to reach fields and values."""

from __future__ import annotations

from typing import Any, Iterable, Protocol

from .model import Form, FormField


class FormEnvironment(Protocol):
    """Capabilities the engine consumes from its host.

    Field references and form targets are opaque to the engine; only the
    environment knows what they are.
    """

    def is_form(self, target: Any) -> bool: ...

    def locate_field(self, form: Any, key: str) -> Any | None: ...

    def identify(self, field: Any) -> str | None: ...

    def read_value(self, field: Any) -> str: ...

    def write_value(self, field: Any, value: str) -> None: ...

    def iter_fields(self, form: Any) -> Iterable[Any]: ...


class ModelFormEnvironment:
    """Environment over the in-memory ``Form`` / ``FormField`` models."""

    def is_form(self, target: Any) -> bool:
        return isinstance(target, Form)

    def locate_field(self, form: Form, key: str) -> FormField | None:
        """Find a field by id first, then by name."""
        for field in form.fields:
            if field.id == key:
                return field
        for field in form.fields:
            if field.name == key:
                return field
        return None

    def identify(self, field: Any) -> str | None:
        """Prefer the id attribute, fall back to the name.

        Anything that is not a ``FormField`` has no key.
        """
        if not isinstance(field, FormField):
            return None
        return field.id or field.name or None

    def read_value(self, field: FormField) -> str:
        return field.value

    def write_value(self, field: FormField, value: str) -> None:
        field.value = value

    def iter_fields(self, form: Form) -> Iterable[FormField]:
        return list(form.fields)
