"""In-memory form models consumed by the validation engine.

These stand in for the host's input elements: a ``Form`` holds ``FormField``
entries, each with an optional ``FieldLabel``. The default notification sink
marks invalid fields through their CSS class lists and ARIA flag.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Marked(BaseModel):
    """Anything carrying a CSS class list."""

    classes: list[str] = Field(default_factory=list, description="CSS classes")

    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    def has_class(self, cls: str) -> bool:
        return cls in self.classes

    def add_class(self, cls: str) -> None:
        if not self.has_class(cls):
            self.classes.append(cls)

    def remove_class(self, cls: str) -> None:
        if self.has_class(cls):
            self.classes = [c for c in self.classes if c != cls]


class FieldLabel(Marked):
    """Label decorating a form field."""

    text: str = ""


class FormField(Marked):
    """A single input field."""

    id: str | None = Field(None, description="Identifier attribute")
    name: str | None = Field(None, description="Name attribute")
    value: str = Field("", description="Raw text value")
    label: FieldLabel | None = None
    aria_invalid: bool = False
    error_message: str | None = Field(None, description="Message shown for the last failed rule")


class Form(BaseModel):
    """A form holding input fields in document order."""

    form_id: str | None = None
    fields: list[FormField] = Field(default_factory=list)

    @classmethod
    def from_values(cls, values: dict[str, str], form_id: str | None = None) -> Form:
        """Build a form with one labelled field per key, keyed by id and name."""
        return cls(
            form_id=form_id,
            fields=[
                FormField(id=key, name=key, value=value, label=FieldLabel(text=key))
                for key, value in values.items()
            ],
        )

    def values(self) -> dict[str, str]:
        """Current values keyed by field id (or name)."""
        return {(f.id or f.name): f.value for f in self.fields if f.id or f.name}
