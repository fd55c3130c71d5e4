"""Pytest fixtures for test suite."""

import pytest
from pathlib import Path
from typing import Any

from formcheck.forms import FieldLabel, Form, FormField
from formcheck.notifications import NotificationSink
from formcheck.rules import BoundRule, RuleLoader, RuleMap


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def rules_dir() -> Path:
    """Path to the bundled rule maps."""
    return Path(__file__).parent.parent / "formcheck" / "rules" / "data"


@pytest.fixture
def rule_loader(rules_dir: Path) -> RuleLoader:
    """Rule loader with the bundled rule maps loaded."""
    loader = RuleLoader(rules_dir)
    loader.load_directory()
    return loader


@pytest.fixture
def application_map(rule_loader: RuleLoader) -> RuleMap:
    """The bundled applicant form rule map."""
    return rule_loader.get_map("application_form")


@pytest.fixture
def make_form():
    """Build a form with labelled fields keyed by id."""

    def _make(**values: str) -> Form:
        return Form(
            form_id="form1",
            fields=[
                FormField(id=key, name=key, value=value, label=FieldLabel(text=key))
                for key, value in values.items()
            ],
        )

    return _make


# =============================================================================
# Notification Fixtures
# =============================================================================


class RecordingSink(NotificationSink):
    """Sink that records every hook call in order."""

    def __init__(self, form_result: Any = None):
        self.calls: list[tuple] = []
        self.form_result = form_result

    def on_field_success(self, check: BoundRule) -> bool:
        self.calls.append(("field_success", check))
        return True

    def on_field_error(self, check: BoundRule) -> bool:
        self.calls.append(("field_error", check))
        return False

    def on_form_success(self, form) -> bool:
        self.calls.append(("form_success", form))
        return True if self.form_result is None else self.form_result

    def on_form_error(self, form, failures: list[BoundRule]) -> bool:
        self.calls.append(("form_error", form, failures))
        return False if self.form_result is None else self.form_result

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def spy():
    """Inline predicate factory that records invocations."""

    class Spy:
        def __init__(self):
            self.calls: list[str] = []

        def predicate(self, label: str, result: Any):
            def _check(engine, value, args):
                self.calls.append(label)
                return result

            _check.__name__ = label
            return _check

    return Spy()


@pytest.fixture
def sink_factory():
    """The recording sink class, for tests needing custom form results."""
    return RecordingSink
