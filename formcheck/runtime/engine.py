"""Validation engine - evaluates a rule map against forms and single fields.

Two strategies share one resolution step:

- ``evaluate_form`` runs every rule of every field present in the form and
  reports all failures at once through the form-level hooks.
- ``evaluate_field`` runs one field's rules in order and stops at the first
  failure, notifying per rule.

Each check produces a fresh ``BoundRule`` record, so the rule map itself is
never written to and one engine can serve overlapping calls.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterator, Mapping

from formcheck.core.errors import UnknownValidatorError
from formcheck.forms.environment import FormEnvironment, ModelFormEnvironment
from formcheck.forms.text import trim_all
from formcheck.notifications.sink import MarkerSink, NotificationSink
from formcheck.predicates.registry import PredicateRegistry, default_registry
from formcheck.rules.service import (
    BoundRule,
    FieldEvaluation,
    FormEvaluation,
    InlinePredicate,
    NamedPredicate,
    RuleDescriptor,
    RuleMap,
)

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Evaluates a rule map through an environment and a notification sink."""

    def __init__(
        self,
        rule_map: RuleMap | Mapping[str, Any],
        environment: FormEnvironment | None = None,
        sink: NotificationSink | None = None,
        registry: PredicateRegistry | None = None,
    ):
        if not isinstance(rule_map, RuleMap):
            rule_map = RuleMap(fields=dict(rule_map))
        self.rule_map = rule_map
        self.environment = environment or ModelFormEnvironment()
        self.sink = sink or MarkerSink(self.environment)
        self.predicates = registry if registry is not None else default_registry()

    # ------------------------------------------------------------------
    # Whole form
    # ------------------------------------------------------------------

    def evaluate_form(self, form: Any) -> bool:
        """Validate every mapped field of a form and notify the sink.

        Returns the result of the form-level hook that was called, or False
        without any notification when ``form`` is not form-shaped.
        """
        if not self.environment.is_form(form):
            logger.debug("Rejected non-form target: %s", type(form).__name__)
            return False

        evaluation = self._check_form(form)
        failures = evaluation.failures
        if failures:
            logger.debug("Form failed %d rule(s)", len(failures))
            return self.sink.on_form_error(form, failures)
        return self.sink.on_form_success(form)

    def check_form(self, form: Any) -> FormEvaluation:
        """Same evaluation as ``evaluate_form`` without calling the sink."""
        if not self.environment.is_form(form):
            return FormEvaluation(valid=False, rejected=True)
        return self._check_form(form)

    def _check_form(self, form: Any) -> FormEvaluation:
        present = []
        for key in self.rule_map.keys():
            field = self.environment.locate_field(form, key)
            if field is None:
                continue
            self._resolve_all(key)
            present.append((key, field))

        checks: list[BoundRule] = []
        for key, field in present:
            value = self._normalize(field)
            for index, rule in enumerate(self.rule_map.rules_for(key)):
                checks.append(self._check(key, index, rule, field, value))

        return FormEvaluation(
            valid=all(check.passed for check in checks),
            checks=checks,
        )

    # ------------------------------------------------------------------
    # Single field
    # ------------------------------------------------------------------

    def evaluate_field(self, field: Any) -> bool:
        """Validate one field, stopping at its first failing rule.

        A field without rules is valid. An absent field, or one with neither
        id nor name, is rejected with False.
        """
        key = self._field_key(field)
        if key is None:
            return False

        for check in self._iter_field_checks(key, field):
            if check.passed:
                self.sink.on_field_success(check)
                continue
            self.sink.on_field_error(check)
            logger.debug("Field %s failed %s", key, check.validator_name)
            return False
        return True

    def check_field(self, field: Any) -> FieldEvaluation:
        """Same evaluation as ``evaluate_field`` without calling the sink."""
        key = self._field_key(field)
        if key is None:
            return FieldEvaluation(valid=False, rejected=True)

        checks: list[BoundRule] = []
        for check in self._iter_field_checks(key, field):
            checks.append(check)
            if not check.passed:
                break
        return FieldEvaluation(
            key=key,
            valid=all(check.passed for check in checks),
            checks=checks,
        )

    def _field_key(self, field: Any) -> str | None:
        if field is None:
            return None
        return self.environment.identify(field)

    def _iter_field_checks(self, key: str, field: Any) -> Iterator[BoundRule]:
        # lazy: a consumer that stops early keeps later rules from running
        self._resolve_all(key)
        value = self._normalize(field)
        for index, rule in enumerate(self.rule_map.rules_for(key)):
            yield self._check(key, index, rule, field, value)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, rule: RuleDescriptor, key: str | None = None) -> Callable[[str, Any], Any]:
        """Return the ``(value, args)`` callable behind a rule's validator.

        Inline predicates are bound to this engine unless built with
        ``bound=False``.

        Raises:
            UnknownValidatorError: If a named predicate is not registered.
        """
        match rule.validator:
            case NamedPredicate(name=name):
                predicate = self.predicates.get(name)
                if predicate is None:
                    raise UnknownValidatorError(name, key)
                return predicate
            case InlinePredicate(fn=fn, bound=True):
                return functools.partial(fn, self)
            case InlinePredicate(fn=fn):
                return fn
        raise TypeError(f"Unsupported validator: {rule.validator!r}")

    def _resolve_all(self, key: str) -> None:
        # configuration errors surface before any value is written back
        for rule in self.rule_map.rules_for(key):
            self.resolve(rule, key)

    def invoke(self, rule: RuleDescriptor, value: str, key: str | None = None) -> bool:
        """Run a rule against a normalized value.

        Predicates may return any truthy or falsy value; the result is
        coerced with ``bool()``.
        """
        return bool(self.resolve(rule, key)(value, rule.args))

    def _check(
        self, key: str, index: int, rule: RuleDescriptor, field: Any, value: str
    ) -> BoundRule:
        passed = self.invoke(rule, value, key)
        return BoundRule(
            key=key,
            index=index,
            rule=rule,
            field=field,
            value=value,
            passed=passed,
        )

    def _normalize(self, field: Any) -> str:
        """Trim and collapse the field's value, writing it back to the field."""
        value = trim_all(self.environment.read_value(field))
        self.environment.write_value(field, value)
        return value
