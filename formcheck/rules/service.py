"""Rules service layer - rule map models, evaluation records and YAML loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Literal

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from formcheck.core.errors import RuleConfigurationError

logger = logging.getLogger(__name__)


# =============================================================================
# Validator Reference
# =============================================================================


class NamedPredicate(BaseModel):
    """Reference to a predicate registered under a symbolic name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    name: str = Field(..., description="Registry key (e.g., 'Required')")


class InlinePredicate(BaseModel):
    """A predicate supplied directly as a callable.

    Called with the engine first, as ``fn(engine, value, args)``, so inline
    checks can reach the registered predicates. With ``bound=False`` it is
    called like a built-in, as ``fn(value, args)``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["inline"] = "inline"
    fn: Callable[..., Any]
    bound: bool = True

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", "<inline>")


# =============================================================================
# Rule Model
# =============================================================================


class RuleDescriptor(BaseModel):
    """One validation check applied to one field."""

    model_config = ConfigDict(frozen=True)

    validator: NamedPredicate | InlinePredicate = Field(
        ..., description="Predicate name or inline callable"
    )
    args: Any = Field(None, description="Passed through to the predicate unchanged")
    message: str = Field(
        "",
        validation_alias=AliasChoices("message", "msg"),
        description="Failure text shown to the user",
    )

    @field_validator("validator", mode="before")
    @classmethod
    def _coerce_validator(cls, value: Any) -> Any:
        if isinstance(value, (NamedPredicate, InlinePredicate)):
            return value
        if isinstance(value, str):
            return NamedPredicate(name=value)
        if callable(value):
            return InlinePredicate(fn=value)
        return value

    @property
    def validator_name(self) -> str:
        return self.validator.name

    @property
    def is_inline(self) -> bool:
        return isinstance(self.validator, InlinePredicate)


def _shorthand_rule(rule: Any) -> Any:
    """A bare name or callable stands for a rule with no args or message."""
    if isinstance(rule, (str, NamedPredicate, InlinePredicate)) or (
        callable(rule) and not isinstance(rule, BaseModel)
    ):
        return {"validator": rule}
    return rule


class RuleMap(BaseModel):
    """Field key to ordered rule sequence.

    Rules for a field are kept in declared order. The labelled form,
    where each field maps rule labels to rules, is accepted and flattened in
    insertion order.
    """

    map_id: str = Field(default="default", description="Rule map identifier")
    description: str | None = Field(None, description="Human-readable description")
    fields: dict[str, list[RuleDescriptor]] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def _flatten_labelled_rules(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        fields = {}
        for key, rules in value.items():
            if isinstance(rules, dict):
                rules = list(rules.values())
            fields[key] = [_shorthand_rule(rule) for rule in rules or []]
        return fields

    def keys(self) -> list[str]:
        return list(self.fields)

    def has_field(self, key: str) -> bool:
        return key in self.fields

    def rules_for(self, key: str) -> list[RuleDescriptor]:
        """Rules for a field, empty when the key has none."""
        return list(self.fields.get(key, []))

    def add_rule(
        self,
        key: str,
        validator: str | Callable[..., Any] | NamedPredicate | InlinePredicate,
        args: Any = None,
        message: str = "",
    ) -> RuleDescriptor:
        """Append a rule to a field's sequence (setup time only)."""
        rule = RuleDescriptor(validator=validator, args=args, message=message)
        self.fields.setdefault(key, []).append(rule)
        return rule

    def validator_names(self) -> set[str]:
        """Names referenced by named predicates across all fields."""
        return {
            rule.validator.name
            for rules in self.fields.values()
            for rule in rules
            if isinstance(rule.validator, NamedPredicate)
        }


# =============================================================================
# Evaluation Records
# =============================================================================


class BoundRule(BaseModel):
    """A rule paired with the field it was evaluated against.

    Built fresh for every check; shared descriptors are never mutated.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    index: int
    rule: RuleDescriptor
    field: Any = None
    value: str = ""
    passed: bool

    @property
    def message(self) -> str:
        return self.rule.message

    @property
    def validator_name(self) -> str:
        return self.rule.validator_name


class FormEvaluation(BaseModel):
    """Every check run during a whole-form evaluation, in encounter order."""

    valid: bool
    rejected: bool = Field(False, description="Target was not form-shaped")
    checks: list[BoundRule] = Field(default_factory=list)

    @property
    def failures(self) -> list[BoundRule]:
        return [check for check in self.checks if not check.passed]


class FieldEvaluation(BaseModel):
    """Checks run for a single field, ending at the first failure."""

    key: str | None = None
    valid: bool
    rejected: bool = Field(False, description="Field was absent or had no key")
    checks: list[BoundRule] = Field(default_factory=list)

    @property
    def failure(self) -> BoundRule | None:
        for check in self.checks:
            if not check.passed:
                return check
        return None


# =============================================================================
# Rule Loader
# =============================================================================


class RuleLoader:
    """Loads rule maps from YAML files or directories."""

    def __init__(self, rules_dir: str | Path | None = None):
        self.rules_dir = Path(rules_dir) if rules_dir else None
        self._maps: dict[str, RuleMap] = {}

    def load_file(self, path: str | Path) -> list[RuleMap]:
        """Load rule maps from a single YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Rule map file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)

        if content is None:
            return []

        items = content if isinstance(content, list) else [content]
        maps = []
        for item in items:
            if not isinstance(item, dict):
                raise ValueError(f"Rule map entries must be mappings: {path}")
            if len(items) == 1:
                item.setdefault("map_id", path.stem)
            elif not item.get("map_id"):
                raise ValueError(f"Every rule map in a multi-map file needs a map_id: {path}")
            maps.append(self._parse_map(item))

        for rule_map in maps:
            self._maps[rule_map.map_id] = rule_map

        logger.debug("Loaded %d rule map(s) from %s", len(maps), path)
        return maps

    def load_directory(self, path: str | Path | None = None) -> list[RuleMap]:
        """Load all YAML rule maps from a directory."""
        path = Path(path) if path else self.rules_dir
        if not path:
            raise ValueError("No rules directory specified")
        if not path.exists():
            raise FileNotFoundError(f"Rules directory not found: {path}")

        maps = []
        for yaml_file in sorted(path.glob("*.yaml")):
            try:
                maps.extend(self.load_file(yaml_file))
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("Failed to load %s: %s", yaml_file, e)

        return maps

    def add_map(self, rule_map: RuleMap) -> None:
        self._maps[rule_map.map_id] = rule_map

    def get_map(self, map_id: str) -> RuleMap | None:
        """Get a loaded rule map by ID."""
        return self._maps.get(map_id)

    def get_all_maps(self) -> list[RuleMap]:
        return list(self._maps.values())

    def _parse_map(self, data: dict) -> RuleMap:
        """Parse a rule map from dictionary data."""
        if not data.get("fields"):
            data["fields"] = {}
        try:
            return RuleMap(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid rule map '{data.get('map_id')}': {e}") from e

    def save_map(self, rule_map: RuleMap, path: str | Path | None = None) -> Path:
        """Save a rule map to a YAML file."""
        if path is None:
            if self.rules_dir is None:
                raise ValueError("No rules directory specified and no path provided")
            path = self.rules_dir / f"{rule_map.map_id}.yaml"
        else:
            path = Path(path)

        data = self._map_to_dict(rule_map)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

        self._maps[rule_map.map_id] = rule_map
        return path

    def _map_to_dict(self, rule_map: RuleMap) -> dict:
        """Convert a RuleMap to a dictionary suitable for YAML serialization."""
        fields: dict[str, list[dict]] = {}
        for key, rules in rule_map.fields.items():
            entries = []
            for rule in rules:
                if rule.is_inline:
                    raise RuleConfigurationError(
                        f"Inline predicate '{rule.validator_name}' on field '{key}' "
                        "cannot be saved to YAML"
                    )
                entry: dict[str, Any] = {"validator": rule.validator_name}
                if rule.args is not None:
                    entry["args"] = rule.args
                if rule.message:
                    entry["message"] = rule.message
                entries.append(entry)
            fields[key] = entries

        data: dict[str, Any] = {"map_id": rule_map.map_id}
        if rule_map.description:
            data["description"] = rule_map.description
        data["fields"] = fields
        return data
