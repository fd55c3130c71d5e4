"""Error types for rule configuration defects."""


class RuleConfigurationError(ValueError):
    """Raised when a rule map cannot be evaluated as configured."""

    pass


class UnknownValidatorError(RuleConfigurationError):
    """Raised when a rule names a predicate that is not registered."""

    def __init__(self, name: str, field_key: str | None = None):
        self.name = name
        self.field_key = field_key
        where = f" (field '{field_key}')" if field_key else ""
        super().__init__(f"Unknown validator: {name}{where}")
