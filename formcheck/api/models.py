"""Pydantic models for API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field


# =============================================================================
# Validation Models
# =============================================================================


class FormValidationRequest(BaseModel):
    """Request to validate a whole form against a rule map."""

    map_id: str = Field(..., description="Rule map to evaluate")
    values: dict[str, str] = Field(default_factory=dict, description="Raw values by field key")


class FieldValidationRequest(BaseModel):
    """Request to validate one field against a rule map."""

    map_id: str = Field(..., description="Rule map to evaluate")
    field: str = Field(..., description="Field key")
    value: str = ""


class RuleCheckResponse(BaseModel):
    """Outcome of one rule against one field."""

    field: str
    validator: str
    passed: bool
    message: str = ""
    value: str = ""


class FormValidationResponse(BaseModel):
    """Result of a whole-form validation."""

    map_id: str
    valid: bool
    values: dict[str, str] = Field(..., description="Values after normalization")
    failures: list[RuleCheckResponse]
    checks: list[RuleCheckResponse]


class FieldValidationResponse(BaseModel):
    """Result of a single-field validation."""

    map_id: str
    field: str
    valid: bool
    value: str = Field(..., description="Value after normalization")
    failure: RuleCheckResponse | None = None
    checks: list[RuleCheckResponse]


# =============================================================================
# Rule Map Models
# =============================================================================


class RuleMapInfo(BaseModel):
    """Summary information about a rule map."""

    map_id: str
    description: str | None
    fields: list[str]
    rule_count: int


class RuleMapsListResponse(BaseModel):
    """Response listing available rule maps."""

    maps: list[RuleMapInfo]
    total: int


class RuleResponse(BaseModel):
    """A single rule of a rule map."""

    validator: str
    inline: bool = False
    args: Any = None
    message: str = ""


class RuleMapDetailResponse(BaseModel):
    """Detailed rule map information."""

    map_id: str
    description: str | None
    fields: dict[str, list[RuleResponse]]
