"""Routes for validating submitted values against rule maps."""

from fastapi import APIRouter, HTTPException

from formcheck.core.errors import RuleConfigurationError
from formcheck.forms import Form, FormField
from formcheck.rules import BoundRule
from formcheck.runtime import ValidationEngine
from .models import (
    FieldValidationRequest,
    FieldValidationResponse,
    FormValidationRequest,
    FormValidationResponse,
    RuleCheckResponse,
)
from .routes_rules import get_loader

router = APIRouter(prefix="/validate", tags=["Validation"])

# Engines by rule map id
_engines: dict[str, ValidationEngine] = {}


def get_engine(map_id: str) -> ValidationEngine:
    """Get or create the engine for a loaded rule map."""
    engine = _engines.get(map_id)
    if engine is None:
        rule_map = get_loader().get_map(map_id)
        if rule_map is None:
            raise HTTPException(status_code=404, detail=f"Rule map not found: {map_id}")
        engine = ValidationEngine(rule_map)
        _engines[map_id] = engine
    return engine


def reset_engines() -> None:
    _engines.clear()


def _check_response(check: BoundRule) -> RuleCheckResponse:
    return RuleCheckResponse(
        field=check.key,
        validator=check.validator_name,
        passed=check.passed,
        message=check.message,
        value=check.value,
    )


@router.post("/form", response_model=FormValidationResponse)
async def validate_form(request: FormValidationRequest) -> FormValidationResponse:
    """Validate all submitted values, reporting every failing rule."""
    engine = get_engine(request.map_id)
    form = Form.from_values(request.values, form_id=request.map_id)

    try:
        evaluation = engine.check_form(form)
    except RuleConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return FormValidationResponse(
        map_id=request.map_id,
        valid=evaluation.valid,
        values=form.values(),
        failures=[_check_response(c) for c in evaluation.failures],
        checks=[_check_response(c) for c in evaluation.checks],
    )


@router.post("/field", response_model=FieldValidationResponse)
async def validate_field(request: FieldValidationRequest) -> FieldValidationResponse:
    """Validate one value, stopping at its first failing rule."""
    engine = get_engine(request.map_id)
    field = FormField(id=request.field, name=request.field, value=request.value)

    try:
        evaluation = engine.check_field(field)
    except RuleConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    failure = evaluation.failure
    return FieldValidationResponse(
        map_id=request.map_id,
        field=request.field,
        valid=evaluation.valid,
        value=field.value,
        failure=_check_response(failure) if failure else None,
        checks=[_check_response(c) for c in evaluation.checks],
    )
