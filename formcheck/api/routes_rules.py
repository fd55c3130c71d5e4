"""Routes for inspecting rule maps."""

import logging

from fastapi import APIRouter, HTTPException

from formcheck.core.config import get_settings
from formcheck.rules import RuleLoader
from .models import RuleMapDetailResponse, RuleMapInfo, RuleMapsListResponse, RuleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rules", tags=["Rules"])

# Global instance
_loader: RuleLoader | None = None


def get_loader() -> RuleLoader:
    """Get or create the rule loader instance."""
    global _loader
    if _loader is None:
        settings = get_settings()
        _loader = RuleLoader(settings.rules_dir)
        try:
            _loader.load_directory()
        except FileNotFoundError:
            logger.warning("Rules directory not found: %s", settings.rules_dir)
    return _loader


def set_loader(loader: RuleLoader | None) -> None:
    """Replace the shared loader (None resets to lazy loading)."""
    global _loader
    _loader = loader


@router.get("", response_model=RuleMapsListResponse)
async def list_rule_maps() -> RuleMapsListResponse:
    """List all loaded rule maps."""
    maps = [
        RuleMapInfo(
            map_id=rule_map.map_id,
            description=rule_map.description,
            fields=rule_map.keys(),
            rule_count=sum(len(rules) for rules in rule_map.fields.values()),
        )
        for rule_map in get_loader().get_all_maps()
    ]
    return RuleMapsListResponse(maps=maps, total=len(maps))


@router.get("/{map_id}", response_model=RuleMapDetailResponse)
async def get_rule_map(map_id: str) -> RuleMapDetailResponse:
    """Get the rules of a specific rule map."""
    rule_map = get_loader().get_map(map_id)
    if not rule_map:
        raise HTTPException(status_code=404, detail=f"Rule map not found: {map_id}")

    fields = {
        key: [
            RuleResponse(
                validator=rule.validator_name,
                inline=rule.is_inline,
                args=None if rule.is_inline else rule.args,
                message=rule.message,
            )
            for rule in rules
        ]
        for key, rules in rule_map.fields.items()
    }
    return RuleMapDetailResponse(
        map_id=rule_map.map_id,
        description=rule_map.description,
        fields=fields,
    )
