"""HTTP routes for rule map inspection and validation."""

from .routes_rules import router as rules_router, get_loader, set_loader
from .routes_validate import router as validate_router, get_engine, reset_engines

__all__ = [
    "rules_router",
    "validate_router",
    "get_loader",
    "set_loader",
    "get_engine",
    "reset_engines",
]
