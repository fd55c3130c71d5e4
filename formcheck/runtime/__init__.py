"""Runtime package - rule map evaluation against forms and fields."""

from formcheck.runtime.engine import ValidationEngine

__all__ = ["ValidationEngine"]
