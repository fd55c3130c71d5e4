"""Text normalization for field values."""


def trim_all(value: str | None) -> str:
    """Strip both ends and collapse inner whitespace runs to a single space.

    Idempotent: ``trim_all(trim_all(s)) == trim_all(s)``.
    """
    if not value:
        return ""
    return " ".join(value.split())
