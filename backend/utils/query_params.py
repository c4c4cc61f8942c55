"""Shared query parameter parsing utilities."""


def parse_csv_param(value: str | None) -> list[str] | None:
    """Parse a comma-separated query parameter into a list.

    Args:
        value: Comma-separated string, or None.

    Returns:
        List of non-empty, stripped items, or None if there are none.
    """
    if not value:
        return None
    result = [item.strip() for item in value.split(",") if item.strip()]
    return result if result else None
