"""Lenient parsing of query parameters.

Listing endpoints never reject a bad ``page``, ``limit`` or ``sort``;
they fall back to defaults instead.
"""

from engage.domain.repository import CommentSortOrder


def positive_int(raw: str | None, default: int, maximum: int | None = None) -> int:
    """Parse a positive integer, falling back to ``default``.

    Args:
        raw: Query string value (may be missing or garbage)
        default: Value used when ``raw`` is not a positive integer
        maximum: Optional upper bound applied after parsing

    Returns:
        The parsed, bounded value
    """
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        value = default
    if value <= 0:
        value = default
    if maximum is not None:
        value = min(value, maximum)
    return value


def sort_order(raw: str | None) -> CommentSortOrder:
    """Parse a sort order; unknown values mean most recent first."""
    try:
        return CommentSortOrder(raw) if raw else CommentSortOrder.RECENT
    except ValueError:
        return CommentSortOrder.RECENT
