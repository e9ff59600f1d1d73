"""Helpers for splitting and joining dot-delimited routes."""

SEGMENT_SEPARATOR = "."


def split_path(path: str) -> tuple[str, ...]:
    """Split a route into its segments, keeping empty ones."""
    return tuple(path.split(SEGMENT_SEPARATOR))


def join_path(segments: tuple[str, ...] | list[str]) -> str:
    """Join segments back into a dot-delimited route."""
    return SEGMENT_SEPARATOR.join(segments)
