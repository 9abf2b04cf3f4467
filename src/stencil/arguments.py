"""Parsing and slicing helpers for lambda section arguments.

Lambda sections receive their arguments as a single string of positional
fields separated by one space, e.g. ``"1,-1 . Azure.Messaging.EventGrid"``.
The last field keeps any remaining spaces so free text can be passed through
unchanged.
"""

from __future__ import annotations

from .errors import ArgumentCountError

__all__ = [
    "parse_fields",
    "parse_index_pair",
    "rejoin_segments",
    "slice_segments",
]


def parse_fields(text: str, count: int) -> list[str]:
    """Split ``text`` into exactly ``count`` space-separated fields.

    Only the first ``count - 1`` spaces separate fields; anything after them
    belongs to the final field.

    Raises
    ------
    ArgumentCountError
        If ``text`` does not contain enough fields.
    """

    fields = text.split(" ", count - 1)
    if len(fields) != count:
        raise ArgumentCountError(count, len(fields), text)
    return fields


def parse_index_pair(field: str) -> tuple[int, int | None]:
    """Parse a ``"start,end"`` field into slice bounds.

    ``end`` may be omitted (``"2"`` or ``"2,"``) in which case ``None`` is
    returned for it, meaning "through the last segment".
    """

    start, _, end = field.partition(",")
    return int(start), int(end) if end else None


def slice_segments(text: str, delimiter: str, start: int, end: int | None = None) -> str:
    """Return the ``[start:end]`` segments of ``text`` rejoined with ``delimiter``."""

    return rejoin_segments(text, delimiter, delimiter, start, end)


def rejoin_segments(
    text: str,
    old_delimiter: str,
    new_delimiter: str,
    start: int,
    end: int | None = None,
) -> str:
    """Split on ``old_delimiter``, keep ``[start:end]`` and join with ``new_delimiter``."""

    return new_delimiter.join(text.split(old_delimiter)[start:end])
