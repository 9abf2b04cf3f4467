"""String normalisation utilities used by the casing lambdas."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

__all__ = ["base_name", "camel_case", "kebab_case", "pascal_case", "split_words"]


_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_UPPER_RUN = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^0-9a-zA-Z]+")


def split_words(value: str) -> list[str]:
    """Split ``value`` into words on case changes and non-alphanumerics.

    ``"Azure.Messaging.EventGrid"`` becomes ``["Azure", "Messaging", "Event",
    "Grid"]`` and ``"XMLHttpRequest"`` becomes ``["XML", "Http", "Request"]``.
    """

    text = _LOWER_UPPER.sub(r"\1 \2", value)
    text = _UPPER_RUN.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(text) if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def camel_case(value: str) -> str:
    """Return ``value`` as ``camelCase``."""

    words = split_words(value)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(_capitalize(word) for word in tail)


def pascal_case(value: str) -> str:
    """Return ``value`` as ``PascalCase``."""

    return "".join(_capitalize(word) for word in split_words(value))


def kebab_case(value: str) -> str:
    """Return ``value`` as ``kebab-case``."""

    return "-".join(word.lower() for word in split_words(value))


def base_name(path: str) -> str:
    """Return the final component of ``path``, ignoring trailing separators.

    Both ``/`` and ``\\`` are accepted as separators so configuration written
    on Windows resolves to the same folder name.
    """

    return PurePosixPath(path.replace("\\", "/")).name
