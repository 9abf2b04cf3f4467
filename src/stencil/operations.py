"""Lambda section operations exposed to templates.

Every operation receives the raw text between its section tags together with
a ``resolve`` callable. The raw text may still contain nested tags, so each
operation renders it through ``resolve`` before interpreting it::

    {{#lastSegment}}{{#toLowerCase}}{{parameters.ServiceNamespace}}{{/toLowerCase}}{{/lastSegment}}

Operations are registered by name as zero-argument factories returning the
operation itself, which is the calling convention Mustache lambdas use.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .arguments import parse_fields, parse_index_pair, rejoin_segments, slice_segments
from .naming import camel_case, kebab_case, pascal_case

__all__ = [
    "CASING",
    "OPERATIONS",
    "Operation",
    "OperationFactory",
    "Resolver",
    "last_segment",
    "middle_segments",
    "normalize_package_name",
    "normalize_to_path",
    "normalize_version",
    "rejoin",
    "replace",
    "slice_",
    "to_lower_case",
]

Resolver = Callable[[str], str]
Operation = Callable[[str, Resolver], str]
OperationFactory = Callable[[], Operation]


def to_lower_case(text: str, resolve: Resolver) -> str:
    return resolve(text).lower()


def normalize_version(text: str, resolve: Resolver) -> str:
    """Replace ``-`` with ``_``, e.g. ``1.0.0-beta.1`` becomes ``1.0.0_beta.1``."""

    return resolve(text).replace("-", "_")


def normalize_package_name(text: str, resolve: Resolver) -> str:
    """Turn a dotted namespace into a lower-case, dash separated package name."""

    return resolve(text).replace(".", "-").lower()


def normalize_to_path(text: str, resolve: Resolver) -> str:
    return resolve(text).replace(".", "/")


def last_segment(text: str, resolve: Resolver) -> str:
    """Return everything after the final ``.`` (the whole text if there is none)."""

    resolved = resolve(text)
    return resolved[resolved.rfind(".") + 1 :]


def middle_segments(text: str, resolve: Resolver) -> str:
    """Drop the first and last ``.`` segment and keep what lies between."""

    return slice_segments(resolve(text), ".", 1, -1)


def slice_(text: str, resolve: Resolver) -> str:
    """Slice delimited text: ``"<start>,<end> <delimiter> <text>"``."""

    bounds, delimiter, value = parse_fields(resolve(text), 3)
    start, end = parse_index_pair(bounds)
    return slice_segments(value, delimiter, start, end)


def replace(text: str, resolve: Resolver) -> str:
    """Replace the first match only: ``"<search> <replacement> <text>"``."""

    search, replacement, value = parse_fields(resolve(text), 3)
    return value.replace(search, replacement, 1)


def rejoin(text: str, resolve: Resolver) -> str:
    """Slice and change the delimiter: ``"<old> <new> <start>,<end> <text>"``.

    Fields are separated by spaces, so neither delimiter can contain one.
    """

    old_delimiter, new_delimiter, bounds, value = parse_fields(resolve(text), 4)
    start, end = parse_index_pair(bounds)
    return rejoin_segments(value, old_delimiter, new_delimiter, start, end)


def _casing(convert: Callable[[str], str]) -> Operation:
    def operation(text: str, resolve: Resolver) -> str:
        return convert(resolve(text))

    operation.__name__ = convert.__name__
    return operation


def _factory(operation: Operation) -> OperationFactory:
    return lambda: operation


OPERATIONS: Mapping[str, OperationFactory] = MappingProxyType(
    {
        "toLowerCase": _factory(to_lower_case),
        "normalizeVersion": _factory(normalize_version),
        "normalizePackageName": _factory(normalize_package_name),
        "lastSegment": _factory(last_segment),
        "middleSegments": _factory(middle_segments),
        "normalizeToPath": _factory(normalize_to_path),
        "slice": _factory(slice_),
        "replace": _factory(replace),
        "rejoin": _factory(rejoin),
    }
)

CASING: Mapping[str, OperationFactory] = MappingProxyType(
    {
        "camelCase": _factory(_casing(camel_case)),
        "pascalCase": _factory(_casing(pascal_case)),
        "kebabCase": _factory(_casing(kebab_case)),
    }
)
