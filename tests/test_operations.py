from __future__ import annotations

import pytest

from stencil.errors import ArgumentCountError
from stencil.operations import (
    CASING,
    OPERATIONS,
    last_segment,
    middle_segments,
    normalize_package_name,
    normalize_to_path,
    normalize_version,
    rejoin,
    replace,
    slice_,
    to_lower_case,
)


def identity(text: str) -> str:
    return text


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Azure.Messaging.EventGrid", "EventGrid"),
        ("a.b.c", "c"),
        ("NoDots", "NoDots"),
        ("trailing.", ""),
        ("", ""),
    ],
)
def test_last_segment(value, expected):
    assert last_segment(value, identity) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a.b.c", "b"),
        ("Azure.Messaging.EventGrid.SystemEvents", "Messaging.EventGrid"),
        ("a.b", ""),
        ("a", ""),
    ],
)
def test_middle_segments(value, expected):
    assert middle_segments(value, identity) == expected


def test_normalize_package_name():
    assert normalize_package_name("Azure.Messaging.EventGrid", identity) == "azure-messaging-eventgrid"


def test_normalize_version():
    assert normalize_version("1.0.0-beta-2", identity) == "1.0.0_beta_2"


def test_normalize_to_path():
    assert normalize_to_path("azure.messaging.eventgrid", identity) == "azure/messaging/eventgrid"


@pytest.mark.parametrize("operation", [to_lower_case, normalize_to_path])
@pytest.mark.parametrize("value", ["Azure.Messaging.EventGrid", "already/lower", ""])
def test_idempotent_operations(operation, value):
    once = operation(value, identity)
    assert operation(once, identity) == once


def test_operations_resolve_before_transforming():
    seen: list[str] = []

    def resolve(text: str) -> str:
        seen.append(text)
        return text.replace("{{ns}}", "Azure.Messaging.EventGrid")

    assert last_segment("{{ns}}", resolve) == "EventGrid"
    assert slice_("0,1 . {{ns}}", resolve) == "Azure"
    assert seen == ["{{ns}}", "0,1 . {{ns}}"]


def test_slice():
    assert slice_("1,-1 . a.b.c.d", identity) == "b.c"
    assert slice_("2 . a.b.c.d", identity) == "c.d"
    assert slice_("0,2 / sdk/eventgrid/azure-messaging", identity) == "sdk/eventgrid"


def test_slice_field_count_mismatch():
    with pytest.raises(ArgumentCountError, match="expected 3, got 2"):
        slice_("1,-1 a.b.c", identity)


def test_slice_non_numeric_index():
    with pytest.raises(ValueError):
        slice_("a,b . x.y", identity)


def test_replace_only_first_occurrence():
    assert replace("a x a-b-text", identity) == "x-b-text"
    assert replace("a x a-a-a", identity) == "x-a-a"


def test_replace_text_keeps_spaces():
    assert replace("foo bar hello foo world", identity) == "hello bar world"


def test_replace_field_count_mismatch():
    with pytest.raises(ArgumentCountError, match="expected 3, got 1"):
        replace("onlyone", identity)


def test_rejoin():
    result = rejoin(". / 1,-1 Azure.Messaging.EventGrid.SystemEvents", identity)
    assert result == "Messaging/EventGrid"


def test_rejoin_open_ended():
    assert rejoin(". - 1, Azure.Messaging.EventGrid", identity) == "Messaging-EventGrid"


def test_rejoin_field_count_mismatch():
    with pytest.raises(ArgumentCountError, match="expected 4, got 3"):
        rejoin(". / Azure.Messaging", identity)


def test_registry_names():
    assert set(OPERATIONS) == {
        "toLowerCase",
        "normalizeVersion",
        "normalizePackageName",
        "lastSegment",
        "middleSegments",
        "normalizeToPath",
        "slice",
        "replace",
        "rejoin",
    }
    assert set(CASING) == {"camelCase", "pascalCase", "kebabCase"}


def test_registry_factories_return_operations():
    assert OPERATIONS["lastSegment"]()("a.b", identity) == "b"
    assert OPERATIONS["lastSegment"]() is OPERATIONS["lastSegment"]()
    assert CASING["kebabCase"]()("EventGrid", identity) == "event-grid"
    assert CASING["camelCase"]()("event grid", identity) == "eventGrid"
    assert CASING["pascalCase"]()("event-grid", identity) == "EventGrid"


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        OPERATIONS["custom"] = lambda: to_lower_case  # type: ignore[index]
