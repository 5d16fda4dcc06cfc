"""Tests for entity payload validation and field extraction."""

import time

import pytest

from actor_facts_skill.core.entities import (
    EntityRecord,
    parse_birth_year,
    unwrap_entity_name,
    unwrap_literal,
)
from actor_facts_skill.core.exceptions import EntityPayloadError


def test_record_extracts_all_six_fields(tom_hanks_payload):
    record = EntityRecord.from_payload(tom_hanks_payload)

    assert record.name == "Tom Hanks"
    assert record.birthplace == "Concord"
    assert record.birth_year == 1956
    assert record.children == 4
    assert record.occupation == "Actor"
    assert record.awards == 77


def test_record_accepts_plain_literals():
    record = EntityRecord.from_payload(
        {
            "name": "Tom Hanks",
            "birthplace": "Concord",
            "birthdate": "1956-07-09",
            "child": ["a", "b", "c", "d"],
            "occupation": "Actor",
            "totalNumberOfAwards": 77,
        }
    )

    assert (record.name, record.birthplace, record.birth_year) == ("Tom Hanks", "Concord", 1956)
    assert (record.children, record.occupation, record.awards) == (4, "Actor", 77)


def test_first_listed_occupation_wins(tom_hanks_payload):
    tom_hanks_payload["occupation"].append({"name": [{"@value": "Producer"}]})

    assert EntityRecord.from_payload(tom_hanks_payload).occupation == "Actor"


def test_entity_without_children_counts_zero(tom_hanks_payload):
    tom_hanks_payload["child"] = []

    assert EntityRecord.from_payload(tom_hanks_payload).children == 0


@pytest.mark.parametrize(
    "field", ["name", "birthplace", "birthdate", "child", "occupation", "totalNumberOfAwards"]
)
def test_missing_field_raises_payload_error(tom_hanks_payload, field):
    del tom_hanks_payload[field]

    with pytest.raises(EntityPayloadError):
        EntityRecord.from_payload(tom_hanks_payload)


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", []),
        ("birthplace", {"@id": "no-name"}),
        ("birthdate", {"@value": "sometime in July"}),
        ("child", 4),
        ("occupation", [{"name": [{"@language": "en"}]}]),
        ("totalNumberOfAwards", [{"@value": "many"}]),
    ],
)
def test_malformed_field_raises_payload_error(tom_hanks_payload, field, value):
    tom_hanks_payload[field] = value

    with pytest.raises(EntityPayloadError):
        EntityRecord.from_payload(tom_hanks_payload)


@pytest.mark.parametrize("payload", [None, [], "Tom Hanks"])
def test_non_object_payload_raises_payload_error(payload):
    with pytest.raises(EntityPayloadError):
        EntityRecord.from_payload(payload)


def test_unwrap_helpers():
    assert unwrap_literal([{"@value": "x"}, {"@value": "y"}]) == "x"
    assert unwrap_literal(5) == 5
    assert unwrap_entity_name({"name": [{"@value": "Concord"}]}) == "Concord"
    assert unwrap_entity_name([{"name": [{"@value": "Actor"}]}]) == "Actor"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1956-07-09", 1956),
        ("1956-07-09T00:00:00Z", 1956),
        ("+1956-07-09T00:00:00Z", 1956),
        ("1957-01-01T00:00:00Z", 1957),
        ("1956-12-31T23:30:00-05:00", 1956),
    ],
)
def test_parse_birth_year(value, expected):
    assert parse_birth_year(value) == expected


def test_birth_year_is_stable_across_calls_and_time_zones(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")
    value = "1957-01-01T00:00:00Z"
    years = []
    try:
        for zone in ("UTC", "America/Los_Angeles", "Pacific/Kiritimati"):
            monkeypatch.setenv("TZ", zone)
            time.tzset()
            years.extend(parse_birth_year(value) for _ in range(3))
    finally:
        monkeypatch.undo()
        time.tzset()

    assert years == [1957] * 9
