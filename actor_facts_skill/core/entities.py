"""Knowledge-graph entity records consumed by the actor facts formatter.

The entity API answers with JSON-LD where most attributes are lists of
``{"@value": ...}`` literals and related entities carry their own ``name``
list. :class:`EntityRecord` unwraps those containers into the six values the
spoken reply needs and rejects payloads that lack any of them.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from actor_facts_skill.core.exceptions import EntityPayloadError

LITERAL_VALUE_KEY = "@value"
_ISO_DATE_PATTERN = re.compile(r"^\s*\+?(?P<year>\d{4,})-\d{2}-\d{2}")


def _first(value: Any) -> Any:
    if isinstance(value, list):
        if not value:
            raise ValueError("expected at least one value")
        return value[0]
    return value


def unwrap_literal(value: Any) -> Any:
    """Return the bare value of a JSON-LD literal (or list of literals)."""
    value = _first(value)
    if isinstance(value, Mapping):
        if LITERAL_VALUE_KEY not in value:
            raise ValueError(f"literal is missing {LITERAL_VALUE_KEY!r}")
        return value[LITERAL_VALUE_KEY]
    return value


def unwrap_entity_name(value: Any) -> Any:
    """Return the display name of a related entity (birthplace, occupation)."""
    value = _first(value)
    if isinstance(value, Mapping) and LITERAL_VALUE_KEY not in value:
        if "name" not in value:
            raise ValueError("related entity has no name")
        return unwrap_literal(value["name"])
    return unwrap_literal(value)


def parse_birth_year(value: str) -> int:
    """Read the calendar year straight from an ISO date or datetime string.

    No time zone conversion happens, so ``1956-01-01T00:00:00Z`` is 1956
    wherever the process runs.
    """
    match = _ISO_DATE_PATTERN.match(value)
    if match is None:
        raise ValueError(f"not an ISO date: {value!r}")
    return int(match.group("year"))


class EntityRecord(BaseModel):
    """The attributes of a person entity used to build the spoken reply."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    name: str
    birthplace: str
    birth_year: int = Field(validation_alias="birthdate")
    children: int = Field(validation_alias="child")
    occupation: str
    awards: int = Field(validation_alias="totalNumberOfAwards")

    @field_validator("name", mode="before")
    @classmethod
    def _unwrap_name(cls, value: Any) -> Any:
        return unwrap_literal(value)

    @field_validator("birthplace", "occupation", mode="before")
    @classmethod
    def _unwrap_related_name(cls, value: Any) -> Any:
        return unwrap_entity_name(value)

    @field_validator("birth_year", mode="before")
    @classmethod
    def _parse_birthdate(cls, value: Any) -> Any:
        literal = unwrap_literal(value)
        if not isinstance(literal, str):
            raise ValueError("birthdate must be a date string")
        return parse_birth_year(literal)

    @field_validator("children", mode="before")
    @classmethod
    def _count_children(cls, value: Any) -> Any:
        if not isinstance(value, list):
            raise ValueError("child must be a list")
        return len(value)

    @field_validator("awards", mode="before")
    @classmethod
    def _unwrap_awards(cls, value: Any) -> Any:
        return unwrap_literal(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "EntityRecord":
        """Validate a decoded JSON body, raising :class:`EntityPayloadError`."""
        if not isinstance(payload, Mapping):
            raise EntityPayloadError("entity payload must be a JSON object")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise EntityPayloadError(f"malformed entity payload: {exc}") from exc


__all__ = [
    "EntityRecord",
    "LITERAL_VALUE_KEY",
    "parse_birth_year",
    "unwrap_entity_name",
    "unwrap_literal",
]
