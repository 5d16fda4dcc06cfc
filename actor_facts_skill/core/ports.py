"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(slots=True, frozen=True)
class EntityLookupResult:
    """Status code and decoded body of an entity lookup.

    ``payload`` is only populated for HTTP 200 responses.
    """

    status_code: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class EntityLookupPort(Protocol):
    """Port exposing read access to the knowledge-graph entity API."""

    async def fetch_entity(
        self, url: str, *, access_token: str | None, locale: str
    ) -> EntityLookupResult:
        """GET ``url`` on behalf of the user and return the status and body."""
        ...


__all__ = ["EntityLookupPort", "EntityLookupResult"]
