"""Application service layer for skill request handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from actor_facts_skill.core.ports import EntityLookupPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .request_router import RequestRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    entity_lookup: Optional[EntityLookupPort] = None
    request_router: Optional["RequestRouter"] = None


def build_default_services(
    *,
    entity_lookup_port: Optional[EntityLookupPort] = None,
) -> ServiceContainer:
    """Return a service container wired with the skill's handler chain."""

    from .handlers import build_request_router  # pylint: disable=import-outside-toplevel

    return ServiceContainer(
        entity_lookup=entity_lookup_port,
        request_router=build_request_router(),
    )


__all__ = ["ServiceContainer", "build_default_services"]
