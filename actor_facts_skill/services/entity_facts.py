"""Turn a resolved entity reference into a spoken sentence about the actor."""

from __future__ import annotations

from typing import Optional

from actor_facts_skill.core.entities import EntityRecord
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.core.ports import EntityLookupPort
from actor_facts_skill.services.messages import MessageKey, get_message

logger = get_logger(__name__)


def render_entity_facts(record: EntityRecord, locale: Optional[str]) -> str:
    """Fill the locale's fact sentence with the values of ``record``."""
    return get_message(
        MessageKey.ENTITY_FACTS,
        locale,
        name=record.name,
        birthplace=record.birthplace,
        birth_year=record.birth_year,
        children=record.children,
        occupation=record.occupation,
        awards=record.awards,
    )


async def format_entity_facts(
    entity_ref: Optional[str],
    locale: str,
    access_token: Optional[str],
    *,
    lookup: EntityLookupPort,
) -> Optional[str]:
    """Fetch the entity at ``entity_ref`` and describe it in ``locale``.

    Returns ``None`` without touching the network when no reference was
    resolved. Any non-200 lookup yields the locale's "not found" message.
    Malformed payloads raise ``EntityPayloadError`` and transport failures
    propagate unchanged.
    """
    if not entity_ref:
        return None

    result = await lookup.fetch_entity(entity_ref, access_token=access_token, locale=locale)
    if not result.ok:
        return get_message(MessageKey.ENTITY_NOT_FOUND, locale)

    logger.info("Entity record received", extra={"entity": result.payload})
    record = EntityRecord.from_payload(result.payload)
    return render_entity_facts(record, locale)


__all__ = ["format_entity_facts", "render_entity_facts"]
