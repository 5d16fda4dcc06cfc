"""Skill endpoint receiving request envelopes from the voice platform."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from actor_facts_skill.core.exceptions import SkillVerificationError
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.core.models import RequestEnvelope
from actor_facts_skill.services import ServiceContainer
from actor_facts_skill.services.skill import handle_skill_request

from ..dependencies import get_service_container

router = APIRouter(tags=["skill"])
logger = get_logger(__name__)


@router.post("/alexa")
async def handle_alexa_request(
    envelope: RequestEnvelope,
    request: Request,
    services: Annotated[ServiceContainer, Depends(get_service_container)],
) -> dict[str, Any]:
    """Dispatch a request envelope through the skill and return the reply envelope.

    Handler failures are answered by the skill's own error handler, so only
    envelopes for another skill id are rejected at the HTTP level.
    """
    request.state.skill_request_id = envelope.request.requestId
    try:
        response = await handle_skill_request(envelope, services)
    except SkillVerificationError as exc:
        logger.warning("Rejected envelope: %s", exc)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return response.to_payload()


__all__ = ["router"]
