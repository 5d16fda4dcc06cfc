"""Entry point shared by the HTTP and Lambda surfaces for handling one envelope."""

from __future__ import annotations

from typing import Optional

from actor_facts_skill.core.config import config
from actor_facts_skill.core.exceptions import SkillVerificationError
from actor_facts_skill.core.logging import get_logger, skill_request_id_context
from actor_facts_skill.core.models import RequestEnvelope, SkillResponse
from actor_facts_skill.services import ServiceContainer
from actor_facts_skill.services.request_router import RequestRouter

logger = get_logger(__name__)


def _require_router(services: ServiceContainer) -> RequestRouter:
    router = services.request_router
    if router is None:
        raise RuntimeError("RequestRouter has not been configured.")
    return router


def verify_application_id(envelope: RequestEnvelope, expected: Optional[str]) -> None:
    """Reject envelopes addressed to another skill when a skill id is configured."""
    if not expected:
        return
    if envelope.application_id != expected:
        raise SkillVerificationError(
            f"Envelope addressed to skill {envelope.application_id!r}, expected {expected!r}"
        )


async def handle_skill_request(
    envelope: RequestEnvelope, services: ServiceContainer
) -> SkillResponse:
    """Verify, dispatch and stamp the reply for a single envelope."""
    verify_application_id(envelope, config.ALEXA_SKILL_ID)
    router = _require_router(services)
    with skill_request_id_context(envelope.request.requestId):
        logger.info(
            "Skill request received",
            extra={
                "request_type": envelope.request_type,
                "intent": envelope.intent_name,
                "locale": envelope.locale,
            },
        )
        response = await router.dispatch(envelope, services)
    response.userAgent = config.SKILL_USER_AGENT
    return response


__all__ = ["handle_skill_request", "verify_application_id"]
