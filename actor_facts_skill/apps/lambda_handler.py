"""AWS Lambda entrypoint for deploying the skill as a function."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping

from actor_facts_skill.bootstrap import build_default_service_container
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.core.models import RequestEnvelope
from actor_facts_skill.services import ServiceContainer, runtime
from actor_facts_skill.services.skill import handle_skill_request

logger = get_logger(__name__)


def _services() -> ServiceContainer:
    if not runtime.has_services():
        runtime.set_services(build_default_service_container())
    return runtime.get_services()


def lambda_handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    """Handle one platform envelope delivered as a Lambda event."""
    del context
    envelope = RequestEnvelope.model_validate(event)
    response = asyncio.run(handle_skill_request(envelope, _services()))
    return response.to_payload()


__all__ = ["lambda_handler"]
