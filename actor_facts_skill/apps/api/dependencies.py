"""Shared FastAPI dependencies for token validation and service access."""

import hmac
from typing import Annotated, Optional

from fastapi import Header, HTTPException, Request, status

from actor_facts_skill.core.config import config
from actor_facts_skill.services import ServiceContainer, runtime


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
) -> None:
    """Bearer token guard for the health check endpoint."""
    if not config.ENABLE_HEALTHCHECK_AUTH:
        return
    expected = config.HEALTHCHECK_API_TOKEN
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not configured",
            headers={"WWW-Authenticate": "Bearer"},
        )

    provided = None
    if authorization and authorization.lower().startswith("bearer "):
        provided = authorization.split(" ", 1)[1].strip()
    if not provided:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not hmac.compare_digest(provided, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_service_container(request: Request) -> ServiceContainer:
    """Resolve the app's service container, falling back to the runtime registry."""
    services = getattr(request.app.state, "services", None)
    if isinstance(services, ServiceContainer):
        return services
    try:
        return runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc


__all__ = ["get_service_container", "require_healthcheck_token"]
