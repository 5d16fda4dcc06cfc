"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from actor_facts_skill import ACTOR_FACTS_SKILL_VERSION
from actor_facts_skill.apps.api.middleware import CorrelationIdMiddleware
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.services import ServiceContainer
from actor_facts_skill.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the app's service container for the lifetime of the server."""
    logger.info("Starting actor facts skill %s...", ACTOR_FACTS_SKILL_VERSION)
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
    try:
        yield
    finally:
        logger.info("Actor facts skill shut down.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan, version=ACTOR_FACTS_SKILL_VERSION)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
