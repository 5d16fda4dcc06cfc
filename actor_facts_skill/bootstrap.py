"""Application bootstrap helpers for assembling the service container and app."""

from __future__ import annotations

from fastapi import FastAPI

from actor_facts_skill.adapters.entity_api import EntityApiAdapter
from actor_facts_skill.apps.api.app import create_app
from actor_facts_skill.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to the knowledge-graph API."""

    return build_default_services(entity_lookup_port=EntityApiAdapter())


def create_default_app() -> FastAPI:
    """Return the skill's FastAPI app backed by the production entity lookup."""

    return create_app(build_default_service_container())


__all__ = ["build_default_service_container", "create_default_app"]
