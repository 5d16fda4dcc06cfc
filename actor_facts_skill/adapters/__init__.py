"""Infrastructure adapters implementing the core ports."""

from .entity_api import EntityApiAdapter

__all__ = ["EntityApiAdapter"]
