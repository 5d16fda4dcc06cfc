"""Process-wide registry of the active :class:`ServiceContainer`.

The FastAPI app registers its container when it is created; the Lambda
entrypoint registers the default container lazily on its first invocation.
Tests swap in containers backed by fake lookups with :func:`services_override`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from . import ServiceContainer

_registry: dict[str, Optional[ServiceContainer]] = {"services": None}


def set_services(container: ServiceContainer) -> None:
    """Register the active service container."""
    _registry["services"] = container


def get_services() -> ServiceContainer:
    """Return the registered service container or raise if missing."""
    container = _registry.get("services")
    if container is None:
        raise RuntimeError("Service container has not been configured.")
    return container


def has_services() -> bool:
    return _registry.get("services") is not None


def clear_services() -> None:
    """Reset the registry (used primarily in tests)."""
    _registry["services"] = None


@contextmanager
def services_override(container: ServiceContainer) -> Iterator[ServiceContainer]:
    """Temporarily register ``container``, restoring the previous one on exit."""
    previous = _registry.get("services")
    _registry["services"] = container
    try:
        yield container
    finally:
        _registry["services"] = previous


__all__ = ["set_services", "get_services", "has_services", "clear_services", "services_override"]
