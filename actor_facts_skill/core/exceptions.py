"""Core exception types shared across layers."""


class EntityPayloadError(ValueError):
    """Raised when a knowledge-graph entity payload is missing required fields."""


class SkillVerificationError(PermissionError):
    """Raised when an envelope is addressed to a different skill id."""


class RequestRouterError(RuntimeError):
    """Base error for request dispatch failures."""


class HandlerNotFoundError(RequestRouterError):
    """Raised when no registered handler accepts the inbound request."""


__all__ = [
    "EntityPayloadError",
    "SkillVerificationError",
    "RequestRouterError",
    "HandlerNotFoundError",
]
