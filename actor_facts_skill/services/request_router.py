"""Ordered request handler chain and its supporting types."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

from actor_facts_skill.core.exceptions import HandlerNotFoundError, RequestRouterError
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.core.models import RequestEnvelope, ResponseBuilder, SkillResponse

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer

logger = get_logger(__name__)


@dataclass(slots=True)
class HandlerInput:
    """Envelope being handled plus the services handlers may call."""

    envelope: RequestEnvelope
    services: "ServiceContainer"

    @property
    def locale(self) -> str:
        return self.envelope.locale

    def response_builder(self) -> ResponseBuilder:
        return ResponseBuilder()


class RequestHandler(Protocol):
    """A handler that claims requests it matches and produces the reply."""

    def matches(self, handler_input: HandlerInput) -> bool:
        """Return whether this handler accepts ``handler_input``."""
        ...

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        """Produce the reply for an accepted request."""
        ...


class ErrorHandler(Protocol):
    """A handler that turns a failure during dispatch into a reply."""

    def matches(self, handler_input: HandlerInput, error: Exception) -> bool:
        """Return whether this handler deals with ``error``."""
        ...

    async def handle(self, handler_input: HandlerInput, error: Exception) -> SkillResponse:
        """Produce the reply for a failed request."""
        ...


class RequestRouter:
    """Dispatch envelopes to the first matching handler, in registration order."""

    def __init__(
        self,
        handlers: Sequence[RequestHandler] | None = None,
        error_handlers: Sequence[ErrorHandler] | None = None,
    ) -> None:
        self._handlers: list[RequestHandler] = list(handlers or [])
        self._error_handlers: list[ErrorHandler] = list(error_handlers or [])

    def add_request_handlers(self, *handlers: RequestHandler) -> "RequestRouter":
        """Append handlers to the end of the chain."""

        self._handlers.extend(handlers)
        return self

    def add_error_handlers(self, *handlers: ErrorHandler) -> "RequestRouter":
        """Append error handlers to the end of the error chain."""

        self._error_handlers.extend(handlers)
        return self

    def find_handler(self, handler_input: HandlerInput) -> RequestHandler:
        """Return the first handler that matches ``handler_input``."""

        for handler in self._handlers:
            if handler.matches(handler_input):
                return handler
        raise HandlerNotFoundError(
            f"No handler registered for request {handler_input.envelope.request_type}"
            f" (intent={handler_input.envelope.intent_name})"
        )

    async def dispatch(
        self, envelope: RequestEnvelope, services: "ServiceContainer"
    ) -> SkillResponse:
        """Run ``envelope`` through the chain, falling back to the error handlers."""

        handler_input = HandlerInput(envelope=envelope, services=services)
        try:
            handler = self.find_handler(handler_input)
            logger.debug("Dispatching to %s", type(handler).__name__)
            return await handler.handle(handler_input)
        except Exception as exc:  # pylint: disable=broad-except
            error_handler = self._find_error_handler(handler_input, exc)
            if error_handler is None:
                raise
            return await error_handler.handle(handler_input, exc)

    def _find_error_handler(
        self, handler_input: HandlerInput, error: Exception
    ) -> Optional[ErrorHandler]:
        for error_handler in self._error_handlers:
            if error_handler.matches(handler_input, error):
                return error_handler
        return None

    def handlers(self) -> list[RequestHandler]:
        """Return a shallow copy of the ordered handler chain."""

        return list(self._handlers)

    def error_handlers(self) -> list[ErrorHandler]:
        """Return a shallow copy of the ordered error handler chain."""

        return list(self._error_handlers)


__all__ = [
    "ErrorHandler",
    "HandlerInput",
    "HandlerNotFoundError",
    "RequestHandler",
    "RequestRouter",
    "RequestRouterError",
]
