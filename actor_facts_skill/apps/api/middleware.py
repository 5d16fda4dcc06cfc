"""ASGI middleware tagging each HTTP request with its correlation and skill ids."""

from __future__ import annotations

import time
import uuid

from actor_facts_skill.core.logging import (
    bind_correlation_id,
    get_logger,
    reset_correlation_id,
    skill_request_id_context,
)

logger = get_logger(__name__)

SKILL_REQUEST_ID_HEADER = "X-Skill-Request-ID"


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Bind a correlation id per request and report the envelope's request id.

    The ``/alexa`` route stores the envelope's ``requestId`` on the request
    state; it is echoed as ``X-Skill-Request-ID`` and tagged on the
    completion log so HTTP logs line up with the skill's own.
    """

    header_names = ("X-Request-ID", "X-Correlation-ID")

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
        correlation_id = self._resolve_correlation_id(headers)
        request_state = scope.setdefault("state", {})
        token = bind_correlation_id(correlation_id)
        start_time = time.perf_counter()
        status_code: int | None = None

        async def send_wrapper(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status")
                header_list = list(message.get("headers", []))
                existing = {key.decode().lower() for key, _ in header_list}
                for header in self.header_names:
                    if header.lower() not in existing:
                        header_list.append((header.encode(), correlation_id.encode()))
                skill_request_id = request_state.get("skill_request_id")
                if skill_request_id:
                    header_list.append(
                        (SKILL_REQUEST_ID_HEADER.encode(), str(skill_request_id).encode())
                    )
                message["headers"] = header_list
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000.0
            with skill_request_id_context(request_state.get("skill_request_id")):
                logger.info(
                    "request completed",
                    extra={
                        "event": "http_request",
                        "path": scope.get("path", ""),
                        "method": scope.get("method", ""),
                        "status_code": status_code or 500,
                        "duration_ms": round(duration_ms, 2),
                    },
                )
            reset_correlation_id(token)

    def _resolve_correlation_id(self, header_map: dict[str, str]) -> str:
        for header in self.header_names:
            value = header_map.get(header.lower())
            if value:
                return value
        return uuid.uuid4().hex


__all__ = ["CorrelationIdMiddleware", "SKILL_REQUEST_ID_HEADER"]
