"""httpx adapter implementing the entity lookup port."""

from __future__ import annotations

import httpx

from actor_facts_skill.core.config import config
from actor_facts_skill.core.exceptions import EntityPayloadError
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.core.ports import EntityLookupPort, EntityLookupResult

logger = get_logger(__name__)


def build_entity_headers(access_token: str | None, locale: str) -> dict[str, str]:
    """Return the headers sent with every entity lookup."""
    return {
        "Authorization": f"Bearer {access_token}",
        "Accept-Language": locale,
        "User-Agent": config.SKILL_USER_AGENT,
    }


class EntityApiAdapter(EntityLookupPort):
    """Fetch entities over HTTP with a single GET per lookup.

    A client may be injected (tests pass one backed by ``httpx.MockTransport``);
    otherwise a short-lived ``AsyncClient`` is opened per call.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self._timeout = config.ENTITY_API_TIMEOUT_SECONDS if timeout is None else timeout

    async def fetch_entity(
        self, url: str, *, access_token: str | None, locale: str
    ) -> EntityLookupResult:
        headers = build_entity_headers(access_token, locale)
        if self._client is not None:
            response = await self._client.get(
                url, headers=headers, timeout=self._timeout, follow_redirects=True
            )
        else:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url, headers=headers)

        if response.status_code != 200:
            logger.warning(
                "Entity lookup returned status %s for %s", response.status_code, url
            )
            return EntityLookupResult(status_code=response.status_code)
        try:
            payload = response.json()
        except ValueError as exc:
            raise EntityPayloadError(f"entity response from {url} is not JSON") from exc
        return EntityLookupResult(status_code=response.status_code, payload=payload)


__all__ = ["EntityApiAdapter", "build_entity_headers"]
