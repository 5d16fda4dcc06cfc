"""Shared envelope builders, entity payloads and fakes for the test suite."""
from __future__ import annotations

import copy
from typing import Any, Optional

from actor_facts_skill.core.ports import EntityLookupResult

TOM_HANKS_URL = "https://ld.amazonalexa.com/entities/v1/1ZSJB5nTLsNKNkt4tJqP8s"
ACCESS_TOKEN = "test-api-access-token"

TOM_HANKS_PAYLOAD: dict[str, Any] = {
    "@context": {"@vocab": "https://ld.amazonalexa.com/vocabulary/v1/"},
    "@id": TOM_HANKS_URL,
    "@type": ["Actor", "Person"],
    "name": [{"@language": "en", "@value": "Tom Hanks"}],
    "birthplace": {
        "@id": "https://ld.amazonalexa.com/entities/v1/4fVb1cTEhGk5Bv4vTRsXVe",
        "@type": ["City"],
        "name": [{"@language": "en", "@value": "Concord"}],
    },
    "birthdate": {"@type": "xsd:dateTime", "@value": "1956-07-09T00:00:00Z"},
    "child": [
        {"@id": "https://ld.amazonalexa.com/entities/v1/child-1"},
        {"@id": "https://ld.amazonalexa.com/entities/v1/child-2"},
        {"@id": "https://ld.amazonalexa.com/entities/v1/child-3"},
        {"@id": "https://ld.amazonalexa.com/entities/v1/child-4"},
    ],
    "occupation": [
        {
            "@id": "https://ld.amazonalexa.com/entities/v1/occupation-actor",
            "@type": ["Occupation"],
            "name": [{"@language": "en", "@value": "Actor"}],
        }
    ],
    "totalNumberOfAwards": [{"@type": "xsd:integer", "@value": "77"}],
}

TOM_HANKS_EN = (
    "Tom Hanks was borned in Concord in 1956 and has 4 children. "
    "Now is working as a Actor. Has won 77 awards."
)
TOM_HANKS_ES = (
    "Tom Hanks nació en Concord en 1956 y tiene 4 hijos. "
    "Actualmente trabaja como Actor. Tiene un total de 77 premios."
)


class FakeEntityLookup:
    """In-memory entity lookup recording every call."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def fetch_entity(
        self, url: str, *, access_token: str | None, locale: str
    ) -> EntityLookupResult:
        self.calls.append({"url": url, "access_token": access_token, "locale": locale})
        if self.error is not None:
            raise self.error
        if self.status_code != 200:
            return EntityLookupResult(status_code=self.status_code)
        return EntityLookupResult(status_code=200, payload=copy.deepcopy(self.payload))


def actor_slot(
    entity_id: Optional[str] = TOM_HANKS_URL,
    *,
    code: str = "ER_SUCCESS_MATCH",
    authority: str = "AlexaEntities",
) -> dict[str, Any]:
    """Build an actor slot carrying a single resolution result."""
    values = [{"value": {"name": "Tom Hanks", "id": entity_id}}] if entity_id else []
    return {
        "name": "actor",
        "value": "tom hanks",
        "resolutions": {
            "resolutionsPerAuthority": [
                {"authority": authority, "status": {"code": code}, "values": values}
            ]
        },
    }


def make_envelope(
    request_type: str = "IntentRequest",
    *,
    intent_name: Optional[str] = None,
    locale: str = "en-US",
    slots: Optional[dict[str, Any]] = None,
    application_id: str = "amzn1.ask.skill.test",
    **request_fields: Any,
) -> dict[str, Any]:
    """Build a raw request envelope the way the platform delivers it."""
    request: dict[str, Any] = {
        "type": request_type,
        "requestId": "amzn1.echo-api.request.test",
        "timestamp": "2024-01-01T00:00:00Z",
        "locale": locale,
    }
    if intent_name is not None:
        request["intent"] = {
            "name": intent_name,
            "confirmationStatus": "NONE",
            "slots": slots or {},
        }
    request.update(request_fields)
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.test",
            "application": {"applicationId": application_id},
            "user": {"userId": "amzn1.ask.account.test"},
        },
        "context": {
            "System": {
                "application": {"applicationId": application_id},
                "user": {"userId": "amzn1.ask.account.test"},
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": ACCESS_TOKEN,
            }
        },
        "request": request,
    }


