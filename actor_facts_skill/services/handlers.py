"""Request handlers making up the skill, in the order they are consulted."""

from __future__ import annotations

from actor_facts_skill.core.config import config
from actor_facts_skill.core.intents import IntentName, RequestType
from actor_facts_skill.core.logging import get_logger
from actor_facts_skill.core.models import SkillResponse
from actor_facts_skill.core.ports import EntityLookupPort
from actor_facts_skill.services.entity_facts import format_entity_facts
from actor_facts_skill.services.messages import MessageKey, get_message
from actor_facts_skill.services.request_router import HandlerInput, RequestRouter

logger = get_logger(__name__)


def _is_request_type(handler_input: HandlerInput, request_type: RequestType) -> bool:
    return handler_input.envelope.request_type == request_type.value


def _is_intent(handler_input: HandlerInput, *names: str) -> bool:
    return (
        _is_request_type(handler_input, RequestType.INTENT)
        and handler_input.envelope.intent_name in names
    )


def _speak_and_reprompt(handler_input: HandlerInput, text: str) -> SkillResponse:
    return handler_input.response_builder().speak(text).reprompt(text).build()


def _require_entity_lookup(handler_input: HandlerInput) -> EntityLookupPort:
    lookup = handler_input.services.entity_lookup
    if lookup is None:
        raise RuntimeError("EntityLookupPort has not been configured.")
    return lookup


class LaunchRequestHandler:
    """Greet the user when the skill is opened without an intent."""

    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_request_type(handler_input, RequestType.LAUNCH)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        speech = get_message(MessageKey.WELCOME, handler_input.locale)
        return _speak_and_reprompt(handler_input, speech)


class EntityIntentHandler:
    """Answer with facts about the actor resolved from the actor slot."""

    def __init__(
        self,
        intent_name: str | None = None,
        slot_name: str | None = None,
        authority: str | None = None,
    ) -> None:
        self.intent_name = intent_name or config.ENTITY_INTENT_NAME
        self.slot_name = slot_name or config.ENTITY_SLOT_NAME
        self.authority = authority or config.ENTITY_AUTHORITY

    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, self.intent_name)

    def resolve_entity_ref(self, handler_input: HandlerInput) -> str | None:
        """Return the entity URL when the slot matched exactly one known entity."""
        slot = handler_input.envelope.get_slot(self.slot_name)
        if slot is None:
            return None
        return slot.resolved_entity_id(self.authority)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        envelope = handler_input.envelope
        entity_ref = self.resolve_entity_ref(handler_input)
        speech = None
        if entity_ref:
            speech = await format_entity_facts(
                entity_ref,
                envelope.locale,
                envelope.api_access_token,
                lookup=_require_entity_lookup(handler_input),
            )
        if speech is None:
            slot = envelope.get_slot(self.slot_name)
            logger.info(
                "Actor slot did not resolve to an entity",
                extra={"slot_value": slot.value if slot else None},
            )
            speech = get_message(MessageKey.ENTITY_UNRESOLVED, envelope.locale)
        return _speak_and_reprompt(handler_input, speech)


class HelpIntentHandler:
    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, IntentName.HELP.value)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        speech = get_message(MessageKey.HELP, handler_input.locale)
        return _speak_and_reprompt(handler_input, speech)


class CancelAndStopIntentHandler:
    """Say goodbye; no reprompt so the platform may close the session."""

    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, IntentName.CANCEL.value, IntentName.STOP.value)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        speech = get_message(MessageKey.GOODBYE, handler_input.locale)
        return handler_input.response_builder().speak(speech).build()


class FallbackIntentHandler:
    """Respond to utterances that map to none of the skill's intents."""

    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_intent(handler_input, IntentName.FALLBACK.value)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        speech = get_message(MessageKey.FALLBACK, handler_input.locale)
        return _speak_and_reprompt(handler_input, speech)


class SessionEndedRequestHandler:
    """Acknowledge the end of a session with an empty response."""

    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_request_type(handler_input, RequestType.SESSION_ENDED)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        request = handler_input.envelope.request
        logger.info(
            "Session ended",
            extra={
                "reason": request.reason,
                "session_error": request.error.model_dump() if request.error else None,
                "envelope": handler_input.envelope.model_dump(mode="json", by_alias=True),
            },
        )
        return handler_input.response_builder().build()


class IntentReflectorHandler:
    """Repeat the name of any intent not claimed earlier in the chain.

    Registered last so custom intents can be exercised before they get a
    dedicated handler.
    """

    def matches(self, handler_input: HandlerInput) -> bool:
        return _is_request_type(handler_input, RequestType.INTENT)

    async def handle(self, handler_input: HandlerInput) -> SkillResponse:
        speech = get_message(
            MessageKey.REFLECTOR,
            handler_input.locale,
            intent_name=handler_input.envelope.intent_name,
        )
        return handler_input.response_builder().speak(speech).build()


class GenericErrorHandler:
    """Apologize for any failure raised while handling a request."""

    def matches(self, handler_input: HandlerInput, error: Exception) -> bool:
        return True

    async def handle(self, handler_input: HandlerInput, error: Exception) -> SkillResponse:
        logger.error(
            "Error handled: %s",
            error,
            exc_info=error,
            extra={
                "error_type": type(error).__name__,
                "request_type": handler_input.envelope.request_type,
                "intent": handler_input.envelope.intent_name,
            },
        )
        speech = get_message(MessageKey.ERROR, handler_input.locale)
        return _speak_and_reprompt(handler_input, speech)


def build_request_router() -> RequestRouter:
    """Return the skill's handler chain; order matters, first match wins."""

    return RequestRouter().add_request_handlers(
        LaunchRequestHandler(),
        EntityIntentHandler(),
        HelpIntentHandler(),
        CancelAndStopIntentHandler(),
        FallbackIntentHandler(),
        SessionEndedRequestHandler(),
        IntentReflectorHandler(),
    ).add_error_handlers(GenericErrorHandler())


__all__ = [
    "CancelAndStopIntentHandler",
    "EntityIntentHandler",
    "FallbackIntentHandler",
    "GenericErrorHandler",
    "HelpIntentHandler",
    "IntentReflectorHandler",
    "LaunchRequestHandler",
    "SessionEndedRequestHandler",
    "build_request_router",
]
