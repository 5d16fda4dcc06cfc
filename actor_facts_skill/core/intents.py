"""Request and intent names understood by the skill."""

from enum import Enum


class RequestType(str, Enum):
    """Envelope request types delivered by the voice platform."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class IntentName(str, Enum):
    """Built-in intents handled explicitly by the skill."""

    HELP = "AMAZON.HelpIntent"
    CANCEL = "AMAZON.CancelIntent"
    STOP = "AMAZON.StopIntent"
    FALLBACK = "AMAZON.FallbackIntent"


ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"


__all__ = ["RequestType", "IntentName", "ER_SUCCESS_MATCH"]
