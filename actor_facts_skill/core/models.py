"""Request envelope and response models exchanged with the voice platform."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from actor_facts_skill.core.intents import ER_SUCCESS_MATCH


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResolutionStatus(_EnvelopeModel):
    """Outcome of matching a slot value against an authority's catalog."""

    code: str


class ResolutionValue(_EnvelopeModel):
    """A catalog entry matched by entity resolution."""

    id: Optional[str] = None
    name: Optional[str] = None


class ResolutionValueWrapper(_EnvelopeModel):
    """Wrapper object the platform puts around each resolved value."""

    value: ResolutionValue


class ResolutionPerAuthority(_EnvelopeModel):
    """Resolution result produced by a single authority."""

    authority: str
    status: ResolutionStatus
    values: List[ResolutionValueWrapper] = Field(default_factory=list)


class Resolutions(_EnvelopeModel):
    """All resolution results attached to a slot."""

    resolutionsPerAuthority: List[ResolutionPerAuthority] = Field(default_factory=list)


class Slot(_EnvelopeModel):
    """A named parameter extracted from the user's utterance."""

    name: str
    value: Optional[str] = None
    resolutions: Optional[Resolutions] = None

    def matching_resolution(self, authority: str) -> Optional[ResolutionPerAuthority]:
        """Return the first successful resolution made by ``authority``."""
        if self.resolutions is None:
            return None
        for resolution in self.resolutions.resolutionsPerAuthority:
            if resolution.authority == authority and resolution.status.code == ER_SUCCESS_MATCH:
                return resolution
        return None

    def resolved_entity_id(self, authority: str) -> Optional[str]:
        """Return the id of the first value matched by ``authority``, if any."""
        resolution = self.matching_resolution(authority)
        if resolution is None or not resolution.values:
            return None
        return resolution.values[0].value.id


class Intent(_EnvelopeModel):
    """Intent classified by the platform with its slots."""

    name: str
    confirmationStatus: Optional[str] = None
    slots: Dict[str, Slot] = Field(default_factory=dict)


class SessionEndedError(_EnvelopeModel):
    """Error details attached to a session-ended request."""

    type: Optional[str] = None
    message: Optional[str] = None


class SkillRequest(_EnvelopeModel):
    """The ``request`` member of the envelope."""

    type: str
    requestId: Optional[str] = None
    timestamp: Optional[str] = None
    locale: str = "en-US"
    intent: Optional[Intent] = None
    reason: Optional[str] = None
    error: Optional[SessionEndedError] = None


class Application(_EnvelopeModel):
    """Identifies the skill the envelope is addressed to."""

    applicationId: str


class User(_EnvelopeModel):
    """The account the request originates from."""

    userId: str
    accessToken: Optional[str] = None


class Session(_EnvelopeModel):
    """Session information supplied with in-session requests."""

    sessionId: str
    new: bool = True
    application: Optional[Application] = None
    user: Optional[User] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)


class SystemState(_EnvelopeModel):
    """The ``context.System`` object carrying per-request credentials."""

    application: Optional[Application] = None
    user: Optional[User] = None
    apiEndpoint: Optional[str] = None
    apiAccessToken: Optional[str] = None


class RequestContextState(_EnvelopeModel):
    """The ``context`` member of the envelope."""

    system: Optional[SystemState] = Field(default=None, alias="System")


class RequestEnvelope(_EnvelopeModel):
    """Full inbound request envelope."""

    version: str = "1.0"
    session: Optional[Session] = None
    context: Optional[RequestContextState] = None
    request: SkillRequest

    @property
    def request_type(self) -> str:
        return self.request.type

    @property
    def intent_name(self) -> Optional[str]:
        if self.request.intent is None:
            return None
        return self.request.intent.name

    @property
    def locale(self) -> str:
        return self.request.locale

    @property
    def api_access_token(self) -> Optional[str]:
        if self.context is None or self.context.system is None:
            return None
        return self.context.system.apiAccessToken

    @property
    def application_id(self) -> Optional[str]:
        """Return the skill id from the context, falling back to the session."""
        if self.context is not None and self.context.system is not None:
            if self.context.system.application is not None:
                return self.context.system.application.applicationId
        if self.session is not None and self.session.application is not None:
            return self.session.application.applicationId
        return None

    def get_slot(self, name: str) -> Optional[Slot]:
        """Return slot ``name`` of the current intent, if present."""
        if self.request.intent is None:
            return None
        return self.request.intent.slots.get(name)


class OutputSpeech(BaseModel):
    """Plain text speech rendered by the device."""

    type: str = "PlainText"
    text: str


class Reprompt(BaseModel):
    """Speech used when the user does not answer."""

    outputSpeech: OutputSpeech


class ResponseBody(BaseModel):
    """The ``response`` member of the reply."""

    outputSpeech: Optional[OutputSpeech] = None
    reprompt: Optional[Reprompt] = None
    shouldEndSession: Optional[bool] = None


class SkillResponse(BaseModel):
    """Full reply envelope returned to the platform."""

    version: str = "1.0"
    userAgent: Optional[str] = None
    response: ResponseBody = Field(default_factory=ResponseBody)

    @property
    def speech_text(self) -> Optional[str]:
        if self.response.outputSpeech is None:
            return None
        return self.response.outputSpeech.text

    @property
    def reprompt_text(self) -> Optional[str]:
        if self.response.reprompt is None:
            return None
        return self.response.reprompt.outputSpeech.text

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON shape expected by the platform."""
        return self.model_dump(exclude_none=True)


class ResponseBuilder:
    """Incrementally assemble a :class:`SkillResponse`."""

    def __init__(self) -> None:
        self._body = ResponseBody()

    def speak(self, text: str) -> "ResponseBuilder":
        self._body.outputSpeech = OutputSpeech(text=text)
        return self

    def reprompt(self, text: str) -> "ResponseBuilder":
        """Attach a reprompt, which keeps the session open for a reply."""
        self._body.reprompt = Reprompt(outputSpeech=OutputSpeech(text=text))
        self._body.shouldEndSession = False
        return self

    def end_session(self, value: bool = True) -> "ResponseBuilder":
        self._body.shouldEndSession = value
        return self

    def build(self) -> SkillResponse:
        return SkillResponse(response=self._body.model_copy(deep=True))


__all__ = [
    "Application",
    "Intent",
    "OutputSpeech",
    "Reprompt",
    "RequestContextState",
    "RequestEnvelope",
    "ResolutionPerAuthority",
    "ResolutionStatus",
    "ResolutionValue",
    "ResolutionValueWrapper",
    "Resolutions",
    "ResponseBody",
    "ResponseBuilder",
    "Session",
    "SessionEndedError",
    "SkillRequest",
    "SkillResponse",
    "Slot",
    "SystemState",
    "User",
]
