"""Localized spoken replies.

Every reply the skill can give lives in one catalog keyed by
:class:`MessageKey`. Each entry holds the default (English) and Spanish
template; :func:`get_message` picks the variant from the request locale and
fills in any named placeholders.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple, Optional

from actor_facts_skill.core.language import LocaleVariant, locale_variant


class MessageKey(str, Enum):
    """Identity of each reply the skill speaks."""

    WELCOME = "welcome"
    HELP = "help"
    GOODBYE = "goodbye"
    FALLBACK = "fallback"
    REFLECTOR = "reflector"
    ERROR = "error"
    ENTITY_FACTS = "entity-facts"
    ENTITY_NOT_FOUND = "entity-not-found"
    ENTITY_UNRESOLVED = "entity-unresolved"


class LocalizedText(NamedTuple):
    """A reply template in both supported language variants."""

    default: str
    es: str

    def for_variant(self, variant: LocaleVariant) -> str:
        if variant is LocaleVariant.SPANISH:
            return self.es
        return self.default


MESSAGES: dict[MessageKey, LocalizedText] = {
    MessageKey.WELCOME: LocalizedText(
        default="Welcome, you can ask for any actor or request Help. Which would you like to try?",
        es=(
            "Bienvenido, puedes preguntarme por cualquier actor o solicitar Ayuda. "
            "¿Qué opción te gustaría probar?"
        ),
    ),
    MessageKey.HELP: LocalizedText(
        default="You can ask for any actor! How can I help?",
        es="Puedes preguntarme por cualquier actor! ¿Cómo puedo ayudarte?",
    ),
    MessageKey.GOODBYE: LocalizedText(
        default="Goodbye movie lover!",
        es="¡Hasta luego cinéfilo!",
    ),
    MessageKey.FALLBACK: LocalizedText(
        default="Sorry, I don't know about that. Please try again.",
        es="Perdona no he entendido eso, inténtalo más tarde",
    ),
    MessageKey.REFLECTOR: LocalizedText(
        default="You just triggered {intent_name}",
        es="Has ejecutado {intent_name}",
    ),
    MessageKey.ERROR: LocalizedText(
        default="Sorry, I had trouble doing what you asked. Please try again.",
        es=(
            "Lo siento, He tenido problemas para hacer lo que me pediste. "
            "Inténtalo de nuevo más tarde."
        ),
    ),
    MessageKey.ENTITY_FACTS: LocalizedText(
        default=(
            "{name} was borned in {birthplace} in {birth_year} and has {children} children. "
            "Now is working as a {occupation}. Has won {awards} awards."
        ),
        es=(
            "{name} nació en {birthplace} en {birth_year} y tiene {children} hijos. "
            "Actualmente trabaja como {occupation}. Tiene un total de {awards} premios."
        ),
    ),
    MessageKey.ENTITY_NOT_FOUND: LocalizedText(
        default="Didnt find information about that actor.",
        es="No he encontrado informacion sobre ese actor.",
    ),
    MessageKey.ENTITY_UNRESOLVED: LocalizedText(
        default=(
            "I couldn't find an actor with that name. "
            "Which actor would you like to know about?"
        ),
        es="No he podido identificar a ese actor. ¿Sobre qué actor quieres saber?",
    ),
}


def get_message(key: MessageKey, locale: Optional[str], **values: Any) -> str:
    """Return the reply for ``key`` in the variant selected by ``locale``."""
    template = MESSAGES[key].for_variant(locale_variant(locale))
    if values:
        return template.format(**values)
    return template


__all__ = ["LocalizedText", "MESSAGES", "MessageKey", "get_message"]
