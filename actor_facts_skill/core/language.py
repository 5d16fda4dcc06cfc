"""Locale helpers for the actor facts skill.

Only two language variants exist: Spanish for any locale tag containing
``"es"`` and the default (English) variant for everything else.
"""

from enum import Enum
from typing import Optional


class LocaleVariant(str, Enum):
    """The language variants replies are written in."""

    DEFAULT = "default"
    SPANISH = "es"


SPANISH_MARKER = "es"


def locale_variant(locale: Optional[str]) -> LocaleVariant:
    """Return the reply variant for a platform locale tag such as ``es-ES``."""
    if locale and SPANISH_MARKER in locale:
        return LocaleVariant.SPANISH
    return LocaleVariant.DEFAULT


def is_spanish(locale: Optional[str]) -> bool:
    """True when ``locale`` selects the Spanish variant."""
    return locale_variant(locale) is LocaleVariant.SPANISH


__all__ = ["LocaleVariant", "SPANISH_MARKER", "locale_variant", "is_spanish"]
