"""
cli/i18n/__init__.py - UI message lookup for the browser and CLI commands

Every user-facing string of azct is a "namespace.key" entry registered in
cli/i18n/messages. The active language (ko or en) is held in a ContextVar so
the Click group sets it once per invocation and the Browser reads it on
every render.

Usage:
    from cli.i18n import t, set_lang

    t("browser.fetch_failed", error="timeout")   # "조회 실패: timeout"

    set_lang("en")
    t("browser.validate_summary", subscriptions=2, groups=3, resources=5)
    # "Inventory OK: 2 subscriptions, 3 resource groups, 5 resources"
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

from core.config import settings

logger = logging.getLogger(__name__)

SUPPORTED_LANGS = settings.SUPPORTED_LANGS
DEFAULT_LANG = settings.DEFAULT_LANG

_current_lang: ContextVar[str] = ContextVar("azct_lang", default=DEFAULT_LANG)


def _resolve(lang: str | None) -> str:
    """Unsupported or empty codes fall back to the default language."""
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Switch the UI language ("ko" or "en"; anything else selects "ko")."""
    _current_lang.set(_resolve(lang))


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Look up a message and interpolate its placeholders.

    Args:
        key: "namespace.key", e.g. "browser.not_available"
        lang: Language override for this call only
        **kwargs: Values for the message's {placeholders}

    Returns:
        The translated text. An unknown key is returned as-is, and a template
        whose placeholders cannot be filled is returned uninterpolated.
    """
    from cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        logger.debug("missing message key: %s", key)
        return key

    text = entry.get(_resolve(lang) if lang is not None else get_lang()) or entry[DEFAULT_LANG]
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError) as e:
        logger.debug("message %s not interpolated: %r", key, e)
        return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
