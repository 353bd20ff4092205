# src/focus_matrix/preferences/language.py

from __future__ import annotations

import json
import logging
from enum import StrEnum
from typing import Any

from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "language"


class Language(StrEnum):
    EN = "en"
    ZH = "zh"

    @classmethod
    def parse(cls, raw: Any) -> Language | None:
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None

    def other(self) -> Language:
        return Language.ZH if self is Language.EN else Language.EN


DEFAULT_LANGUAGE = Language.EN


class LanguagePreference:
    """Display language, read once on init and written back on every change."""

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        key: str = LANGUAGE_KEY,
        default: Language = DEFAULT_LANGUAGE,
    ) -> None:
        self._kv = kv
        self._key = key
        self._default = Language(default)
        self._value = self.load()

    def load(self) -> Language:
        """Persisted language, or the default when absent or not a known tag."""
        try:
            raw = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read %s from storage; using %s.", self._key, self._default)
            return self._default

        if raw is None:
            return self._default

        lang = Language.parse(raw)
        if lang is None:
            # Also accept a JSON-encoded tag ('"zh"').
            try:
                lang = Language.parse(json.loads(raw))
            except (ValueError, RecursionError):
                lang = None

        if lang is None:
            logger.warning("Ignoring persisted %s=%r; using %s.", self._key, raw[:80], self._default)
            return self._default
        return lang

    @property
    def value(self) -> Language:
        return self._value

    def set(self, language: Language) -> None:
        new_value = Language(language)
        self._kv.set(self._key, new_value.value)
        self._value = new_value
        logger.debug("Language set to %s", self._value.value)

    def toggle(self) -> Language:
        self.set(self._value.other())
        return self._value
