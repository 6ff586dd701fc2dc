from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Optional

from .exceptions import UnrecognizedLocale
from .locales import canonical_locale

logger = logging.getLogger("universe_i18n")

ChangeCallback = Callable[[str], Any]


def _deep_merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            _deep_merge(current, value)
        elif isinstance(value, dict):
            target[key] = copy.deepcopy(value)
        else:
            target[key] = value


class TranslationStore:
    """In-memory translations per normalized locale, with change observers."""

    def __init__(self) -> None:
        self._translations: dict[str, dict[str, Any]] = {}
        self._change_callbacks: list[ChangeCallback] = []

    def normalize(self, locale: Any) -> Optional[str]:
        if not isinstance(locale, str) or not locale:
            return None
        return canonical_locale(locale)

    def add_translations(
        self,
        locale: str,
        translations: dict[str, Any],
        namespace: Optional[str] = None,
    ) -> str:
        normalized = self.normalize(locale)
        if normalized is None:
            raise UnrecognizedLocale(locale)
        if not isinstance(translations, dict):
            raise TypeError(f"translations for {normalized} must be a mapping, got {type(translations).__name__}")

        if namespace:
            for part in reversed(namespace.split(".")):
                translations = {part: translations}

        _deep_merge(self._translations.setdefault(normalized, {}), translations)
        logger.debug(f"Merged translations for {normalized} (namespace={namespace})")
        return normalized

    def get_translations(self, locale: str, namespace: Optional[str] = None) -> dict[str, Any]:
        normalized = self.normalize(locale)
        if normalized is None:
            return {}
        node: Any = self._with_language_fallback(normalized)
        if namespace:
            for part in namespace.split("."):
                if not isinstance(node, dict):
                    return {}
                node = node.get(part, {})
        return copy.deepcopy(node) if isinstance(node, dict) else {}

    def _with_language_fallback(self, normalized: str) -> dict[str, Any]:
        """Regional translations layered over those of the bare language (`en-GB` over `en`)."""
        merged: dict[str, Any] = {}
        language = normalized.split("-")[0]
        if language != normalized:
            _deep_merge(merged, self._translations.get(language, {}))
        _deep_merge(merged, self._translations.get(normalized, {}))
        return merged

    def has_translations(self, locale: str) -> bool:
        normalized = self.normalize(locale)
        if normalized is None:
            return False
        if self._translations.get(normalized):
            return True
        language = normalized.split("-")[0]
        return bool(self._translations.get(language))

    def locales(self) -> list[str]:
        return sorted(self._translations)

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        self._change_callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._change_callbacks:
                self._change_callbacks.remove(callback)

        return unsubscribe

    def emit_change(self, locale: str) -> None:
        for callback in list(self._change_callbacks):
            try:
                callback(locale)
            except Exception:
                logger.warning(f"locale change callback failed for {locale}", exc_info=True)
