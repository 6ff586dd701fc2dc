from __future__ import annotations

import json
from typing import Any, Optional

import yaml

from .store import TranslationStore


def _drop_identical(source: dict[str, Any], other: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in source.items():
        if isinstance(value, dict):
            nested = _drop_identical(value, other.get(key) if isinstance(other.get(key), dict) else {})
            if nested:
                result[key] = nested
        elif other.get(key) != value:
            result[key] = value
    return result


class Formatters:
    """
    Render the translations of one locale as JSON, YAML or a JS snippet.

    ``diff`` names a second locale; leaf values identical in both locales are
    left out, so a client that already holds ``diff`` only receives what
    differs.
    """

    def __init__(self, store: TranslationStore):
        self._store = store

    def _translations(self, locale: str, namespace: Optional[str], diff: Optional[str]) -> dict[str, Any]:
        data = self._store.get_translations(locale, namespace)
        if diff and isinstance(diff, str):
            diff_locale = self._store.normalize(diff)
            if diff_locale and diff_locale != self._store.normalize(locale):
                data = _drop_identical(data, self._store.get_translations(diff_locale, namespace))
        return data

    def get_json(self, locale: str, namespace: Optional[str] = None, diff: Optional[str] = None) -> str:
        return json.dumps(self._translations(locale, namespace, diff), ensure_ascii=False)

    def get_yml(self, locale: str, namespace: Optional[str] = None, diff: Optional[str] = None) -> str:
        return yaml.safe_dump(
            self._translations(locale, namespace, diff),
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )

    def get_js(self, locale: str, namespace: Optional[str] = None, preload: bool = False) -> str:
        payload = self.get_json(locale, namespace)
        if len(payload) <= 2 and not preload:
            return ""
        if preload:
            key = f"{locale}.{namespace}" if namespace else locale
            return (
                "var w=this||window;w.__uniI18nPre=w.__uniI18nPre||{};"
                f"w.__uniI18nPre[{json.dumps(key)}]={payload};"
            )
        namespace_arg = f"{json.dumps(namespace)}, " if namespace else ""
        return f"(Package['universe:i18n'].i18n).addTranslations({json.dumps(locale)}, {namespace_arg}{payload});"
