from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union, overload

from .formatters import Formatters
from .store import TranslationStore

logger = logging.getLogger("universe_i18n")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CacheEntry:
    locale: str
    updated_at: datetime
    formatters: Formatters

    @property
    def last_modified(self) -> str:
        return format_datetime(self.updated_at.astimezone(timezone.utc), usegmt=True)

    def get_js(self, locale: str, namespace: Optional[str] = None, preload: bool = False) -> str:
        return self.formatters.get_js(locale, namespace, preload)

    def get_json(self, locale: str, namespace: Optional[str] = None, diff: Optional[str] = None) -> str:
        return self.formatters.get_json(locale, namespace, diff)

    def get_yml(self, locale: str, namespace: Optional[str] = None, diff: Optional[str] = None) -> str:
        return self.formatters.get_yml(locale, namespace, diff)


class LocaleCache:
    """
    Per-locale entries carrying the ``Last-Modified`` stamp of their content.

    Entries are created on first read and only dropped by ``invalidate``,
    which the loader calls after merging new translations for the locale.
    """

    def __init__(self, store: TranslationStore, formatters: Formatters, clock: Clock = utc_now):
        self._store = store
        self._formatters = formatters
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @overload
    def get(self) -> Mapping[str, CacheEntry]: ...

    @overload
    def get(self, locale: str) -> Optional[CacheEntry]: ...

    def get(self, locale: Optional[str] = None) -> Union[Mapping[str, CacheEntry], CacheEntry, None]:
        if not locale:
            return MappingProxyType(self._entries)

        normalized = self._store.normalize(locale)
        if normalized is None or not self._store.has_translations(normalized):
            return None

        entry = self._entries.get(normalized)
        if entry is None:
            entry = CacheEntry(locale=normalized, updated_at=self._clock(), formatters=self._formatters)
            self._entries[normalized] = entry
            logger.debug(f"Created cache entry for {normalized}")
        return entry

    def invalidate(self, locale: str) -> None:
        normalized = self._store.normalize(locale) or locale
        # regional entries render from the language translations too
        stale = [key for key in self._entries if key == normalized or key.startswith(normalized + "-")]
        for key in stale:
            del self._entries[key]
            logger.debug(f"Invalidated cache entry for {key}")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, locale: object) -> bool:
        return locale in self._entries
