"""
Server-side i18n facade.

``I18n`` owns the translation store, the per-connection locale registry and
the locale cache, and wires them into a ``MethodServer`` with ``attach``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Union

import httpx

from .cache import CacheEntry, Clock, LocaleCache, utc_now
from .config import I18nOptions
from .environment import EnvironmentVariable
from .exceptions import UnrecognizedLocale
from .formatters import Formatters
from .loader import RemoteLocaleLoader
from .methods import register_methods
from .registry import ConnectionLocaleRegistry
from .resolver import ConnectionIdentityResolver
from .server import Connection, MethodServer
from .store import ChangeCallback, TranslationStore

logger = logging.getLogger("universe_i18n")


class I18n:
    def __init__(
        self,
        options: Optional[I18nOptions] = None,
        *,
        store: Optional[TranslationStore] = None,
        client: Optional[httpx.AsyncClient] = None,
        clock: Clock = utc_now,
    ):
        self.options = options or I18nOptions.from_env()
        self.store = store or TranslationStore()
        self.formatters = Formatters(self.store)
        self.registry = ConnectionLocaleRegistry(self.store.normalize)
        self.resolver = ConnectionIdentityResolver()
        self.cache = LocaleCache(self.store, self.formatters, clock=clock)
        self.loader = RemoteLocaleLoader(
            self.store,
            self.cache,
            self.options,
            get_locale=self.get_locale,
            client=client,
        )
        self._contextual_locale: EnvironmentVariable[str] = EnvironmentVariable("universe_i18n_contextual_locale")

    def set_options(self, **kwargs: Any) -> I18nOptions:
        for key, value in kwargs.items():
            if not hasattr(self.options, key):
                raise TypeError(f"Unknown i18n option: {key}")
            setattr(self.options, key, value)
        return self.options

    def normalize(self, locale: Any) -> Optional[str]:
        return self.store.normalize(locale)

    def get_locale(self) -> str:
        """Locale of the running code: ``run_with_locale`` scope, then connection, then default."""
        contextual = self._contextual_locale.get()
        if contextual:
            return contextual
        return self.get_connection_locale() or self.options.default_locale

    def run_with_locale(self, locale: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        normalized = self.normalize(locale)
        if normalized is None:
            raise UnrecognizedLocale(locale)
        return self._contextual_locale.with_value(normalized, fn, *args, **kwargs)

    def get_connection_id(self, connection: Optional[Connection] = None) -> Optional[str]:
        return self.resolver.resolve(connection)

    def get_connection_locale(self, connection: Optional[Connection] = None) -> Optional[str]:
        return self.registry.get_locale(self.get_connection_id(connection))

    def set_locale_on_connection(self, locale: str, connection_id: Optional[str] = None) -> str:
        if connection_id is None:
            connection_id = self.get_connection_id()
        return self.registry.set_locale(connection_id, locale)

    def get_cache(self, locale: Optional[str] = None) -> Union[Mapping[str, CacheEntry], CacheEntry, None]:
        if not locale:
            return self.cache.get()
        return self.cache.get(locale)

    def add_translations(self, locale: str, translations: dict[str, Any], namespace: Optional[str] = None) -> str:
        normalized = self.store.add_translations(locale, translations, namespace)
        self.cache.invalidate(normalized)
        return normalized

    async def load_locale(self, locale: str, **kwargs: Any) -> None:
        return await self.loader.load(locale, **kwargs)

    def on_change(self, callback: ChangeCallback) -> Callable[[], None]:
        return self.store.on_change(callback)

    def attach(self, server: MethodServer) -> None:
        def track(connection: Connection) -> None:
            self.registry.on_connection_open(connection.id)
            connection.on_close(lambda: self.registry.on_connection_close(connection.id))

        server.on_connection(track)
        register_methods(server, self)
        logger.info("i18n attached to method server")

    async def close(self) -> None:
        await self.loader.close()
