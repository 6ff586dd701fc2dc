import json
import logging
import time
from typing import Any, Callable, Optional
from urllib.parse import urljoin

import httpx

from .cache import LocaleCache
from .config import I18nOptions
from .exceptions import MissingContent, RemoteLoadFailure, UnrecognizedLocale
from .jsonc import strip_json_comments
from .store import TranslationStore

logger = logging.getLogger("universe_i18n")


class RemoteLocaleLoader:
    """
    Fetch translations for a locale from another host and merge them in.

    Loading is best effort: unknown locales, transport errors and malformed
    payloads are logged and ``load`` resolves to ``None`` without retrying.
    """

    def __init__(
        self,
        store: TranslationStore,
        cache: LocaleCache,
        options: I18nOptions,
        get_locale: Callable[[], str],
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._store = store
        self._cache = cache
        self._options = options
        self._get_locale = get_locale
        self._http_client = client
        self._owns_client = client is None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self._options.request_timeout))
            self._owns_client = True
        return self._http_client

    def build_url(self, normalized_locale: str, host: Optional[str] = None, path_on_host: Optional[str] = None) -> str:
        return urljoin(host or self._options.host_url, (path_on_host or self._options.path_on_host) + normalized_locale)

    async def load(
        self,
        locale: str,
        *,
        fresh: bool = False,
        host: Optional[str] = None,
        path_on_host: Optional[str] = None,
        query_params: Optional[dict[str, Any]] = None,
        silent: bool = False,
    ) -> None:
        normalized = self._store.normalize(locale)
        if not normalized:
            logger.error(str(UnrecognizedLocale(locale)))
            return None

        params: dict[str, Any] = dict(query_params or {})
        params["type"] = "json"
        if fresh:
            params["ts"] = int(time.time() * 1000)

        url = self.build_url(normalized, host, path_on_host)
        client = self._get_http_client()
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(str(RemoteLoadFailure(url, str(e) or type(e).__name__)))
            return None
        except ValueError as e:
            logger.error(str(RemoteLoadFailure(url, f"invalid JSON response: {e}")))
            return None

        content = data.get("content") if isinstance(data, dict) else None
        if not content:
            logger.error(f"{MissingContent(url)} ({url})")
            return None

        try:
            translations = json.loads(strip_json_comments(str(content)))
            self._store.add_translations(normalized, translations)
        except (ValueError, TypeError) as e:
            logger.error(str(RemoteLoadFailure(url, f"invalid translations: {e}")))
            return None

        self._cache.invalidate(normalized)
        logger.info(f"Loaded translations for {normalized} from {url}")

        if not silent:
            current = self._get_locale() or ""
            if current.startswith(normalized) or self._options.default_locale.startswith(normalized):
                self._store.emit_change(current)
        return None

    async def close(self) -> None:
        if self._owns_client and self._http_client is not None and not self._http_client.is_closed:
            await self._http_client.aclose()
