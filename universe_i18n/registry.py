from __future__ import annotations

import logging
from typing import Callable, Optional

from .exceptions import NoSuchConnection, UnrecognizedLocale

logger = logging.getLogger("universe_i18n")

Normalizer = Callable[[str], Optional[str]]


class ConnectionLocaleRegistry:
    """
    Locale assigned to each open connection.

    An entry exists from ``on_connection_open`` until ``on_connection_close``;
    its locale stays ``""`` until ``set_locale`` stores a normalized tag.
    """

    def __init__(self, normalize: Normalizer):
        self._normalize = normalize
        self._locales: dict[str, str] = {}

    def on_connection_open(self, connection_id: str) -> None:
        self._locales[connection_id] = ""

    def on_connection_close(self, connection_id: str) -> None:
        self._locales.pop(connection_id, None)

    def get_locale(self, connection_id: Optional[str]) -> Optional[str]:
        if connection_id is None:
            return None
        return self._locales.get(connection_id)

    def set_locale(self, connection_id: Optional[str], locale: str) -> str:
        if connection_id is None or connection_id not in self._locales:
            raise NoSuchConnection(connection_id)
        normalized = self._normalize(locale)
        if not normalized:
            raise UnrecognizedLocale(locale)
        self._locales[connection_id] = normalized
        logger.debug(f"Connection {connection_id} locale set to {normalized}")
        return normalized

    def connection_ids(self) -> list[str]:
        return list(self._locales)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._locales

    def __len__(self) -> int:
        return len(self._locales)
