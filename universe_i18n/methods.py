from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import UnrecognizedLocale
from .server import MethodInvocation, MethodServer

if TYPE_CHECKING:
    from .i18n import I18n

logger = logging.getLogger("universe_i18n")

SET_SERVER_LOCALE_METHOD = "universe.i18n.setServerLocaleForConnection"


def register_methods(server: MethodServer, i18n: I18n) -> None:
    @server.method(SET_SERVER_LOCALE_METHOD)
    def set_server_locale_for_connection(invocation: MethodInvocation, locale: Any = None) -> None:
        if not isinstance(locale, str) or not i18n.options.same_locale_on_server_connection:
            return None

        connection_id = i18n.get_connection_id(invocation.connection)
        if not connection_id:
            return None

        try:
            i18n.set_locale_on_connection(locale, connection_id)
        except UnrecognizedLocale as exc:
            logger.warning(f"{SET_SERVER_LOCALE_METHOD} ignored for {connection_id}: {exc}")
        return None
