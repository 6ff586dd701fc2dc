from __future__ import annotations

import logging
from typing import Optional

from .environment import EnvironmentVariable
from .server import Connection, MethodInvocation, current_invocation, publish_connection_id

logger = logging.getLogger("universe_i18n")


class ConnectionIdentityResolver:
    """
    Find the connection the running code works on behalf of.

    Checked in order: an explicit connection, the connection of the method
    invocation in progress, then the connection bound while a publication
    handler runs. Returns ``None`` outside all of them (timers, startup code).
    """

    def __init__(
        self,
        invocation: EnvironmentVariable[MethodInvocation] = current_invocation,
        publish: EnvironmentVariable[str] = publish_connection_id,
    ):
        self._invocation = invocation
        self._publish = publish

    def resolve(self, connection: Optional[Connection] = None) -> Optional[str]:
        connection_id = getattr(connection, "id", None)
        if connection_id:
            return connection_id

        try:
            invocation = self._invocation.get()
            invocation_connection = invocation.connection if invocation is not None else None
            if invocation_connection is not None and invocation_connection.id:
                return invocation_connection.id
        except Exception:
            logger.debug("method invocation context unavailable", exc_info=True)

        try:
            return self._publish.get() or None
        except Exception:
            logger.debug("publication context unavailable", exc_info=True)
            return None
