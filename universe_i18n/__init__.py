"""
universe i18n server

Per-connection locales, cached locale delivery over HTTP and a WebSocket
method server for ``universe.i18n.setServerLocaleForConnection``.
"""

from .cache import CacheEntry, LocaleCache
from .config import I18nOptions
from .environment import EnvironmentVariable
from .exceptions import (
    I18nError,
    LocaleUnavailable,
    MethodNotFound,
    MissingContent,
    NoSuchConnection,
    PublicationNotFound,
    RemoteLoadFailure,
    UnrecognizedLocale,
    UnsupportedContentType,
)
from .formatters import Formatters
from .i18n import I18n
from .jsonc import strip_json_comments
from .loader import RemoteLocaleLoader
from .logging import configure_logging
from .methods import SET_SERVER_LOCALE_METHOD
from .registry import ConnectionLocaleRegistry
from .resolver import ConnectionIdentityResolver
from .server import (
    Connection,
    MethodInvocation,
    MethodServer,
    build_rpc_router,
    current_invocation,
    publish_connection_id,
)
from .store import TranslationStore

__version__ = "1.0.0"
__all__ = [
    "I18n",
    "I18nOptions",
    # Ambient context
    "EnvironmentVariable",
    "current_invocation",
    "publish_connection_id",
    # Connections
    "Connection",
    "MethodInvocation",
    "MethodServer",
    "build_rpc_router",
    "ConnectionLocaleRegistry",
    "ConnectionIdentityResolver",
    "SET_SERVER_LOCALE_METHOD",
    # Content
    "TranslationStore",
    "Formatters",
    "CacheEntry",
    "LocaleCache",
    "RemoteLocaleLoader",
    "strip_json_comments",
    "configure_logging",
    # Exceptions
    "I18nError",
    "UnrecognizedLocale",
    "UnsupportedContentType",
    "LocaleUnavailable",
    "NoSuchConnection",
    "RemoteLoadFailure",
    "MissingContent",
    "MethodNotFound",
    "PublicationNotFound",
]

# The ASGI app factory lives in universe_i18n.app
# from universe_i18n.app import create_app
