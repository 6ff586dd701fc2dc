from __future__ import annotations

from typing import Any, Optional


class I18nError(Exception):
    pass


class UnrecognizedLocale(I18nError):
    """Raised when a locale string cannot be normalized."""

    def __init__(self, locale: Any):
        super().__init__(f'Unrecognized locale "{locale}"')
        self.locale = locale


class UnsupportedContentType(I18nError):
    """Raised for a ``type`` query value outside js/json/yml."""

    def __init__(self, content_type: str):
        super().__init__(f"Unsupported content type: {content_type}")
        self.content_type = content_type


class LocaleUnavailable(I18nError):
    """Raised when no cache entry can be produced for a locale."""

    def __init__(self, locale: str):
        super().__init__(f"Locale {locale} is not available")
        self.locale = locale


class NoSuchConnection(I18nError):
    """Raised when a locale is set for a connection that was never opened."""

    def __init__(self, connection_id: Optional[str]):
        super().__init__(f"There is no connection under id: {connection_id}")
        self.connection_id = connection_id


class RemoteLoadFailure(I18nError):
    """Raised when fetching or parsing remote translations fails."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to load translations from {url}: {reason}")
        self.url = url
        self.reason = reason


class MissingContent(I18nError):
    def __init__(self, url: str):
        super().__init__("missing content")
        self.url = url


class MethodNotFound(I18nError):
    def __init__(self, name: str):
        super().__init__(f"Method {name} not found")
        self.name = name


class PublicationNotFound(I18nError):
    def __init__(self, name: str):
        super().__init__(f"Publication {name} not found")
        self.name = name
