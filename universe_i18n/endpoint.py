"""HTTP delivery of cached locale content under the configured route prefix."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, field_validator
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from .exceptions import LocaleUnavailable, UnsupportedContentType

if TYPE_CHECKING:
    from .i18n import I18n

LOCALE_PATTERN = re.compile(r"^/?([a-z]{2}[a-z0-9\-_]*)", re.IGNORECASE)

CONTENT_TYPES = {
    "js": "application/javascript; charset=utf-8",
    "json": "application/json; charset=utf-8",
    "yml": "text/yaml; charset=utf-8",
}

_FALSE_VALUES = {"0", "false", "no", "off"}


class LocaleQuery(BaseModel):
    type: Optional[str] = None
    namespace: Optional[str] = None
    diff: Optional[str] = None
    preload: bool = False
    attachment: bool = False

    @field_validator("preload", "attachment", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() not in _FALSE_VALUES

    @field_validator("namespace", "diff", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value)

    @property
    def content_type(self) -> str:
        if self.type and self.type not in CONTENT_TYPES:
            raise UnsupportedContentType(self.type)
        return self.type or "js"


def match_locale(path: str) -> Optional[str]:
    match = LOCALE_PATTERN.match(path)
    return match.group(1) if match else None


def render_locale(i18n: I18n, locale: str, query: LocaleQuery, content_type: str) -> Response:
    """Build the response for ``locale`` in an already validated ``content_type``."""
    entry = i18n.get_cache(locale)
    if entry is None or not entry.updated_at:
        raise LocaleUnavailable(locale)

    headers = {
        **i18n.options.translations_headers,
        "Last-Modified": entry.last_modified,
    }
    if query.attachment:
        headers["Content-Disposition"] = f'attachment; filename="{locale}.i18n.{content_type}"'

    if content_type == "json":
        body = entry.get_json(entry.locale, query.namespace, query.diff)
    elif content_type == "yml":
        body = entry.get_yml(entry.locale, query.namespace, query.diff)
    else:
        body = entry.get_js(entry.locale, query.namespace, query.preload)

    return Response(
        content=body,
        status_code=200,
        headers={"Content-Type": CONTENT_TYPES[content_type], **headers},
    )


class LocaleDeliveryMiddleware(BaseHTTPMiddleware):
    """
    Serve ``<route_prefix><locale>`` requests from the locale cache.

    Paths outside the prefix, or whose first segment is not shaped like a
    locale, are passed on to the rest of the application.
    """

    def __init__(self, app: ASGIApp, *, i18n: I18n) -> None:
        super().__init__(app)
        self.i18n = i18n

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        prefix = self.i18n.options.route_prefix.rstrip("/")
        path = request.url.path
        if path != prefix and not path.startswith(prefix + "/"):
            return await call_next(request)

        query = LocaleQuery.model_validate(dict(request.query_params))
        try:
            content_type = query.content_type
        except UnsupportedContentType:
            return Response(status_code=415)

        locale = match_locale(path[len(prefix):])
        if not locale:
            return await call_next(request)

        try:
            return render_locale(self.i18n, locale, query, content_type)
        except LocaleUnavailable:
            return Response(status_code=501)
