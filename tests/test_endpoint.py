from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from universe_i18n.app import create_app
from universe_i18n.config import I18nOptions
from universe_i18n.i18n import I18n

UPDATED_AT = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
LAST_MODIFIED = "Mon, 06 May 2024 07:08:09 GMT"


def _app():
    i18n = I18n(I18nOptions(), clock=lambda: UPDATED_AT)
    i18n.add_translations("en", {"hello": "Hello", "menu": {"open": "Open"}})
    i18n.add_translations("en-GB", {"hello": "Hello", "menu": {"open": "Open up"}})
    return create_app(i18n), i18n


def _client(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_json_response():
    app, i18n = _app()
    async with _client(app) as client:
        response = await client.get("/universe/locale/en", params={"type": "json"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json; charset=utf-8"
    assert response.headers["last-modified"] == LAST_MODIFIED
    assert response.headers["cache-control"] == "max-age=2628000"
    assert "content-disposition" not in response.headers
    assert response.text == i18n.get_cache("en").get_json("en", None, None)


@pytest.mark.asyncio
async def test_yml_response_with_namespace_and_diff():
    app, i18n = _app()
    async with _client(app) as client:
        response = await client.get("/universe/locale/en-GB", params={"type": "yml", "namespace": "menu", "diff": "en"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/yaml; charset=utf-8"
    assert response.text == i18n.formatters.get_yml("en-GB", "menu", "en")
    assert "Open up" in response.text


@pytest.mark.asyncio
async def test_js_is_default_and_attachment_header():
    app, i18n = _app()
    async with _client(app) as client:
        response = await client.get("/universe/locale/en", params={"attachment": "1", "preload": "true"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/javascript; charset=utf-8"
    assert response.headers["content-disposition"] == 'attachment; filename="en.i18n.js"'
    assert response.text == i18n.formatters.get_js("en", None, True)


@pytest.mark.asyncio
async def test_false_attachment_flag_is_ignored():
    app, _ = _app()
    async with _client(app) as client:
        response = await client.get("/universe/locale/en", params={"type": "json", "attachment": "false"})

    assert response.status_code == 200
    assert "content-disposition" not in response.headers


@pytest.mark.asyncio
async def test_unsupported_type_returns_415():
    app, _ = _app()
    async with _client(app) as client:
        known = await client.get("/universe/locale/en", params={"type": "xml"})
        unknown = await client.get("/universe/locale/xx", params={"type": "xml"})

    assert known.status_code == 415
    assert known.content == b""
    assert unknown.status_code == 415


@pytest.mark.asyncio
async def test_unloaded_locale_returns_501():
    app, _ = _app()
    async with _client(app) as client:
        unknown = await client.get("/universe/locale/xx")
        not_loaded = await client.get("/universe/locale/de", params={"type": "json"})

    assert unknown.status_code == 501
    assert unknown.content == b""
    assert not_loaded.status_code == 501


@pytest.mark.asyncio
async def test_non_locale_path_falls_through():
    app, _ = _app()

    @app.get("/universe/locale/42")
    async def numeric():
        return {"handled_by": "app"}

    async with _client(app) as client:
        response = await client.get("/universe/locale/42")
        outside = await client.get("/elsewhere/en")

    assert response.status_code == 200
    assert response.json() == {"handled_by": "app"}
    assert outside.status_code == 404


@pytest.mark.asyncio
async def test_reload_refreshes_last_modified():
    stamps = iter(
        [
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 1, 2, tzinfo=timezone.utc),
        ]
    )
    i18n = I18n(I18nOptions(), clock=lambda: next(stamps))
    i18n.add_translations("fr", {"hello": "Bonjour"})
    app = create_app(i18n)

    async with _client(app) as client:
        first = await client.get("/universe/locale/fr", params={"type": "json"})
        again = await client.get("/universe/locale/fr", params={"type": "json"})
        i18n.add_translations("fr", {"bye": "Salut"})
        reloaded = await client.get("/universe/locale/fr", params={"type": "json"})

    assert first.headers["last-modified"] == again.headers["last-modified"] == "Mon, 01 Jan 2024 00:00:00 GMT"
    assert reloaded.headers["last-modified"] == "Tue, 02 Jan 2024 00:00:00 GMT"
    assert reloaded.json() == {"hello": "Bonjour", "bye": "Salut"}


@pytest.mark.asyncio
async def test_regional_locale_served_from_language_translations():
    i18n = I18n(I18nOptions(), clock=lambda: UPDATED_AT)
    i18n.add_translations("en", {"hello": "Hello"})
    app = create_app(i18n)

    async with _client(app) as client:
        as_json = await client.get("/universe/locale/en-GB", params={"type": "json"})
        as_js = await client.get("/universe/locale/en-GB")
        i18n.add_translations("en", {"bye": "Goodbye"})
        reloaded = await client.get("/universe/locale/en-GB", params={"type": "json"})

    assert as_json.status_code == 200
    assert as_json.json() == {"hello": "Hello"}
    assert as_js.status_code == 200
    assert as_js.text.startswith("(Package['universe:i18n'].i18n).addTranslations(\"en-GB\", ")
    assert reloaded.json() == {"hello": "Hello", "bye": "Goodbye"}


@pytest.mark.asyncio
async def test_unsupported_type_checked_before_locale_match():
    app, _ = _app()
    async with _client(app) as client:
        response = await client.get("/universe/locale/42", params={"type": "xml"})

    assert response.status_code == 415
