import pytest

from universe_i18n.exceptions import NoSuchConnection, UnrecognizedLocale
from universe_i18n.registry import ConnectionLocaleRegistry
from universe_i18n.store import TranslationStore


def _registry() -> ConnectionLocaleRegistry:
    return ConnectionLocaleRegistry(TranslationStore().normalize)


def test_open_creates_empty_locale_and_close_removes_it():
    registry = _registry()
    registry.on_connection_open("c1")
    assert registry.get_locale("c1") == ""
    assert "c1" in registry

    registry.on_connection_close("c1")
    assert registry.get_locale("c1") is None
    assert len(registry) == 0


def test_close_unknown_connection_is_noop():
    registry = _registry()
    registry.on_connection_close("missing")
    assert registry.connection_ids() == []


def test_get_locale_without_connection():
    assert _registry().get_locale(None) is None


def test_set_locale_stores_normalized_tag():
    registry = _registry()
    registry.on_connection_open("c1")
    assert registry.set_locale("c1", "pt_br") == "pt-BR"
    assert registry.get_locale("c1") == "pt-BR"


def test_set_locale_requires_open_connection():
    registry = _registry()
    with pytest.raises(NoSuchConnection):
        registry.set_locale("never-opened", "fr")

    registry.on_connection_open("c1")
    registry.on_connection_close("c1")
    with pytest.raises(NoSuchConnection):
        registry.set_locale("c1", "fr")


def test_set_locale_rejects_unknown_locale():
    registry = _registry()
    registry.on_connection_open("c1")
    with pytest.raises(UnrecognizedLocale):
        registry.set_locale("c1", "xx-YY")
    assert registry.get_locale("c1") == ""


def test_reopen_overwrites_entry():
    registry = _registry()
    registry.on_connection_open("c1")
    registry.set_locale("c1", "de")
    registry.on_connection_open("c1")
    assert registry.get_locale("c1") == ""


def test_set_locale_checks_connection_before_locale():
    registry = _registry()
    with pytest.raises(NoSuchConnection):
        registry.set_locale("never-opened", "zz")
