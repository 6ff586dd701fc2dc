import os
from dataclasses import dataclass, field
from typing import Optional


DEFAULT_TIMEOUT = 30.0
DEFAULT_TRANSLATIONS_HEADERS = {"Cache-Control": "max-age=2628000"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class I18nOptions:
    default_locale: str = "en-US"
    host_url: str = "http://localhost:3000/"
    path_on_host: str = "universe/locale/"
    route_prefix: str = "/universe/locale/"
    same_locale_on_server_connection: bool = True
    translations_headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TRANSLATIONS_HEADERS))
    request_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "info"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "I18nOptions":
        return cls(
            default_locale=os.environ.get("UNIVERSE_I18N_DEFAULT_LOCALE", "en-US"),
            host_url=os.environ.get("ROOT_URL", "http://localhost:3000/"),
            path_on_host=os.environ.get("UNIVERSE_I18N_PATH_ON_HOST", "universe/locale/"),
            route_prefix=os.environ.get("UNIVERSE_I18N_ROUTE_PREFIX", "/universe/locale/"),
            same_locale_on_server_connection=_env_flag("UNIVERSE_I18N_SAME_LOCALE_ON_SERVER_CONNECTION", True),
            request_timeout=float(os.environ.get("UNIVERSE_I18N_REQUEST_TIMEOUT", DEFAULT_TIMEOUT)),
            log_level=os.environ.get("UNIVERSE_I18N_LOG_LEVEL", "info"),
            log_dir=os.environ.get("UNIVERSE_I18N_LOG_DIR") or None,
        )
