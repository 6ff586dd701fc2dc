import argparse
import logging
from contextlib import asynccontextmanager
from typing import Iterable, Optional

from fastapi import FastAPI

from .config import I18nOptions
from .endpoint import LocaleDeliveryMiddleware
from .i18n import I18n
from .logging import configure_logging
from .server import MethodServer, build_rpc_router

logger = logging.getLogger("universe_i18n")


def create_app(
    i18n: Optional[I18n] = None,
    server: Optional[MethodServer] = None,
    *,
    load_locales: Iterable[str] = (),
    websocket_path: str = "/websocket",
) -> FastAPI:
    i18n = i18n or I18n()
    server = server or MethodServer()
    i18n.attach(server)
    startup_locales = list(load_locales)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        for locale in startup_locales:
            await i18n.load_locale(locale)
        yield
        await i18n.close()

    app = FastAPI(title="universe-i18n", lifespan=lifespan)
    app.state.i18n = i18n
    app.state.method_server = server
    app.add_middleware(LocaleDeliveryMiddleware, i18n=i18n)
    app.include_router(build_rpc_router(server, path=websocket_path))
    return app


def main():
    parser = argparse.ArgumentParser(description="Serve universe i18n locales over HTTP and WebSocket")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    parser.add_argument("--load", action="append", default=[], metavar="LOCALE", help="locale to fetch at startup")
    parser.add_argument("--log-level", default=None, help="overrides UNIVERSE_I18N_LOG_LEVEL")
    parser.add_argument("--log-dir", default=None, help="overrides UNIVERSE_I18N_LOG_DIR")
    args, _ = parser.parse_known_args()

    options = I18nOptions.from_env()
    if args.log_level:
        options.log_level = args.log_level
    if args.log_dir:
        options.log_dir = args.log_dir
    configure_logging(options)
    app = create_app(I18n(options), load_locales=args.load)

    import uvicorn

    # uvicorn keeps the handlers installed by configure_logging
    uvicorn.run(app, host=args.host, port=args.port, log_level=options.log_level.lower(), log_config=None)


if __name__ in {"__main__", "__mp_main__"}:
    main()
