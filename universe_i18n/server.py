"""
Connection-oriented method/publication server over FastAPI WebSockets.

Each WebSocket is one ``Connection``. Frames are JSON-RPC 2.0 requests:
registered method names are dispatched through ``MethodServer.call`` and the
``subscribe`` method runs a publication through ``MethodServer.subscribe``.
``ping`` and ``subscribe`` are reserved and cannot be registered as methods.
Parameters are positional only: a by-name (object) ``params`` on a method
call, or a non-list ``args`` on a subscription, is answered with -32602.
Methods see the calling connection through ``current_invocation``;
publications see it through ``publish_connection_id``.
"""

import inspect
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional
import uuid

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError

from .environment import EnvironmentVariable
from .exceptions import I18nError, MethodNotFound, PublicationNotFound

logger = logging.getLogger("universe_i18n")

RESERVED_METHODS = frozenset({"ping", "subscribe"})

MethodHandler = Callable[..., Any]
PublishHandler = Callable[..., Any]
ConnectionCallback = Callable[["Connection"], Any]


class JsonRpcRequest(BaseModel):
    jsonrpc: str = "2.0"
    id: Optional[Any] = None
    method: str
    params: Optional[Any] = None


class Connection:
    def __init__(self, connection_id: Optional[str] = None, client_address: Optional[str] = None):
        self.id = connection_id or uuid.uuid4().hex
        self.client_address = client_address
        self.opened_at = datetime.now()
        self._close_callbacks: list[Callable[[], Any]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def on_close(self, callback: Callable[[], Any]) -> None:
        self._close_callbacks.append(callback)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for callback in self._close_callbacks:
            try:
                callback()
            except Exception:
                logger.warning(f"close callback failed for connection {self.id}", exc_info=True)
        self._close_callbacks.clear()

    def __repr__(self) -> str:
        return f"Connection(id={self.id!r})"


@dataclass
class MethodInvocation:
    connection: Optional[Connection]
    name: str
    started_at: datetime = field(default_factory=datetime.now)


current_invocation: EnvironmentVariable[MethodInvocation] = EnvironmentVariable(
    "universe_i18n_current_invocation"
)
publish_connection_id: EnvironmentVariable[str] = EnvironmentVariable(
    "universe_i18n_publish_connection_id"
)


def _rpc_error(code: int, message: str, request_id: Any) -> dict:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def _rpc_result(result: Any, request_id: Any) -> dict:
    return {"jsonrpc": "2.0", "id": request_id, "result": result}


def _positional(params: Any) -> Optional[list[Any]]:
    if params is None:
        return []
    if isinstance(params, list):
        return params
    return None


def _check_method_name(name: str) -> None:
    if name in RESERVED_METHODS:
        raise ValueError(f"Method name '{name}' is reserved")


async def _invoke(handler: Callable[..., Any], *args: Any) -> Any:
    data = handler(*args)
    if inspect.isawaitable(data):
        data = await data
    return data


class MethodServer:
    def __init__(self) -> None:
        self._methods: dict[str, MethodHandler] = {}
        self._publications: dict[str, PublishHandler] = {}
        self._connection_callbacks: list[ConnectionCallback] = []
        self._connections: dict[str, Connection] = {}

    @property
    def connections(self) -> Mapping[str, Connection]:
        return MappingProxyType(self._connections)

    def method(self, name: str) -> Callable[[MethodHandler], MethodHandler]:
        _check_method_name(name)

        def decorator(handler: MethodHandler) -> MethodHandler:
            self._methods[name] = handler
            return handler

        return decorator

    def methods(self, mapping: Mapping[str, MethodHandler]) -> None:
        for name in mapping:
            _check_method_name(name)
        for name, handler in mapping.items():
            self._methods[name] = handler

    def publish(self, name: str) -> Callable[[PublishHandler], PublishHandler]:
        def decorator(handler: PublishHandler) -> PublishHandler:
            self._publications[name] = handler
            return handler

        return decorator

    def on_connection(self, callback: ConnectionCallback) -> None:
        self._connection_callbacks.append(callback)

    def open_connection(
        self,
        connection_id: Optional[str] = None,
        client_address: Optional[str] = None,
    ) -> Connection:
        connection = Connection(connection_id, client_address)
        self._connections[connection.id] = connection
        connection.on_close(lambda: self._connections.pop(connection.id, None))
        for callback in self._connection_callbacks:
            callback(connection)
        logger.info(f"Connection opened: {connection.id} ({client_address or 'local'})")
        return connection

    async def call(self, connection: Optional[Connection], name: str, *args: Any) -> Any:
        """Run method ``name`` with ``current_invocation`` bound to the caller."""
        handler = self._methods.get(name)
        if handler is None:
            raise MethodNotFound(name)
        invocation = MethodInvocation(connection=connection, name=name)
        return await current_invocation.with_value(invocation, _invoke, handler, invocation, *args)

    async def subscribe(self, connection: Optional[Connection], name: str, *args: Any) -> Any:
        """Run publication ``name`` with ``publish_connection_id`` bound to the caller."""
        handler = self._publications.get(name)
        if handler is None:
            raise PublicationNotFound(name)
        connection_id = connection.id if connection is not None else None
        return await publish_connection_id.with_value(connection_id, _invoke, handler, *args)

    async def handle_message(self, connection: Connection, raw: str) -> dict:
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            return _rpc_error(-32700, "Parse error", None)

        try:
            payload = JsonRpcRequest.model_validate(data)
        except ValidationError:
            request_id = data.get("id") if isinstance(data, dict) else None
            return _rpc_error(-32600, "Invalid Request", request_id)

        request_id = payload.id
        if payload.jsonrpc != "2.0":
            return _rpc_error(-32600, "Invalid JSON-RPC version", request_id)

        if payload.method == "ping":
            return _rpc_result({"status": "ok"}, request_id)

        if payload.method == "subscribe":
            params = payload.params if isinstance(payload.params, dict) else {}
            name = str(params.get("name", ""))
            args = _positional(params.get("args"))
        else:
            name = payload.method
            args = _positional(payload.params)
        if args is None:
            return _rpc_error(-32602, "Invalid params", request_id)

        try:
            if payload.method == "subscribe":
                result = await self.subscribe(connection, name, *args)
            else:
                result = await self.call(connection, name, *args)
        except (MethodNotFound, PublicationNotFound) as exc:
            return _rpc_error(-32601, str(exc), request_id)
        except I18nError as exc:
            logger.warning(f"{payload.method} failed on connection {connection.id}: {exc}")
            return _rpc_error(-32000, str(exc), request_id)
        except Exception:
            logger.exception(f"{payload.method} crashed on connection {connection.id}")
            return _rpc_error(-32603, "Internal error", request_id)

        return _rpc_result(result, request_id)


def build_rpc_router(server: MethodServer, *, path: str = "/websocket") -> APIRouter:
    router = APIRouter()

    @router.websocket(path)
    async def rpc_socket(websocket: WebSocket):
        await websocket.accept()
        client = websocket.client
        connection = server.open_connection(
            client_address=f"{client.host}:{client.port}" if client else None,
        )
        try:
            while True:
                raw = await websocket.receive_text()
                response = await server.handle_message(connection, raw)
                await websocket.send_json(response)
        except WebSocketDisconnect:
            logger.info(f"Connection closed: {connection.id}")
        finally:
            connection.close()

    return router
