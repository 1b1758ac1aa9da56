# Python Imports
import json
from contextlib import asynccontextmanager
from typing import Awaitable, Callable

from aiohttp import web
from aiohttp.test_utils import TestServer

# Project Imports

UNKNOWN_ACCOUNT_ERROR = {
    "name": "HANDLER_ERROR",
    "cause": {"info": {"requested_account_id": "nope.testnet"}, "name": "UNKNOWN_ACCOUNT"},
    "code": -32000,
    "message": "Server error",
    "data": "account nope.testnet does not exist while viewing",
}


def write_key_file(path, private_key: str = "ed25519:placeholder") -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"account_id": path.stem, "private_key": private_key}))
    return str(path)


@asynccontextmanager
async def fake_node(handler: Callable[[dict], Awaitable[web.StreamResponse]]):
    """Serve a JSON-RPC endpoint backed by handler(payload); yields (url, received payloads)."""
    received: list[dict] = []

    async def _handle(request: web.Request) -> web.StreamResponse:
        payload = await request.json()
        received.append(payload)
        return await handler(payload)

    app = web.Application()
    app.router.add_post("/", _handle)
    server = TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/")), received
    finally:
        await server.close()
