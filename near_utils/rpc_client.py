# Python Imports
import asyncio
import json
import logging
from typing import Optional, Any, cast
from aiohttp import ClientSession, ClientTimeout, ClientError

# Project Imports
from near_utils.errors import RemoteError, AccountNotFoundError
from near_utils.logger import TraceLogger

# near_utils.logger registers TraceLogger before this logger is created
logger = cast(TraceLogger, logging.getLogger(__name__))

DEFAULT_REQUEST_ID = "dontcare"
UNKNOWN_ACCOUNT_CAUSE = "UNKNOWN_ACCOUNT"
UNKNOWN_ACCOUNT_MESSAGE = "does not exist while viewing"


def is_unknown_account_error(error: Any) -> bool:
    if isinstance(error, dict):
        cause = error.get("cause")
        if isinstance(cause, dict) and cause.get("name") == UNKNOWN_ACCOUNT_CAUSE:
            return True
    return UNKNOWN_ACCOUNT_MESSAGE in str(error)


class AsyncRpcClient:
    def __init__(self, rpc_url: str, session: Optional[ClientSession] = None, timeout: float = 10):
        self.rpc_url = rpc_url
        self._owns_session = session is None
        self.session = session or ClientSession(timeout=ClientTimeout(total=timeout))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any):
        await self.close()

    async def close(self):
        if self._owns_session:
            await self.session.close()

    def _build_payload(self, method: str, params: Optional[dict], request_id: str) -> dict:
        return {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params or {}}

    def _raise_for_error(self, error: Any, account_id: Optional[str]):
        if account_id is not None and is_unknown_account_error(error):
            raise AccountNotFoundError(account_id, error)
        raise RemoteError(f"JSON-RPC Error: {error}", error)

    async def _post(self, payload: dict, url: Optional[str], enable_logging: bool) -> str:
        url = url or self.rpc_url

        if enable_logging:
            logger.trace(f"Sending async POST to {url} with data: {json.dumps(payload, sort_keys=True)}")

        try:
            async with self.session.post(url, json=payload) as response:
                resp_text = await response.text()
                if response.status != 200:
                    raise RemoteError(f"Bad HTTP status: {response.status}, body: {resp_text}")
                return resp_text
        except (ClientError, asyncio.TimeoutError) as e:
            raise RemoteError(f"Request to {url} failed: {e!r}", e) from e
        except UnicodeDecodeError as e:
            raise RemoteError(f"Undecodable response body from {url}: {e}", e) from e

    async def rpc_raw_request(self, method: str, params: Optional[dict] = None, request_id: str = DEFAULT_REQUEST_ID,
        url: Optional[str] = None, enable_logging: bool = True) -> str:
        # Body is handed back untouched, only the HTTP status is checked
        payload = self._build_payload(method, params, request_id)
        return await self._post(payload, url, enable_logging)

    async def rpc_request(self, method: str, params: Optional[dict] = None, request_id: str = DEFAULT_REQUEST_ID,
        url: Optional[str] = None, enable_logging: bool = True, account_id: Optional[str] = None) -> dict:
        payload = self._build_payload(method, params, request_id)
        resp_text = await self._post(payload, url, enable_logging)

        try:
            resp_json = json.loads(resp_text)
        except json.JSONDecodeError as e:
            raise RemoteError(f"Invalid JSON in response: {resp_text}") from e

        if not isinstance(resp_json, dict):
            raise RemoteError(f"Unexpected JSON-RPC response: {resp_text}")

        if enable_logging:
            logger.trace(f"Received response: {json.dumps(resp_json, sort_keys=True)}")

        if "error" in resp_json:
            self._raise_for_error(resp_json["error"], account_id)

        return resp_json

    async def rpc_valid_request(self, method: str, params: Optional[dict] = None, request_id: str = DEFAULT_REQUEST_ID,
        url: Optional[str] = None, enable_logging: bool = True, account_id: Optional[str] = None) -> Any:
        resp_json = await self.rpc_request(method, params, request_id, url, enable_logging, account_id)
        if "result" not in resp_json:
            raise RemoteError(f"Key 'result' missing in response: {resp_json}")

        result = resp_json["result"]
        # Query errors can also come back inside a successful envelope
        if isinstance(result, dict) and "error" in result:
            self._raise_for_error(result["error"], account_id)
        return result
