# Python Imports

# Project Imports
from near_utils.enums import RequestType
from near_utils.errors import RemoteError
from near_utils.rpc_client import AsyncRpcClient
from near_utils.service import AsyncService
from near_utils.state import format_near_amount


class AccountAsyncService(AsyncService):
    def __init__(self, rpc: AsyncRpcClient):
        super().__init__(rpc, "query")

    def _check_result(self, request_type: RequestType, result, required_key: str) -> dict:
        if not isinstance(result, dict) or required_key not in result:
            raise RemoteError(f"Unexpected {request_type.value} response: {result!r}", result)
        return result

    async def view_account(self, account_id: str) -> dict:
        result = await self.query(RequestType.VIEW_ACCOUNT, account_id)
        state = dict(self._check_result(RequestType.VIEW_ACCOUNT, result, "amount"))
        try:
            state["formattedAmount"] = format_near_amount(state["amount"])
        except (TypeError, ValueError) as e:
            raise RemoteError(f"Unexpected amount in view_account response: {state['amount']!r}", result) from e
        return state

    async def view_access_key_list(self, account_id: str) -> list:
        result = await self.query(RequestType.VIEW_ACCESS_KEY_LIST, account_id)
        keys = self._check_result(RequestType.VIEW_ACCESS_KEY_LIST, result, "keys")["keys"]
        if not isinstance(keys, list):
            raise RemoteError(f"Unexpected view_access_key_list response: {result!r}", result)
        return keys

    async def view_state(self, account_id: str, prefix_base64: str = "") -> str:
        return await self.raw_query(RequestType.VIEW_STATE, account_id, prefix_base64=prefix_base64)
