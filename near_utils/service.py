# Python Imports
from typing import Any, Optional

# Project Imports
from near_utils.enums import RequestType
from near_utils.rpc_client import AsyncRpcClient


class AsyncService:
    def __init__(self, async_rpc_client: AsyncRpcClient, name: str, finality: str = "final"):
        self.rpc = async_rpc_client
        self.name = name
        self.finality = finality

    def query_params(self, request_type: RequestType, account_id: str, **extra) -> dict:
        return {"request_type": request_type.value, "finality": self.finality, "account_id": account_id, **extra}

    async def query(self, request_type: RequestType, account_id: str, enable_logging: bool = True,
                    **extra) -> Any:
        # In order to be validated, the response is already awaited, so this already returns the result data
        params = self.query_params(request_type, account_id, **extra)
        return await self.rpc.rpc_valid_request(self.name, params, enable_logging=enable_logging,
                                                account_id=account_id)

    async def raw_query(self, request_type: RequestType, account_id: str, enable_logging: bool = True,
                        **extra) -> str:
        params = self.query_params(request_type, account_id, **extra)
        return await self.rpc.rpc_raw_request(self.name, params, enable_logging=enable_logging)
