# Python Imports
import logging
from typing import Optional, Union
from aiohttp import ClientSession

# Project Imports
from near_utils.account_service import AccountAsyncService
from near_utils.config import ConfigProvider, DefaultConfigProvider, NetworkConfig, network_from_env
from near_utils.dataclasses import AccountCheck
from near_utils.enums import AccountStatus
from near_utils.errors import AccountNotFoundError, RemoteError
from near_utils.rpc_client import AsyncRpcClient
from near_utils.state import is_valid_account_id

logger = logging.getLogger(__name__)


class NearBackend:
    """
    Remote account operations against a single NEAR network.

    The network configuration is passed in explicitly; use ``for_network`` to resolve it
    through a ConfigProvider supplied by the host application.
    """

    def __init__(self, config: NetworkConfig, session: Optional[ClientSession] = None):
        self.config = config
        self.rpc = AsyncRpcClient(config.node_url, session=session, timeout=config.timeout)
        self.accounts_service = AccountAsyncService(self.rpc)

    @classmethod
    def for_network(cls, network: Optional[str] = None, provider: Optional[ConfigProvider] = None,
                    session: Optional[ClientSession] = None) -> "NearBackend":
        provider = provider or DefaultConfigProvider()
        return cls(provider.get_config(network or network_from_env()), session=session)

    async def __aenter__(self):
        await self.rpc.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self.rpc.close()

    async def fetch_state(self, account_id: str) -> dict:
        return await self.accounts_service.view_account(account_id)

    async def fetch_access_keys(self, account_id: str) -> list:
        return await self.accounts_service.view_access_key_list(account_id)

    async def validate_account(self, account_id: str) -> AccountCheck:
        if not is_valid_account_id(account_id):
            return AccountCheck(account_id, AccountStatus.INVALID_NAME)

        try:
            await self.fetch_state(account_id)
        except AccountNotFoundError as e:
            return AccountCheck(account_id, AccountStatus.NOT_FOUND, e)
        except RemoteError as e:
            return AccountCheck(account_id, AccountStatus.ERROR, e)
        return AccountCheck(account_id, AccountStatus.VALID)

    async def is_valid(self, account_id: str) -> bool:
        check = await self.validate_account(account_id)
        if check.status is AccountStatus.ERROR:
            logger.warning(f"Could not validate account {account_id} on {self.config.network_id}: {check.error}")
        return bool(check)

    async def fetch_storage(self, account_id: str) -> Union[str, dict]:
        check = await self.validate_account(account_id)
        if check.status is AccountStatus.ERROR:
            raise check.error
        if not check:
            return {}
        return await self.accounts_service.view_state(account_id)
