# Python Imports
from dataclasses import dataclass
from typing import Optional

# Project Imports
from near_utils.enums import AccountStatus


@dataclass(frozen=True)
class KeyPair:
    public_key: str
    secret_key: str


@dataclass(frozen=True)
class AccountCheck:
    account_id: str
    status: AccountStatus
    error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return self.status is AccountStatus.VALID
