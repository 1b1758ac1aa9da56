# Python Imports
import re
from typing import Literal, Union

# Project Imports

NO_CONTRACT_CODE_HASH = "1" * 32
CODE_HASH_PREFIX_LENGTH = 6

NEAR_NOMINATION_EXP = 24

ACCOUNT_ID_MIN_LENGTH = 2
ACCOUNT_ID_MAX_LENGTH = 64
ACCOUNT_ID_REGEX = re.compile(r"^(([a-z\d]+[-_])*[a-z\d]+\.)*([a-z\d]+[-_])*[a-z\d]+$")


def has_deployed_code(state: dict) -> Union[Literal[False], str]:
    """
    Short fingerprint of the contract deployed on an account, or False if there is none.

    The chain reports a code hash of 32 '1' characters for accounts without a contract.
    """
    code_hash = state["code_hash"]
    if code_hash == NO_CONTRACT_CODE_HASH:
        return False
    return code_hash[:CODE_HASH_PREFIX_LENGTH]


def _format_with_commas(value: str) -> str:
    return f"{int(value):,}"


def format_near_amount(balance: Union[str, int], frac_digits: int = NEAR_NOMINATION_EXP) -> str:
    """
    Convert a yoctoNEAR amount into a human readable NEAR amount.

    >>> format_near_amount("1000000000000000000000000")
    '1'
    >>> format_near_amount("1234500000000000000000000000")
    '1,234.5'
    """
    amount = int(balance)
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {balance}")
    if not 0 <= frac_digits <= NEAR_NOMINATION_EXP:
        raise ValueError(f"frac_digits must be between 0 and {NEAR_NOMINATION_EXP}")

    if frac_digits < NEAR_NOMINATION_EXP:
        # Round half up at the last kept digit
        amount += 5 * 10 ** (NEAR_NOMINATION_EXP - frac_digits - 1)

    digits = str(amount)
    whole = digits[:-NEAR_NOMINATION_EXP] or "0"
    fraction = digits[-NEAR_NOMINATION_EXP:].rjust(NEAR_NOMINATION_EXP, "0")[:frac_digits]

    formatted = f"{_format_with_commas(whole)}.{fraction}"
    return formatted.rstrip("0").rstrip(".")


def is_valid_account_id(account_id: str) -> bool:
    if not isinstance(account_id, str):
        return False
    if not ACCOUNT_ID_MIN_LENGTH <= len(account_id) <= ACCOUNT_ID_MAX_LENGTH:
        return False
    return ACCOUNT_ID_REGEX.match(account_id) is not None
