"""
Local NEAR credential store helpers.

A credential store is a directory tree of ``<account_id>.json`` key files, usually
grouped by network (``~/.near-credentials/testnet/alice.testnet.json``). Each file
holds at least a ``private_key`` field.
"""

# Python Imports
import json
import logging
import os
import re
from typing import Optional, Union

# Project Imports
from near_utils.errors import ConfigError, MalformedKeyFileError, NotFoundError
from near_utils.keys import public_key_from_private

logger = logging.getLogger(__name__)

KEY_FILE_SUFFIX = ".json"

PathLike = Union[str, os.PathLike]


def scan(root: PathLike) -> list[str]:
    """Every file path reachable from root, in filesystem enumeration order."""
    root = os.fspath(root)
    if not os.path.exists(root):
        raise NotFoundError(f"Credential store not found: {root}")

    if not os.path.isdir(root):
        return [root]

    try:
        entries = os.listdir(root)
    except OSError as e:
        raise NotFoundError(f"Credential store is not accessible: {root}: {e}") from e

    files: list[str] = []
    for entry in entries:
        files.extend(scan(os.path.join(root, entry)))
    return files


def fetch_local_keys(credential_store: Optional[PathLike], network: str = "default") -> list[str]:
    if not credential_store:
        raise ConfigError("Missing entry level folder for NEAR account credentials")

    try:
        network_filter = re.compile(network or "")
    except re.error as e:
        raise ConfigError(f"Invalid network filter '{network}': {e}") from e

    return [
        entry for entry in scan(credential_store)
        if isinstance(entry, str) and network_filter.search(entry)
    ]


def account_id_from_path(key_file_path: str) -> str:
    name = os.path.basename(key_file_path)
    if name.endswith(KEY_FILE_SUFFIX):
        name = name[:-len(KEY_FILE_SUFFIX)]
    return name


def list_accounts(credential_store: Optional[PathLike], network: str = "testnet") -> dict[str, str]:
    accounts: dict[str, str] = {}
    for key_file_path in fetch_local_keys(credential_store, network):
        account_id = account_id_from_path(key_file_path)
        if account_id in accounts:
            logger.debug(f"Account {account_id} found again at {key_file_path}, replacing {accounts[account_id]}")
        accounts[account_id] = key_file_path

    logger.debug(f"Found {len(accounts)} accounts for network filter '{network}' in {credential_store}")
    return accounts


def load_private_key(key_file_path: PathLike) -> str:
    try:
        with open(key_file_path, 'r') as f:
            contents = json.load(f)
    except OSError as e:
        raise NotFoundError(f"Key file not readable: {key_file_path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedKeyFileError(f"Key file {key_file_path} is not valid JSON: {e}") from e

    if not isinstance(contents, dict):
        raise MalformedKeyFileError(f"Key file {key_file_path} must contain a JSON object")

    private_key = contents.get("private_key")
    if not isinstance(private_key, str):
        raise MalformedKeyFileError(f"Key file {key_file_path} has no 'private_key' string")
    return private_key


def public_key_from_file(key_file_path: PathLike) -> str:
    return public_key_from_private(load_private_key(key_file_path))
