# Python Imports
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union

import yaml

# Project Imports
from near_utils.errors import ConfigError, NotFoundError

logger = logging.getLogger(__name__)

NETWORK_ENV_VAR = "NEAR_ENV"
DEFAULT_NETWORK = "testnet"
LOCAL_NODE_URL = "http://localhost:3030"
DEFAULT_TIMEOUT = 10.0


def rpc_url_for(network: str) -> str:
    return LOCAL_NODE_URL if network == "local" else f"https://rpc.{network}.near.org"


@dataclass(frozen=True)
class NetworkConfig:
    network_id: str
    node_url: str
    wallet_url: Optional[str] = None
    helper_url: Optional[str] = None
    explorer_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT


_BUILTIN_NETWORKS: dict[str, NetworkConfig] = {
    "mainnet": NetworkConfig(
        network_id="mainnet",
        node_url=rpc_url_for("mainnet"),
        wallet_url="https://wallet.near.org",
        helper_url="https://helper.mainnet.near.org",
        explorer_url="https://explorer.mainnet.near.org",
    ),
    "testnet": NetworkConfig(
        network_id="testnet",
        node_url=rpc_url_for("testnet"),
        wallet_url="https://wallet.testnet.near.org",
        helper_url="https://helper.testnet.near.org",
        explorer_url="https://explorer.testnet.near.org",
    ),
    "betanet": NetworkConfig(
        network_id="betanet",
        node_url=rpc_url_for("betanet"),
        wallet_url="https://wallet.betanet.near.org",
        helper_url="https://helper.betanet.near.org",
        explorer_url="https://explorer.betanet.near.org",
    ),
    "local": NetworkConfig(
        network_id="local",
        node_url=rpc_url_for("local"),
        wallet_url="http://localhost:4000/wallet",
    ),
    "ci": NetworkConfig(
        network_id="shared-test",
        node_url="https://rpc.ci-testnet.near.org",
    ),
}

_ALIASES = {
    "production": "mainnet",
    "development": "testnet",
    "test": "ci",
}


def network_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(NETWORK_ENV_VAR) or DEFAULT_NETWORK


class ConfigProvider(Protocol):
    def get_config(self, network: str) -> NetworkConfig:
        ...


class DefaultConfigProvider:
    def get_config(self, network: str = DEFAULT_NETWORK) -> NetworkConfig:
        name = _ALIASES.get(network, network)
        try:
            return _BUILTIN_NETWORKS[name]
        except KeyError:
            raise ConfigError(f"Unconfigured network: '{network}'. Can be configured in a networks config file.")


class YamlConfigProvider(DefaultConfigProvider):
    """
    Network configuration read from a YAML file supplied by the host application.

    The file holds a ``networks`` mapping; each entry may override any NetworkConfig
    field. Networks absent from the file resolve to the built-in defaults, and a
    partial entry for a built-in network only replaces the fields it names.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._networks = self._load()

    def _load(self) -> dict[str, dict]:
        try:
            with open(self.path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise NotFoundError(f"Network config file not found: {self.path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.path}: {e}")

        networks = data.get("networks", {}) if isinstance(data, dict) else None
        if not isinstance(networks, dict):
            raise ConfigError(f"'networks' must be a mapping in {self.path}")

        logger.debug(f"Loaded {len(networks)} network entries from {self.path}")
        return networks

    def get_config(self, network: str = DEFAULT_NETWORK) -> NetworkConfig:
        overrides = self._networks.get(network, self._networks.get(_ALIASES.get(network, network)))
        if overrides is None:
            return super().get_config(network)
        if not isinstance(overrides, dict):
            raise ConfigError(f"Network '{network}' must be a mapping in {self.path}")

        known = {f.name for f in fields(NetworkConfig)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown keys for network '{network}': {', '.join(sorted(unknown))}")

        try:
            base = super().get_config(network)
        except ConfigError:
            if "node_url" not in overrides:
                raise ConfigError(f"Network '{network}' in {self.path} needs a node_url")
            return NetworkConfig(**{"network_id": network, **overrides})

        return replace(base, **overrides)
