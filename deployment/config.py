"""
Network Configuration
Named networks the deployment scripts can target
"""

import os
import json
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from .exceptions import ConfigurationError, MissingPrivateKeyError, NetworkNotFoundError

DEFAULT_NETWORK = 'hardhat-issuer'

# Chain ID used by Hardhat/Anvil local nodes
LOCAL_DEV_CHAIN_ID = 31337

NETWORKS = {
    'shimmerevm-testnet': {
        'url': 'https://json-rpc.evm.testnet.shimmer.network',
        'chain_id': 1072,
        'gas': 2100000,
        'gas_price': 8000000000,
        'accounts': ['PRIVATE_KEY'],
        'block_explorer_url': 'https://explorer.evm.testnet.shimmer.network',
    },
    'hardhat-issuer': {
        'url': 'http://127.0.0.1:8545/',
        'chain_id': LOCAL_DEV_CHAIN_ID,
        'gas': 2100000,
        'gas_price': 8000000000,
        'accounts': ['PRIVATE_KEY_ISSUER'],
    },
    'sepolia': {
        'url': 'https://sepolia.infura.io/v3/{INFURA_API_KEY}',
        'chain_id': 11155111,
        'accounts': ['PRIVATE_KEY_ISSUER'],
        'block_explorer_url': 'https://sepolia.etherscan.io',
    },
    'localhost': {
        'url': 'http://127.0.0.1:8545/',
        'chain_id': LOCAL_DEV_CHAIN_ID,
        'accounts': ['PRIVATE_KEY'],
    },
}


@dataclass
class NetworkConfig:
    """Connection and gas settings for one named network."""

    name: str
    url: str  # may contain {ENV_VAR} placeholders
    chain_id: int
    gas: Optional[int] = None  # None = estimate per transaction
    gas_price: Optional[int] = None  # wei, None = ask the node
    accounts: List[str] = field(default_factory=list)  # env vars holding private keys
    block_explorer_url: Optional[str] = None

    def resolve_url(self) -> str:
        """
        Substitute environment variables into the RPC URL

        Returns:
            RPC URL ready to use

        Raises:
            ConfigurationError: If a referenced variable is unset
        """
        placeholders = [
            name for _, name, _, _ in string.Formatter().parse(self.url) if name
        ]
        values = {}
        for name in placeholders:
            value = os.getenv(name)
            if not value:
                raise ConfigurationError(
                    f"Network '{self.name}' needs environment variable {name} for its RPC URL"
                )
            values[name] = value
        return self.url.format(**values)

    def private_key(self) -> str:
        """
        Get the signing key (first configured account)

        Raises:
            MissingPrivateKeyError: If no account is configured or the variable is unset
        """
        if not self.accounts:
            raise MissingPrivateKeyError(f"Network '{self.name}' has no accounts configured")

        env_var = self.accounts[0]
        key = os.getenv(env_var)
        if not key:
            raise MissingPrivateKeyError(
                f"{env_var} must be set to deploy on network '{self.name}'"
            )
        return key

    def explorer_link(self, address: str) -> Optional[str]:
        """Block explorer URL for an address, if the network has an explorer"""
        if not self.block_explorer_url:
            return None
        return f"{self.block_explorer_url.rstrip('/')}/address/{address}"

    @property
    def is_local_dev_chain(self) -> bool:
        return self.chain_id == LOCAL_DEV_CHAIN_ID


def _from_dict(name: str, data: Dict) -> NetworkConfig:
    try:
        return NetworkConfig(
            name=name,
            url=data['url'],
            chain_id=int(data['chain_id']),
            gas=data.get('gas'),
            gas_price=data.get('gas_price'),
            accounts=list(data.get('accounts', [])),
            block_explorer_url=data.get('block_explorer_url'),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration for network '{name}': {e}") from e


def load_networks(networks_file: Optional[Union[Path, str]] = None) -> Dict[str, NetworkConfig]:
    """
    Load the network table

    Built-in networks are overridden (by name) by entries from a JSON file
    shaped like ``{"<name>": {"url": ..., "chain_id": ..., ...}}``.

    Args:
        networks_file: JSON override file (defaults to $NETWORKS_FILE)

    Returns:
        Mapping of network name -> NetworkConfig
    """
    table = {name: dict(data) for name, data in NETWORKS.items()}

    if networks_file is None:
        networks_file = os.getenv('NETWORKS_FILE')

    if networks_file:
        path = Path(networks_file)
        if not path.exists():
            raise ConfigurationError(f"Networks file not found: {path}")

        with open(path, 'r') as f:
            try:
                overrides = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Networks file {path} is not valid JSON: {e}") from e

        if not isinstance(overrides, dict):
            raise ConfigurationError(f"Networks file {path} must contain a JSON object")

        for name, data in overrides.items():
            table[name] = {**table.get(name, {}), **data}

        logger.debug(f"Loaded {len(overrides)} network override(s) from {path}")

    return {name: _from_dict(name, data) for name, data in table.items()}


def get_network(name: Optional[str] = None, networks_file: Optional[Union[Path, str]] = None) -> NetworkConfig:
    """
    Get configuration for a named network

    Args:
        name: Network name (defaults to $DEPLOY_NETWORK, then 'hardhat-issuer')
        networks_file: Optional JSON override file

    Returns:
        NetworkConfig

    Raises:
        NetworkNotFoundError: If the network is not configured
    """
    if name is None:
        name = os.getenv('DEPLOY_NETWORK', DEFAULT_NETWORK)

    networks = load_networks(networks_file)
    if name not in networks:
        raise NetworkNotFoundError(
            f"Network '{name}' is not configured (known: {', '.join(sorted(networks))})"
        )
    return networks[name]
