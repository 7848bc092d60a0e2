"""
RPC Manager
Connects a Web3 client to the configured network endpoint
"""

from web3 import Web3
from loguru import logger

from deployment.config import NetworkConfig
from deployment.exceptions import ChainIdMismatchError, RPCConnectionError

# Seconds per HTTP request to the node
REQUEST_TIMEOUT = 60


class RPCManager:
    """
    Single-endpoint RPC connection for one network

    No fallback tiers: deployment runs against exactly one node and
    any connection problem aborts the run.
    """

    def __init__(self, network: NetworkConfig, request_timeout: int = REQUEST_TIMEOUT):
        """
        Initialize RPC Manager

        Args:
            network: Target network configuration
            request_timeout: HTTP request timeout in seconds
        """
        self.network = network
        self.request_timeout = request_timeout
        self.w3 = None

    def _create_web3(self, url: str) -> Web3:
        return Web3(Web3.HTTPProvider(url, request_kwargs={'timeout': self.request_timeout}))

    def connect(self) -> Web3:
        """
        Create and verify the Web3 client

        Returns:
            Connected Web3 instance

        Raises:
            RPCConnectionError: If the node does not answer
            ChainIdMismatchError: If the node is on another chain
        """
        if self.w3 is not None:
            return self.w3

        url = self.network.resolve_url()
        w3 = self._create_web3(url)

        if not w3.is_connected():
            raise RPCConnectionError(
                f"Failed to connect to network '{self.network.name}' at {url}"
            )

        chain_id = w3.eth.chain_id
        if chain_id != self.network.chain_id:
            raise ChainIdMismatchError(
                f"Network '{self.network.name}' expects chain ID {self.network.chain_id}, "
                f"but the node reports {chain_id}"
            )

        logger.success(f"Connected to {self.network.name} (chain ID {chain_id})")
        self.w3 = w3
        return w3

    def is_healthy(self) -> bool:
        """
        Check if the current connection is alive

        Returns:
            True if healthy
        """
        if self.w3 is None:
            return False
        try:
            return self.w3.is_connected()
        except Exception:
            return False
