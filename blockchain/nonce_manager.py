"""
Nonce Manager
Hands out consecutive nonces for the deployer account
"""

from typing import Optional
from web3 import Web3
from loguru import logger


class NonceManager:
    """
    Manages transaction nonces for the deployer wallet

    Transactions are sent one at a time and each is confirmed before the
    next one is built, so a local counter stays in step with the chain.
    """

    def __init__(self, w3: Web3, address: str):
        """
        Initialize Nonce Manager

        Args:
            w3: Web3 instance
            address: Sender address
        """
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.current_nonce: Optional[int] = None

    def _sync_nonce(self):
        """Sync nonce with blockchain (confirmed + pending)"""
        self.current_nonce = self.w3.eth.get_transaction_count(self.address, 'pending')
        logger.debug(f"Nonce synced: {self.current_nonce}")

    def get_nonce(self) -> int:
        """
        Get next available nonce

        Returns:
            Next nonce to use
        """
        if self.current_nonce is None:
            self._sync_nonce()

        nonce = self.current_nonce
        self.current_nonce += 1

        logger.debug(f"Allocated nonce: {nonce}")
        return nonce

    def reset_nonce(self):
        """Resync from the chain, e.g. after a transaction was never sent"""
        self._sync_nonce()
        logger.warning(f"Nonce reset to: {self.current_nonce}")
