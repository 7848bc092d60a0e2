"""
Wallet Manager
Holds the deployer account used to sign every transaction
"""

from typing import Dict
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger

from deployment.config import NetworkConfig


class WalletManager:
    """
    Single signing account for a deployment run
    """

    def __init__(self, private_key: str):
        """
        Initialize wallet manager

        Args:
            private_key: Hex private key of the deployer
        """
        self.account = Account.from_key(private_key)
        self.address = self.account.address

    @classmethod
    def from_network(cls, network: NetworkConfig) -> 'WalletManager':
        """Build the wallet from the network's first configured account"""
        return cls(network.private_key())

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        return self.account.sign_transaction(transaction)

    def get_balance(self, w3: Web3) -> Decimal:
        """
        Get deployer native balance

        Args:
            w3: Web3 instance

        Returns:
            Balance in ether
        """
        balance_wei = w3.eth.get_balance(self.address)
        return Decimal(str(w3.from_wei(balance_wei, 'ether')))

    def log_account(self, w3: Web3):
        """Log the deployer address and balance before a run"""
        logger.info(f"Deploying contracts with the account: {self.address}")
        logger.info(f"Account balance: {self.get_balance(w3)} ETH")
