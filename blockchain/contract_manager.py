"""
Contract Manager
Deploys contracts and sends setter calls, waiting for each receipt
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union
from web3 import Web3
from loguru import logger

from deployment.exceptions import TransactionFailedError
from .artifacts import load_artifact
from .nonce_manager import NonceManager
from .transaction_builder import TransactionBuilder
from .wallet_manager import WalletManager

RECEIPT_TIMEOUT = 300


@dataclass
class DeployedContract:
    """Result of a confirmed contract creation."""

    name: str
    address: str  # Checksummed address
    transaction_hash: str
    block_number: int
    gas_used: int


class ContractManager:
    """
    Sends deployer transactions one by one
    """

    def __init__(
        self,
        w3: Web3,
        wallet: WalletManager,
        tx_builder: TransactionBuilder,
        nonce_manager: Optional[NonceManager] = None,
        artifacts_dir: Union[Path, str] = "artifacts",
        receipt_timeout: int = RECEIPT_TIMEOUT
    ):
        """
        Initialize Contract Manager

        Args:
            w3: Web3 instance
            wallet: Deployer wallet for signing
            tx_builder: Transaction builder bound to the deployer
            nonce_manager: Nonce source (created from the wallet if omitted)
            artifacts_dir: Hardhat artifacts root
            receipt_timeout: Seconds to wait for each receipt
        """
        self.w3 = w3
        self.wallet = wallet
        self.tx_builder = tx_builder
        self.nonce_manager = nonce_manager or NonceManager(w3, wallet.address)
        self.artifacts_dir = artifacts_dir
        self.receipt_timeout = receipt_timeout

    @property
    def deployer_address(self) -> str:
        return self.wallet.address

    def _send(self, transaction: Dict, description: str):
        """
        Sign, send and wait for a transaction

        Args:
            transaction: Unsigned transaction dict
            description: Human readable label for logs and errors

        Returns:
            Transaction receipt

        Raises:
            TransactionFailedError: If the receipt status is not 1
        """
        signed_tx = self.wallet.sign_transaction(transaction)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"{description}: transaction sent {tx_hash_hex}")
        logger.debug("Waiting for confirmation...")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)

        if receipt['status'] != 1:
            raise TransactionFailedError(f"{description} reverted (transaction {tx_hash_hex})")

        logger.debug(f"{description}: confirmed in block {receipt['blockNumber']}, gas used {receipt['gasUsed']}")
        return receipt

    def deploy(self, contract_name: str, args: Sequence[Any] = ()) -> DeployedContract:
        """
        Deploy a contract from its compiled artifact

        Args:
            contract_name: Contract name
            args: Constructor arguments (already resolved)

        Returns:
            DeployedContract
        """
        artifact = load_artifact(contract_name, self.artifacts_dir)
        factory = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

        transaction = self.tx_builder.build_deploy_tx(
            factory, args, self.nonce_manager.get_nonce()
        )
        receipt = self._send(transaction, f"Deploy {contract_name}")

        contract_address = receipt['contractAddress']
        if not contract_address:
            raise TransactionFailedError(f"Deploy {contract_name}: receipt has no contract address")

        return DeployedContract(
            name=contract_name,
            address=Web3.to_checksum_address(contract_address),
            transaction_hash=Web3.to_hex(receipt['transactionHash']),
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed']
        )

    def call(self, address: str, signature: str, args: Sequence[Any] = ()):
        """
        Send a state-changing call and wait for it

        Args:
            address: Target contract
            signature: Function signature, e.g. "addFixedRateAddress(address)"
            args: Call arguments

        Returns:
            Transaction receipt
        """
        transaction = self.tx_builder.build_call_tx(
            address, signature, args, self.nonce_manager.get_nonce()
        )
        return self._send(transaction, f"{signature} on {address}")

    def transfer(self, to: str, value: int):
        """
        Send native currency and wait for it

        Args:
            to: Recipient address
            value: Amount in wei

        Returns:
            Transaction receipt
        """
        transaction = self.tx_builder.build_transfer_tx(
            to, value, self.nonce_manager.get_nonce()
        )
        return self._send(transaction, f"Transfer {value} wei to {to}")
