"""
Blockchain Interaction Package
Handles artifacts, signing, transaction building, and nonce management
"""

from .artifacts import ContractArtifact, load_artifact
from .contract_manager import ContractManager, DeployedContract
from .transaction_builder import TransactionBuilder
from .nonce_manager import NonceManager
from .wallet_manager import WalletManager

__all__ = [
    'ContractArtifact',
    'load_artifact',
    'ContractManager',
    'DeployedContract',
    'TransactionBuilder',
    'NonceManager',
    'WalletManager'
]
