"""
Transaction Builder
Constructs contract-creation, setter-call, and transfer transactions
"""

from typing import Any, Callable, Dict, List, Sequence
from web3 import Web3
from eth_abi import encode
from loguru import logger

from deployment.config import NetworkConfig

# Used when the node cannot estimate a deployment
DEFAULT_GAS_LIMIT = 3000000
GAS_BUFFER = 1.2
# Plain transfer cost, used when a transfer cannot be estimated
TRANSFER_GAS = 21000


def parse_signature(signature: str) -> tuple[str, List[str]]:
    """
    Split a function signature into name and parameter types

    Args:
        signature: e.g. "addFactoryAddress(address)"

    Returns:
        Tuple of (function name, list of ABI types)
    """
    signature = signature.replace(' ', '')
    if '(' not in signature or not signature.endswith(')'):
        raise ValueError(f"Invalid function signature: {signature}")

    name, params = signature[:-1].split('(', 1)
    if not name:
        raise ValueError(f"Invalid function signature: {signature}")
    if '(' in params:
        raise ValueError(f"Tuple parameters are not supported: {signature}")

    types = [t for t in params.split(',') if t]
    return name, types


def encode_call(signature: str, args: Sequence[Any]) -> bytes:
    """
    Encode calldata for a function call

    Args:
        signature: Canonical function signature
        args: Call arguments (addresses are checksummed)

    Returns:
        4-byte selector followed by ABI-encoded arguments
    """
    _, types = parse_signature(signature)
    if len(types) != len(args):
        raise ValueError(
            f"{signature} takes {len(types)} argument(s), got {len(args)}"
        )

    values = [
        Web3.to_checksum_address(arg) if abi_type == 'address' else arg
        for abi_type, arg in zip(types, args)
    ]

    selector = Web3.keccak(text=signature.replace(' ', ''))[:4]
    return bytes(selector) + encode(types, values)


class TransactionBuilder:
    """
    Builds transactions for the deployer account
    """

    def __init__(self, w3: Web3, network: NetworkConfig, sender: str):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            network: Network configuration (fixed gas settings, chain ID)
            sender: Deployer address
        """
        self.w3 = w3
        self.network = network
        self.sender = Web3.to_checksum_address(sender)

    def gas_price(self) -> int:
        """Configured gas price, else the node's current price"""
        if self.network.gas_price is not None:
            return self.network.gas_price
        return self.w3.eth.gas_price

    def gas_limit(self, estimate: Callable[[], int], default: int = DEFAULT_GAS_LIMIT) -> int:
        """
        Configured gas limit, else the node's estimate plus 20%

        Args:
            estimate: Callable returning the node's gas estimate
            default: Limit used when estimation fails
        """
        if self.network.gas is not None:
            return self.network.gas

        try:
            return int(estimate() * GAS_BUFFER)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            return default

    def _base_params(self, nonce: int) -> Dict:
        return {
            'from': self.sender,
            'nonce': nonce,
            'gasPrice': self.gas_price(),
            'chainId': self.network.chain_id
        }

    def build_deploy_tx(self, contract, args: Sequence[Any], nonce: int) -> Dict:
        """
        Build contract creation transaction

        Args:
            contract: Web3 contract factory (abi + bytecode)
            args: Constructor arguments
            nonce: Sender nonce

        Returns:
            Transaction dict
        """
        constructor = contract.constructor(*args)
        params = self._base_params(nonce)
        params['gas'] = self.gas_limit(
            lambda: constructor.estimate_gas({'from': self.sender})
        )
        return constructor.build_transaction(params)

    def build_call_tx(self, to: str, signature: str, args: Sequence[Any], nonce: int) -> Dict:
        """
        Build a state-changing function call

        Args:
            to: Target contract address
            signature: Function signature, e.g. "addFactoryAddress(address)"
            args: Call arguments
            nonce: Sender nonce

        Returns:
            Transaction dict
        """
        to = Web3.to_checksum_address(to)
        data = Web3.to_hex(encode_call(signature, args))

        tx = self._base_params(nonce)
        tx.update({'to': to, 'value': 0, 'data': data})
        tx['gas'] = self.gas_limit(
            lambda: self.w3.eth.estimate_gas({'from': self.sender, 'to': to, 'data': data})
        )
        return tx

    def build_transfer_tx(self, to: str, value: int, nonce: int) -> Dict:
        """
        Build native currency transfer

        Args:
            to: Recipient address
            value: Amount in wei
            nonce: Sender nonce

        Returns:
            Transaction dict
        """
        to = Web3.to_checksum_address(to)

        tx = self._base_params(nonce)
        tx.update({'to': to, 'value': value})
        tx['gas'] = self.gas_limit(
            lambda: self.w3.eth.estimate_gas({'from': self.sender, 'to': to, 'value': value}),
            default=TRANSFER_GAS
        )
        return tx
