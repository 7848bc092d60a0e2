"""
Command Line Entry Points
deploy-contracts, deploy-identity, show-addresses and faucet
"""

import os
import argparse
from typing import List, Optional

from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from blockchain.contract_manager import ContractManager
from blockchain.transaction_builder import TransactionBuilder
from blockchain.wallet_manager import WalletManager
from utils.logging_setup import configure_logging
from utils.rpc_manager import RPCManager
from .address_map import format_address_lines, get_default_address_file, read_address_map
from .config import NetworkConfig, get_network
from .deployer import SequentialDeployer
from .exceptions import InvalidAddressError
from .plans import IDENTITY_PLAN, PLANS, get_plan

FAUCET_AMOUNT_WEI = Web3.to_wei(1, 'ether')


def build_contract_manager(network: NetworkConfig, artifacts_dir: Optional[str] = None) -> ContractManager:
    """
    Connect to the network and bind the deployer account

    Args:
        network: Target network
        artifacts_dir: Hardhat artifacts root (defaults to $ARTIFACTS_DIR, then ./artifacts)

    Returns:
        ContractManager ready to send transactions
    """
    wallet = WalletManager.from_network(network)
    w3 = RPCManager(network).connect()

    return ContractManager(
        w3,
        wallet,
        TransactionBuilder(w3, network, wallet.address),
        artifacts_dir=artifacts_dir or os.getenv('ARTIFACTS_DIR', 'artifacts')
    )


def _add_network_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--network",
        default=None,
        help="Network to deploy to (default: $DEPLOY_NETWORK or hardhat-issuer)"
    )
    parser.add_argument(
        "--networks-file",
        default=None,
        help="JSON file overriding the built-in network table (default: $NETWORKS_FILE)"
    )


def _run_plan(plan_name: str, args) -> int:
    try:
        plan = get_plan(plan_name)
        network = get_network(args.network, args.networks_file)
        contract_manager = build_contract_manager(network, args.artifacts_dir)

        contract_manager.wallet.log_account(contract_manager.w3)

        SequentialDeployer(contract_manager, network).run(plan, args.output_dir)
        return 0

    except Exception as e:
        logger.exception(f"Deployment failed: {e}")
        return 1


def _deploy_parser(description: str, with_plan: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    _add_network_args(parser)
    if with_plan:
        parser.add_argument(
            "--plan",
            default="marketplace",
            choices=sorted(PLANS),
            help="Contract set to deploy"
        )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the address file (default: $ADDRESSES_DIR or ./addresses)"
    )
    parser.add_argument(
        "--artifacts-dir",
        default=None,
        help="Hardhat artifacts directory (default: $ARTIFACTS_DIR or ./artifacts)"
    )
    return parser


def deploy_main(argv: Optional[List[str]] = None) -> int:
    """Deploy a contract plan and write its address map"""
    load_dotenv()
    configure_logging()

    args = _deploy_parser("Deploy contracts and record their addresses", with_plan=True).parse_args(argv)
    return _run_plan(args.plan, args)


def deploy_identity_main(argv: Optional[List[str]] = None) -> int:
    """Deploy the standalone IDentity contract"""
    load_dotenv()
    configure_logging()

    args = _deploy_parser("Deploy the IDentity contract", with_plan=False).parse_args(argv)
    return _run_plan(IDENTITY_PLAN.name, args)


def show_addresses_main(argv: Optional[List[str]] = None) -> int:
    """Print every address recorded in an address map file"""
    load_dotenv()
    configure_logging()

    parser = argparse.ArgumentParser(description="Print deployed contract addresses")
    parser.add_argument(
        "address_file",
        nargs="?",
        default=None,
        help="Address map JSON (default: $ADDRESS_FILE or addresses/contractAddresses.json)"
    )
    args = parser.parse_args(argv)

    try:
        path = args.address_file or get_default_address_file()
        for line in format_address_lines(read_address_map(path)):
            print(line)
        return 0

    except Exception as e:
        logger.exception(f"Cannot read addresses: {e}")
        return 1


def faucet_main(argv: Optional[List[str]] = None) -> int:
    """Send 1 ETH of native currency to an address"""
    load_dotenv()
    configure_logging()

    parser = argparse.ArgumentParser(description="Sends ETH to an address")
    parser.add_argument("receiver", help="The address that will receive them")
    _add_network_args(parser)
    args = parser.parse_args(argv)

    try:
        if not Web3.is_address(args.receiver):
            raise InvalidAddressError(f"Invalid receiver address: {args.receiver}")

        network = get_network(args.network, args.networks_file)
        if network.is_local_dev_chain:
            logger.warning(
                f"Network '{network.name}' is a local development chain; "
                "balances are lost whenever the node restarts"
            )

        contract_manager = build_contract_manager(network)
        receipt = contract_manager.transfer(args.receiver, FAUCET_AMOUNT_WEI)

        logger.info(f"Receipt: {dict(receipt)}")
        logger.success(f"Transferred 1 ETH to {args.receiver}")
        return 0

    except Exception as e:
        logger.exception(f"Faucet failed: {e}")
        return 1
