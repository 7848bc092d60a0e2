"""Shared pytest fixtures for deployment tests."""

import json
from pathlib import Path
from typing import List, Optional
from unittest.mock import Mock

import pytest
from web3 import Web3

from blockchain.contract_manager import DeployedContract
from deployment.config import NetworkConfig
from deployment.exceptions import TransactionFailedError
from deployment.plans import IDENTITY_PLAN, MARKETPLACE_PLAN

# First Hardhat development account
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

RECEIVER_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"


class FakeContractManager:
    """Stands in for ContractManager: hands out sequential addresses, no RPC."""

    def __init__(self, deployer_address: str = DEV_ADDRESS, fail_on: Optional[str] = None):
        self.deployer_address = deployer_address
        self.fail_on = fail_on
        self.deployments: List[tuple] = []
        self.calls: List[tuple] = []
        self.transfers: List[tuple] = []
        self.w3 = Mock()
        self.wallet = Mock()

    def deploy(self, contract_name, args=()):
        if contract_name == self.fail_on:
            raise TransactionFailedError(f"Deploy {contract_name} reverted")

        self.deployments.append((contract_name, list(args)))
        address = Web3.to_checksum_address("0x" + f"{len(self.deployments):040x}")
        return DeployedContract(
            name=contract_name,
            address=address,
            transaction_hash="0x" + "ab" * 32,
            block_number=len(self.deployments),
            gas_used=100000,
        )

    def call(self, address, signature, args=()):
        if signature == self.fail_on:
            raise TransactionFailedError(f"{signature} reverted")

        self.calls.append((address, signature, list(args)))
        return {"status": 1}

    def transfer(self, to, value):
        self.transfers.append((to, value))
        return {"status": 1, "to": to}


@pytest.fixture
def fake_manager() -> FakeContractManager:
    """Contract manager that succeeds for every transaction."""
    return FakeContractManager()


@pytest.fixture
def fake_manager_factory():
    """Build fake contract managers with custom failure points."""
    return FakeContractManager


@pytest.fixture
def local_network() -> NetworkConfig:
    """Local development network with fixed gas settings."""
    return NetworkConfig(
        name="hardhat-issuer",
        url="http://127.0.0.1:8545/",
        chain_id=31337,
        gas=2100000,
        gas_price=8000000000,
        accounts=["PRIVATE_KEY_ISSUER"],
    )


@pytest.fixture
def auto_gas_network() -> NetworkConfig:
    """Network without fixed gas settings."""
    return NetworkConfig(
        name="sepolia",
        url="https://sepolia.infura.io/v3/{INFURA_API_KEY}",
        chain_id=11155111,
        accounts=["PRIVATE_KEY_ISSUER"],
        block_explorer_url="https://sepolia.etherscan.io",
    )


def write_artifact(root: Path, name: str, bytecode: str = "0x6080604052348015600f57600080fd5b50") -> Path:
    """Write a Hardhat-style artifact (plus its .dbg.json) under root/contracts."""
    source_dir = root / "contracts" / f"{name}.sol"
    source_dir.mkdir(parents=True, exist_ok=True)

    artifact_path = source_dir / f"{name}.json"
    with open(artifact_path, "w") as f:
        json.dump(
            {
                "_format": "hh-sol-artifact-1",
                "contractName": name,
                "sourceName": f"contracts/{name}.sol",
                "abi": [{"inputs": [], "stateMutability": "nonpayable", "type": "constructor"}],
                "bytecode": bytecode,
                "deployedBytecode": bytecode,
            },
            f,
        )
    with open(source_dir / f"{name}.dbg.json", "w") as f:
        json.dump({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/x.json"}, f)

    return artifact_path


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Artifacts directory holding every contract of the built-in plans."""
    root = tmp_path / "artifacts"
    for name in MARKETPLACE_PLAN.contract_names + IDENTITY_PLAN.contract_names:
        write_artifact(root, name)
    return root


@pytest.fixture
def clean_env(monkeypatch):
    """Remove deployment-related environment variables."""
    for var in [
        "PRIVATE_KEY",
        "PRIVATE_KEY_ISSUER",
        "INFURA_API_KEY",
        "DEPLOY_NETWORK",
        "NETWORKS_FILE",
        "ADDRESS_FILE",
        "ADDRESSES_DIR",
        "ARTIFACTS_DIR",
    ]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def artifact_writer():
    """Function writing a single artifact: (root, name, bytecode=...) -> path."""
    return write_artifact


@pytest.fixture
def dev_account() -> tuple:
    """(private key, address) of the first Hardhat development account."""
    return DEV_PRIVATE_KEY, DEV_ADDRESS


@pytest.fixture
def receiver_address() -> str:
    return RECEIVER_ADDRESS
