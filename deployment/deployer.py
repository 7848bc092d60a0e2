"""
Sequential Deployer
Runs a deployment plan: deploy in order, wire, then persist addresses
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from blockchain.contract_manager import ContractManager, DeployedContract
from .address_map import get_addresses_dir, save_address_map
from .config import NetworkConfig
from .plans import DeploymentPlan, resolve_args


class SequentialDeployer:
    """
    Deploys one plan's contracts strictly in order

    Nothing is written to disk until every contract is deployed and every
    wiring call is confirmed; any exception aborts the run.
    """

    def __init__(self, contract_manager: ContractManager, network: NetworkConfig):
        """
        Initialize deployer

        Args:
            contract_manager: Sends and confirms deployer transactions
            network: Target network (used for explorer links)
        """
        self.contract_manager = contract_manager
        self.network = network
        self.deployed: List[DeployedContract] = []

    def deploy(self, plan: DeploymentPlan) -> Dict[str, str]:
        """
        Deploy every contract of a plan and run its wiring calls

        Args:
            plan: Deployment plan

        Returns:
            Contract name -> checksummed address, in plan order
        """
        plan.validate()

        deployer_address = self.contract_manager.deployer_address
        addresses: Dict[str, str] = {}
        self.deployed = []

        logger.info(f"Deploying plan '{plan.name}' ({len(plan.steps)} contracts) to {self.network.name}")

        for step in plan.steps:
            args = resolve_args(step.args, addresses, deployer_address)
            deployed = self.contract_manager.deploy(step.name, args)

            addresses[step.name] = deployed.address
            self.deployed.append(deployed)

            logger.info(f"{step.name} address: {deployed.address}")
            link = self.network.explorer_link(deployed.address)
            if link:
                logger.debug(f"{step.name} on explorer: {link}")

        for call in plan.wiring:
            args = resolve_args(call.args, addresses, deployer_address)
            logger.info(f"Calling {call.target}.{call.signature}")
            self.contract_manager.call(addresses[call.target], call.signature, args)

        logger.success(f"Plan '{plan.name}' deployed: {len(addresses)} contracts")
        return addresses

    def run(self, plan: DeploymentPlan, output_dir: Optional[Union[Path, str]] = None) -> Dict[str, str]:
        """
        Deploy a plan and write its address map

        Args:
            plan: Deployment plan
            output_dir: Directory for the address file (defaults to $ADDRESSES_DIR)

        Returns:
            Contract name -> address
        """
        addresses = self.deploy(plan)

        output_path = get_addresses_dir(output_dir) / plan.output_file
        save_address_map(addresses, output_path, plan.section)

        return addresses
