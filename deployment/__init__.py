"""
Deployment Package
Deployment plans, the sequential deployer, and address map files
"""

from .address_map import read_address_map, write_address_map
from .config import NetworkConfig, get_network, load_networks
from .exceptions import (
    AddressMapNotFoundError,
    ArtifactNotFoundError,
    ChainIdMismatchError,
    ConfigurationError,
    DeploymentError,
    InvalidAddressError,
    InvalidArtifactError,
    MissingPrivateKeyError,
    NetworkNotFoundError,
    PlanError,
    RPCConnectionError,
    TransactionFailedError,
)
from .plans import DEPLOYER, IDENTITY_PLAN, MARKETPLACE_PLAN, AddressOf, ContractStep, DeploymentPlan, WiringCall

__all__ = [
    'read_address_map',
    'write_address_map',
    'NetworkConfig',
    'get_network',
    'load_networks',
    'DEPLOYER',
    'IDENTITY_PLAN',
    'MARKETPLACE_PLAN',
    'AddressOf',
    'ContractStep',
    'DeploymentPlan',
    'WiringCall',
    'DeploymentError',
    'ConfigurationError',
    'NetworkNotFoundError',
    'MissingPrivateKeyError',
    'RPCConnectionError',
    'ChainIdMismatchError',
    'ArtifactNotFoundError',
    'InvalidArtifactError',
    'PlanError',
    'TransactionFailedError',
    'AddressMapNotFoundError',
    'InvalidAddressError',
]
