"""
Deployment Exceptions
Error types raised by the deployment tooling
"""


class DeploymentError(Exception):
    """Base exception for deployment tooling errors"""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when network configuration is incomplete or invalid"""

    pass


class NetworkNotFoundError(DeploymentError, ValueError):
    """Raised when requested network is not configured"""

    pass


class MissingPrivateKeyError(ConfigurationError):
    """Raised when the signing key environment variable is not set"""

    pass


class RPCConnectionError(DeploymentError, ConnectionError):
    """Raised when the RPC endpoint cannot be reached"""

    pass


class ChainIdMismatchError(DeploymentError):
    """Raised when the endpoint reports a different chain ID than configured"""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no compiled artifact exists for a contract"""

    pass


class InvalidArtifactError(DeploymentError, ValueError):
    """Raised when a compiled artifact is missing abi/bytecode or is ambiguous"""

    pass


class PlanError(DeploymentError, ValueError):
    """Raised when a deployment plan is inconsistent"""

    pass


class TransactionFailedError(DeploymentError):
    """Raised when a transaction is mined with a failed status"""

    pass


class AddressMapNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when the address map file does not exist"""

    pass


class InvalidAddressError(DeploymentError, ValueError):
    """Raised when a value is not a valid hex address"""

    pass
