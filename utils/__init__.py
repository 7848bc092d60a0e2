"""
Utilities Package
RPC connection and logging helpers for the deployment tools
"""

from .rpc_manager import RPCManager
from .logging_setup import configure_logging

__all__ = [
    'RPCManager',
    'configure_logging'
]
