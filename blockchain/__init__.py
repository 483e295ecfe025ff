"""
Blockchain Interaction Package
Handles artifact loading, signing, and contract deployment
"""

from .artifacts import ArtifactResolver, ContractArtifact
from .contract_factory import ContractFactory, DeployedContract
from .provider import connect
from .wallet_manager import WalletManager
from .exceptions import (
    DeployError,
    ConfigurationError,
    ArtifactNotFoundError,
    TransactionSubmissionError,
    TransactionRevertedError,
    DeploymentTimeoutError,
    ContractNotDeployedError,
)

__all__ = [
    'ArtifactResolver',
    'ContractArtifact',
    'ContractFactory',
    'DeployedContract',
    'WalletManager',
    'connect',
    'DeployError',
    'ConfigurationError',
    'ArtifactNotFoundError',
    'TransactionSubmissionError',
    'TransactionRevertedError',
    'DeploymentTimeoutError',
    'ContractNotDeployedError',
]
