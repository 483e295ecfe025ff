"""
Deployment Exceptions
Error taxonomy shared by the artifact, network and deployment layers
"""


class DeployError(Exception):
    """Base class for every failure of a deployment run"""
    pass


class ConfigurationError(DeployError):
    """Missing or inconsistent configuration (endpoint, signer, chain id, constructor args)"""
    pass


class ArtifactNotFoundError(DeployError):
    """Compiled contract artifact could not be located or is not deployable"""
    pass


class TransactionSubmissionError(DeployError):
    """Deployment transaction could not be sent or was rejected by the network"""
    pass


class TransactionRevertedError(DeployError):
    """Deployment transaction was mined but reverted"""
    pass


class DeploymentTimeoutError(DeployError):
    """No receipt arrived before the confirmation timeout"""

    def __init__(self, message: str, tx_hash: str = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class ContractNotDeployedError(DeployError):
    """Contract handle was read before its deployment was confirmed"""
    pass
