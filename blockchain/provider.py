"""
Network Provider
Creates the Web3 connection used for a deployment
"""

from typing import Optional
from web3 import Web3
from loguru import logger

from .exceptions import ConfigurationError, TransactionSubmissionError


def connect(
    endpoint: str,
    request_timeout: float = 30,
    expected_chain_id: Optional[int] = None
) -> Web3:
    """
    Connect to an RPC endpoint

    Args:
        endpoint: HTTP(S) RPC URL
        request_timeout: Per-request timeout in seconds
        expected_chain_id: Chain id the endpoint must report (None = any)

    Returns:
        Connected Web3 instance
    """
    if not endpoint:
        raise ConfigurationError("Network endpoint is not configured")

    if not endpoint.startswith(('http://', 'https://')):
        raise ConfigurationError(f"Unsupported endpoint scheme: {endpoint}")

    w3 = Web3(Web3.HTTPProvider(endpoint, request_kwargs={'timeout': request_timeout}))

    if not w3.is_connected():
        raise TransactionSubmissionError(f"Network unreachable: {endpoint}")

    try:
        chain_id = w3.eth.chain_id
        block_number = w3.eth.block_number
    except Exception as e:
        raise TransactionSubmissionError(f"Error reading chain state from {endpoint}: {e}") from e

    if expected_chain_id is not None and chain_id != expected_chain_id:
        raise ConfigurationError(
            f"Network chain id {chain_id} does not match configured chain id {expected_chain_id}"
        )

    logger.info(f"Connected to {endpoint} (chain id {chain_id}, block {block_number})")
    return w3
