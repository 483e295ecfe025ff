"""
Deployment Configuration
Explicit configuration object built from config/deploy_config.json and .env
"""

import os
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import ConfigurationError

load_dotenv()

DEFAULT_CONFIG_PATH = "config/deploy_config.json"
DEFAULT_CONTRACT_NAME = "Casino2"


@dataclass
class DeployConfig:
    """Everything a deployment run needs, passed explicitly"""

    network_endpoint: str
    signer_credential: Optional[str] = None
    artifact_name: str = DEFAULT_CONTRACT_NAME
    constructor_args: List[Any] = field(default_factory=list)
    network_name: str = "localhost"
    chain_id: Optional[int] = None
    artifacts_dir: str = "artifacts"
    confirmation_timeout: float = 120
    poll_latency: float = 0.5
    request_timeout: float = 30
    gas_limit_buffer: float = 1.2
    default_gas_limit: int = 3000000
    max_gas_price_gwei: Optional[float] = None
    priority_fee_gwei: Optional[float] = None

    def __repr__(self) -> str:
        # Keep the signer credential out of logs and tracebacks
        signer = "<set>" if self.signer_credential else None
        return (
            f"DeployConfig(network_name={self.network_name!r}, "
            f"network_endpoint={self.network_endpoint!r}, signer_credential={signer}, "
            f"artifact_name={self.artifact_name!r}, constructor_args={self.constructor_args!r})"
        )


def load_config(config_path: Optional[str] = None, network: Optional[str] = None) -> DeployConfig:
    """
    Load deployment configuration

    Args:
        config_path: JSON config file (default: $DEPLOY_CONFIG_PATH or config/deploy_config.json)
        network: Network name (default: $DEPLOY_NETWORK or the file's default_network)

    Returns:
        DeployConfig
    """
    config_path = config_path or os.getenv('DEPLOY_CONFIG_PATH', DEFAULT_CONFIG_PATH)

    try:
        with open(config_path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {config_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

    network_name = network or os.getenv('DEPLOY_NETWORK') or config.get('default_network')
    networks = config.get('networks', {})

    if network_name not in networks:
        raise ConfigurationError(
            f"Unknown network {network_name!r} (configured: {', '.join(sorted(networks))})"
        )

    network_config = networks[network_name]
    contract_config = config.get('contract', {})

    # Per-network values override the shared deployment settings
    settings: Dict[str, Any] = dict(config.get('deployment', {}))
    settings.update(network_config.get('deployment', {}))

    endpoint = _resolve_endpoint(network_name, network_config)
    credential = os.getenv('DEPLOYER_PRIVATE_KEY') or os.getenv('DEPLOYER_MNEMONIC') or None

    constructor_args = contract_config.get('constructor_args', [])
    if not isinstance(constructor_args, list):
        raise ConfigurationError("contract.constructor_args must be a list")

    deploy_config = DeployConfig(
        network_endpoint=endpoint,
        signer_credential=credential,
        artifact_name=contract_config.get('name', DEFAULT_CONTRACT_NAME),
        constructor_args=constructor_args,
        network_name=network_name,
        chain_id=network_config.get('chain_id'),
        artifacts_dir=contract_config.get('artifacts_dir', 'artifacts'),
        **{
            key: settings[key]
            for key in (
                'confirmation_timeout',
                'poll_latency',
                'request_timeout',
                'gas_limit_buffer',
                'default_gas_limit',
                'max_gas_price_gwei',
                'priority_fee_gwei',
            )
            if settings.get(key) is not None
        }
    )

    logger.debug(f"Loaded {deploy_config!r}")
    return deploy_config


def _resolve_endpoint(network_name: str, network_config: Dict) -> str:
    """Environment variable wins over the URL in the config file"""
    url_env = network_config.get('url_env')
    endpoint = os.getenv(url_env) if url_env else None
    endpoint = endpoint or network_config.get('url')

    if not endpoint:
        hint = f" (set {url_env})" if url_env else ""
        raise ConfigurationError(f"No RPC endpoint configured for network {network_name!r}{hint}")

    return endpoint
