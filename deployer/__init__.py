"""
Deployer Package
Configuration and orchestration of one-shot contract deployments
"""

from .config import DeployConfig, load_config
from .deploy_runner import DeployRunner, DeployResult
from .logging_setup import configure_logging

__all__ = ['DeployConfig', 'load_config', 'DeployRunner', 'DeployResult', 'configure_logging']
