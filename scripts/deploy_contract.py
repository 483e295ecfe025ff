"""
Smart Contract Deployment Script
Deploys Casino2 and prints its address
"""

import sys
import asyncio
from loguru import logger

from deployer.config import load_config
from deployer.deploy_runner import DeployRunner
from deployer.logging_setup import configure_logging


async def deploy_contract(config):
    """Deploy the configured contract"""
    runner = DeployRunner(config)
    return await runner.run()


def main() -> int:
    """
    Run one deployment

    Returns:
        Process exit code (0 = deployed and confirmed, 1 = any failure)
    """
    configure_logging()

    try:
        config = load_config()
        result = asyncio.run(deploy_contract(config))
        address = result.unwrap()

    except Exception as e:
        logger.opt(exception=True).debug("Deployment aborted")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{result.contract_name} deployed to: {address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
