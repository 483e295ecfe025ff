"""
System Check Script
Verifies configuration, RPC connection, signer and artifact before deploying
"""

import sys
from loguru import logger

from blockchain.artifacts import ArtifactResolver
from blockchain.exceptions import DeployError
from blockchain.provider import connect
from blockchain.wallet_manager import WalletManager
from deployer.config import DeployConfig, load_config
from deployer.logging_setup import configure_logging

MIN_BALANCE_ETH = 0.01


def check_artifact(config: DeployConfig, w3=None) -> bool:
    """Check that the contract artifact is compiled and deployable"""
    logger.info(f"Checking artifact for {config.artifact_name}...")

    try:
        artifact = ArtifactResolver(config.artifacts_dir).resolve(config.artifact_name)
    except DeployError as e:
        logger.error(f"  ✗ {e}")
        return False

    expected = len(artifact.constructor_inputs)
    if expected != len(config.constructor_args):
        logger.error(
            f"  ✗ Constructor expects {expected} argument(s), "
            f"{len(config.constructor_args)} configured"
        )
        return False

    logger.success(f"  ✓ {artifact.fully_qualified_name} ({artifact.path})")
    return True


def check_rpc_connection(config: DeployConfig, w3=None) -> bool:
    """Check RPC endpoint connection"""
    logger.info(f"Checking RPC connection to {config.network_name}...")

    if w3 is None:
        return False

    logger.success(f"  ✓ Connected (chain id {w3.eth.chain_id}, block {w3.eth.block_number})")
    return True


def check_wallet_balance(config: DeployConfig, w3=None) -> bool:
    """Check deployer wallet balance"""
    logger.info("Checking deployer wallet...")

    if w3 is None:
        logger.warning("  No RPC connection - skipping balance check")
        return False

    try:
        wallet_manager = WalletManager(config.signer_credential)
        balance = w3.from_wei(wallet_manager.get_balance(w3), 'ether')
    except DeployError as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.info(f"  Deployer: {wallet_manager.address} ({balance:.4f} ETH)")

    if balance < MIN_BALANCE_ETH:
        logger.warning(f"  ⚠ Deployer balance low (need at least {MIN_BALANCE_ETH} ETH)")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def main():
    """Run all system checks"""
    configure_logging()

    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    try:
        config = load_config()
    except DeployError as e:
        logger.error(f"Configuration: {e}")
        return 1

    try:
        w3 = connect(config.network_endpoint, config.request_timeout, config.chain_id)
    except DeployError as e:
        logger.error(f"  ✗ {e}")
        w3 = None

    checks = [
        ("Contract Artifact", check_artifact),
        ("RPC Connection", check_rpc_connection),
        ("Wallet Balance", check_wallet_balance)
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func(config, w3)
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python scripts/deploy_contract.py")
        return 0
    else:
        logger.error("❌ Not ready - fix issues above")
        return 1


if __name__ == "__main__":
    sys.exit(main())
