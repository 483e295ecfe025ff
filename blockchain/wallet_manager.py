"""
Wallet Manager
Holds the deployer signer: a local key, a mnemonic, or a node-managed account
"""

from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger

from .exceptions import ConfigurationError, TransactionSubmissionError


class WalletManager:
    """
    Manages the account that signs the deployment transaction

    - Private key / mnemonic: signed locally with eth-account
    - No credential: first account unlocked on the node (Hardhat local network)
    """

    def __init__(self, credential: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            credential: Hex private key, mnemonic phrase, or None
        """
        self.account = self._load_account(credential) if credential else None
        self.address = self.account.address if self.account else None

        if self.account:
            logger.info(f"Deployer wallet: {self.address}")

    @property
    def is_local(self) -> bool:
        """True when transactions are signed in-process"""
        return self.account is not None

    def _load_account(self, credential: str):
        """Create an eth-account LocalAccount from a key or mnemonic"""
        credential = credential.strip()

        try:
            if len(credential.split()) >= 12:
                Account.enable_unaudited_hdwallet_features()
                return Account.from_mnemonic(credential)

            return Account.from_key(credential)

        except Exception as e:
            # Never echo the credential itself
            raise ConfigurationError(f"Invalid signer credential: {type(e).__name__}") from e

    def bind(self, w3: Web3) -> str:
        """
        Resolve the deployer address against a connection

        Args:
            w3: Web3 instance

        Returns:
            Deployer address
        """
        if self.address:
            return self.address

        try:
            accounts = w3.eth.accounts
        except Exception as e:
            raise TransactionSubmissionError(f"Error listing node accounts: {e}") from e

        if not accounts:
            raise ConfigurationError(
                "No signer configured and the node manages no accounts "
                "(set DEPLOYER_PRIVATE_KEY or DEPLOYER_MNEMONIC)"
            )

        self.address = Web3.to_checksum_address(accounts[0])
        logger.info(f"Deployer wallet (node-managed): {self.address}")
        return self.address

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the local account

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if not self.is_local:
            raise ConfigurationError("Node-managed accounts cannot sign locally")

        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise TransactionSubmissionError(f"Error signing transaction: {e}") from e

    def get_balance(self, w3: Web3) -> int:
        """Get deployer balance in wei"""
        return w3.eth.get_balance(self.bind(w3))
