"""
Contract Factory
Builds, signs and submits contract-creation transactions for one artifact
"""

import asyncio
from typing import Dict, Optional
from web3 import Web3
from web3.exceptions import TimeExhausted
from loguru import logger

from utils.gas_calculator import GasCalculator
from .artifacts import ContractArtifact
from .wallet_manager import WalletManager
from .exceptions import (
    ConfigurationError,
    ContractNotDeployedError,
    DeploymentTimeoutError,
    TransactionRevertedError,
    TransactionSubmissionError,
)


class DeployedContract:
    """
    Handle for a submitted contract deployment

    The address is only available once deployed() has confirmed the
    creation transaction.
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        tx_hash: bytes,
        deployer: str,
        nonce: Optional[int] = None
    ):
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash
        self.deployer = deployer
        self.nonce = nonce
        self.receipt = None

    @property
    def contract_name(self) -> str:
        return self.artifact.contract_name

    @property
    def tx_hash_hex(self) -> str:
        return Web3.to_hex(self.tx_hash)

    @property
    def address(self) -> str:
        if self.receipt is None:
            raise ContractNotDeployedError(
                f"{self.contract_name} deployment {self.tx_hash_hex} is not confirmed yet"
            )
        return self.receipt['contractAddress']

    async def deployed(self, timeout: float = 120, poll_latency: float = 0.5) -> 'DeployedContract':
        """
        Wait until the deployment transaction is mined

        Args:
            timeout: Seconds to wait for the receipt
            poll_latency: Seconds between receipt polls

        Returns:
            self, with receipt and address populated
        """
        if self.receipt is not None:
            return self

        logger.info(f"Waiting for confirmation of {self.tx_hash_hex}...")

        try:
            receipt = await asyncio.get_event_loop().run_in_executor(
                None,
                lambda: self.w3.eth.wait_for_transaction_receipt(
                    self.tx_hash,
                    timeout=timeout,
                    poll_latency=poll_latency
                )
            )
        except TimeExhausted as e:
            # The transaction may still be mined after we give up
            raise DeploymentTimeoutError(
                f"{self.contract_name} deployment {self.tx_hash_hex} not confirmed "
                f"after {timeout}s; check the chain before redeploying",
                tx_hash=self.tx_hash_hex
            ) from e
        except Exception as e:
            # Already submitted, so keep the hash for reconciling chain state
            raise DeploymentTimeoutError(
                f"{self.contract_name} deployment {self.tx_hash_hex} could not be confirmed: "
                f"{e}; check the chain before redeploying",
                tx_hash=self.tx_hash_hex
            ) from e

        if receipt['status'] != 1 or not receipt.get('contractAddress'):
            raise TransactionRevertedError(
                f"{self.contract_name} deployment {self.tx_hash_hex} reverted "
                f"in block {receipt.get('blockNumber')}"
            )

        self.receipt = receipt

        logger.success(f"{self.contract_name} deployed at {receipt['contractAddress']}")
        logger.info(f"Transaction hash: {self.tx_hash_hex}")
        logger.info(f"Gas used: {receipt['gasUsed']}")

        return self

    def contract(self):
        """Bound web3 contract instance for the confirmed deployment"""
        return self.w3.eth.contract(address=self.address, abi=self.artifact.abi)


class ContractFactory:
    """
    Deploys instances of one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        wallet_manager: WalletManager,
        gas_calculator: Optional[GasCalculator] = None,
        chain_id: Optional[int] = None,
        gas_limit_buffer: float = 1.2,
        default_gas_limit: int = 3000000
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled contract artifact
            wallet_manager: Signer for the deployment
            gas_calculator: Gas estimation helper
            chain_id: Chain id for signed transactions (None = ask the node)
            gas_limit_buffer: Multiplier applied to the gas estimate
            default_gas_limit: Gas limit used when estimation fails
        """
        self.w3 = w3
        self.artifact = artifact
        self.wallet_manager = wallet_manager
        self.gas_calculator = gas_calculator or GasCalculator(w3)
        self.chain_id = chain_id
        self.gas_limit_buffer = gas_limit_buffer
        self.default_gas_limit = default_gas_limit

        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    async def deploy(self, *args) -> DeployedContract:
        """
        Submit a deployment transaction

        Args:
            *args: Constructor arguments

        Returns:
            Pending DeployedContract handle
        """
        self._check_arguments(args)

        deployer = self.wallet_manager.bind(self.w3)
        constructor = self.contract.constructor(*args)

        logger.info(f"Deploying {self.artifact.contract_name} from {deployer}...")

        gas_limit = self.gas_calculator.estimate_gas_limit(
            constructor,
            {'from': deployer},
            buffer=self.gas_limit_buffer,
            default=self.default_gas_limit
        )

        send = self._send_signed if self.wallet_manager.is_local else self._send_unlocked
        tx_hash, nonce = await asyncio.get_event_loop().run_in_executor(
            None,
            send,
            constructor,
            deployer,
            gas_limit
        )

        logger.info(f"Transaction sent: {Web3.to_hex(tx_hash)}")

        return DeployedContract(self.w3, self.artifact, tx_hash, deployer, nonce)

    def _check_arguments(self, args: tuple):
        """Match argument count against the constructor ABI"""
        expected = len(self.artifact.constructor_inputs)

        if len(args) != expected:
            raise ConfigurationError(
                f"{self.artifact.contract_name} constructor expects {expected} "
                f"argument(s), got {len(args)}"
            )

    def _send_signed(self, constructor, deployer: str, gas_limit: int):
        """Build, sign locally and send as raw transaction"""
        try:
            nonce = self.w3.eth.get_transaction_count(deployer, 'pending')
            fee_params = self.gas_calculator.get_fee_params()
            chain_id = self.chain_id if self.chain_id is not None else self.w3.eth.chain_id

            # Check balance
            balance = self.wallet_manager.get_balance(self.w3)
        except Exception as e:
            raise TransactionSubmissionError(f"Error preparing deployment transaction: {e}") from e

        deployment_cost = self.gas_calculator.estimate_cost_wei(gas_limit, fee_params)
        logger.info(f"Estimated deployment cost: {self.w3.from_wei(deployment_cost, 'ether')} ETH")

        if balance < deployment_cost:
            raise TransactionSubmissionError(
                f"Insufficient funds for deployment: balance {balance} wei, "
                f"need up to {deployment_cost} wei"
            )

        tx_params: Dict = {
            'from': deployer,
            'nonce': nonce,
            'gas': gas_limit,
            'chainId': chain_id,
            **fee_params
        }

        try:
            transaction = constructor.build_transaction(tx_params)
        except Exception as e:
            raise TransactionSubmissionError(f"Error building deployment transaction: {e}") from e

        signed_tx = self.wallet_manager.sign_transaction(transaction)

        try:
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except Exception as e:
            raise TransactionSubmissionError(f"Deployment transaction rejected: {e}") from e

        return tx_hash, nonce

    def _send_unlocked(self, constructor, deployer: str, gas_limit: int):
        """Let the node sign with its own account (eth_sendTransaction)"""
        try:
            tx_hash = constructor.transact({'from': deployer, 'gas': gas_limit})
        except Exception as e:
            raise TransactionSubmissionError(f"Deployment transaction rejected: {e}") from e

        return tx_hash, None
