"""
Deploy Runner
Resolves the contract factory, deploys one instance and awaits confirmation
"""

from dataclasses import dataclass
from typing import Optional
from web3 import Web3
from loguru import logger

from blockchain.artifacts import ArtifactResolver
from blockchain.contract_factory import ContractFactory
from blockchain.exceptions import DeployError
from blockchain.provider import connect
from blockchain.wallet_manager import WalletManager
from utils.gas_calculator import GasCalculator
from .config import DeployConfig


@dataclass(frozen=True)
class DeployResult:
    """Outcome of one deployment run: an address or the error that stopped it"""

    contract_name: str
    address: Optional[str] = None
    tx_hash: Optional[str] = None
    error: Optional[DeployError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the deployed address or raise the stored error"""
        if self.error is not None:
            raise self.error
        return self.address


class DeployRunner:
    """
    One-shot contract deployment

    Each run() makes exactly one deployment attempt; nothing is retried
    or deduplicated across runs.
    """

    def __init__(
        self,
        config: DeployConfig,
        w3: Optional[Web3] = None,
        resolver: Optional[ArtifactResolver] = None
    ):
        """
        Initialize Deploy Runner

        Args:
            config: Deployment configuration
            w3: Existing Web3 connection (None = connect lazily to config.network_endpoint)
            resolver: Artifact resolver (None = read config.artifacts_dir)
        """
        self.config = config
        self.w3 = w3
        self.resolver = resolver or ArtifactResolver(config.artifacts_dir)
        self.wallet_manager = None

    def _get_web3(self) -> Web3:
        if self.w3 is None:
            self.w3 = connect(
                self.config.network_endpoint,
                request_timeout=self.config.request_timeout,
                expected_chain_id=self.config.chain_id
            )
        return self.w3

    def _get_wallet_manager(self) -> WalletManager:
        if self.wallet_manager is None:
            self.wallet_manager = WalletManager(self.config.signer_credential)
        return self.wallet_manager

    async def get_contract_factory(self, name: Optional[str] = None) -> ContractFactory:
        """
        Get a contract factory for a compiled artifact

        Args:
            name: Contract name (None = config.artifact_name)

        Returns:
            ContractFactory
        """
        artifact = self.resolver.resolve(name or self.config.artifact_name)
        w3 = self._get_web3()

        gas_calculator = GasCalculator(
            w3,
            max_gas_price_gwei=self.config.max_gas_price_gwei,
            priority_fee_gwei=self.config.priority_fee_gwei
        )

        return ContractFactory(
            w3,
            artifact,
            self._get_wallet_manager(),
            gas_calculator=gas_calculator,
            chain_id=self.config.chain_id,
            gas_limit_buffer=self.config.gas_limit_buffer,
            default_gas_limit=self.config.default_gas_limit
        )

    async def run(self) -> DeployResult:
        """
        Deploy config.artifact_name and wait for confirmation

        Returns:
            DeployResult with the address, or with the error on failure
        """
        name = self.config.artifact_name
        contract = None

        logger.info(f"Starting deployment of {name} to {self.config.network_name}...")

        try:
            factory = await self.get_contract_factory(name)
            contract = await factory.deploy(*self.config.constructor_args)
            await contract.deployed(
                timeout=self.config.confirmation_timeout,
                poll_latency=self.config.poll_latency
            )

        except DeployError as e:
            logger.error(f"Deployment of {name} failed: {e}")
            return DeployResult(
                contract_name=name,
                tx_hash=contract.tx_hash_hex if contract else None,
                error=e
            )

        return DeployResult(
            contract_name=name,
            address=contract.address,
            tx_hash=contract.tx_hash_hex
        )
