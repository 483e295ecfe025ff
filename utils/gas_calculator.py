"""
Gas Calculator
Gas limit estimation and fee parameters for contract deployment
"""

from typing import Dict, Optional
from web3 import Web3
from loguru import logger


class GasCalculator:
    """
    Calculates gas limit and fee parameters for a deployment transaction
    Uses EIP-1559 fees when the chain reports a base fee, legacy gasPrice otherwise
    """

    def __init__(
        self,
        w3: Web3,
        max_gas_price_gwei: Optional[float] = None,
        priority_fee_gwei: Optional[float] = None
    ):
        """
        Initialize Gas Calculator

        Args:
            w3: Web3 instance
            max_gas_price_gwei: Cap for gasPrice / maxFeePerGas (None = no cap)
            priority_fee_gwei: Priority fee (None = ask the node)
        """
        self.w3 = w3
        self.max_gas_price_gwei = max_gas_price_gwei
        self.priority_fee_gwei = priority_fee_gwei

    def estimate_gas_limit(
        self,
        constructor,
        tx_params: Dict,
        buffer: float = 1.2,
        default: int = 3000000
    ) -> int:
        """
        Estimate gas limit for a constructor call

        Args:
            constructor: web3 ContractConstructor
            tx_params: Transaction params used for estimation ('from', 'value')
            buffer: Multiplier applied to the estimate
            default: Gas limit used when estimation fails

        Returns:
            Gas limit
        """
        try:
            gas_estimate = constructor.estimate_gas(tx_params)
            gas_limit = int(gas_estimate * buffer)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            gas_limit = default

        logger.info(f"Gas limit: {gas_limit}")
        return gas_limit

    def get_fee_params(self) -> Dict[str, int]:
        """
        Get fee parameters for the next transaction

        Returns:
            {'maxFeePerGas', 'maxPriorityFeePerGas'} or {'gasPrice'} in wei
        """
        latest_block = self.w3.eth.get_block('latest')
        base_fee_wei = latest_block.get('baseFeePerGas')

        if base_fee_wei is None:
            gas_price_wei = self._cap(int(self.w3.eth.gas_price))
            logger.info(f"Gas price: {self.w3.from_wei(gas_price_wei, 'gwei')} gwei")
            return {'gasPrice': gas_price_wei}

        if self.priority_fee_gwei is not None:
            priority_fee_wei = int(self.w3.to_wei(self.priority_fee_gwei, 'gwei'))
        else:
            priority_fee_wei = int(self.w3.eth.max_priority_fee)

        # Max fee = base fee * 2 + priority fee (buffer for fluctuations)
        max_fee_wei = self._cap(base_fee_wei * 2 + priority_fee_wei)
        priority_fee_wei = min(priority_fee_wei, max_fee_wei)

        logger.info(
            f"Max fee: {self.w3.from_wei(max_fee_wei, 'gwei')} gwei, "
            f"priority fee: {self.w3.from_wei(priority_fee_wei, 'gwei')} gwei"
        )

        return {
            'maxFeePerGas': max_fee_wei,
            'maxPriorityFeePerGas': priority_fee_wei
        }

    def _cap(self, fee_wei: int) -> int:
        """Apply the configured price cap"""
        if self.max_gas_price_gwei is None:
            return fee_wei

        max_allowed_wei = int(self.w3.to_wei(self.max_gas_price_gwei, 'gwei'))
        return min(fee_wei, max_allowed_wei)

    @staticmethod
    def max_fee_per_gas(fee_params: Dict[str, int]) -> int:
        """Highest per-gas price the transaction may pay"""
        return fee_params.get('maxFeePerGas', fee_params.get('gasPrice', 0))

    def estimate_cost_wei(self, gas_limit: int, fee_params: Dict[str, int]) -> int:
        """Worst-case deployment cost in wei"""
        return gas_limit * self.max_fee_per_gas(fee_params)
