"""
Utilities Package
Gas estimation helpers
"""

from .gas_calculator import GasCalculator

__all__ = ['GasCalculator']
