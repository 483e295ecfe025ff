"""
Unit Tests for Wallet Manager
"""

import pytest

from blockchain.wallet_manager import WalletManager
from blockchain.exceptions import ConfigurationError
from conftest import HARDHAT_ADDRESS, HARDHAT_KEY, HARDHAT_MNEMONIC


class TestWalletManager:
    """Test signer credential handling"""

    def test_private_key(self):
        wallet = WalletManager(HARDHAT_KEY)

        assert wallet.is_local
        assert wallet.address == HARDHAT_ADDRESS

    def test_mnemonic(self):
        """Mnemonic derives the first account of the default path"""
        wallet = WalletManager(HARDHAT_MNEMONIC)

        assert wallet.is_local
        assert wallet.address == HARDHAT_ADDRESS

    def test_invalid_credential_not_echoed(self):
        with pytest.raises(ConfigurationError) as exc_info:
            WalletManager('0x1234-not-a-key')

        assert '0x1234-not-a-key' not in str(exc_info.value)

    def test_node_managed_bind(self, w3):
        wallet = WalletManager()

        assert not wallet.is_local
        assert wallet.address is None
        assert wallet.bind(w3) == HARDHAT_ADDRESS

    def test_node_without_accounts(self, w3):
        w3.eth.accounts = []

        with pytest.raises(ConfigurationError, match='DEPLOYER_PRIVATE_KEY'):
            WalletManager().bind(w3)

    def test_node_managed_cannot_sign(self):
        with pytest.raises(ConfigurationError):
            WalletManager().sign_transaction({})

    def test_get_balance(self, w3):
        assert WalletManager(HARDHAT_KEY).get_balance(w3) == 10000 * 10**18
        w3.eth.get_balance.assert_called_once_with(HARDHAT_ADDRESS)


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
