"""
Unit Tests for Network Provider
"""

import pytest
from unittest.mock import Mock, PropertyMock

import blockchain.provider as provider
from blockchain.provider import connect
from blockchain.exceptions import ConfigurationError, TransactionSubmissionError


class TestConnect:
    """Test RPC connection setup"""

    @pytest.fixture
    def web3_cls(self, w3, monkeypatch):
        web3_cls = Mock(return_value=w3)
        monkeypatch.setattr(provider, 'Web3', web3_cls)
        return web3_cls

    def test_connect(self, w3, web3_cls):
        w3.is_connected.return_value = True

        assert connect('http://127.0.0.1:8545', request_timeout=10, expected_chain_id=31337) is w3
        web3_cls.HTTPProvider.assert_called_once_with(
            'http://127.0.0.1:8545', request_kwargs={'timeout': 10}
        )

    def test_unreachable(self, w3, web3_cls):
        w3.is_connected.return_value = False

        with pytest.raises(TransactionSubmissionError, match='unreachable'):
            connect('http://127.0.0.1:8545')

    def test_chain_state_read_fails(self, w3, web3_cls):
        """Node dropping after the connection check is wrapped"""
        eth = Mock()
        eth.chain_id = 31337
        type(eth).block_number = PropertyMock(side_effect=ConnectionError("node went away"))
        w3.eth = eth
        w3.is_connected.return_value = True

        with pytest.raises(TransactionSubmissionError, match='node went away') as exc_info:
            connect('http://127.0.0.1:8545')

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_chain_id_mismatch(self, w3, web3_cls):
        w3.is_connected.return_value = True

        with pytest.raises(ConfigurationError, match='chain id'):
            connect('http://127.0.0.1:8545', expected_chain_id=137)

    def test_missing_endpoint(self):
        with pytest.raises(ConfigurationError):
            connect('')

    def test_unsupported_scheme(self):
        with pytest.raises(ConfigurationError, match='scheme'):
            connect('ws://127.0.0.1:8545')


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
