"""
Shared fixtures: Hardhat-style artifacts on disk and a mocked Web3 connection
"""

import json
import pytest
from unittest.mock import Mock
from web3 import Web3


# Hardhat default account #0 (public test key)
HARDHAT_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
HARDHAT_MNEMONIC = 'test test test test test test test test test test test junk'
HARDHAT_ADDRESS = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'

FIRST_ADDRESS = '0x5FbDB2315678afecb367f032d93F642f64180aa3'
SECOND_ADDRESS = '0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512'
TX_HASH = bytes.fromhex('ab' * 32)
SECOND_TX_HASH = bytes.fromhex('cd' * 32)

# Init code that deploys a single STOP opcode
STOP_BYTECODE = '0x6001600c60003960016000f300'


def write_artifact(
    artifacts_dir,
    contract_name='Casino2',
    source_name=None,
    abi=None,
    bytecode=STOP_BYTECODE,
    link_references=None
):
    """Write a Hardhat artifact JSON file and return its path"""
    source_name = source_name or f'contracts/{contract_name}.sol'
    path = artifacts_dir / source_name / f'{contract_name}.json'
    path.parent.mkdir(parents=True, exist_ok=True)

    path.write_text(json.dumps({
        '_format': 'hh-sol-artifact-1',
        'contractName': contract_name,
        'sourceName': source_name,
        'abi': abi if abi is not None else [],
        'bytecode': bytecode,
        'deployedBytecode': '0x00',
        'linkReferences': link_references or {},
        'deployedLinkReferences': {}
    }))

    return path


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory containing a compiled Casino2"""
    directory = tmp_path / 'artifacts'
    write_artifact(directory)
    return directory


def make_receipt(address=FIRST_ADDRESS, status=1):
    return {
        'status': status,
        'contractAddress': address if status == 1 else None,
        'gasUsed': 53000,
        'blockNumber': 1
    }


@pytest.fixture
def w3():
    """Mock Web3 instance answering like a freshly started Hardhat node"""
    w3 = Mock()
    w3.to_wei = Web3.to_wei
    w3.from_wei = Web3.from_wei

    w3.eth.chain_id = 31337
    w3.eth.block_number = 0
    w3.eth.accounts = [HARDHAT_ADDRESS]
    w3.eth.gas_price = 2 * 10**9
    w3.eth.max_priority_fee = 10**9
    w3.eth.get_block.return_value = {'number': 0, 'baseFeePerGas': 10**9}
    w3.eth.get_transaction_count.return_value = 0
    w3.eth.get_balance.return_value = 10000 * 10**18

    constructor = w3.eth.contract.return_value.constructor.return_value
    constructor.estimate_gas.return_value = 60000
    constructor.build_transaction.side_effect = lambda params: dict(
        params, value=0, data=STOP_BYTECODE
    )
    constructor.transact.return_value = TX_HASH

    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = make_receipt()

    return w3


@pytest.fixture
def constructor(w3):
    """The constructor call object returned by the mocked contract class"""
    return w3.eth.contract.return_value.constructor.return_value
