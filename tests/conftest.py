import random

import pytest
from eth_account import Account
from web3 import AsyncWeb3


KEY_1 = "0x" + "11" * 32
KEY_2 = "0x" + "22" * 32
RECIPIENT_1 = "0x" + "ab" * 20
RECIPIENT_2 = "0x" + "cd" * 20


class FakeChain:
    """Чейн-клиент в памяти: балансы, цена газа и сценарий ошибок отправки."""

    def __init__(self, balance=AsyncWeb3.to_wei(100, 'ether'), gas_price=AsyncWeb3.to_wei(1, 'gwei'),
                 fail_submissions=0, revert_receipts=0):
        self.balance = balance
        self.network_gas_price = gas_price
        self.fail_submissions = fail_submissions
        self.revert_receipts = revert_receipts
        self.balance_queries = []
        self.submissions = []
        self.gas_price_error = None
        self.block_number = 1000

    @staticmethod
    def is_address(value):
        return AsyncWeb3.is_address(value)

    async def get_balance(self, address):
        self.balance_queries.append(address)
        return self.balance

    async def gas_price(self):
        if self.gas_price_error:
            raise self.gas_price_error
        return self.network_gas_price

    async def send_transfer(self, account, to_address, value, gas_price, gas_limit):
        self.submissions.append((account.address, to_address, value, gas_price, gas_limit))
        if len(self.submissions) <= self.fail_submissions:
            raise ConnectionError("replacement fee too low")
        return f"0x{len(self.submissions):064x}"

    async def wait_for_receipt(self, tx_hash):
        self.block_number += 1
        if self.revert_receipts:
            self.revert_receipts -= 1
            return {"status": 0, "blockNumber": self.block_number, "transactionHash": tx_hash}
        return {"status": 1, "blockNumber": self.block_number, "transactionHash": tx_hash}


class RecordingSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def wallets():
    return [Account.from_key(KEY_1), Account.from_key(KEY_2)]


@pytest.fixture
def recipients():
    return [RECIPIENT_1, RECIPIENT_2]


@pytest.fixture
def rng():
    return random.Random(42)
