from web3 import AsyncWeb3

from utils.web3_helper import get_async_web3


class ChainClient:
    """Тонкая обертка над AsyncWeb3: баланс, газ, отправка нативного токена, ожидание квитанции."""

    def __init__(self, web3: AsyncWeb3, receipt_timeout=None):
        self.web3 = web3
        self.receipt_timeout = receipt_timeout
        self._chain_id = None

    @classmethod
    def from_rpc(cls, provider_url, proxy=None, receipt_timeout=None):
        return cls(get_async_web3(provider_url, proxy), receipt_timeout)

    @staticmethod
    def is_address(value):
        return AsyncWeb3.is_address(value)

    async def get_balance(self, address):
        return await self.web3.eth.get_balance(address)

    async def gas_price(self):
        return await self.web3.eth.gas_price

    async def chain_id(self):
        if self._chain_id is None:
            self._chain_id = await self.web3.eth.chain_id
        return self._chain_id

    async def send_transfer(self, account, to_address, value, gas_price, gas_limit):
        nonce = await self.web3.eth.get_transaction_count(account.address, 'pending')

        tx = {
            "nonce": nonce,
            "to": AsyncWeb3.to_checksum_address(to_address),
            "value": value,
            "gas": gas_limit,
            "gasPrice": gas_price,
            "chainId": await self.chain_id(),
        }

        signed_tx = self.web3.eth.account.sign_transaction(tx, account.key)
        tx_hash = await self.web3.eth.send_raw_transaction(signed_tx.raw_transaction)
        return self.web3.to_hex(tx_hash)

    async def wait_for_receipt(self, tx_hash):
        return await self.web3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
