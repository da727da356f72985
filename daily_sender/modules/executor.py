import random
from dataclasses import dataclass
from enum import Enum

from loguru import logger
from web3 import AsyncWeb3

from daily_sender.modules.errors import RetriesExhausted, TransactionReverted
from daily_sender.modules.fee import estimated_fee
from daily_sender.modules.run_state import Outcome
from daily_sender.modules.selector import pick_amount, pick_recipient, pick_wallet


class AttemptState(Enum):
    SELECTING = "selecting"
    CHECKING_BALANCE = "checking_balance"
    SUBMITTING = "submitting"
    CONFIRMING = "confirming"
    RETRYING = "retrying"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class TransactionAttempt:
    wallet: object = None
    recipient: str = None
    amount: int = 0
    gas_price: int = 0
    gas_limit: int = 21000
    state: AttemptState = AttemptState.SELECTING
    submissions: int = 0
    tx_hash: str = None
    block_number: int = None


class TransferExecutor:
    """Одна попытка перевода: выбор, проверка баланса, отправка, подтверждение, повторы."""

    def __init__(self, client, fee_strategy, retry_policy, amount_range, amount_decimals=2,
                 gas_limit=21000, symbol="ETH", rng=random):
        self.client = client
        self.fee_strategy = fee_strategy
        self.retry_policy = retry_policy
        self.amount_range = amount_range
        self.amount_decimals = amount_decimals
        self.gas_limit = gas_limit
        self.symbol = symbol
        self.rng = rng

    async def execute(self, wallets, recipients, state):
        attempt = TransactionAttempt(gas_limit=self.gas_limit)
        outcome = await self._run(attempt, wallets, recipients)
        state.record(outcome, attempt.amount)
        return attempt, outcome

    async def _run(self, attempt, wallets, recipients):
        recipient = pick_recipient(recipients, self.rng)
        if recipient is None or not self.client.is_address(recipient):
            if recipient is not None:
                logger.error(f"Невалидный адрес получателя: {recipient}")
            attempt.state = AttemptState.SKIPPED
            return Outcome.SKIPPED

        wallet = pick_wallet(wallets, self.rng)
        if wallet is None:
            attempt.state = AttemptState.SKIPPED
            return Outcome.SKIPPED

        attempt.recipient = recipient
        attempt.wallet = wallet
        attempt.state = AttemptState.CHECKING_BALANCE

        attempt.amount = pick_amount(self.amount_range, self.amount_decimals, self.rng)
        attempt.gas_price = await self.fee_strategy.get_gas_price(self.client)
        balance = await self.client.get_balance(wallet.address)
        logger.info(f"{wallet.address} | Баланс: {AsyncWeb3.from_wei(balance, 'ether')} {self.symbol}")
        logger.info(f"{wallet.address} | Сумма: {self._fmt(attempt.amount)} {self.symbol} | "
                    f"Газ: {AsyncWeb3.from_wei(attempt.gas_price, 'gwei')} Gwei")

        if balance < attempt.amount + estimated_fee(attempt.gas_price, attempt.gas_limit):
            logger.error(f"{wallet.address} | Недостаточно средств для отправки")
            attempt.state = AttemptState.FAILED
            return Outcome.FAILED

        try:
            await self.retry_policy.run(lambda number: self._submit(attempt, number),
                                        f"{wallet.address} -> {recipient}")
        except RetriesExhausted:
            attempt.state = AttemptState.FAILED
            return Outcome.FAILED

        attempt.state = AttemptState.SUCCEEDED
        logger.success(f"SEND {self._fmt(attempt.amount)} {self.symbol} TO {recipient} | "
                       f"блок {attempt.block_number}")
        return Outcome.SUCCEEDED

    async def _submit(self, attempt, number):
        attempt.state = AttemptState.SUBMITTING
        attempt.submissions += 1
        try:
            attempt.tx_hash = await self.client.send_transfer(
                attempt.wallet, attempt.recipient, attempt.amount, attempt.gas_price, attempt.gas_limit
            )
            logger.info(f"Транзакция отправлена: {attempt.tx_hash} | попытка {number}")

            attempt.state = AttemptState.CONFIRMING
            receipt = await self.client.wait_for_receipt(attempt.tx_hash)
            if receipt['status'] != 1:
                raise TransactionReverted(attempt.tx_hash, receipt.get('blockNumber'))
        except Exception:
            attempt.state = AttemptState.RETRYING
            raise

        attempt.block_number = receipt['blockNumber']
        return receipt

    @staticmethod
    def _fmt(amount):
        return AsyncWeb3.from_wei(amount, 'ether')
