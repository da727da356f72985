import asyncio
import random

from loguru import logger
from web3 import AsyncWeb3

from daily_sender.modules.errors import ConfigurationError
from daily_sender.modules.run_state import Outcome

SECONDS_PER_DAY = 24 * 60 * 60


def pick_target(target_range, rng=random):
    low, high = target_range
    if low == high:
        return low
    return rng.randint(low, high)


def interval_seconds(target):
    return SECONDS_PER_DAY / target


async def countdown(seconds, step=60, sleep=asyncio.sleep):
    """Спит seconds секунд кусками по step, логируя оставшееся время."""
    remaining = seconds
    while remaining > 0:
        logger.debug(f"До следующей транзакции: {int(round(remaining))} сек")
        chunk = min(step, remaining)
        await sleep(chunk)
        remaining -= chunk


class DailyScheduler:
    def __init__(self, executor, mode="even", countdown_step=60, sleep=asyncio.sleep, rng=random,
                 symbol="ETH"):
        if mode not in ("even", "random"):
            raise ConfigurationError(f"Неизвестный режим расписания: {mode}")
        self.executor = executor
        self.mode = mode
        self.countdown_step = countdown_step
        self.sleep = sleep
        self.rng = rng
        self.symbol = symbol

    def next_delay(self, target):
        interval = interval_seconds(target)
        if self.mode == "random":
            return self.rng.uniform(0, 2 * interval)
        return interval

    async def run(self, wallets, recipients, state):
        interval = interval_seconds(state.target)
        logger.info(f"Запланировано {state.target} транзакций на сегодня "
                    f"({interval / 60:.2f} мин между транзакциями, режим {self.mode})")

        while not state.finished:
            try:
                await self.executor.execute(wallets, recipients, state)
            except Exception as e:
                logger.exception(f"Ошибка при выполнении транзакции: {e}")
                state.record(Outcome.FAILED)

            state.tick()
            logger.info(f"Транзакция {state.done}/{state.target} завершена | "
                        f"успешно: {state.succeeded}, ошибок: {state.failed}, пропущено: {state.skipped}")

            if not state.finished:
                delay = self.next_delay(state.target)
                logger.info(f"Ждем {delay / 60:.2f} мин до следующей транзакции...")
                await countdown(delay, self.countdown_step, self.sleep)

        logger.success(f"Все {state.target} транзакций на сегодня выполнены | "
                       f"успешно: {state.succeeded}, ошибок: {state.failed}, пропущено: {state.skipped}, "
                       f"отправлено: {AsyncWeb3.from_wei(state.total_sent, 'ether')} {self.symbol}")
        return state
