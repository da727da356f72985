import asyncio
import logging
import random
import sys

from loguru import logger

from daily_sender import config
from daily_sender.modules.address_loader import load_recipients
from daily_sender.modules.chain import ChainClient
from daily_sender.modules.errors import ConfigurationError
from daily_sender.modules.executor import TransferExecutor
from daily_sender.modules.fee import log_network_fee, make_fee_strategy
from daily_sender.modules.retry import RetryPolicy
from daily_sender.modules.run_state import RunState
from daily_sender.modules.scheduler import DailyScheduler, pick_target
from daily_sender.modules.wallets import load_wallets
from utils.logger import setup_logger

logging.getLogger('asyncio').setLevel(logging.CRITICAL)


async def main():
    setup_logger()
    logger.info(f"Запуск ежедневной отправки {config.SYMBOL}...")

    wallets = load_wallets(config.read_private_keys())
    if not wallets:
        logger.critical("Не заданы приватные ключи (PRIVATE_KEYS или PRIVATE_KEY в .env)")
        sys.exit(1)
    logger.info(f"Загружено кошельков: {len(wallets)}")

    recipients = load_recipients(config.ADDRESS_FILE)

    client = ChainClient.from_rpc(config.RPC_URL, config.PROXY, config.RECEIPT_TIMEOUT)
    await log_network_fee(client, config.GAS_LIMIT, config.SYMBOL)

    try:
        executor = TransferExecutor(
            client,
            make_fee_strategy(config.GAS_PRICE_POLICY, config.FIXED_GAS_PRICE_GWEI,
                              config.GAS_MARKUP_RANGE, config.GAS_PRICE_BAND_GWEI),
            RetryPolicy(config.NUMBER_OF_RETRIES, config.RETRY_DELAY),
            config.AMOUNT_RANGE,
            config.AMOUNT_DECIMALS,
            config.GAS_LIMIT,
            config.SYMBOL,
        )
        scheduler = DailyScheduler(executor, config.SCHEDULE_MODE, config.COUNTDOWN_STEP, symbol=config.SYMBOL)
    except ConfigurationError as e:
        logger.critical(f"Ошибка конфигурации: {e}")
        sys.exit(1)

    state = RunState(target=pick_target(config.TRANSACTIONS_PER_DAY, random))
    await scheduler.run(wallets, recipients, state)


def run():
    if sys.platform.startswith('win'):
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.warning("Остановлено пользователем")


if __name__ == '__main__':
    run()
