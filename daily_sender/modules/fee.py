import random

from loguru import logger
from web3 import AsyncWeb3

from daily_sender.modules.errors import ConfigurationError


def estimated_fee(gas_price, gas_limit):
    return gas_price * gas_limit


class FixedGasPrice:
    def __init__(self, gas_price_gwei):
        self.gas_price = AsyncWeb3.to_wei(gas_price_gwei, 'gwei')

    async def get_gas_price(self, client):
        return self.gas_price


class LiveGasPrice:
    """Текущая цена газа из сети, при ошибке - фиксированная."""

    def __init__(self, fallback_gwei):
        self.fallback = AsyncWeb3.to_wei(fallback_gwei, 'gwei')

    async def get_gas_price(self, client):
        try:
            gas_price = await client.gas_price()
        except Exception as e:
            logger.warning(f"Не удалось получить цену газа: {e}. Используем {self.fallback} wei")
            return self.fallback

        if not gas_price:
            logger.warning(f"Сеть вернула пустую цену газа. Используем {self.fallback} wei")
            return self.fallback
        return gas_price


class MarkupGasPrice(LiveGasPrice):
    """Цена сети, умноженная на случайный коэффициент и зажатая в полосу [min, max]."""

    def __init__(self, fallback_gwei, markup_range, band_gwei, rng=random):
        super().__init__(fallback_gwei)
        self.markup_range = markup_range
        self.min_price = AsyncWeb3.to_wei(band_gwei[0], 'gwei')
        self.max_price = AsyncWeb3.to_wei(band_gwei[1], 'gwei')
        self.rng = rng

    async def get_gas_price(self, client):
        base = await super().get_gas_price(client)
        gas_price = int(base * self.rng.uniform(*self.markup_range))
        return min(max(gas_price, self.min_price), self.max_price)


def make_fee_strategy(policy, fixed_gwei, markup_range=(1, 1), band_gwei=(0, 10 ** 6), rng=random):
    if policy == "fixed":
        return FixedGasPrice(fixed_gwei)
    if policy == "live":
        return LiveGasPrice(fixed_gwei)
    if policy == "markup":
        return MarkupGasPrice(fixed_gwei, markup_range, band_gwei, rng)
    raise ConfigurationError(f"Неизвестная политика газа: {policy}")


async def log_network_fee(client, gas_limit, symbol="ETH"):
    try:
        gas_price = await client.gas_price()
    except Exception as e:
        logger.error(f"Ошибка получения цены газа: {e}")
        return None

    if not gas_price:
        logger.error("Не удалось получить цену газа из сети")
        return None

    fee = estimated_fee(gas_price, gas_limit)
    logger.info(f"Цена газа: {AsyncWeb3.from_wei(gas_price, 'gwei')} Gwei")
    logger.info(f"Оценка комиссии: {AsyncWeb3.from_wei(fee, 'ether')} {symbol}")
    return fee
