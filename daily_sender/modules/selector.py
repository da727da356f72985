import random
from decimal import Decimal

from loguru import logger
from web3 import AsyncWeb3


def pick_wallet(wallets, rng=random):
    if not wallets:
        logger.error("Нет доступных кошельков")
        return None
    return rng.choice(wallets)


def pick_recipient(recipients, rng=random):
    if not recipients:
        logger.error("Нет доступных адресов получателей")
        return None
    return rng.choice(recipients)


def pick_amount(amount_range, decimals=2, rng=random):
    """Случайная сумма из диапазона, округленная до decimals знаков, в wei."""
    low, high = amount_range
    amount = round(rng.uniform(low, high), decimals)
    # округление может увести за нижнюю границу
    amount = max(amount, round(low, decimals))
    return AsyncWeb3.to_wei(Decimal(str(amount)), 'ether')
