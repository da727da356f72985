import random

import pytest
from web3 import AsyncWeb3

from daily_sender.modules.errors import ConfigurationError
from daily_sender.modules.fee import (FixedGasPrice, LiveGasPrice, MarkupGasPrice, estimated_fee,
                                      log_network_fee, make_fee_strategy)

GWEI = 10 ** 9


def test_estimated_fee():
    assert estimated_fee(100 * GWEI, 21000) == 2100000 * GWEI


@pytest.mark.asyncio
async def test_fixed_ignores_network(chain):
    chain.gas_price_error = ConnectionError("down")
    assert await FixedGasPrice(100).get_gas_price(chain) == 100 * GWEI


@pytest.mark.asyncio
async def test_live_uses_network(chain):
    chain.network_gas_price = 7 * GWEI
    assert await LiveGasPrice(100).get_gas_price(chain) == 7 * GWEI


@pytest.mark.asyncio
async def test_live_falls_back_on_error(chain):
    chain.gas_price_error = ConnectionError("down")
    assert await LiveGasPrice(100).get_gas_price(chain) == 100 * GWEI


@pytest.mark.asyncio
async def test_live_falls_back_on_zero(chain):
    chain.network_gas_price = 0
    assert await LiveGasPrice(50).get_gas_price(chain) == 50 * GWEI


@pytest.mark.asyncio
async def test_markup_within_factor(chain):
    chain.network_gas_price = 10 * GWEI
    strategy = MarkupGasPrice(100, (1.1, 1.2), (1, 200), random.Random(3))

    for _ in range(20):
        price = await strategy.get_gas_price(chain)
        assert 11 * GWEI <= price <= 12 * GWEI


@pytest.mark.asyncio
async def test_markup_clamped_to_band(chain):
    chain.network_gas_price = 500 * GWEI
    high = MarkupGasPrice(100, (1.1, 1.2), (1, 200))
    assert await high.get_gas_price(chain) == 200 * GWEI

    chain.network_gas_price = GWEI // 10
    low = MarkupGasPrice(100, (1.1, 1.2), (1, 200))
    assert await low.get_gas_price(chain) == 1 * GWEI


def test_make_fee_strategy():
    assert isinstance(make_fee_strategy("fixed", 100), FixedGasPrice)
    assert isinstance(make_fee_strategy("markup", 100, (1, 2), (1, 10)), MarkupGasPrice)
    live = make_fee_strategy("live", 100)
    assert type(live) is LiveGasPrice

    with pytest.raises(ConfigurationError):
        make_fee_strategy("eip1559", 100)


@pytest.mark.asyncio
async def test_log_network_fee(chain):
    chain.network_gas_price = 2 * GWEI
    assert await log_network_fee(chain, 21000, "TEA") == AsyncWeb3.to_wei(42000, 'gwei')

    chain.gas_price_error = ConnectionError("down")
    assert await log_network_fee(chain, 21000) is None
