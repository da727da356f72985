import asyncio

from loguru import logger

from daily_sender.modules.errors import RetriesExhausted


class RetryPolicy:
    """Не более max_attempts вызовов с фиксированной паузой delay между ними.

    После последней неудачи пауза не делается, поднимается RetriesExhausted.
    """

    def __init__(self, max_attempts=5, delay=10, sleep=asyncio.sleep):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.delay = delay
        self.sleep = sleep

    async def run(self, action, description="Транзакция"):
        last_error = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await action(attempt)
            except Exception as e:
                last_error = e
                logger.error(f'{description} | Попытка {attempt}/{self.max_attempts} | Ошибка: {e}')

                if attempt < self.max_attempts:
                    logger.info(f'{description} | Повтор через {self.delay} сек...')
                    await self.sleep(self.delay)

        logger.critical(f'{description} | Все {self.max_attempts} попыток исчерпаны, переходим к следующей')
        raise RetriesExhausted(self.max_attempts, last_error)
