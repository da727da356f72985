class DailySenderError(Exception):
    pass


class ConfigurationError(DailySenderError):
    pass


class TransactionReverted(DailySenderError):
    """Квитанция пришла, но статус транзакции не 1."""

    def __init__(self, tx_hash, block_number=None):
        self.tx_hash = tx_hash
        self.block_number = block_number
        super().__init__(f"Транзакция {tx_hash} не прошла в блоке {block_number}")


class RetriesExhausted(DailySenderError):
    def __init__(self, attempts, last_error):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Все {attempts} попыток исчерпаны: {last_error}")
