import os

from dotenv import load_dotenv

load_dotenv()

# RPC и ключи берутся из .env
RPC_URL = os.getenv("RPC_URL", "https://tea-sepolia.g.alchemy.com/public").strip()
PROXY = os.getenv("PROXY", "").strip() or None


def read_private_keys():
    keys = os.getenv("PRIVATE_KEYS", "")
    if not keys.strip():
        keys = os.getenv("PRIVATE_KEY", "")
    return [key.strip() for key in keys.split(",") if key.strip()]


# Файл с адресами получателей, по одному на строку
ADDRESS_FILE = "address.txt"

# Тикер нативного токена, только для логов
SYMBOL = "TEA"

# Диапазон суммы одного перевода и точность округления
AMOUNT_RANGE = (0.01, 3)
AMOUNT_DECIMALS = 2

# Сколько транзакций за сутки (случайно из диапазона, один раз на запуск)
TRANSACTIONS_PER_DAY = (125, 150)

# even - равные интервалы, random - случайная пауза от 0 до 2 интервалов
SCHEDULE_MODE = "even"

# Шаг обратного отсчета между транзакциями, секунды
COUNTDOWN_STEP = 60

# Газ: fixed, live или markup
GAS_PRICE_POLICY = "fixed"
FIXED_GAS_PRICE_GWEI = 100
GAS_MARKUP_RANGE = (1.05, 1.2)
GAS_PRICE_BAND_GWEI = (1, 200)
GAS_LIMIT = 21000

# Повторы отправки
NUMBER_OF_RETRIES = 5
RETRY_DELAY = 10

# None - ждать квитанцию без ограничения
RECEIPT_TIMEOUT = None

AMOUNT_RANGE = tuple(sorted(float(x) for x in AMOUNT_RANGE))
AMOUNT_DECIMALS = max(int(AMOUNT_DECIMALS), 0)
TRANSACTIONS_PER_DAY = tuple(sorted(max(int(x), 1) for x in TRANSACTIONS_PER_DAY))
GAS_MARKUP_RANGE = tuple(sorted(float(x) for x in GAS_MARKUP_RANGE))
GAS_PRICE_BAND_GWEI = tuple(sorted(float(x) for x in GAS_PRICE_BAND_GWEI))
NUMBER_OF_RETRIES = max(int(NUMBER_OF_RETRIES), 1)
COUNTDOWN_STEP = max(int(COUNTDOWN_STEP), 1)
