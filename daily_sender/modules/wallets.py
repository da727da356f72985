from eth_account import Account
from loguru import logger


def is_valid_private_key(key):
    key_str = key[2:] if key.startswith('0x') else key
    return len(key_str) == 64 and all(c in '0123456789abcdefABCDEF' for c in key_str)


def load_wallets(private_keys):
    """Создает аккаунты из приватных ключей, невалидные и повторяющиеся ключи пропускаются."""
    wallets = []
    seen = set()
    for index, key in enumerate(private_keys, start=1):
        if not is_valid_private_key(key):
            logger.warning(f"Ключ #{index} невалиден и пропущен (информация скрыта)")
            continue

        account = Account.from_key(key)
        if account.address in seen:
            continue
        seen.add(account.address)
        wallets.append(account)
        logger.info(f"Добавлен кошелек {account.address}")

    return wallets
