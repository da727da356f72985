from loguru import logger


def parse_addresses(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_recipients(path):
    """Читает адреса получателей из файла. При ошибке чтения возвращает пустой список."""
    try:
        with open(path, 'r', encoding='utf-8') as file:
            recipients = parse_addresses(file.read())
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Ошибка чтения файла адресов {path}: {e}")
        return []

    logger.info(f"Загружено адресов получателей: {len(recipients)}")
    return recipients
