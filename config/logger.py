import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOGGER_NAME = "WaitlistWidget"

# Bibliotecas barulhentas: o access log do servidor fica, o resto só em WARNING
QUIET_LOGGERS = ("aiohttp.client", "aiohttp.internal", "asyncio")

def setup_logging(log_dir=None, level=None):
    log_dir = log_dir or os.getenv("LOG_DIR", "logs")
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    os.makedirs(log_dir, exist_ok=True)

    # O handler já rotaciona à meia noite (sufixo com a data), mantém últimos 7 dias
    file_handler = TimedRotatingFileHandler(
        os.path.join(log_dir, "widget.log"), when="midnight", interval=1, backupCount=7, encoding='utf-8'
    )

    # %(name)s separa as linhas do widget das do access log do aiohttp
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            file_handler,
            logging.StreamHandler()
        ]
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    widget_logger = logging.getLogger(LOGGER_NAME)
    widget_logger.setLevel(getattr(logging, level, logging.INFO))
    return widget_logger

logger = setup_logging()
