# upc_checker/core/logging_config.py
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from upc_checker.core import config

PACKAGE_LOGGER = "upc_checker"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: Optional[int] = None, log_to_file: Optional[bool] = None) -> Optional[Path]:
    """
    Configura o logging do pacote com formatação consistente.
    Pode ser chamada mais de uma vez: os handlers anteriores são substituídos.
    Retorna o caminho do arquivo de log, ou None se o log for só no console.
    """
    if level is None:
        level = config.LOG_LEVEL
    if log_to_file is None:
        log_to_file = config.LOG_TO_FILE

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Handler para console
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = None
    if log_to_file:
        log_dir = Path(config.LOG_DIR)
        log_dir.mkdir(exist_ok=True, parents=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"upc_checker_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(level)
    package_logger.propagate = False

    package_logger.info(f"Logging configurado. Arquivo: {log_file}")
    return log_file


def log_structured_event(service: str, event: str, data: dict, level: str = "INFO"):
    """Log estruturado para eventos importantes"""
    logger = logging.getLogger(service)
    log_data = {
        'timestamp': datetime.now().isoformat(),
        'service': service,
        'event': event,
        'data': data
    }

    message = f"EVENT: {event} - DATA: {log_data}"

    if level.upper() == "INFO":
        logger.info(message)
    elif level.upper() == "ERROR":
        logger.error(message)
    elif level.upper() == "WARNING":
        logger.warning(message)
    elif level.upper() == "DEBUG":
        logger.debug(message)
