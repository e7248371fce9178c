# upc_checker/core/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Definição de Caminhos Base
PROJECT_DIR = Path(__file__).resolve().parent.parent.parent

# Carrega o arquivo .env (opcional para uma biblioteca)
env_path = PROJECT_DIR / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)
    logger.debug(f"Arquivo .env carregado: {env_path}")
else:
    logger.debug(f"Arquivo .env não encontrado: {env_path}")

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def parse_bool(value) -> bool:
    """Interpreta uma variável de ambiente como booleano."""
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_VALUES


def parse_log_level(value, default: int = logging.INFO) -> int:
    """Converte o nome de um nível ('DEBUG', 'info', '10') para o valor do logging."""
    if value is None or str(value).strip() == "":
        return default

    value = str(value).strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level

    logger.warning(f"Nível de log inválido '{value}', usando o padrão")
    return default


# --- Variáveis de Configuração ---

LOG_LEVEL = parse_log_level(os.environ.get("UPC_CHECKER_LOG_LEVEL"))
LOG_DIR = Path(os.environ.get("UPC_CHECKER_LOG_DIR", PROJECT_DIR / "logs"))
LOG_TO_FILE = parse_bool(os.environ.get("UPC_CHECKER_LOG_TO_FILE"))

# Configurações Fixas
PROJECT_NAME = "UPC Checker"
