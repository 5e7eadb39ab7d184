# config.py
"""
Configuração do STK Manager
===========================

Caminhos de dados/log, chave de armazenamento, limites dos gráficos e
configuração de logging (aplicada por `main.py` via `logging.config.dictConfig`).

Variáveis de ambiente
---------------------
- `STK_CAMINHO_BANCO`: caminho alternativo do arquivo SQLite.
- `STK_LOG_LEVEL`: nível do log no console (padrão: INFO).
"""

import logging
import os

# --- Banco de dados ---
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")
DB_NAME = "stk_data.db"
CAMINHO_BANCO = os.environ.get("STK_CAMINHO_BANCO") or os.path.join(DATA_DIR, DB_NAME)

# Chave onde a coleção de registros é gravada
CHAVE_ARMAZENAMENTO = "stock_data"

# --- Dashboard ---
LIMITE_GRAFICOS = 5   # top-N de fornecedor/destino/produto
LIMITE_DESTINOS = 6   # top-N do gráfico Estoque x Rejeitado por destino

# --- Logging ---
LOGS_DIR = os.path.join(BASE_DIR, "logs")
LOG_FILE_PATH = os.path.join(LOGS_DIR, "stk_manager.log")
LOG_LEVEL = os.environ.get("STK_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": LOG_FORMAT},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": LOG_LEVEL,
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": LOG_FILE_PATH,
            "maxBytes": 1024 * 1024 * 5,  # 5 MB
            "backupCount": 5,
            "level": logging.INFO,
            "encoding": "utf-8",
        },
    },
    "root": {
        "handlers": ["console", "file"],
        "level": logging.DEBUG,
    },
}


def garantir_diretorios() -> None:
    """Cria `data/` e `logs/` se não existirem."""
    os.makedirs(os.path.dirname(os.path.abspath(CAMINHO_BANCO)), exist_ok=True)
    os.makedirs(LOGS_DIR, exist_ok=True)
