# shared/ids.py
"""
Identificadores e normalizadores (Shared)
=========================================

- `novo_id_registro`: UUID4 em texto, atribuído na criação de um registro.
- `sanitize` / `sanitize_plus`: limpeza de textos vindos dos formulários
  (Unicode NFKC, sem caracteres de controle, espaços colapsados, maiúsculas
  opcionais para placa e container).
- `texto_ou_none`: campo opcional vazio vira `None`.
- `normalizar_data`: qualquer data aceita pelos formulários/backups vira
  `YYYY-MM-DD` (ou `None`).
"""

from __future__ import annotations

import re
import unicodedata
import uuid
from datetime import date, datetime
from typing import Any, Optional

_CTRL_RE = re.compile(r"[\x00-\x1F\x7F]")

# Formatos de data aceitos, na ordem de tentativa
_FORMATOS_DATA = (
    "%Y-%m-%d",
    "%d/%m/%Y",
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%d.%m.%Y",
    "%Y%m%d",
)


def _texto(x: Any) -> str:
    if x is None:
        return ""
    return _CTRL_RE.sub("", unicodedata.normalize("NFKC", str(x)))


def _data_de_texto(s: str) -> Optional[datetime]:
    for fmt in _FORMATOS_DATA:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    # ISO com horário ('2024-01-05T10:00:00')
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def novo_id_registro() -> str:
    """Gera o identificador opaco de um novo registro de estoque."""
    return str(uuid.uuid4())


def sanitize(s: Any) -> str:
    """Texto limpo e sem espaços nas pontas (aceita qualquer tipo)."""
    return _texto(s).strip()


def sanitize_plus(s: Any, upper: bool = False) -> str:
    """Como `sanitize`, colapsando espaços internos; `upper=True` aplica maiúsculas."""
    base = " ".join(_texto(s).split())
    return base.upper() if upper else base


def texto_ou_none(s: Any) -> Optional[str]:
    return sanitize(s) or None


def normalizar_data(d: Any) -> Optional[str]:
    """
    `date`/`datetime`/texto -> `YYYY-MM-DD`.
    Vazio ou não interpretável retorna None.
    """
    if isinstance(d, datetime):
        d = d.date()
    if isinstance(d, date):
        return d.isoformat()
    s = sanitize(d)
    if not s:
        return None
    dt = _data_de_texto(s)
    return dt.strftime("%Y-%m-%d") if dt else None


__all__ = [
    "novo_id_registro",
    "sanitize",
    "sanitize_plus",
    "texto_ou_none",
    "normalizar_data",
]
