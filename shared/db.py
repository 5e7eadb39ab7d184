"""
Módulo DB (Shared)
==================

Abertura de conexões SQLite do STK Manager.

- `get_conn`: conexão configurada (o chamador fecha).
- `conexao`: context manager que abre, faz commit/rollback e sempre fecha.

PRAGMAs aplicados em toda conexão: `journal_mode=WAL`, `busy_timeout=30000`
e `synchronous=NORMAL`. Linhas retornam como `sqlite3.Row`.

Dependências
------------
- sqlite3
- utils.utils.resolve_db_path
"""

from __future__ import annotations

import os
import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator

from utils.utils import resolve_db_path

_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA busy_timeout=30000;",
    "PRAGMA synchronous=NORMAL;",
)


def get_conn(db_path_like: Any) -> sqlite3.Connection:
    """
    Abre uma conexão SQLite, criando antes a pasta do arquivo se preciso.

    Args:
        db_path_like (Any): Caminho (str/PathLike) ou objeto com `db_path`,
            `caminho_banco` ou `database`.

    Returns:
        sqlite3.Connection: Conexão aberta. O chamador é responsável por fechá-la.
    """
    db_path = resolve_db_path(db_path_like)
    os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)

    conn = sqlite3.connect(db_path, timeout=30)
    for pragma in _PRAGMAS:
        conn.execute(pragma)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def conexao(db_path_like: Any) -> Iterator[sqlite3.Connection]:
    """Conexão de uso único: commit ao sair sem erro, rollback em exceção, fecha sempre."""
    conn = get_conn(db_path_like)
    try:
        with conn:
            yield conn
    finally:
        conn.close()


__all__ = ["get_conn", "conexao"]
