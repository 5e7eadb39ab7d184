"""
Pacote Shared
=============

Componentes globais usados em todo o sistema.

Submódulos
----------
- db ........ conexões SQLite (`get_conn`, `conexao`)
- ids ....... geração de IDs e sanitização de textos/datas
"""

from shared.db import conexao, get_conn
from shared.ids import normalizar_data, novo_id_registro, sanitize, sanitize_plus, texto_ou_none

__all__ = [
    "conexao",
    "get_conn",
    "normalizar_data",
    "novo_id_registro",
    "sanitize",
    "sanitize_plus",
    "texto_ou_none",
]
