"""
Pacote utils
============

Reexporta utilitários comuns do STK Manager para facilitar imports.
"""

from .utils import (
    MESES_PT_BR,
    coerce_data,
    formatar_moeda,
    formatar_percentual,
    formatar_toneladas,
    formatar_valor,
    limpar_valor_formatado,
    mes_por_extenso,
    resolve_db_path,
)

__all__ = [
    "MESES_PT_BR",
    "coerce_data",
    "formatar_moeda",
    "formatar_percentual",
    "formatar_toneladas",
    "formatar_valor",
    "limpar_valor_formatado",
    "mes_por_extenso",
    "resolve_db_path",
]
