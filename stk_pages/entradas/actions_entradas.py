# stk_pages/entradas/actions_entradas.py
"""Ações de negócio para Entradas (Estoque).

Somente funções chamadas pela página:
- salvar_entrada
- carregar_estoque_filtrado
- tabela_estoque

Observação:
    Este módulo não renderiza UI (evita import circular com a página) e recebe
    o repositório por parâmetro.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

import pandas as pd

from repository.estoque_repository import EstoqueRepository
from services.estoque.ciclo_status import criar_registro
from services.estoque.filtros import TODOS, filtrar_estoque
from services.estoque.tipos import RegistroEstoque

__all__ = ["salvar_entrada", "carregar_estoque_filtrado", "tabela_estoque", "COLUNAS_TABELA"]

COLUNAS_TABELA = [
    "N.F",
    "Fornecedor",
    "Produto",
    "Tonelada",
    "Valor (R$)",
    "Data N.F",
    "Data Descarga",
    "Placa",
    "Container",
    "Destino",
    "Status",
]


def salvar_entrada(repo: EstoqueRepository, payload: Mapping[str, Any]) -> str:
    """Cria e grava um registro de entrada.

    Args:
        repo: Repositório de estoque.
        payload: Dados do formulário de nova entrada.

    Returns:
        Mensagem de sucesso.

    Raises:
        ValueError: campos obrigatórios ausentes ou inválidos.
    """
    # Whitelist de entrada (campos de saída/performance/faturamento não entram aqui)
    campos_ok = {
        "mes",
        "chave_acesso_nf",
        "nf",
        "tonelada",
        "valor",
        "descricao_produto",
        "data_nf",
        "data_descarga",
        "status",
        "fornecedor",
        "placa_veiculo",
        "container",
        "destino",
    }
    dados: Dict[str, Any] = {k: payload.get(k) for k in campos_ok}
    registro = criar_registro(dados)
    repo.adicionar(registro)
    return f"Entrada da NF {registro.nf} registrada com sucesso."


def carregar_estoque_filtrado(
    repo: EstoqueRepository,
    status: Any = TODOS,
    campo_data: str = "data_nf",
    inicio: Any = None,
    fim: Any = None,
) -> List[RegistroEstoque]:
    """Registros no pátio após os filtros da barra de filtros."""
    return filtrar_estoque(repo.listar(), status=status, campo_data=campo_data, inicio=inicio, fim=fim)


def tabela_estoque(registros: List[RegistroEstoque]) -> pd.DataFrame:
    """DataFrame para exibição (uma linha por registro, colunas em pt-BR)."""
    linhas = [
        {
            "N.F": r.nf,
            "Fornecedor": r.fornecedor,
            "Produto": r.descricao_produto,
            "Tonelada": r.tonelada,
            "Valor (R$)": r.valor,
            "Data N.F": r.data_nf or "-",
            "Data Descarga": r.data_descarga or "-",
            "Placa": r.placa_veiculo,
            "Container": r.container,
            "Destino": r.destino,
            "Status": r.status.value,
        }
        for r in registros
    ]
    return pd.DataFrame(linhas, columns=COLUNAS_TABELA)
