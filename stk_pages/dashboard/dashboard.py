"""
Dashboard
=========

Indicadores do pátio (KPIs) e gráficos de distribuição, recalculados a cada
renderização a partir do snapshot do repositório.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import streamlit as st

from config import LIMITE_DESTINOS, LIMITE_GRAFICOS
from repository.estoque_repository import EstoqueRepository
from services.estoque.agregacoes import (
    ResumoDashboard,
    destinos_para_dataframe,
    grupos_para_dataframe,
    resumo_dashboard,
)
from utils.utils import formatar_valor


def cartoes_dashboard(resumo: ResumoDashboard) -> List[Tuple[str, Any]]:
    """(rótulo, valor exibido) dos quatro KPIs do topo."""
    return [
        ("📦 Itens em Estoque", resumo.total_em_estoque),
        ("⚖️ Toneladas em Pátio", formatar_valor(resumo.peso_em_estoque, tipo="toneladas")),
        ("🚚 Saídas Realizadas", resumo.total_saidas),
        ("📈 Giro de Estoque", formatar_valor(resumo.taxa_giro, tipo="percentual", casas=1)),
    ]


def _grafico_grupos(titulo: str, grupos, rotulo: str, colunas=("Unidades", "Toneladas"), horizontal=False) -> None:
    st.markdown(f"#### {titulo}")
    if not grupos:
        st.caption("Sem dados.")
        return
    df = grupos_para_dataframe(grupos, rotulo=rotulo)
    st.bar_chart(df[list(colunas)], horizontal=horizontal, stack=False)


def render_dashboard(repo: EstoqueRepository) -> None:
    """
    Ponto de entrada do Dashboard.

    Args:
        repo: Repositório de estoque.
    """
    resumo = resumo_dashboard(repo.listar(), limite=LIMITE_GRAFICOS, limite_destinos=LIMITE_DESTINOS)

    for coluna, (rotulo, valor) in zip(st.columns(4), cartoes_dashboard(resumo)):
        with coluna:
            st.metric(rotulo, valor)

    st.divider()

    col_a, col_b = st.columns(2)
    with col_a:
        _grafico_grupos("Top Fornecedores (em estoque)", resumo.por_fornecedor, "Fornecedor")
    with col_b:
        _grafico_grupos("Destinos Principais", resumo.por_destino, "Destino", colunas=("Unidades",), horizontal=True)

    col_c, col_d = st.columns(2)
    with col_c:
        _grafico_grupos("Produtos em Estoque", resumo.por_produto, "Produto", colunas=("Unidades",))
    with col_d:
        _grafico_grupos("Toneladas por Fornecedor", resumo.por_fornecedor, "Fornecedor", colunas=("Toneladas",))

    st.markdown("#### Estoque x Rejeitado por Destino")
    if not resumo.status_por_destino:
        st.caption("Sem dados.")
    else:
        st.bar_chart(destinos_para_dataframe(resumo.status_por_destino), stack=True)
