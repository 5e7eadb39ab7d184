# ===================== Page: Entradas =====================
"""Página principal de Entradas (Estoque).

Responsável por montar o layout e orquestrar:
- Formulário de Nova Entrada (toggle)
- Barra de filtros (status, campo de data, período) e busca por NF
- Tabela dos registros no pátio

Regras:
    - A mensagem de sucesso é exibida no banner global do app, usando
      `st.session_state["msg_ok"]` e `st.session_state["msg_ok_type"]`.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import streamlit as st

from repository.estoque_repository import EstoqueRepository
from services.estoque.agregacoes import total_em_estoque
from services.estoque.filtros import buscar_por_nf
from utils.utils import coerce_data

from .actions_entradas import carregar_estoque_filtrado, salvar_entrada, tabela_estoque
from .state_entradas import fechar_form, form_visivel, toggle_form
from .ui_forms_entradas import render_barra_filtros, render_form_entrada


def render_entradas(repo: EstoqueRepository, data_lanc: Optional[date] = None) -> None:
    """Renderiza a página de Entradas.

    Args:
        repo: Repositório de estoque.
        data_lanc: Data padrão do formulário (opcional, padrão: hoje).
    """
    data_lanc = coerce_data(data_lanc)

    st.caption("Registros físicos atualmente no pátio (Estoque e Rejeitado).")

    # ====== Toggle: Nova Entrada ======
    rotulo = "✖ Fechar formulário" if form_visivel() else "➕ Nova Entrada"
    if st.button(rotulo, use_container_width=True, key="btn_entrada_toggle"):
        toggle_form()
        st.rerun()

    if form_visivel():
        payload = render_form_entrada(data_lanc)
        if payload is not None:
            try:
                msg = salvar_entrada(repo, payload)
                st.session_state["msg_ok"] = msg
                st.session_state["msg_ok_type"] = "success"
                fechar_form()
                st.rerun()
            except ValueError as ve:
                st.warning(f"⚠️ {ve}")
            except Exception as e:
                st.error(f"❌ Erro ao salvar entrada: {e}")

    st.divider()

    # ====== Filtros + Tabela ======
    filtros = render_barra_filtros()
    try:
        registros = carregar_estoque_filtrado(repo, **filtros)
    except ValueError as ve:
        st.warning(f"⚠️ {ve}")
        return

    termo = st.text_input("🔎 Buscar NF ou chave de acesso", key="entradas_busca_nf")
    registros = buscar_por_nf(registros, termo)

    if not registros:
        if total_em_estoque(repo.listar()) == 0:
            st.info("Nenhum item em estoque no momento.")
        else:
            st.info("Nenhum resultado para os filtros aplicados.")
        return

    st.dataframe(
        tabela_estoque(registros),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Tonelada": st.column_config.NumberColumn(format="%.3f"),
            "Valor (R$)": st.column_config.NumberColumn(format="R$ %.2f"),
        },
    )
    st.caption(f"{len(registros)} registro(s) exibido(s).")
