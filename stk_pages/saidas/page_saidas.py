# ===================== Page: Saídas =====================
"""
Página de Saídas (Expedição): itens pendentes de saída e histórico.

Fluxo:
- Seleciona um item no pátio, escolhe Embarcado/Devolvido, informa data VLI
  (padrão: hoje) e CTE VLI, e confirma.
- Tabela de histórico com os registros já expedidos.
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from repository.estoque_repository import EstoqueRepository
from utils.utils import formatar_toneladas

from .actions_saidas import (
    OPCOES_STATUS_SAIDA,
    carregar_expedidos,
    carregar_pendentes,
    salvar_saida,
    tabela_expedidos,
)

__all__ = ["render_saidas"]

SELECT_PENDENTE_KEY = "pg_saida_sel"


def render_saidas(repo: EstoqueRepository) -> None:
    """Renderiza a página de Saídas."""
    st.subheader("🚚 Itens Pendentes de Saída")

    pendentes = carregar_pendentes(repo)
    if not pendentes:
        st.info("Nenhum produto em estoque aguardando saída.")
    else:
        label_map = {
            r.id: f"NF {r.nf} • {r.descricao_produto} • {r.fornecedor} • "
                  f"{formatar_toneladas(r.tonelada)} • descarga {r.data_descarga or '-'}"
            for r in pendentes
        }
        selected_id = st.selectbox(
            "Selecione o item",
            options=list(label_map.keys()),
            format_func=lambda k: label_map[k],
            key=SELECT_PENDENTE_KEY,
        )

        with st.form("form_saida", clear_on_submit=True):
            c1, c2, c3 = st.columns(3)
            with c1:
                status = st.selectbox("Status", OPCOES_STATUS_SAIDA, key="saida_status")
            with c2:
                data_vli = st.date_input("Data VLI", value=date.today(), format="DD/MM/YYYY", key="saida_data_vli")
            with c3:
                cte_vli = st.text_input("CTE VLI", placeholder="Número CTE", key="saida_cte_vli")
            confirmar = st.form_submit_button("⬆ Registrar Saída", use_container_width=True)

        if confirmar:
            try:
                msg = salvar_saida(
                    repo,
                    {
                        "selected_id": selected_id,
                        "status": status,
                        "data_faturamento_vli": data_vli,
                        "cte_vli": cte_vli,
                    },
                )
                st.session_state["msg_ok"] = msg
                st.session_state["msg_ok_type"] = "success"
                st.rerun()
            except ValueError as ve:
                st.warning(f"⚠️ {ve}")
            except Exception as e:
                st.error(f"❌ Erro ao registrar saída: {e}")

    st.divider()
    st.subheader("📦 Histórico de Expedição (Saídas)")
    expedidos = carregar_expedidos(repo)
    if not expedidos:
        st.info("Nenhuma saída registrada.")
        return
    st.dataframe(tabela_expedidos(expedidos), use_container_width=True, hide_index=True)
