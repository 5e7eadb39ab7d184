# ===================== Page: Faturamento =====================
"""
Página de Controle de Faturamento: tabela de conferência e edição dos
documentos (NF, CTE Intertex, CTE do transportador) de um registro.
"""

from __future__ import annotations

import streamlit as st

from repository.estoque_repository import EstoqueRepository
from utils.utils import formatar_moeda

from .actions_faturamento import data_para_date, salvar_faturamento, tabela_faturamento

__all__ = ["render_faturamento"]

SELECT_REGISTRO_KEY = "pg_fat_sel"


def render_faturamento(repo: EstoqueRepository) -> None:
    """Renderiza a página de Faturamento."""
    registros = repo.listar()
    st.subheader("🧾 Controle de Faturamento")
    if not registros:
        st.info("Nenhum registro cadastrado.")
        return

    st.dataframe(
        tabela_faturamento(registros),
        use_container_width=True,
        hide_index=True,
        column_config={"Valor (R$)": st.column_config.NumberColumn(format="R$ %.2f")},
    )

    st.divider()
    st.markdown("#### ✏️ Editar faturamento")
    label_map = {r.id: f"NF {r.nf} • {formatar_moeda(r.valor)} • {r.status.value}" for r in registros}
    selected_id = st.selectbox(
        "Selecione o registro",
        options=list(label_map.keys()),
        format_func=lambda k: label_map[k],
        key=SELECT_REGISTRO_KEY,
    )
    atual = repo.obter(selected_id)

    with st.form(f"form_fat_{selected_id}"):
        c1, c2 = st.columns(2)
        with c1:
            emissao_nf = st.date_input(
                "Emissão NF", value=data_para_date(atual.data_emissao_nf), format="DD/MM/YYYY"
            )
            cte_intertex = st.text_input("CTE Intertex", value=atual.cte_intertex or "")
        with c2:
            emissao_cte = st.date_input(
                "Emissão CTE Intertex", value=data_para_date(atual.data_emissao_cte_intertex), format="DD/MM/YYYY"
            )
            cte_transp = st.text_input("CTE Transportador", value=atual.cte_transportador or "")
        salvar = st.form_submit_button("💾 Salvar", use_container_width=True)

    if salvar:
        try:
            msg = salvar_faturamento(
                repo,
                selected_id,
                {
                    "data_emissao_nf": emissao_nf,
                    "cte_intertex": cte_intertex,
                    "data_emissao_cte_intertex": emissao_cte,
                    "cte_transportador": cte_transp,
                },
            )
            st.session_state["msg_ok"] = msg
            st.session_state["msg_ok_type"] = "success"
            st.rerun()
        except ValueError as ve:
            st.warning(f"⚠️ {ve}")
        except Exception as e:
            st.error(f"❌ Erro ao salvar faturamento: {e}")
