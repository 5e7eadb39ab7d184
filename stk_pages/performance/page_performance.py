# ===================== Page: Performance =====================
"""
Página de Performance Logística: cartões de resumo, log de horários e
formulário de edição dos horários de um registro.
"""

from __future__ import annotations

import streamlit as st

from repository.estoque_repository import EstoqueRepository
from services.estoque.performance import resumo_performance

from .actions_performance import hora_para_time, salvar_horarios, tabela_performance

__all__ = ["render_performance"]

SELECT_REGISTRO_KEY = "pg_perf_sel"


def render_performance(repo: EstoqueRepository) -> None:
    """Renderiza a página de Performance."""
    registros = repo.listar()
    resumo = resumo_performance(registros)

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Média Permanência", resumo.media_permanencia)
    with c2:
        st.metric("Cargas Hoje", resumo.cargas_do_dia)
    with c3:
        st.metric("Em Operação", resumo.em_operacao)

    st.subheader("⏱️ Log de Horários Operacionais")
    if not registros:
        st.info("Nenhum registro cadastrado.")
        return

    st.dataframe(tabela_performance(registros), use_container_width=True, hide_index=True)

    st.divider()
    st.markdown("#### ✏️ Editar horários")
    label_map = {r.id: f"NF {r.nf} • {r.placa_veiculo} • {r.status.value}" for r in registros}
    selected_id = st.selectbox(
        "Selecione o registro",
        options=list(label_map.keys()),
        format_func=lambda k: label_map[k],
        key=SELECT_REGISTRO_KEY,
    )
    atual = repo.obter(selected_id)

    # key por registro: o formulário recarrega os valores ao trocar a seleção
    with st.form(f"form_perf_{selected_id}"):
        c1, c2, c3 = st.columns(3)
        with c1:
            chegada = st.time_input("Hora Chegada", value=hora_para_time(atual.hora_chegada), step=60)
        with c2:
            entrada = st.time_input("Hora Entrada", value=hora_para_time(atual.hora_entrada), step=60)
        with c3:
            saida = st.time_input("Hora Saída", value=hora_para_time(atual.hora_saida), step=60)
        salvar = st.form_submit_button("✅ Salvar horários", use_container_width=True)

    if salvar:
        try:
            msg = salvar_horarios(repo, selected_id, chegada, entrada, saida)
            st.session_state["msg_ok"] = msg
            st.session_state["msg_ok_type"] = "success"
            st.rerun()
        except ValueError as ve:
            st.warning(f"⚠️ {ve}")
        except Exception as e:
            st.error(f"❌ Erro ao salvar horários: {e}")
