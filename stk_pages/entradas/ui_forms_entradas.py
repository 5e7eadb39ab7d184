# ===================== UI Forms: Entradas =====================
"""Componentes de UI (somente interface, sem acesso ao repositório).

Contém o formulário de **Nova Entrada** e a barra de filtros da lista.
Apenas coleta os dados; validação e gravação ficam nas actions.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict

import streamlit as st

from services.estoque.filtros import CAMPOS_DATA, FILTROS_STATUS
from services.estoque.tipos import StatusEstoque
from utils.utils import mes_por_extenso

from .state_entradas import (
    KEY_FILTRO_CAMPO,
    KEY_FILTRO_FIM,
    KEY_FILTRO_INICIO,
    KEY_FILTRO_STATUS,
    filtros_ativos,
    limpar_filtros,
)


def render_form_entrada(data_padrao: date) -> Dict[str, Any] | None:
    """Renderiza o formulário de **Nova Entrada**.

    Args:
        data_padrao: Data sugerida para a N.F e para o mês.

    Returns:
        Dict com os campos do formulário quando "Salvar Registro" é clicado;
        None caso contrário.
    """
    with st.form("form_nova_entrada", clear_on_submit=True):
        # Linha 1: identificação da NF
        c1, c2, c3 = st.columns([1, 2, 1])
        with c1:
            mes = st.text_input("Mês", value=mes_por_extenso(data_padrao), key="ent_mes")
        with c2:
            chave = st.text_input("Chave de Acesso NF", key="ent_chave")
        with c3:
            nf = st.text_input("N.F", key="ent_nf")

        # Linha 2: peso/valor/produto
        c4, c5, c6 = st.columns([1, 1, 2])
        with c4:
            tonelada = st.number_input("Tonelada", min_value=0.0, step=0.01, format="%.3f", key="ent_ton")
        with c5:
            valor = st.number_input("Valor (R$)", min_value=0.0, step=0.01, format="%.2f", key="ent_valor")
        with c6:
            produto = st.text_input("Descrição do Produto", key="ent_produto")

        # Linha 3: datas e status
        c7, c8, c9 = st.columns(3)
        with c7:
            data_nf = st.date_input("Data da N.F", value=data_padrao, format="DD/MM/YYYY", key="ent_data_nf")
        with c8:
            data_descarga = st.date_input("Data de Descarga", value=None, format="DD/MM/YYYY", key="ent_data_desc")
        with c9:
            status = st.selectbox(
                "Status Inicial",
                [StatusEstoque.ESTOQUE.value, StatusEstoque.REJEITADO.value],
                key="ent_status",
            )

        # Linha 4: logística
        c10, c11, c12, c13 = st.columns(4)
        with c10:
            fornecedor = st.text_input("Fornecedor", key="ent_fornecedor")
        with c11:
            placa = st.text_input("Placa do Veículo", key="ent_placa")
        with c12:
            container = st.text_input("Container", key="ent_container")
        with c13:
            destino = st.text_input("Destino", key="ent_destino")

        enviado = st.form_submit_button("💾 Salvar Registro", use_container_width=True)

    if not enviado:
        return None
    return {
        "mes": mes,
        "chave_acesso_nf": chave,
        "nf": nf,
        "tonelada": tonelada,
        "valor": valor,
        "descricao_produto": produto,
        "data_nf": data_nf,
        "data_descarga": data_descarga,
        "status": status,
        "fornecedor": fornecedor,
        "placa_veiculo": placa,
        "container": container,
        "destino": destino,
    }


def render_barra_filtros() -> Dict[str, Any]:
    """Barra de filtros (status, campo de data, período, limpar).

    Returns:
        Dict com `status`, `campo_data`, `inicio`, `fim`.
    """
    c1, c2, c3, c4, c5 = st.columns([1, 1, 1, 1, 0.6])
    with c1:
        st.selectbox("Status", FILTROS_STATUS, key=KEY_FILTRO_STATUS)
    with c2:
        st.selectbox(
            "Filtrar por",
            list(CAMPOS_DATA.keys()),
            format_func=lambda k: CAMPOS_DATA[k],
            key=KEY_FILTRO_CAMPO,
        )
    with c3:
        st.date_input("De", format="DD/MM/YYYY", key=KEY_FILTRO_INICIO)
    with c4:
        st.date_input("Até", format="DD/MM/YYYY", key=KEY_FILTRO_FIM)
    with c5:
        st.write("")
        st.button("↺ Limpar", on_click=limpar_filtros, disabled=not filtros_ativos(), key="btn_limpar_filtros")

    return {
        "status": st.session_state[KEY_FILTRO_STATUS],
        "campo_data": st.session_state[KEY_FILTRO_CAMPO],
        "inicio": st.session_state[KEY_FILTRO_INICIO],
        "fim": st.session_state[KEY_FILTRO_FIM],
    }
