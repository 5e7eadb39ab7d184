# ===================== State: Entradas =====================
"""Estado/visibilidade da página de Entradas.

Responsável por:
    - Alternar a visibilidade do formulário **Nova Entrada**.
    - Guardar/limpar os filtros da lista (status, campo de data, período).

Observação:
    Este módulo não renderiza UI; apenas manipula `st.session_state`.
"""

from __future__ import annotations

from typing import Final

import streamlit as st

from services.estoque.filtros import TODOS

# --- Session Keys (constantes) ---
KEY_SHOW_FORM: Final[str] = "show_entrada_form"
KEY_FILTRO_STATUS: Final[str] = "entradas_filtro_status"
KEY_FILTRO_CAMPO: Final[str] = "entradas_filtro_campo"
KEY_FILTRO_INICIO: Final[str] = "entradas_filtro_inicio"
KEY_FILTRO_FIM: Final[str] = "entradas_filtro_fim"

__all__ = [
    "KEY_FILTRO_STATUS",
    "KEY_FILTRO_CAMPO",
    "KEY_FILTRO_INICIO",
    "KEY_FILTRO_FIM",
    "toggle_form",
    "fechar_form",
    "form_visivel",
    "filtros_ativos",
    "limpar_filtros",
]


def _ensure_keys() -> None:
    """Garante a existência das chaves usadas no `session_state`."""
    st.session_state.setdefault(KEY_SHOW_FORM, False)
    st.session_state.setdefault(KEY_FILTRO_STATUS, TODOS)
    st.session_state.setdefault(KEY_FILTRO_CAMPO, "data_nf")
    st.session_state.setdefault(KEY_FILTRO_INICIO, None)
    st.session_state.setdefault(KEY_FILTRO_FIM, None)


def toggle_form() -> None:
    """Alterna a visibilidade do formulário de nova entrada."""
    _ensure_keys()
    st.session_state[KEY_SHOW_FORM] = not st.session_state[KEY_SHOW_FORM]


def fechar_form() -> None:
    _ensure_keys()
    st.session_state[KEY_SHOW_FORM] = False


def form_visivel() -> bool:
    """Retorna True se o formulário estiver visível."""
    _ensure_keys()
    return bool(st.session_state[KEY_SHOW_FORM])


def filtros_ativos() -> bool:
    """True quando há período ou status diferente de `Todos`."""
    _ensure_keys()
    return bool(
        st.session_state[KEY_FILTRO_INICIO]
        or st.session_state[KEY_FILTRO_FIM]
        or st.session_state[KEY_FILTRO_STATUS] != TODOS
    )


def limpar_filtros() -> None:
    """Volta os filtros ao padrão (usado como `on_click` do botão Limpar)."""
    st.session_state[KEY_FILTRO_STATUS] = TODOS
    st.session_state[KEY_FILTRO_CAMPO] = "data_nf"
    st.session_state[KEY_FILTRO_INICIO] = None
    st.session_state[KEY_FILTRO_FIM] = None
