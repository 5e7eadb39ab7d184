"""
STK Manager: Main App
=====================

Ponto de entrada do aplicativo Streamlit do STK Manager (controle de estoque
de pátio: entradas, saídas, performance logística e faturamento).
"""

from __future__ import annotations

import importlib
import inspect
import logging
import logging.config
from datetime import datetime

import streamlit as st

import config
from repository.estoque_repository import EstoqueRepository


# ======================================================================================
# Configuração inicial da página
# ======================================================================================
st.set_page_config(page_title="STK Manager", layout="wide")

config.garantir_diretorios()
logging.config.dictConfig(config.LOGGING_CONFIG)
logger = logging.getLogger(__name__)

# Repositório (carregado do disco a cada execução do script)
try:
    repo = EstoqueRepository(config.CAMINHO_BANCO, chave=config.CHAVE_ARMAZENAMENTO)
except ValueError as e:
    logger.error("Falha ao carregar o estoque: %s", e)
    st.error(f"❌ Não foi possível carregar os dados salvos: {e}")
    st.stop()


# ======================================================================================
# Estado de sessão
# ======================================================================================
if "pagina_atual" not in st.session_state:
    st.session_state.pagina_atual = "📊 Dashboard"


# ======================================================================================
# Helper de roteamento: importa módulo e chama render_<tail>/render
# ======================================================================================
def _call_page(module_path: str):
    """
    Importa o módulo indicado e chama a primeira função encontrada entre
    `render_<tail>`, `render_<parent>` e `render`.

    Parâmetros fornecidos por nome quando a função os aceita:
      - `repo`: repositório de estoque da execução atual;
      - demais parâmetros: valor do session_state, se existir.
    """
    try:
        mod = importlib.import_module(module_path)
    except Exception as e:
        st.error(f"Falha ao importar módulo '{module_path}': {e}")
        return

    def _invoke(fn):
        kwargs = {}
        for p in inspect.signature(fn).parameters.values():
            if p.name == "repo":
                kwargs["repo"] = repo
            elif p.name in st.session_state:
                kwargs[p.name] = st.session_state[p.name]
        return fn(**kwargs)

    seg = module_path.rsplit(".", 1)[-1]                 # ex.: 'page_saidas'
    parent = module_path.rsplit(".", 2)[-2] if "." in module_path else ""
    tail = seg.split("_", 1)[1] if "_" in seg else seg   # ex.: 'saidas'

    for fn_name in (f"render_{tail}", f"render_{parent}", "render"):
        fn = getattr(mod, fn_name, None)
        if callable(fn):
            try:
                return _invoke(fn)
            except Exception as e:
                logger.exception("Erro ao executar %s.%s", module_path, fn_name)
                st.error(f"Erro ao executar {module_path}.{fn_name}: {e}")
                return

    st.warning(f"O módulo '{module_path}' não possui função compatível (render_*).")


# ======================================================================================
# Sidebar: navegação
# ======================================================================================
st.sidebar.markdown("## 🧭 Menu de Navegação")

for rotulo in ("📊 Dashboard", "📥 Entradas", "🚚 Saídas", "⏱️ Performance", "🧾 Faturamento"):
    if st.sidebar.button(rotulo, use_container_width=True):
        st.session_state.pagina_atual = rotulo
        st.rerun()

st.sidebar.markdown("---")

# Backup (exportar / restaurar a coleção inteira em JSON)
with st.sidebar.expander("💾 Backup", expanded=False):
    st.download_button(
        "⬇️ Exportar JSON",
        data=repo.exportar_json().encode("utf-8"),
        file_name=f"stk_backup_{datetime.now():%Y%m%d_%H%M}.json",
        mime="application/json",
        use_container_width=True,
    )
    arquivo = st.file_uploader("Arquivo de backup", type=["json"], key="backup_upload")
    if arquivo is not None and st.button("⬆️ Restaurar", use_container_width=True):
        try:
            qtd = repo.importar_json(arquivo.getvalue().decode("utf-8"))
            st.session_state["msg_ok"] = f"Backup restaurado: {qtd} registro(s)."
            st.session_state["msg_ok_type"] = "success"
            st.rerun()
        except (ValueError, UnicodeDecodeError) as e:
            st.warning(f"⚠️ Backup inválido: {e}")

st.sidebar.caption(f"{len(repo)} registro(s) salvos")


# ======================================================================================
# Título principal + mensagem pendente
# ======================================================================================
st.title(st.session_state.pagina_atual)

msg = st.session_state.pop("msg_ok", None)
if msg:
    tipo = st.session_state.pop("msg_ok_type", "success")
    getattr(st, tipo, st.success)(msg)


# ======================================================================================
# Roteamento
# ======================================================================================
ROTAS = {
    "📊 Dashboard": "stk_pages.dashboard.dashboard",
    "📥 Entradas": "stk_pages.entradas.page_entradas",
    "🚚 Saídas": "stk_pages.saidas.page_saidas",
    "⏱️ Performance": "stk_pages.performance.page_performance",
    "🧾 Faturamento": "stk_pages.faturamento.page_faturamento",
}

pagina = st.session_state.get("pagina_atual", "📊 Dashboard")

if pagina in ROTAS:
    _call_page(ROTAS[pagina])
else:
    st.warning("Página não encontrada.")
