"""
Pacote STK Pages
================

Contém as páginas do STK Manager (baseadas em Streamlit).

Subpacotes
----------
- dashboard ....... indicadores e gráficos do pátio
- entradas ........ recebimento e lista filtrável do estoque
- saidas .......... expedição (Embarcado/Devolvido) e histórico
- performance ..... horários de chegada/entrada/saída e tempos
- faturamento ..... documentos fiscais (NF, CTE)
"""

from . import dashboard, entradas, faturamento, performance, saidas

__all__ = [
    "dashboard",
    "entradas",
    "faturamento",
    "performance",
    "saidas",
]
