"""
Pacote Estoque
==============

Regras de domínio dos registros de estoque. Nada aqui grava em disco: as
funções recebem um snapshot da lista de registros (ou um registro) e
devolvem valores novos.

Módulos
-------
- tipos .......... `RegistroEstoque`, `StatusEstoque` e mapeamento JSON.
- ciclo_status ... classificação e transições de status, patches.
- agregacoes ..... indicadores e agrupamentos do Dashboard.
- duracao ........ duração entre horários (HH:MM).
- filtros ........ filtros da lista de Entradas.
- performance .... cartões da página Performance.
"""

from .tipos import RegistroEstoque, StatusEstoque, STATUS_EM_ESTOQUE, STATUS_SAIDA, coerce_status
from .ciclo_status import (
    alterar_status,
    aplicar_faturamento,
    aplicar_performance,
    criar_registro,
    esta_em_estoque,
    registrar_saida,
    saiu,
)
from .agregacoes import (
    NAO_INFORMADO,
    POR_DESTINO,
    POR_FORNECEDOR,
    POR_PRODUTO,
    DestinoStatus,
    GrupoResumo,
    ResumoDashboard,
    agrupar_por,
    peso_em_estoque,
    resumo_dashboard,
    status_por_destino,
    taxa_giro,
    total_em_estoque,
    total_saidas,
)
from .duracao import INDISPONIVEL, calcular_duracao, minutos_entre
from .filtros import TODOS, buscar_por_nf, filtrar_estoque
from .performance import ResumoPerformance, resumo_performance

__all__ = [
    "RegistroEstoque",
    "StatusEstoque",
    "STATUS_EM_ESTOQUE",
    "STATUS_SAIDA",
    "coerce_status",
    "alterar_status",
    "aplicar_faturamento",
    "aplicar_performance",
    "criar_registro",
    "esta_em_estoque",
    "registrar_saida",
    "saiu",
    "NAO_INFORMADO",
    "POR_DESTINO",
    "POR_FORNECEDOR",
    "POR_PRODUTO",
    "DestinoStatus",
    "GrupoResumo",
    "ResumoDashboard",
    "agrupar_por",
    "peso_em_estoque",
    "resumo_dashboard",
    "status_por_destino",
    "taxa_giro",
    "total_em_estoque",
    "total_saidas",
    "INDISPONIVEL",
    "calcular_duracao",
    "minutos_entre",
    "TODOS",
    "buscar_por_nf",
    "filtrar_estoque",
    "ResumoPerformance",
    "resumo_performance",
]
