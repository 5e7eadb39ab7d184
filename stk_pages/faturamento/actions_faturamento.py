# stk_pages/faturamento/actions_faturamento.py
"""Ações de negócio para Faturamento.

- salvar_faturamento: grava emissão NF, CTE Intertex (+ emissão) e CTE transportador.
- tabela_faturamento: DataFrame de conferência.

Observação:
    Este módulo não renderiza UI.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

import pandas as pd

from repository.estoque_repository import EstoqueRepository
from services.estoque.ciclo_status import aplicar_faturamento
from services.estoque.tipos import RegistroEstoque
from shared.ids import normalizar_data

__all__ = ["salvar_faturamento", "tabela_faturamento", "data_para_date"]


def data_para_date(valor: Any) -> Optional[date]:
    """'2024-01-05' -> date(2024, 1, 5); None quando vazio/inválido."""
    iso = normalizar_data(valor)
    return date.fromisoformat(iso) if iso else None


def salvar_faturamento(repo: EstoqueRepository, registro_id: str, payload: Dict[str, Any]) -> str:
    """Grava os campos de faturamento do registro (status intocado).

    Args:
        repo: Repositório de estoque.
        registro_id: ID do registro.
        payload: `data_emissao_nf`, `cte_intertex`, `data_emissao_cte_intertex`,
            `cte_transportador` (ausente/vazio limpa o campo).

    Raises:
        ValueError: registro inexistente ou data inválida.
    """
    atual = repo.obter(registro_id)
    novo = aplicar_faturamento(
        atual,
        data_emissao_nf=payload.get("data_emissao_nf"),
        cte_intertex=payload.get("cte_intertex"),
        data_emissao_cte_intertex=payload.get("data_emissao_cte_intertex"),
        cte_transportador=payload.get("cte_transportador"),
    )
    repo.substituir(novo)
    return f"Faturamento da NF {novo.nf} atualizado."


def tabela_faturamento(registros: List[RegistroEstoque]) -> pd.DataFrame:
    linhas = [
        {
            "N.F": r.nf,
            "Valor (R$)": r.valor,
            "Emissão NF": r.data_emissao_nf or "-",
            "CTE Intertex": r.cte_intertex or "-",
            "Emissão CTE": r.data_emissao_cte_intertex or "-",
            "CTE Transportador": r.cte_transportador or "-",
            "Status": r.status.value,
        }
        for r in registros
    ]
    return pd.DataFrame(
        linhas,
        columns=["N.F", "Valor (R$)", "Emissão NF", "CTE Intertex", "Emissão CTE", "CTE Transportador", "Status"],
    )
