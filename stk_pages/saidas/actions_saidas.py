# stk_pages/saidas/actions_saidas.py
"""Ações de negócio para Saídas (Expedição).

- carregar_pendentes: registros no pátio aguardando saída.
- carregar_expedidos: histórico (Embarcado/Devolvido).
- salvar_saida: registra a saída de um registro.
- tabela_expedidos: DataFrame do histórico.

Observação:
    Este módulo não renderiza UI.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from repository.estoque_repository import EstoqueRepository
from services.estoque.ciclo_status import esta_em_estoque, registrar_saida, saiu
from services.estoque.tipos import RegistroEstoque, StatusEstoque

__all__ = [
    "OPCOES_STATUS_SAIDA",
    "carregar_pendentes",
    "carregar_expedidos",
    "salvar_saida",
    "tabela_expedidos",
]

OPCOES_STATUS_SAIDA = [StatusEstoque.EMBARCADO.value, StatusEstoque.DEVOLVIDO.value]


def carregar_pendentes(repo: EstoqueRepository) -> List[RegistroEstoque]:
    return [r for r in repo.listar() if esta_em_estoque(r.status)]


def carregar_expedidos(repo: EstoqueRepository) -> List[RegistroEstoque]:
    return [r for r in repo.listar() if saiu(r.status)]


def salvar_saida(repo: EstoqueRepository, payload: Dict[str, Any]) -> str:
    """Registra a saída do registro selecionado.

    Args:
        repo: Repositório de estoque.
        payload: `selected_id`, `status`, `data_faturamento_vli`, `cte_vli`.

    Returns:
        Mensagem de sucesso.

    Raises:
        ValueError: ID ausente/inexistente, status ou data VLI inválidos.
    """
    if not payload or not payload.get("selected_id"):
        raise ValueError("Payload da saída inválido: ID ausente.")

    atual = repo.obter(str(payload["selected_id"]))
    novo = registrar_saida(
        atual,
        status=payload.get("status") or StatusEstoque.EMBARCADO,
        data_faturamento_vli=payload.get("data_faturamento_vli"),
        cte_vli=payload.get("cte_vli"),
    )
    repo.substituir(novo)
    return f"Saída da NF {novo.nf} registrada ({novo.status.value})."


def tabela_expedidos(registros: List[RegistroEstoque]) -> pd.DataFrame:
    linhas = [
        {
            "N.F": r.nf,
            "Data VLI": r.data_faturamento_vli or "-",
            "CTE VLI": r.cte_vli or "-",
            "Status": r.status.value,
        }
        for r in registros
    ]
    return pd.DataFrame(linhas, columns=["N.F", "Data VLI", "CTE VLI", "Status"])
