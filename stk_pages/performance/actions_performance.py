# stk_pages/performance/actions_performance.py
"""Ações de negócio para Performance Logística.

- salvar_horarios: grava chegada/entrada/saída de um registro.
- tabela_performance: DataFrame com horários e tempos calculados.
- hora_para_time / time_para_hora: conversões para o `st.time_input`.

Observação:
    Este módulo não renderiza UI.
"""

from __future__ import annotations

from datetime import time
from typing import Any, List, Optional

import pandas as pd

from repository.estoque_repository import EstoqueRepository
from services.estoque.ciclo_status import aplicar_performance
from services.estoque.duracao import calcular_duracao, para_minutos
from services.estoque.tipos import RegistroEstoque

__all__ = ["salvar_horarios", "tabela_performance", "hora_para_time", "time_para_hora"]

SEM_HORA = "--:--"


def hora_para_time(hora: Any) -> Optional[time]:
    """'08:30' -> time(8, 30); None quando vazio ou inválido."""
    total = para_minutos(hora)
    if total is None:
        return None
    return time(total // 60, total % 60)


def time_para_hora(valor: Any) -> Optional[str]:
    """time(8, 30) -> '08:30'; textos são repassados; vazio -> None."""
    if valor is None:
        return None
    if isinstance(valor, time):
        return valor.strftime("%H:%M")
    s = str(valor).strip()
    return s or None


def salvar_horarios(
    repo: EstoqueRepository,
    registro_id: str,
    hora_chegada: Any = None,
    hora_entrada: Any = None,
    hora_saida: Any = None,
) -> str:
    """Grava os horários operacionais do registro (status intocado).

    Raises:
        ValueError: registro inexistente.
    """
    atual = repo.obter(registro_id)
    novo = aplicar_performance(
        atual,
        hora_chegada=time_para_hora(hora_chegada),
        hora_entrada=time_para_hora(hora_entrada),
        hora_saida=time_para_hora(hora_saida),
    )
    repo.substituir(novo)
    return f"Horários da NF {novo.nf} atualizados."


def tabela_performance(registros: List[RegistroEstoque]) -> pd.DataFrame:
    """Uma linha por registro com os três horários e os tempos derivados."""
    linhas = [
        {
            "N.F": r.nf,
            "Veículo": r.placa_veiculo,
            "Hora Chegada": r.hora_chegada or SEM_HORA,
            "Hora Entrada": r.hora_entrada or SEM_HORA,
            "Hora Saída": r.hora_saida or SEM_HORA,
            "Espera": calcular_duracao(r.hora_chegada, r.hora_entrada),
            "Doca": calcular_duracao(r.hora_entrada, r.hora_saida),
            "Tempo Total": calcular_duracao(r.hora_chegada, r.hora_saida),
        }
        for r in registros
    ]
    return pd.DataFrame(
        linhas,
        columns=["N.F", "Veículo", "Hora Chegada", "Hora Entrada", "Hora Saída", "Espera", "Doca", "Tempo Total"],
    )
