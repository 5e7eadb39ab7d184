"""
Resumo de performance logística (cartões da página Performance).

- `media_permanencia`: média do tempo chegada -> saída da doca, apenas sobre
  registros com duração disponível.
- `em_operacao`: chegada registrada e saída ainda não.
- `cargas_do_dia`: descargas na data informada.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

from shared.ids import normalizar_data
from utils.utils import coerce_data

from .duracao import INDISPONIVEL, formatar_minutos, minutos_entre
from .tipos import RegistroEstoque


@dataclass(frozen=True)
class ResumoPerformance:
    media_permanencia: str = INDISPONIVEL
    cargas_do_dia: int = 0
    em_operacao: int = 0


def media_permanencia(registros: Iterable[RegistroEstoque]) -> str:
    """Média chegada -> saída formatada (`"4h 15m"`), ou `"-"` sem dados."""
    duracoes: List[int] = []
    for r in registros:
        total = minutos_entre(r.hora_chegada, r.hora_saida)
        if total is not None:
            duracoes.append(total)
    if not duracoes:
        return INDISPONIVEL
    return formatar_minutos(round(sum(duracoes) / len(duracoes)))


def em_operacao(registros: Iterable[RegistroEstoque]) -> int:
    return sum(1 for r in registros if r.hora_chegada and not r.hora_saida)


def cargas_do_dia(registros: Iterable[RegistroEstoque], dia: Any = None) -> int:
    """Quantidade de registros com data de descarga igual a `dia` (padrão: hoje)."""
    alvo = coerce_data(dia).strftime("%Y-%m-%d")
    return sum(1 for r in registros if normalizar_data(r.data_descarga) == alvo)


def resumo_performance(registros: Iterable[RegistroEstoque], dia: Any = None) -> ResumoPerformance:
    registros = list(registros)
    return ResumoPerformance(
        media_permanencia=media_permanencia(registros),
        cargas_do_dia=cargas_do_dia(registros, dia),
        em_operacao=em_operacao(registros),
    )


__all__ = ["ResumoPerformance", "media_permanencia", "em_operacao", "cargas_do_dia", "resumo_performance"]
