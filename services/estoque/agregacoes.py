"""
Agregações do Dashboard
=======================

Funções puras que calculam os indicadores do Dashboard a partir do conjunto
atual de registros. Tudo é recalculado a cada leitura (sem cache), e nenhuma
função altera a lista recebida.

Indicadores
-----------
- `total_em_estoque` / `peso_em_estoque`: registros Estoque + Rejeitado.
- `total_saidas`: registros Embarcado + Devolvido.
- `taxa_giro`: % de registros que já saíram (1 casa decimal; 0 sem registros).
- `agrupar_por`: contagem e peso por valor de um campo (apenas no pátio),
  ordenado por contagem decrescente, empate na ordem de aparição.
- `status_por_destino`: Estoque x Rejeitado por destino (top N).
- `resumo_dashboard`: todos os indicadores num único objeto.

O campo de agrupamento é escolhido por um acessor tipado
(`Callable[[RegistroEstoque], object]`), ex.: `POR_FORNECEDOR`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .ciclo_status import esta_em_estoque, saiu
from .tipos import RegistroEstoque, StatusEstoque

NAO_INFORMADO = "Não Informado"

Seletor = Callable[[RegistroEstoque], object]


def POR_FORNECEDOR(r: RegistroEstoque) -> object:
    return r.fornecedor


def POR_DESTINO(r: RegistroEstoque) -> object:
    return r.destino


def POR_PRODUTO(r: RegistroEstoque) -> object:
    return r.descricao_produto


@dataclass(frozen=True)
class GrupoResumo:
    """Uma barra do gráfico: valor do campo, quantidade e peso somado."""

    chave: str
    quantidade: int
    peso: float


@dataclass(frozen=True)
class DestinoStatus:
    """Contagem empilhada por destino."""

    destino: str
    estoque: int
    rejeitado: int

    @property
    def total(self) -> int:
        return self.estoque + self.rejeitado


@dataclass(frozen=True)
class ResumoDashboard:
    total_em_estoque: int = 0
    peso_em_estoque: float = 0.0
    total_saidas: int = 0
    taxa_giro: float = 0.0
    por_fornecedor: List[GrupoResumo] = field(default_factory=list)
    por_destino: List[GrupoResumo] = field(default_factory=list)
    por_produto: List[GrupoResumo] = field(default_factory=list)
    status_por_destino: List[DestinoStatus] = field(default_factory=list)


# ---------------- Helpers ----------------
def _em_estoque(registros: Iterable[RegistroEstoque]) -> List[RegistroEstoque]:
    return [r for r in registros if esta_em_estoque(r.status)]


def _peso(r: RegistroEstoque) -> float:
    return float(r.tonelada or 0.0)


def _chave_grupo(valor: object) -> str:
    """Valor do campo como texto; ausente/vazio vira `Não Informado`."""
    if valor is None or valor == "":
        return NAO_INFORMADO
    return str(valor)


def _truncar(itens: list, limite: Optional[int]) -> list:
    if limite is None:
        return itens
    return itens[: max(0, int(limite))]


# ---------------- Indicadores ----------------
def total_em_estoque(registros: Iterable[RegistroEstoque]) -> int:
    return len(_em_estoque(registros))


def peso_em_estoque(registros: Iterable[RegistroEstoque]) -> float:
    """Soma das toneladas no pátio (peso ausente conta como zero)."""
    return sum((_peso(r) for r in _em_estoque(registros)), 0.0)


def total_saidas(registros: Iterable[RegistroEstoque]) -> int:
    return sum(1 for r in registros if saiu(r.status))


def taxa_giro(registros: Sequence[RegistroEstoque]) -> float:
    """% de saídas sobre (no pátio + saídas), 1 casa decimal; 0.0 se não houver registros."""
    em_estoque = total_em_estoque(registros)
    saidas = total_saidas(registros)
    denominador = em_estoque + saidas
    if denominador == 0:
        return 0.0
    return round(saidas / denominador * 100, 1)


def agrupar_por(
    registros: Iterable[RegistroEstoque],
    seletor: Seletor,
    limite: Optional[int] = None,
) -> List[GrupoResumo]:
    """Agrupa os registros no pátio pelo valor devolvido por `seletor`.

    Args:
        registros: Conjunto completo (registros que já saíram são ignorados).
        seletor: Acessor do campo de agrupamento.
        limite: Top-N opcional (o Dashboard usa 5).

    Returns:
        Lista ordenada por quantidade decrescente; empates mantêm a ordem em
        que cada chave apareceu pela primeira vez.
    """
    grupos: Dict[str, List[float]] = {}
    for r in _em_estoque(registros):
        chave = _chave_grupo(seletor(r))
        acc = grupos.setdefault(chave, [0, 0.0])
        acc[0] += 1
        acc[1] += _peso(r)

    itens = [GrupoResumo(chave=k, quantidade=int(v[0]), peso=round(v[1], 2)) for k, v in grupos.items()]
    # sorted é estável: empates ficam na ordem de inserção do dict
    itens = sorted(itens, key=lambda g: g.quantidade, reverse=True)
    return _truncar(itens, limite)


def status_por_destino(
    registros: Iterable[RegistroEstoque],
    limite: Optional[int] = 6,
) -> List[DestinoStatus]:
    """Estoque x Rejeitado por destino, top N pela soma dos dois."""
    contagem: Dict[str, List[int]] = {}
    for r in _em_estoque(registros):
        acc = contagem.setdefault(_chave_grupo(r.destino), [0, 0])
        if r.status == StatusEstoque.ESTOQUE:
            acc[0] += 1
        else:
            acc[1] += 1

    itens = [DestinoStatus(destino=k, estoque=v[0], rejeitado=v[1]) for k, v in contagem.items()]
    itens = sorted(itens, key=lambda d: d.total, reverse=True)
    return _truncar(itens, limite)


def resumo_dashboard(
    registros: Sequence[RegistroEstoque],
    limite: Optional[int] = 5,
    limite_destinos: Optional[int] = 6,
) -> ResumoDashboard:
    """Todos os indicadores do Dashboard (zeros/listas vazias sem registros)."""
    registros = list(registros)
    return ResumoDashboard(
        total_em_estoque=total_em_estoque(registros),
        peso_em_estoque=peso_em_estoque(registros),
        total_saidas=total_saidas(registros),
        taxa_giro=taxa_giro(registros),
        por_fornecedor=agrupar_por(registros, POR_FORNECEDOR, limite),
        por_destino=agrupar_por(registros, POR_DESTINO, limite),
        por_produto=agrupar_por(registros, POR_PRODUTO, limite),
        status_por_destino=status_por_destino(registros, limite_destinos),
    )


# ---------------- DataFrames (gráficos) ----------------
def grupos_para_dataframe(grupos: Sequence[GrupoResumo], rotulo: str = "Grupo") -> pd.DataFrame:
    """DataFrame indexado pela chave, colunas `Unidades` e `Toneladas`."""
    df = pd.DataFrame(
        {
            rotulo: [g.chave for g in grupos],
            "Unidades": [g.quantidade for g in grupos],
            "Toneladas": [g.peso for g in grupos],
        }
    )
    return df.set_index(rotulo)


def destinos_para_dataframe(itens: Sequence[DestinoStatus]) -> pd.DataFrame:
    """DataFrame indexado por destino, colunas `Estoque` e `Rejeitado` (empilháveis)."""
    df = pd.DataFrame(
        {
            "Destino": [d.destino for d in itens],
            StatusEstoque.ESTOQUE.value: [d.estoque for d in itens],
            StatusEstoque.REJEITADO.value: [d.rejeitado for d in itens],
        }
    )
    return df.set_index("Destino")


__all__ = [
    "NAO_INFORMADO",
    "POR_FORNECEDOR",
    "POR_DESTINO",
    "POR_PRODUTO",
    "GrupoResumo",
    "DestinoStatus",
    "ResumoDashboard",
    "total_em_estoque",
    "peso_em_estoque",
    "total_saidas",
    "taxa_giro",
    "agrupar_por",
    "status_por_destino",
    "resumo_dashboard",
    "grupos_para_dataframe",
    "destinos_para_dataframe",
]
