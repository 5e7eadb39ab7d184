"""
Filtros da lista de Entradas (registros no pátio).

Regras:
    - Status: `Todos`, `Estoque` ou `Rejeitado` (igualdade exata).
    - Período: limites inclusivos sobre `data_nf` ou `data_descarga`.
      Registro sem a data escolhida NUNCA é excluído pelo período.
    - Status e período são combinados com E.
    - Sem filtros: devolve todos os registros no pátio, na ordem original.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from shared.ids import normalizar_data, sanitize

from .ciclo_status import esta_em_estoque
from .tipos import RegistroEstoque, StatusEstoque

TODOS = "Todos"
FILTROS_STATUS = (TODOS, StatusEstoque.ESTOQUE.value, StatusEstoque.REJEITADO.value)

# campo de data -> rótulo exibido no filtro
CAMPOS_DATA = {
    "data_nf": "Data da N.F",
    "data_descarga": "Data de Descarga",
}


def _limite(valor: Any, rotulo: str) -> Optional[str]:
    if valor is None or (isinstance(valor, str) and valor.strip() == ""):
        return None
    data = normalizar_data(valor)
    if data is None:
        raise ValueError(f"{rotulo} inválida: {valor!r}.")
    return data


def filtrar_estoque(
    registros: Iterable[RegistroEstoque],
    status: Any = TODOS,
    campo_data: str = "data_nf",
    inicio: Any = None,
    fim: Any = None,
) -> List[RegistroEstoque]:
    """Filtra os registros no pátio por status e período.

    Args:
        registros: Conjunto completo (registros que já saíram são descartados).
        status: `Todos`, `Estoque` ou `Rejeitado` (string ou enum).
        campo_data: `data_nf` ou `data_descarga`.
        inicio: Data inicial inclusiva (date ou texto), opcional.
        fim: Data final inclusiva (date ou texto), opcional.

    Raises:
        ValueError: status/campo desconhecido ou data de limite inválida.
    """
    status_txt = status.value if isinstance(status, StatusEstoque) else sanitize(status) or TODOS
    if status_txt not in FILTROS_STATUS:
        raise ValueError(f"Filtro de status inválido: {status!r} (válidos: {', '.join(FILTROS_STATUS)}).")
    if campo_data not in CAMPOS_DATA:
        raise ValueError(f"Campo de data inválido: {campo_data!r}.")

    data_ini = _limite(inicio, "Data inicial")
    data_fim = _limite(fim, "Data final")

    out: List[RegistroEstoque] = []
    for r in registros:
        if not esta_em_estoque(r.status):
            continue
        if status_txt != TODOS and r.status.value != status_txt:
            continue

        data_registro = getattr(r, campo_data) or None
        if data_registro is None:
            out.append(r)
            continue
        # ISO 'YYYY-MM-DD' compara corretamente como texto
        if data_ini and data_registro < data_ini:
            continue
        if data_fim and data_registro > data_fim:
            continue
        out.append(r)
    return out


def buscar_por_nf(registros: Iterable[RegistroEstoque], termo: Any) -> List[RegistroEstoque]:
    """Busca por número da NF ou chave de acesso (trecho, sem diferenciar maiúsculas)."""
    t = sanitize(termo).lower()
    if not t:
        return list(registros)
    return [r for r in registros if t in r.nf.lower() or t in r.chave_acesso_nf.lower()]


__all__ = ["TODOS", "FILTROS_STATUS", "CAMPOS_DATA", "filtrar_estoque", "buscar_por_nf"]
