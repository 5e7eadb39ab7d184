"""
Cálculo de duração entre dois horários (HH:MM, 24h) para o log de performance.

Nunca levanta exceção: entrada ausente, malformada ou fim antes do início
(virada de meia-noite não é suportada) resulta em `"-"`.
"""

from __future__ import annotations

import re
from typing import Any, Optional

INDISPONIVEL = "-"

# 'HH:MM' ou 'HH:MM:SS' (segundos do navegador são validados e descartados)
_HORA_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")


def para_minutos(hora: Any) -> Optional[int]:
    """'08:30' -> 510; None quando ausente ou inválido."""
    if hora is None:
        return None
    m = _HORA_RE.match(str(hora))
    if not m:
        return None
    h, mi = int(m.group(1)), int(m.group(2))
    seg = int(m.group(3)) if m.group(3) is not None else 0
    if h > 23 or mi > 59 or seg > 59:
        return None
    return h * 60 + mi


def minutos_entre(inicio: Any, fim: Any) -> Optional[int]:
    """Minutos de `inicio` a `fim`; None se indisponível ou negativo."""
    a = para_minutos(inicio)
    b = para_minutos(fim)
    if a is None or b is None:
        return None
    total = b - a
    if total < 0:
        return None
    return total


def formatar_minutos(total: Optional[int]) -> str:
    """90 -> '1h 30m'; None -> '-'."""
    if total is None or total < 0:
        return INDISPONIVEL
    horas, minutos = divmod(int(total), 60)
    return f"{horas}h {minutos}m"


def calcular_duracao(inicio: Any, fim: Any) -> str:
    """Duração formatada `"{h}h {m}m"` ou `"-"`.

    Exemplos:
        >>> calcular_duracao("08:00", "10:30")
        '2h 30m'
        >>> calcular_duracao("10:00", "09:00")
        '-'
    """
    return formatar_minutos(minutos_entre(inicio, fim))


__all__ = ["INDISPONIVEL", "para_minutos", "minutos_entre", "formatar_minutos", "calcular_duracao"]
