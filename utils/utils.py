"""
Módulo Utils
============

Funções utilitárias de uso geral no STK Manager.

Inclui:
- Formatação: moeda BR (`formatar_moeda`), percentual (`formatar_percentual`),
  toneladas (`formatar_toneladas`) e wrapper (`formatar_valor`).
- Datas: coerção para `date` (`coerce_data`) e nome do mês em pt-BR
  (`mes_por_extenso`).
- Conversão de textos numéricos BR/EN (`limpar_valor_formatado`).
- Infra/BD: normalização do caminho do banco (`resolve_db_path`).

Observações
-----------
- As funções de formatação aceitam int/float/str/Decimal.
- Valores inválidos são formatados como zero (nunca levantam exceção).
"""

from __future__ import annotations

import os
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

MESES_PT_BR = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


# -----------------------------------------------------------------------------
# Formatação
# -----------------------------------------------------------------------------
def _to_decimal(valor) -> Decimal:
    """Converte `valor` para Decimal, retornando 0 em caso de falha."""
    if isinstance(valor, Decimal):
        return valor
    if valor is None:
        return Decimal("0")
    try:
        return Decimal(str(valor))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def _padrao_br(numero: str) -> str:
    """Troca separadores en_US (1,234.56) pelo padrão BR (1.234,56)."""
    return numero.replace(",", "X").replace(".", ",").replace("X", ".")


def formatar_moeda(valor) -> str:
    """
    Formata um valor numérico no padrão BR: `R$ 1.234,56`.
    """
    v = _to_decimal(valor).quantize(Decimal("0.01"))
    return f"R$ {_padrao_br(f'{v:,.2f}')}"


def formatar_percentual(valor, casas: int = 1, *, fracao: bool = False) -> str:
    """
    Formata um percentual no padrão BR. Ex.: `37.5` -> `37,5%`.

    Parâmetros
    ----------
    valor : Any
        Número já expresso em % (ex.: 37.5), ou fração quando `fracao=True`.
    casas : int
        Casas decimais exibidas (padrão: 1, como a taxa de giro).
    fracao : bool
        Se True, multiplica por 100 antes de formatar (0.375 -> 37,5%).
    """
    v = _to_decimal(valor)
    if fracao:
        v = v * 100
    return f"{_padrao_br(f'{v:,.{casas}f}')}%"


def formatar_toneladas(valor, casas: int = 2) -> str:
    """Formata peso em toneladas: `1234.5` -> `1.234,50 t`."""
    v = _to_decimal(valor)
    return f"{_padrao_br(f'{v:,.{casas}f}')} t"


def formatar_valor(valor, *, tipo: str = "moeda", casas: int = 2) -> str:
    """
    Wrapper para formatação de valores.

    Parâmetros
    ----------
    valor : Any
        Valor numérico (int, float, str, Decimal).
    tipo : str
        "moeda" (padrão), "percentual" ou "toneladas".
    casas : int
        Casas decimais para percentual/toneladas.

    Retorno
    -------
    str
        'R$ 1.234,56', '15,30%' ou '1.234,56 t'.
    """
    t = (tipo or "moeda").strip().lower()
    if t in ("percentual", "porcento", "%"):
        return formatar_percentual(valor, casas=casas)
    if t in ("toneladas", "ton", "t"):
        return formatar_toneladas(valor, casas=casas)
    return formatar_moeda(valor)


def limpar_valor_formatado(valor, *, as_decimal: bool = False):
    """
    Converte textos numéricos (moeda/peso) em número (Decimal ou float).

    Exemplos: "R$ 1.234,56" -> 1234.56; "1,234.56" -> 1234.56;
    "27,5" -> 27.5; "2500" -> 2500.0. O último separador (',' ou '.') é o
    decimal. Valores inválidos retornam 0 (ou Decimal("0")).
    """
    if isinstance(valor, bool):
        valor = int(valor)
    if isinstance(valor, (int, float, Decimal)):
        dec = Decimal(str(valor))
    else:
        txt = re.sub(r"[^\d,.\-+]", "", "" if valor is None else str(valor))
        sinal = "-" if txt.startswith("-") else ""
        txt = txt.lstrip("+-").replace("+", "").replace("-", "")

        decimal_sep = max(txt.rfind(","), txt.rfind("."))
        if decimal_sep >= 0:
            inteiro = re.sub(r"[,.]", "", txt[:decimal_sep])
            txt = f"{inteiro}.{txt[decimal_sep + 1:]}"
        try:
            dec = Decimal(sinal + txt)
        except InvalidOperation:
            dec = Decimal("0")

    return dec if as_decimal else float(dec)


# -----------------------------------------------------------------------------
# Datas
# -----------------------------------------------------------------------------
_FORMATOS_DATA_BR = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y")


def coerce_data(value=None) -> date:
    """
    Converte `value` em `date` (None/vazio = hoje).

    Aceita date, datetime e textos `YYYY-MM-DD`, `DD/MM/YYYY` ou `DD-MM-YYYY`.
    Levanta ValueError para qualquer outra coisa.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    txt = "" if value is None else str(value).strip()
    if not txt:
        return date.today()
    for fmt in _FORMATOS_DATA_BR:
        try:
            return datetime.strptime(txt, fmt).date()
        except ValueError:
            pass
    raise ValueError(f"Data inválida: {value!r}")


def mes_por_extenso(value=None) -> str:
    """Nome do mês em pt-BR (minúsculo) para a data informada (padrão: hoje)."""
    return MESES_PT_BR[coerce_data(value).month - 1]


# -----------------------------------------------------------------------------
# Infraestrutura / Banco
# -----------------------------------------------------------------------------
_ATRIBUTOS_CAMINHO = ("db_path", "caminho_banco", "database")


def resolve_db_path(obj) -> str:
    """
    Caminho do banco como texto.

    Aceita str/PathLike ou um objeto de configuração com um dos atributos
    `db_path`, `caminho_banco` ou `database`.

    Raises:
        TypeError: nada disso foi informado.
    """
    if isinstance(obj, (str, os.PathLike)):
        return os.fspath(obj)
    for attr in _ATRIBUTOS_CAMINHO:
        caminho = getattr(obj, attr, None)
        if caminho:
            return os.fspath(caminho)
    raise TypeError(f"Caminho do banco inválido: {type(obj).__name__}.")
