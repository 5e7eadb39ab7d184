"""
Módulo Tipos (Estoque)
======================

Define o registro de estoque (`RegistroEstoque`), o enum de status e o
mapeamento entre atributos Python e as chaves JSON persistidas.

Status
------
- `Estoque` / `Rejeitado`: registro fisicamente no pátio.
- `Embarcado` / `Devolvido`: registro que já saiu.

Grupos de campos
----------------
- Entrada: fixados na criação (NF, peso, valor, fornecedor, destino...).
- Saída: data de faturamento VLI e CTE VLI.
- Performance: horários de chegada, entrada e saída da doca.
- Faturamento: emissão da NF, CTE Intertex (e sua emissão) e CTE do transportador.

As chaves JSON seguem o formato gravado pela versão web no `localStorage`
(`chaveAcessoNF`, `dataDescarga`...), o que permite importar esses backups.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Final, Optional

from shared.ids import normalizar_data, sanitize
from utils.utils import limpar_valor_formatado


class StatusEstoque(str, Enum):
    """Status do ciclo de vida de um registro."""

    ESTOQUE = "Estoque"
    REJEITADO = "Rejeitado"
    EMBARCADO = "Embarcado"
    DEVOLVIDO = "Devolvido"

    def __str__(self) -> str:
        return self.value


STATUS_EM_ESTOQUE: Final[frozenset] = frozenset({StatusEstoque.ESTOQUE, StatusEstoque.REJEITADO})
STATUS_SAIDA: Final[frozenset] = frozenset({StatusEstoque.EMBARCADO, StatusEstoque.DEVOLVIDO})

CAMPOS_ENTRADA: Final[tuple] = (
    "mes",
    "chave_acesso_nf",
    "nf",
    "tonelada",
    "valor",
    "descricao_produto",
    "data_nf",
    "data_descarga",
    "fornecedor",
    "placa_veiculo",
    "container",
    "destino",
)
CAMPOS_SAIDA: Final[tuple] = ("data_faturamento_vli", "cte_vli")
CAMPOS_PERFORMANCE: Final[tuple] = ("hora_chegada", "hora_entrada", "hora_saida")
CAMPOS_FATURAMENTO: Final[tuple] = (
    "data_emissao_nf",
    "cte_intertex",
    "data_emissao_cte_intertex",
    "cte_transportador",
)
CAMPOS_OPCIONAIS: Final[tuple] = CAMPOS_SAIDA + CAMPOS_PERFORMANCE + CAMPOS_FATURAMENTO
# gravados sempre como 'YYYY-MM-DD'
CAMPOS_DATA_ISO: Final[tuple] = (
    "data_nf",
    "data_descarga",
    "data_faturamento_vli",
    "data_emissao_nf",
    "data_emissao_cte_intertex",
)

# atributo Python -> chave JSON
CHAVES_JSON: Final[Dict[str, str]] = {
    "id": "id",
    "status": "status",
    "mes": "mes",
    "chave_acesso_nf": "chaveAcessoNF",
    "nf": "nf",
    "tonelada": "tonelada",
    "valor": "valor",
    "descricao_produto": "descricaoProduto",
    "data_nf": "dataNF",
    "data_descarga": "dataDescarga",
    "fornecedor": "fornecedor",
    "placa_veiculo": "placaVeiculo",
    "container": "container",
    "destino": "destino",
    "data_faturamento_vli": "dataFaturamentoVLI",
    "cte_vli": "cteVLI",
    "hora_chegada": "horaChegada",
    "hora_entrada": "horaEntrada",
    "hora_saida": "horaSaida",
    "data_emissao_nf": "dataEmissaoNF",
    "cte_intertex": "cteIntertex",
    "data_emissao_cte_intertex": "dataEmissaoCTEIntertex",
    "cte_transportador": "cteTransportador",
}


def coerce_status(status: Any) -> StatusEstoque:
    """Converte string/enum em `StatusEstoque`.

    Raises:
        ValueError: status fora dos quatro valores definidos.
    """
    if isinstance(status, StatusEstoque):
        return status
    try:
        return StatusEstoque(str(status).strip())
    except ValueError:
        validos = ", ".join(s.value for s in StatusEstoque)
        raise ValueError(f"Status inválido: {status!r} (válidos: {validos}).") from None


def _data_iso(valor: Any, registro_id: Any, chave: str) -> Optional[str]:
    """Data persistida -> 'YYYY-MM-DD'; vazio vira None, texto inválido é erro."""
    if sanitize(valor) == "":
        return None
    data = normalizar_data(valor)
    if data is None:
        raise ValueError(f"Registro {registro_id}: data inválida em '{chave}' ({valor!r}).")
    return data


@dataclass(frozen=True)
class RegistroEstoque:
    """Um lote/carga física, do recebimento até a destinação final."""

    id: str
    status: StatusEstoque
    # Entrada
    mes: str = ""
    chave_acesso_nf: str = ""
    nf: str = ""
    tonelada: float = 0.0
    valor: float = 0.0
    descricao_produto: str = ""
    data_nf: str = ""
    data_descarga: str = ""
    fornecedor: str = ""
    placa_veiculo: str = ""
    container: str = ""
    destino: str = ""
    # Saída
    data_faturamento_vli: Optional[str] = None
    cte_vli: Optional[str] = None
    # Performance
    hora_chegada: Optional[str] = None
    hora_entrada: Optional[str] = None
    hora_saida: Optional[str] = None
    # Faturamento
    data_emissao_nf: Optional[str] = None
    cte_intertex: Optional[str] = None
    data_emissao_cte_intertex: Optional[str] = None
    cte_transportador: Optional[str] = None

    def __post_init__(self) -> None:
        # dataclass congelada: normalização via object.__setattr__
        object.__setattr__(self, "status", coerce_status(self.status))
        for campo in ("tonelada", "valor"):
            object.__setattr__(self, campo, float(limpar_valor_formatado(getattr(self, campo))))
        for campo in CAMPOS_OPCIONAIS:
            v = getattr(self, campo)
            if v is not None and str(v).strip() == "":
                object.__setattr__(self, campo, None)

    # ---------------- serialização ----------------
    def para_dict(self) -> Dict[str, Any]:
        """Dict JSON-serializável (chaves camelCase); opcionais ausentes são omitidos."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            v = getattr(self, f.name)
            if v is None:
                continue
            if isinstance(v, StatusEstoque):
                v = v.value
            out[CHAVES_JSON[f.name]] = v
        return out

    @classmethod
    def de_dict(cls, dados: Dict[str, Any]) -> "RegistroEstoque":
        """Reconstrói um registro a partir do dict persistido.

        Tolerante a números gravados como texto e a campos de entrada ausentes.
        Datas em formato BR (`05/01/2024`) são convertidas para `YYYY-MM-DD`.

        Raises:
            ValueError: `id` ausente, status inválido ou data não interpretável.
        """
        if not isinstance(dados, dict):
            raise ValueError(f"Registro inválido: esperado objeto, recebido {type(dados).__name__}.")
        rid = dados.get("id")
        if rid is None or str(rid).strip() == "":
            raise ValueError("Registro sem 'id'.")

        kwargs: Dict[str, Any] = {"id": str(rid), "status": coerce_status(dados.get("status"))}
        for attr, chave in CHAVES_JSON.items():
            if attr in ("id", "status"):
                continue
            v = dados.get(chave)
            if attr in ("tonelada", "valor"):
                kwargs[attr] = limpar_valor_formatado(v)
            elif attr in CAMPOS_DATA_ISO:
                data = _data_iso(v, rid, chave)
                kwargs[attr] = data if (data or attr in CAMPOS_OPCIONAIS) else ""
            elif attr in CAMPOS_OPCIONAIS:
                kwargs[attr] = None if v is None else str(v)
            else:
                kwargs[attr] = "" if v is None else str(v)
        return cls(**kwargs)


__all__ = [
    "StatusEstoque",
    "STATUS_EM_ESTOQUE",
    "STATUS_SAIDA",
    "CAMPOS_ENTRADA",
    "CAMPOS_SAIDA",
    "CAMPOS_PERFORMANCE",
    "CAMPOS_FATURAMENTO",
    "CAMPOS_OPCIONAIS",
    "CAMPOS_DATA_ISO",
    "CHAVES_JSON",
    "RegistroEstoque",
    "coerce_status",
]
