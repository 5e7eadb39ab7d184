"""
Ciclo de status dos registros de estoque.

Classifica o status atual (no pátio x já saiu) e deriva os novos valores de
registro para cada evento: criação (entrada), saída, alteração de status e
os patches de performance e faturamento.

Regras:
    - Todas as funções são puras: devolvem um NOVO registro e nunca gravam.
      A persistência é responsabilidade do `EstoqueRepository`.
    - Reversão de status (Embarcado/Devolvido -> Estoque/Rejeitado) é aceita
      como simples atualização de campo.
    - Fatos de saída/faturamento podem ser gravados em qualquer status.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from shared.ids import normalizar_data, novo_id_registro, sanitize, sanitize_plus, texto_ou_none
from utils.utils import limpar_valor_formatado

from .tipos import (
    CAMPOS_ENTRADA,
    CHAVES_JSON,
    STATUS_EM_ESTOQUE,
    STATUS_SAIDA,
    RegistroEstoque,
    StatusEstoque,
    coerce_status,
)

logger = logging.getLogger(__name__)

__all__ = [
    "esta_em_estoque",
    "saiu",
    "criar_registro",
    "registrar_saida",
    "alterar_status",
    "aplicar_performance",
    "aplicar_faturamento",
    "ROTULOS_CAMPOS",
]

# Rótulos usados nas mensagens de validação (mesmos do formulário)
ROTULOS_CAMPOS: Dict[str, str] = {
    "mes": "Mês",
    "chave_acesso_nf": "Chave de Acesso NF",
    "nf": "N.F",
    "tonelada": "Tonelada",
    "valor": "Valor",
    "descricao_produto": "Descrição do Produto",
    "data_nf": "Data da N.F",
    "data_descarga": "Data de Descarga",
    "status": "Status",
    "fornecedor": "Fornecedor",
    "placa_veiculo": "Placa do Veículo",
    "container": "Container",
    "destino": "Destino",
}


# ---------------- Classificação ----------------
def esta_em_estoque(status: Any) -> bool:
    """True para Estoque/Rejeitado (registro fisicamente no pátio)."""
    return coerce_status(status) in STATUS_EM_ESTOQUE


def saiu(status: Any) -> bool:
    """True para Embarcado/Devolvido (registro que já deixou o pátio)."""
    return coerce_status(status) in STATUS_SAIDA


# ---------------- Helpers ----------------
def _valor_do_form(dados: Mapping[str, Any], attr: str) -> Any:
    """Lê o campo pelo nome Python; cai para a chave JSON (camelCase)."""
    if attr in dados:
        return dados[attr]
    return dados.get(CHAVES_JSON.get(attr, attr))


def _ausente(v: Any) -> bool:
    if v is None:
        return True
    return isinstance(v, str) and v.strip() == ""


def _data_opcional(valor: Any, rotulo: str) -> Optional[str]:
    """Normaliza data opcional; texto preenchido e não interpretável é erro."""
    if _ausente(valor):
        return None
    data = normalizar_data(valor)
    if data is None:
        raise ValueError(f"{rotulo}: data inválida ({valor!r}).")
    return data


# ---------------- Criação (entrada) ----------------
def criar_registro(dados: Mapping[str, Any], *, registro_id: Optional[str] = None) -> RegistroEstoque:
    """Cria um registro de entrada a partir dos dados do formulário.

    Todos os campos de entrada e o status inicial são obrigatórios.

    Args:
        dados: Campos do formulário (nomes Python ou chaves JSON).
        registro_id: ID explícito (padrão: UUID novo).

    Returns:
        Novo `RegistroEstoque`.

    Raises:
        ValueError: campos ausentes, status inicial fora de Estoque/Rejeitado,
            data inválida ou peso/valor negativos.
    """
    faltando: List[str] = [
        ROTULOS_CAMPOS[attr]
        for attr in CAMPOS_ENTRADA + ("status",)
        if _ausente(_valor_do_form(dados, attr))
    ]
    if faltando:
        raise ValueError("Campos obrigatórios não preenchidos: " + ", ".join(faltando) + ".")

    status = coerce_status(_valor_do_form(dados, "status"))
    if status not in STATUS_EM_ESTOQUE:
        raise ValueError(f"Status inicial deve ser Estoque ou Rejeitado (recebido: {status.value}).")

    tonelada = float(limpar_valor_formatado(_valor_do_form(dados, "tonelada")))
    valor = float(limpar_valor_formatado(_valor_do_form(dados, "valor")))
    if tonelada < 0:
        raise ValueError("Tonelada não pode ser negativa.")
    if valor < 0:
        raise ValueError("Valor não pode ser negativo.")

    data_nf = _data_opcional(_valor_do_form(dados, "data_nf"), ROTULOS_CAMPOS["data_nf"])
    data_descarga = _data_opcional(_valor_do_form(dados, "data_descarga"), ROTULOS_CAMPOS["data_descarga"])

    registro = RegistroEstoque(
        id=registro_id or novo_id_registro(),
        status=status,
        mes=sanitize(_valor_do_form(dados, "mes")),
        chave_acesso_nf=sanitize_plus(_valor_do_form(dados, "chave_acesso_nf")),
        nf=sanitize(_valor_do_form(dados, "nf")),
        tonelada=tonelada,
        valor=valor,
        descricao_produto=sanitize_plus(_valor_do_form(dados, "descricao_produto")),
        data_nf=data_nf or "",
        data_descarga=data_descarga or "",
        fornecedor=sanitize_plus(_valor_do_form(dados, "fornecedor")),
        placa_veiculo=sanitize_plus(_valor_do_form(dados, "placa_veiculo"), upper=True),
        container=sanitize_plus(_valor_do_form(dados, "container"), upper=True),
        destino=sanitize_plus(_valor_do_form(dados, "destino")),
    )
    logger.info("Registro criado: id=%s nf=%s status=%s", registro.id, registro.nf, registro.status.value)
    return registro


# ---------------- Saída ----------------
def registrar_saida(
    registro: RegistroEstoque,
    status: Any,
    data_faturamento_vli: Any,
    cte_vli: Any = None,
) -> RegistroEstoque:
    """Registra a saída (Embarcado/Devolvido) de um registro.

    O status é escolhido pelo operador; o sistema não o infere.

    Raises:
        ValueError: status de destino não é de saída, ou data VLI ausente/inválida.
    """
    novo_status = coerce_status(status)
    if novo_status not in STATUS_SAIDA:
        raise ValueError(f"Status de saída deve ser Embarcado ou Devolvido (recebido: {novo_status.value}).")

    data_vli = _data_opcional(data_faturamento_vli, "Data Faturamento VLI")
    if data_vli is None:
        raise ValueError("Informe a data de faturamento VLI.")

    if saiu(registro.status):
        logger.info("Saída regravada em registro já expedido: id=%s (%s)", registro.id, registro.status.value)

    novo = replace(
        registro,
        status=novo_status,
        data_faturamento_vli=data_vli,
        cte_vli=texto_ou_none(cte_vli),
    )
    logger.info(
        "Saída registrada: id=%s %s -> %s (VLI %s)",
        registro.id, registro.status.value, novo_status.value, data_vli,
    )
    return novo


def alterar_status(registro: RegistroEstoque, status: Any) -> RegistroEstoque:
    """Atualiza apenas o status, sem validar a direção da transição."""
    novo_status = coerce_status(status)
    if saiu(registro.status) and esta_em_estoque(novo_status):
        logger.info(
            "Reversão de status aceita: id=%s %s -> %s",
            registro.id, registro.status.value, novo_status.value,
        )
    return replace(registro, status=novo_status)


# ---------------- Patches (status intocado) ----------------
def aplicar_performance(
    registro: RegistroEstoque,
    hora_chegada: Any = None,
    hora_entrada: Any = None,
    hora_saida: Any = None,
) -> RegistroEstoque:
    """Grava os três horários operacionais (vazio limpa o campo).

    Os horários não são validados aqui; a ordem entre eles é livre e o
    cálculo de duração trata valores malformados.
    """
    return replace(
        registro,
        hora_chegada=texto_ou_none(hora_chegada),
        hora_entrada=texto_ou_none(hora_entrada),
        hora_saida=texto_ou_none(hora_saida),
    )


def aplicar_faturamento(
    registro: RegistroEstoque,
    data_emissao_nf: Any = None,
    cte_intertex: Any = None,
    data_emissao_cte_intertex: Any = None,
    cte_transportador: Any = None,
) -> RegistroEstoque:
    """Grava os campos de faturamento (vazio limpa o campo).

    Raises:
        ValueError: data preenchida e não interpretável.
    """
    return replace(
        registro,
        data_emissao_nf=_data_opcional(data_emissao_nf, "Emissão NF"),
        cte_intertex=texto_ou_none(cte_intertex),
        data_emissao_cte_intertex=_data_opcional(data_emissao_cte_intertex, "Emissão CTE Intertex"),
        cte_transportador=texto_ou_none(cte_transportador),
    )
