# tests/conftest.py
"""Fixtures compartilhadas: fábrica de registros e repositório em banco temporário."""

from __future__ import annotations

import itertools

import pytest

from repository.estoque_repository import EstoqueRepository
from services.estoque.tipos import RegistroEstoque, StatusEstoque

_seq = itertools.count(1)


def novo_registro(status=StatusEstoque.ESTOQUE, **campos) -> RegistroEstoque:
    """Registro mínimo válido; `campos` sobrescreve os valores padrão."""
    n = next(_seq)
    base = {
        "id": f"r{n}",
        "status": status,
        "mes": "janeiro",
        "chave_acesso_nf": f"3524{n:040d}",
        "nf": str(1000 + n),
        "tonelada": 10.0,
        "valor": 1500.0,
        "descricao_produto": "Soja",
        "data_nf": "2024-01-05",
        "data_descarga": "2024-01-06",
        "fornecedor": "Agro Sul",
        "placa_veiculo": "ABC1D23",
        "container": "MSCU1234567",
        "destino": "Santos",
    }
    base.update(campos)
    return RegistroEstoque(**base)


def dados_formulario(**campos) -> dict:
    """Payload completo do formulário de nova entrada."""
    base = {
        "mes": "janeiro",
        "chave_acesso_nf": "35240112345678000190550010000012341000012345",
        "nf": "1234",
        "tonelada": "27,5",
        "valor": "R$ 1.234,56",
        "descricao_produto": "Farelo de soja",
        "data_nf": "05/01/2024",
        "data_descarga": "2024-01-06",
        "status": "Estoque",
        "fornecedor": "Agro Sul",
        "placa_veiculo": "abc 1d23",
        "container": "mscu1234567",
        "destino": "Santos",
    }
    base.update(campos)
    return base


@pytest.fixture
def registro():
    return novo_registro


@pytest.fixture
def formulario():
    return dados_formulario


@pytest.fixture
def caminho_banco(tmp_path):
    return tmp_path / "data" / "stk_test.db"


@pytest.fixture
def repo(caminho_banco):
    return EstoqueRepository(caminho_banco)
