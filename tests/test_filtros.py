"""
Testes dos filtros da lista de Entradas.

Valida:
- Status (Todos/Estoque/Rejeitado) combinado com período inclusivo
- Registro sem a data escolhida sempre passa no filtro de período
- Registros que já saíram nunca aparecem
"""

from datetime import date

import pytest

from services.estoque.filtros import TODOS, buscar_por_nf, filtrar_estoque
from services.estoque.tipos import StatusEstoque


@pytest.fixture
def abc(registro):
    a = registro(StatusEstoque.ESTOQUE, id="A", data_nf="2024-01-05")
    b = registro(StatusEstoque.REJEITADO, id="B", data_nf="2024-01-10")
    c = registro(StatusEstoque.ESTOQUE, id="C", data_nf="")
    return [a, b, c]


class TestFiltrarEstoque:
    def test_status_e_periodo(self, abc):
        out = filtrar_estoque(abc, status="Estoque", inicio="2024-01-01", fim="2024-01-07")
        assert [r.id for r in out] == ["A", "C"]

    def test_sem_filtros_identidade(self, abc):
        assert filtrar_estoque(abc) == abc

    def test_ignora_expedidos(self, abc, registro):
        embarcado = registro(StatusEstoque.EMBARCADO, id="D")
        assert [r.id for r in filtrar_estoque(abc + [embarcado], status=TODOS)] == ["A", "B", "C"]

    def test_limites_inclusivos(self, abc):
        out = filtrar_estoque(abc, inicio=date(2024, 1, 5), fim="10/01/2024")
        assert [r.id for r in out] == ["A", "B", "C"]

    def test_apenas_inicio(self, abc):
        out = filtrar_estoque(abc, inicio="2024-01-06")
        assert [r.id for r in out] == ["B", "C"]

    def test_status_enum(self, abc):
        out = filtrar_estoque(abc, status=StatusEstoque.REJEITADO)
        assert [r.id for r in out] == ["B"]

    def test_campo_data_descarga(self, registro):
        regs = [
            registro(id="X", data_nf="2024-01-01", data_descarga="2024-02-01"),
            registro(id="Y", data_nf="2024-02-01", data_descarga="2024-01-01"),
        ]
        out = filtrar_estoque(regs, campo_data="data_descarga", fim="2024-01-15")
        assert [r.id for r in out] == ["Y"]

    def test_status_de_saida_rejeitado(self, abc):
        with pytest.raises(ValueError, match="Filtro de status"):
            filtrar_estoque(abc, status="Embarcado")

    def test_campo_invalido(self, abc):
        with pytest.raises(ValueError, match="Campo de data"):
            filtrar_estoque(abc, campo_data="hora_saida")

    def test_data_limite_invalida(self, abc):
        with pytest.raises(ValueError, match="Data inicial"):
            filtrar_estoque(abc, inicio="amanhã")


class TestBuscarPorNf:
    def test_por_numero_e_chave(self, registro):
        r1 = registro(nf="4521", chave_acesso_nf="AAA")
        r2 = registro(nf="999", chave_acesso_nf="XX4521YY")
        r3 = registro(nf="123", chave_acesso_nf="ZZZ")
        assert buscar_por_nf([r1, r2, r3], "4521") == [r1, r2]

    def test_termo_vazio(self, registro):
        regs = [registro(), registro()]
        assert buscar_por_nf(regs, "  ") == regs
