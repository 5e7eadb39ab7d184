"""Testes dos utilitários de formatação, conversão e datas."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from shared.ids import normalizar_data, sanitize_plus, texto_ou_none
from utils.utils import (
    coerce_data,
    formatar_moeda,
    formatar_percentual,
    formatar_toneladas,
    formatar_valor,
    limpar_valor_formatado,
    mes_por_extenso,
    resolve_db_path,
)


class TestFormatacao:
    def test_moeda(self):
        assert formatar_moeda(1234.5) == "R$ 1.234,50"
        assert formatar_moeda(None) == "R$ 0,00"
        assert formatar_moeda("abc") == "R$ 0,00"

    def test_percentual(self):
        assert formatar_percentual(33.3) == "33,3%"
        assert formatar_percentual(0.375, fracao=True) == "37,5%"

    def test_toneladas(self):
        assert formatar_toneladas(1234.5) == "1.234,50 t"

    def test_wrapper(self):
        assert formatar_valor(10, tipo="percentual", casas=0) == "10%"
        assert formatar_valor(2, tipo="t") == "2,00 t"
        assert formatar_valor(2) == "R$ 2,00"


class TestLimparValor:
    @pytest.mark.parametrize(
        "entrada,esperado",
        [
            ("R$ 1.234,56", 1234.56),
            ("1,234.56", 1234.56),
            ("27,5", 27.5),
            ("2500", 2500.0),
            ("", 0.0),
            (None, 0.0),
            ("abc", 0.0),
            (3, 3.0),
            (True, 1.0),
        ],
    )
    def test_conversao(self, entrada, esperado):
        assert limpar_valor_formatado(entrada) == pytest.approx(esperado)

    def test_decimal(self):
        assert limpar_valor_formatado("1.000,10", as_decimal=True) == Decimal("1000.10")


class TestDatas:
    def test_coerce_data(self):
        assert coerce_data("05/01/2024") == date(2024, 1, 5)
        assert coerce_data(datetime(2024, 1, 5, 10, 0)) == date(2024, 1, 5)
        assert coerce_data(None) == date.today()
        with pytest.raises(ValueError):
            coerce_data("ontem")

    def test_mes_por_extenso(self):
        assert mes_por_extenso("2024-03-10") == "março"

    def test_normalizar_data(self):
        assert normalizar_data("20240105") == "2024-01-05"
        assert normalizar_data("05.01.2024") == "2024-01-05"
        assert normalizar_data("2024-01-05T10:00:00") == "2024-01-05"
        assert normalizar_data("") is None


class TestTextos:
    def test_sanitize_plus(self):
        assert sanitize_plus("  abc   1d23 ", upper=True) == "ABC 1D23"

    def test_texto_ou_none(self):
        assert texto_ou_none("   ") is None
        assert texto_ou_none(" x ") == "x"


class TestResolveDbPath:
    def test_formas_aceitas(self, tmp_path):
        assert resolve_db_path(tmp_path / "a.db") == str(tmp_path / "a.db")
        assert resolve_db_path(SimpleNamespace(caminho_banco="b.db")) == "b.db"

    def test_invalido(self):
        with pytest.raises(TypeError):
            resolve_db_path(None)
        with pytest.raises(TypeError):
            resolve_db_path(42)
