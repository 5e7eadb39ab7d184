"""
Testes de `RegistroEstoque` e `StatusEstoque`.

Valida:
- Coerção de status (texto/enum) e rejeição de valores desconhecidos
- Serialização camelCase (`para_dict`) e reconstrução (`de_dict`)
- Normalização de opcionais vazios e números em texto
"""

import dataclasses

import pytest

from services.estoque.tipos import (
    CAMPOS_OPCIONAIS,
    RegistroEstoque,
    StatusEstoque,
    coerce_status,
)


class TestCoerceStatus:
    def test_texto_e_enum(self):
        assert coerce_status("Embarcado") is StatusEstoque.EMBARCADO
        assert coerce_status(" Rejeitado ") is StatusEstoque.REJEITADO
        assert coerce_status(StatusEstoque.DEVOLVIDO) is StatusEstoque.DEVOLVIDO

    def test_status_desconhecido(self):
        with pytest.raises(ValueError, match="Status inválido"):
            coerce_status("Perdido")

    def test_str_do_enum(self):
        assert str(StatusEstoque.ESTOQUE) == "Estoque"


class TestRegistro:
    def test_imutavel(self, registro):
        r = registro()
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.status = StatusEstoque.EMBARCADO

    def test_normaliza_campos(self):
        r = RegistroEstoque(id="x", status="Rejeitado", tonelada="1.234,5", valor="", cte_vli="  ")
        assert r.status is StatusEstoque.REJEITADO
        assert r.tonelada == pytest.approx(1234.5)
        assert r.valor == 0.0
        assert r.cte_vli is None

    def test_para_dict_chaves_camel_case(self, registro):
        r = registro(cte_vli="CTE-9", hora_chegada="08:00")
        d = r.para_dict()
        assert d["chaveAcessoNF"] == r.chave_acesso_nf
        assert d["placaVeiculo"] == r.placa_veiculo
        assert d["status"] == "Estoque"
        assert d["cteVLI"] == "CTE-9"
        assert d["horaChegada"] == "08:00"

    def test_para_dict_omite_opcionais_ausentes(self, registro):
        d = registro().para_dict()
        assert "dataFaturamentoVLI" not in d
        assert "cteTransportador" not in d

    def test_ida_e_volta_com_opcionais(self, registro):
        completos = {campo: "2024-02-01" for campo in CAMPOS_OPCIONAIS}
        for r in (registro(), registro(status=StatusEstoque.EMBARCADO, **completos)):
            assert RegistroEstoque.de_dict(r.para_dict()) == r


class TestDeDict:
    def test_formato_do_navegador(self):
        r = RegistroEstoque.de_dict(
            {
                "id": 17,
                "status": "Embarcado",
                "nf": "555",
                "tonelada": "12,75",
                "valor": 900,
                "dataFaturamentoVLI": "2024-03-01",
            }
        )
        assert r.id == "17"
        assert r.tonelada == pytest.approx(12.75)
        assert r.valor == 900.0
        assert r.fornecedor == ""
        assert r.data_faturamento_vli == "2024-03-01"
        assert r.hora_saida is None

    def test_datas_br_viram_iso(self):
        r = RegistroEstoque.de_dict(
            {"id": "1", "status": "Embarcado", "dataNF": "05/01/2024", "dataEmissaoNF": "10.01.2024", "dataDescarga": ""}
        )
        assert r.data_nf == "2024-01-05"
        assert r.data_emissao_nf == "2024-01-10"
        assert r.data_descarga == ""
        assert r.data_emissao_cte_intertex is None

    def test_data_invalida(self):
        with pytest.raises(ValueError, match="dataNF"):
            RegistroEstoque.de_dict({"id": "1", "status": "Estoque", "dataNF": "32/13/2024"})

    def test_sem_id(self):
        with pytest.raises(ValueError, match="id"):
            RegistroEstoque.de_dict({"status": "Estoque"})

    def test_nao_objeto(self):
        with pytest.raises(ValueError, match="esperado objeto"):
            RegistroEstoque.de_dict(["id", "status"])

    def test_status_invalido(self):
        with pytest.raises(ValueError):
            RegistroEstoque.de_dict({"id": "1", "status": "???"})
