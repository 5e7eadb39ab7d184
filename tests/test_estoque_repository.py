"""
Testes do `EstoqueRepository` (SQLite em diretório temporário).

Valida:
- Persistência síncrona e leitura por nova instância
- Escrita por id (adicionar/substituir) e ids únicos
- Backup JSON (envelope versionado e array puro do navegador, datas BR)
- Ouvintes notificados após cada gravação
- Falha de gravação não altera a coleção em memória
"""

import json
import sqlite3

import pytest

from repository.estoque_repository import CHAVE_PADRAO, EstoqueRepository
from services.estoque.ciclo_status import registrar_saida
from services.estoque.filtros import filtrar_estoque
from services.estoque.tipos import StatusEstoque


class TestLeituraEscrita:
    def test_banco_novo_vazio(self, repo):
        assert len(repo) == 0
        assert repo.listar() == []

    def test_adicionar_e_recarregar(self, repo, registro, caminho_banco):
        a, b = registro(), registro(status=StatusEstoque.REJEITADO, hora_chegada="08:00")
        repo.adicionar(a)
        repo.adicionar(b)

        outro = EstoqueRepository(caminho_banco)
        assert outro.listar() == [a, b]

    def test_snapshot_independente(self, repo, registro):
        repo.adicionar(registro())
        snap = repo.listar()
        snap.clear()
        assert len(repo) == 1

    def test_id_duplicado(self, repo, registro):
        r = registro()
        repo.adicionar(r)
        with pytest.raises(ValueError, match="Já existe"):
            repo.adicionar(r)
        assert len(repo) == 1

    def test_substituir_mantem_posicao(self, repo, registro, caminho_banco):
        a, b, c = registro(), registro(), registro()
        for r in (a, b, c):
            repo.adicionar(r)
        novo_b = registrar_saida(b, "Embarcado", "2024-02-01", "CTE-7")
        repo.substituir(novo_b)

        assert [r.id for r in repo.listar()] == [a.id, b.id, c.id]
        assert repo.obter(b.id).status is StatusEstoque.EMBARCADO
        assert EstoqueRepository(caminho_banco).obter(b.id).cte_vli == "CTE-7"

    def test_substituir_id_inexistente(self, repo, registro):
        with pytest.raises(ValueError, match="não encontrado"):
            repo.substituir(registro())

    def test_obter_inexistente(self, repo):
        with pytest.raises(ValueError):
            repo.obter("nada")

    def test_chaves_independentes(self, caminho_banco, registro):
        EstoqueRepository(caminho_banco).adicionar(registro())
        assert len(EstoqueRepository(caminho_banco, chave="outra")) == 0
        assert len(EstoqueRepository(caminho_banco, chave=CHAVE_PADRAO)) == 1


class TestBackup:
    def test_exportar_envelope(self, repo, registro):
        r = registro(fornecedor="Cooperativa São João")
        repo.adicionar(r)
        dados = json.loads(repo.exportar_json())
        assert dados["versao"] == 1
        assert dados["registros"][0]["fornecedor"] == "Cooperativa São João"
        assert "São João" in repo.exportar_json()

    def test_ida_e_volta(self, repo, registro, tmp_path):
        regs = [registro(), registro(status=StatusEstoque.DEVOLVIDO, data_faturamento_vli="2024-03-01")]
        for r in regs:
            repo.adicionar(r)
        destino = EstoqueRepository(tmp_path / "outro.db")
        assert destino.importar_json(repo.exportar_json()) == 2
        assert destino.listar() == regs

    def test_importar_array_puro(self, repo):
        texto = json.dumps(
            [
                {"id": 1, "status": "Estoque", "nf": "10", "tonelada": "3,5", "placaVeiculo": "AAA1111"},
                {"id": 2, "status": "Embarcado", "nf": "11", "cteVLI": "C-1"},
            ]
        )
        assert repo.importar_json(texto) == 2
        assert repo.obter("1").tonelada == pytest.approx(3.5)
        assert repo.obter("2").cte_vli == "C-1"

    def test_importar_array_puro_com_datas_br(self, repo):
        texto = json.dumps(
            [
                {"id": "1", "status": "Estoque", "dataNF": "05/01/2024", "dataDescarga": "06/01/2024"},
                {"id": "2", "status": "Estoque", "dataNF": "20/02/2024"},
                {"id": "3", "status": "Embarcado", "dataNF": "03/01/2024", "dataFaturamentoVLI": "10/01/2024"},
            ]
        )
        repo.importar_json(texto)

        assert repo.obter("1").data_nf == "2024-01-05"
        assert repo.obter("1").data_descarga == "2024-01-06"
        assert repo.obter("3").data_faturamento_vli == "2024-01-10"
        filtrados = filtrar_estoque(repo.listar(), inicio="2024-01-01", fim="2024-01-07")
        assert [r.id for r in filtrados] == ["1"]

    def test_importar_data_invalida(self, repo):
        texto = json.dumps([{"id": "1", "status": "Estoque", "dataNF": "ontem"}])
        with pytest.raises(ValueError, match="data inválida"):
            repo.importar_json(texto)
        assert len(repo) == 0

    def test_importar_substitui_colecao(self, repo, registro):
        repo.adicionar(registro())
        repo.importar([registro()])
        assert len(repo) == 1

    def test_importar_ids_duplicados(self, repo, registro):
        r = registro()
        with pytest.raises(ValueError, match="duplicado"):
            repo.importar([r, r])
        assert len(repo) == 0

    @pytest.mark.parametrize(
        "texto",
        ["{não é json", '{"versao": 2, "registros": []}', '"texto"', '[{"status": "Estoque"}]'],
    )
    def test_importar_json_invalido(self, repo, texto):
        with pytest.raises(ValueError):
            repo.importar_json(texto)

    def test_dados_corrompidos_no_banco(self, caminho_banco):
        EstoqueRepository(caminho_banco)
        with sqlite3.connect(caminho_banco) as conn:
            conn.execute(
                "INSERT INTO armazenamento (chave, valor) VALUES (?, ?);",
                (CHAVE_PADRAO, "[1, 2"),
            )
        with pytest.raises(ValueError, match="Dados corrompidos"):
            EstoqueRepository(caminho_banco)


class TestOuvintes:
    def test_notifica_e_cancela(self, repo, registro):
        recebidos = []
        cancelar = repo.inscrever(recebidos.append)

        r = registro()
        repo.adicionar(r)
        assert recebidos == [[r]]

        cancelar()
        repo.adicionar(registro())
        assert len(recebidos) == 1

    def test_cancelar_duas_vezes(self, repo):
        cancelar = repo.inscrever(lambda snap: None)
        cancelar()
        cancelar()


def _banco_travado(_db):
    raise sqlite3.OperationalError("database is locked")


class TestFalhaNaGravacao:
    def test_adicionar_nao_altera_memoria(self, repo, registro, monkeypatch):
        recebidos = []
        repo.inscrever(recebidos.append)
        monkeypatch.setattr("repository.estoque_repository.conexao", _banco_travado)

        with pytest.raises(sqlite3.OperationalError):
            repo.adicionar(registro())

        assert len(repo) == 0
        assert recebidos == []

    def test_substituir_mantem_registro_anterior(self, repo, registro, caminho_banco, monkeypatch):
        r = registro()
        repo.adicionar(r)
        monkeypatch.setattr("repository.estoque_repository.conexao", _banco_travado)

        with pytest.raises(sqlite3.OperationalError):
            repo.substituir(registrar_saida(r, "Embarcado", "2024-02-01", "CTE-9"))

        assert repo.obter(r.id) == r
        monkeypatch.undo()
        assert EstoqueRepository(caminho_banco).listar() == [r]

    def test_importar_nada_gravado_no_disco(self, repo, registro, caminho_banco, monkeypatch):
        monkeypatch.setattr("repository.estoque_repository.conexao", _banco_travado)

        with pytest.raises(sqlite3.OperationalError):
            repo.importar([registro(), registro()])
        assert len(repo) == 0

        monkeypatch.undo()
        assert len(EstoqueRepository(caminho_banco)) == 0
