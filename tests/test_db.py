"""Testes da abertura de conexões SQLite (`shared.db`)."""

import sqlite3

import pytest

from shared.db import conexao, get_conn


class TestConexao:
    def test_cria_pasta_e_aplica_pragmas(self, tmp_path):
        caminho = tmp_path / "sub" / "x.db"
        conn = get_conn(caminho)
        try:
            assert caminho.parent.is_dir()
            assert conn.execute("PRAGMA journal_mode;").fetchone()[0] == "wal"
            assert conn.row_factory is sqlite3.Row
        finally:
            conn.close()

    def test_commit_e_rollback(self, tmp_path):
        caminho = tmp_path / "y.db"
        with conexao(caminho) as conn:
            conn.execute("CREATE TABLE t (v INTEGER);")
            conn.execute("INSERT INTO t VALUES (1);")

        with pytest.raises(RuntimeError):
            with conexao(caminho) as conn:
                conn.execute("INSERT INTO t VALUES (2);")
                raise RuntimeError("falha")

        with conexao(caminho) as conn:
            assert [r["v"] for r in conn.execute("SELECT v FROM t;")] == [1]
