"""
Módulo Estoque (Repositório)
============================

Define `EstoqueRepository`, a única fonte de verdade dos registros de estoque.
A coleção inteira é carregada na construção e regravada por completo após
cada alteração (leitura-modificação-gravação da coleção toda).

Funcionalidades principais
--------------------------
- Leitura: `listar()` (snapshot), `obter(id)`, `len(repo)`.
- Escrita: `adicionar`, `substituir` (troca por id), `importar` (coleção inteira).
- Backup: `exportar_json` / `importar_json`.
- Ouvintes: callbacks notificados com o novo snapshot após cada gravação.

Detalhes técnicos
-----------------
- Tabela `armazenamento(chave TEXT PRIMARY KEY, valor TEXT, atualizado_em TEXT)`:
  uma linha por chave (padrão `stock_data`).
- `valor` guarda `{"versao": 1, "registros": [...]}`; um array JSON puro (backup
  exportado do `localStorage` da versão web) também é aceito na leitura.
- Gravação síncrona: quando o método retorna, a alteração já está no disco e
  visível para as leituras seguintes.

Dependências
------------
- sqlite3 (via shared.db.conexao)
- services.estoque.tipos
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List

from shared.db import conexao
from services.estoque.tipos import RegistroEstoque

logger = logging.getLogger(__name__)

CHAVE_PADRAO = "stock_data"
VERSAO_FORMATO = 1

Ouvinte = Callable[[List[RegistroEstoque]], None]


class EstoqueRepository:
    """
    Repositório (store) dos registros de estoque.

    Parâmetros:
        db_path_like: Caminho do arquivo SQLite (ou objeto com `db_path`/`caminho_banco`).
        chave (str): Chave de armazenamento da coleção.
    """

    def __init__(self, db_path_like: Any, chave: str = CHAVE_PADRAO):
        self.db_path_like = db_path_like
        self.chave = chave
        self._ouvintes: List[Ouvinte] = []
        self._ensure_schema()
        self._registros: List[RegistroEstoque] = self._carregar()

    # ------------- infra -------------

    def _ensure_schema(self) -> None:
        """Cria a tabela `armazenamento` se não existir (idempotente)."""
        with conexao(self.db_path_like) as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS armazenamento (
                    chave         TEXT PRIMARY KEY,
                    valor         TEXT NOT NULL,
                    atualizado_em TEXT
                );
                """
            )

    def _carregar(self) -> List[RegistroEstoque]:
        """Lê a coleção inteira; chave inexistente = coleção vazia."""
        with conexao(self.db_path_like) as conn:
            row = conn.execute(
                "SELECT valor FROM armazenamento WHERE chave = ? LIMIT 1;", (self.chave,)
            ).fetchone()
        if row is None:
            logger.debug("Chave %s ainda não gravada; coleção vazia.", self.chave)
            return []
        try:
            registros = self._desserializar(row["valor"])
            self._checar_ids_unicos(registros)
        except ValueError as e:
            raise ValueError(f"Dados corrompidos na chave '{self.chave}': {e}") from e
        logger.debug("Carregados %d registros da chave %s.", len(registros), self.chave)
        return registros

    def _persistir(self, novos: List[RegistroEstoque]) -> None:
        """
        Grava `novos` como a coleção inteira; só após o commit ela passa a ser
        a coleção em memória e os ouvintes são notificados.
        """
        texto = self._serializar(novos)
        agora = datetime.now().isoformat(timespec="seconds")
        with conexao(self.db_path_like) as conn:
            conn.execute(
                """
                INSERT INTO armazenamento (chave, valor, atualizado_em) VALUES (?, ?, ?)
                ON CONFLICT(chave) DO UPDATE SET valor = excluded.valor, atualizado_em = excluded.atualizado_em;
                """,
                (self.chave, texto, agora),
            )
        self._registros = novos
        logger.debug("Persistidos %d registros na chave %s.", len(novos), self.chave)

        snapshot = self.listar()
        for ouvinte in list(self._ouvintes):
            ouvinte(snapshot)

    @staticmethod
    def _desserializar(texto: str) -> List[RegistroEstoque]:
        """Aceita o envelope versionado ou um array JSON puro."""
        try:
            dados = json.loads(texto)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON inválido ({e.msg}).") from e

        if isinstance(dados, dict):
            versao = dados.get("versao")
            if versao != VERSAO_FORMATO:
                raise ValueError(f"Versão de formato não suportada: {versao!r}.")
            dados = dados.get("registros", [])
        if not isinstance(dados, list):
            raise ValueError("Esperado um array de registros.")
        return [RegistroEstoque.de_dict(d) for d in dados]

    @staticmethod
    def _checar_ids_unicos(registros: Iterable[RegistroEstoque]) -> None:
        vistos: set = set()
        for r in registros:
            if r.id in vistos:
                raise ValueError(f"ID duplicado na coleção: {r.id}.")
            vistos.add(r.id)

    # ------------- leitura -------------

    def listar(self) -> List[RegistroEstoque]:
        """Snapshot da coleção (nova lista; os registros são imutáveis)."""
        return list(self._registros)

    def obter(self, registro_id: str) -> RegistroEstoque:
        """
        Retorna o registro pelo id.

        Raises:
            ValueError: id inexistente.
        """
        for r in self._registros:
            if r.id == registro_id:
                return r
        raise ValueError(f"Registro não encontrado: {registro_id}.")

    def __len__(self) -> int:
        return len(self._registros)

    # ------------- escrita -------------

    def adicionar(self, registro: RegistroEstoque) -> RegistroEstoque:
        """
        Acrescenta um registro ao final da coleção e persiste.

        Raises:
            ValueError: id já existente.
        """
        if any(r.id == registro.id for r in self._registros):
            raise ValueError(f"Já existe registro com id {registro.id}.")
        self._persistir(self._registros + [registro])
        logger.info("Registro adicionado: id=%s nf=%s", registro.id, registro.nf)
        return registro

    def substituir(self, registro: RegistroEstoque) -> RegistroEstoque:
        """
        Troca o registro de mesmo id pelo novo valor (posição mantida) e persiste.

        Raises:
            ValueError: id inexistente.
        """
        for i, atual in enumerate(self._registros):
            if atual.id == registro.id:
                novos = list(self._registros)
                novos[i] = registro
                self._persistir(novos)
                logger.info("Registro atualizado: id=%s status=%s", registro.id, registro.status.value)
                return registro
        raise ValueError(f"Registro não encontrado: {registro.id}.")

    def importar(self, registros: Iterable[RegistroEstoque]) -> int:
        """
        Substitui a coleção inteira (restauração de backup).

        Returns:
            Quantidade de registros importados.

        Raises:
            ValueError: ids duplicados.
        """
        novos = list(registros)
        self._checar_ids_unicos(novos)
        self._persistir(novos)
        logger.info("Coleção importada: %d registros na chave %s.", len(novos), self.chave)
        return len(novos)

    # ------------- backup -------------

    @staticmethod
    def _serializar(registros: Iterable[RegistroEstoque]) -> str:
        envelope: Dict[str, Any] = {
            "versao": VERSAO_FORMATO,
            "registros": [r.para_dict() for r in registros],
        }
        return json.dumps(envelope, ensure_ascii=False)

    def exportar_json(self) -> str:
        """Serializa a coleção no envelope versionado."""
        return self._serializar(self._registros)

    def importar_json(self, texto: str) -> int:
        """Restaura a coleção a partir de um JSON (envelope ou array puro)."""
        return self.importar(self._desserializar(texto))

    # ------------- ouvintes -------------

    def inscrever(self, ouvinte: Ouvinte) -> Callable[[], None]:
        """
        Registra um callback chamado com o snapshot após cada gravação.

        Returns:
            Função que cancela a inscrição.
        """
        self._ouvintes.append(ouvinte)

        def _cancelar() -> None:
            if ouvinte in self._ouvintes:
                self._ouvintes.remove(ouvinte)

        return _cancelar


__all__ = ["EstoqueRepository", "CHAVE_PADRAO", "VERSAO_FORMATO"]
