"""
Pacote repository
=================

Repositórios de acesso ao banco de dados do STK Manager.

Repositórios principais
-----------------------
- EstoqueRepository .... coleção de registros de estoque (fonte única de verdade)
"""

from repository.estoque_repository import EstoqueRepository

__all__ = ["EstoqueRepository"]
