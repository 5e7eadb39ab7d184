"""
Pacote Services
===============

Camada de serviços de domínio do STK Manager.

Subpacotes
----------
- estoque ...... ciclo de status, agregações do Dashboard, filtros,
                 duração e resumo de performance (funções puras).
"""

from __future__ import annotations

from . import estoque

__all__ = ["estoque"]
