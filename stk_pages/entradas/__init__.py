"""
Página: Entradas (Estoque)
==========================

Organiza página, estado, formulários e ações de **Entradas**:
- Cadastro de nova entrada (recebimento)
- Lista filtrável dos registros no pátio

"""
from .page_entradas import render_entradas
__all__ = ["render_entradas"]
