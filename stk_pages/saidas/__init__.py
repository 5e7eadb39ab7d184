"""Página de Saídas (Expedição)"""
from .page_saidas import render_saidas
__all__ = ["render_saidas"]
