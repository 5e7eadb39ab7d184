"""Página de Faturamento"""
from .page_faturamento import render_faturamento
__all__ = ["render_faturamento"]
