"""Página de Performance Logística"""
from .page_performance import render_performance
__all__ = ["render_performance"]
