"""Dashboard (indicadores e gráficos do pátio)"""
from .dashboard import render_dashboard
__all__ = ["render_dashboard"]
