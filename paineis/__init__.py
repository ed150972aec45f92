"""
Painéis do dashboard (UI Streamlit).

Cada painel recebe o EstadoPainel já calculado; nenhum faz HTTP.
"""

from .painel_semanal import render_painel_semanal, montar_grafico_semanal
from .painel_andamentos import render_painel_andamentos
from .painel_ranking import render_painel_ranking
from .painel_status import render_painel_status

__all__ = [
    "render_painel_semanal",
    "montar_grafico_semanal",
    "render_painel_andamentos",
    "render_painel_ranking",
    "render_painel_status",
]
