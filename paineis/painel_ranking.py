# paineis/painel_ranking.py
from __future__ import annotations

import streamlit as st

from monitor_legislativo.state import EstadoPainel
from monitor_legislativo.utils.formatters import format_alteracoes


def render_painel_ranking(estado: EstadoPainel) -> None:
    st.subheader("Proposições com Mais Alterações")

    ranking = estado.visoes.ranking_alteracoes
    if not ranking:
        st.info("Nenhuma proposição encontrada com alterações.")
        return

    for item in ranking:
        st.markdown(f"**{format_alteracoes(item.num_alteracoes)}** - **{item.codigo}**: {item.titulo}")
        st.divider()
