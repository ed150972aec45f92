# paineis/painel_andamentos.py
from __future__ import annotations

import streamlit as st

from monitor_legislativo.state import EstadoPainel
from monitor_legislativo.utils.date_utils import fmt_data_br


def render_painel_andamentos(estado: EstadoPainel) -> None:
    st.subheader("Últimos Andamentos")

    andamentos = estado.visoes.ultimos_andamentos
    if not andamentos:
        st.info("Nenhum andamento encontrado para as proposições selecionadas.")
        return

    for mov in andamentos:
        st.markdown(f"**{fmt_data_br(mov.data)}** - **{mov.codigo}**: {mov.descricao}")
        st.divider()
