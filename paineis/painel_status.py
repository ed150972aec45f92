# paineis/painel_status.py
from __future__ import annotations

import streamlit as st

from monitor_legislativo.state import EstadoPainel
from monitor_legislativo.utils.date_utils import fmt_data_br
from monitor_legislativo.utils.links import camara_link_tramitacao


def render_painel_status(estado: EstadoPainel) -> None:
    st.subheader("Status Atual")

    status = estado.visoes.status_atual
    if not status:
        st.info("Nenhum status atual encontrado para as proposições selecionadas.")
        return

    for s in status:
        st.markdown(f"**{s.codigo}**: {s.titulo}")
        st.markdown(f"**Situação:** {s.situacao}")
        # Campos opcionais só aparecem quando a API informa
        if s.despacho:
            st.markdown(f"**Despacho:** {s.despacho}")
        if s.data_status:
            st.markdown(f"**Data do Status:** {fmt_data_br(s.data_status)}")
        if s.orgao:
            st.markdown(f"**Órgão:** {s.orgao}")
        link = camara_link_tramitacao(s.id)
        if link:
            st.markdown(f"[🔗 Ficha de tramitação]({link})")
        st.divider()
