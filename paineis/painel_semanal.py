# paineis/painel_semanal.py
from __future__ import annotations

from typing import Optional

import matplotlib
matplotlib.use("Agg")  # Backend não-interativo
import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator
import pandas as pd
import streamlit as st

from monitor_legislativo.agregador import serie_semanal_dataframe
from monitor_legislativo.state import EstadoPainel
from monitor_legislativo.utils.cores import cor_proposicao


def montar_grafico_semanal(df: pd.DataFrame) -> Optional[plt.Figure]:
    """
    Gráfico de linhas: uma linha por proposição, cor fixa por código.

    Retorna None se não houver dados.
    """
    if df is None or df.empty:
        return None

    fig, ax = plt.subplots(figsize=(10, 4))
    for codigo in df.columns:
        ax.plot(
            df.index,
            df[codigo],
            marker="o",
            color=cor_proposicao(codigo),
            label=codigo,
        )

    ax.set_xlabel("Semana (início no domingo)")
    ax.set_ylabel("Movimentações")
    ax.grid(alpha=0.3, linestyle="--")
    ax.legend()
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    plt.setp(ax.get_xticklabels(), rotation=45, ha="right")
    fig.tight_layout()
    return fig


def render_painel_semanal(estado: EstadoPainel) -> None:
    st.subheader("Quantidade de Movimentação por Semana")

    df = serie_semanal_dataframe(estado.visoes.serie_semanal)
    fig = montar_grafico_semanal(df)
    if fig is None:
        st.info("Nenhum dado de movimentação semanal disponível para as proposições selecionadas.")
        return

    st.pyplot(fig)
    plt.close(fig)

    with st.expander("📋 Ver dados do gráfico", expanded=False):
        st.dataframe(df, use_container_width=True)
