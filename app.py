# app.py
# ============================================================
# Monitor Legislativo (Streamlit)
# - Códigos de proposições separados por vírgula
# - Busca ID, detalhes e tramitações na API da Câmara
# - Gráfico de movimentação semanal, últimos andamentos,
#   ranking de alterações e status atual
#
# Uso: streamlit run app.py
# ============================================================

import streamlit as st

from monitor_legislativo.config import (
    MSG_PROCESSAMENTO_INTERROMPIDO,
    PLACEHOLDER_CODIGOS,
    configurar_logging,
)
from monitor_legislativo.data_provider import DataProvider
from monitor_legislativo.state import (
    Fase,
    encerrar_carregamento,
    get_estado,
    init_state,
    set_estado,
)
from monitor_legislativo.utils.date_utils import get_brasilia_now
from paineis import (
    render_painel_andamentos,
    render_painel_ranking,
    render_painel_semanal,
    render_painel_status,
)


@st.cache_resource(show_spinner=False)
def get_provider() -> DataProvider:
    return DataProvider()


def main() -> None:
    st.set_page_config(page_title="Monitor Legislativo", page_icon="🏛️", layout="wide")
    configurar_logging()
    init_state(st)

    provider = get_provider()
    estado = get_estado(st)

    st.title("🏛️ Monitoramento Legislativo")

    texto = st.text_area(
        "Códigos das Proposições (separados por vírgula):",
        key="codigos_input",
        height=120,
        placeholder=PLACEHOLDER_CODIGOS,
    )

    clicou = st.button(
        "Processando..." if estado.carregando else "Processar Proposições",
        type="primary",
        disabled=estado.carregando,
    )

    if clicou:
        barra = st.progress(0.0)

        def _progresso(i: int, total: int, codigo: str) -> None:
            barra.progress(i / total, text=f"{codigo} ({i}/{total})")

        # Streamlit só aceita chamadas de UI na thread do script
        callback = _progresso if provider.cfg.max_workers <= 1 else None

        try:
            with st.spinner("Carregando dados..."):
                estado = provider.processar(
                    texto,
                    estado,
                    progresso=callback,
                    ao_carregar=lambda carregando: set_estado(st, carregando),
                )
            set_estado(st, estado)
        finally:
            # rerun no meio do lote não pode deixar o botão travado
            set_estado(st, encerrar_carregamento(get_estado(st), MSG_PROCESSAMENTO_INTERROMPIDO))
        barra.empty()

    if estado.mensagem:
        if estado.fase is Fase.FALHOU:
            st.error(estado.mensagem)
        else:
            st.warning(estado.mensagem)

    if not estado.proposicoes:
        return

    st.caption(f"🕐 **Última atualização:** {get_brasilia_now().strftime('%d/%m/%Y às %H:%M:%S')}")
    st.markdown("---")

    render_painel_semanal(estado)
    st.markdown("---")

    col1, col2, col3 = st.columns(3)
    with col1:
        render_painel_andamentos(estado)
    with col2:
        render_painel_ranking(estado)
    with col3:
        render_painel_status(estado)

    st.caption("📊 Dados: API de Dados Abertos da Câmara dos Deputados")


if __name__ == "__main__":
    main()
