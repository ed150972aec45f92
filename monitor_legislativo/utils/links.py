"""
Utilitários de links para o Monitor Legislativo.

REGRA: Este módulo NÃO pode importar streamlit.
"""


def camara_link_tramitacao(id_proposicao: str) -> str:
    """Gera link para a ficha de tramitação de uma proposição na Câmara."""
    pid = str(id_proposicao or "").strip()
    if not pid:
        return ""
    return f"https://www.camara.leg.br/proposicoesWeb/fichadetramitacao?idProposicao={pid}"
