"""
Utilitários de formatação para o Monitor Legislativo.
Textos exibidos ao usuário a partir dos resultados do processamento.

REGRA: Este módulo NÃO pode importar streamlit.
"""
from typing import List

from monitor_legislativo.config import MSG_NAO_RESOLVIDAS, MSG_NENHUMA_ENCONTRADA


def format_mensagem_resultado(nao_resolvidas: List[str], total_resolvidas: int) -> str:
    """
    Mensagem única do lote.

    - Alguma não resolvida -> lista todas
    - Nenhuma resolvida (e nada a listar) -> "nenhuma encontrada"
    - Tudo certo -> ""
    """
    if nao_resolvidas:
        return MSG_NAO_RESOLVIDAS.format(codigos=", ".join(nao_resolvidas))
    if total_resolvidas == 0:
        return MSG_NENHUMA_ENCONTRADA
    return ""


def format_alteracoes(num: int) -> str:
    """3 -> '3 alterações'; 1 -> '1 alteração'."""
    return f"{num} alteração" if num == 1 else f"{num} alterações"
