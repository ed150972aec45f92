"""
Utilitários do Monitor Legislativo.
Este pacote contém funções puras sem dependência de Streamlit.
"""

from .date_utils import (
    TZ_BRASILIA,
    get_brasilia_now,
    data_iso,
    parse_data,
    inicio_semana,
    fmt_data_br,
)

from .cores import hash_codigo, cor_proposicao

from .formatters import format_mensagem_resultado, format_alteracoes

from .links import camara_link_tramitacao

__all__ = [
    # date_utils
    'TZ_BRASILIA',
    'get_brasilia_now',
    'data_iso',
    'parse_data',
    'inicio_semana',
    'fmt_data_br',
    # cores
    'hash_codigo',
    'cor_proposicao',
    # formatters
    'format_mensagem_resultado',
    'format_alteracoes',
    # links
    'camara_link_tramitacao',
]
