"""
Services layer para acesso à API da Câmara.

REGRAS:
- SEM Streamlit
- SEM cache
- Funções puras de busca e parsing

Uso:
    from monitor_legislativo.services import CamaraService

    camara = CamaraService()
    pid = camara.buscar_id_proposicao("PL", 123, 2023)
"""

from .http_client import (
    # Exceções
    HttpClientError,
    HttpConnectionError,
    HttpTimeoutError,
    HttpApiError,
    HttpNotFoundError,
    HttpRateLimitError,
    HttpServerError,

    # Funções HTTP
    get_json,
    get_camara_session,
)

from .parsers import separar_codigos, parse_codigo_proposicao
from .camara_service import CamaraService

__all__ = [
    "CamaraService",

    "HttpClientError",
    "HttpConnectionError",
    "HttpTimeoutError",
    "HttpApiError",
    "HttpNotFoundError",
    "HttpRateLimitError",
    "HttpServerError",

    "get_json",
    "get_camara_session",
    "separar_codigos",
    "parse_codigo_proposicao",
]
