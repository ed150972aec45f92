"""
Serviço de acesso à API da Câmara dos Deputados.

REGRAS:
- SEM Streamlit
- SEM cache
- Usa http_client para requisições (erros viram exceções HttpClientError)
- Usa parsers para extração de dados
"""

import logging
from typing import Optional, List

import requests

from monitor_legislativo.config import BASE_URL, DEFAULT_TIMEOUT, DEFAULT_MAX_RETRIES
from monitor_legislativo.models import Andamento, CodigoProposicao, DetalheProposicao
from .http_client import get_json, get_camara_session
from .parsers import parse_id_proposicao, parse_proposicao_dados, parse_tramitacoes

logger = logging.getLogger(__name__)


class CamaraService:
    """
    Serviço para acesso à API da Câmara dos Deputados.

    Cada método faz exatamente uma requisição. Falhas de rede ou respostas
    de erro sobem como HttpClientError; "não encontrado" na busca de ID é
    None, não exceção.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES
    ):
        self.base_url = base_url.rstrip("/")
        self._session = session or get_camara_session()
        self.timeout = timeout
        self.max_retries = max_retries

    def _get(self, url: str, recurso: str, params: Optional[dict] = None):
        logger.info("[CAMARA] GET %s %s", url, params or "")
        return get_json(
            url,
            params=params,
            recurso=recurso,
            session=self._session,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )

    # ============================================================
    # PROPOSIÇÕES
    # ============================================================

    def buscar_id_proposicao(self, sigla_tipo: str, numero: int, ano: int) -> Optional[str]:
        """
        Busca o ID de uma proposição por sigla/número/ano.

        Returns:
            ID como string, ou None se a API não encontrar nenhuma
        """
        codigo = CodigoProposicao(sigla_tipo=(sigla_tipo or "").strip().upper(), numero=numero, ano=ano)
        params = {
            "siglaTipo": codigo.sigla_tipo,
            "numero": codigo.numero,
            "ano": codigo.ano,
            "ordem": "ASC",
            "ordenarPor": "id",
        }
        data = self._get(f"{self.base_url}/proposicoes", "ID da proposição", params=params)
        pid = parse_id_proposicao(data, codigo)
        if pid is None:
            logger.info("[CAMARA] Nenhuma proposição para %s", codigo)
        return pid

    def get_detalhes(self, id_proposicao: str) -> Optional[DetalheProposicao]:
        """Busca dados básicos + status de uma proposição."""
        data = self._get(f"{self.base_url}/proposicoes/{id_proposicao}", "detalhes da proposição")
        return parse_proposicao_dados(data)

    # ============================================================
    # TRAMITAÇÕES
    # ============================================================

    def get_tramitacoes(self, id_proposicao: str) -> List[Andamento]:
        """Busca tramitações de uma proposição, na ordem devolvida pela API."""
        data = self._get(
            f"{self.base_url}/proposicoes/{id_proposicao}/tramitacoes",
            "andamentos da proposição",
        )
        return parse_tramitacoes(data)
