"""
HTTP Client para a API de Dados Abertos da Câmara.

REGRAS:
- SEM Streamlit
- SEM cache
- Exceções próprias com contexto (status, motivo, trecho da resposta)
- Retry com backoff exponencial para 429/5xx e falhas de transporte
"""

import json
import logging
import time
from typing import Optional, Dict, Any, List

import certifi
import requests

from monitor_legislativo.config import (
    HEADERS,
    DEFAULT_TIMEOUT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_BACKOFFS,
    MSG_ERRO_REDE,
)

logger = logging.getLogger(__name__)


# ============================================================
# EXCEÇÕES
# ============================================================

class HttpClientError(Exception):
    """Erro base para operações HTTP."""

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: Optional[int] = None,
        reason: str = "",
        response_snippet: str = ""
    ):
        self.url = url
        self.status_code = status_code
        self.reason = reason or ""
        self.response_snippet = response_snippet[:500] if response_snippet else ""
        super().__init__(message)

    def contexto(self) -> str:
        """Mensagem + URL/status para log."""
        parts = [str(self)]
        if self.url:
            parts.append(f"URL: {self.url}")
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        return " | ".join(parts)


class HttpConnectionError(HttpClientError):
    """Falha de transporte (sem conexão, DNS, conexão recusada)."""
    pass


class HttpTimeoutError(HttpConnectionError):
    """Timeout na requisição."""
    pass


class HttpApiError(HttpClientError):
    """A API respondeu com status de erro."""
    pass


class HttpNotFoundError(HttpApiError):
    """Recurso não encontrado (404)."""
    pass


class HttpRateLimitError(HttpApiError):
    """Rate limit exceeded (429)."""
    pass


class HttpServerError(HttpApiError):
    """Erro no servidor (5xx)."""
    pass


# ============================================================
# CONFIGURAÇÕES
# ============================================================

SSL_VERIFY = certifi.where()

SEM_CORPO = "Sem corpo de resposta"
MOTIVO_DESCONHECIDO = "Erro desconhecido"


# ============================================================
# SESSÃO HTTP REUTILIZÁVEL
# ============================================================

def _create_session(headers: Optional[Dict[str, str]] = None) -> requests.Session:
    """Cria uma sessão HTTP configurada."""
    session = requests.Session()
    if headers:
        session.headers.update(headers)
    return session


_camara_session: Optional[requests.Session] = None


def get_camara_session() -> requests.Session:
    """Retorna sessão configurada para a Câmara."""
    global _camara_session
    if _camara_session is None:
        _camara_session = _create_session(HEADERS)
    return _camara_session


# ============================================================
# EXTRAÇÃO DE ERROS
# ============================================================

def extrair_corpo_erro(resp: requests.Response) -> str:
    """
    Trecho legível do corpo de uma resposta de erro.

    JSON é re-serializado; caso contrário usa o texto puro.
    """
    try:
        corpo = json.dumps(resp.json(), ensure_ascii=False)
    except ValueError:
        corpo = resp.text or ""
    corpo = corpo.strip()
    return corpo[:500] if corpo else SEM_CORPO


def erro_de_resposta(resp: requests.Response, url: str, recurso: str) -> HttpApiError:
    """Converte uma resposta não-2xx na exceção correspondente."""
    status = resp.status_code
    motivo = resp.reason or MOTIVO_DESCONHECIDO
    corpo = extrair_corpo_erro(resp)
    mensagem = f"Erro ao buscar {recurso}: {status} - {motivo}. Detalhes: {corpo}"

    if status == 404:
        cls = HttpNotFoundError
    elif status == 429:
        cls = HttpRateLimitError
    elif 500 <= status <= 599:
        cls = HttpServerError
    else:
        cls = HttpApiError

    return cls(mensagem, url=url, status_code=status, reason=motivo, response_snippet=corpo)


def _deve_repetir(status: int) -> bool:
    return status == 429 or 500 <= status <= 599


# ============================================================
# REQUISIÇÃO
# ============================================================

def get_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    recurso: str = "dados",
    session: Optional[requests.Session] = None,
    timeout: int = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    backoffs: Optional[List[float]] = None
) -> Any:
    """
    Executa GET e devolve o corpo JSON decodificado.

    Args:
        url: URL para requisição
        params: Query parameters
        recurso: Nome do recurso para as mensagens de erro
            (ex: "ID da proposição")
        session: Sessão HTTP (usa a da Câmara se não fornecida)
        timeout: Timeout em segundos
        max_retries: Número máximo de tentativas
        backoffs: Lista de delays entre tentativas

    Returns:
        Corpo JSON (dict ou list)

    Raises:
        HttpConnectionError: Sem conexão com a API (inclui HttpTimeoutError)
        HttpApiError: API respondeu com status de erro
        HttpClientError: Outros erros de requisição
    """
    session = session or get_camara_session()
    backoffs = backoffs or DEFAULT_BACKOFFS
    tentativas = max(1, max_retries)

    last_error: Optional[HttpClientError] = None

    for attempt in range(tentativas):
        ultima = attempt == tentativas - 1
        delay = backoffs[min(attempt, len(backoffs) - 1)]

        try:
            resp = session.get(url, params=params, timeout=timeout, verify=SSL_VERIFY)
        except requests.exceptions.Timeout:
            last_error = HttpTimeoutError(MSG_ERRO_REDE, url=url)
        except requests.exceptions.ConnectionError:
            last_error = HttpConnectionError(MSG_ERRO_REDE, url=url)
        except requests.exceptions.RequestException as e:
            raise HttpClientError(f"Erro ao buscar {recurso}: {e}", url=url) from e
        else:
            if resp.ok:
                try:
                    return resp.json()
                except ValueError as e:
                    raise HttpApiError(
                        f"Erro ao buscar {recurso}: resposta não é JSON válido. "
                        f"Detalhes: {(resp.text or SEM_CORPO)[:200]}",
                        url=url,
                        status_code=resp.status_code,
                        reason=resp.reason or "",
                        response_snippet=resp.text or "",
                    ) from e

            last_error = erro_de_resposta(resp, url, recurso)
            if not _deve_repetir(resp.status_code):
                raise last_error

        logger.warning("[HTTP] Tentativa %d/%d falhou: %s", attempt + 1, tentativas, last_error.contexto())
        if not ultima:
            time.sleep(delay)

    raise last_error
