"""
Configurações e constantes globais do Monitor Legislativo.
Este arquivo centraliza valores "hardcoded" e configurações do sistema.

REGRA: Este módulo NÃO pode importar streamlit.
NOTA: Alguns valores aceitam override por variável de ambiente (MONITOR_*).
"""
import logging
import os


# ============================================================
# CONFIGURAÇÕES DE API
# ============================================================

BASE_URL = os.getenv("MONITOR_CAMARA_BASE_URL", "https://dadosabertos.camara.leg.br/api/v2").rstrip("/")

HEADERS = {
    "User-Agent": "MonitorLegislativo/1.0",
    "Accept": "application/json",
}

DEFAULT_TIMEOUT = int(os.getenv("MONITOR_HTTP_TIMEOUT", "30"))
# 1 = uma requisição por chamada, sem repetição
DEFAULT_MAX_RETRIES = int(os.getenv("MONITOR_HTTP_MAX_RETRIES", "1"))
DEFAULT_BACKOFFS = [0.5, 1.0, 2.0, 4.0]

# 1 = processamento sequencial (um código por vez)
MAX_WORKERS = int(os.getenv("MONITOR_MAX_WORKERS", "1"))


# ============================================================
# VISÕES DERIVADAS
# ============================================================

LIMITE_ULTIMOS_ANDAMENTOS = 10

SITUACAO_NAO_INFORMADA = "Não informado"
ANDAMENTO_NAO_ESPECIFICADO = "Andamento não especificado"
TITULO_NAO_DISPONIVEL = "Título não disponível"


# ============================================================
# MENSAGENS AO USUÁRIO
# ============================================================

MSG_ENTRADA_VAZIA = "Por favor, insira pelo menos um código de proposição."

MSG_NENHUM_CODIGO_VALIDO = (
    "Nenhum código de proposição válido foi informado. "
    "Use o formato SIGLA NÚMERO/ANO (ex: PL 123/2023), separando os códigos por vírgula."
)

MSG_NENHUMA_ENCONTRADA = "Nenhuma proposição encontrada para os códigos informados."

MSG_NAO_RESOLVIDAS = (
    "Não foi possível encontrar ou processar as seguintes proposições: {codigos}. "
    "Verifique os códigos e tente novamente. "
    "Isso pode ser devido a problemas de rede ou dados não disponíveis na API."
)

MSG_ERRO_REDE = (
    "Erro de rede: Não foi possível conectar à API da Câmara dos Deputados. "
    "Verifique sua conexão com a internet ou tente novamente mais tarde."
)

MSG_PROCESSAMENTO_INTERROMPIDO = (
    "O processamento foi interrompido antes de terminar. "
    "Clique em \"Processar Proposições\" novamente."
)

PLACEHOLDER_CODIGOS = "Ex: PL 123/2023, PEC 45/2022, MP 789/2024"


# ============================================================
# LOGGING
# ============================================================

LOG_LEVEL = os.getenv("MONITOR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configurar_logging(level: str = LOG_LEVEL) -> None:
    """Configura o logging raiz (chamado uma vez pelo app)."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
