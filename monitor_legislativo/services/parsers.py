"""
Funções puras de parsing e extração de dados.

REGRAS:
- SEM Streamlit
- SEM requests/HTTP
- Funções puras (entrada -> saída)
"""

import re
from typing import Optional, Dict, List, Any

from monitor_legislativo.config import ANDAMENTO_NAO_ESPECIFICADO, TITULO_NAO_DISPONIVEL
from monitor_legislativo.models import (
    Andamento,
    CodigoProposicao,
    DetalheProposicao,
    StatusProposicao,
)


# ============================================================
# CÓDIGOS DIGITADOS PELO USUÁRIO
# ============================================================

# SIGLA [espaços] NUMERO / ANO(4 dígitos); não ancorado no início/fim
CODIGO_PATTERN = re.compile(r"([A-Z]+)\s*([0-9]+)/([0-9]{4})", re.IGNORECASE | re.ASCII)


def separar_codigos(texto: str) -> List[str]:
    """
    Separa a entrada livre em códigos.

    Ex: " PL 123/2023, ,PEC 45/2022 " -> ["PL 123/2023", "PEC 45/2022"]
    """
    if not texto:
        return []
    return [c.strip() for c in texto.split(",") if c.strip()]


def parse_codigo_proposicao(codigo: str) -> Optional[CodigoProposicao]:
    """
    Converte "PL 123/2023" em CodigoProposicao(PL, 123, 2023).

    Texto em volta do padrão é ignorado ("ver pl123/2023 hoje" é aceito).
    Retorna None se o padrão não existir ou se número/ano não forem positivos.
    """
    if not codigo:
        return None

    match = CODIGO_PATTERN.search(codigo)
    if not match:
        return None

    numero = int(match.group(2))
    ano = int(match.group(3))
    if numero <= 0 or ano <= 0:
        return None

    return CodigoProposicao(
        sigla_tipo=match.group(1).upper(),
        numero=numero,
        ano=ano,
    )


# ============================================================
# PARSING DE JSON - CÂMARA
# ============================================================

def parse_id_proposicao(data: Dict[str, Any], codigo: CodigoProposicao) -> Optional[str]:
    """
    Extrai o ID da resposta de /proposicoes?siglaTipo=&numero=&ano=.

    Prefere o item que bate exatamente com sigla/número/ano; senão o primeiro.
    Lista vazia -> None (proposição não existe).
    """
    if not data or not isinstance(data, dict):
        return None

    dados = data.get("dados") or []
    if not isinstance(dados, list):
        return None

    dados = [d for d in dados if isinstance(d, dict)]
    if not dados:
        return None

    for d in dados:
        if (str(d.get("numero", "")).strip() == str(codigo.numero) and
                str(d.get("ano", "")).strip() == str(codigo.ano) and
                (d.get("siglaTipo") or "").strip().upper() == codigo.sigla_tipo):
            return str(d.get("id") or "") or None

    return str(dados[0].get("id") or "") or None


def parse_status_proposicao(status: Optional[Dict[str, Any]]) -> Optional[StatusProposicao]:
    """Extrai `statusProposicao`; None quando ausente."""
    if not status or not isinstance(status, dict):
        return None

    return StatusProposicao(
        descricao_situacao=(status.get("descricaoSituacao") or "").strip(),
        nome_situacao=(status.get("nomeSituacao") or "").strip(),
        despacho=(status.get("despacho") or "").strip(),
        data_hora=status.get("dataHora") or "",
        nome_orgao=(status.get("nomeOrgao") or "").strip(),
        sigla_orgao=(status.get("siglaOrgao") or "").strip(),
    )


def parse_proposicao_dados(data: Dict[str, Any]) -> Optional[DetalheProposicao]:
    """
    Extrai dados básicos de uma proposição da resposta da API.

    Args:
        data: Resposta da API /proposicoes/{id}

    Returns:
        DetalheProposicao ou None se `dados` vier vazio
    """
    if not data or not isinstance(data, dict):
        return None

    d = data.get("dados") or {}
    if not isinstance(d, dict) or not d:
        return None

    titulo = (d.get("ementa") or "").strip() or (d.get("nome") or "").strip() or TITULO_NAO_DISPONIVEL

    return DetalheProposicao(
        id=str(d.get("id") or ""),
        sigla_tipo=(d.get("siglaTipo") or "").strip(),
        numero=str(d.get("numero") or "").strip(),
        ano=str(d.get("ano") or "").strip(),
        titulo=titulo,
        status=parse_status_proposicao(d.get("statusProposicao")),
    )


def parse_andamento(item: Dict[str, Any]) -> Andamento:
    descricao = (
        (item.get("descricaoTipo") or "").strip()
        or (item.get("descricaoSituacao") or "").strip()
        or ANDAMENTO_NAO_ESPECIFICADO
    )
    return Andamento(
        data_hora=str(item.get("dataHora") or ""),
        descricao=descricao,
        despacho=(item.get("despacho") or "").strip(),
        sigla_orgao=(item.get("siglaOrgao") or "").strip(),
    )


def parse_tramitacoes(data: Dict[str, Any]) -> List[Andamento]:
    """
    Extrai lista de tramitações da resposta da API, na ordem recebida.

    Args:
        data: Resposta da API /proposicoes/{id}/tramitacoes
    """
    if not data or not isinstance(data, dict):
        return []

    dados = data.get("dados") or []
    if not isinstance(dados, list):
        return []
    return [parse_andamento(t) for t in dados if isinstance(t, dict)]
