"""
Modelos de domínio do Monitor Legislativo.

Todos imutáveis (frozen): dados vindos da API não são alterados depois de
lidos, e as visões são sempre recalculadas por inteiro.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


# ============================================================
# ENTRADA / API
# ============================================================

@dataclass(frozen=True)
class CodigoProposicao:
    """Chave estruturada de uma proposição: PL 123/2023 -> (PL, 123, 2023)."""

    sigla_tipo: str
    numero: int
    ano: int

    def __str__(self) -> str:
        return f"{self.sigla_tipo} {self.numero}/{self.ano}"


@dataclass(frozen=True)
class Andamento:
    """Uma tramitação (andamento) da proposição, como devolvida pela API."""

    data_hora: str
    descricao: str
    despacho: str = ""
    sigla_orgao: str = ""


@dataclass(frozen=True)
class StatusProposicao:
    """Campos de `statusProposicao` usados no painel de status."""

    descricao_situacao: str = ""
    nome_situacao: str = ""
    despacho: str = ""
    data_hora: str = ""
    nome_orgao: str = ""
    sigla_orgao: str = ""


@dataclass(frozen=True)
class DetalheProposicao:
    id: str
    sigla_tipo: str
    numero: str
    ano: str
    titulo: str
    status: Optional[StatusProposicao] = None


@dataclass(frozen=True)
class Proposicao:
    """Proposição resolvida: código digitado pelo usuário + dados da API."""

    codigo: str
    titulo: str
    andamentos: Tuple[Andamento, ...] = ()
    status: Optional[StatusProposicao] = None
    id: str = ""


# ============================================================
# RESULTADO POR CÓDIGO
# ============================================================

class TipoFalha(enum.Enum):
    PARSE = "parse"
    NAO_ENCONTRADA = "nao_encontrada"
    REDE = "rede"
    API = "api"


@dataclass(frozen=True)
class ResultadoCodigo:
    """Resultado do processamento de um código: proposição OU motivo da falha."""

    codigo: str
    proposicao: Optional[Proposicao] = None
    falha: Optional[TipoFalha] = None
    motivo: str = ""

    @property
    def ok(self) -> bool:
        return self.proposicao is not None

    def descricao_falha(self) -> str:
        """Texto usado na lista de não resolvidas."""
        if self.motivo and self.falha in (TipoFalha.REDE, TipoFalha.API):
            return f"{self.codigo} (Erro: {self.motivo})"
        return self.codigo


# ============================================================
# VISÕES DERIVADAS
# ============================================================

@dataclass(frozen=True)
class AndamentoRecente:
    data: str
    descricao: str
    codigo: str
    titulo: str


@dataclass(frozen=True)
class ContagemAlteracoes:
    codigo: str
    titulo: str
    num_alteracoes: int


@dataclass(frozen=True)
class StatusAtual:
    codigo: str
    titulo: str
    situacao: str
    despacho: str = ""
    data_status: str = ""
    orgao: str = ""
    id: str = ""


@dataclass(frozen=True)
class PontoSemanal:
    """Um ponto do gráfico semanal: início da semana + contagem por código."""

    semana: str
    contagens: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class VisoesDerivadas:
    ultimos_andamentos: Tuple[AndamentoRecente, ...] = ()
    ranking_alteracoes: Tuple[ContagemAlteracoes, ...] = ()
    status_atual: Tuple[StatusAtual, ...] = ()
    serie_semanal: Tuple[PontoSemanal, ...] = ()

    @property
    def vazia(self) -> bool:
        return not (self.ultimos_andamentos or self.ranking_alteracoes
                    or self.status_atual or self.serie_semanal)
