"""
Visões derivadas da lista de proposições processadas.

REGRAS:
- SEM Streamlit
- SEM HTTP
- Funções puras: recalculadas por inteiro a cada nova lista, nada é
  atualizado incrementalmente.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from monitor_legislativo.config import LIMITE_ULTIMOS_ANDAMENTOS, SITUACAO_NAO_INFORMADA
from monitor_legislativo.models import (
    AndamentoRecente,
    ContagemAlteracoes,
    PontoSemanal,
    Proposicao,
    StatusAtual,
    VisoesDerivadas,
)
from monitor_legislativo.utils.date_utils import data_iso, inicio_semana


# ============================================================
# 1) ÚLTIMOS ANDAMENTOS
# ============================================================

def ultimos_andamentos(
    proposicoes: Sequence[Proposicao],
    limite: int = LIMITE_ULTIMOS_ANDAMENTOS
) -> List[AndamentoRecente]:
    """
    Andamentos de todas as proposições, do mais recente para o mais antigo.

    Ordena só pela data (sem hora). Empates mantêm a ordem de entrada:
    proposições na ordem da lista, andamentos na ordem da API.
    """
    todos = [
        AndamentoRecente(
            data=data_iso(mov.data_hora),
            descricao=mov.descricao,
            codigo=prop.codigo,
            titulo=prop.titulo,
        )
        for prop in proposicoes
        for mov in prop.andamentos
    ]
    # sorted(reverse=True) é estável
    todos = sorted(todos, key=lambda a: a.data, reverse=True)
    return todos[:limite]


# ============================================================
# 2) PROPOSIÇÕES COM MAIS ALTERAÇÕES
# ============================================================

def ranking_alteracoes(proposicoes: Sequence[Proposicao]) -> List[ContagemAlteracoes]:
    """Proposições por número de andamentos, decrescente; empates na ordem de entrada."""
    contagens = [
        ContagemAlteracoes(codigo=p.codigo, titulo=p.titulo, num_alteracoes=len(p.andamentos))
        for p in proposicoes
    ]
    return sorted(contagens, key=lambda c: c.num_alteracoes, reverse=True)


# ============================================================
# 3) STATUS ATUAL
# ============================================================

def status_atual(proposicoes: Sequence[Proposicao]) -> List[StatusAtual]:
    """
    Status atual de cada proposição.

    Só a situação tem valor padrão ("Não informado"); despacho, data e
    órgão ficam vazios quando a API não os informa.
    """
    out = []
    for p in proposicoes:
        s = p.status
        if s is None:
            out.append(StatusAtual(codigo=p.codigo, titulo=p.titulo,
                                   situacao=SITUACAO_NAO_INFORMADA, id=p.id))
            continue

        out.append(StatusAtual(
            codigo=p.codigo,
            titulo=p.titulo,
            situacao=s.descricao_situacao or s.nome_situacao or SITUACAO_NAO_INFORMADA,
            despacho=s.despacho,
            data_status=data_iso(s.data_hora),
            orgao=s.nome_orgao,
            id=p.id,
        ))
    return out


# ============================================================
# 4) MOVIMENTAÇÃO POR SEMANA
# ============================================================

def contagem_semanal(proposicoes: Sequence[Proposicao]) -> Dict[Tuple[str, str], int]:
    """(início da semana, código) -> nº de andamentos. Esparso."""
    contagem: Counter = Counter()
    for p in proposicoes:
        for mov in p.andamentos:
            semana = inicio_semana(mov.data_hora)
            if semana is None:
                continue
            contagem[(semana, p.codigo)] += 1
    return dict(contagem)


def serie_semanal(proposicoes: Sequence[Proposicao]) -> List[PontoSemanal]:
    """
    Grade densa para o gráfico: uma entrada por semana observada (ordem
    crescente), cada uma com a contagem de TODAS as proposições (0 se nada).
    """
    contagem = contagem_semanal(proposicoes)
    # ISO YYYY-MM-DD: ordem lexicográfica == cronológica
    semanas = sorted({semana for semana, _ in contagem})

    return [
        PontoSemanal(
            semana=semana,
            contagens={p.codigo: contagem.get((semana, p.codigo), 0) for p in proposicoes},
        )
        for semana in semanas
    ]


def serie_semanal_dataframe(serie: Sequence[PontoSemanal]) -> pd.DataFrame:
    """Série semanal como DataFrame: índice = semana, uma coluna por código."""
    if not serie:
        return pd.DataFrame()

    df = pd.DataFrame(
        [p.contagens for p in serie],
        index=pd.Index([p.semana for p in serie], name="semana"),
    )
    return df.fillna(0).astype(int)


# ============================================================
# RECÁLCULO COMPLETO
# ============================================================

def recalcular(proposicoes: Sequence[Proposicao]) -> VisoesDerivadas:
    """Recalcula as quatro visões a partir da lista atual."""
    if not proposicoes:
        return VisoesDerivadas()

    return VisoesDerivadas(
        ultimos_andamentos=tuple(ultimos_andamentos(proposicoes)),
        ranking_alteracoes=tuple(ranking_alteracoes(proposicoes)),
        status_atual=tuple(status_atual(proposicoes)),
        serie_semanal=tuple(serie_semanal(proposicoes)),
    )
