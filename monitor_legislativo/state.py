"""
Estado do painel e gerenciamento do Session State do Streamlit.

O estado é um snapshot imutável (EstadoPainel). Cada transição devolve um
novo snapshot; as visões derivadas são recalculadas por inteiro em
`concluir`.

REGRA: Este módulo recebe `st` como parâmetro para evitar import direto.
REGRA: NÃO faz HTTP; a lógica de lote fica no DataProvider.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from monitor_legislativo.agregador import recalcular
from monitor_legislativo.models import Proposicao, VisoesDerivadas


# ============================================================
# SNAPSHOT DO PAINEL
# ============================================================

class Fase(enum.Enum):
    OCIOSO = "ocioso"
    CARREGANDO = "carregando"
    CONCLUIDO = "concluido"
    FALHOU = "falhou"


@dataclass(frozen=True)
class EstadoPainel:
    codigos: Tuple[str, ...] = ()
    proposicoes: Tuple[Proposicao, ...] = ()
    fase: Fase = Fase.OCIOSO
    mensagem: str = ""
    visoes: VisoesDerivadas = field(default_factory=VisoesDerivadas)

    @property
    def carregando(self) -> bool:
        return self.fase is Fase.CARREGANDO


def estado_inicial() -> EstadoPainel:
    return EstadoPainel()


def iniciar_carregamento(estado: EstadoPainel, codigos: Sequence[str]) -> EstadoPainel:
    """Nova submissão: zera proposições, mensagem e visões."""
    return replace(
        estado,
        codigos=tuple(codigos),
        proposicoes=(),
        fase=Fase.CARREGANDO,
        mensagem="",
        visoes=VisoesDerivadas(),
    )


def concluir(
    estado: EstadoPainel,
    proposicoes: Sequence[Proposicao],
    mensagem: str = ""
) -> EstadoPainel:
    """Substitui a lista inteira e recalcula as visões."""
    props = tuple(proposicoes)
    return replace(
        estado,
        proposicoes=props,
        fase=Fase.CONCLUIDO if props else Fase.FALHOU,
        mensagem=mensagem,
        visoes=recalcular(props),
    )


def falhar(estado: EstadoPainel, mensagem: str) -> EstadoPainel:
    return replace(
        estado,
        proposicoes=(),
        fase=Fase.FALHOU,
        mensagem=mensagem,
        visoes=VisoesDerivadas(),
    )


def encerrar_carregamento(estado: EstadoPainel, mensagem: str) -> EstadoPainel:
    """Fecha um snapshot que ficou em CARREGANDO (execução interrompida); outros passam intactos."""
    if not estado.carregando:
        return estado
    return falhar(estado, mensagem)


# ============================================================
# DEFINIÇÃO DE TODAS AS CHAVES DO SESSION_STATE
# ============================================================

STATE_KEYS: Dict[str, Dict[str, Any]] = {
    "estado_painel": {
        "default_factory": "estado_inicial",
        "type": "EstadoPainel",
        "desc": "Snapshot atual do painel (proposições, fase, mensagem, visões)",
    },
    "codigos_input": {
        "default": "",
        "type": "str",
        "desc": "Texto digitado no campo de códigos",
    },
}


def _get_default_value(key_config: Dict[str, Any]) -> Any:
    if key_config.get("default_factory") == "estado_inicial":
        return estado_inicial()
    return key_config.get("default")


def init_state(st) -> None:
    """
    Inicializa TODAS as chaves do session_state com valores default.

    Deve ser chamada no início do app, ANTES de qualquer uso do session_state.
    """
    for key, config in STATE_KEYS.items():
        if key not in st.session_state:
            st.session_state[key] = _get_default_value(config)


def reset_state(st, keys: Optional[list] = None) -> None:
    """Reseta chaves específicas (ou todas) para os valores default."""
    keys_to_reset = keys if keys else list(STATE_KEYS.keys())
    for key in keys_to_reset:
        if key in STATE_KEYS:
            st.session_state[key] = _get_default_value(STATE_KEYS[key])


def get_state_key(st, key: str, default: Any = None) -> Any:
    if default is None and key in STATE_KEYS:
        default = _get_default_value(STATE_KEYS[key])
    return st.session_state.get(key, default)


def set_state_key(st, key: str, value: Any) -> None:
    st.session_state[key] = value


def get_estado(st) -> EstadoPainel:
    return get_state_key(st, "estado_painel")


def set_estado(st, estado: EstadoPainel) -> None:
    set_state_key(st, "estado_painel", estado)


__all__ = [
    'Fase',
    'EstadoPainel',
    'estado_inicial',
    'iniciar_carregamento',
    'concluir',
    'falhar',
    'encerrar_carregamento',
    'STATE_KEYS',
    'init_state',
    'reset_state',
    'get_state_key',
    'set_state_key',
    'get_estado',
    'set_estado',
]
