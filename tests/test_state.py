"""
Tests for monitor_legislativo/state.py
"""
from types import SimpleNamespace

import pytest

from monitor_legislativo.models import VisoesDerivadas
from monitor_legislativo.state import (
    EstadoPainel,
    Fase,
    STATE_KEYS,
    concluir,
    encerrar_carregamento,
    estado_inicial,
    falhar,
    get_estado,
    get_state_key,
    iniciar_carregamento,
    init_state,
    reset_state,
    set_estado,
)

from conftest import make_proposicao


def fake_st():
    return SimpleNamespace(session_state={})


class TestTransicoes:
    def test_estado_inicial(self):
        estado = estado_inicial()
        assert estado.fase is Fase.OCIOSO
        assert estado.proposicoes == ()
        assert estado.visoes == VisoesDerivadas()

    def test_iniciar_carregamento_zera_tudo(self):
        anterior = concluir(estado_inicial(), [make_proposicao("PL 1/2024", ["2024-01-08"])], "aviso")
        estado = iniciar_carregamento(anterior, ["PL 2/2024"])
        assert estado.fase is Fase.CARREGANDO
        assert estado.carregando
        assert estado.codigos == ("PL 2/2024",)
        assert estado.proposicoes == ()
        assert estado.mensagem == ""
        assert estado.visoes.vazia

    def test_concluir_recalcula_visoes(self):
        props = [make_proposicao("PL 1/2024", ["2024-01-08", "2024-01-09"])]
        estado = concluir(iniciar_carregamento(estado_inicial(), ["PL 1/2024"]), props)
        assert estado.fase is Fase.CONCLUIDO
        assert estado.visoes.ranking_alteracoes[0].num_alteracoes == 2
        assert estado.visoes.serie_semanal[0].semana == "2024-01-07"

    def test_concluir_sem_proposicoes_e_falha(self):
        assert concluir(estado_inicial(), [], "nada").fase is Fase.FALHOU

    def test_falhar(self):
        estado = falhar(estado_inicial(), "erro")
        assert (estado.fase, estado.mensagem) == (Fase.FALHOU, "erro")

    def test_encerrar_carregamento_fecha_snapshot_preso(self):
        preso = iniciar_carregamento(estado_inicial(), ["PL 1/2024"])
        estado = encerrar_carregamento(preso, "interrompido")
        assert estado.fase is Fase.FALHOU
        assert not estado.carregando
        assert estado.mensagem == "interrompido"

    def test_encerrar_carregamento_mantem_estado_terminal(self):
        pronto = concluir(estado_inicial(), [make_proposicao("PL 1/2024", ["2024-01-08"])])
        assert encerrar_carregamento(pronto, "interrompido") is pronto
        assert encerrar_carregamento(estado_inicial(), "interrompido") == estado_inicial()

    def test_snapshot_imutavel(self):
        estado = estado_inicial()
        with pytest.raises(AttributeError):
            estado.mensagem = "x"


class TestSessionState:
    def test_init_state_preenche_defaults(self):
        st = fake_st()
        init_state(st)
        assert set(st.session_state) == set(STATE_KEYS)
        assert isinstance(st.session_state["estado_painel"], EstadoPainel)
        assert st.session_state["codigos_input"] == ""

    def test_init_state_nao_sobrescreve(self):
        st = fake_st()
        st.session_state["codigos_input"] = "PL 1/2024"
        init_state(st)
        assert st.session_state["codigos_input"] == "PL 1/2024"

    def test_get_set_estado(self):
        st = fake_st()
        estado = falhar(estado_inicial(), "x")
        set_estado(st, estado)
        assert get_estado(st) is estado

    def test_get_state_key_default(self):
        assert get_state_key(fake_st(), "codigos_input") == ""

    def test_reset_state(self):
        st = fake_st()
        set_estado(st, falhar(estado_inicial(), "x"))
        reset_state(st, ["estado_painel"])
        assert get_estado(st).fase is Fase.OCIOSO
