"""
Tests for monitor_legislativo/services/camara_service.py
"""
import pytest
import requests

from monitor_legislativo.services.camara_service import CamaraService
from monitor_legislativo.services.http_client import HttpConnectionError, HttpServerError

from conftest import FakeSession, make_response

BASE = "https://api.teste/v2"


def make_service(*respostas, max_retries=1):
    session = FakeSession(*respostas)
    return CamaraService(base_url=BASE + "/", session=session, max_retries=max_retries), session


class TestBuscarIdProposicao:
    def test_parametros_da_busca(self, no_sleep):
        service, session = make_service(make_response(200, {"dados": [
            {"id": 2347150, "siglaTipo": "PL", "numero": 321, "ano": 2023},
        ]}))
        assert service.buscar_id_proposicao("pl", 321, 2023) == "2347150"

        call = session.calls[0]
        assert call["url"] == f"{BASE}/proposicoes"
        assert call["params"] == {
            "siglaTipo": "PL",
            "numero": 321,
            "ano": 2023,
            "ordem": "ASC",
            "ordenarPor": "id",
        }

    def test_zero_resultados_e_none(self, no_sleep):
        service, _ = make_service(make_response(200, {"dados": [], "links": []}))
        assert service.buscar_id_proposicao("PL", 999999, 2023) is None

    def test_erro_da_api_sobe(self, no_sleep):
        service, _ = make_service(make_response(500, text="boom", reason="Internal Server Error"))
        with pytest.raises(HttpServerError) as exc:
            service.buscar_id_proposicao("PL", 1, 2023)
        assert str(exc.value).startswith("Erro ao buscar ID da proposição: 500")

    def test_rede_sobe(self, no_sleep):
        service, _ = make_service(requests.exceptions.ConnectionError())
        with pytest.raises(HttpConnectionError):
            service.buscar_id_proposicao("PL", 1, 2023)


class TestDetalhesETramitacoes:
    def test_get_detalhes(self, no_sleep):
        service, session = make_service(make_response(200, {"dados": {
            "id": 10, "siglaTipo": "PL", "numero": 1, "ano": 2024, "ementa": "Ementa",
            "statusProposicao": {"descricaoSituacao": "Arquivada"},
        }}))
        det = service.get_detalhes("10")
        assert session.calls[0]["url"] == f"{BASE}/proposicoes/10"
        assert det.titulo == "Ementa"
        assert det.status.descricao_situacao == "Arquivada"

    def test_get_tramitacoes(self, no_sleep):
        service, session = make_service(make_response(200, {"dados": [
            {"dataHora": "2024-01-01T10:00", "descricaoTipo": "Apresentação", "siglaOrgao": "PLEN"},
        ]}))
        andamentos = service.get_tramitacoes("10")
        assert session.calls[0]["url"] == f"{BASE}/proposicoes/10/tramitacoes"
        assert andamentos[0].descricao == "Apresentação"
        assert andamentos[0].sigla_orgao == "PLEN"

    def test_erro_em_tramitacoes(self, no_sleep):
        service, _ = make_service(make_response(502, text="gateway", reason="Bad Gateway"))
        with pytest.raises(HttpServerError) as exc:
            service.get_tramitacoes("10")
        assert "andamentos da proposição" in str(exc.value)


class TestUmaRequisicaoPorChamada:
    def test_erro_500_sem_nova_tentativa_por_padrao(self, no_sleep):
        session = FakeSession(*[make_response(500, text="erro", reason="Internal Server Error")] * 3)
        service = CamaraService(base_url=BASE, session=session)
        with pytest.raises(HttpServerError):
            service.get_tramitacoes("1")
        assert len(session.calls) == 1
        assert no_sleep == []

    def test_falha_de_conexao_sem_nova_tentativa_por_padrao(self, no_sleep):
        session = FakeSession(*[requests.exceptions.ConnectionError("offline")] * 3)
        service = CamaraService(base_url=BASE, session=session)
        with pytest.raises(HttpConnectionError):
            service.get_detalhes("1")
        assert len(session.calls) == 1
