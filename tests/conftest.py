"""
Fixtures compartilhadas: respostas HTTP falsas, sessão falsa e um
CamaraService em memória. Nenhum teste acessa a rede.
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from monitor_legislativo.models import (  # noqa: E402
    Andamento,
    DetalheProposicao,
    Proposicao,
    StatusProposicao,
)


def make_response(
    status: int = 200,
    body: Any = None,
    text: Optional[str] = None,
    reason: str = "OK",
    url: str = "https://dadosabertos.camara.leg.br/api/v2/x",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.url = url
    resp.encoding = "utf-8"
    if body is not None:
        resp._content = json.dumps(body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    else:
        resp._content = (text or "").encode("utf-8")
    return resp


class FakeSession:
    """Devolve respostas (ou lança exceções) em sequência e registra as chamadas."""

    def __init__(self, *respostas):
        self.respostas = list(respostas)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url, params=None, timeout=None, verify=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        item = self.respostas.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeCamara:
    """
    CamaraService em memória.

    ids: "PL 1/2024" -> id ; detalhes/tramitacoes: id -> valor;
    erros: (metodo, id_ou_codigo) -> exceção a lançar.
    """

    def __init__(self, ids=None, detalhes=None, tramitacoes=None, erros=None):
        self.ids = ids or {}
        self.detalhes = detalhes or {}
        self.tramitacoes = tramitacoes or {}
        self.erros = erros or {}
        self.calls: List[tuple] = []

    def _talvez_erro(self, chave):
        if chave in self.erros:
            raise self.erros[chave]

    def buscar_id_proposicao(self, sigla_tipo, numero, ano):
        chave = f"{sigla_tipo} {numero}/{ano}"
        self.calls.append(("id", chave))
        self._talvez_erro(("id", chave))
        return self.ids.get(chave)

    def get_detalhes(self, pid):
        self.calls.append(("detalhes", pid))
        self._talvez_erro(("detalhes", pid))
        return self.detalhes.get(pid)

    def get_tramitacoes(self, pid):
        self.calls.append(("tramitacoes", pid))
        self._talvez_erro(("tramitacoes", pid))
        return self.tramitacoes.get(pid, [])


def make_proposicao(codigo: str, datas: List[str], titulo: str = "", status=None) -> Proposicao:
    return Proposicao(
        codigo=codigo,
        titulo=titulo or f"Ementa {codigo}",
        andamentos=tuple(Andamento(data_hora=d, descricao=f"mov {codigo} {d}") for d in datas),
        status=status,
    )


def make_detalhe(pid: str, titulo: str = "Ementa", status: Optional[StatusProposicao] = None) -> DetalheProposicao:
    return DetalheProposicao(id=pid, sigla_tipo="PL", numero="1", ano="2024", titulo=titulo, status=status)


@pytest.fixture
def no_sleep(monkeypatch):
    """Evita os backoffs reais do http_client."""
    sleeps = []
    monkeypatch.setattr("monitor_legislativo.services.http_client.time.sleep", sleeps.append)
    return sleeps
