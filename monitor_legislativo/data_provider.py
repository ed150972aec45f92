# monitor_legislativo/data_provider.py
"""
Camada central de dados do app.
- UI chama DataProvider
- DataProvider chama CamaraService e monta o EstadoPainel
- Nenhuma falha de um código interrompe o lote
"""
from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from monitor_legislativo.config import (
    MAX_WORKERS,
    MSG_ENTRADA_VAZIA,
    MSG_NENHUM_CODIGO_VALIDO,
)
from monitor_legislativo.models import Proposicao, ResultadoCodigo, TipoFalha
from monitor_legislativo.services.camara_service import CamaraService
from monitor_legislativo.services.http_client import HttpClientError, HttpConnectionError
from monitor_legislativo.services.parsers import parse_codigo_proposicao, separar_codigos
from monitor_legislativo.state import (
    EstadoPainel,
    concluir,
    estado_inicial,
    falhar,
    iniciar_carregamento,
)
from monitor_legislativo.utils.formatters import format_mensagem_resultado

logger = logging.getLogger(__name__)

Progresso = Callable[[int, int, str], None]
AoCarregar = Callable[[EstadoPainel], None]


@dataclass(frozen=True)
class ProviderConfig:
    max_workers: int = MAX_WORKERS  # 1 = sequencial


def reduzir_resultados(resultados: List[ResultadoCodigo]) -> Tuple[List[Proposicao], List[str]]:
    """Separa (proposições resolvidas, descrições das não resolvidas), na ordem de entrada."""
    resolvidas = [r.proposicao for r in resultados if r.ok]
    nao_resolvidas = [r.descricao_falha() for r in resultados if not r.ok]
    return resolvidas, nao_resolvidas


class DataProvider:
    """
    Camada central de dados do app.
    """

    def __init__(self, camara: Optional[CamaraService] = None, cfg: Optional[ProviderConfig] = None):
        self.cfg = cfg or ProviderConfig()
        self.camara = camara or CamaraService()

    # ---------------------------------------------------------------------
    # UM CÓDIGO
    # ---------------------------------------------------------------------

    def processar_codigo(self, codigo: str) -> ResultadoCodigo:
        """
        Parse -> ID -> detalhes -> tramitações para um código.

        Não lança erro de rede, de API ou de resposta malformada: toda falha
        vira ResultadoCodigo com motivo.
        """
        parsed = parse_codigo_proposicao(codigo)
        if parsed is None:
            logger.info("[PROCESSAR] Código inválido: %r", codigo)
            return ResultadoCodigo(codigo=codigo, falha=TipoFalha.PARSE)

        try:
            pid = self.camara.buscar_id_proposicao(parsed.sigla_tipo, parsed.numero, parsed.ano)
            if not pid:
                return ResultadoCodigo(codigo=codigo, falha=TipoFalha.NAO_ENCONTRADA)

            detalhes = self.camara.get_detalhes(pid)
            andamentos = self.camara.get_tramitacoes(pid)
        except HttpConnectionError as e:
            logger.error("[PROCESSAR] %s: %s", codigo, e.contexto())
            return ResultadoCodigo(codigo=codigo, falha=TipoFalha.REDE, motivo=str(e))
        except HttpClientError as e:
            logger.error("[PROCESSAR] %s: %s", codigo, e.contexto())
            return ResultadoCodigo(codigo=codigo, falha=TipoFalha.API, motivo=str(e))
        except (ValueError, TypeError, AttributeError) as e:
            # corpo fora do formato esperado pelos parsers
            logger.error("[PROCESSAR] %s: resposta inesperada da API: %r", codigo, e)
            return ResultadoCodigo(codigo=codigo, falha=TipoFalha.API, motivo=f"Resposta inesperada da API: {e}")

        if detalhes is None:
            return ResultadoCodigo(codigo=codigo, falha=TipoFalha.NAO_ENCONTRADA)

        logger.info("[PROCESSAR] ✅ %s -> id %s (%d andamentos)", codigo, pid, len(andamentos))
        return ResultadoCodigo(
            codigo=codigo,
            proposicao=Proposicao(
                codigo=codigo,
                titulo=detalhes.titulo,
                andamentos=tuple(andamentos),
                status=detalhes.status,
                id=pid,
            ),
        )

    # ---------------------------------------------------------------------
    # LOTE
    # ---------------------------------------------------------------------

    def processar_codigos(
        self,
        codigos: List[str],
        progresso: Optional[Progresso] = None
    ) -> List[ResultadoCodigo]:
        """Resultados na mesma ordem dos códigos, com ou sem threads."""
        total = len(codigos)

        def _one(item):
            i, codigo = item
            resultado = self.processar_codigo(codigo)
            if progresso:
                progresso(i + 1, total, codigo)
            return resultado

        if self.cfg.max_workers <= 1 or total <= 1:
            return [_one(item) for item in enumerate(codigos)]

        # ex.map preserva a ordem de entrada
        with concurrent.futures.ThreadPoolExecutor(max_workers=self.cfg.max_workers) as ex:
            return list(ex.map(_one, enumerate(codigos)))

    def processar(
        self,
        texto_codigos: str,
        estado: Optional[EstadoPainel] = None,
        progresso: Optional[Progresso] = None,
        ao_carregar: Optional[AoCarregar] = None
    ) -> EstadoPainel:
        """
        Ação "Processar Proposições".

        Entrada vazia ou sem nenhum código válido falha antes de qualquer
        requisição. Caso contrário processa todos os códigos e substitui a
        lista de proposições pelo resultado.

        `ao_carregar` recebe o snapshot CARREGANDO antes de qualquer
        requisição (a UI persiste esse snapshot no session_state).
        """
        codigos = separar_codigos(texto_codigos)
        estado = iniciar_carregamento(estado or estado_inicial(), codigos)
        if ao_carregar:
            ao_carregar(estado)

        if not codigos:
            return falhar(estado, MSG_ENTRADA_VAZIA)

        if all(parse_codigo_proposicao(c) is None for c in codigos):
            return falhar(estado, MSG_NENHUM_CODIGO_VALIDO)

        logger.info("[PROCESSAR] %d código(s): %s", len(codigos), ", ".join(codigos))
        resultados = self.processar_codigos(codigos, progresso=progresso)
        resolvidas, nao_resolvidas = reduzir_resultados(resultados)

        if nao_resolvidas:
            logger.warning("[PROCESSAR] Não resolvidas: %s", "; ".join(nao_resolvidas))

        mensagem = format_mensagem_resultado(nao_resolvidas, len(resolvidas))
        return concluir(estado, resolvidas, mensagem)
