"""
Utilitários de data e hora para o Monitor Legislativo.

REGRA: Este módulo NÃO pode importar streamlit.
NOTA: Datas das tramitações são lidas pelos campos de calendário escritos no
      timestamp da API (horário de Brasília), sem conversão para UTC.
"""
import datetime
from zoneinfo import ZoneInfo
from typing import Optional


# Timezone de Brasília
TZ_BRASILIA = ZoneInfo("America/Sao_Paulo")


def get_brasilia_now() -> datetime.datetime:
    """Retorna datetime atual no fuso de Brasília."""
    return datetime.datetime.now(TZ_BRASILIA)


def data_iso(data_hora: str) -> str:
    """'2024-01-10T14:30:00' -> '2024-01-10' (descarta a hora)."""
    if not data_hora:
        return ""
    return str(data_hora).split("T")[0].strip()


def parse_data(data_hora: str) -> Optional[datetime.date]:
    """Data de calendário de um timestamp ISO; None se inválido."""
    try:
        return datetime.date.fromisoformat(data_iso(data_hora)[:10])
    except ValueError:
        return None


def inicio_semana(data_hora: str) -> Optional[str]:
    """
    Domingo da semana da data (no próprio dia, se já for domingo).

    Ex: 2024-01-10 (quarta) -> '2024-01-07'; 2024-01-06 (sábado) -> '2023-12-31'
    """
    dt = parse_data(data_hora)
    if dt is None:
        return None
    # weekday(): segunda=0 ... domingo=6
    dias_desde_domingo = (dt.weekday() + 1) % 7
    return (dt - datetime.timedelta(days=dias_desde_domingo)).isoformat()


def fmt_data_br(data: str) -> str:
    """'2024-01-10' -> '10/01/2024'; texto vazio/inválido -> '—'."""
    dt = parse_data(data)
    if dt is None:
        return "—"
    return dt.strftime("%d/%m/%Y")
