"""
Tests for monitor_legislativo/utils/date_utils.py
"""
import datetime

import pytest

from monitor_legislativo.utils.date_utils import (
    TZ_BRASILIA,
    data_iso,
    fmt_data_br,
    get_brasilia_now,
    inicio_semana,
    parse_data,
)


class TestInicioSemana:
    @pytest.mark.parametrize("data_hora, domingo", [
        ("2024-01-07T09:00", "2024-01-07"),      # domingo
        ("2024-01-10T14:30:00", "2024-01-07"),   # quarta
        ("2024-01-13T23:59", "2024-01-07"),      # sábado
        ("2024-01-06T10:00", "2023-12-31"),      # sábado, vira o ano
        ("2024-03-01", "2024-02-25"),            # ano bissexto
    ])
    def test_domingo_da_semana(self, data_hora, domingo):
        assert inicio_semana(data_hora) == domingo

    def test_usa_campos_de_calendario_sem_converter_fuso(self):
        # 23:30 em -03:00 já é segunda em UTC; continua domingo
        assert inicio_semana("2024-01-07T23:30:00-03:00") == "2024-01-07"

    @pytest.mark.parametrize("data_hora", ["", "sem data", "2024-13-01T00:00"])
    def test_data_invalida(self, data_hora):
        assert inicio_semana(data_hora) is None


class TestDataIso:
    def test_descarta_hora(self):
        assert data_iso("2024-01-10T14:30:00") == "2024-01-10"

    def test_vazio(self):
        assert data_iso("") == ""

    def test_parse_data(self):
        assert parse_data("2024-01-10T14:30") == datetime.date(2024, 1, 10)


class TestFormatacao:
    def test_fmt_data_br(self):
        assert fmt_data_br("2024-01-10") == "10/01/2024"
        assert fmt_data_br("") == "—"

    def test_brasilia_now_tem_fuso(self):
        assert get_brasilia_now().tzinfo == TZ_BRASILIA
