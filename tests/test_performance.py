"""Testes dos cartões de performance logística."""

from datetime import date

from services.estoque.performance import (
    ResumoPerformance,
    cargas_do_dia,
    em_operacao,
    media_permanencia,
    resumo_performance,
)


class TestPerformance:
    def test_media_permanencia(self, registro):
        regs = [
            registro(hora_chegada="08:00", hora_saida="10:00"),
            registro(hora_chegada="08:00", hora_saida="09:00"),
            registro(hora_chegada="08:00"),
            registro(hora_chegada="10:00", hora_saida="09:00"),
        ]
        assert media_permanencia(regs) == "1h 30m"

    def test_media_sem_dados(self, registro):
        assert media_permanencia([registro()]) == "-"

    def test_em_operacao(self, registro):
        regs = [
            registro(hora_chegada="08:00"),
            registro(hora_chegada="08:00", hora_entrada="08:30"),
            registro(hora_chegada="08:00", hora_saida="11:00"),
            registro(),
        ]
        assert em_operacao(regs) == 2

    def test_cargas_do_dia(self, registro):
        regs = [
            registro(data_descarga="2024-01-06"),
            registro(data_descarga="2024-01-06"),
            registro(data_descarga="2024-01-07"),
            registro(data_descarga=""),
        ]
        assert cargas_do_dia(regs, date(2024, 1, 6)) == 2
        assert cargas_do_dia(regs, "07/01/2024") == 1

    def test_cargas_do_dia_padrao_hoje(self, registro):
        hoje = date.today().isoformat()
        assert cargas_do_dia([registro(data_descarga=hoje), registro(data_descarga="1999-01-01")]) == 1

    def test_resumo(self, registro):
        assert resumo_performance([]) == ResumoPerformance()
        r = resumo_performance([registro(hora_chegada="07:00", hora_saida="07:45")], dia="2024-01-06")
        assert r == ResumoPerformance(media_permanencia="0h 45m", cargas_do_dia=1, em_operacao=0)
