"""
Testes para a carga de dados de demonstração.
"""

import random
from datetime import datetime

from solarflow.adapters.memory.seed import seed_demo_data, shift_months


class TestShiftMonths:
    def test_volta_dois_meses(self):
        assert shift_months(datetime(2024, 6, 13), -2) == datetime(2024, 4, 13)

    def test_vira_o_ano(self):
        assert shift_months(datetime(2024, 1, 15), -2) == datetime(2023, 11, 15)
        assert shift_months(datetime(2024, 11, 15), 6) == datetime(2025, 5, 15)

    def test_limita_ao_fim_do_mes(self):
        assert shift_months(datetime(2024, 3, 31), -1) == datetime(2024, 2, 29)


class TestSeedDemoData:
    """A carga passa pelos use cases e popula a auditoria."""

    def test_contagens(self, container):
        counts = seed_demo_data(container, rng=random.Random(7))

        assert counts == {
            "User": 1,
            "Ticket": 3,
            "Message": 0,
            "Activity": 10,
            "SolarSystem": 2,
            "MaintenanceBooking": 2,
            "MaintenanceReport": 1,
            "PerformanceData": 31,
        }

    def test_cascata_do_relatorio(self, container):
        seed_demo_data(container, rng=random.Random(7))
        store = container.store()

        completed = store.maintenance_bookings.get_by_id(2)
        report = store.maintenance_reports.get_by_id(1)
        residential = store.solar_systems.get_by_id(1)

        assert completed.status == "completed"
        assert residential.last_serviced == report.date

    def test_reprodutivel_com_semente(self, clock):
        from solarflow.config.container import Container

        totals = []
        for _ in range(2):
            container = Container()
            container.clock.override(clock)
            seed_demo_data(container, rng=random.Random(42))
            stats = container.system_performance_stats_service().execute(1)
            totals.append(stats.total_energy_generated)

        assert totals[0] == totals[1]

    def test_proximo_servico_pendente(self, container):
        seed_demo_data(container, rng=random.Random(7))

        stats = container.maintenance_stats_service().execute()

        assert stats.pending_bookings == 1
        assert stats.completed_services == 1
        assert len(stats.upcoming_services) == 1
