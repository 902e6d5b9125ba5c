"""
Testes Unitários para Use Cases de Manutenção.

A criação de relatório é testada com a trilha de auditoria inscrita,
pois a cascata e as atividades precisam aparecer juntas.
"""

import json
from datetime import date, datetime

import pytest

from solarflow.core.maintenance.dtos import (
    CreateMaintenanceBookingInputDTO,
    CreateMaintenanceReportInputDTO,
)
from solarflow.core.maintenance.entities import BookingStatus
from solarflow.core.maintenance.use_cases import (
    CreateMaintenanceBookingService,
    CreateMaintenanceReportService,
    GetMaintenanceBookingService,
    GetMaintenanceReportService,
    ListMaintenanceBookingsService,
    ListMaintenanceReportsService,
    MaintenanceStatsService,
    UpdateMaintenanceBookingService,
)
from solarflow.core.solar.dtos import CreateSolarSystemInputDTO
from solarflow.core.solar.use_cases import CreateSolarSystemService


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def create_booking(store, uow, clock):
    return CreateMaintenanceBookingService(store.maintenance_bookings, uow, clock)


@pytest.fixture
def update_booking(store, uow, clock):
    return UpdateMaintenanceBookingService(store.maintenance_bookings, uow, clock)


@pytest.fixture
def create_report(store, uow, clock):
    return CreateMaintenanceReportService(
        store.maintenance_reports,
        store.maintenance_bookings,
        store.solar_systems,
        uow,
        clock,
    )


@pytest.fixture
def system(store, uow, clock):
    return CreateSolarSystemService(store.solar_systems, uow, clock).execute(
        CreateSolarSystemInputDTO(
            user_id=2,
            name="Residencial",
            installation_date=date(2023, 4, 15),
            capacity=8.4,
            panel_type="Mono",
            panel_count=24,
            inverter_type="SE7600H",
            location="Rua do Sol, 123",
        )
    )


def booking_dto(system_id=1, user_id=2, preferred_date=date(2024, 6, 20), **kwargs):
    return CreateMaintenanceBookingInputDTO(
        user_id=user_id,
        system_id=system_id,
        service_type="Limpeza de painéis",
        description="Poeira acumulada",
        preferred_date=preferred_date,
        preferred_time_slot="Morning",
        **kwargs,
    )


def report_dto(booking_id, service_date=date(2024, 6, 12)):
    return CreateMaintenanceReportInputDTO(
        booking_id=booking_id,
        technician_id=9,
        date=service_date,
        service_performed="Limpeza e inspeção",
        findings="Sem danos",
        system_performance="Excelente",
    )


# =============================================================================
# Agendamentos
# =============================================================================

class TestCreateMaintenanceBookingService:
    """Testes para agendamento."""

    def test_criar_agendamento_pendente(self, create_booking, now):
        booking = create_booking.execute(booking_dto())

        assert booking.id == 1
        assert booking.status == BookingStatus.PENDING
        assert booking.preferred_date == datetime(2024, 6, 20)
        assert booking.created_at == booking.updated_at == now

    def test_publica_evento(self, create_booking, publisher):
        booking = create_booking.execute(booking_dto())

        event = publisher.get_events_by_type("MaintenanceBookedEvent")[0]
        assert event.aggregate_id == booking.id
        assert event.user_id == 2
        assert event.preferred_date == datetime(2024, 6, 20)


class TestUpdateMaintenanceBookingService:
    """Testes para atualização de agendamento."""

    def test_confirmar(self, create_booking, update_booking, publisher):
        booking = create_booking.execute(booking_dto())

        updated = update_booking.execute(
            booking.id,
            {"status": "confirmed", "confirmed_date": date(2024, 6, 21), "confirmed_time": "09:00"},
        )

        assert updated.status == BookingStatus.CONFIRMED
        assert updated.confirmed_date == datetime(2024, 6, 21)
        event = publisher.get_events_by_type("BookingStatusChangedEvent")[0]
        assert event.status == "confirmed"
        assert event.user_id == 2

    def test_sem_status_nao_audita(self, create_booking, update_booking, publisher):
        booking = create_booking.execute(booking_dto())

        update_booking.execute(booking.id, {"technician_id": 9})

        assert publisher.get_events_by_type("BookingStatusChangedEvent") == []

    def test_inexistente(self, update_booking):
        assert update_booking.execute(3, {"status": "confirmed"}) is None


class TestListMaintenanceBookingsService:
    """Testes para listagem de agendamentos."""

    @pytest.fixture
    def bookings(self, create_booking):
        create_booking.execute(booking_dto(system_id=1, user_id=2))
        create_booking.execute(booking_dto(system_id=2, user_id=2, status="confirmed"))
        create_booking.execute(booking_dto(system_id=1, user_id=3))

    def test_filtros(self, store, bookings):
        service = ListMaintenanceBookingsService(store.maintenance_bookings)

        assert [b.id for b in service.execute()] == [1, 2, 3]
        assert [b.id for b in service.execute(user_id=2)] == [1, 2]
        assert [b.id for b in service.execute(system_id=1)] == [1, 3]
        assert [b.id for b in service.execute(status="confirmed")] == [2]
        assert [b.id for b in service.execute(user_id=2, system_id=1)] == [1]

    def test_get(self, store, bookings):
        service = GetMaintenanceBookingService(store.maintenance_bookings)

        assert service.execute(3).user_id == 3
        assert service.execute(4) is None


# =============================================================================
# Relatórios
# =============================================================================

class TestCreateMaintenanceReportService:
    """Testes para a cascata do relatório."""

    def test_cascata_completa(self, audit, system, create_booking, create_report, store):
        """Relatório conclui o agendamento e atualiza last_serviced."""
        booking = create_booking.execute(booking_dto(system_id=system.id))
        activities_before = store.activities.count()

        report = create_report.execute(report_dto(booking.id))

        assert store.maintenance_bookings.get_by_id(booking.id).status == BookingStatus.COMPLETED
        assert store.solar_systems.get_by_id(system.id).last_serviced == report.date

        details = [a.details for a in store.activities.list_all()[activities_before:]]
        assert details == [
            "Maintenance report created for service on 6/12/2024",
            "Maintenance booking status changed to completed",
            'Solar system "Residencial" updated',
        ]

    def test_autores_das_atividades(self, audit, system, create_booking, create_report, store):
        booking = create_booking.execute(booking_dto(system_id=system.id))

        create_report.execute(report_dto(booking.id))

        report_activity, booking_activity, system_activity = store.activities.list_all()[-3:]
        assert report_activity.user_id == 9
        assert booking_activity.user_id == 2
        assert system_activity.user_id == 2

    def test_agendamento_inexistente(self, audit, create_report, store):
        """Relatório é gravado sem atividade nem cascata."""
        report = create_report.execute(report_dto(booking_id=77))

        assert store.maintenance_reports.get_by_id(report.id) is not None
        assert store.activities.count() == 0

    def test_sistema_inexistente(self, audit, create_booking, create_report, store):
        """Sem sistema, a cascata para no agendamento."""
        booking = create_booking.execute(booking_dto(system_id=50))

        create_report.execute(report_dto(booking.id))

        assert store.maintenance_bookings.get_by_id(booking.id).status == BookingStatus.COMPLETED
        assert [a.action for a in store.activities.list_all()] == ["booked", "created", "updated"]

    def test_falha_na_cascata_desfaz_tudo(
        self, audit, system, create_booking, create_report, store, monkeypatch
    ):
        """Nenhum relatório fica visível sem a sua cascata."""
        booking = create_booking.execute(booking_dto(system_id=system.id))
        activities_before = store.activities.count()

        def fail(*args, **kwargs):
            raise RuntimeError("falha simulada")

        monkeypatch.setattr(
            "solarflow.core.maintenance.use_cases.update_solar_system", fail
        )

        with pytest.raises(RuntimeError):
            create_report.execute(report_dto(booking.id))

        assert store.maintenance_reports.count() == 0
        assert store.maintenance_reports.last_id == 0
        assert store.maintenance_bookings.get_by_id(booking.id).status == BookingStatus.PENDING
        assert store.activities.count() == activities_before


class TestReportQueries:
    def test_listar_e_obter(self, create_booking, create_report, store):
        first = create_booking.execute(booking_dto())
        second = create_booking.execute(booking_dto())
        create_report.execute(report_dto(first.id))
        create_report.execute(report_dto(second.id))

        service = ListMaintenanceReportsService(store.maintenance_reports)

        assert [r.booking_id for r in service.execute()] == [first.id, second.id]
        assert [r.id for r in service.execute(booking_id=second.id)] == [2]
        assert len(service.execute(technician_id=9)) == 2
        assert service.execute(technician_id=1) == []
        assert GetMaintenanceReportService(store.maintenance_reports).execute(1).booking_id == first.id


class TestMaintenanceStatsService:
    def test_indicadores(self, create_booking, store, clock):
        create_booking.execute(booking_dto(preferred_date=date(2024, 6, 14)))
        create_booking.execute(booking_dto(preferred_date=date(2024, 6, 1)))
        create_booking.execute(booking_dto(status="confirmed"))

        stats = MaintenanceStatsService(store.maintenance_bookings, clock).execute()

        assert stats.pending_bookings == 2
        assert stats.confirmed_bookings == 1
        assert stats.average_rating == 4.7
        assert [b.id for b in stats.upcoming_services] == [1, 3]

    def test_payload_serializavel(self, create_booking, store, clock):
        create_booking.execute(booking_dto(preferred_date=date(2024, 6, 14)))

        payload = MaintenanceStatsService(store.maintenance_bookings, clock).execute().to_dict()

        assert json.loads(json.dumps(payload)) == payload
        upcoming = payload["upcomingServices"][0]
        assert upcoming["id"] == 1
        assert upcoming["status"] == "pending"
        assert upcoming["preferredDate"] == "2024-06-14T00:00:00"
        assert upcoming["preferredTimeSlot"] == "Morning"
