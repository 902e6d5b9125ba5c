"""
Use Cases (Application Services) do Domínio de Manutenção.

Use Cases implementados:
- CreateMaintenanceBookingService: Agenda serviço
- UpdateMaintenanceBookingService: Atualização parcial (confirmação...)
- GetMaintenanceBookingService / ListMaintenanceBookingsService
- CreateMaintenanceReportService: Relatório + cascata
- GetMaintenanceReportService / ListMaintenanceReportsService
- MaintenanceStatsService: Pipeline de manutenção

Cascata do relatório (uma única transação):
1. Grava o relatório
2. Se o agendamento existe: audita o relatório, marca o agendamento
   como concluído e atualiza `last_serviced` do sistema (se existir)

Um relatório nunca é observado sem a sua cascata.
"""

import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional

from solarflow.core.shared.clock import Clock, system_clock
from solarflow.core.shared.interfaces import UnitOfWork
from solarflow.core.analytics.dtos import MaintenanceStatsDTO
from solarflow.core.analytics.stats import maintenance_stats
from solarflow.core.solar.ports import SolarSystemRepository
from solarflow.core.solar.use_cases import update_solar_system

from .ports import MaintenanceBookingRepository, MaintenanceReportRepository
from .entities import BookingStatus, MaintenanceBookingEntity, MaintenanceReportEntity
from .dtos import CreateMaintenanceBookingInputDTO, CreateMaintenanceReportInputDTO
from .events import (
    BookingStatusChangedEvent,
    MaintenanceBookedEvent,
    MaintenanceReportCreatedEvent,
)

logger = logging.getLogger(__name__)


def update_maintenance_booking(
    booking_repo: MaintenanceBookingRepository,
    uow: UnitOfWork,
    booking_id: int,
    changes: Mapping[str, Any],
    now: datetime,
) -> Optional[MaintenanceBookingEntity]:
    """
    Aplica atualização parcial dentro de uma transação já aberta.

    Só mudanças que trazem `status` são auditadas.

    Returns:
        Agendamento atualizado ou None se não existir

    Raises:
        ValidationError: Se campo não atualizável ou status inválido
    """
    current = booking_repo.get_by_id(booking_id)
    if current is None:
        return None

    booking = booking_repo.replace(current.with_changes(changes, now=now))

    if changes.get("status"):
        uow.publish_event(
            BookingStatusChangedEvent(
                aggregate_id=booking.id,
                user_id=booking.user_id,
                status=str(booking.status),
            )
        )
    return booking


class CreateMaintenanceBookingService:
    """
    Use Case: Agendar serviço de manutenção.

    Registra atividade "booked" com a data preferida (M/D/AAAA).

    Example:
        booking = service.execute(CreateMaintenanceBookingInputDTO(
            user_id=1,
            system_id=1,
            service_type="Limpeza de painéis",
            description="Poeira acumulada",
            preferred_date=date(2024, 6, 10),
            preferred_time_slot="morning",
        ))
    """

    def __init__(
        self,
        booking_repo: MaintenanceBookingRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.booking_repo = booking_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateMaintenanceBookingInputDTO) -> MaintenanceBookingEntity:
        """
        Raises:
            ValidationError: Se status inválido
        """
        with self.uow:
            booking = self.booking_repo.add(
                MaintenanceBookingEntity.create(
                    user_id=input_dto.user_id,
                    system_id=input_dto.system_id,
                    service_type=input_dto.service_type,
                    description=input_dto.description,
                    preferred_date=input_dto.preferred_date,
                    preferred_time_slot=input_dto.preferred_time_slot,
                    status=input_dto.status,
                    technician_id=input_dto.technician_id,
                    confirmed_date=input_dto.confirmed_date,
                    confirmed_time=input_dto.confirmed_time,
                    completion_notes=input_dto.completion_notes,
                    now=self.clock(),
                )
            )

            self.uow.publish_event(
                MaintenanceBookedEvent(
                    aggregate_id=booking.id,
                    user_id=booking.user_id,
                    service_type=booking.service_type,
                    preferred_date=booking.preferred_date,
                )
            )

        logger.info(
            f"Maintenance booking #{booking.id} created for system #{booking.system_id}"
        )
        return booking


class UpdateMaintenanceBookingService:
    """Use Case: Atualizar agendamento (None se não existir)."""

    def __init__(
        self,
        booking_repo: MaintenanceBookingRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.booking_repo = booking_repo
        self.uow = uow
        self.clock = clock

    def execute(
        self, booking_id: int, changes: Mapping[str, Any]
    ) -> Optional[MaintenanceBookingEntity]:
        with self.uow:
            booking = update_maintenance_booking(
                self.booking_repo, self.uow, booking_id, changes, now=self.clock()
            )

        if booking is None:
            logger.debug(f"Maintenance booking #{booking_id} not found for update")
        else:
            logger.info(f"Maintenance booking #{booking.id} updated")
        return booking


class GetMaintenanceBookingService:
    def __init__(self, booking_repo: MaintenanceBookingRepository):
        self.booking_repo = booking_repo

    def execute(self, booking_id: int) -> Optional[MaintenanceBookingEntity]:
        return self.booking_repo.get_by_id(booking_id)


class ListMaintenanceBookingsService:
    """
    Use Case: Listar agendamentos.

    Filtros por usuário, sistema e status, combinados (AND).
    """

    def __init__(self, booking_repo: MaintenanceBookingRepository):
        self.booking_repo = booking_repo

    def execute(
        self,
        user_id: Optional[int] = None,
        system_id: Optional[int] = None,
        status: Any = None,
    ) -> List[MaintenanceBookingEntity]:
        wanted_status = BookingStatus.from_string(status) if status else None

        def matches(booking: MaintenanceBookingEntity) -> bool:
            if user_id is not None and booking.user_id != user_id:
                return False
            if system_id is not None and booking.system_id != system_id:
                return False
            if wanted_status is not None and booking.status != wanted_status:
                return False
            return True

        return self.booking_repo.list_where(matches)


class CreateMaintenanceReportService:
    """
    Use Case: Registrar relatório de manutenção.

    Transaction script: relatório, auditoria, conclusão do agendamento
    e `last_serviced` do sistema são aplicados sob a mesma Unit of
    Work. Se qualquer passo falhar, nada é aplicado.

    Atividades geradas (agendamento existente):
    1. "Maintenance report created for service on M/D/AAAA" (técnico)
    2. "Maintenance booking status changed to completed" (cliente)
    3. 'Solar system "<nome>" updated' (cliente), se o sistema existir

    Agendamento inexistente: o relatório é gravado sem atividade e
    sem cascata.
    """

    def __init__(
        self,
        report_repo: MaintenanceReportRepository,
        booking_repo: MaintenanceBookingRepository,
        system_repo: SolarSystemRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.report_repo = report_repo
        self.booking_repo = booking_repo
        self.system_repo = system_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateMaintenanceReportInputDTO) -> MaintenanceReportEntity:
        now = self.clock()

        with self.uow:
            report = self.report_repo.add(
                MaintenanceReportEntity.create(
                    booking_id=input_dto.booking_id,
                    technician_id=input_dto.technician_id,
                    date=input_dto.date,
                    service_performed=input_dto.service_performed,
                    findings=input_dto.findings,
                    system_performance=input_dto.system_performance,
                    recommendations=input_dto.recommendations,
                    parts_replaced=input_dto.parts_replaced,
                    next_service_due=input_dto.next_service_due,
                    photos_urls=input_dto.photos_urls,
                    now=now,
                )
            )

            booking = self.booking_repo.get_by_id(report.booking_id)
            if booking is None:
                logger.warning(
                    f"Report #{report.id} references missing booking #{report.booking_id}"
                )
            else:
                self.uow.publish_event(
                    MaintenanceReportCreatedEvent(
                        aggregate_id=report.id,
                        technician_id=report.technician_id,
                        booking_id=report.booking_id,
                        service_date=report.date,
                    )
                )
                update_maintenance_booking(
                    self.booking_repo,
                    self.uow,
                    booking.id,
                    {"status": BookingStatus.COMPLETED},
                    now=now,
                )
                update_solar_system(
                    self.system_repo,
                    self.uow,
                    booking.system_id,
                    {"last_serviced": report.date},
                )

        logger.info(f"Maintenance report #{report.id} created for booking #{report.booking_id}")
        return report


class GetMaintenanceReportService:
    def __init__(self, report_repo: MaintenanceReportRepository):
        self.report_repo = report_repo

    def execute(self, report_id: int) -> Optional[MaintenanceReportEntity]:
        return self.report_repo.get_by_id(report_id)


class ListMaintenanceReportsService:
    """Use Case: Listar relatórios por agendamento e/ou técnico (AND)."""

    def __init__(self, report_repo: MaintenanceReportRepository):
        self.report_repo = report_repo

    def execute(
        self,
        booking_id: Optional[int] = None,
        technician_id: Optional[int] = None,
    ) -> List[MaintenanceReportEntity]:
        return self.report_repo.list_where(
            lambda r: (booking_id is None or r.booking_id == booking_id)
            and (technician_id is None or r.technician_id == technician_id)
        )


class MaintenanceStatsService:
    """
    Use Case: Indicadores do pipeline de manutenção.

    A nota média ainda não é coletada; vem da configuração.
    """

    def __init__(
        self,
        booking_repo: MaintenanceBookingRepository,
        clock: Clock = system_clock,
        average_rating: float = 4.7,
        upcoming_limit: int = 5,
    ):
        self.booking_repo = booking_repo
        self.clock = clock
        self.average_rating = average_rating
        self.upcoming_limit = upcoming_limit

    def execute(self) -> MaintenanceStatsDTO:
        return maintenance_stats(
            self.booking_repo.list_all(),
            now=self.clock(),
            average_rating=self.average_rating,
            upcoming_limit=self.upcoming_limit,
        )
