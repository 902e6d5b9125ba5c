"""
Trilha de Auditoria.

Converte Domain Events em registros ActivityEntity. Os handlers são
registrados no publicador de eventos e executam durante o commit da
Unit of Work, ainda sob o lock do store: a atividade é gravada depois
da mutação e antes do retorno ao chamador.

Mapeamento:
    TicketCreatedEvent            → created  (ticket_id preenchido)
    TicketStatusChangedEvent      → updated  (ticket_id preenchido)
    SolarSystemCreatedEvent       → created
    SolarSystemUpdatedEvent       → updated
    MaintenanceBookedEvent        → booked
    BookingStatusChangedEvent     → updated
    MaintenanceReportCreatedEvent → created
"""

import logging
from typing import Callable, Dict, Type

from solarflow.core.shared.clock import Clock, format_short_date, system_clock
from solarflow.core.shared.events import DomainEvent
from solarflow.core.shared.interfaces import Repository
from solarflow.core.tickets.events import TicketCreatedEvent, TicketStatusChangedEvent
from solarflow.core.solar.events import SolarSystemCreatedEvent, SolarSystemUpdatedEvent
from solarflow.core.maintenance.events import (
    BookingStatusChangedEvent,
    MaintenanceBookedEvent,
    MaintenanceReportCreatedEvent,
)

from .entities import ActivityAction, ActivityEntity

logger = logging.getLogger(__name__)


class AuditTrail:
    """
    Handler de eventos que grava a trilha de auditoria.

    Example:
        audit = AuditTrail(activity_repo, clock)
        audit.subscribe(publisher)
        # a partir daqui, todo commit com eventos gera atividades
    """

    def __init__(self, activity_repo: Repository[ActivityEntity], clock: Clock = system_clock):
        self.activity_repo = activity_repo
        self.clock = clock
        self._builders: Dict[Type[DomainEvent], Callable[[DomainEvent], ActivityEntity]] = {
            TicketCreatedEvent: self._ticket_created,
            TicketStatusChangedEvent: self._ticket_status_changed,
            SolarSystemCreatedEvent: self._system_created,
            SolarSystemUpdatedEvent: self._system_updated,
            MaintenanceBookedEvent: self._maintenance_booked,
            BookingStatusChangedEvent: self._booking_status_changed,
            MaintenanceReportCreatedEvent: self._report_created,
        }

    @property
    def event_types(self):
        """Tipos de evento auditados."""
        return list(self._builders)

    def subscribe(self, publisher) -> None:
        """Registra este handler para todos os eventos auditados."""
        for event_type in self._builders:
            publisher.register_handler(event_type.__name__, self.handle)

    def handle(self, event: DomainEvent) -> ActivityEntity:
        """
        Grava a atividade correspondente ao evento.

        Args:
            event: Evento auditado

        Returns:
            Atividade armazenada

        Raises:
            KeyError: Se o tipo de evento não é auditado
        """
        builder = self._builders[type(event)]
        activity = self.activity_repo.add(builder(event))
        logger.debug(
            f"Activity #{activity.id} ({activity.action}) "
            f"from {event.event_type} #{event.aggregate_id}"
        )
        return activity

    # =========================================================================
    # Builders
    # =========================================================================

    def _ticket_created(self, event: TicketCreatedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            ticket_id=event.aggregate_id,
            user_id=event.created_by,
            action=ActivityAction.CREATED,
            details=f"Ticket #{event.aggregate_id} created: {event.subject}",
            now=self.clock(),
        )

    def _ticket_status_changed(self, event: TicketStatusChangedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            ticket_id=event.aggregate_id,
            user_id=event.actor_id,
            action=ActivityAction.UPDATED,
            details=f"Ticket #{event.aggregate_id} status changed to {event.status}",
            now=self.clock(),
        )

    def _system_created(self, event: SolarSystemCreatedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            user_id=event.owner_id,
            action=ActivityAction.CREATED,
            details=f'Solar system "{event.name}" added',
            now=self.clock(),
        )

    def _system_updated(self, event: SolarSystemUpdatedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            user_id=event.owner_id,
            action=ActivityAction.UPDATED,
            details=f'Solar system "{event.name}" updated',
            now=self.clock(),
        )

    def _maintenance_booked(self, event: MaintenanceBookedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            user_id=event.user_id,
            action=ActivityAction.BOOKED,
            details=(
                f'Maintenance service "{event.service_type}" booked for '
                f"{format_short_date(event.preferred_date)}"
            ),
            now=self.clock(),
        )

    def _booking_status_changed(self, event: BookingStatusChangedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            user_id=event.user_id,
            action=ActivityAction.UPDATED,
            details=f"Maintenance booking status changed to {event.status}",
            now=self.clock(),
        )

    def _report_created(self, event: MaintenanceReportCreatedEvent) -> ActivityEntity:
        return ActivityEntity.create(
            user_id=event.technician_id,
            action=ActivityAction.CREATED,
            details=(
                "Maintenance report created for service on "
                f"{format_short_date(event.service_date)}"
            ),
            now=self.clock(),
        )
