"""
Domínio de Manutenção - Agendamentos e relatórios técnicos.

- Entidades (MaintenanceBookingEntity, MaintenanceReportEntity, BookingStatus)
- Domain Events (MaintenanceBooked, BookingStatusChanged, MaintenanceReportCreated)
- DTOs de entrada
- Ports (repositórios)

Os services ficam em `solarflow.core.maintenance.use_cases`.
"""

from .entities import BookingStatus, MaintenanceBookingEntity, MaintenanceReportEntity
from .events import (
    BookingStatusChangedEvent,
    MaintenanceBookedEvent,
    MaintenanceReportCreatedEvent,
)
from .dtos import CreateMaintenanceBookingInputDTO, CreateMaintenanceReportInputDTO
from .ports import MaintenanceBookingRepository, MaintenanceReportRepository

__all__ = [
    "BookingStatus",
    "MaintenanceBookingEntity",
    "MaintenanceReportEntity",
    "MaintenanceBookedEvent",
    "BookingStatusChangedEvent",
    "MaintenanceReportCreatedEvent",
    "CreateMaintenanceBookingInputDTO",
    "CreateMaintenanceReportInputDTO",
    "MaintenanceBookingRepository",
    "MaintenanceReportRepository",
]
