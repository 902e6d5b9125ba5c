"""
Domain Events do Domínio de Manutenção.

Eventos:
- MaintenanceBookedEvent: Agendamento criado
- BookingStatusChangedEvent: Atualização trouxe o campo status
- MaintenanceReportCreatedEvent: Relatório registrado para um agendamento existente
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from solarflow.core.shared.events import DomainEvent


@dataclass
class MaintenanceBookedEvent(DomainEvent):
    """
    Evento: Manutenção foi agendada.

    Attributes:
        user_id: Cliente que agendou
        service_type: Tipo de serviço
        preferred_date: Data preferida
    """

    user_id: int = 0
    service_type: str = ""
    preferred_date: Optional[datetime] = None

    @property
    def aggregate_type(self) -> str:
        return "MaintenanceBooking"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "service_type": self.service_type,
            "preferred_date": (
                self.preferred_date.isoformat() if self.preferred_date else None
            ),
        }


@dataclass
class BookingStatusChangedEvent(DomainEvent):
    """
    Evento: Status do agendamento foi informado numa atualização.

    Attributes:
        user_id: Cliente dono do agendamento
        status: Novo status (valor textual)
    """

    user_id: int = 0
    status: str = ""

    @property
    def aggregate_type(self) -> str:
        return "MaintenanceBooking"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"user_id": self.user_id, "status": self.status}


@dataclass
class MaintenanceReportCreatedEvent(DomainEvent):
    """
    Evento: Relatório de manutenção foi registrado.

    Attributes:
        technician_id: Técnico autor do relatório
        booking_id: Agendamento atendido
        service_date: Data do serviço
    """

    technician_id: int = 0
    booking_id: int = 0
    service_date: Optional[datetime] = None

    @property
    def aggregate_type(self) -> str:
        return "MaintenanceReport"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "technician_id": self.technician_id,
            "booking_id": self.booking_id,
            "service_date": (
                self.service_date.isoformat() if self.service_date else None
            ),
        }
