"""
Entidades do Domínio de Manutenção.

Entidades:
- BookingStatus: Estados de um agendamento
- MaintenanceBookingEntity: Agendamento de manutenção (atualização parcial)
- MaintenanceReportEntity: Relatório do técnico (somente inserção)

Regras de Negócio Encapsuladas:
- Status aceita enum ou texto
- Toda atualização do agendamento renova `updated_at`
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from solarflow.core.shared.changes import ChoiceEnum, merge_changes
from solarflow.core.shared.clock import DateLike, as_datetime


class BookingStatus(ChoiceEnum):
    """
    Estados de um agendamento.

    Fluxo usual:
        PENDING → CONFIRMED → COMPLETED
              ↘ CANCELLED

    Um relatório de manutenção leva o agendamento para COMPLETED.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class MaintenanceBookingEntity:
    """
    Entidade de Domínio: Agendamento de manutenção.

    Attributes:
        id: Identificador atribuído pelo store
        user_id: Cliente que agendou
        system_id: Sistema a ser atendido (não verificado pelo store)
        service_type: Tipo de serviço (Limpeza, Inspeção, Reparo)
        description: Descrição do pedido
        preferred_date: Data preferida pelo cliente
        preferred_time_slot: Período preferido (Morning, Afternoon...)
        status: Estado atual
        technician_id: Técnico designado
        confirmed_date: Data confirmada
        confirmed_time: Horário confirmado ("13:00")
        completion_notes: Notas de conclusão
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização
    """

    id: Optional[int] = None
    user_id: int = 0
    system_id: int = 0
    service_type: str = ""
    description: str = ""
    preferred_date: Optional[datetime] = None
    preferred_time_slot: str = ""
    status: BookingStatus = BookingStatus.PENDING
    technician_id: Optional[int] = None
    confirmed_date: Optional[datetime] = None
    confirmed_time: Optional[str] = None
    completion_notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    UPDATABLE_FIELDS = frozenset({
        "user_id",
        "system_id",
        "service_type",
        "description",
        "preferred_date",
        "preferred_time_slot",
        "status",
        "technician_id",
        "confirmed_date",
        "confirmed_time",
        "completion_notes",
    })

    @classmethod
    def create(
        cls,
        user_id: int,
        system_id: int,
        service_type: str,
        description: str,
        preferred_date: DateLike,
        preferred_time_slot: str,
        now: datetime,
        status: Any = BookingStatus.PENDING,
        technician_id: Optional[int] = None,
        confirmed_date: Optional[DateLike] = None,
        confirmed_time: Optional[str] = None,
        completion_notes: Optional[str] = None,
    ) -> "MaintenanceBookingEntity":
        """
        Factory method para criar agendamento.

        Raises:
            ValidationError: Se status inválido
        """
        return cls(
            user_id=user_id,
            system_id=system_id,
            service_type=service_type,
            description=description,
            preferred_date=as_datetime(preferred_date),
            preferred_time_slot=preferred_time_slot,
            status=BookingStatus.from_string(status or BookingStatus.PENDING),
            technician_id=technician_id,
            confirmed_date=as_datetime(confirmed_date),
            confirmed_time=confirmed_time,
            completion_notes=completion_notes,
            created_at=now,
            updated_at=now,
        )

    def with_changes(
        self, changes: Mapping[str, Any], now: datetime
    ) -> "MaintenanceBookingEntity":
        """
        Aplica atualização parcial e renova updated_at.

        Raises:
            ValidationError: Se campo não atualizável ou status inválido
        """
        updated = merge_changes(
            self,
            changes,
            self.UPDATABLE_FIELDS,
            coercers={
                "status": BookingStatus.from_string,
                "preferred_date": as_datetime,
                "confirmed_date": as_datetime,
            },
        )
        updated.updated_at = now
        return updated

    @property
    def is_open(self) -> bool:
        """Pendente ou confirmado (ainda vai acontecer)."""
        return self.status in (BookingStatus.PENDING, BookingStatus.CONFIRMED)

    def to_dict(self) -> dict:
        """Payload camelCase do painel (datas em ISO 8601)."""

        def iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            "id": self.id,
            "userId": self.user_id,
            "systemId": self.system_id,
            "serviceType": self.service_type,
            "description": self.description,
            "preferredDate": iso(self.preferred_date),
            "preferredTimeSlot": self.preferred_time_slot,
            "status": str(self.status),
            "technicianId": self.technician_id,
            "confirmedDate": iso(self.confirmed_date),
            "confirmedTime": self.confirmed_time,
            "completionNotes": self.completion_notes,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }


@dataclass
class MaintenanceReportEntity:
    """
    Entidade de Domínio: Relatório de manutenção.

    Criar um relatório dispara a cascata: o agendamento passa a
    COMPLETED e o sistema recebe `last_serviced = date`.

    Attributes:
        id: Identificador atribuído pelo store
        booking_id: Agendamento atendido
        technician_id: Técnico que executou o serviço
        date: Data do serviço
        service_performed: Serviço executado
        findings: Constatações
        recommendations: Recomendações (opcional)
        parts_replaced: Peças trocadas (opcional)
        system_performance: Avaliação (Excellent, Good, Fair, Poor)
        next_service_due: Próxima manutenção sugerida (opcional)
        photos_urls: Lista JSON de URLs de fotos (opcional)
        created_at: Data/hora de criação
    """

    id: Optional[int] = None
    booking_id: int = 0
    technician_id: int = 0
    date: Optional[datetime] = None
    service_performed: str = ""
    findings: str = ""
    recommendations: Optional[str] = None
    parts_replaced: Optional[str] = None
    system_performance: str = ""
    next_service_due: Optional[datetime] = None
    photos_urls: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        booking_id: int,
        technician_id: int,
        date: DateLike,
        service_performed: str,
        findings: str,
        system_performance: str,
        now: datetime,
        recommendations: Optional[str] = None,
        parts_replaced: Optional[str] = None,
        next_service_due: Optional[DateLike] = None,
        photos_urls: Optional[str] = None,
    ) -> "MaintenanceReportEntity":
        """Factory method: novo relatório ainda sem ID."""
        return cls(
            booking_id=booking_id,
            technician_id=technician_id,
            date=as_datetime(date),
            service_performed=service_performed,
            findings=findings,
            recommendations=recommendations,
            parts_replaced=parts_replaced,
            system_performance=system_performance,
            next_service_due=as_datetime(next_service_due),
            photos_urls=photos_urls,
            created_at=now,
        )
