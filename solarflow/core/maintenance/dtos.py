"""
Data Transfer Objects (DTOs) do Domínio de Manutenção.
"""

from dataclasses import dataclass
from typing import Optional

from solarflow.core.shared.clock import DateLike


@dataclass(frozen=True)
class CreateMaintenanceBookingInputDTO:
    """
    DTO de entrada para agendar manutenção.

    Attributes:
        user_id: Cliente que agenda
        system_id: Sistema a ser atendido
        service_type: Tipo de serviço
        description: Descrição do pedido
        preferred_date: Data preferida
        preferred_time_slot: Período preferido
        status: Status inicial (default "pending")
        technician_id: Técnico designado (opcional)
        confirmed_date: Data confirmada (opcional)
        confirmed_time: Horário confirmado (opcional)
        completion_notes: Notas de conclusão (opcional)
    """

    user_id: int
    system_id: int
    service_type: str
    description: str
    preferred_date: DateLike
    preferred_time_slot: str
    status: str = "pending"
    technician_id: Optional[int] = None
    confirmed_date: Optional[DateLike] = None
    confirmed_time: Optional[str] = None
    completion_notes: Optional[str] = None


@dataclass(frozen=True)
class CreateMaintenanceReportInputDTO:
    """
    DTO de entrada para registrar relatório de manutenção.

    Attributes:
        booking_id: Agendamento atendido
        technician_id: Técnico autor
        date: Data do serviço (vira last_serviced do sistema)
        service_performed: Serviço executado
        findings: Constatações
        system_performance: Avaliação geral
        recommendations: Recomendações (opcional)
        parts_replaced: Peças trocadas (opcional)
        next_service_due: Próxima manutenção (opcional)
        photos_urls: Lista JSON de URLs (opcional)
    """

    booking_id: int
    technician_id: int
    date: DateLike
    service_performed: str
    findings: str
    system_performance: str
    recommendations: Optional[str] = None
    parts_replaced: Optional[str] = None
    next_service_due: Optional[DateLike] = None
    photos_urls: Optional[str] = None
