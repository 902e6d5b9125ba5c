"""
Domain Events do Domínio de Tickets.

Eventos:
- TicketCreatedEvent: Novo ticket foi criado
- TicketStatusChangedEvent: Uma atualização trouxe o campo status

Uso:
    with uow:
        ticket = repo.add(TicketEntity.create(...))
        uow.publish_event(TicketCreatedEvent(aggregate_id=ticket.id, ...))
"""

from dataclasses import dataclass
from typing import Any, Dict

from solarflow.core.shared.events import DomainEvent


@dataclass
class TicketCreatedEvent(DomainEvent):
    """
    Evento: Ticket foi criado.

    Handlers típicos:
    - Registrar atividade "created" na trilha de auditoria

    Attributes:
        created_by: ID do usuário que criou
        subject: Assunto do ticket
    """

    created_by: int = 0
    subject: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "created_by": self.created_by,
            "subject": self.subject,
        }


@dataclass
class TicketStatusChangedEvent(DomainEvent):
    """
    Evento: Status do ticket foi informado numa atualização.

    Attributes:
        status: Novo status (valor textual)
        actor_id: Responsável pela mudança; assigned_to do payload
            da atualização ou, na ausência, o criador do ticket
    """

    status: str = ""
    actor_id: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"status": self.status, "actor_id": self.actor_id}
