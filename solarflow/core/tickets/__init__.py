"""
Domínio de Tickets - Suporte ao cliente.

Este módulo contém a lógica de negócio relacionada a tickets
de suporte, incluindo:
- Entidades (TicketEntity, TicketStatus, TicketPriority)
- Domain Events (TicketCreated, TicketStatusChanged)
- DTOs de entrada
- Ports (TicketRepository)

Os services ficam em `solarflow.core.tickets.use_cases`.
"""

from .entities import TicketEntity, TicketStatus, TicketPriority
from .events import TicketCreatedEvent, TicketStatusChangedEvent
from .dtos import CreateTicketInputDTO
from .ports import TicketRepository

__all__ = [
    # Entities
    "TicketEntity",
    "TicketStatus",
    "TicketPriority",
    # Events
    "TicketCreatedEvent",
    "TicketStatusChangedEvent",
    # DTOs
    "CreateTicketInputDTO",
    # Ports
    "TicketRepository",
]
