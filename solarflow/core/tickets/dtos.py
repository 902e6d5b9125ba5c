"""
Data Transfer Objects (DTOs) do Domínio de Tickets.

Input DTOs recebem dados já validados quanto ao formato (pela
camada HTTP); o store converte status/prioridade para enum.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateTicketInputDTO:
    """
    DTO de entrada para criar ticket.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.

    Attributes:
        subject: Assunto do ticket
        description: Descrição detalhada
        category: Categoria
        created_by: ID do usuário criador
        status: Status inicial (valor textual, ex: "open")
        priority: Prioridade (valor textual, ex: "high")
        assigned_to: Técnico responsável (opcional)
    """

    subject: str
    description: str
    category: str
    created_by: int
    status: str = "open"
    priority: str = "medium"
    assigned_to: Optional[int] = None
