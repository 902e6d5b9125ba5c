"""
Data Transfer Objects (DTOs) do Domínio de Atividades.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateActivityInputDTO:
    """
    DTO de entrada para registrar atividade manualmente.

    Attributes:
        user_id: Autor da ação
        action: Ação ("commented", "resolved"...)
        ticket_id: Ticket relacionado (opcional)
        details: Descrição (opcional)
    """

    user_id: int
    action: str
    ticket_id: Optional[int] = None
    details: Optional[str] = None
