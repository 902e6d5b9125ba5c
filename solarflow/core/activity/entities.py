"""
Entidades do Domínio de Atividades (trilha de auditoria).

Entidades:
- ActivityAction: Ações registradas
- ActivityEntity: Registro de auditoria (somente inserção)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from solarflow.core.shared.changes import ChoiceEnum


class ActivityAction(ChoiceEnum):
    """Ações registradas automaticamente pelo store."""

    CREATED = "created"
    UPDATED = "updated"
    BOOKED = "booked"


@dataclass
class ActivityEntity:
    """
    Entidade de Domínio: Atividade.

    A ordem (created_at, id) define a ordem de replay da auditoria.

    Attributes:
        id: Identificador atribuído pelo store
        ticket_id: Ticket relacionado (só para atividades de ticket)
        user_id: Autor da ação
        action: Ação executada ("created", "updated", "booked"...)
        details: Descrição legível
        created_at: Data/hora do registro

    Note:
        `action` é texto livre: registros criados diretamente pela API
        podem usar outras ações ("commented", "resolved").
    """

    id: Optional[int] = None
    ticket_id: Optional[int] = None
    user_id: int = 0
    action: str = ""
    details: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        user_id: int,
        action: str,
        now: datetime,
        ticket_id: Optional[int] = None,
        details: Optional[str] = None,
    ) -> "ActivityEntity":
        """Factory method: nova atividade ainda sem ID."""
        return cls(
            ticket_id=ticket_id,
            user_id=user_id,
            action=str(action),
            details=details,
            created_at=now,
        )

    @property
    def replay_key(self):
        """Chave de ordenação da auditoria."""
        return (self.created_at, self.id or 0)
