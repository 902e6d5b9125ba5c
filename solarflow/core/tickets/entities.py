"""
Entidades do Domínio de Tickets.

Este módulo define as entidades de domínio relacionadas a tickets
de suporte.

Entidades:
- TicketEntity: Ticket de suporte (atualização parcial permitida)
- TicketStatus: Estados possíveis de um ticket
- TicketPriority: Níveis de prioridade

Regras de Negócio Encapsuladas:
- Status e prioridade aceitam enum ou texto, validados na conversão
- Atualização parcial só altera campos aceitos na criação
- Toda atualização renova `updated_at`
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from solarflow.core.shared.changes import ChoiceEnum, merge_changes


class TicketStatus(ChoiceEnum):
    """
    Estados possíveis de um ticket.

    Fluxo usual:
        OPEN → IN_PROGRESS → RESOLVED → CLOSED

    Note:
        O store não restringe transições; qualquer status pode ser
        informado numa atualização.
    """

    OPEN = "open"
    IN_PROGRESS = "in progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class TicketPriority(ChoiceEnum):
    """Níveis de prioridade."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class TicketEntity:
    """
    Entidade de Domínio: Ticket.

    Attributes:
        id: Identificador atribuído pelo store
        subject: Assunto do ticket
        description: Descrição detalhada do problema
        status: Estado atual do ticket
        priority: Nível de prioridade
        category: Categoria (Instalação, Faturamento...)
        created_by: ID do usuário que abriu o ticket
        assigned_to: ID do técnico responsável (opcional)
        created_at: Data/hora de criação
        updated_at: Data/hora da última atualização

    Example:
        ticket = TicketEntity.create(
            subject="Inversor desligando",
            description="O inversor desliga todo dia às 14h",
            category="Equipamento",
            created_by=1,
            now=datetime.now(),
        )
        ticket = ticket.with_changes({"status": "resolved"}, now=datetime.now())
    """

    # Identificação
    id: Optional[int] = None

    # Dados principais
    subject: str = ""
    description: str = ""
    category: str = ""

    # Estado
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM

    # Relacionamentos (não verificados pelo store)
    created_by: int = 0
    assigned_to: Optional[int] = None

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    UPDATABLE_FIELDS = frozenset({
        "subject",
        "description",
        "status",
        "priority",
        "category",
        "created_by",
        "assigned_to",
    })

    @classmethod
    def create(
        cls,
        subject: str,
        description: str,
        category: str,
        created_by: int,
        now: datetime,
        status: Any = TicketStatus.OPEN,
        priority: Any = TicketPriority.MEDIUM,
        assigned_to: Optional[int] = None,
    ) -> "TicketEntity":
        """
        Factory method para criar ticket.

        Args:
            subject: Assunto do ticket
            description: Descrição do problema
            category: Categoria do ticket
            created_by: ID do usuário criador
            now: Momento da criação (created_at e updated_at)
            status: Status inicial (default: open)
            priority: Prioridade (default: medium)
            assigned_to: Técnico responsável (opcional)

        Returns:
            Nova instância de TicketEntity, ainda sem ID

        Raises:
            ValidationError: Se status ou prioridade inválidos
        """
        return cls(
            subject=subject,
            description=description,
            category=category,
            status=TicketStatus.from_string(status or TicketStatus.OPEN),
            priority=TicketPriority.from_string(priority or TicketPriority.MEDIUM),
            created_by=created_by,
            assigned_to=assigned_to,
            created_at=now,
            updated_at=now,
        )

    def with_changes(self, changes: Mapping[str, Any], now: datetime) -> "TicketEntity":
        """
        Aplica atualização parcial.

        Args:
            changes: Campos alterados
            now: Novo valor de updated_at

        Returns:
            Nova instância com os campos mesclados

        Raises:
            ValidationError: Se campo não atualizável ou valor de enum inválido
        """
        updated = merge_changes(
            self,
            changes,
            self.UPDATABLE_FIELDS,
            coercers={
                "status": TicketStatus.from_string,
                "priority": TicketPriority.from_string,
            },
        )
        updated.updated_at = now
        return updated

    def __repr__(self) -> str:
        return (
            f"TicketEntity("
            f"id={self.id}, "
            f"subject='{self.subject[:20]}', "
            f"status={self.status.value}, "
            f"priority={self.priority.value}"
            f")"
        )
