"""
Use Cases (Application Services) do Domínio de Tickets.

Este módulo contém os casos de uso da aplicação, que orquestram
a lógica de negócio coordenando entidades, repositórios e eventos.

Use Cases implementados:
- CreateTicketService: Cria novo ticket
- UpdateTicketService: Atualização parcial (status, técnico...)
- GetTicketService: Obtém ticket específico
- ListTicketsService: Lista tickets com filtros
- TicketStatsService: Indicadores do backlog

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Mutações dentro de `with uow`; auditoria via eventos
"""

import logging
from typing import Any, List, Mapping, Optional

from solarflow.core.shared.clock import Clock, system_clock
from solarflow.core.shared.interfaces import UnitOfWork
from solarflow.core.analytics.dtos import TicketStatsDTO
from solarflow.core.analytics.stats import ticket_stats

from .ports import TicketRepository
from .entities import TicketEntity, TicketPriority, TicketStatus
from .dtos import CreateTicketInputDTO
from .events import TicketCreatedEvent, TicketStatusChangedEvent

logger = logging.getLogger(__name__)


class CreateTicketService:
    """
    Use Case: Criar um novo ticket.

    Fluxo:
    1. Criar entidade (status/prioridade validados)
    2. Inserir no store (ID atribuído)
    3. Enfileirar TicketCreatedEvent
    4. Commit: auditoria grava a atividade "created"

    Example:
        service = CreateTicketService(ticket_repo, uow, clock)
        ticket = service.execute(CreateTicketInputDTO(
            subject="Inversor desligando",
            description="Desliga todo dia às 14h",
            category="Equipamento",
            created_by=1,
        ))
        print(ticket.id)
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        """
        Inicializa service com dependências injetadas.

        Args:
            ticket_repo: Coleção de tickets
            uow: Unit of Work para transação atômica
            clock: Relógio para created_at/updated_at
        """
        self.ticket_repo = ticket_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateTicketInputDTO) -> TicketEntity:
        """
        Executa criação de ticket em transação atômica.

        Args:
            input_dto: Dados de entrada

        Returns:
            Ticket armazenado, com ID

        Raises:
            ValidationError: Se status ou prioridade inválidos
        """
        with self.uow:
            ticket = self.ticket_repo.add(
                TicketEntity.create(
                    subject=input_dto.subject,
                    description=input_dto.description,
                    category=input_dto.category,
                    created_by=input_dto.created_by,
                    status=input_dto.status,
                    priority=input_dto.priority,
                    assigned_to=input_dto.assigned_to,
                    now=self.clock(),
                )
            )

            self.uow.publish_event(
                TicketCreatedEvent(
                    aggregate_id=ticket.id,
                    created_by=ticket.created_by,
                    subject=ticket.subject,
                )
            )

        logger.info(f"Ticket #{ticket.id} created by user #{ticket.created_by}")
        return ticket


class UpdateTicketService:
    """
    Use Case: Atualizar ticket parcialmente.

    Regras:
    - Ticket inexistente: retorna None sem efeitos colaterais
    - Campos desconhecidos: ValidationError, nada é aplicado
    - `updated_at` sempre renovado
    - Se a atualização traz `status`, registra atividade "updated";
      o autor é o `assigned_to` do payload ou, na ausência, o
      criador do ticket
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.ticket_repo = ticket_repo
        self.uow = uow
        self.clock = clock

    def execute(self, ticket_id: int, changes: Mapping[str, Any]) -> Optional[TicketEntity]:
        """
        Executa atualização.

        Args:
            ticket_id: ID do ticket
            changes: Campos alterados (ex: {"status": "resolved"})

        Returns:
            Ticket atualizado ou None se não existir

        Raises:
            ValidationError: Se campo não atualizável ou valor inválido
        """
        with self.uow:
            current = self.ticket_repo.get_by_id(ticket_id)
            if current is None:
                logger.debug(f"Ticket #{ticket_id} not found for update")
                return None

            ticket = self.ticket_repo.replace(
                current.with_changes(changes, now=self.clock())
            )

            if changes.get("status"):
                self.uow.publish_event(
                    TicketStatusChangedEvent(
                        aggregate_id=ticket.id,
                        status=str(ticket.status),
                        actor_id=changes.get("assigned_to") or current.created_by,
                    )
                )

        logger.info(f"Ticket #{ticket.id} updated: {', '.join(sorted(changes))}")
        return ticket


class GetTicketService:
    """Use Case: Obter ticket por ID (None se não existir)."""

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self, ticket_id: int) -> Optional[TicketEntity]:
        return self.ticket_repo.get_by_id(ticket_id)


class ListTicketsService:
    """
    Use Case: Listar tickets com filtros.

    Filtros informados são combinados (AND); sem filtros, lista
    todos em ordem de inserção.

    Example:
        service.execute(status="open", priority="high")
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(
        self,
        status: Any = None,
        priority: Any = None,
        created_by: Optional[int] = None,
    ) -> List[TicketEntity]:
        """
        Raises:
            ValidationError: Se status ou prioridade do filtro inválidos
        """
        wanted_status = TicketStatus.from_string(status) if status else None
        wanted_priority = TicketPriority.from_string(priority) if priority else None

        def matches(ticket: TicketEntity) -> bool:
            if wanted_status is not None and ticket.status != wanted_status:
                return False
            if wanted_priority is not None and ticket.priority != wanted_priority:
                return False
            if created_by is not None and ticket.created_by != created_by:
                return False
            return True

        return self.ticket_repo.list_where(matches)


class TicketStatsService:
    """
    Use Case: Indicadores do backlog de tickets.

    Tempo médio de resposta e satisfação ainda não são medidos;
    os valores vêm da configuração.
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        clock: Clock = system_clock,
        avg_response_time: float = 2.4,
        customer_satisfaction: float = 94,
    ):
        self.ticket_repo = ticket_repo
        self.clock = clock
        self.avg_response_time = avg_response_time
        self.customer_satisfaction = customer_satisfaction

    def execute(self) -> TicketStatsDTO:
        return ticket_stats(
            self.ticket_repo.list_all(),
            now=self.clock(),
            avg_response_time=self.avg_response_time,
            customer_satisfaction=self.customer_satisfaction,
        )
