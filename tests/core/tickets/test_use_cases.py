"""
Testes Unitários para Use Cases de Tickets.

Os services usam o store em memória e a Unit of Work real; os
eventos são verificados no publicador de testes.
"""

from datetime import timedelta

import pytest

from solarflow.core.shared.exceptions import ValidationError
from solarflow.core.tickets.dtos import CreateTicketInputDTO
from solarflow.core.tickets.entities import TicketPriority, TicketStatus
from solarflow.core.tickets.use_cases import (
    CreateTicketService,
    GetTicketService,
    ListTicketsService,
    TicketStatsService,
    UpdateTicketService,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def create_ticket(store, uow, clock):
    return CreateTicketService(store.tickets, uow, clock)


@pytest.fixture
def update_ticket(store, uow, clock):
    return UpdateTicketService(store.tickets, uow, clock)


@pytest.fixture
def input_dto():
    return CreateTicketInputDTO(
        subject="Painel sem geração",
        description="String 2 não gera desde ontem",
        category="Equipamento",
        created_by=7,
    )


# =============================================================================
# CreateTicketService
# =============================================================================

class TestCreateTicketService:
    """Testes para o use case de criação de ticket."""

    def test_criar_ticket_sucesso(self, create_ticket, input_dto, store, now):
        """Deve criar ticket com ID sequencial."""
        ticket = create_ticket.execute(input_dto)

        assert ticket.id == 1
        assert ticket.status == TicketStatus.OPEN
        assert ticket.created_at == now
        assert store.tickets.get_by_id(1) == ticket

    def test_ids_sequenciais(self, create_ticket, input_dto):
        ids = [create_ticket.execute(input_dto).id for _ in range(3)]

        assert ids == [1, 2, 3]

    def test_criar_ticket_publica_evento(self, create_ticket, input_dto, publisher):
        """Deve publicar TicketCreatedEvent."""
        ticket = create_ticket.execute(input_dto)

        events = publisher.get_events_by_type("TicketCreatedEvent")
        assert len(events) == 1
        assert events[0].aggregate_id == ticket.id
        assert events[0].created_by == 7
        assert events[0].subject == "Painel sem geração"

    def test_prioridade_invalida_nao_grava(self, create_ticket, store):
        """Erro de validação não deixa ticket nem consome ID."""
        with pytest.raises(ValidationError):
            create_ticket.execute(
                CreateTicketInputDTO(
                    subject="x",
                    description="y",
                    category="z",
                    created_by=1,
                    priority="urgent!",
                )
            )

        assert store.tickets.count() == 0
        assert store.tickets.last_id == 0


# =============================================================================
# UpdateTicketService
# =============================================================================

class TestUpdateTicketService:
    """Testes para atualização parcial de ticket."""

    def test_ticket_inexistente_retorna_none(self, update_ticket, publisher):
        assert update_ticket.execute(99, {"status": "closed"}) is None
        assert publisher.published_events == []

    def test_atualiza_status(self, create_ticket, update_ticket, input_dto, clock, now):
        ticket = create_ticket.execute(input_dto)
        update_ticket.clock = lambda: now + timedelta(minutes=5)

        updated = update_ticket.execute(ticket.id, {"status": "in progress"})

        assert updated.status == TicketStatus.IN_PROGRESS
        assert updated.updated_at == now + timedelta(minutes=5)

    def test_autor_e_tecnico_do_payload(
        self, create_ticket, update_ticket, input_dto, publisher
    ):
        """Com assigned_to no payload, o técnico é o autor."""
        ticket = create_ticket.execute(input_dto)

        update_ticket.execute(ticket.id, {"status": "in progress", "assigned_to": 3})

        event = publisher.get_events_by_type("TicketStatusChangedEvent")[0]
        assert event.actor_id == 3
        assert event.status == "in progress"

    def test_autor_e_criador_sem_assigned_to_no_payload(
        self, create_ticket, update_ticket, input_dto, publisher
    ):
        """Técnico já atribuído não conta: vale o payload."""
        ticket = create_ticket.execute(input_dto)
        update_ticket.execute(ticket.id, {"assigned_to": 3})

        update_ticket.execute(ticket.id, {"status": "resolved"})

        event = publisher.get_events_by_type("TicketStatusChangedEvent")[0]
        assert event.actor_id == 7

    def test_sem_status_nao_publica_evento(
        self, create_ticket, update_ticket, input_dto, publisher
    ):
        ticket = create_ticket.execute(input_dto)

        update_ticket.execute(ticket.id, {"priority": "critical"})

        assert publisher.get_events_by_type("TicketStatusChangedEvent") == []
        assert publisher.get_events_by_type("TicketCreatedEvent") != []

    def test_campo_desconhecido_nao_altera(
        self, create_ticket, update_ticket, input_dto, store
    ):
        ticket = create_ticket.execute(input_dto)

        with pytest.raises(ValidationError):
            update_ticket.execute(ticket.id, {"status": "closed", "owner": 1})

        assert store.tickets.get_by_id(ticket.id).status == TicketStatus.OPEN


# =============================================================================
# Consultas
# =============================================================================

class TestListTicketsService:
    """Testes para listagem com filtros."""

    @pytest.fixture
    def tickets(self, create_ticket):
        specs = [
            ("open", "low", 1),
            ("open", "high", 2),
            ("resolved", "high", 1),
        ]
        return [
            create_ticket.execute(
                CreateTicketInputDTO(
                    subject=f"Ticket {i}",
                    description="...",
                    category="Geral",
                    created_by=creator,
                    status=status,
                    priority=priority,
                )
            )
            for i, (status, priority, creator) in enumerate(specs)
        ]

    def test_lista_todos_em_ordem(self, store, tickets):
        result = ListTicketsService(store.tickets).execute()

        assert [t.id for t in result] == [1, 2, 3]

    def test_filtra_por_status(self, store, tickets):
        result = ListTicketsService(store.tickets).execute(status="open")

        assert [t.id for t in result] == [1, 2]

    def test_filtra_por_prioridade_e_criador(self, store, tickets):
        result = ListTicketsService(store.tickets).execute(
            priority=TicketPriority.HIGH, created_by=1
        )

        assert [t.id for t in result] == [3]

    def test_filtro_invalido(self, store):
        with pytest.raises(ValidationError):
            ListTicketsService(store.tickets).execute(status="archived")

    def test_get_ticket(self, store, tickets):
        service = GetTicketService(store.tickets)

        assert service.execute(2).subject == "Ticket 1"
        assert service.execute(42) is None


class TestTicketStatsService:
    """Testes para indicadores do backlog."""

    def test_indicadores(self, store, create_ticket, update_ticket, input_dto, clock):
        for _ in range(3):
            create_ticket.execute(input_dto)
        update_ticket.execute(2, {"status": "in progress"})
        update_ticket.execute(3, {"status": "resolved"})

        stats = TicketStatsService(store.tickets, clock).execute()

        assert stats.to_dict() == {
            "openTickets": 1,
            "inProgressTickets": 1,
            "resolvedToday": 1,
            "avgResponseTime": 2.4,
            "customerSatisfaction": 94,
        }
