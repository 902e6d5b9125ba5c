"""
Testes Unitários para Entidades do Domínio de Tickets.

Coverage:
- TicketEntity.create(): defaults e conversão de enums
- TicketEntity.with_changes(): atualização parcial
"""

from datetime import datetime, timedelta

import pytest

from solarflow.core.shared.exceptions import ValidationError
from solarflow.core.tickets.entities import TicketEntity, TicketPriority, TicketStatus


@pytest.fixture
def ticket(now):
    return TicketEntity.create(
        subject="Inversor desligando",
        description="Desliga todo dia às 14h",
        category="Equipamento",
        created_by=1,
        now=now,
    )


class TestTicketEntityCreate:
    """Testes para criação de tickets."""

    def test_criar_ticket_com_defaults(self, ticket, now):
        """Deve criar ticket aberto, prioridade média, sem ID."""
        assert ticket.id is None
        assert ticket.status == TicketStatus.OPEN
        assert ticket.priority == TicketPriority.MEDIUM
        assert ticket.assigned_to is None
        assert ticket.created_at == now
        assert ticket.updated_at == now

    def test_criar_ticket_com_texto(self, now):
        """Status e prioridade podem vir como texto."""
        ticket = TicketEntity.create(
            subject="Fatura",
            description="Valor errado",
            category="Faturamento",
            created_by=2,
            now=now,
            status="in progress",
            priority="HIGH",
        )

        assert ticket.status == TicketStatus.IN_PROGRESS
        assert ticket.priority == TicketPriority.HIGH

    def test_criar_ticket_prioridade_invalida(self, now):
        with pytest.raises(ValidationError):
            TicketEntity.create(
                subject="x",
                description="y",
                category="z",
                created_by=1,
                now=now,
                priority="urgentissima",
            )


class TestTicketEntityWithChanges:
    """Testes para atualização parcial."""

    def test_atualiza_status_e_renova_updated_at(self, ticket, now):
        later = now + timedelta(hours=2)

        updated = ticket.with_changes({"status": "resolved"}, now=later)

        assert updated.status == TicketStatus.RESOLVED
        assert updated.updated_at == later
        assert updated.created_at == now

    def test_original_nao_e_modificado(self, ticket, now):
        ticket.with_changes({"subject": "Outro"}, now=now)

        assert ticket.subject == "Inversor desligando"

    def test_rejeita_campo_de_controle(self, ticket, now):
        """ID e timestamps não são atualizáveis."""
        with pytest.raises(ValidationError):
            ticket.with_changes({"created_at": datetime(2020, 1, 1)}, now=now)

    def test_rejeita_campo_desconhecido(self, ticket, now):
        with pytest.raises(ValidationError) as exc_info:
            ticket.with_changes({"status": "closed", "color": "red"}, now=now)

        assert exc_info.value.field == "color"
