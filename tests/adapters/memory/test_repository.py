"""
Testes para o repositório e o store em memória.
"""

import threading

import pytest

from solarflow.adapters.memory.repository import InMemoryRepository
from solarflow.adapters.memory.store import InMemoryStore
from solarflow.core.shared.exceptions import IdentifierAllocationError
from solarflow.core.tickets.entities import TicketEntity, TicketStatus


@pytest.fixture
def repository():
    return InMemoryRepository("Ticket")


@pytest.fixture
def make_ticket(now):
    def _make(subject="Assunto", created_by=1):
        return TicketEntity.create(
            subject=subject, description="...", category="Geral",
            created_by=created_by, now=now,
        )
    return _make


class TestInMemoryRepository:
    """Testes para operações básicas."""

    def test_add_atribui_ids_sequenciais(self, repository, make_ticket):
        ids = [repository.add(make_ticket()).id for _ in range(3)]

        assert ids == [1, 2, 3]
        assert repository.count() == 3
        assert repository.last_id == 3

    def test_add_nao_altera_entidade_recebida(self, repository, make_ticket):
        ticket = make_ticket()

        repository.add(ticket)

        assert ticket.id is None

    def test_leituras_devolvem_copias(self, repository, make_ticket):
        """Alterar o objeto devolvido não altera o store."""
        stored = repository.add(make_ticket())
        stored.subject = "Alterado por fora"

        fetched = repository.get_by_id(1)
        fetched.status = TicketStatus.CLOSED

        assert repository.get_by_id(1).subject == "Assunto"
        assert repository.get_by_id(1).status == TicketStatus.OPEN

    def test_list_all_em_ordem_de_insercao(self, repository, make_ticket):
        for subject in ("a", "b", "c"):
            repository.add(make_ticket(subject))

        assert [t.subject for t in repository.list_all()] == ["a", "b", "c"]

    def test_list_where(self, repository, make_ticket):
        repository.add(make_ticket(created_by=1))
        repository.add(make_ticket(created_by=2))

        assert [t.id for t in repository.list_where(lambda t: t.created_by == 2)] == [2]

    def test_get_inexistente(self, repository):
        assert repository.get_by_id(10) is None

    def test_replace(self, repository, make_ticket):
        ticket = repository.add(make_ticket())
        ticket.subject = "Novo"

        repository.replace(ticket)

        assert repository.get_by_id(1).subject == "Novo"

    def test_replace_inexistente(self, repository, make_ticket):
        ticket = make_ticket()
        ticket.id = 4

        with pytest.raises(KeyError):
            repository.replace(ticket)

    def test_id_ocupado(self, repository, make_ticket):
        """Alocador fora de sincronia é falha inesperada."""
        repository.add(make_ticket())
        repository._allocator.rewind_to(0)

        with pytest.raises(IdentifierAllocationError) as exc_info:
            repository.add(make_ticket())

        assert exc_info.value.entity_id == 1


class TestRepositoryJournal:
    """Testes para begin/commit/rollback."""

    def test_rollback_remove_insercoes_e_recua_contador(self, repository, make_ticket):
        repository.add(make_ticket("mantido"))
        repository.begin()
        repository.add(make_ticket("descartado"))
        repository.add(make_ticket("descartado"))

        repository.rollback()

        assert [t.subject for t in repository.list_all()] == ["mantido"]
        assert repository.add(make_ticket()).id == 2

    def test_rollback_restaura_substituidos(self, repository, make_ticket):
        ticket = repository.add(make_ticket("original"))
        repository.begin()
        ticket.subject = "primeira"
        repository.replace(ticket)
        ticket.subject = "segunda"
        repository.replace(ticket)

        repository.rollback()

        assert repository.get_by_id(1).subject == "original"

    def test_commit_mantem_alteracoes(self, repository, make_ticket):
        repository.begin()
        repository.add(make_ticket())

        repository.commit()
        repository.rollback()

        assert repository.count() == 1


class TestInMemoryStore:
    """Testes para o store com as oito coleções."""

    def test_colecoes_independentes(self, make_ticket):
        store = InMemoryStore()

        store.tickets.add(make_ticket())

        assert store.counts() == {
            "User": 0,
            "Ticket": 1,
            "Message": 0,
            "Activity": 0,
            "SolarSystem": 0,
            "MaintenanceBooking": 0,
            "MaintenanceReport": 0,
            "PerformanceData": 0,
        }

    def test_transacao_aninhada_entra_na_externa(self, make_ticket):
        store = InMemoryStore()
        store.begin()
        store.tickets.add(make_ticket())
        store.begin()
        store.tickets.add(make_ticket())
        store.commit()

        store.rollback()

        assert store.tickets.count() == 0
        assert not store.in_transaction

    def test_leitor_espera_transacao(self, make_ticket):
        """Leituras de outra thread esperam o fim da transação."""
        store = InMemoryStore()
        seen = []

        store.lock.acquire()
        store.begin()
        store.tickets.add(make_ticket())

        reader = threading.Thread(target=lambda: seen.append(store.tickets.count()))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()

        store.rollback()
        store.lock.release()
        reader.join(timeout=5)

        assert seen == [0]
