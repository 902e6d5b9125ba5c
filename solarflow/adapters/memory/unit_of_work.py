"""
Unit of Work - Implementação em memória.

Gerencia a transação de uma mutação sobre o InMemoryStore.

Responsabilidades:
- Adquirir o lock do store no início e liberá-lo no fim
- Despachar os eventos enfileirados no commit, ainda sob o lock
  (a trilha de auditoria grava as atividades aqui)
- Desfazer todas as coleções e contadores se algo falhar,
  inclusive um handler de evento

Garantias:
- Atomicidade: a mutação e suas atividades aparecem juntas ou não
  aparecem
- Isolamento: leitores nunca observam uma mutação pela metade
"""

import logging
from typing import List, Optional

from solarflow.core.shared.events import DomainEvent
from solarflow.core.shared.interfaces import EventPublisher, UnitOfWork

from .store import InMemoryStore

logger = logging.getLogger(__name__)


class StoreUnitOfWork(UnitOfWork):
    """
    Unit of Work sobre o store em memória.

    Example:
        with StoreUnitOfWork(store, publisher) as uow:
            ticket = store.tickets.add(entity)
            uow.publish_event(TicketCreatedEvent(aggregate_id=ticket.id, ...))
        # Commit: evento despachado, atividade gravada, lock liberado

    Example com rollback:
        with StoreUnitOfWork(store, publisher):
            store.tickets.add(entity)
            raise ValueError("Erro!")
        # Ticket removido, contador restaurado, eventos descartados
    """

    def __init__(
        self,
        store: InMemoryStore,
        event_publisher: Optional[EventPublisher] = None,
    ):
        """
        Inicializa Unit of Work.

        Args:
            store: Store cujas coleções participam da transação
            event_publisher: Publicador que entrega os eventos aos handlers
        """
        super().__init__()
        self.store = store
        self._event_publisher = event_publisher
        self._active = False
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self.store.lock.acquire()
        self.store.begin()
        self._events = []
        self._active = True
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Despacha eventos e confirma.

        Raises:
            Exception: Falha de um handler; a transação é desfeita e a
                exceção re-lançada
        """
        if not self._active:
            logger.warning("Transaction already finalized")
            return

        try:
            self._publish_events()
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self.rollback()
            raise

        self.store.commit()
        self._committed = True
        logger.debug("Transaction committed")
        self._finalize()

    def rollback(self) -> None:
        if not self._active:
            return

        self.store.rollback()
        self._rolled_back = True
        logger.debug("Transaction rolled back")
        self._finalize()

    def _finalize(self) -> None:
        self._active = False
        self.clear_events()
        self.store.lock.release()

    def _publish_events(self) -> None:
        """Entrega os eventos na ordem em que foram enfileirados."""
        # Handlers podem enfileirar novos eventos; o laço os inclui
        while self._events:
            pending: List[DomainEvent] = list(self._events)
            self._events.clear()
            if self._event_publisher:
                self._event_publisher.publish_batch(pending)

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back
