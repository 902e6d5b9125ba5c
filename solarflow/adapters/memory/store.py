"""
Store em memória.

Oito coleções irmãs (uma por tipo de entidade) sob um único
RLock. É a única fonte de estado do sistema; nada é persistido.
"""

import logging
import threading
from typing import Tuple

from .repository import InMemoryRepository

logger = logging.getLogger(__name__)


class InMemoryStore:
    """
    Store embarcado com as oito coleções.

    Transações:
        begin/commit/rollback são chamados pela Unit of Work com o
        lock adquirido. Transações aninhadas (mesma thread) entram
        na transação externa: só a mais externa marca, confirma ou
        desfaz.

    Example:
        store = InMemoryStore()
        store.tickets.count()  # 0
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._depth = 0

        self.users = InMemoryRepository("User", self.lock)
        self.tickets = InMemoryRepository("Ticket", self.lock)
        self.messages = InMemoryRepository("Message", self.lock)
        self.activities = InMemoryRepository("Activity", self.lock)
        self.solar_systems = InMemoryRepository("SolarSystem", self.lock)
        self.maintenance_bookings = InMemoryRepository("MaintenanceBooking", self.lock)
        self.maintenance_reports = InMemoryRepository("MaintenanceReport", self.lock)
        self.performance_data = InMemoryRepository("PerformanceData", self.lock)

    @property
    def collections(self) -> Tuple[InMemoryRepository, ...]:
        return (
            self.users,
            self.tickets,
            self.messages,
            self.activities,
            self.solar_systems,
            self.maintenance_bookings,
            self.maintenance_reports,
            self.performance_data,
        )

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    def begin(self) -> None:
        self._depth += 1
        if self._depth == 1:
            for collection in self.collections:
                collection.begin()

    def commit(self) -> None:
        self._depth -= 1
        if self._depth == 0:
            for collection in self.collections:
                collection.commit()

    def rollback(self) -> None:
        self._depth -= 1
        if self._depth == 0:
            for collection in self.collections:
                collection.rollback()
        else:
            # A transação externa decide; a exceção continua subindo
            logger.debug("Nested rollback deferred to outer transaction")

    def counts(self) -> dict:
        """Quantidade de entidades por coleção."""
        with self.lock:
            return {c.entity_type: c.count() for c in self.collections}
