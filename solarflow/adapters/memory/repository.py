"""
Repositório em memória.

Uma coleção chaveada por ID para cada tipo de entidade. Todas as
coleções de um store compartilham o mesmo RLock: a Unit of Work o
mantém durante a mutação inteira e as leituras o tomam só pelo
tempo de copiar as linhas.

Rollback:
    No início da transação o repositório marca o último ID alocado
    e passa a guardar a versão original de cada entidade substituída.
    Desfazer = remover IDs acima da marca, restaurar originais e
    recuar o alocador.
"""

import logging
import threading
from dataclasses import replace as copy_entity
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from solarflow.core.shared.exceptions import IdentifierAllocationError
from solarflow.core.shared.identifiers import IdentifierAllocator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """
    Coleção de um tipo de entidade.

    Entidades entram e saem como cópias: quem chama nunca segura
    referência para a versão armazenada.

    Example:
        lock = threading.RLock()
        tickets = InMemoryRepository("Ticket", lock)
        ticket = tickets.add(TicketEntity.create(...))
        ticket.id  # 1
    """

    def __init__(self, entity_type: str, lock: Optional[threading.RLock] = None):
        self.entity_type = entity_type
        self._lock = lock or threading.RLock()
        self._items: Dict[int, T] = {}
        self._allocator = IdentifierAllocator()
        self._mark: Optional[int] = None
        self._originals: Dict[int, T] = {}

    # =========================================================================
    # Escrita
    # =========================================================================

    def add(self, entity: T) -> T:
        """
        Insere entidade com o próximo ID do tipo.

        Raises:
            IdentifierAllocationError: Se o ID alocado já estiver ocupado
        """
        with self._lock:
            entity_id = self._allocator.allocate()
            if entity_id in self._items:
                raise IdentifierAllocationError(
                    f"{self.entity_type} #{entity_id} já existe",
                    entity_type=self.entity_type,
                    entity_id=entity_id,
                )

            stored = copy_entity(entity, id=entity_id)
            self._items[entity_id] = stored
            return copy_entity(stored)

    def replace(self, entity: T) -> T:
        """
        Substitui a versão armazenada.

        Raises:
            KeyError: Se a entidade não estiver armazenada
        """
        with self._lock:
            if entity.id not in self._items:
                raise KeyError(f"{self.entity_type} #{entity.id} não encontrado")

            if self.in_transaction and entity.id <= self._mark:
                self._originals.setdefault(entity.id, self._items[entity.id])

            stored = copy_entity(entity)
            self._items[entity.id] = stored
            return copy_entity(stored)

    # =========================================================================
    # Leitura
    # =========================================================================

    def get_by_id(self, entity_id: int) -> Optional[T]:
        with self._lock:
            entity = self._items.get(entity_id)
            return copy_entity(entity) if entity is not None else None

    def list_all(self) -> List[T]:
        """Todas as entidades, em ordem de inserção."""
        with self._lock:
            return [copy_entity(e) for e in self._items.values()]

    def list_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Entidades que satisfazem o predicado, em ordem de inserção."""
        with self._lock:
            return [copy_entity(e) for e in self._items.values() if predicate(e)]

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    @property
    def last_id(self) -> int:
        """Último ID alocado (0 se vazio)."""
        return self._allocator.last_allocated

    # =========================================================================
    # Journal
    # =========================================================================

    @property
    def in_transaction(self) -> bool:
        return self._mark is not None

    def begin(self) -> None:
        """Marca o ponto de restauração. Chamado com o lock adquirido."""
        self._mark = self._allocator.last_allocated
        self._originals = {}

    def commit(self) -> None:
        """Descarta o ponto de restauração."""
        self._mark = None
        self._originals = {}

    def rollback(self) -> None:
        """Restaura o estado do início da transação."""
        if not self.in_transaction:
            return

        for entity_id in [i for i in self._items if i > self._mark]:
            del self._items[entity_id]
        self._items.update(self._originals)
        self._allocator.rewind_to(self._mark)

        logger.debug(
            f"{self.entity_type}: rolled back to #{self._mark}, "
            f"{len(self._originals)} restored"
        )
        self.commit()
