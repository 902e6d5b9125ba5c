"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Repository: coleção chaveada por ID de um tipo de entidade
- UnitOfWork: fronteira transacional de uma mutação
- EventPublisher: despacho de eventos após o commit

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, Protocol, TypeVar

from .events import DomainEvent


# Type variable para entidades genéricas
T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena mutações atômicas no store.

    Garante que uma mutação e todos os seus efeitos em cascata
    (registros de auditoria, cascata do relatório de manutenção)
    sejam aplicados como uma única unidade: ou tudo é aplicado
    ou nada é.

    Pattern: Context Manager
        with uow:
            repo.add(entity)
            uow.publish_event(event)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Responsabilidades:
    - Adquirir/liberar o lock de escrita do store
    - Commit/Rollback coordenado entre coleções
    - Enfileirar eventos e despachá-los no commit
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Confirma as mudanças e despacha os eventos.

        Ordem de execução:
        1. Despacho dos eventos enfileirados (ainda sob o lock)
        2. Descarte do journal de rollback
        3. Liberação do lock
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento para despacho no commit.

        Args:
            event: Evento de domínio a ser publicado
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Retorna eventos enfileirados (para testing/debugging)."""
        return list(self._events)

    def clear_events(self) -> None:
        """Limpa fila de eventos."""
        self._events.clear()


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para as coleções do store.

    Todas as oito coleções compartilham o mesmo formato: mapa
    chaveado por ID inteiro mais um contador. Não há remoção.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório
    """

    def add(self, entity: T) -> T:
        """
        Insere entidade, atribuindo o próximo ID do tipo.

        Returns:
            Cópia da entidade armazenada (com ID)
        """
        ...

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Cópia da entidade ou None se não existir
        """
        ...

    def replace(self, entity: T) -> T:
        """Substitui a versão armazenada de uma entidade existente."""
        ...

    def list_all(self) -> List[T]:
        """Lista todas as entidades em ordem de inserção."""
        ...

    def list_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Lista entidades que satisfazem o predicado."""
        ...

    def count(self) -> int:
        """Conta entidades armazenadas."""
        ...


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    O publicador recebe os eventos da Unit of Work no commit e os
    entrega aos handlers registrados (ex: trilha de auditoria).
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publica evento para consumidores.

        Args:
            event: Evento de domínio a ser publicado
        """
        raise NotImplementedError

    @abstractmethod
    def publish_batch(self, events: List[DomainEvent]) -> None:
        """
        Publica múltiplos eventos, na ordem recebida.

        Args:
            events: Lista de eventos a serem publicados
        """
        raise NotImplementedError


# Type alias para facilitar tipagem
UoW = UnitOfWork
