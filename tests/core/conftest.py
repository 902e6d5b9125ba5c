"""
Fixtures dos testes de use cases.

Os services recebem o store em memória real e um publicador que
guarda os eventos; a trilha de auditoria só é inscrita quando o
teste pede a fixture `audit`.
"""

import pytest

from solarflow.adapters.events.publishers import InMemoryEventPublisher
from solarflow.adapters.memory.store import InMemoryStore
from solarflow.adapters.memory.unit_of_work import StoreUnitOfWork
from solarflow.core.activity.audit import AuditTrail


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def uow(store, publisher):
    return StoreUnitOfWork(store, event_publisher=publisher)


@pytest.fixture
def audit(store, publisher, clock):
    """Trilha de auditoria inscrita no publicador."""
    trail = AuditTrail(store.activities, clock)
    trail.subscribe(publisher)
    return trail
