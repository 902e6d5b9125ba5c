from .repository import InMemoryRepository
from .store import InMemoryStore
from .unit_of_work import StoreUnitOfWork

__all__ = ["InMemoryRepository", "InMemoryStore", "StoreUnitOfWork"]
