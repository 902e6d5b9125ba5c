"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Base classes para Domain Events
- Alocador de IDs e relógio injetável
"""

from .exceptions import (
    DomainException,
    ValidationError,
    IdentifierAllocationError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, Repository, EventPublisher
from .identifiers import IdentifierAllocator
from .clock import Clock, system_clock, start_of_day
from .changes import ChoiceEnum, merge_changes

__all__ = [
    "DomainException",
    "ValidationError",
    "IdentifierAllocationError",
    "DomainEvent",
    "UnitOfWork",
    "Repository",
    "EventPublisher",
    "IdentifierAllocator",
    "Clock",
    "system_clock",
    "start_of_day",
    "ChoiceEnum",
    "merge_changes",
]
