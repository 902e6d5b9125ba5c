"""
Domínio Solar - Instalações e leituras de geração.

- Entidades (SolarSystemEntity, PerformanceDataEntity)
- Domain Events (SolarSystemCreated, SolarSystemUpdated)
- DTOs de entrada
- Ports (repositórios)

Os services ficam em `solarflow.core.solar.use_cases`.
"""

from .entities import PerformanceDataEntity, SolarSystemEntity
from .events import SolarSystemCreatedEvent, SolarSystemUpdatedEvent
from .dtos import CreateSolarSystemInputDTO, RecordPerformanceInputDTO
from .ports import PerformanceDataRepository, SolarSystemRepository

__all__ = [
    "SolarSystemEntity",
    "PerformanceDataEntity",
    "SolarSystemCreatedEvent",
    "SolarSystemUpdatedEvent",
    "CreateSolarSystemInputDTO",
    "RecordPerformanceInputDTO",
    "SolarSystemRepository",
    "PerformanceDataRepository",
]
