"""
Ports (Interfaces) do Domínio Solar.
"""

from solarflow.core.shared.interfaces import Repository

from .entities import PerformanceDataEntity, SolarSystemEntity

SolarSystemRepository = Repository[SolarSystemEntity]
PerformanceDataRepository = Repository[PerformanceDataEntity]
