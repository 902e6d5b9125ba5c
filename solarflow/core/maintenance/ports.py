"""
Ports (Interfaces) do Domínio de Manutenção.
"""

from solarflow.core.shared.interfaces import Repository

from .entities import MaintenanceBookingEntity, MaintenanceReportEntity

MaintenanceBookingRepository = Repository[MaintenanceBookingEntity]
MaintenanceReportRepository = Repository[MaintenanceReportEntity]
