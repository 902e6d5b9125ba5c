"""
Motor de Estatísticas.

Agregados somente-leitura sobre snapshots do store: backlog de
tickets, pipeline de manutenção e tendência de geração.
"""

from .dtos import MaintenanceStatsDTO, SystemPerformanceStatsDTO, TicketStatsDTO

__all__ = [
    "TicketStatsDTO",
    "MaintenanceStatsDTO",
    "SystemPerformanceStatsDTO",
]
