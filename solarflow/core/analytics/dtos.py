"""
DTOs de saída do motor de estatísticas.

Os atributos seguem o padrão Python (snake_case); `to_dict()` produz
as chaves camelCase consumidas pelo painel.
"""

from dataclasses import dataclass, field
from typing import List

from solarflow.core.maintenance.entities import MaintenanceBookingEntity


@dataclass
class TicketStatsDTO:
    """
    Estatísticas do backlog de tickets.

    Attributes:
        open_tickets: Tickets com status "open"
        in_progress_tickets: Tickets com status "in progress"
        resolved_today: Resolvidos com updated_at desde a meia-noite local
        avg_response_time: Constante configurada (horas)
        customer_satisfaction: Constante configurada (%)
    """

    open_tickets: int
    in_progress_tickets: int
    resolved_today: int
    avg_response_time: float
    customer_satisfaction: float

    def to_dict(self) -> dict:
        return {
            "openTickets": self.open_tickets,
            "inProgressTickets": self.in_progress_tickets,
            "resolvedToday": self.resolved_today,
            "avgResponseTime": self.avg_response_time,
            "customerSatisfaction": self.customer_satisfaction,
        }


@dataclass
class MaintenanceStatsDTO:
    """
    Estatísticas do pipeline de manutenção.

    Attributes:
        pending_bookings: Agendamentos pendentes
        confirmed_bookings: Agendamentos confirmados
        completed_services: Serviços concluídos
        average_rating: Constante configurada
        upcoming_services: Próximos serviços (ordem crescente de data)
    """

    pending_bookings: int
    confirmed_bookings: int
    completed_services: int
    average_rating: float
    upcoming_services: List[MaintenanceBookingEntity] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "pendingBookings": self.pending_bookings,
            "confirmedBookings": self.confirmed_bookings,
            "completedServices": self.completed_services,
            "averageRating": self.average_rating,
            "upcomingServices": [b.to_dict() for b in self.upcoming_services],
        }


@dataclass
class SystemPerformanceStatsDTO:
    """
    Tendência de geração de um sistema solar.

    Attributes:
        total_energy_generated: Soma de energy_generated (kWh)
        average_efficiency: Média das eficiências informadas (0 se nenhuma)
        peak_power: Maior pico informado (0 se nenhum)
        last_week_generation: 7 posições, da mais antiga (0) até hoje (6)
        performance_trend: Variação % da semana atual sobre a anterior
    """

    total_energy_generated: float
    average_efficiency: float
    peak_power: float
    last_week_generation: List[float]
    performance_trend: float

    def to_dict(self) -> dict:
        return {
            "totalEnergyGenerated": self.total_energy_generated,
            "averageEfficiency": self.average_efficiency,
            "peakPower": self.peak_power,
            "lastWeekGeneration": list(self.last_week_generation),
            "performanceTrend": self.performance_trend,
        }
