"""
Motor de Estatísticas.

Consultas agregadas somente-leitura. As funções recebem snapshots
das coleções (listas copiadas sob o lock pelo repositório) e o
"agora" do relógio injetado; não fazem cache.

Janelas de tempo:
- "hoje" é a meia-noite local de `now`
- semana atual: [hoje - 7 dias, hoje], inclusiva nas duas pontas
- semana anterior: [hoje - 14 dias, hoje - 7 dias]
"""

import math
from datetime import datetime, timedelta
from typing import Iterable, List, Sequence

from solarflow.core.shared.clock import start_of_day
from solarflow.core.tickets.entities import TicketEntity, TicketStatus
from solarflow.core.maintenance.entities import (
    BookingStatus,
    MaintenanceBookingEntity,
)
from solarflow.core.solar.entities import PerformanceDataEntity

from .dtos import MaintenanceStatsDTO, SystemPerformanceStatsDTO, TicketStatsDTO

DAYS_IN_WEEK = 7
ONE_DAY = timedelta(days=1)


def ticket_stats(
    tickets: Sequence[TicketEntity],
    now: datetime,
    avg_response_time: float,
    customer_satisfaction: float,
) -> TicketStatsDTO:
    """
    Calcula backlog de tickets.

    `avg_response_time` e `customer_satisfaction` ainda não são
    derivados dos dados; vêm da configuração.
    """
    today = start_of_day(now)

    return TicketStatsDTO(
        open_tickets=sum(1 for t in tickets if t.status == TicketStatus.OPEN),
        in_progress_tickets=sum(
            1 for t in tickets if t.status == TicketStatus.IN_PROGRESS
        ),
        resolved_today=sum(
            1 for t in tickets
            if t.status == TicketStatus.RESOLVED and t.updated_at >= today
        ),
        avg_response_time=avg_response_time,
        customer_satisfaction=customer_satisfaction,
    )


def maintenance_stats(
    bookings: Sequence[MaintenanceBookingEntity],
    now: datetime,
    average_rating: float,
    upcoming_limit: int = 5,
) -> MaintenanceStatsDTO:
    """
    Calcula pipeline de manutenção.

    Próximos serviços: pendentes ou confirmados com data preferida a
    partir de hoje, em ordem crescente de data, limitados a
    `upcoming_limit`.
    """
    today = start_of_day(now)

    upcoming = sorted(
        (
            b for b in bookings
            if b.is_open and b.preferred_date >= today
        ),
        key=lambda b: b.preferred_date,
    )

    return MaintenanceStatsDTO(
        pending_bookings=_count_status(bookings, BookingStatus.PENDING),
        confirmed_bookings=_count_status(bookings, BookingStatus.CONFIRMED),
        completed_services=_count_status(bookings, BookingStatus.COMPLETED),
        average_rating=average_rating,
        upcoming_services=upcoming[:upcoming_limit],
    )


def system_performance_stats(
    records: Sequence[PerformanceDataEntity],
    now: datetime,
) -> SystemPerformanceStatsDTO:
    """
    Calcula a tendência de geração de um sistema.

    Args:
        records: Leituras de desempenho de um único sistema
        now: Momento de referência

    Returns:
        DTO com totais, médias, geração diária da última semana e
        variação percentual entre semanas (0 se a semana anterior
        não gerou nada)
    """
    today = start_of_day(now)
    last_week_start = today - timedelta(days=DAYS_IN_WEEK)
    previous_week_start = last_week_start - timedelta(days=DAYS_IN_WEEK)

    total_energy = sum(r.energy_generated for r in records)

    efficiencies = [r.efficiency for r in records if r.efficiency is not None]
    average_efficiency = (
        sum(efficiencies) / len(efficiencies) if efficiencies else 0
    )

    peaks = [r.peak_power for r in records if r.peak_power is not None]
    peak_power = max(peaks) if peaks else 0

    last_week = records_in_range(records, last_week_start, today)
    previous_week = records_in_range(records, previous_week_start, last_week_start)

    last_week_generation = [0] * DAYS_IN_WEEK
    for record in last_week:
        days_ago = math.floor((today - record.date) / ONE_DAY)
        day_index = DAYS_IN_WEEK - 1 - days_ago
        if 0 <= day_index < DAYS_IN_WEEK:
            # Última leitura do dia prevalece
            last_week_generation[day_index] = record.energy_generated

    current_total = sum(r.energy_generated for r in last_week)
    previous_total = sum(r.energy_generated for r in previous_week)

    performance_trend = (
        (current_total - previous_total) / previous_total * 100
        if previous_total > 0
        else 0
    )

    return SystemPerformanceStatsDTO(
        total_energy_generated=total_energy,
        average_efficiency=average_efficiency,
        peak_power=peak_power,
        last_week_generation=last_week_generation,
        performance_trend=performance_trend,
    )


def records_in_range(
    records: Iterable[PerformanceDataEntity],
    start: datetime,
    end: datetime,
) -> List[PerformanceDataEntity]:
    """Leituras com start <= date <= end, em ordem crescente de data."""
    return sorted(
        (r for r in records if start <= r.date <= end),
        key=lambda r: r.date,
    )


def _count_status(bookings: Iterable[MaintenanceBookingEntity], status: BookingStatus) -> int:
    return sum(1 for b in bookings if b.status == status)
