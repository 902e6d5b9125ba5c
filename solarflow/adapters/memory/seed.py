"""
Dados de demonstração.

Popula um store vazio pelos próprios use cases, de modo que a trilha
de auditoria fique preenchida como em uso real. Usado apenas pelo
script de desenvolvimento (scripts/quick_setup.py); construir um
store nunca semeia dados.
"""

import calendar
import json
import logging
import random
from datetime import datetime, timedelta
from typing import Optional

from solarflow.core.shared.clock import start_of_day
from solarflow.core.accounts.dtos import CreateUserInputDTO
from solarflow.core.maintenance.dtos import (
    CreateMaintenanceBookingInputDTO,
    CreateMaintenanceReportInputDTO,
)
from solarflow.core.solar.dtos import CreateSolarSystemInputDTO, RecordPerformanceInputDTO
from solarflow.core.tickets.dtos import CreateTicketInputDTO

logger = logging.getLogger(__name__)

PERFORMANCE_HISTORY_DAYS = 30


def shift_months(moment: datetime, months: int) -> datetime:
    """Soma meses, limitando o dia ao último dia do mês de destino."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def seed_demo_data(container, rng: Optional[random.Random] = None) -> dict:
    """
    Cria o conjunto de demonstração.

    - Usuário admin
    - Dois sistemas solares
    - 31 dias de leituras do primeiro sistema (hoje incluso)
    - Um agendamento pendente (daqui a 14 dias)
    - Um agendamento concluído há dois meses, com relatório
    - Tickets de exemplo

    Args:
        container: Container de DI (usa os services dele)
        rng: Gerador aleatório (fixe a semente para dados reprodutíveis)

    Returns:
        Contagem por coleção após a carga
    """
    rng = rng or random.Random()
    today = start_of_day(container.clock()())

    admin = container.create_user_service().execute(
        CreateUserInputDTO(
            username="admin",
            password="admin123",
            full_name="Admin User",
            email="admin@solarflow.com",
            role="admin",
            avatar="AU",
        )
    )

    create_system = container.create_solar_system_service()
    residential = create_system.execute(
        CreateSolarSystemInputDTO(
            user_id=admin.id,
            name="Main Residential System",
            installation_date=datetime(2023, 4, 15),
            capacity=8.4,
            panel_type="Monocrystalline",
            panel_count=24,
            inverter_type="SolarEdge SE7600H",
            location="123 Solar Lane, Sunnyvale, CA",
            last_serviced=datetime(2023, 12, 10),
            notes="Premium installation with battery backup",
        )
    )

    record = container.record_performance_data_service()
    for days_ago in range(PERFORMANCE_HISTORY_DAYS, -1, -1):
        is_sunny = rng.random() > 0.3
        base_power = 6 + rng.random() * 2.5
        if is_sunny:
            weather = "Sunny"
        else:
            weather = "Partly Cloudy" if rng.random() > 0.5 else "Cloudy"

        record.execute(
            RecordPerformanceInputDTO(
                system_id=residential.id,
                date=today - timedelta(days=days_ago),
                energy_generated=base_power * (
                    7 + rng.random() * 3 if is_sunny else 3 + rng.random() * 3
                ),
                peak_power=base_power,
                sun_hours=8 + rng.random() * 4 if is_sunny else 2 + rng.random() * 5,
                efficiency=92 + rng.random() * 5 if is_sunny else 75 + rng.random() * 15,
                weather=weather,
                temperature=22 + rng.random() * 10 if is_sunny else 15 + rng.random() * 7,
                notes="",
            )
        )

    create_booking = container.create_maintenance_booking_service()
    create_booking.execute(
        CreateMaintenanceBookingInputDTO(
            user_id=admin.id,
            system_id=residential.id,
            service_type="Annual Inspection",
            description="Regular annual inspection and cleaning of solar panels",
            preferred_date=today + timedelta(days=14),
            preferred_time_slot="Morning",
        )
    )

    past_date = shift_months(today, -2)
    completed = create_booking.execute(
        CreateMaintenanceBookingInputDTO(
            user_id=admin.id,
            system_id=residential.id,
            service_type="Panel Cleaning",
            description="Cleaning of solar panels to remove dust and debris",
            preferred_date=past_date,
            preferred_time_slot="Afternoon",
            status="completed",
            technician_id=admin.id,
            confirmed_date=past_date,
            confirmed_time="13:00",
            completion_notes="All panels cleaned and system is performing optimally",
        )
    )

    container.create_maintenance_report_service().execute(
        CreateMaintenanceReportInputDTO(
            booking_id=completed.id,
            technician_id=admin.id,
            date=past_date,
            service_performed="Panel Cleaning and System Inspection",
            findings="Minor dust accumulation on panels. No physical damage observed.",
            recommendations=(
                "Schedule next cleaning in 6 months. "
                "Consider trimming nearby tree branches."
            ),
            parts_replaced="",
            system_performance="Excellent",
            next_service_due=shift_months(past_date, 6),
            photos_urls=json.dumps(
                ["/assets/sample-report-1.jpg", "/assets/sample-report-2.jpg"]
            ),
        )
    )

    create_system.execute(
        CreateSolarSystemInputDTO(
            user_id=admin.id,
            name="Commercial Office System",
            installation_date=datetime(2022, 6, 22),
            capacity=25.6,
            panel_type="Polycrystalline",
            panel_count=64,
            inverter_type="SMA Sunny Tripower",
            location="456 Business Park, Sunnyvale, CA",
            last_serviced=datetime(2024, 1, 15),
            notes="Commercial installation with monitoring system",
        )
    )

    create_ticket = container.create_ticket_service()
    sample_tickets = [
        {
            "subject": "Inverter shutting down at noon",
            "description": "The inverter switches off every day around noon.",
            "category": "Equipment",
            "priority": "high",
        },
        {
            "subject": "Monitoring app shows no data",
            "description": "Production chart has been empty since yesterday.",
            "category": "Monitoring",
            "priority": "medium",
        },
        {
            "subject": "Question about my last invoice",
            "description": "The maintenance fee looks higher than agreed.",
            "category": "Billing",
            "priority": "low",
        },
    ]
    for ticket_data in sample_tickets:
        create_ticket.execute(CreateTicketInputDTO(created_by=admin.id, **ticket_data))

    counts = container.store().counts()
    logger.info(f"Demo data loaded: {counts}")
    return counts
