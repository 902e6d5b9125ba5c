"""
Entidades do Domínio Solar.

Entidades:
- SolarSystemEntity: Instalação solar de um cliente (atualização parcial)
- PerformanceDataEntity: Leitura diária de geração (somente inserção)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from solarflow.core.shared.changes import merge_changes
from solarflow.core.shared.clock import DateLike, as_datetime


@dataclass
class SolarSystemEntity:
    """
    Entidade de Domínio: Sistema Solar.

    Attributes:
        id: Identificador atribuído pelo store
        user_id: Dono da instalação
        name: Nome dado pelo cliente ("Casa", "Escritório")
        installation_date: Data da instalação
        capacity: Potência instalada (kW)
        panel_type: Tipo de painel (Monocristalino...)
        panel_count: Quantidade de painéis
        inverter_type: Modelo do inversor
        location: Endereço ou coordenadas
        last_serviced: Data da última manutenção (atualizada pelos relatórios)
        notes: Observações livres
        created_at: Data/hora de criação

    Note:
        Diferente de Ticket e MaintenanceBooking, não possui updated_at.
    """

    id: Optional[int] = None
    user_id: int = 0
    name: str = ""
    installation_date: Optional[datetime] = None
    capacity: float = 0.0
    panel_type: str = ""
    panel_count: int = 0
    inverter_type: str = ""
    location: str = ""
    last_serviced: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    UPDATABLE_FIELDS = frozenset({
        "user_id",
        "name",
        "installation_date",
        "capacity",
        "panel_type",
        "panel_count",
        "inverter_type",
        "location",
        "last_serviced",
        "notes",
    })

    @classmethod
    def create(
        cls,
        user_id: int,
        name: str,
        installation_date: DateLike,
        capacity: float,
        panel_type: str,
        panel_count: int,
        inverter_type: str,
        location: str,
        now: datetime,
        last_serviced: Optional[DateLike] = None,
        notes: Optional[str] = None,
    ) -> "SolarSystemEntity":
        """Factory method: novo sistema ainda sem ID."""
        return cls(
            user_id=user_id,
            name=name,
            installation_date=as_datetime(installation_date),
            capacity=capacity,
            panel_type=panel_type,
            panel_count=panel_count,
            inverter_type=inverter_type,
            location=location,
            last_serviced=as_datetime(last_serviced),
            notes=notes,
            created_at=now,
        )

    def with_changes(self, changes: Mapping[str, Any]) -> "SolarSystemEntity":
        """
        Aplica atualização parcial.

        Raises:
            ValidationError: Se campo não atualizável
        """
        return merge_changes(
            self,
            changes,
            self.UPDATABLE_FIELDS,
            coercers={
                "installation_date": as_datetime,
                "last_serviced": as_datetime,
            },
        )


@dataclass
class PerformanceDataEntity:
    """
    Entidade de Domínio: Leitura de desempenho.

    Uma leitura por dia é o caso comum, mas nada impede várias
    leituras na mesma data.

    Attributes:
        id: Identificador atribuído pelo store
        system_id: Sistema medido (não verificado pelo store)
        date: Dia da leitura
        energy_generated: Energia gerada (kWh)
        peak_power: Pico de potência (kW)
        sun_hours: Horas de sol
        efficiency: Eficiência (%)
        weather: Condição do tempo ("Sunny", "Cloudy")
        temperature: Temperatura (°C)
        notes: Observações
        created_at: Data/hora de criação
    """

    id: Optional[int] = None
    system_id: int = 0
    date: Optional[datetime] = None
    energy_generated: float = 0.0
    peak_power: Optional[float] = None
    sun_hours: Optional[float] = None
    efficiency: Optional[float] = None
    weather: Optional[str] = None
    temperature: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        system_id: int,
        date: DateLike,
        energy_generated: float,
        now: datetime,
        peak_power: Optional[float] = None,
        sun_hours: Optional[float] = None,
        efficiency: Optional[float] = None,
        weather: Optional[str] = None,
        temperature: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> "PerformanceDataEntity":
        """Factory method: nova leitura ainda sem ID."""
        return cls(
            system_id=system_id,
            date=as_datetime(date),
            energy_generated=energy_generated,
            peak_power=peak_power,
            sun_hours=sun_hours,
            efficiency=efficiency,
            weather=weather,
            temperature=temperature,
            notes=notes,
            created_at=now,
        )
