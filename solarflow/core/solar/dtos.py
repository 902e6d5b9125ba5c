"""
Data Transfer Objects (DTOs) do Domínio Solar.
"""

from dataclasses import dataclass
from typing import Optional

from solarflow.core.shared.clock import DateLike


@dataclass(frozen=True)
class CreateSolarSystemInputDTO:
    """
    DTO de entrada para cadastrar sistema solar.

    Attributes:
        user_id: Dono do sistema
        name: Nome do sistema
        installation_date: Data da instalação
        capacity: Potência (kW)
        panel_type: Tipo de painel
        panel_count: Quantidade de painéis
        inverter_type: Modelo do inversor
        location: Endereço
        last_serviced: Última manutenção (opcional)
        notes: Observações (opcional)
    """

    user_id: int
    name: str
    installation_date: DateLike
    capacity: float
    panel_type: str
    panel_count: int
    inverter_type: str
    location: str
    last_serviced: Optional[DateLike] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class RecordPerformanceInputDTO:
    """DTO de entrada para registrar leitura de desempenho."""

    system_id: int
    date: DateLike
    energy_generated: float
    peak_power: Optional[float] = None
    sun_hours: Optional[float] = None
    efficiency: Optional[float] = None
    weather: Optional[str] = None
    temperature: Optional[float] = None
    notes: Optional[str] = None
