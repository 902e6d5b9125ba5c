"""
Use Cases (Application Services) do Domínio Solar.

Use Cases implementados:
- CreateSolarSystemService: Cadastra instalação
- UpdateSolarSystemService: Atualização parcial
- GetSolarSystemService / ListSolarSystemsService: Consultas
- RecordPerformanceDataService: Registra leitura diária
- GetPerformanceDataService / ListPerformanceDataService: Consultas
- SystemPerformanceStatsService: Tendência de geração

`update_solar_system` é reutilizado pela criação de relatório de
manutenção, que atualiza `last_serviced` na mesma transação.
"""

import logging
from typing import Any, List, Mapping, Optional

from solarflow.core.shared.clock import Clock, DateLike, as_datetime, system_clock
from solarflow.core.shared.exceptions import ValidationError
from solarflow.core.shared.interfaces import UnitOfWork
from solarflow.core.analytics.dtos import SystemPerformanceStatsDTO
from solarflow.core.analytics.stats import records_in_range, system_performance_stats

from .ports import PerformanceDataRepository, SolarSystemRepository
from .entities import PerformanceDataEntity, SolarSystemEntity
from .dtos import CreateSolarSystemInputDTO, RecordPerformanceInputDTO
from .events import SolarSystemCreatedEvent, SolarSystemUpdatedEvent

logger = logging.getLogger(__name__)


def update_solar_system(
    system_repo: SolarSystemRepository,
    uow: UnitOfWork,
    system_id: int,
    changes: Mapping[str, Any],
) -> Optional[SolarSystemEntity]:
    """
    Aplica atualização parcial dentro de uma transação já aberta.

    Toda atualização é auditada, com o nome anterior do sistema.

    Args:
        system_repo: Coleção de sistemas
        uow: Unit of Work ativa (recebe o evento)
        system_id: ID do sistema
        changes: Campos alterados

    Returns:
        Sistema atualizado ou None se não existir

    Raises:
        ValidationError: Se campo não atualizável
    """
    current = system_repo.get_by_id(system_id)
    if current is None:
        return None

    system = system_repo.replace(current.with_changes(changes))

    uow.publish_event(
        SolarSystemUpdatedEvent(
            aggregate_id=system.id,
            owner_id=system.user_id,
            name=current.name,
            changed_fields=tuple(sorted(changes)),
        )
    )
    return system


class CreateSolarSystemService:
    """
    Use Case: Cadastrar sistema solar.

    Registra atividade 'Solar system "<nome>" added' para o dono.
    """

    def __init__(
        self,
        system_repo: SolarSystemRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.system_repo = system_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateSolarSystemInputDTO) -> SolarSystemEntity:
        with self.uow:
            system = self.system_repo.add(
                SolarSystemEntity.create(
                    user_id=input_dto.user_id,
                    name=input_dto.name,
                    installation_date=input_dto.installation_date,
                    capacity=input_dto.capacity,
                    panel_type=input_dto.panel_type,
                    panel_count=input_dto.panel_count,
                    inverter_type=input_dto.inverter_type,
                    location=input_dto.location,
                    last_serviced=input_dto.last_serviced,
                    notes=input_dto.notes,
                    now=self.clock(),
                )
            )

            self.uow.publish_event(
                SolarSystemCreatedEvent(
                    aggregate_id=system.id,
                    owner_id=system.user_id,
                    name=system.name,
                )
            )

        logger.info(f"Solar system #{system.id} '{system.name}' created")
        return system


class UpdateSolarSystemService:
    """Use Case: Atualizar sistema solar (None se não existir)."""

    def __init__(self, system_repo: SolarSystemRepository, uow: UnitOfWork):
        self.system_repo = system_repo
        self.uow = uow

    def execute(
        self, system_id: int, changes: Mapping[str, Any]
    ) -> Optional[SolarSystemEntity]:
        with self.uow:
            system = update_solar_system(self.system_repo, self.uow, system_id, changes)

        if system is None:
            logger.debug(f"Solar system #{system_id} not found for update")
        else:
            logger.info(f"Solar system #{system.id} updated")
        return system


class GetSolarSystemService:
    def __init__(self, system_repo: SolarSystemRepository):
        self.system_repo = system_repo

    def execute(self, system_id: int) -> Optional[SolarSystemEntity]:
        return self.system_repo.get_by_id(system_id)


class ListSolarSystemsService:
    """Use Case: Listar sistemas, opcionalmente de um dono."""

    def __init__(self, system_repo: SolarSystemRepository):
        self.system_repo = system_repo

    def execute(self, user_id: Optional[int] = None) -> List[SolarSystemEntity]:
        if user_id is None:
            return self.system_repo.list_all()
        return self.system_repo.list_where(lambda s: s.user_id == user_id)


class RecordPerformanceDataService:
    """
    Use Case: Registrar leitura de desempenho.

    Leituras não são auditadas. O sistema referenciado não é
    verificado.
    """

    def __init__(
        self,
        performance_repo: PerformanceDataRepository,
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.performance_repo = performance_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: RecordPerformanceInputDTO) -> PerformanceDataEntity:
        with self.uow:
            record = self.performance_repo.add(
                PerformanceDataEntity.create(
                    system_id=input_dto.system_id,
                    date=input_dto.date,
                    energy_generated=input_dto.energy_generated,
                    peak_power=input_dto.peak_power,
                    sun_hours=input_dto.sun_hours,
                    efficiency=input_dto.efficiency,
                    weather=input_dto.weather,
                    temperature=input_dto.temperature,
                    notes=input_dto.notes,
                    now=self.clock(),
                )
            )

        logger.debug(
            f"Performance #{record.id} recorded for system #{record.system_id}: "
            f"{record.energy_generated} kWh"
        )
        return record


class GetPerformanceDataService:
    def __init__(self, performance_repo: PerformanceDataRepository):
        self.performance_repo = performance_repo

    def execute(self, record_id: int) -> Optional[PerformanceDataEntity]:
        return self.performance_repo.get_by_id(record_id)


class ListPerformanceDataService:
    """
    Use Case: Listar leituras de um sistema.

    - Sem intervalo: todas as leituras, data mais recente primeiro
    - Com intervalo [start, end] (inclusivo): data mais antiga primeiro
    """

    def __init__(self, performance_repo: PerformanceDataRepository):
        self.performance_repo = performance_repo

    def execute(
        self,
        system_id: int,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
    ) -> List[PerformanceDataEntity]:
        """
        Raises:
            ValidationError: Se apenas uma das pontas do intervalo for informada
        """
        records = self.performance_repo.list_where(lambda r: r.system_id == system_id)

        if start is None and end is None:
            return sorted(records, key=lambda r: r.date, reverse=True)

        if start is None or end is None:
            raise ValidationError(
                "Intervalo exige início e fim",
                field="start" if start is None else "end",
            )

        return records_in_range(records, as_datetime(start), as_datetime(end))


class SystemPerformanceStatsService:
    """
    Use Case: Estatísticas de geração de um sistema.

    Example:
        stats = service.execute(system_id=1)
        stats.to_dict()["performanceTrend"]
    """

    def __init__(
        self,
        performance_repo: PerformanceDataRepository,
        clock: Clock = system_clock,
    ):
        self.performance_repo = performance_repo
        self.clock = clock

    def execute(self, system_id: int) -> SystemPerformanceStatsDTO:
        records = self.performance_repo.list_where(lambda r: r.system_id == system_id)
        return system_performance_stats(records, now=self.clock())
