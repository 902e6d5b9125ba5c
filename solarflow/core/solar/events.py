"""
Domain Events do Domínio Solar.

Eventos:
- SolarSystemCreatedEvent: Sistema cadastrado
- SolarSystemUpdatedEvent: Sistema alterado (qualquer campo)
"""

from dataclasses import dataclass
from typing import Any, Dict

from solarflow.core.shared.events import DomainEvent


@dataclass
class SolarSystemCreatedEvent(DomainEvent):
    """
    Evento: Sistema solar foi cadastrado.

    Attributes:
        owner_id: Dono do sistema
        name: Nome do sistema
    """

    owner_id: int = 0
    name: str = ""

    @property
    def aggregate_type(self) -> str:
        return "SolarSystem"

    def _get_event_data(self) -> Dict[str, Any]:
        return {"owner_id": self.owner_id, "name": self.name}


@dataclass
class SolarSystemUpdatedEvent(DomainEvent):
    """
    Evento: Sistema solar foi alterado.

    Disparado em toda atualização, inclusive a de `last_serviced`
    feita pela cascata do relatório de manutenção.

    Attributes:
        owner_id: Dono do sistema
        name: Nome antes da atualização
        changed_fields: Campos informados na atualização
    """

    owner_id: int = 0
    name: str = ""
    changed_fields: tuple = ()

    @property
    def aggregate_type(self) -> str:
        return "SolarSystem"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "owner_id": self.owner_id,
            "name": self.name,
            "changed_fields": list(self.changed_fields),
        }
