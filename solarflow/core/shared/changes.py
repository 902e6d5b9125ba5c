"""
Suporte a enums de domínio e atualizações parciais.

Ticket, SolarSystem e MaintenanceBooking aceitam atualização parcial:
os campos informados são mesclados sobre a versão armazenada. Apenas
campos aceitos na criação podem ser alterados; ID e timestamps são
controlados pelo store.
"""

from dataclasses import replace
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, TypeVar

from .exceptions import ValidationError

E = TypeVar("E")


class ChoiceEnum(str, Enum):
    """
    Enum de valores textuais do domínio ("open", "in progress"...).

    Herda de str para que comparações com o valor cru funcionem
    (TicketStatus.OPEN == "open").
    """

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value) -> "ChoiceEnum":
        """
        Converte string (valor ou nome do membro) para enum.

        Args:
            value: Membro do enum, valor ("in progress") ou nome ("IN_PROGRESS")

        Returns:
            Membro correspondente

        Raises:
            ValidationError: Se valor inválido
        """
        if isinstance(value, cls):
            return value

        text = str(value).strip()

        # Tenta pelo valor ("in progress")
        for member in cls:
            if member.value.lower() == text.lower():
                return member

        # Tenta pelo nome (IN_PROGRESS)
        try:
            return cls[text.upper().replace(" ", "_")]
        except KeyError:
            pass

        raise ValidationError(
            f"Valor inválido para {cls.__name__}: {value}",
            field=cls.__name__.lower(),
        )


def merge_changes(
    entity: E,
    changes: Mapping[str, Any],
    updatable: FrozenSet[str],
    coercers: Optional[Dict[str, Callable[[Any], Any]]] = None,
) -> E:
    """
    Mescla campos alterados sobre uma entidade.

    Nenhum campo é aplicado se algum deles não for atualizável.

    Args:
        entity: Versão atual (não é modificada)
        changes: Campos e novos valores
        updatable: Nomes de campos aceitos
        coercers: Conversões por campo (ex: str -> enum)

    Returns:
        Nova instância com os campos mesclados

    Raises:
        ValidationError: Se houver campo desconhecido ou não atualizável
    """
    unknown = sorted(set(changes) - updatable)
    if unknown:
        raise ValidationError(
            f"Campos não podem ser alterados: {', '.join(unknown)}",
            field=unknown[0],
        )

    coercers = coercers or {}
    values = {
        name: coercers[name](value) if name in coercers else value
        for name, value in changes.items()
    }
    return replace(entity, **values)
