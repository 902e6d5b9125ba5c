"""
Use Cases (Application Services) do Domínio de Atividades.

Use Cases implementados:
- CreateActivityService: Registra atividade informada pela API
- ListRecentActivitiesService: Atividades mais recentes
- ListTicketActivitiesService: Histórico de um ticket

As atividades automáticas (criação de ticket, agendamento...) não
passam por aqui: são gravadas pela trilha de auditoria no commit da
Unit of Work que executou a mutação.
"""

import logging
from typing import List, Optional

from solarflow.core.shared.clock import Clock, system_clock
from solarflow.core.shared.interfaces import Repository, UnitOfWork

from .dtos import CreateActivityInputDTO
from .entities import ActivityEntity

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 10


def newest_first(activities: List[ActivityEntity]) -> List[ActivityEntity]:
    """Ordena pela chave de replay, da mais nova para a mais antiga."""
    return sorted(activities, key=lambda a: a.replay_key, reverse=True)


class CreateActivityService:
    """
    Use Case: Registrar atividade manualmente.

    Usado pela API para ações que o store não audita sozinho
    ("commented", "resolved"...). Não gera eventos.

    Example:
        service = CreateActivityService(activity_repo, uow)
        activity = service.execute(CreateActivityInputDTO(
            user_id=3, action="commented", ticket_id=1,
        ))
    """

    def __init__(
        self,
        activity_repo: Repository[ActivityEntity],
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.activity_repo = activity_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateActivityInputDTO) -> ActivityEntity:
        with self.uow:
            activity = self.activity_repo.add(
                ActivityEntity.create(
                    user_id=input_dto.user_id,
                    action=input_dto.action,
                    ticket_id=input_dto.ticket_id,
                    details=input_dto.details,
                    now=self.clock(),
                )
            )

        logger.info(f"Activity #{activity.id} recorded: {activity.action}")
        return activity


class ListRecentActivitiesService:
    """
    Use Case: Listar atividades recentes do painel.

    Ordem: created_at decrescente, ID como desempate.
    """

    def __init__(
        self,
        activity_repo: Repository[ActivityEntity],
        limit: int = DEFAULT_RECENT_LIMIT,
    ):
        self.activity_repo = activity_repo
        self.limit = limit

    def execute(self, limit: Optional[int] = None) -> List[ActivityEntity]:
        """
        Args:
            limit: Máximo de itens (default: configurado no service)

        Returns:
            Até `limit` atividades, da mais nova para a mais antiga
        """
        if limit is None:
            limit = self.limit
        return newest_first(self.activity_repo.list_all())[:limit]


class ListTicketActivitiesService:
    """Use Case: Histórico de atividades de um ticket, mais nova primeiro."""

    def __init__(self, activity_repo: Repository[ActivityEntity]):
        self.activity_repo = activity_repo

    def execute(self, ticket_id: int) -> List[ActivityEntity]:
        return newest_first(
            self.activity_repo.list_where(lambda a: a.ticket_id == ticket_id)
        )
