"""
Domínio de Contas - Usuários e chat de suporte.

Os services ficam em `solarflow.core.accounts.use_cases`.
"""

from .entities import MessageEntity, UserEntity
from .dtos import ChatExchangeDTO, CreateMessageInputDTO, CreateUserInputDTO
from .ports import ChatResponder

__all__ = [
    "UserEntity",
    "MessageEntity",
    "CreateUserInputDTO",
    "CreateMessageInputDTO",
    "ChatExchangeDTO",
    "ChatResponder",
]
