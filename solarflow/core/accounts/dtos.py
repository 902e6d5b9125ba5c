"""
Data Transfer Objects (DTOs) do Domínio de Contas.

Input DTOs chegam já validados quanto ao formato pela camada HTTP.
"""

from dataclasses import dataclass
from typing import Optional

from .entities import MessageEntity


@dataclass(frozen=True)
class CreateUserInputDTO:
    """DTO de entrada para criar usuário."""

    username: str
    password: str
    full_name: str
    email: str
    role: str = "user"
    avatar: Optional[str] = None


@dataclass(frozen=True)
class CreateMessageInputDTO:
    """
    DTO de entrada para registrar mensagem de chat.

    Attributes:
        user_id: Usuário dono da conversa
        content: Texto da mensagem
        is_bot: Se a mensagem é do assistente
    """

    user_id: int
    content: str
    is_bot: bool = False


@dataclass
class ChatExchangeDTO:
    """Par mensagem do usuário / resposta do bot."""

    user_message: MessageEntity
    bot_message: MessageEntity
