"""
Use Cases (Application Services) do Domínio de Contas.

Use Cases implementados:
- CreateUserService / GetUserService / GetUserByUsernameService
- CreateMessageService / ListMessagesService
- RecordChatExchangeService: mensagem do usuário + resposta do bot

Usuários e mensagens não são auditados.
"""

import logging
from typing import List, Optional

from solarflow.core.shared.clock import Clock, system_clock
from solarflow.core.shared.interfaces import Repository, UnitOfWork

from .entities import MessageEntity, UserEntity
from .dtos import ChatExchangeDTO, CreateMessageInputDTO, CreateUserInputDTO
from .ports import ChatResponder

logger = logging.getLogger(__name__)


class CreateUserService:
    """
    Use Case: Cadastrar usuário.

    Note:
        O store não impõe unicidade de username; a camada HTTP
        consulta GetUserByUsernameService antes do cadastro.
    """

    def __init__(
        self,
        user_repo: Repository[UserEntity],
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.user_repo = user_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateUserInputDTO) -> UserEntity:
        with self.uow:
            user = self.user_repo.add(
                UserEntity.create(
                    username=input_dto.username,
                    password=input_dto.password,
                    full_name=input_dto.full_name,
                    email=input_dto.email,
                    role=input_dto.role,
                    avatar=input_dto.avatar,
                    now=self.clock(),
                )
            )

        logger.info(f"User #{user.id} '{user.username}' created")
        return user


class GetUserService:
    def __init__(self, user_repo: Repository[UserEntity]):
        self.user_repo = user_repo

    def execute(self, user_id: int) -> Optional[UserEntity]:
        return self.user_repo.get_by_id(user_id)


class GetUserByUsernameService:
    """Use Case: Buscar usuário pelo username (primeiro cadastrado)."""

    def __init__(self, user_repo: Repository[UserEntity]):
        self.user_repo = user_repo

    def execute(self, username: str) -> Optional[UserEntity]:
        matches = self.user_repo.list_where(lambda u: u.username == username)
        return matches[0] if matches else None


class CreateMessageService:
    def __init__(
        self,
        message_repo: Repository[MessageEntity],
        uow: UnitOfWork,
        clock: Clock = system_clock,
    ):
        self.message_repo = message_repo
        self.uow = uow
        self.clock = clock

    def execute(self, input_dto: CreateMessageInputDTO) -> MessageEntity:
        with self.uow:
            message = self.message_repo.add(
                MessageEntity.create(
                    user_id=input_dto.user_id,
                    content=input_dto.content,
                    is_bot=input_dto.is_bot,
                    now=self.clock(),
                )
            )

        logger.debug(f"Message #{message.id} stored for user #{message.user_id}")
        return message


class ListMessagesService:
    """Use Case: Conversa de um usuário, em ordem de inserção."""

    def __init__(self, message_repo: Repository[MessageEntity]):
        self.message_repo = message_repo

    def execute(self, user_id: int) -> List[MessageEntity]:
        return self.message_repo.list_where(lambda m: m.user_id == user_id)


class RecordChatExchangeService:
    """
    Use Case: Registrar troca de mensagens com o assistente.

    Fluxo:
    1. Grava a mensagem do usuário (transação própria)
    2. Pede a resposta ao ChatResponder, fora do lock do store
    3. Grava a resposta do bot (is_bot=True) para o mesmo usuário

    Se o responder falhar, a mensagem do usuário permanece gravada
    e a exceção é propagada.

    Example:
        exchange = service.execute(user_id=1, content="Meu inversor apita")
        exchange.bot_message.content
    """

    def __init__(
        self,
        create_message: CreateMessageService,
        responder: ChatResponder,
    ):
        self.create_message = create_message
        self.responder = responder

    def execute(self, user_id: int, content: str) -> ChatExchangeDTO:
        user_message = self.create_message.execute(
            CreateMessageInputDTO(user_id=user_id, content=content)
        )

        reply = self.responder.reply(content)

        bot_message = self.create_message.execute(
            CreateMessageInputDTO(user_id=user_id, content=reply, is_bot=True)
        )

        logger.info(f"Chat exchange stored for user #{user_id}")
        return ChatExchangeDTO(user_message=user_message, bot_message=bot_message)
