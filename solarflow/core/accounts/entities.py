"""
Entidades do Domínio de Contas.

Entidades:
- UserEntity: Usuário do painel (cliente, técnico, administrador)
- MessageEntity: Mensagem do chat de suporte (usuário ou bot)

Ambas são imutáveis após a criação (somente inserção).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class UserEntity:
    """
    Entidade de Domínio: Usuário.

    Attributes:
        id: Identificador atribuído pelo store
        username: Login único (unicidade garantida pela camada de entrada)
        password: Senha já processada pela camada de autenticação
        full_name: Nome completo
        email: E-mail de contato
        role: Papel (user, admin, agent)
        avatar: Iniciais ou URL do avatar
        created_at: Data/hora de criação
    """

    id: Optional[int] = None
    username: str = ""
    password: str = ""
    full_name: str = ""
    email: str = ""
    role: str = "user"
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        username: str,
        password: str,
        full_name: str,
        email: str,
        now: datetime,
        role: str = "user",
        avatar: Optional[str] = None,
    ) -> "UserEntity":
        """Factory method: novo usuário ainda sem ID."""
        return cls(
            username=username,
            password=password,
            full_name=full_name,
            email=email,
            role=role or "user",
            avatar=avatar,
            created_at=now,
        )

    def __repr__(self) -> str:
        return f"UserEntity(id={self.id}, username='{self.username}', role={self.role})"


@dataclass
class MessageEntity:
    """
    Entidade de Domínio: Mensagem de chat.

    Attributes:
        id: Identificador atribuído pelo store
        user_id: Usuário dono da conversa
        content: Texto da mensagem
        is_bot: True se a mensagem foi gerada pelo assistente
        created_at: Data/hora de criação
    """

    id: Optional[int] = None
    user_id: int = 0
    content: str = ""
    is_bot: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(
        cls,
        user_id: int,
        content: str,
        now: datetime,
        is_bot: bool = False,
    ) -> "MessageEntity":
        """Factory method: nova mensagem ainda sem ID."""
        return cls(user_id=user_id, content=content, is_bot=is_bot, created_at=now)
