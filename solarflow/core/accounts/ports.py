"""
Ports (Interfaces) do Domínio de Contas.

O gerador de respostas do chat é um colaborador externo: o store
apenas persiste a troca de mensagens.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChatResponder(Protocol):
    """
    Interface para o gerador de respostas do assistente.

    Implementações podem chamar um modelo de linguagem ou devolver
    respostas prontas; podem fazer I/O, por isso são chamadas fora
    do lock do store.

    Example:
        class CannedResponder:
            def reply(self, content: str) -> str:
                return "Um técnico entrará em contato."
    """

    def reply(self, content: str) -> str:
        """
        Gera resposta para a mensagem do usuário.

        Args:
            content: Texto enviado pelo usuário

        Returns:
            Texto da resposta do bot
        """
        ...
