"""
Alocador de Identificadores.

Um contador por tipo de entidade, iniciado em 1. IDs nunca são
reciclados; o único recuo permitido é o da Unit of Work ao desfazer
uma transação, para que uma inserção abandonada não deixe lacuna.
"""


class IdentifierAllocator:
    """
    Contador monotônico de IDs de um tipo de entidade.

    Não é thread-safe por si só: o store chama `allocate()` com o
    lock de escrita já adquirido, junto da inserção.

    Example:
        allocator = IdentifierAllocator()
        allocator.allocate()  # 1
        allocator.allocate()  # 2
        allocator.last_allocated  # 2
    """

    def __init__(self, start: int = 1):
        self._next = start

    def allocate(self) -> int:
        """Retorna o próximo ID e avança o contador."""
        allocated = self._next
        self._next += 1
        return allocated

    @property
    def last_allocated(self) -> int:
        """Último ID entregue (0 se nenhum)."""
        return self._next - 1

    def rewind_to(self, last_allocated: int) -> None:
        """
        Restaura o contador após rollback.

        Args:
            last_allocated: Valor de `last_allocated` no início da transação

        Raises:
            ValueError: Se tentar avançar o contador em vez de recuar
        """
        if last_allocated > self.last_allocated:
            raise ValueError(
                f"Não é possível avançar o alocador para {last_allocated}"
            )
        self._next = last_allocated + 1
