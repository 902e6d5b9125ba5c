"""
Exceções de Domínio do SolarFlow.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (campo ou valor não aceito pelo store)
    └── IdentifierAllocationError (invariante do alocador violada)

Note:
    Ausência não é erro: buscas e atualizações por ID inexistente
    retornam None. Exceções ficam reservadas para entradas inválidas
    e falhas inesperadas.
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(ticket_id, {"status": "arquivado"})
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando uma atualização parcial traz campos que a entidade
    não aceita, ou quando um status/prioridade não pertence ao enum.

    Example:
        if unknown_fields:
            raise ValidationError("Campo não pode ser alterado", field="id")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class IdentifierAllocationError(DomainException):
    """
    Violação da invariante do alocador de IDs.

    Lançada quando um ID recém-alocado já está ocupado na coleção.
    Não deveria acontecer; indica estado corrompido e aborta a operação
    (a Unit of Work desfaz as alterações).
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: int = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "IDENTIFIER_ALLOCATION_ERROR")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result
