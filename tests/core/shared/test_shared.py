"""
Testes Unitários para os componentes compartilhados do domínio.

Coverage:
- ChoiceEnum.from_string(): valores, nomes e erros
- merge_changes(): campos aceitos e rejeitados
- IdentifierAllocator: sequência e recuo
- Relógio: meia-noite, normalização de datas, formato M/D/AAAA
- Exceções: códigos e serialização
"""

from dataclasses import dataclass
from datetime import date, datetime

import pytest

from solarflow.core.shared.changes import ChoiceEnum, merge_changes
from solarflow.core.shared.clock import as_datetime, format_short_date, start_of_day
from solarflow.core.shared.exceptions import (
    DomainException,
    IdentifierAllocationError,
    ValidationError,
)
from solarflow.core.shared.identifiers import IdentifierAllocator
from solarflow.core.tickets.entities import TicketStatus


class TestChoiceEnum:
    """Testes para conversão de enums textuais."""

    def test_converte_pelo_valor(self):
        """Deve aceitar o valor textual."""
        assert TicketStatus.from_string("in progress") == TicketStatus.IN_PROGRESS

    def test_converte_ignorando_maiusculas(self):
        assert TicketStatus.from_string("Resolved") == TicketStatus.RESOLVED

    def test_converte_pelo_nome(self):
        """Deve aceitar o nome do membro."""
        assert TicketStatus.from_string("IN_PROGRESS") == TicketStatus.IN_PROGRESS

    def test_membro_passa_inalterado(self):
        assert TicketStatus.from_string(TicketStatus.CLOSED) is TicketStatus.CLOSED

    def test_valor_invalido_erro(self):
        """Deve rejeitar valor fora do enum."""
        with pytest.raises(ValidationError) as exc_info:
            TicketStatus.from_string("archived")

        assert exc_info.value.field == "ticketstatus"

    def test_str_e_o_valor(self):
        """f-strings devem produzir o valor cru."""
        assert f"{TicketStatus.IN_PROGRESS}" == "in progress"
        assert str(TicketStatus.OPEN) == "open"

    def test_compara_com_string(self):
        assert TicketStatus.OPEN == "open"


@dataclass
class _Sample:
    id: int = 1
    name: str = ""
    status: str = ""


class TestMergeChanges:
    """Testes para atualização parcial."""

    def test_mescla_campos(self):
        original = _Sample(name="a", status="x")

        updated = merge_changes(original, {"name": "b"}, frozenset({"name", "status"}))

        assert updated.name == "b"
        assert updated.status == "x"
        assert original.name == "a"

    def test_aplica_conversores(self):
        updated = merge_changes(
            _Sample(),
            {"status": "abc"},
            frozenset({"status"}),
            coercers={"status": str.upper},
        )

        assert updated.status == "ABC"

    def test_campo_desconhecido_rejeita_tudo(self):
        """Nenhum campo deve ser aplicado se algum for inválido."""
        with pytest.raises(ValidationError) as exc_info:
            merge_changes(_Sample(), {"name": "b", "id": 9}, frozenset({"name"}))

        assert exc_info.value.field == "id"


class TestIdentifierAllocator:
    """Testes para o alocador de IDs."""

    def test_sequencia_inicia_em_um(self):
        allocator = IdentifierAllocator()

        assert [allocator.allocate() for _ in range(3)] == [1, 2, 3]
        assert allocator.last_allocated == 3

    def test_sem_alocacao_ultimo_e_zero(self):
        assert IdentifierAllocator().last_allocated == 0

    def test_recua_contador(self):
        allocator = IdentifierAllocator()
        for _ in range(5):
            allocator.allocate()

        allocator.rewind_to(2)

        assert allocator.allocate() == 3

    def test_nao_avanca_contador(self):
        """rewind_to não pode pular IDs."""
        allocator = IdentifierAllocator()
        allocator.allocate()

        with pytest.raises(ValueError):
            allocator.rewind_to(5)


class TestClock:
    """Testes para os utilitários de data."""

    def test_start_of_day(self):
        assert start_of_day(datetime(2024, 6, 13, 15, 30, 12, 5)) == datetime(2024, 6, 13)

    def test_as_datetime_de_date(self):
        assert as_datetime(date(2024, 6, 10)) == datetime(2024, 6, 10)

    def test_as_datetime_preserva_datetime_e_none(self):
        moment = datetime(2024, 6, 10, 8, 0)

        assert as_datetime(moment) is moment
        assert as_datetime(None) is None

    def test_format_short_date_sem_zeros(self):
        assert format_short_date(datetime(2024, 3, 5)) == "3/5/2024"


class TestExceptions:
    """Testes para a hierarquia de exceções."""

    def test_validation_error_codigo_por_campo(self):
        error = ValidationError("Campo inválido", field="status")

        assert error.code == "VALIDATION_ERROR_STATUS"
        assert error.to_dict() == {
            "error": "VALIDATION_ERROR_STATUS",
            "message": "Campo inválido",
            "field": "status",
        }
        assert isinstance(error, DomainException)

    def test_identifier_allocation_error(self):
        error = IdentifierAllocationError("ocupado", entity_type="Ticket", entity_id=3)

        assert str(error) == "[IDENTIFIER_ALLOCATION_ERROR] ocupado"
        assert error.to_dict()["entity_id"] == 3
