"""
Relógio e normalização de datas.

As janelas das estatísticas ("hoje", "últimos 7 dias") dependem do
horário local. O relógio é injetado nos services para que testes
possam fixar o "agora".
"""

from datetime import date, datetime
from typing import Callable, Optional, Union

Clock = Callable[[], datetime]
DateLike = Union[date, datetime]


def system_clock() -> datetime:
    """Horário local atual (naive)."""
    return datetime.now()


def start_of_day(moment: datetime) -> datetime:
    """Meia-noite local do dia de `moment`."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def as_datetime(value: Optional[DateLike]) -> Optional[datetime]:
    """
    Normaliza datas para datetime.

    `datetime.date` vira meia-noite do mesmo dia; datetime e None
    passam inalterados.
    """
    if value is None or isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def format_short_date(value: datetime) -> str:
    """Formato M/D/AAAA usado nos detalhes da auditoria."""
    return f"{value.month}/{value.day}/{value.year}"
