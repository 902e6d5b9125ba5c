"""
Ports (Interfaces) do Domínio de Tickets.
"""

from solarflow.core.shared.interfaces import Repository

from .entities import TicketEntity

# Coleção de tickets do store (add, get_by_id, replace, list_where...)
TicketRepository = Repository[TicketEntity]
