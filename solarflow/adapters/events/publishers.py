"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações:
- SynchronousEventPublisher: Loga e entrega aos handlers registrados
- InMemoryEventPublisher: Também guarda os eventos (testes)

Os handlers rodam dentro do commit da Unit of Work. Uma falha num
handler sobe até a Unit of Work, que desfaz a transação.
"""

import json
import logging
from typing import Callable, Dict, List

from solarflow.core.shared.events import DomainEvent
from solarflow.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


class SynchronousEventPublisher(EventPublisher):
    """
    Publisher que loga eventos e executa handlers locais.

    Example:
        publisher = SynchronousEventPublisher()
        publisher.register_handler("TicketCreatedEvent", audit.handle)
    """

    def __init__(self, log_level: int = logging.INFO):
        """
        Args:
            log_level: Nível de log para eventos
        """
        self._log_level = log_level
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event.to_dict(), default=str)}"
        )
        self._dispatch_to_handlers(event)

    def publish_batch(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    def register_handler(
        self,
        event_type: str,
        handler: Callable[[DomainEvent], None]
    ) -> None:
        """Registra handler para tipo de evento."""
        self._handlers.setdefault(event_type, []).append(handler)

    def handlers_for(self, event_type: str) -> List[Callable[[DomainEvent], None]]:
        return list(self._handlers.get(event_type, []))

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")
                raise


class InMemoryEventPublisher(SynchronousEventPublisher):
    """
    Publisher para testes.

    Armazena eventos em lista para verificação, sem deixar de
    executar os handlers registrados.
    """

    def __init__(self):
        super().__init__(log_level=logging.DEBUG)
        self._published: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published.append(event)
        super().publish(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return list(self._published)

    def clear(self) -> None:
        self._published.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published if e.event_type == event_type]
