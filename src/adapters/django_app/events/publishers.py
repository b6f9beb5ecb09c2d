"""
Event Publishers - Publicadores de Eventos de Domínio.

Responsável por notificar interessados depois que uma transação é
confirmada. O registro permanente (action_log) não depende daqui:
ele é gravado pelo Event Store dentro da transação.

Implementações:
- LoggingEventPublisher: Loga eventos e executa handlers síncronos
- InMemoryEventPublisher: Para testes
- CompositeEventPublisher: Delega para vários publishers

Padrão Observer/Pub-Sub para desacoplamento.
"""

from typing import List, Callable, Dict
import logging
import json

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


class _HandlerRegistry:
    """Handlers síncronos por tipo de evento."""

    def __init__(self):
        self._handlers: Dict[str, List[Callable[[DomainEvent], None]]] = {}

    def register_handler(
        self,
        event_type: str,
        handler: Callable[[DomainEvent], None]
    ) -> None:
        """Registra handler para tipo de evento (nome da classe)."""
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class LoggingEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Publisher que loga eventos.

    Cada evento vira uma linha no logger deste módulo, com tabela,
    ação, registro e ator.
    """

    def __init__(self, log_level: int = logging.INFO):
        """
        Args:
            log_level: Nível de log para eventos
        """
        super().__init__()
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        logger.log(
            self._log_level,
            f"[EVENT] {event.aggregate_type}/{event.action_type} | "
            f"record={event.aggregate_id} | "
            f"actor={event.actor_type}:{event.actor_id} | "
            f"data={json.dumps(event.get_event_data(), default=str)}"
        )
        self._dispatch_to_handlers(event)


class InMemoryEventPublisher(_HandlerRegistry, EventPublisher):
    """
    Publisher em memória para testes.

    Armazena eventos publicados para verificação em testes.
    """

    def __init__(self):
        super().__init__()
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)
        self._dispatch_to_handlers(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        """Filtra eventos por tipo (nome da classe)."""
        return [e for e in self._published_events if e.event_type == event_type]


class CompositeEventPublisher(EventPublisher):
    """
    Publisher que delega para múltiplos publishers.

    Falha em um publisher não impede os demais.
    """

    def __init__(self, publishers: List[EventPublisher] = None):
        self._publishers = publishers or []

    def add_publisher(self, publisher: EventPublisher) -> None:
        self._publishers.append(publisher)

    def publish(self, event: DomainEvent) -> None:
        for publisher in self._publishers:
            try:
                publisher.publish(event)
            except Exception as e:
                logger.error(
                    f"Erro ao publicar em {publisher.__class__.__name__}: {e}"
                )
