"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre múltiplos repositórios,
garantindo consistência entre pet, solicitação de adoção e log
de ações.

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado
- Gravar eventos no Event Store (log de ações) dentro da transação
- Publicar eventos após commit bem-sucedido

ACID Guarantees:
- Atomicidade: Tudo ou nada (inclusive as linhas do action_log)
- Consistência: Log reflete exatamente o estado persistido
- Isolamento: Cada use case tem sua transação
- Durabilidade: PostgreSQL garante
"""

from typing import List, Optional
import logging

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork, EventPublisher, EventStore
from src.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa django.db.transaction.atomic, o que permite aninhamento:
    dentro de outra transação (ATOMIC_REQUESTS, testes) o UoW vira
    um savepoint. Eventos são publicados via transaction.on_commit,
    ou seja, somente quando a transação mais externa é confirmada.

    Example:
        with DjangoUnitOfWork(event_store=store) as uow:
            pet_repo.save(pet)
            adoption_repo.save(adoption)
            uow.publish_event(AdoptionApprovedEvent(...))
        # Commit automático + log gravado + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.save(entity)
            raise BusinessRuleViolationError("...")
        # Rollback automático, eventos descartados
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        event_store: Optional[EventStore] = None,
        using: Optional[str] = None,
    ):
        """
        Inicializa Unit of Work.

        Args:
            event_publisher: Publicador de eventos (após commit)
            event_store: Store para persistência de eventos (na transação)
            using: Alias do banco (default do Django se None)
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._event_store = event_store
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self.clear_events()
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Persiste todas as mudanças e agenda publicação dos eventos.

        Ordem de execução:
        1. Gravar eventos no Event Store (mesma transação)
        2. Commit da transação (ou liberação do savepoint)
        3. Agendar publicação para depois do commit real

        Raises:
            Exception: Se gravação do log ou commit falharem
        """
        if self._atomic is None:
            logger.warning("Transaction already finalized")
            return

        try:
            if self._event_store and self._events:
                self._persist_events()
        except Exception as e:
            logger.error(f"Falha ao gravar log de ações: {e}")
            self.rollback()
            raise

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

        events = self.collect_events()
        self.clear_events()
        if events:
            transaction.on_commit(lambda: self._publish_events(events), using=self._using)

    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        self.clear_events()
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        try:
            transaction.set_rollback(True, using=self._using)
            atomic.__exit__(None, None, None)
            logger.debug("Transaction rolled back")
        finally:
            self._rolled_back = True

    def _persist_events(self) -> None:
        for event in self._events:
            self._event_store.append(event)

    def _publish_events(self, events: List[DomainEvent]) -> None:
        """
        Publica eventos confirmados.

        Falha de publicação não desfaz nada: o log de ações já
        foi gravado junto com a mudança.
        """
        for event in events:
            logger.debug(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}")

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada no banco: apenas simula o comportamento, grava
    no Event Store e publica eventos no commit.

    Example:
        uow = InMemoryUnitOfWork(event_store=ActionLogEventStore(log_repo))
        with uow:
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1
    """

    def __init__(
        self,
        event_publisher: Optional[EventPublisher] = None,
        event_store: Optional[EventStore] = None,
    ):
        super().__init__()
        self._event_publisher = event_publisher
        self._event_store = event_store
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self.clear_events()

    def commit(self) -> None:
        if self._event_store:
            for event in self._events:
                self._event_store.append(event)
        self._committed = True
        self._published_events.extend(self._events)
        if self._event_publisher:
            self._event_publisher.publish_batch(list(self._events))
        self.clear_events()

    def rollback(self) -> None:
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna eventos que foram 'publicados'."""
        return self._published_events

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
