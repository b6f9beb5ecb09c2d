"""
Ports (Interfaces) do Domínio de Auditoria.

- ActionLogRepository: grava e lê entradas do log
- ActionLogEventStore: Event Store do UoW, que converte cada evento
  confirmado em uma entrada do log
"""

from typing import List, Optional, Protocol, runtime_checkable

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventStore

from .entities import ActionLogEntry, ActionType, AuditTable


@runtime_checkable
class ActionLogRepository(Protocol):
    """
    Interface para o log de ações.

    Não há update nem delete: o log é somente-inclusão.

    Implementações:
    - DjangoActionLogRepository (ORM)
    - InMemoryActionLogRepository (para testes)
    """

    def append(self, entry: ActionLogEntry) -> None:
        ...

    def list_recent(
        self,
        limit: int = 100,
        table_name: Optional[AuditTable] = None,
        action_type: Optional[ActionType] = None,
    ) -> List[ActionLogEntry]:
        """
        Lista entradas mais recentes primeiro.

        Args:
            limit: Quantidade máxima de entradas
            table_name: Filtro opcional por tabela
            action_type: Filtro opcional por ação
        """
        ...

    def list_for_record(self, table_name: AuditTable, record_id: str) -> List[ActionLogEntry]:
        """Histórico de um registro, mais antigo primeiro."""
        ...

    def count(self) -> int:
        ...


class ActionLogEventStore(EventStore):
    """
    Event Store que grava o log de ações.

    Example:
        store = ActionLogEventStore(action_log_repo)
        uow = DjangoUnitOfWork(event_store=store)
    """

    def __init__(self, log_repo: ActionLogRepository):
        self.log_repo = log_repo

    def append(self, event: DomainEvent) -> None:
        self.log_repo.append(ActionLogEntry.from_event(event))


class InMemoryActionLogRepository:
    """Implementação em memória do ActionLogRepository."""

    def __init__(self):
        self._entries: List[ActionLogEntry] = []

    def append(self, entry: ActionLogEntry) -> None:
        if any(e.id == entry.id for e in self._entries):
            return
        self._entries.append(entry)

    def list_recent(
        self,
        limit: int = 100,
        table_name: Optional[AuditTable] = None,
        action_type: Optional[ActionType] = None,
    ) -> List[ActionLogEntry]:
        entries = [
            e for e in reversed(self._entries)
            if (table_name is None or e.table_name == table_name)
            and (action_type is None or e.action_type == action_type)
        ]
        entries.sort(key=lambda e: e.timestamp, reverse=True)
        return entries[:limit]

    def list_for_record(self, table_name: AuditTable, record_id: str) -> List[ActionLogEntry]:
        return [
            e for e in self._entries
            if e.table_name == table_name and e.record_id == record_id
        ]

    def count(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
