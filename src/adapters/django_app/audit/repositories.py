"""
Repositório Django para o log de ações.

Implementa ActionLogRepository (Port do Core). É chamado pelo
ActionLogEventStore dentro da transação do Unit of Work, então
a linha do log só existe se a mudança auditada foi confirmada.
"""

from typing import List, Optional
import logging

from src.core.audit.entities import ActionLogEntry, ActionType, AuditTable

from .models import ActionLogModel
from .mappers import ActionLogMapper

logger = logging.getLogger(__name__)


class DjangoActionLogRepository:
    """
    Implementação Django do ActionLogRepository.

    Example:
        repo = DjangoActionLogRepository()
        repo.append(ActionLogEntry.from_event(event))
        recent = repo.list_recent(limit=20, table_name=AuditTable.ADOPTION)
    """

    def __init__(self):
        self._mapper = ActionLogMapper()

    def append(self, entry: ActionLogEntry) -> None:
        """
        Grava a entrada.

        Note:
            get_or_create pelo id (event_id): reprocessar o mesmo
            evento não duplica a linha e nunca sobrescreve a existente
        """
        model = self._mapper.to_model(entry)
        _, created = ActionLogModel.objects.get_or_create(
            id=model.id,
            defaults={
                'table_name': model.table_name,
                'record_id': model.record_id,
                'action_type': model.action_type,
                'actor_type': model.actor_type,
                'actor_id': model.actor_id,
                'details': model.details,
                'timestamp': model.timestamp,
            }
        )
        if created:
            logger.debug(
                f"Action logged: {entry.action_type.value} "
                f"{entry.table_name.value}:{entry.record_id}"
            )
        else:
            logger.warning(f"Entrada de log duplicada ignorada: {entry.id}")

    def list_recent(
        self,
        limit: int = 100,
        table_name: Optional[AuditTable] = None,
        action_type: Optional[ActionType] = None,
    ) -> List[ActionLogEntry]:
        queryset = ActionLogModel.objects.all()

        if table_name is not None:
            queryset = queryset.filter(table_name=table_name.value)
        if action_type is not None:
            queryset = queryset.filter(action_type=action_type.value)

        return self._mapper.to_entity_list(queryset.order_by('-timestamp')[:limit])

    def list_for_record(self, table_name: AuditTable, record_id: str) -> List[ActionLogEntry]:
        queryset = ActionLogModel.objects.filter(
            table_name=table_name.value,
            record_id=record_id,
        ).order_by('timestamp')
        return self._mapper.to_entity_list(queryset)

    def count(self) -> int:
        return ActionLogModel.objects.count()
