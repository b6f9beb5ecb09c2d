"""
Mapper ActionLogEntry <-> ActionLogModel.
"""

from typing import Iterable, List

from src.core.audit.entities import ActionLogEntry, ActionType, AuditTable

from .models import ActionLogModel


class ActionLogMapper:

    @staticmethod
    def to_model(entry: ActionLogEntry) -> ActionLogModel:
        return ActionLogModel(
            id=entry.id,
            table_name=entry.table_name.value,
            record_id=entry.record_id,
            action_type=entry.action_type.value,
            actor_type=entry.actor_type,
            actor_id=entry.actor_id,
            details=dict(entry.details),
            timestamp=entry.timestamp,
        )

    @staticmethod
    def to_entity(model: ActionLogModel) -> ActionLogEntry:
        return ActionLogEntry(
            id=model.id,
            table_name=AuditTable.from_string(model.table_name),
            record_id=model.record_id,
            action_type=ActionType.from_string(model.action_type),
            timestamp=model.timestamp,
            actor_type=model.actor_type,
            actor_id=model.actor_id,
            details=model.details or {},
        )

    @staticmethod
    def to_entity_list(models: Iterable[ActionLogModel]) -> List[ActionLogEntry]:
        return [ActionLogMapper.to_entity(m) for m in models]
