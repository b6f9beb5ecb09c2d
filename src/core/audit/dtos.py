"""
DTOs do Domínio de Auditoria.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from .entities import ActionLogEntry


@dataclass(frozen=True)
class ListActionLogQueryDTO:
    """
    Filtros do painel do administrador.

    Attributes:
        limit: Quantidade máxima de entradas (mais recentes primeiro)
        table_name: Filtra por tabela ("pet", "adoption", ...)
        action_type: Filtra por ação ("APPROVE", "LOGIN", ...)
    """

    limit: int = 100
    table_name: Optional[str] = None
    action_type: Optional[str] = None


@dataclass
class ActionLogEntryDTO:
    id: str
    table_name: str
    record_id: str
    action_type: str
    timestamp: datetime
    actor_type: Optional[str]
    actor_id: Optional[str]
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_entity(cls, entry: ActionLogEntry) -> "ActionLogEntryDTO":
        return cls(
            id=entry.id,
            table_name=entry.table_name.value,
            record_id=entry.record_id,
            action_type=entry.action_type.value,
            timestamp=entry.timestamp,
            actor_type=entry.actor_type,
            actor_id=entry.actor_id,
            details=dict(entry.details),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "table_name": self.table_name,
            "record_id": self.record_id,
            "action_type": self.action_type,
            "timestamp": self.timestamp.isoformat(),
            "actor_type": self.actor_type,
            "actor_id": self.actor_id,
            "details": self.details,
        }
