"""
Entidades do Domínio de Auditoria.

O log de ações (action_log) é uma trilha somente-inclusão: cada
Domain Event confirmado vira exatamente uma entrada, gravada na
mesma transação da mudança que ele descreve.

Entidades:
- AuditTable: Tabelas auditadas
- ActionType: Ações registradas
- ActionLogEntry: Uma linha do log
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from src.core.shared.events import DomainEvent


class AuditTable(Enum):
    CLIENT = "client"
    SHELTER = "shelter"
    ADMIN = "admin"
    PET = "pet"
    ADOPTION = "adoption"

    @classmethod
    def from_string(cls, value: str) -> "AuditTable":
        for table in cls:
            if table.value == str(value).strip().lower():
                return table
        raise ValueError(f"Tabela inválida: {value}")


class ActionType(Enum):
    """
    Ações registradas no log.

    Contas:   REGISTER, LOGIN, LOGOUT
    Pets:     INSERT, DELETE, HOLD, ADOPTED, AVAILABLE
    Adoções:  REQUEST, CANCEL, APPROVE, REJECT, COMPLETE
    """

    REGISTER = "REGISTER"
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"
    INSERT = "INSERT"
    DELETE = "DELETE"
    REQUEST = "REQUEST"
    CANCEL = "CANCEL"
    APPROVE = "APPROVE"
    REJECT = "REJECT"
    COMPLETE = "COMPLETE"
    HOLD = "HOLD"
    ADOPTED = "ADOPTED"
    AVAILABLE = "AVAILABLE"

    @classmethod
    def from_string(cls, value: str) -> "ActionType":
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Ação inválida: {value}")


@dataclass(frozen=True)
class ActionLogEntry:
    """
    Entrada imutável do log de ações.

    O id da entrada é o event_id do evento de origem, o que impede
    que o mesmo evento seja registrado duas vezes.

    Attributes:
        id: Identificador (event_id)
        table_name: Tabela afetada
        record_id: Registro afetado
        action_type: Ação executada
        timestamp: Quando aconteceu (UTC)
        actor_type: Papel de quem executou
        actor_id: Quem executou
        details: Dados específicos do evento
    """

    id: str
    table_name: AuditTable
    record_id: str
    action_type: ActionType
    timestamp: datetime
    actor_type: Optional[str] = None
    actor_id: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_event(cls, event: DomainEvent) -> "ActionLogEntry":
        """
        Converte Domain Event em entrada do log.

        Raises:
            ValueError: Se o evento aponta tabela ou ação desconhecidas
        """
        return cls(
            id=event.event_id,
            table_name=AuditTable.from_string(event.aggregate_type),
            record_id=event.aggregate_id,
            action_type=ActionType.from_string(event.action_type),
            timestamp=event.occurred_at,
            actor_type=event.actor_type,
            actor_id=event.actor_id,
            details=event.get_event_data(),
        )
