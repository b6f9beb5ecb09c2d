"""
Domínio de Auditoria - Log de Ações.

Trilha somente-inclusão das operações que alteram estado.
"""

from .entities import ActionLogEntry, ActionType, AuditTable
from .dtos import ListActionLogQueryDTO, ActionLogEntryDTO
from .ports import ActionLogRepository, ActionLogEventStore
from .use_cases import ListActionLogService

__all__ = [
    "ActionLogEntry",
    "ActionType",
    "AuditTable",
    "ListActionLogQueryDTO",
    "ActionLogEntryDTO",
    "ActionLogRepository",
    "ActionLogEventStore",
    "ListActionLogService",
]
