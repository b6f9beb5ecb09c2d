"""
Use Cases do Domínio de Auditoria.

- ListActionLogService: Painel do administrador (últimas ações)
"""

from typing import List

from src.core.shared.exceptions import ValidationError

from .ports import ActionLogRepository
from .entities import ActionType, AuditTable
from .dtos import ListActionLogQueryDTO, ActionLogEntryDTO


class ListActionLogService:
    """
    Use Case: Listar as ações mais recentes.

    Example:
        service = ListActionLogService(log_repo)
        entries = service.execute(ListActionLogQueryDTO(table_name="adoption"))
    """

    MAX_LIMIT = 500

    def __init__(self, log_repo: ActionLogRepository, default_limit: int = 100):
        self.log_repo = log_repo
        self.default_limit = default_limit

    def execute(self, query: ListActionLogQueryDTO = None) -> List[ActionLogEntryDTO]:
        """
        Raises:
            ValidationError: Se filtros ou limite inválidos
        """
        query = query or ListActionLogQueryDTO(limit=self.default_limit)

        if query.limit < 1 or query.limit > self.MAX_LIMIT:
            raise ValidationError(
                f"Limite deve estar entre 1 e {self.MAX_LIMIT}",
                field="limit"
            )

        table_name = None
        if query.table_name:
            try:
                table_name = AuditTable.from_string(query.table_name)
            except ValueError as e:
                raise ValidationError(str(e), field="table_name")

        action_type = None
        if query.action_type:
            try:
                action_type = ActionType.from_string(query.action_type)
            except ValueError as e:
                raise ValidationError(str(e), field="action_type")

        entries = self.log_repo.list_recent(
            limit=query.limit,
            table_name=table_name,
            action_type=action_type,
        )
        return [ActionLogEntryDTO.from_entity(e) for e in entries]
