"""
API Views JSON para o painel do administrador.

Endpoints:
- GET /api/admin/dashboard/ - Clientes, abrigos e log de ações
- GET /api/admin/action-log/ - Log filtrado (table_name, action_type, limit)
"""

from django.conf import settings
from django.http import JsonResponse, HttpRequest

from src.core.accounts.entities import AccountRole
from src.core.audit.dtos import ListActionLogQueryDTO
from src.core.shared.exceptions import ValidationError

from ..shared.api import BaseAPIView, ApiRoleRequiredMixin, json_response


def _query_from_params(params) -> ListActionLogQueryDTO:
    raw_limit = params.get('limit')
    try:
        limit = int(raw_limit) if raw_limit else settings.ACTION_LOG_LIMIT
    except ValueError:
        raise ValidationError(f"Limite inválido: {raw_limit}", field="limit")

    return ListActionLogQueryDTO(
        limit=limit,
        table_name=params.get('table_name') or None,
        action_type=params.get('action_type') or None,
    )


class AdminDashboardAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    GET /api/admin/dashboard/

    Response:
    {
        "success": true,
        "data": {
            "clients": [...],
            "shelters": [...],
            "action_log": [...]
        },
        "meta": {"clients": 2, "shelters": 1, "action_log": 15}
    }
    """

    required_role = AccountRole.ADMIN

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            accounts = self.get_service('list_accounts_service').execute()
            entries = self.get_service('list_action_log_service').execute(
                _query_from_params(request.GET)
            )

            data = {
                'clients': [c.to_dict() for c in accounts['clients']],
                'shelters': [s.to_dict() for s in accounts['shelters']],
                'action_log': [e.to_dict() for e in entries],
            }
            return json_response(
                success=True,
                data=data,
                meta={key: len(value) for key, value in data.items()},
            )

        except Exception as e:
            return self.handle_exception(e)


class ActionLogAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """GET /api/admin/action-log/?table_name=pet&action_type=DELETE&limit=20"""

    required_role = AccountRole.ADMIN

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            entries = self.get_service('list_action_log_service').execute(
                _query_from_params(request.GET)
            )
            return json_response(
                success=True,
                data=[e.to_dict() for e in entries],
                meta={'total': len(entries)},
            )
        except Exception as e:
            return self.handle_exception(e)
