"""
Base para APIs JSON.

Formato:
- Entrada: JSON (ou form-encoded)
- Saída: JSON com estrutura {success, data/error, meta}

Mapeamento de exceções de domínio para status HTTP:
- ValidationError → 400
- AuthenticationError → 401
- PermissionDeniedError → 403
- EntityNotFoundError → 404
- DuplicateEntityError → 409
- BusinessRuleViolationError → 422
- Erro inesperado → 500
"""

import json
import logging
from typing import Any, Dict, Optional

from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.accounts.entities import AccountRole
from src.core.accounts.dtos import AuthenticatedAccountDTO
from src.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    BusinessRuleViolationError,
    AuthenticationError,
    PermissionDeniedError,
    DomainException,
)
from src.config.container import get_container

from .session import get_current_account

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body do request.

    Aceita JSON; para requests form-encoded devolve request.POST.

    Raises:
        ValidationError: Se JSON inválido ou não for um objeto
    """
    if request.content_type and request.content_type != 'application/json':
        return request.POST.dict()

    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValidationError("Corpo da requisição deve ser um objeto JSON")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def http_method_not_allowed(self, request, *args, **kwargs):
        return json_response(
            success=False,
            error=f"Método {request.method} não permitido",
            status=405,
        )

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Args:
            e: Exceção capturada

        Returns:
            JsonResponse com erro
        """
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=e.message,
                status=400,
                meta={'field': e.field, 'code': e.code}
            )

        if isinstance(e, AuthenticationError):
            return json_response(success=False, error=e.message, status=401)

        if isinstance(e, PermissionDeniedError):
            return json_response(success=False, error=e.message, status=403)

        if isinstance(e, EntityNotFoundError):
            return json_response(success=False, error=e.message, status=404)

        if isinstance(e, DuplicateEntityError):
            return json_response(
                success=False,
                error=e.message,
                status=409,
                meta={'field': e.field}
            )

        if isinstance(e, BusinessRuleViolationError):
            return json_response(
                success=False,
                error=e.message,
                status=422,
                meta={'rule': e.rule}
            )

        if isinstance(e, DomainException):
            return json_response(success=False, error=e.message, status=400)

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )


@method_decorator(csrf_exempt, name='dispatch')
class ApiRoleRequiredMixin:
    """
    Exige conta autenticada com o papel `required_role` (API).

    - Sem sessão: 401
    - Papel diferente: 403
    """

    required_role: Optional[AccountRole] = None

    def dispatch(self, request: HttpRequest, *args, **kwargs):
        account = get_current_account(request)

        if account is None:
            return json_response(success=False, error="Não autenticado", status=401)

        if self.required_role and account.role != self.required_role:
            return json_response(success=False, error="Acesso negado", status=403)

        self.account = account
        return super().dispatch(request, *args, **kwargs)

    def get_account(self) -> AuthenticatedAccountDTO:
        return self.account
