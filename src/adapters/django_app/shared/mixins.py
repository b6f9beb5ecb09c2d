"""
Mixins compartilhados pelas views HTML.

- ContainerMixin: acesso aos services do DI Container
- FlashMessageMixin: flash messages consistentes
- RoleRequiredMixin: exige conta autenticada com papel específico
"""

from typing import Optional

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect

from src.core.accounts.entities import AccountRole
from src.core.accounts.dtos import AuthenticatedAccountDTO
from src.config.container import get_container

from .session import get_current_account, LOGIN_URL_NAMES


class ContainerMixin:
    """
    Mixin que fornece acesso ao DI Container.

    Permite obter services de forma consistente em todas as views.
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """
        Obtém service do container.

        Args:
            service_name: Nome do provider no container

        Returns:
            Instância do service
        """
        return getattr(self.get_container(), service_name)()


class FlashMessageMixin:
    """
    Mixin para adicionar flash messages de forma consistente.
    """

    def success_message(self, request: HttpRequest, message: str) -> None:
        messages.success(request, message)

    def error_message(self, request: HttpRequest, message: str) -> None:
        messages.error(request, message)

    def info_message(self, request: HttpRequest, message: str) -> None:
        messages.info(request, message)


class RoleRequiredMixin:
    """
    Exige conta autenticada com o papel `required_role`.

    Sem sessão válida (ou com outro papel), redireciona para a
    página de login do papel exigido.

    Example:
        class ClientDashboardView(RoleRequiredMixin, View):
            required_role = AccountRole.CLIENT
    """

    required_role: Optional[AccountRole] = None

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        account = get_current_account(request)

        if account is None or (self.required_role and account.role != self.required_role):
            messages.error(request, "Faça login para continuar.")
            return redirect(LOGIN_URL_NAMES[self.required_role or AccountRole.CLIENT])

        self.account = account
        return super().dispatch(request, *args, **kwargs)

    @property
    def account_id(self) -> str:
        return self.account.id

    def get_account(self) -> AuthenticatedAccountDTO:
        return self.account
