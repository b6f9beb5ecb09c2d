"""
Views Django para o domínio de Contas.

DRIVING ADAPTERS - direcionam requisições HTTP para o Core.

Responsabilidades:
- Home (redireciona para o painel de quem já está logado)
- Login dos três papéis
- Cadastro de clientes e abrigos
- Logout

Princípios:
- Views são THIN (lógica mínima)
- Lógica de negócio fica nos Use Cases
- Views não acessam Models diretamente
"""

import logging

from django.views import View
from django.http import HttpResponse, HttpRequest
from django.shortcuts import render, redirect

from src.core.accounts.entities import AccountRole
from src.core.accounts.dtos import (
    LoginInputDTO,
    RegisterClientInputDTO,
    RegisterShelterInputDTO,
)
from src.core.shared.exceptions import (
    ValidationError,
    DuplicateEntityError,
    AuthenticationError,
    DomainException,
)

from ..shared.mixins import ContainerMixin, FlashMessageMixin
from ..shared.session import (
    login_account,
    logout_account,
    get_current_account,
    LOGIN_URL_NAMES,
    DASHBOARD_URL_NAMES,
)
from .forms import LoginForm, ClientRegisterForm, ShelterRegisterForm

logger = logging.getLogger(__name__)


ROLE_LABELS = {
    AccountRole.CLIENT: 'Cliente',
    AccountRole.SHELTER: 'Abrigo',
    AccountRole.ADMIN: 'Administrador',
}


# =============================================================================
# Home
# =============================================================================

class HomeView(View):
    """
    Página inicial.

    GET / - Redireciona para o painel se já houver sessão
    """

    template_name = 'accounts/home.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        account = get_current_account(request)
        if account is not None:
            return redirect(DASHBOARD_URL_NAMES[account.role])
        return render(request, self.template_name)


# =============================================================================
# Login / Logout
# =============================================================================

class LoginView(ContainerMixin, FlashMessageMixin, View):
    """
    Login por papel.

    GET /client/login/ - Formulário
    POST /client/login/ - Autentica e redireciona para o painel
    (idem /shelter/login/ e /admin/login/)
    """

    template_name = 'accounts/login.html'
    role: AccountRole = AccountRole.CLIENT

    def get(self, request: HttpRequest) -> HttpResponse:
        return self._render(request, LoginForm())

    def post(self, request: HttpRequest) -> HttpResponse:
        form = LoginForm(request.POST)

        if not form.is_valid():
            return self._render(request, form)

        login_service = self.get_service('login_service')

        try:
            account = login_service.execute(
                LoginInputDTO(
                    role=self.role.value,
                    email=form.cleaned_data['email'],
                    password=form.cleaned_data['password'],
                )
            )
        except (AuthenticationError, ValidationError) as e:
            logger.warning(f"Login recusado ({self.role.value}): {form.cleaned_data['email']}")
            self.error_message(request, e.message)
            return redirect(LOGIN_URL_NAMES[self.role])
        except Exception as e:
            logger.exception(f"Erro inesperado no login: {e}")
            self.error_message(request, "Erro ao entrar. Tente novamente.")
            return redirect(LOGIN_URL_NAMES[self.role])

        login_account(request, account)
        self.success_message(request, f"Bem-vindo(a), {account.name}!")
        return redirect(DASHBOARD_URL_NAMES[account.role])

    def _render(self, request: HttpRequest, form: LoginForm, status: int = 200) -> HttpResponse:
        context = {
            'form': form,
            'role': self.role.value,
            'role_label': ROLE_LABELS[self.role],
            'can_register': self.role != AccountRole.ADMIN,
        }
        return render(request, self.template_name, context, status=status)


class ClientLoginView(LoginView):
    role = AccountRole.CLIENT


class ShelterLoginView(LoginView):
    role = AccountRole.SHELTER


class AdminLoginView(LoginView):
    role = AccountRole.ADMIN


class LogoutView(ContainerMixin, FlashMessageMixin, View):
    """
    Encerra sessão.

    POST /logout/
    """

    def post(self, request: HttpRequest) -> HttpResponse:
        account = get_current_account(request)

        if account is not None:
            try:
                self.get_service('logout_service').execute(account)
            except Exception as e:
                logger.exception(f"Erro ao registrar logout de {account.id}: {e}")

        logout_account(request)
        self.info_message(request, "Você saiu da sua conta.")
        return redirect('accounts:home')


# =============================================================================
# Cadastro
# =============================================================================

class RegisterView(ContainerMixin, FlashMessageMixin, View):
    """
    View base de cadastro.

    Subclasses definem form_class, service_name, role e build_input().
    """

    template_name = ''
    form_class = None
    service_name = ''
    role: AccountRole = AccountRole.CLIENT

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, {'form': self.form_class()})

    def post(self, request: HttpRequest) -> HttpResponse:
        form = self.form_class(request.POST)

        if not form.is_valid():
            return render(request, self.template_name, {'form': form}, status=400)

        service = self.get_service(self.service_name)

        try:
            output = service.execute(self.build_input(form.cleaned_data))

        except DuplicateEntityError as e:
            logger.warning(f"Cadastro duplicado ({self.role.value}): {e.message}")
            form.add_error(e.field if e.field in form.fields else None, e.message)
            return render(request, self.template_name, {'form': form}, status=409)

        except ValidationError as e:
            form.add_error(e.field if e.field in form.fields else None, e.message)
            return render(request, self.template_name, {'form': form}, status=400)

        except DomainException as e:
            form.add_error(None, e.message)
            return render(request, self.template_name, {'form': form}, status=400)

        except Exception as e:
            logger.exception(f"Erro inesperado no cadastro: {e}")
            self.error_message(request, "Erro ao cadastrar. Tente novamente.")
            return render(request, self.template_name, {'form': form}, status=500)

        logger.info(f"Conta cadastrada: {self.role.value} {output.id}")
        self.success_message(request, "Cadastro realizado! Faça login para continuar.")
        return redirect(LOGIN_URL_NAMES[self.role])

    def build_input(self, data: dict):
        raise NotImplementedError


class ClientRegisterView(RegisterView):
    """
    Cadastro de cliente.

    GET/POST /client/register/
    """

    template_name = 'accounts/client_register.html'
    form_class = ClientRegisterForm
    service_name = 'register_client_service'
    role = AccountRole.CLIENT

    def build_input(self, data: dict) -> RegisterClientInputDTO:
        return RegisterClientInputDTO(
            full_name=data['full_name'],
            email=data['email'],
            password=data['password'],
            phone_number=data.get('phone_number', ''),
            address=data.get('address', ''),
        )


class ShelterRegisterView(RegisterView):
    """
    Cadastro de abrigo.

    GET/POST /shelter/register/
    """

    template_name = 'accounts/shelter_register.html'
    form_class = ShelterRegisterForm
    service_name = 'register_shelter_service'
    role = AccountRole.SHELTER

    def build_input(self, data: dict) -> RegisterShelterInputDTO:
        return RegisterShelterInputDTO(
            shelter_name=data['shelter_name'],
            email=data['email'],
            password=data['password'],
            location=data.get('location', ''),
            contact_number=data.get('contact_number', ''),
        )
