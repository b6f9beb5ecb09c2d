"""
API Views JSON para o domínio de Contas.

Endpoints:
- GET /api/auth/status/ - Conta da sessão atual
- POST /api/auth/logout/ - Encerrar sessão
- POST /api/client/register/ - Cadastrar cliente
- POST /api/client/login/ - Login de cliente
- POST /api/shelter/register/ - Cadastrar abrigo
- POST /api/shelter/login/ - Login de abrigo
- POST /api/admin/login/ - Login do administrador
"""

import logging

from django.http import JsonResponse, HttpRequest

from src.core.accounts.entities import AccountRole
from src.core.accounts.dtos import (
    LoginInputDTO,
    RegisterClientInputDTO,
    RegisterShelterInputDTO,
)

from ..shared.api import BaseAPIView, json_response
from ..shared.session import login_account, logout_account, get_current_account

logger = logging.getLogger(__name__)


class AuthStatusAPIView(BaseAPIView):
    """
    GET /api/auth/status/

    Sempre 200: {"authenticated": false} sem sessão.
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        account = get_current_account(request)

        if account is None:
            return json_response(success=True, data={'authenticated': False})

        return json_response(
            success=True,
            data={'authenticated': True, 'account': account.to_dict()},
        )


class LogoutAPIView(BaseAPIView):
    """POST /api/auth/logout/"""

    def post(self, request: HttpRequest) -> JsonResponse:
        account = get_current_account(request)

        try:
            if account is not None:
                self.get_service('logout_service').execute(account)
        except Exception as e:
            return self.handle_exception(e)
        finally:
            logout_account(request)

        return json_response(success=True, data={'authenticated': False})


class LoginAPIView(BaseAPIView):
    """
    POST /api/<papel>/login/

    Body:
    {
        "email": "maria@example.com",
        "password": "senha-segura"
    }
    """

    role: AccountRole = AccountRole.CLIENT

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            account = self.get_service('login_service').execute(
                LoginInputDTO(
                    role=self.role.value,
                    email=str(data.get('email', '')),
                    password=str(data.get('password', '')),
                )
            )

            login_account(request, account)

            return json_response(
                success=True,
                data={'authenticated': True, 'account': account.to_dict()},
            )

        except Exception as e:
            return self.handle_exception(e)


class ClientLoginAPIView(LoginAPIView):
    role = AccountRole.CLIENT


class ShelterLoginAPIView(LoginAPIView):
    role = AccountRole.SHELTER


class AdminLoginAPIView(LoginAPIView):
    role = AccountRole.ADMIN


class ClientRegisterAPIView(BaseAPIView):
    """
    POST /api/client/register/

    Body:
    {
        "full_name": "Maria Souza",
        "email": "maria@example.com",
        "password": "senha-segura",
        "phone_number": "11999990000",  // opcional
        "address": "Rua A, 10"          // opcional
    }

    "name" é aceito como alternativa a "full_name".

    Response: 201 com os dados públicos do cliente
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            output = self.get_service('register_client_service').execute(
                RegisterClientInputDTO(
                    full_name=str(data.get('full_name') or data.get('name') or ''),
                    email=str(data.get('email', '')),
                    password=str(data.get('password', '')),
                    phone_number=str(data.get('phone_number', '') or ''),
                    address=str(data.get('address', '') or ''),
                )
            )

            logger.info(f"Cliente cadastrado via API: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class ShelterRegisterAPIView(BaseAPIView):
    """
    POST /api/shelter/register/

    Aceita "name" no lugar de "shelter_name" e "address" no lugar de
    "location".

    Response: 201 com os dados públicos do abrigo
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            output = self.get_service('register_shelter_service').execute(
                RegisterShelterInputDTO(
                    shelter_name=str(data.get('shelter_name') or data.get('name') or ''),
                    email=str(data.get('email', '')),
                    password=str(data.get('password', '')),
                    location=str(data.get('location') or data.get('address') or ''),
                    contact_number=str(data.get('contact_number', '') or ''),
                )
            )

            logger.info(f"Abrigo cadastrado via API: {output.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)
