"""
Autenticação por sessão.

A identidade autenticada (AuthenticatedAccountDTO) fica guardada na
sessão do Django sob a chave SESSION_KEY. A cada request ela é
recarregada via ResolveAccountService, de modo que uma conta
removida deixa de estar autenticada imediatamente.
"""

import logging
from typing import Optional

from django.http import HttpRequest

from src.core.accounts.entities import AccountRole
from src.core.accounts.dtos import AuthenticatedAccountDTO
from src.config.container import get_container

logger = logging.getLogger(__name__)

SESSION_KEY = 'account'

_REQUEST_CACHE_ATTR = '_cached_account'

# Página de login e painel de cada papel (nomes de URL)
LOGIN_URL_NAMES = {
    AccountRole.CLIENT: 'accounts:client_login',
    AccountRole.SHELTER: 'accounts:shelter_login',
    AccountRole.ADMIN: 'accounts:admin_login',
}

DASHBOARD_URL_NAMES = {
    AccountRole.CLIENT: 'adoptions:client_dashboard',
    AccountRole.SHELTER: 'adoptions:shelter_dashboard',
    AccountRole.ADMIN: 'audit:admin_dashboard',
}


def login_account(request: HttpRequest, account: AuthenticatedAccountDTO) -> None:
    """
    Grava identidade na sessão.

    Troca a chave da sessão para evitar session fixation.
    """
    request.session.cycle_key()
    request.session[SESSION_KEY] = account.to_session()
    setattr(request, _REQUEST_CACHE_ATTR, account)
    logger.info(f"Sessão iniciada: {account.role.value} {account.id}")


def logout_account(request: HttpRequest) -> None:
    """Remove todos os dados da sessão."""
    request.session.flush()
    setattr(request, _REQUEST_CACHE_ATTR, None)


def get_current_account(request: HttpRequest) -> Optional[AuthenticatedAccountDTO]:
    """
    Retorna conta autenticada do request (ou None).

    O resultado fica em cache no próprio request.
    """
    if hasattr(request, _REQUEST_CACHE_ATTR):
        return getattr(request, _REQUEST_CACHE_ATTR)

    session = getattr(request, 'session', None)
    data = session.get(SESSION_KEY) if session is not None else None

    account = None
    if data is not None:
        account = get_container().resolve_account_service().execute(data)
        if account is None:
            logger.info("Sessão com conta inexistente descartada")
            session.pop(SESSION_KEY, None)

    setattr(request, _REQUEST_CACHE_ATTR, account)
    return account
