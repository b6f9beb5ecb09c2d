"""Context processor que expõe a conta autenticada aos templates."""

from .session import get_current_account


def current_account(request):
    return {'current_account': get_current_account(request)}
