"""
Configuração do Django App para Contas.
"""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Configuração do app Contas (clientes e abrigos)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.accounts'
    label = 'accounts'
    verbose_name = 'Contas'
