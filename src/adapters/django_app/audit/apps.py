"""
Configuração do Django App para Auditoria.
"""

from django.apps import AppConfig


class AuditConfig(AppConfig):
    """Configuração do app Auditoria (log de ações e painel do administrador)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.audit'
    label = 'audit'
    verbose_name = 'Auditoria'
