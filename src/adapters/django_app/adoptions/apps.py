"""
Configuração do Django App para Adoções.
"""

from django.apps import AppConfig


class AdoptionsConfig(AppConfig):
    """Configuração do app Adoções (pets e solicitações)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.adoptions'
    label = 'adoptions'
    verbose_name = 'Adoções'
