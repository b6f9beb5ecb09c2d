"""
Django Models para o domínio de Contas.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/accounts/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Apenas o hash da senha é persistido
- Administrador não tem tabela (vem da configuração)
"""

from django.db import models
from django.utils import timezone


class ClientModel(models.Model):
    """
    Model Django para persistência de Clientes.

    Fields:
        id: UUID gerado pela Entity
        full_name: Nome completo
        email: Email de login (único, minúsculas)
        password_hash: Hash no formato do Django
        phone_number: Telefone
        address: Endereço
        created_at: Data/hora do cadastro
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do cliente"
    )

    full_name = models.CharField(max_length=100)

    email = models.EmailField(
        max_length=254,
        unique=True,
        help_text="Email de login (normalizado)"
    )

    password_hash = models.CharField(max_length=255)

    phone_number = models.CharField(max_length=20, blank=True, default='')

    address = models.CharField(max_length=255, blank=True, default='')

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'client'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['full_name']

    def __str__(self):
        return f"{self.full_name} <{self.email}>"


class ShelterModel(models.Model):
    """
    Model Django para persistência de Abrigos.

    Nome e email são únicos; a unicidade do nome sem diferenciar
    maiúsculas é garantida pelo use case.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do abrigo"
    )

    shelter_name = models.CharField(max_length=100, unique=True)

    email = models.EmailField(
        max_length=254,
        unique=True,
        help_text="Email de login (normalizado)"
    )

    password_hash = models.CharField(max_length=255)

    location = models.CharField(max_length=255, blank=True, default='')

    contact_number = models.CharField(max_length=20, blank=True, default='')

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'shelter'
        verbose_name = 'Abrigo'
        verbose_name_plural = 'Abrigos'
        ordering = ['shelter_name']

    def __str__(self):
        return self.shelter_name
