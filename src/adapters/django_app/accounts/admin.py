"""
Django Admin para o domínio de Contas.

O hash da senha nunca é exibido nem editável.
"""

from django.contrib import admin

from .models import ClientModel, ShelterModel


@admin.register(ClientModel)
class ClientAdmin(admin.ModelAdmin):
    """Admin para ClientModel."""

    list_display = ['full_name', 'email', 'phone_number', 'created_at']
    search_fields = ['full_name', 'email']
    readonly_fields = ['id', 'created_at']
    exclude = ['password_hash']
    ordering = ['full_name']


@admin.register(ShelterModel)
class ShelterAdmin(admin.ModelAdmin):
    """Admin para ShelterModel."""

    list_display = ['shelter_name', 'email', 'location', 'contact_number', 'created_at']
    search_fields = ['shelter_name', 'email', 'location']
    readonly_fields = ['id', 'created_at']
    exclude = ['password_hash']
    ordering = ['shelter_name']
