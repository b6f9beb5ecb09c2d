"""
Django Admin para o domínio de Adoções.

Configuração do admin para consulta de pets e solicitações.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import PetModel, AdoptionModel


STATUS_COLORS = {
    'Available': '#28a745',
    'Hold': '#ffc107',
    'Adopted': '#343a40',
    'Pending': '#17a2b8',
    'Approved': '#28a745',
    'Rejected': '#dc3545',
    'Completed': '#343a40',
    'Cancelled': '#6c757d',
}


def _badge(status: str):
    return format_html(
        '<span style="background-color: {}; color: white; padding: 3px 8px; '
        'border-radius: 3px; font-size: 11px;">{}</span>',
        STATUS_COLORS.get(status, '#6c757d'),
        status
    )


@admin.register(PetModel)
class PetAdmin(admin.ModelAdmin):
    """Admin para PetModel."""

    list_display = ['name', 'species', 'breed', 'age', 'shelter', 'status_badge', 'arrival_date']
    list_filter = ['status', 'species', 'gender']
    search_fields = ['name', 'species', 'breed', 'shelter__shelter_name']
    readonly_fields = ['id', 'updated_at']
    list_select_related = ['shelter']
    date_hierarchy = 'arrival_date'

    def status_badge(self, obj):
        return _badge(obj.status)
    status_badge.short_description = 'Status'


@admin.register(AdoptionModel)
class AdoptionAdmin(admin.ModelAdmin):
    """Admin para AdoptionModel."""

    list_display = ['id_curto', 'pet', 'client', 'status_badge', 'request_date', 'visit_date']
    list_filter = ['status', 'request_date']
    search_fields = ['id', 'pet__name', 'client__full_name', 'client__email']
    readonly_fields = ['id', 'request_date', 'updated_at']
    list_select_related = ['pet', 'client']

    def id_curto(self, obj):
        """Exibe ID curto (primeiros 8 caracteres)."""
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'

    def status_badge(self, obj):
        return _badge(obj.status)
    status_badge.short_description = 'Status'
