"""
Django Admin para o log de ações.

Somente leitura: o log não pode ser alterado nem pelo admin.
"""

from django.contrib import admin

from .models import ActionLogModel


@admin.register(ActionLogModel)
class ActionLogAdmin(admin.ModelAdmin):
    """Admin somente-leitura para ActionLogModel."""

    list_display = ['timestamp', 'action_type', 'table_name', 'record_id', 'actor_type', 'actor_id']
    list_filter = ['table_name', 'action_type', 'actor_type']
    search_fields = ['record_id', 'actor_id']
    date_hierarchy = 'timestamp'
    ordering = ['-timestamp']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
