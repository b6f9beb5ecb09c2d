"""
Views Django para o painel do administrador.

- AdminDashboardView: contas cadastradas + log de ações recentes
"""

import logging

from django.conf import settings
from django.views import View
from django.http import HttpResponse, HttpRequest
from django.shortcuts import render

from src.core.accounts.entities import AccountRole
from src.core.audit.dtos import ListActionLogQueryDTO

from ..shared.mixins import ContainerMixin, FlashMessageMixin, RoleRequiredMixin
from .forms import ActionLogFilterForm

logger = logging.getLogger(__name__)


class AdminDashboardView(RoleRequiredMixin, ContainerMixin, FlashMessageMixin, View):
    """
    Painel do administrador.

    GET /admin/dashboard/
    GET /admin/dashboard/?table_name=adoption&action_type=APPROVE
    """

    template_name = 'audit/admin_dashboard.html'
    required_role = AccountRole.ADMIN

    def get(self, request: HttpRequest) -> HttpResponse:
        filter_form = ActionLogFilterForm(request.GET or None)
        query = ListActionLogQueryDTO(limit=settings.ACTION_LOG_LIMIT)

        if filter_form.is_bound and filter_form.is_valid():
            data = filter_form.cleaned_data
            query = ListActionLogQueryDTO(
                limit=data.get('limit') or settings.ACTION_LOG_LIMIT,
                table_name=data.get('table_name') or None,
                action_type=data.get('action_type') or None,
            )

        try:
            accounts = self.get_service('list_accounts_service').execute()
            entries = self.get_service('list_action_log_service').execute(query)
        except Exception as e:
            logger.error(f"Erro ao carregar painel do administrador: {e}")
            self.error_message(request, "Erro ao carregar painel.")
            accounts, entries = {'clients': [], 'shelters': []}, []

        context = {
            'clients': accounts['clients'],
            'shelters': accounts['shelters'],
            'entries': entries,
            'filter_form': filter_form if filter_form.is_bound else ActionLogFilterForm(),
        }

        return render(request, self.template_name, context)
