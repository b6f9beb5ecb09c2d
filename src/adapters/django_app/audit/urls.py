"""
URL patterns para o painel do administrador.

- GET /admin/dashboard/ - Painel HTML
- GET /api/admin/dashboard/ - Painel JSON
- GET /api/admin/action-log/ - Log de ações JSON
"""

from django.urls import path
from . import views
from . import api_views

app_name = 'audit'

urlpatterns = [
    path('admin/dashboard/', views.AdminDashboardView.as_view(), name='admin_dashboard'),

    path('api/admin/dashboard/', api_views.AdminDashboardAPIView.as_view(), name='api_admin_dashboard'),
    path('api/admin/action-log/', api_views.ActionLogAPIView.as_view(), name='api_action_log'),
]
