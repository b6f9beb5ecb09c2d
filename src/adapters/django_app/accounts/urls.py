"""
URL patterns para o domínio de Contas.

Endpoints HTML:
- GET / - Página inicial
- GET/POST /client/login/, /shelter/login/, /admin/login/ - Login
- GET/POST /client/register/, /shelter/register/ - Cadastro
- POST /logout/ - Logout

Endpoints API JSON:
- GET /api/auth/status/
- POST /api/auth/logout/
- POST /api/client/register/, /api/client/login/
- POST /api/shelter/register/, /api/shelter/login/
- POST /api/admin/login/
"""

from django.urls import path
from . import views
from . import api_views

app_name = 'accounts'

urlpatterns = [
    # =========================================================================
    # Views HTML (Templates)
    # =========================================================================

    path('', views.HomeView.as_view(), name='home'),

    path('client/login/', views.ClientLoginView.as_view(), name='client_login'),
    path('client/register/', views.ClientRegisterView.as_view(), name='client_register'),
    path('shelter/login/', views.ShelterLoginView.as_view(), name='shelter_login'),
    path('shelter/register/', views.ShelterRegisterView.as_view(), name='shelter_register'),
    path('admin/login/', views.AdminLoginView.as_view(), name='admin_login'),
    path('logout/', views.LogoutView.as_view(), name='logout'),

    # =========================================================================
    # API JSON
    # =========================================================================

    path('api/auth/status/', api_views.AuthStatusAPIView.as_view(), name='api_auth_status'),
    path('api/auth/logout/', api_views.LogoutAPIView.as_view(), name='api_logout'),
    path('api/client/register/', api_views.ClientRegisterAPIView.as_view(), name='api_client_register'),
    path('api/client/login/', api_views.ClientLoginAPIView.as_view(), name='api_client_login'),
    path('api/shelter/register/', api_views.ShelterRegisterAPIView.as_view(), name='api_shelter_register'),
    path('api/shelter/login/', api_views.ShelterLoginAPIView.as_view(), name='api_shelter_login'),
    path('api/admin/login/', api_views.AdminLoginAPIView.as_view(), name='api_admin_login'),
]
