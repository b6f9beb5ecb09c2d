"""
URL Configuration para PetAdoption Manager.

Estrutura:
- /django-admin/ - Django Admin (manutenção de dados)
- /, /client/..., /shelter/..., /admin/login/ - Contas
- /client/dashboard/, /shelter/dashboard/, /pet/..., /adoption/... - Adoções
- /admin/dashboard/ - Log de ações
- /api/... - API JSON para o frontend SPA
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include

urlpatterns = [
    path('django-admin/', admin.site.urls),

    path('', include('src.adapters.django_app.accounts.urls')),
    path('', include('src.adapters.django_app.adoptions.urls')),
    path('', include('src.adapters.django_app.audit.urls')),

    # Health check
    path('health/', lambda request: JsonResponse({'status': 'ok'}), name='health'),
]

handler404 = 'src.adapters.django_app.shared.error_views.page_not_found'
handler500 = 'src.adapters.django_app.shared.error_views.server_error'
