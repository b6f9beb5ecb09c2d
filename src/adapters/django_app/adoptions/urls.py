"""
URL patterns para o domínio de Adoções.

Endpoints HTML:
- GET /client/dashboard/ - Painel do cliente
- GET /shelter/dashboard/ - Painel do abrigo
- POST /pet/add/, /pet/delete/, /pet/mark-adopted/ - Ações do abrigo sobre pets
- POST /adoption/request/, /adoption/cancel/ - Ações do cliente
- POST /adoption/approve/, /adoption/reject/, /adoption/finalize/ - Ações do abrigo

Endpoints API JSON:
- GET /api/pets/
- POST /api/pets/add/, /api/pets/adopt/
- GET /api/client/history/
- GET /api/shelter/pets/, /api/shelter/adoptions/
- POST /api/adoptions/<id>/{cancel,approve,reject,finalize}/
"""

from django.urls import path
from . import views
from . import api_views

app_name = 'adoptions'

urlpatterns = [
    # =========================================================================
    # Views HTML (Templates)
    # =========================================================================

    # Painéis
    path('client/dashboard/', views.ClientDashboardView.as_view(), name='client_dashboard'),
    path('shelter/dashboard/', views.ShelterDashboardView.as_view(), name='shelter_dashboard'),

    # Pets
    path('pet/add/', views.PetAddView.as_view(), name='pet_add'),
    path('pet/delete/', views.PetDeleteView.as_view(), name='pet_delete'),
    path('pet/mark-adopted/', views.PetMarkAdoptedView.as_view(), name='pet_mark_adopted'),

    # Solicitações
    path('adoption/request/', views.AdoptionRequestView.as_view(), name='adoption_request'),
    path('adoption/cancel/', views.AdoptionCancelView.as_view(), name='adoption_cancel'),
    path('adoption/approve/', views.AdoptionApproveView.as_view(), name='adoption_approve'),
    path('adoption/reject/', views.AdoptionRejectView.as_view(), name='adoption_reject'),
    path('adoption/finalize/', views.AdoptionFinalizeView.as_view(), name='adoption_finalize'),

    # =========================================================================
    # API JSON
    # =========================================================================

    path('api/pets/', api_views.AvailablePetsAPIView.as_view(), name='api_pets'),
    path('api/pets/add/', api_views.PetAddAPIView.as_view(), name='api_pet_add'),
    path('api/pets/adopt/', api_views.AdoptionRequestAPIView.as_view(), name='api_pet_adopt'),
    path('api/client/history/', api_views.ClientHistoryAPIView.as_view(), name='api_client_history'),
    path('api/shelter/pets/', api_views.ShelterPetsAPIView.as_view(), name='api_shelter_pets'),
    path('api/shelter/adoptions/', api_views.ShelterAdoptionsAPIView.as_view(), name='api_shelter_adoptions'),
    path('api/adoptions/<str:pk>/cancel/', api_views.AdoptionCancelAPIView.as_view(), name='api_adoption_cancel'),
    path('api/adoptions/<str:pk>/approve/', api_views.AdoptionApproveAPIView.as_view(), name='api_adoption_approve'),
    path('api/adoptions/<str:pk>/reject/', api_views.AdoptionRejectAPIView.as_view(), name='api_adoption_reject'),
    path('api/adoptions/<str:pk>/finalize/', api_views.AdoptionFinalizeAPIView.as_view(), name='api_adoption_finalize'),
]
