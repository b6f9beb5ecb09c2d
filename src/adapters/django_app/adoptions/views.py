"""
Views Django para o domínio de Adoções.

DRIVING ADAPTERS - direcionam requisições HTTP para o Core.

Painéis:
- ClientDashboardView: vitrine de pets + pedidos do cliente
- ShelterDashboardView: pets do abrigo + pedidos recebidos

Ações (POST, redirecionam para o painel com flash message):
- Cliente: solicitar e cancelar adoção
- Abrigo: cadastrar, remover e marcar pet como adotado;
  aprovar, rejeitar e finalizar solicitações

Princípios:
- Views são THIN (lógica mínima)
- Conta (cliente/abrigo) vem sempre da sessão
- Erros de domínio viram flash messages
"""

import logging

from django.views import View
from django.http import HttpResponse, HttpRequest
from django.shortcuts import render, redirect

from src.core.accounts.entities import AccountRole
from src.core.adoptions.dtos import (
    AddPetInputDTO,
    PetActionInputDTO,
    RequestAdoptionInputDTO,
    CancelAdoptionInputDTO,
    ApproveAdoptionInputDTO,
    RejectAdoptionInputDTO,
    FinalizeAdoptionInputDTO,
)
from src.core.shared.exceptions import (
    EntityNotFoundError,
    BusinessRuleViolationError,
    DomainException,
)

from ..shared.mixins import ContainerMixin, FlashMessageMixin, RoleRequiredMixin
from .forms import (
    PetSearchForm,
    PetAddForm,
    PetActionForm,
    AdoptionRequestForm,
    AdoptionActionForm,
    AdoptionApproveForm,
    AdoptionRejectForm,
    AdoptionFinalizeForm,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Painéis
# =============================================================================

class ClientDashboardView(RoleRequiredMixin, ContainerMixin, FlashMessageMixin, View):
    """
    Painel do cliente.

    GET /client/dashboard/
    GET /client/dashboard/?search=labrador
    """

    template_name = 'adoptions/client_dashboard.html'
    required_role = AccountRole.CLIENT

    def get(self, request: HttpRequest) -> HttpResponse:
        search_form = PetSearchForm(request.GET)
        search = ''
        if search_form.is_valid():
            search = search_form.cleaned_data['search']
        else:
            self.error_message(request, search_form.errors['search'][0])

        try:
            pets = self.get_service('list_available_pets_service').execute(search or None)
            adoptions = self.get_service('client_adoption_history_service').execute(self.account_id)
        except Exception as e:
            logger.error(f"Erro ao carregar painel do cliente {self.account_id}: {e}")
            self.error_message(request, "Erro ao carregar pets.")
            pets, adoptions = [], []

        context = {
            'pets': pets,
            'adoptions': adoptions,
            'requested_pet_ids': {a.pet_id for a in adoptions},
            'search_form': search_form,
            'search': search,
        }

        return render(request, self.template_name, context)


class ShelterDashboardView(RoleRequiredMixin, ContainerMixin, FlashMessageMixin, View):
    """
    Painel do abrigo.

    GET /shelter/dashboard/
    """

    template_name = 'adoptions/shelter_dashboard.html'
    required_role = AccountRole.SHELTER

    def get(self, request: HttpRequest) -> HttpResponse:
        try:
            pets = self.get_service('list_shelter_pets_service').execute(self.account_id)
            adoptions = self.get_service('shelter_adoption_requests_service').execute(self.account_id)
        except Exception as e:
            logger.error(f"Erro ao carregar painel do abrigo {self.account_id}: {e}")
            self.error_message(request, "Erro ao carregar painel.")
            pets, adoptions = [], []

        context = {
            'pets': pets,
            'adoptions': adoptions,
            'pending_count': sum(1 for a in adoptions if a.can_review),
            'add_form': PetAddForm(),
        }

        return render(request, self.template_name, context)


# =============================================================================
# Ações
# =============================================================================

class DashboardActionView(RoleRequiredMixin, ContainerMixin, FlashMessageMixin, View):
    """
    Base das ações POST dos painéis.

    Subclasses definem form_class, service_name, success_text e
    build_input(). Sempre redireciona de volta ao painel.
    """

    form_class = None
    service_name = ''
    success_text = ''
    invalid_text = 'Dados inválidos.'
    dashboard_url = ''

    def post(self, request: HttpRequest) -> HttpResponse:
        form = self.form_class(request.POST)

        if not form.is_valid():
            self.error_message(request, self._first_error(form) or self.invalid_text)
            return redirect(self.dashboard_url)

        service = self.get_service(self.service_name)

        try:
            output = service.execute(self.build_input(form.cleaned_data))
            logger.info(
                f"{self.service_name} executado por {self.account.role.value} {self.account_id}"
            )
            self.success_message(request, self.get_success_text(output))

        except EntityNotFoundError as e:
            logger.warning(f"{self.service_name}: {e.message}")
            self.error_message(request, e.message)

        except BusinessRuleViolationError as e:
            logger.warning(f"{self.service_name} recusado ({e.rule}): {e.message}")
            self.error_message(request, e.message)

        except DomainException as e:
            self.error_message(request, e.message)

        except Exception as e:
            logger.exception(f"Erro inesperado em {self.service_name}: {e}")
            self.error_message(request, "Erro ao processar a ação. Tente novamente.")

        return redirect(self.dashboard_url)

    def build_input(self, data: dict):
        raise NotImplementedError

    def get_success_text(self, output) -> str:
        return self.success_text

    @staticmethod
    def _first_error(form) -> str:
        for errors in form.errors.values():
            if errors:
                return errors[0]
        return ''


class ClientActionView(DashboardActionView):
    required_role = AccountRole.CLIENT
    dashboard_url = 'adoptions:client_dashboard'


class ShelterActionView(DashboardActionView):
    required_role = AccountRole.SHELTER
    dashboard_url = 'adoptions:shelter_dashboard'


class AdoptionRequestView(ClientActionView):
    """POST /adoption/request/"""

    form_class = AdoptionRequestForm
    service_name = 'request_adoption_service'
    success_text = 'Solicitação de adoção enviada!'

    def build_input(self, data: dict) -> RequestAdoptionInputDTO:
        return RequestAdoptionInputDTO(
            pet_id=data['pet_id'],
            client_id=self.account_id,
            client_reason=data.get('client_reason', ''),
        )


class AdoptionCancelView(ClientActionView):
    """POST /adoption/cancel/"""

    form_class = AdoptionActionForm
    service_name = 'cancel_adoption_service'
    success_text = 'Solicitação cancelada.'

    def build_input(self, data: dict) -> CancelAdoptionInputDTO:
        return CancelAdoptionInputDTO(adoption_id=data['adoption_id'], client_id=self.account_id)


class PetAddView(ShelterActionView):
    """POST /pet/add/"""

    form_class = PetAddForm
    service_name = 'add_pet_service'

    def build_input(self, data: dict) -> AddPetInputDTO:
        return AddPetInputDTO(
            shelter_id=self.account_id,
            name=data['name'],
            species=data['species'],
            breed=data.get('breed', ''),
            age=data.get('age'),
            gender=data.get('gender') or 'Unknown',
            description=data.get('description', ''),
            pet_image=data.get('pet_image', ''),
        )

    def get_success_text(self, output) -> str:
        return f"{output.name} cadastrado com sucesso!"


class PetDeleteView(ShelterActionView):
    """POST /pet/delete/"""

    form_class = PetActionForm
    service_name = 'delete_pet_service'
    success_text = 'Pet removido.'

    def build_input(self, data: dict) -> PetActionInputDTO:
        return PetActionInputDTO(pet_id=data['pet_id'], shelter_id=self.account_id)


class PetMarkAdoptedView(ShelterActionView):
    """POST /pet/mark-adopted/"""

    form_class = PetActionForm
    service_name = 'mark_pet_adopted_service'

    def build_input(self, data: dict) -> PetActionInputDTO:
        return PetActionInputDTO(pet_id=data['pet_id'], shelter_id=self.account_id)

    def get_success_text(self, output) -> str:
        return f"{output.name} marcado como adotado."


class AdoptionApproveView(ShelterActionView):
    """POST /adoption/approve/"""

    form_class = AdoptionApproveForm
    service_name = 'approve_adoption_service'
    success_text = 'Solicitação aprovada. O pet está em espera.'

    def build_input(self, data: dict) -> ApproveAdoptionInputDTO:
        return ApproveAdoptionInputDTO(
            adoption_id=data['adoption_id'],
            shelter_id=self.account_id,
            shelter_response=data.get('shelter_response', ''),
            visit_date=data.get('visit_date'),
        )


class AdoptionRejectView(ShelterActionView):
    """POST /adoption/reject/"""

    form_class = AdoptionRejectForm
    service_name = 'reject_adoption_service'
    success_text = 'Solicitação recusada.'

    def build_input(self, data: dict) -> RejectAdoptionInputDTO:
        return RejectAdoptionInputDTO(
            adoption_id=data['adoption_id'],
            shelter_id=self.account_id,
            shelter_response=data.get('shelter_response', ''),
        )


class AdoptionFinalizeView(ShelterActionView):
    """POST /adoption/finalize/"""

    form_class = AdoptionFinalizeForm
    service_name = 'finalize_adoption_service'

    def build_input(self, data: dict) -> FinalizeAdoptionInputDTO:
        return FinalizeAdoptionInputDTO(
            adoption_id=data['adoption_id'],
            shelter_id=self.account_id,
            outcome=data['outcome'],
            completion_date=data.get('completion_date'),
        )

    def get_success_text(self, output) -> str:
        if output.status == 'Completed':
            return 'Adoção concluída!'
        return 'Pet devolvido e disponível novamente.'
