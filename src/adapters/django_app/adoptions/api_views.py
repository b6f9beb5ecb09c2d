"""
API Views JSON para o domínio de Adoções.

Endpoints:
- GET /api/pets/?search= - Pets disponíveis (qualquer conta logada)
- POST /api/pets/add/ - Cadastrar pet (abrigo)
- POST /api/pets/adopt/ - Solicitar adoção (cliente)
- GET /api/client/history/ - Pedidos do cliente
- GET /api/shelter/pets/ - Pets do abrigo
- GET /api/shelter/adoptions/ - Pedidos recebidos pelo abrigo
- POST /api/adoptions/<id>/cancel/ - Cancelar (cliente)
- POST /api/adoptions/<id>/approve/ - Aprovar (abrigo)
- POST /api/adoptions/<id>/reject/ - Rejeitar (abrigo)
- POST /api/adoptions/<id>/finalize/ - Finalizar (abrigo)

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}
"""

import logging

from django.http import JsonResponse, HttpRequest

from src.core.accounts.entities import AccountRole
from src.core.adoptions.dtos import (
    AddPetInputDTO,
    RequestAdoptionInputDTO,
    CancelAdoptionInputDTO,
    ApproveAdoptionInputDTO,
    RejectAdoptionInputDTO,
    FinalizeAdoptionInputDTO,
    parse_optional_date,
)
from src.core.shared.exceptions import ValidationError

from ..shared.api import BaseAPIView, ApiRoleRequiredMixin, json_response

logger = logging.getLogger(__name__)


def _parse_age(value):
    """Idade vinda do JSON: int, string numérica ou vazio."""
    if value is None or value == '':
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Idade inválida: {value}", field="age")


# =============================================================================
# Pets
# =============================================================================

class AvailablePetsAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    GET /api/pets/?search=labrador

    Response:
    {
        "success": true,
        "data": [...],
        "meta": {"total": 3, "search": "labrador"}
    }
    """

    required_role = None

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            search = request.GET.get('search', '').strip() or None
            pets = self.get_service('list_available_pets_service').execute(search)

            return json_response(
                success=True,
                data=[p.to_dict() for p in pets],
                meta={'total': len(pets), 'search': search},
            )

        except Exception as e:
            return self.handle_exception(e)


class PetAddAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    POST /api/pets/add/

    Body:
    {
        "name": "Rex",
        "species": "Dog",          // ou "type"
        "breed": "Vira-lata",
        "age": 3,
        "gender": "Male",
        "description": "...",
        "pet_image": "https://..."
    }

    Response: 201 com o pet cadastrado
    """

    required_role = AccountRole.SHELTER

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            output = self.get_service('add_pet_service').execute(
                AddPetInputDTO(
                    shelter_id=self.account.id,
                    name=str(data.get('name', '')),
                    species=str(data.get('species') or data.get('type') or ''),
                    breed=str(data.get('breed', '') or ''),
                    age=_parse_age(data.get('age')),
                    gender=str(data.get('gender') or 'Unknown'),
                    description=str(data.get('description', '') or ''),
                    pet_image=str(data.get('pet_image', '') or ''),
                )
            )

            logger.info(f"Pet cadastrado via API: {output.id} por {self.account.id}")
            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class ShelterPetsAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """GET /api/shelter/pets/"""

    required_role = AccountRole.SHELTER

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            pets = self.get_service('list_shelter_pets_service').execute(self.account.id)
            return json_response(
                success=True,
                data=[p.to_dict() for p in pets],
                meta={'total': len(pets)},
            )
        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Solicitações
# =============================================================================

class AdoptionRequestAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    POST /api/pets/adopt/

    Body:
    {
        "pet_id": "uuid",
        "client_reason": "Tenho quintal grande"
    }

    Response: 201 com a solicitação criada
    """

    required_role = AccountRole.CLIENT

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            data = self.parse_body(request)

            pet_id = str(data.get('pet_id', '') or '')
            if not pet_id:
                raise ValidationError("pet_id é obrigatório", field="pet_id")

            output = self.get_service('request_adoption_service').execute(
                RequestAdoptionInputDTO(
                    pet_id=pet_id,
                    client_id=self.account.id,
                    client_reason=str(data.get('client_reason', '') or ''),
                )
            )

            return json_response(success=True, data=output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)


class ClientHistoryAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """GET /api/client/history/"""

    required_role = AccountRole.CLIENT

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            adoptions = self.get_service('client_adoption_history_service').execute(self.account.id)
            return json_response(
                success=True,
                data=[a.to_dict() for a in adoptions],
                meta={'total': len(adoptions)},
            )
        except Exception as e:
            return self.handle_exception(e)


class ShelterAdoptionsAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    GET /api/shelter/adoptions/

    Response inclui contagem de pendentes em meta.
    """

    required_role = AccountRole.SHELTER

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            adoptions = self.get_service('shelter_adoption_requests_service').execute(self.account.id)
            return json_response(
                success=True,
                data=[a.to_dict() for a in adoptions],
                meta={
                    'total': len(adoptions),
                    'pending': sum(1 for a in adoptions if a.can_review),
                },
            )
        except Exception as e:
            return self.handle_exception(e)


class AdoptionCancelAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """POST /api/adoptions/<id>/cancel/"""

    required_role = AccountRole.CLIENT

    def post(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            output = self.get_service('cancel_adoption_service').execute(
                CancelAdoptionInputDTO(adoption_id=pk, client_id=self.account.id)
            )
            return json_response(success=True, data=output.to_dict())
        except Exception as e:
            return self.handle_exception(e)


class AdoptionApproveAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    POST /api/adoptions/<id>/approve/

    Body:
    {
        "shelter_response": "Venha no sábado",
        "visit_date": "2024-05-04"
    }
    """

    required_role = AccountRole.SHELTER

    def post(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            output = self.get_service('approve_adoption_service').execute(
                ApproveAdoptionInputDTO(
                    adoption_id=pk,
                    shelter_id=self.account.id,
                    shelter_response=str(data.get('shelter_response', '') or ''),
                    visit_date=parse_optional_date(data.get('visit_date'), 'visit_date'),
                )
            )
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class AdoptionRejectAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """POST /api/adoptions/<id>/reject/"""

    required_role = AccountRole.SHELTER

    def post(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            output = self.get_service('reject_adoption_service').execute(
                RejectAdoptionInputDTO(
                    adoption_id=pk,
                    shelter_id=self.account.id,
                    shelter_response=str(data.get('shelter_response', '') or ''),
                )
            )
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class AdoptionFinalizeAPIView(ApiRoleRequiredMixin, BaseAPIView):
    """
    POST /api/adoptions/<id>/finalize/

    Body:
    {
        "outcome": "Adopted",          // ou "Available" (devolução)
        "completion_date": "2024-05-10" // opcional
    }
    """

    required_role = AccountRole.SHELTER

    def post(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            data = self.parse_body(request)

            output = self.get_service('finalize_adoption_service').execute(
                FinalizeAdoptionInputDTO(
                    adoption_id=pk,
                    shelter_id=self.account.id,
                    outcome=str(data.get('outcome', '') or ''),
                    completion_date=parse_optional_date(
                        data.get('completion_date'), 'completion_date'
                    ),
                )
            )
            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)
