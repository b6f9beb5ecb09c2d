"""
Data Transfer Objects (DTOs) do Domínio de Adoções.

Tipos de DTOs:
- Input DTOs: Dados de entrada das operações de pets e adoções
- Output DTOs: Pet e solicitação como saem dos use cases
- Query DTOs: Linhas já "juntadas" para os painéis (pet + abrigo,
  adoção + pet + cliente), montadas pelo repositório de consulta
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from src.core.shared.exceptions import ValidationError

from .entities import PetEntity, AdoptionEntity


def parse_optional_date(value: Union[str, date, None], field_name: str) -> Optional[date]:
    """
    Converte valor vindo da API em date.

    Aceita date, datetime e strings ISO ("2024-05-04" ou
    "2024-05-04T10:00:00"); a parte de hora é descartada.

    Raises:
        ValidationError: Se o texto não for uma data ISO válida
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ValidationError(f"Data inválida: {value}", field=field_name)


def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class AddPetInputDTO:
    """
    DTO de entrada para cadastrar pet.

    Attributes:
        shelter_id: Abrigo dono do pet (da sessão, nunca do formulário)
        name: Nome do pet
        species: Espécie (ex: "Dog", "Cat")
        breed: Raça
        age: Idade em anos
        gender: Sexo ("Male", "Female" ou "Unknown")
        description: Descrição livre
        pet_image: URL da foto
    """

    shelter_id: str
    name: str
    species: str
    breed: str = ""
    age: Optional[int] = None
    gender: str = "Unknown"
    description: str = ""
    pet_image: str = ""

    def to_dict(self) -> dict:
        return {
            "shelter_id": self.shelter_id,
            "name": self.name,
            "species": self.species,
            "breed": self.breed,
            "age": self.age,
            "gender": self.gender,
            "description": self.description,
            "pet_image": self.pet_image,
        }


@dataclass(frozen=True)
class PetActionInputDTO:
    """DTO de entrada para ações do abrigo sobre um pet (remover, marcar adotado)."""

    pet_id: str
    shelter_id: str

    def to_dict(self) -> dict:
        return {"pet_id": self.pet_id, "shelter_id": self.shelter_id}


@dataclass(frozen=True)
class RequestAdoptionInputDTO:
    """
    DTO de entrada para solicitar adoção.

    Attributes:
        pet_id: Pet desejado
        client_id: Cliente solicitante (da sessão)
        client_reason: Motivo informado pelo cliente
    """

    pet_id: str
    client_id: str
    client_reason: str = ""

    def to_dict(self) -> dict:
        return {
            "pet_id": self.pet_id,
            "client_id": self.client_id,
            "client_reason": self.client_reason,
        }


@dataclass(frozen=True)
class CancelAdoptionInputDTO:
    adoption_id: str
    client_id: str

    def to_dict(self) -> dict:
        return {"adoption_id": self.adoption_id, "client_id": self.client_id}


@dataclass(frozen=True)
class ApproveAdoptionInputDTO:
    """
    DTO de entrada para aprovar solicitação.

    Attributes:
        adoption_id: Solicitação a aprovar
        shelter_id: Abrigo que está aprovando (da sessão)
        shelter_response: Mensagem para o cliente
        visit_date: Data combinada para a visita
    """

    adoption_id: str
    shelter_id: str
    shelter_response: str = ""
    visit_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "adoption_id": self.adoption_id,
            "shelter_id": self.shelter_id,
            "shelter_response": self.shelter_response,
            "visit_date": _iso(self.visit_date),
        }


@dataclass(frozen=True)
class RejectAdoptionInputDTO:
    adoption_id: str
    shelter_id: str
    shelter_response: str = ""

    def to_dict(self) -> dict:
        return {
            "adoption_id": self.adoption_id,
            "shelter_id": self.shelter_id,
            "shelter_response": self.shelter_response,
        }


@dataclass(frozen=True)
class FinalizeAdoptionInputDTO:
    """
    DTO de entrada para finalizar adoção aprovada.

    Attributes:
        adoption_id: Solicitação aprovada
        shelter_id: Abrigo (da sessão)
        outcome: "Adopted" (concluir) ou "Available" (devolver)
        completion_date: Data da conclusão (hoje se omitida)
    """

    adoption_id: str
    shelter_id: str
    outcome: str
    completion_date: Optional[date] = None

    def to_dict(self) -> dict:
        return {
            "adoption_id": self.adoption_id,
            "shelter_id": self.shelter_id,
            "outcome": self.outcome,
            "completion_date": _iso(self.completion_date),
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class PetOutputDTO:
    id: str
    shelter_id: str
    name: str
    species: str
    breed: str
    age: Optional[int]
    gender: str
    description: str
    pet_image: str
    status: str
    arrival_date: date

    @classmethod
    def from_entity(cls, entity: PetEntity) -> "PetOutputDTO":
        return cls(
            id=entity.id,
            shelter_id=entity.shelter_id,
            name=entity.name,
            species=entity.species,
            breed=entity.breed,
            age=entity.age,
            gender=entity.gender.value,
            description=entity.description,
            pet_image=entity.pet_image,
            status=entity.status.value,
            arrival_date=entity.arrival_date,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "shelter_id": self.shelter_id,
            "name": self.name,
            "species": self.species,
            "breed": self.breed,
            "age": self.age,
            "gender": self.gender,
            "description": self.description,
            "pet_image": self.pet_image,
            "status": self.status,
            "arrival_date": _iso(self.arrival_date),
        }


@dataclass
class AdoptionOutputDTO:
    id: str
    pet_id: str
    client_id: str
    status: str
    client_reason: str
    shelter_response: str
    request_date: date
    visit_date: Optional[date]
    approval_date: Optional[date]
    completion_date: Optional[date]

    @classmethod
    def from_entity(cls, entity: AdoptionEntity) -> "AdoptionOutputDTO":
        return cls(
            id=entity.id,
            pet_id=entity.pet_id,
            client_id=entity.client_id,
            status=entity.status.value,
            client_reason=entity.client_reason,
            shelter_response=entity.shelter_response,
            request_date=entity.request_date,
            visit_date=entity.visit_date,
            approval_date=entity.approval_date,
            completion_date=entity.completion_date,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "pet_id": self.pet_id,
            "client_id": self.client_id,
            "status": self.status,
            "client_reason": self.client_reason,
            "shelter_response": self.shelter_response,
            "request_date": _iso(self.request_date),
            "visit_date": _iso(self.visit_date),
            "approval_date": _iso(self.approval_date),
            "completion_date": _iso(self.completion_date),
        }


# =============================================================================
# QUERY DTOs (Painéis)
# =============================================================================

@dataclass
class AvailablePetDTO:
    """
    Pet disponível com dados do abrigo, para a vitrine do cliente.
    """

    id: str
    name: str
    species: str
    breed: str
    age: Optional[int]
    gender: str
    description: str
    pet_image: str
    arrival_date: date
    shelter_id: str
    shelter_name: str
    shelter_location: str
    shelter_contact: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "species": self.species,
            "breed": self.breed,
            "age": self.age,
            "gender": self.gender,
            "description": self.description,
            "pet_image": self.pet_image,
            "arrival_date": _iso(self.arrival_date),
            "shelter_id": self.shelter_id,
            "shelter_name": self.shelter_name,
            "shelter_location": self.shelter_location,
            "shelter_contact": self.shelter_contact,
            "shelter": {
                "id": self.shelter_id,
                "name": self.shelter_name,
                "location": self.shelter_location,
                "contact_number": self.shelter_contact,
            },
        }


@dataclass
class ClientAdoptionViewDTO:
    """
    Solicitação vista pelo cliente: inclui pet e abrigo.
    """

    id: str
    status: str
    client_reason: str
    shelter_response: str
    request_date: date
    visit_date: Optional[date]
    approval_date: Optional[date]
    completion_date: Optional[date]
    pet_id: str
    pet_name: str
    pet_species: str
    pet_breed: str
    pet_image: str
    pet_status: str
    shelter_name: str
    shelter_location: str
    shelter_contact: str

    @property
    def can_cancel(self) -> bool:
        return self.status == "Pending"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status,
            "client_reason": self.client_reason,
            "shelter_response": self.shelter_response,
            "request_date": _iso(self.request_date),
            "visit_date": _iso(self.visit_date),
            "approval_date": _iso(self.approval_date),
            "completion_date": _iso(self.completion_date),
            "can_cancel": self.can_cancel,
            "pet_id": self.pet_id,
            "pet_name": self.pet_name,
            "pet_species": self.pet_species,
            "pet_breed": self.pet_breed,
            "pet_image": self.pet_image,
            "pet_status": self.pet_status,
            "shelter_name": self.shelter_name,
            "shelter_location": self.shelter_location,
            "shelter_contact": self.shelter_contact,
            "pet": {
                "id": self.pet_id,
                "name": self.pet_name,
                "species": self.pet_species,
                "breed": self.pet_breed,
                "pet_image": self.pet_image,
                "status": self.pet_status,
            },
            "shelter": {
                "name": self.shelter_name,
                "location": self.shelter_location,
                "contact_number": self.shelter_contact,
            },
        }


@dataclass
class ShelterAdoptionViewDTO:
    """
    Solicitação vista pelo abrigo: inclui pet e contato do cliente.
    """

    id: str
    status: str
    client_reason: str
    shelter_response: str
    request_date: date
    visit_date: Optional[date]
    approval_date: Optional[date]
    completion_date: Optional[date]
    pet_id: str
    pet_name: str
    pet_status: str
    client_id: str
    client_name: str
    client_email: str
    client_phone: str
    client_address: str

    @property
    def can_review(self) -> bool:
        return self.status == "Pending"

    @property
    def can_finalize(self) -> bool:
        return self.status == "Approved"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status,
            "client_reason": self.client_reason,
            "shelter_response": self.shelter_response,
            "request_date": _iso(self.request_date),
            "visit_date": _iso(self.visit_date),
            "approval_date": _iso(self.approval_date),
            "completion_date": _iso(self.completion_date),
            "pet_id": self.pet_id,
            "pet_name": self.pet_name,
            "pet_status": self.pet_status,
            "client_id": self.client_id,
            "client_name": self.client_name,
            "client_email": self.client_email,
            "client_phone": self.client_phone,
            "pet": {
                "id": self.pet_id,
                "name": self.pet_name,
                "status": self.pet_status,
            },
            "client": {
                "id": self.client_id,
                "full_name": self.client_name,
                "email": self.client_email,
                "phone_number": self.client_phone,
                "address": self.client_address,
            },
        }
