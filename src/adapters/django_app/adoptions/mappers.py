"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter PetEntity ↔ PetModel
- Converter AdoptionEntity ↔ AdoptionModel
- Montar os Query DTOs dos painéis a partir de models já "juntados"
  (select_related)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
"""

from typing import Iterable, List

from src.core.adoptions.entities import (
    PetEntity,
    PetStatus,
    PetGender,
    AdoptionEntity,
    AdoptionStatus,
)
from src.core.adoptions.dtos import (
    AvailablePetDTO,
    ClientAdoptionViewDTO,
    ShelterAdoptionViewDTO,
)

from .models import PetModel, AdoptionModel


class PetMapper:
    """
    Mapper para conversão entre PetEntity e PetModel.
    """

    @staticmethod
    def to_model(entity: PetEntity) -> PetModel:
        """
        Converte PetEntity para PetModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return PetModel(
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
            updated_at=entity.updated_at,
        )

    @staticmethod
    def to_entity(model: PetModel) -> PetEntity:
        """
        Converte PetModel para PetEntity.

        Note:
            Bypassa validações do factory method .create()
            pois dados já foram validados no cadastro
        """
        return PetEntity(
            id=model.id,
            shelter_id=model.shelter_id,
            name=model.name,
            species=model.species,
            breed=model.breed,
            age=model.age,
            gender=PetGender(model.gender),
            description=model.description,
            pet_image=model.pet_image,
            status=PetStatus(model.status),
            arrival_date=model.arrival_date,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_entity_list(models: Iterable[PetModel]) -> List[PetEntity]:
        return [PetMapper.to_entity(model) for model in models]

    @staticmethod
    def to_model_data(entity: PetEntity) -> dict:
        """Campos para update_or_create (sem a PK)."""
        return {
            'shelter_id': entity.shelter_id,
            'name': entity.name,
            'species': entity.species,
            'breed': entity.breed,
            'age': entity.age,
            'gender': entity.gender.value,
            'description': entity.description,
            'pet_image': entity.pet_image,
            'status': entity.status.value,
            'arrival_date': entity.arrival_date,
            'updated_at': entity.updated_at,
        }


class AdoptionMapper:
    """Mapper para conversão entre AdoptionEntity e AdoptionModel."""

    @staticmethod
    def to_model(entity: AdoptionEntity) -> AdoptionModel:
        return AdoptionModel(id=entity.id, **AdoptionMapper.to_model_data(entity))

    @staticmethod
    def to_entity(model: AdoptionModel) -> AdoptionEntity:
        return AdoptionEntity(
            id=model.id,
            pet_id=model.pet_id,
            client_id=model.client_id,
            status=AdoptionStatus(model.status),
            client_reason=model.client_reason,
            shelter_response=model.shelter_response,
            request_date=model.request_date,
            visit_date=model.visit_date,
            approval_date=model.approval_date,
            completion_date=model.completion_date,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_entity_list(models: Iterable[AdoptionModel]) -> List[AdoptionEntity]:
        return [AdoptionMapper.to_entity(model) for model in models]

    @staticmethod
    def to_model_data(entity: AdoptionEntity) -> dict:
        return {
            'pet_id': entity.pet_id,
            'client_id': entity.client_id,
            'status': entity.status.value,
            'client_reason': entity.client_reason,
            'shelter_response': entity.shelter_response,
            'request_date': entity.request_date,
            'visit_date': entity.visit_date,
            'approval_date': entity.approval_date,
            'completion_date': entity.completion_date,
            'updated_at': entity.updated_at,
        }


# =============================================================================
# Query DTOs (Read Model)
# =============================================================================

class AdoptionViewMapper:
    """
    Monta os DTOs dos painéis.

    Espera models carregados com select_related: pet__shelter para
    o cliente, pet e client para o abrigo.
    """

    @staticmethod
    def to_available_pet(model: PetModel) -> AvailablePetDTO:
        shelter = model.shelter
        return AvailablePetDTO(
            id=model.id,
            name=model.name,
            species=model.species,
            breed=model.breed,
            age=model.age,
            gender=model.gender,
            description=model.description,
            pet_image=model.pet_image,
            arrival_date=model.arrival_date,
            shelter_id=model.shelter_id,
            shelter_name=shelter.shelter_name,
            shelter_location=shelter.location,
            shelter_contact=shelter.contact_number,
        )

    @staticmethod
    def to_client_view(model: AdoptionModel) -> ClientAdoptionViewDTO:
        pet = model.pet
        shelter = pet.shelter
        return ClientAdoptionViewDTO(
            id=model.id,
            status=model.status,
            client_reason=model.client_reason,
            shelter_response=model.shelter_response,
            request_date=model.request_date,
            visit_date=model.visit_date,
            approval_date=model.approval_date,
            completion_date=model.completion_date,
            pet_id=pet.id,
            pet_name=pet.name,
            pet_species=pet.species,
            pet_breed=pet.breed,
            pet_image=pet.pet_image,
            pet_status=pet.status,
            shelter_name=shelter.shelter_name,
            shelter_location=shelter.location,
            shelter_contact=shelter.contact_number,
        )

    @staticmethod
    def to_shelter_view(model: AdoptionModel) -> ShelterAdoptionViewDTO:
        pet = model.pet
        client = model.client
        return ShelterAdoptionViewDTO(
            id=model.id,
            status=model.status,
            client_reason=model.client_reason,
            shelter_response=model.shelter_response,
            request_date=model.request_date,
            visit_date=model.visit_date,
            approval_date=model.approval_date,
            completion_date=model.completion_date,
            pet_id=pet.id,
            pet_name=pet.name,
            pet_status=pet.status,
            client_id=client.id,
            client_name=client.full_name,
            client_email=client.email,
            client_phone=client.phone_number,
            client_address=client.address,
        )
