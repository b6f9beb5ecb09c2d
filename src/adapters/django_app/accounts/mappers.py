"""
Mappers para conversão entre Entities de Contas e Models Django.

Mappers são stateless e não contêm lógica de negócio.
"""

from typing import Iterable, List

from src.core.accounts.entities import ClientEntity, ShelterEntity

from .models import ClientModel, ShelterModel


class ClientMapper:
    """
    Mapper ClientEntity <-> ClientModel.

    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    """

    @staticmethod
    def to_model(entity: ClientEntity) -> ClientModel:
        """
        Converte ClientEntity para ClientModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return ClientModel(
            id=entity.id,
            full_name=entity.full_name,
            email=entity.email,
            password_hash=entity.password_hash,
            phone_number=entity.phone_number,
            address=entity.address,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: ClientModel) -> ClientEntity:
        """
        Converte ClientModel para ClientEntity.

        Note:
            Bypassa validações do factory method .register()
            pois dados já foram validados no cadastro
        """
        return ClientEntity(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            password_hash=model.password_hash,
            phone_number=model.phone_number,
            address=model.address,
            created_at=model.created_at,
        )

    @staticmethod
    def to_entity_list(models: Iterable[ClientModel]) -> List[ClientEntity]:
        return [ClientMapper.to_entity(model) for model in models]


class ShelterMapper:
    """Mapper ShelterEntity <-> ShelterModel."""

    @staticmethod
    def to_model(entity: ShelterEntity) -> ShelterModel:
        return ShelterModel(
            id=entity.id,
            shelter_name=entity.shelter_name,
            email=entity.email,
            password_hash=entity.password_hash,
            location=entity.location,
            contact_number=entity.contact_number,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: ShelterModel) -> ShelterEntity:
        return ShelterEntity(
            id=model.id,
            shelter_name=model.shelter_name,
            email=model.email,
            password_hash=model.password_hash,
            location=model.location,
            contact_number=model.contact_number,
            created_at=model.created_at,
        )

    @staticmethod
    def to_entity_list(models: Iterable[ShelterModel]) -> List[ShelterEntity]:
        return [ShelterMapper.to_entity(model) for model in models]
