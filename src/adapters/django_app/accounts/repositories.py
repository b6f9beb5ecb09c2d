"""
Repositórios Django para persistência de Contas.

Implementam ClientRepository e ShelterRepository (Ports do Core)
usando o Django ORM.
"""

from typing import List, Optional
import logging

from src.core.accounts.entities import ClientEntity, ShelterEntity

from .models import ClientModel, ShelterModel
from .mappers import ClientMapper, ShelterMapper

logger = logging.getLogger(__name__)


class DjangoClientRepository:
    """
    Implementação Django do ClientRepository.

    Example:
        repo = DjangoClientRepository()
        repo.save(client_entity)
        client = repo.get_by_email("maria@example.com")
    """

    def __init__(self):
        self._mapper = ClientMapper()

    def save(self, client: ClientEntity) -> None:
        """
        Persiste cliente (create ou update).

        Note:
            Usa update_or_create para atomicidade
        """
        ClientModel.objects.update_or_create(
            id=client.id,
            defaults={
                'full_name': client.full_name,
                'email': client.email,
                'password_hash': client.password_hash,
                'phone_number': client.phone_number,
                'address': client.address,
                'created_at': client.created_at,
            }
        )
        logger.debug(f"Client saved: {client.id}")

    def get_by_id(self, client_id: str) -> Optional[ClientEntity]:
        try:
            return self._mapper.to_entity(ClientModel.objects.get(id=client_id))
        except ClientModel.DoesNotExist:
            logger.debug(f"Client not found: {client_id}")
            return None

    def get_by_email(self, email: str) -> Optional[ClientEntity]:
        model = ClientModel.objects.filter(email=email).first()
        return self._mapper.to_entity(model) if model else None

    def exists_by_email(self, email: str) -> bool:
        return ClientModel.objects.filter(email=email).exists()

    def list_all(self) -> List[ClientEntity]:
        return self._mapper.to_entity_list(ClientModel.objects.order_by('full_name'))

    def count(self) -> int:
        return ClientModel.objects.count()


class DjangoShelterRepository:
    """Implementação Django do ShelterRepository."""

    def __init__(self):
        self._mapper = ShelterMapper()

    def save(self, shelter: ShelterEntity) -> None:
        ShelterModel.objects.update_or_create(
            id=shelter.id,
            defaults={
                'shelter_name': shelter.shelter_name,
                'email': shelter.email,
                'password_hash': shelter.password_hash,
                'location': shelter.location,
                'contact_number': shelter.contact_number,
                'created_at': shelter.created_at,
            }
        )
        logger.debug(f"Shelter saved: {shelter.id}")

    def get_by_id(self, shelter_id: str) -> Optional[ShelterEntity]:
        try:
            return self._mapper.to_entity(ShelterModel.objects.get(id=shelter_id))
        except ShelterModel.DoesNotExist:
            logger.debug(f"Shelter not found: {shelter_id}")
            return None

    def get_by_email(self, email: str) -> Optional[ShelterEntity]:
        model = ShelterModel.objects.filter(email=email).first()
        return self._mapper.to_entity(model) if model else None

    def exists_by_email(self, email: str) -> bool:
        return ShelterModel.objects.filter(email=email).exists()

    def exists_by_name(self, shelter_name: str) -> bool:
        return ShelterModel.objects.filter(shelter_name__iexact=shelter_name.strip()).exists()

    def list_all(self) -> List[ShelterEntity]:
        return self._mapper.to_entity_list(ShelterModel.objects.order_by('shelter_name'))

    def count(self) -> int:
        return ShelterModel.objects.count()
