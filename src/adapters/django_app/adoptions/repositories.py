"""
Repositórios Django para persistência de Pets e Solicitações.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar PetRepository, AdoptionRepository e AdoptionQueryRepository
- Mapear entities para models e vice-versa
- Otimizar queries dos painéis (select_related, sem N+1)

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
"""

from typing import Iterable, List, Optional
import logging

from django.db import IntegrityError, transaction
from django.db.models import Q

from src.core.adoptions.entities import (
    PetEntity,
    PetStatus,
    AdoptionEntity,
    AdoptionStatus,
)
from src.core.adoptions.dtos import (
    AvailablePetDTO,
    ClientAdoptionViewDTO,
    ShelterAdoptionViewDTO,
)
from src.core.shared.exceptions import BusinessRuleViolationError

from .models import PetModel, AdoptionModel
from .mappers import PetMapper, AdoptionMapper, AdoptionViewMapper

logger = logging.getLogger(__name__)


class DjangoPetRepository:
    """
    Implementação Django do PetRepository.

    Example:
        repo = DjangoPetRepository()
        repo.save(pet_entity)
        pets = repo.list_by_shelter(shelter_id)
    """

    def __init__(self):
        self._mapper = PetMapper()

    def save(self, pet: PetEntity) -> None:
        """
        Persiste pet (create ou update).

        Note:
            Usa update_or_create para atomicidade
        """
        PetModel.objects.update_or_create(
            id=pet.id,
            defaults=self._mapper.to_model_data(pet)
        )
        logger.debug(f"Pet saved: {pet.id} [{pet.status.value}]")

    def get_by_id(self, pet_id: str) -> Optional[PetEntity]:
        try:
            return self._mapper.to_entity(PetModel.objects.get(id=pet_id))
        except PetModel.DoesNotExist:
            logger.debug(f"Pet not found: {pet_id}")
            return None

    def get_for_update(self, pet_id: str) -> Optional[PetEntity]:
        """
        Busca pet com SELECT ... FOR UPDATE.

        A trava vale até o fim da transação aberta pelo Unit of Work.
        """
        try:
            return self._mapper.to_entity(PetModel.objects.select_for_update().get(id=pet_id))
        except PetModel.DoesNotExist:
            logger.debug(f"Pet not found: {pet_id}")
            return None

    def delete(self, pet_id: str) -> None:
        """
        Remove pet do banco.

        Note:
            Solicitações do pet são removidas pelo ON DELETE CASCADE.
            Não lança erro se pet não existir.
        """
        deleted_count, _ = PetModel.objects.filter(id=pet_id).delete()

        if deleted_count > 0:
            logger.info(f"Pet deleted: {pet_id}")
        else:
            logger.debug(f"Pet not found for deletion: {pet_id}")

    def list_by_shelter(self, shelter_id: str) -> List[PetEntity]:
        models = PetModel.objects.filter(shelter_id=shelter_id).order_by('-arrival_date', 'name')
        return self._mapper.to_entity_list(models)

    def count_by_status(self, status: PetStatus) -> int:
        return PetModel.objects.filter(status=status.value).count()


class DjangoAdoptionRepository:
    """Implementação Django do AdoptionRepository."""

    def __init__(self):
        self._mapper = AdoptionMapper()

    def save(self, adoption: AdoptionEntity) -> None:
        """
        Persiste solicitação (create ou update).

        Raises:
            BusinessRuleViolationError: Se o cliente já tem solicitação
                para o pet (constraint unique_adoption_per_client_pet)
        """
        try:
            with transaction.atomic():
                AdoptionModel.objects.update_or_create(
                    id=adoption.id,
                    defaults=self._mapper.to_model_data(adoption)
                )
        except IntegrityError as e:
            duplicated = AdoptionModel.objects.filter(
                client_id=adoption.client_id, pet_id=adoption.pet_id
            ).exclude(id=adoption.id).exists()
            if not duplicated:
                raise
            logger.warning(f"Adoption rejected by constraint: {adoption.id} ({e})")
            raise BusinessRuleViolationError(
                "Você já solicitou a adoção deste pet",
                rule="solicitacao_duplicada"
            )
        logger.debug(f"Adoption saved: {adoption.id} [{adoption.status.value}]")

    def get_by_id(self, adoption_id: str) -> Optional[AdoptionEntity]:
        try:
            return self._mapper.to_entity(AdoptionModel.objects.get(id=adoption_id))
        except AdoptionModel.DoesNotExist:
            logger.debug(f"Adoption not found: {adoption_id}")
            return None

    def exists_for_client_and_pet(self, client_id: str, pet_id: str) -> bool:
        return AdoptionModel.objects.filter(client_id=client_id, pet_id=pet_id).exists()

    def list_by_pet(
        self,
        pet_id: str,
        statuses: Optional[Iterable[AdoptionStatus]] = None,
    ) -> List[AdoptionEntity]:
        queryset = AdoptionModel.objects.filter(pet_id=pet_id)

        if statuses is not None:
            queryset = queryset.filter(status__in=[s.value for s in statuses])

        return self._mapper.to_entity_list(queryset.order_by('request_date', 'updated_at'))


class DjangoAdoptionQueryRepository:
    """
    Read Model dos painéis.

    Cada consulta faz um único SELECT com JOIN (select_related).
    """

    def list_available_pets(self, search: Optional[str] = None) -> List[AvailablePetDTO]:
        queryset = (
            PetModel.objects
            .select_related('shelter')
            .filter(status=PetStatus.AVAILABLE.value)
        )

        term = (search or '').strip()
        if term:
            queryset = queryset.filter(
                Q(name__icontains=term)
                | Q(species__icontains=term)
                | Q(breed__icontains=term)
            )

        return [
            AdoptionViewMapper.to_available_pet(model)
            for model in queryset.order_by('-arrival_date', 'name')
        ]

    def list_client_adoptions(self, client_id: str) -> List[ClientAdoptionViewDTO]:
        queryset = (
            AdoptionModel.objects
            .select_related('pet', 'pet__shelter')
            .filter(client_id=client_id)
            .order_by('-request_date', '-updated_at')
        )
        return [AdoptionViewMapper.to_client_view(model) for model in queryset]

    def list_shelter_adoptions(self, shelter_id: str) -> List[ShelterAdoptionViewDTO]:
        queryset = (
            AdoptionModel.objects
            .select_related('pet', 'client')
            .filter(pet__shelter_id=shelter_id)
            .order_by('-request_date', '-updated_at')
        )
        return [AdoptionViewMapper.to_shelter_view(model) for model in queryset]
