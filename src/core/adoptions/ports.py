"""
Ports (Interfaces) do Domínio de Adoções.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência e consulta de pets e solicitações.

Tipos de Ports:
- PetRepository: CRUD de pets
- AdoptionRepository: CRUD de solicitações de adoção
- AdoptionQueryRepository: Consultas dos painéis (Read Model - CQRS)

Example:
    # No Adapter (Django)
    class DjangoPetRepository:
        def save(self, pet: PetEntity) -> None:
            model = PetMapper.to_model(pet)
            model.save()
"""

from typing import Iterable, List, Optional, Protocol, runtime_checkable

from .entities import PetEntity, PetStatus, AdoptionEntity, AdoptionStatus
from .dtos import AvailablePetDTO, ClientAdoptionViewDTO, ShelterAdoptionViewDTO


@runtime_checkable
class PetRepository(Protocol):
    """
    Interface para persistência de Pets.

    Implementações:
    - DjangoPetRepository (ORM)
    - InMemoryPetRepository (para testes)
    """

    def save(self, pet: PetEntity) -> None:
        """
        Persiste pet no repositório.

        Se pet.id já existe, atualiza. Caso contrário, cria novo.
        """
        ...

    def get_by_id(self, pet_id: str) -> Optional[PetEntity]:
        ...

    def get_for_update(self, pet_id: str) -> Optional[PetEntity]:
        """
        Busca pet travando a linha até o fim da transação.

        Toda mudança de estado de um pet ou das suas solicitações passa
        por esta trava, o que serializa aprovações e finalizações
        concorrentes. Deve ser chamado dentro do Unit of Work.
        """
        ...

    def delete(self, pet_id: str) -> None:
        """
        Remove pet e as solicitações ligadas a ele.

        Args:
            pet_id: Identificador do pet a remover
        """
        ...

    def list_by_shelter(self, shelter_id: str) -> List[PetEntity]:
        """
        Lista pets de um abrigo, chegada mais recente primeiro.
        """
        ...

    def count_by_status(self, status: PetStatus) -> int:
        ...


@runtime_checkable
class AdoptionRepository(Protocol):
    """
    Interface para persistência de solicitações de adoção.

    Implementações:
    - DjangoAdoptionRepository (ORM)
    - InMemoryAdoptionRepository (para testes)
    """

    def save(self, adoption: AdoptionEntity) -> None:
        ...

    def get_by_id(self, adoption_id: str) -> Optional[AdoptionEntity]:
        ...

    def exists_for_client_and_pet(self, client_id: str, pet_id: str) -> bool:
        """
        Verifica se o cliente já pediu este pet alguma vez.
        """
        ...

    def list_by_pet(
        self,
        pet_id: str,
        statuses: Optional[Iterable[AdoptionStatus]] = None,
    ) -> List[AdoptionEntity]:
        """
        Lista solicitações de um pet.

        Args:
            pet_id: ID do pet
            statuses: Filtra pelos status informados (todos se None)
        """
        ...


class AdoptionQueryRepository(Protocol):
    """
    Interface para consultas otimizadas dos painéis (Read Model - CQRS).

    Separada dos repositórios de escrita para permitir consultas com
    select_related e DTOs já montados, sem N+1.
    """

    def list_available_pets(self, search: Optional[str] = None) -> List[AvailablePetDTO]:
        """
        Lista pets disponíveis com dados do abrigo.

        Args:
            search: Texto buscado em nome, espécie ou raça (sem
                diferenciar maiúsculas)

        Returns:
            Pets ordenados por data de chegada, mais recente primeiro
        """
        ...

    def list_client_adoptions(self, client_id: str) -> List[ClientAdoptionViewDTO]:
        """Solicitações do cliente, mais recente primeiro."""
        ...

    def list_shelter_adoptions(self, shelter_id: str) -> List[ShelterAdoptionViewDTO]:
        """Solicitações para pets do abrigo, mais recente primeiro."""
        ...


class InMemoryPetRepository:
    """
    Implementação em memória do PetRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!

    Example:
        repo = InMemoryPetRepository()
        repo.save(pet)
        found = repo.get_by_id(pet.id)
    """

    def __init__(self, adoption_repo: Optional["InMemoryAdoptionRepository"] = None):
        self._pets: dict[str, PetEntity] = {}
        self._adoption_repo = adoption_repo

    def save(self, pet: PetEntity) -> None:
        self._pets[pet.id] = pet

    def get_by_id(self, pet_id: str) -> Optional[PetEntity]:
        return self._pets.get(pet_id)

    def get_for_update(self, pet_id: str) -> Optional[PetEntity]:
        return self.get_by_id(pet_id)

    def delete(self, pet_id: str) -> None:
        """Remove pet (e solicitações, se ligado a um repositório de adoções)."""
        self._pets.pop(pet_id, None)
        if self._adoption_repo is not None:
            self._adoption_repo.delete_by_pet(pet_id)

    def list_all(self) -> List[PetEntity]:
        return self._sorted(self._pets.values())

    def list_by_shelter(self, shelter_id: str) -> List[PetEntity]:
        return self._sorted(p for p in self._pets.values() if p.shelter_id == shelter_id)

    def count_by_status(self, status: PetStatus) -> int:
        return len([p for p in self._pets.values() if p.status == status])

    @staticmethod
    def _sorted(pets: Iterable[PetEntity]) -> List[PetEntity]:
        return sorted(pets, key=lambda p: p.arrival_date, reverse=True)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._pets.clear()


class InMemoryAdoptionRepository:
    """Implementação em memória do AdoptionRepository."""

    def __init__(self):
        self._adoptions: dict[str, AdoptionEntity] = {}

    def save(self, adoption: AdoptionEntity) -> None:
        self._adoptions[adoption.id] = adoption

    def get_by_id(self, adoption_id: str) -> Optional[AdoptionEntity]:
        return self._adoptions.get(adoption_id)

    def exists_for_client_and_pet(self, client_id: str, pet_id: str) -> bool:
        return any(
            a.client_id == client_id and a.pet_id == pet_id
            for a in self._adoptions.values()
        )

    def list_by_pet(
        self,
        pet_id: str,
        statuses: Optional[Iterable[AdoptionStatus]] = None,
    ) -> List[AdoptionEntity]:
        wanted = set(statuses) if statuses is not None else None
        return [
            a for a in self._adoptions.values()
            if a.pet_id == pet_id and (wanted is None or a.status in wanted)
        ]

    def list_all(self) -> List[AdoptionEntity]:
        return list(self._adoptions.values())

    def delete_by_pet(self, pet_id: str) -> None:
        for adoption_id in [a.id for a in self._adoptions.values() if a.pet_id == pet_id]:
            del self._adoptions[adoption_id]

    def clear(self) -> None:
        self._adoptions.clear()


class InMemoryAdoptionQueryRepository:
    """
    Read Model em memória, montado a partir dos repositórios de escrita.

    Example:
        query_repo = InMemoryAdoptionQueryRepository(
            pet_repo, adoption_repo, client_repo, shelter_repo
        )
        pets = query_repo.list_available_pets(search="dog")
    """

    def __init__(self, pet_repo, adoption_repo, client_repo, shelter_repo):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.client_repo = client_repo
        self.shelter_repo = shelter_repo

    def list_available_pets(self, search: Optional[str] = None) -> List[AvailablePetDTO]:
        result = []
        for pet in self.pet_repo.list_all():
            if not pet.is_available or not pet.matches(search):
                continue
            shelter = self.shelter_repo.get_by_id(pet.shelter_id)
            result.append(
                AvailablePetDTO(
                    id=pet.id,
                    name=pet.name,
                    species=pet.species,
                    breed=pet.breed,
                    age=pet.age,
                    gender=pet.gender.value,
                    description=pet.description,
                    pet_image=pet.pet_image,
                    arrival_date=pet.arrival_date,
                    shelter_id=pet.shelter_id,
                    shelter_name=shelter.shelter_name if shelter else "",
                    shelter_location=shelter.location if shelter else "",
                    shelter_contact=shelter.contact_number if shelter else "",
                )
            )
        return result

    def list_client_adoptions(self, client_id: str) -> List[ClientAdoptionViewDTO]:
        result = []
        for adoption in self._newest_first(self.adoption_repo.list_all()):
            if adoption.client_id != client_id:
                continue
            pet = self.pet_repo.get_by_id(adoption.pet_id)
            if pet is None:
                continue
            shelter = self.shelter_repo.get_by_id(pet.shelter_id)
            result.append(
                ClientAdoptionViewDTO(
                    id=adoption.id,
                    status=adoption.status.value,
                    client_reason=adoption.client_reason,
                    shelter_response=adoption.shelter_response,
                    request_date=adoption.request_date,
                    visit_date=adoption.visit_date,
                    approval_date=adoption.approval_date,
                    completion_date=adoption.completion_date,
                    pet_id=pet.id,
                    pet_name=pet.name,
                    pet_species=pet.species,
                    pet_breed=pet.breed,
                    pet_image=pet.pet_image,
                    pet_status=pet.status.value,
                    shelter_name=shelter.shelter_name if shelter else "",
                    shelter_location=shelter.location if shelter else "",
                    shelter_contact=shelter.contact_number if shelter else "",
                )
            )
        return result

    def list_shelter_adoptions(self, shelter_id: str) -> List[ShelterAdoptionViewDTO]:
        result = []
        for adoption in self._newest_first(self.adoption_repo.list_all()):
            pet = self.pet_repo.get_by_id(adoption.pet_id)
            if pet is None or pet.shelter_id != shelter_id:
                continue
            client = self.client_repo.get_by_id(adoption.client_id)
            result.append(
                ShelterAdoptionViewDTO(
                    id=adoption.id,
                    status=adoption.status.value,
                    client_reason=adoption.client_reason,
                    shelter_response=adoption.shelter_response,
                    request_date=adoption.request_date,
                    visit_date=adoption.visit_date,
                    approval_date=adoption.approval_date,
                    completion_date=adoption.completion_date,
                    pet_id=pet.id,
                    pet_name=pet.name,
                    pet_status=pet.status.value,
                    client_id=adoption.client_id,
                    client_name=client.full_name if client else "",
                    client_email=client.email if client else "",
                    client_phone=client.phone_number if client else "",
                    client_address=client.address if client else "",
                )
            )
        return result

    @staticmethod
    def _newest_first(adoptions: Iterable[AdoptionEntity]) -> List[AdoptionEntity]:
        return sorted(adoptions, key=lambda a: (a.request_date, a.updated_at), reverse=True)
