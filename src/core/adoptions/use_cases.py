"""
Use Cases (Application Services) do Domínio de Adoções.

Este módulo orquestra o ciclo de vida das solicitações de adoção,
mantendo pet, solicitação e log de ações consistentes: cada operação
que altera estado roda dentro de um único Unit of Work.

Use Cases de pets (abrigo):
- AddPetService: Cadastra pet
- DeletePetService: Remove pet do abrigo
- MarkPetAdoptedService: Marca pet como adotado fora do sistema
- ListShelterPetsService: Lista pets do abrigo

Use Cases de solicitações:
- RequestAdoptionService: Cliente pede um pet
- CancelAdoptionService: Cliente cancela pedido pendente
- ApproveAdoptionService: Abrigo aprova (pet fica em espera)
- RejectAdoptionService: Abrigo rejeita
- FinalizeAdoptionService: Abrigo conclui ou devolve o pet

Consultas:
- ListAvailablePetsService: Vitrine com busca
- ClientAdoptionHistoryService: Pedidos do cliente
- ShelterAdoptionRequestsService: Pedidos recebidos pelo abrigo
"""

from datetime import date
from typing import List, Optional, Tuple

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)

from .ports import PetRepository, AdoptionRepository, AdoptionQueryRepository
from .entities import (
    PetEntity,
    PetGender,
    AdoptionEntity,
    AdoptionStatus,
    FinalizeOutcome,
)
from .dtos import (
    AddPetInputDTO,
    PetActionInputDTO,
    RequestAdoptionInputDTO,
    CancelAdoptionInputDTO,
    ApproveAdoptionInputDTO,
    RejectAdoptionInputDTO,
    FinalizeAdoptionInputDTO,
    PetOutputDTO,
    AdoptionOutputDTO,
    AvailablePetDTO,
    ClientAdoptionViewDTO,
    ShelterAdoptionViewDTO,
)
from .events import (
    PetAddedEvent,
    PetDeletedEvent,
    PetPlacedOnHoldEvent,
    PetAdoptedEvent,
    PetReleasedEvent,
    AdoptionRequestedEvent,
    AdoptionCancelledEvent,
    AdoptionApprovedEvent,
    AdoptionRejectedEvent,
    AdoptionCompletedEvent,
)


CLIENT = "client"
SHELTER = "shelter"

UNAVAILABLE_RESPONSE = "O pet não está mais disponível para adoção."


def _load_shelter_pet(pet_repo: PetRepository, pet_id: str, shelter_id: str) -> PetEntity:
    """
    Busca pet do abrigo.

    Pet de outro abrigo é tratado como inexistente para não revelar
    dados de terceiros.

    A linha do pet fica travada até o fim da transação.

    Raises:
        EntityNotFoundError: Se pet não existe ou é de outro abrigo
    """
    pet = pet_repo.get_for_update(pet_id)
    if not pet or not pet.belongs_to(shelter_id):
        raise EntityNotFoundError(
            f"Pet {pet_id} não encontrado",
            entity_type="Pet",
            entity_id=pet_id
        )
    return pet


def _load_shelter_adoption(
    pet_repo: PetRepository,
    adoption_repo: AdoptionRepository,
    adoption_id: str,
    shelter_id: str,
) -> Tuple[AdoptionEntity, PetEntity]:
    """
    Busca solicitação de um pet do abrigo, junto com o pet.

    O pet é travado antes da leitura definitiva da solicitação, então
    o status lido não muda até o commit.

    Raises:
        EntityNotFoundError: Se solicitação não existe ou o pet é de outro abrigo
    """
    adoption = adoption_repo.get_by_id(adoption_id)
    pet = pet_repo.get_for_update(adoption.pet_id) if adoption else None
    if pet:
        adoption = adoption_repo.get_by_id(adoption_id)
    if not adoption or not pet or not pet.belongs_to(shelter_id):
        raise EntityNotFoundError(
            f"Solicitação {adoption_id} não encontrada",
            entity_type="Adoption",
            entity_id=adoption_id
        )
    return adoption, pet


def _reject_pending_requests(
    adoption_repo: AdoptionRepository,
    uow: UnitOfWork,
    pet: PetEntity,
    shelter_id: str,
    skip_id: Optional[str] = None,
) -> List[AdoptionEntity]:
    """Rejeita solicitações pendentes de um pet que deixou de estar disponível."""
    closed = []
    for other in adoption_repo.list_by_pet(pet.id, statuses=[AdoptionStatus.PENDING]):
        if other.id == skip_id:
            continue
        other.reject(UNAVAILABLE_RESPONSE)
        adoption_repo.save(other)
        uow.publish_event(
            AdoptionRejectedEvent(
                aggregate_id=other.id,
                actor_type=SHELTER,
                actor_id=shelter_id,
                pet_id=pet.id,
                client_id=other.client_id,
                reason="pet_unavailable",
            )
        )
        closed.append(other)
    return closed


# =============================================================================
# PETS
# =============================================================================

class AddPetService:
    """
    Use Case: Abrigo cadastra um pet.

    Fluxo:
    1. Converter sexo para enum
    2. Criar entidade (validações na entidade)
    3. Persistir e disparar PetAdded

    Example:
        service = AddPetService(pet_repo, uow)
        output = service.execute(AddPetInputDTO(
            shelter_id="abc",
            name="Rex",
            species="Dog",
        ))
    """

    def __init__(self, pet_repo: PetRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.uow = uow

    def execute(self, input_dto: AddPetInputDTO) -> PetOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
        """
        try:
            gender = PetGender.from_string(input_dto.gender)
        except ValueError:
            raise ValidationError(f"Sexo inválido: {input_dto.gender}", field="gender")

        with self.uow:
            pet = PetEntity.create(
                shelter_id=input_dto.shelter_id,
                name=input_dto.name,
                species=input_dto.species,
                breed=input_dto.breed,
                age=input_dto.age,
                gender=gender,
                description=input_dto.description,
                pet_image=input_dto.pet_image,
            )

            self.pet_repo.save(pet)

            self.uow.publish_event(
                PetAddedEvent(
                    aggregate_id=pet.id,
                    actor_type=SHELTER,
                    actor_id=pet.shelter_id,
                    shelter_id=pet.shelter_id,
                    name=pet.name,
                    species=pet.species,
                )
            )

        return PetOutputDTO.from_entity(pet)


class DeletePetService:
    """
    Use Case: Abrigo remove um pet.

    Regras:
    - Apenas o abrigo dono pode remover
    - Pet em espera (adoção aprovada) não pode ser removido
    - Solicitações do pet são removidas junto
    """

    def __init__(self, pet_repo: PetRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.uow = uow

    def execute(self, input_dto: PetActionInputDTO) -> None:
        """
        Raises:
            EntityNotFoundError: Se pet não existe ou é de outro abrigo
            BusinessRuleViolationError: Se pet está em espera
        """
        with self.uow:
            pet = _load_shelter_pet(self.pet_repo, input_dto.pet_id, input_dto.shelter_id)
            pet.ensure_deletable()

            self.pet_repo.delete(pet.id)

            self.uow.publish_event(
                PetDeletedEvent(
                    aggregate_id=pet.id,
                    actor_type=SHELTER,
                    actor_id=input_dto.shelter_id,
                    shelter_id=pet.shelter_id,
                    name=pet.name,
                )
            )


class MarkPetAdoptedService:
    """
    Use Case: Abrigo marca pet como adotado sem passar pelo fluxo de aprovação.

    Regras:
    - Apenas pets disponíveis (pet em espera deve ser finalizado
      pela adoção aprovada)
    - Solicitações pendentes do pet são rejeitadas
    """

    def __init__(self, pet_repo: PetRepository, adoption_repo: AdoptionRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.uow = uow

    def execute(self, input_dto: PetActionInputDTO) -> PetOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se pet não existe ou é de outro abrigo
            BusinessRuleViolationError: Se pet não está disponível
        """
        with self.uow:
            pet = _load_shelter_pet(self.pet_repo, input_dto.pet_id, input_dto.shelter_id)

            if not pet.is_available:
                raise BusinessRuleViolationError(
                    f"Apenas pets disponíveis podem ser marcados como adotados ({pet.status.value})",
                    rule="apenas_disponivel_pode_ser_marcado"
                )

            pet.mark_adopted()
            self.pet_repo.save(pet)

            self.uow.publish_event(
                PetAdoptedEvent(
                    aggregate_id=pet.id,
                    actor_type=SHELTER,
                    actor_id=input_dto.shelter_id,
                    shelter_id=pet.shelter_id,
                )
            )

            _reject_pending_requests(self.adoption_repo, self.uow, pet, input_dto.shelter_id)

        return PetOutputDTO.from_entity(pet)


class ListShelterPetsService:
    """Use Case: Listar pets do abrigo (todos os status)."""

    def __init__(self, pet_repo: PetRepository):
        self.pet_repo = pet_repo

    def execute(self, shelter_id: str) -> List[PetOutputDTO]:
        return [PetOutputDTO.from_entity(p) for p in self.pet_repo.list_by_shelter(shelter_id)]


class ListAvailablePetsService:
    """
    Use Case: Vitrine de pets disponíveis.

    Busca textual opcional em nome, espécie e raça.
    """

    SEARCH_MAX_LENGTH = 100

    def __init__(self, query_repo: AdoptionQueryRepository):
        self.query_repo = query_repo

    def execute(self, search: Optional[str] = None) -> List[AvailablePetDTO]:
        """
        Raises:
            ValidationError: Se a busca passar de SEARCH_MAX_LENGTH caracteres
        """
        term = (search or "").strip()
        if len(term) > self.SEARCH_MAX_LENGTH:
            raise ValidationError(
                f"Busca deve ter no máximo {self.SEARCH_MAX_LENGTH} caracteres",
                field="search"
            )
        return self.query_repo.list_available_pets(term or None)


# =============================================================================
# SOLICITAÇÕES DE ADOÇÃO
# =============================================================================

class RequestAdoptionService:
    """
    Use Case: Cliente solicita adoção de um pet.

    Fluxo:
    1. Buscar pet
    2. Recusar pedido repetido (mesmo cliente, mesmo pet)
    3. Criar solicitação PENDING (pet continua disponível)
    4. Persistir e disparar AdoptionRequested
    """

    def __init__(self, pet_repo: PetRepository, adoption_repo: AdoptionRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.uow = uow

    def execute(self, input_dto: RequestAdoptionInputDTO) -> AdoptionOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se pet não existe
            BusinessRuleViolationError: Se pet indisponível ou pedido repetido
        """
        with self.uow:
            pet = self.pet_repo.get_for_update(input_dto.pet_id)
            if not pet:
                raise EntityNotFoundError(
                    f"Pet {input_dto.pet_id} não encontrado",
                    entity_type="Pet",
                    entity_id=input_dto.pet_id
                )

            if self.adoption_repo.exists_for_client_and_pet(input_dto.client_id, pet.id):
                raise BusinessRuleViolationError(
                    f"Você já solicitou a adoção de {pet.name}",
                    rule="solicitacao_duplicada"
                )

            adoption = AdoptionEntity.request(
                pet=pet,
                client_id=input_dto.client_id,
                client_reason=input_dto.client_reason,
            )

            self.adoption_repo.save(adoption)

            self.uow.publish_event(
                AdoptionRequestedEvent(
                    aggregate_id=adoption.id,
                    actor_type=CLIENT,
                    actor_id=input_dto.client_id,
                    pet_id=pet.id,
                    client_id=input_dto.client_id,
                )
            )

        return AdoptionOutputDTO.from_entity(adoption)


class CancelAdoptionService:
    """
    Use Case: Cliente cancela solicitação pendente.

    Solicitação de outro cliente é tratada como inexistente.
    """

    def __init__(self, pet_repo: PetRepository, adoption_repo: AdoptionRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.uow = uow

    def execute(self, input_dto: CancelAdoptionInputDTO) -> AdoptionOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se solicitação não existe ou é de outro cliente
            BusinessRuleViolationError: Se não está pendente
        """
        with self.uow:
            adoption = self.adoption_repo.get_by_id(input_dto.adoption_id)
            if adoption and self.pet_repo.get_for_update(adoption.pet_id):
                adoption = self.adoption_repo.get_by_id(input_dto.adoption_id)
            if not adoption or not adoption.is_requested_by(input_dto.client_id):
                raise EntityNotFoundError(
                    f"Solicitação {input_dto.adoption_id} não encontrada",
                    entity_type="Adoption",
                    entity_id=input_dto.adoption_id
                )

            adoption.cancel(input_dto.client_id)
            self.adoption_repo.save(adoption)

            self.uow.publish_event(
                AdoptionCancelledEvent(
                    aggregate_id=adoption.id,
                    actor_type=CLIENT,
                    actor_id=input_dto.client_id,
                    pet_id=adoption.pet_id,
                    client_id=adoption.client_id,
                )
            )

        return AdoptionOutputDTO.from_entity(adoption)


class ApproveAdoptionService:
    """
    Use Case: Abrigo aprova solicitação.

    Fluxo:
    1. Buscar solicitação e pet (pet deve ser do abrigo)
    2. Aprovar: solicitação APPROVED, pet ON_HOLD
    3. Persistir os dois no mesmo UoW
    4. Disparar AdoptionApproved e PetPlacedOnHold

    As demais solicitações pendentes continuam pendentes: se a visita
    não der certo, o abrigo pode aprovar outra.
    """

    def __init__(self, pet_repo: PetRepository, adoption_repo: AdoptionRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.uow = uow

    def execute(self, input_dto: ApproveAdoptionInputDTO, today: Optional[date] = None) -> AdoptionOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se solicitação não existe ou é de outro abrigo
            BusinessRuleViolationError: Se não está pendente ou pet indisponível
        """
        with self.uow:
            adoption, pet = _load_shelter_adoption(
                self.pet_repo, self.adoption_repo,
                input_dto.adoption_id, input_dto.shelter_id,
            )

            adoption.approve(
                pet,
                shelter_response=input_dto.shelter_response,
                visit_date=input_dto.visit_date,
                approval_date=today,
            )

            self.adoption_repo.save(adoption)
            self.pet_repo.save(pet)

            self.uow.publish_event(
                AdoptionApprovedEvent(
                    aggregate_id=adoption.id,
                    actor_type=SHELTER,
                    actor_id=input_dto.shelter_id,
                    pet_id=pet.id,
                    client_id=adoption.client_id,
                    visit_date=adoption.visit_date.isoformat() if adoption.visit_date else None,
                )
            )
            self.uow.publish_event(
                PetPlacedOnHoldEvent(
                    aggregate_id=pet.id,
                    actor_type=SHELTER,
                    actor_id=input_dto.shelter_id,
                    shelter_id=pet.shelter_id,
                    adoption_id=adoption.id,
                )
            )

        return AdoptionOutputDTO.from_entity(adoption)


class RejectAdoptionService:
    """Use Case: Abrigo rejeita solicitação pendente."""

    def __init__(self, pet_repo: PetRepository, adoption_repo: AdoptionRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.uow = uow

    def execute(self, input_dto: RejectAdoptionInputDTO) -> AdoptionOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se solicitação não existe ou é de outro abrigo
            BusinessRuleViolationError: Se não está pendente
        """
        with self.uow:
            adoption, pet = _load_shelter_adoption(
                self.pet_repo, self.adoption_repo,
                input_dto.adoption_id, input_dto.shelter_id,
            )

            adoption.reject(input_dto.shelter_response)
            self.adoption_repo.save(adoption)

            self.uow.publish_event(
                AdoptionRejectedEvent(
                    aggregate_id=adoption.id,
                    actor_type=SHELTER,
                    actor_id=input_dto.shelter_id,
                    pet_id=pet.id,
                    client_id=adoption.client_id,
                )
            )

        return AdoptionOutputDTO.from_entity(adoption)


class FinalizeAdoptionService:
    """
    Use Case: Abrigo finaliza adoção aprovada.

    Resultados:
    - ADOPTED: solicitação COMPLETED, pet ADOPTED, demais
      solicitações pendentes do pet rejeitadas
    - RETURNED: solicitação REJECTED, pet volta a AVAILABLE
    """

    def __init__(self, pet_repo: PetRepository, adoption_repo: AdoptionRepository, uow: UnitOfWork):
        self.pet_repo = pet_repo
        self.adoption_repo = adoption_repo
        self.uow = uow

    def execute(self, input_dto: FinalizeAdoptionInputDTO) -> AdoptionOutputDTO:
        """
        Raises:
            ValidationError: Se resultado inválido
            EntityNotFoundError: Se solicitação não existe ou é de outro abrigo
            BusinessRuleViolationError: Se solicitação não está aprovada
        """
        try:
            outcome = FinalizeOutcome.from_string(input_dto.outcome)
        except ValueError:
            raise ValidationError(
                f"Resultado inválido: {input_dto.outcome}",
                field="outcome"
            )

        with self.uow:
            adoption, pet = _load_shelter_adoption(
                self.pet_repo, self.adoption_repo,
                input_dto.adoption_id, input_dto.shelter_id,
            )

            if outcome == FinalizeOutcome.ADOPTED:
                self._complete(adoption, pet, input_dto)
            else:
                self._return(adoption, pet, input_dto)

        return AdoptionOutputDTO.from_entity(adoption)

    def _complete(self, adoption: AdoptionEntity, pet: PetEntity, input_dto: FinalizeAdoptionInputDTO) -> None:
        adoption.complete(pet, completion_date=input_dto.completion_date)
        self.adoption_repo.save(adoption)
        self.pet_repo.save(pet)

        self.uow.publish_event(
            AdoptionCompletedEvent(
                aggregate_id=adoption.id,
                actor_type=SHELTER,
                actor_id=input_dto.shelter_id,
                pet_id=pet.id,
                client_id=adoption.client_id,
            )
        )
        self.uow.publish_event(
            PetAdoptedEvent(
                aggregate_id=pet.id,
                actor_type=SHELTER,
                actor_id=input_dto.shelter_id,
                shelter_id=pet.shelter_id,
                adoption_id=adoption.id,
            )
        )

        _reject_pending_requests(
            self.adoption_repo, self.uow, pet, input_dto.shelter_id, skip_id=adoption.id
        )

    def _return(self, adoption: AdoptionEntity, pet: PetEntity, input_dto: FinalizeAdoptionInputDTO) -> None:
        adoption.return_pet(pet)
        self.adoption_repo.save(adoption)
        self.pet_repo.save(pet)

        self.uow.publish_event(
            AdoptionRejectedEvent(
                aggregate_id=adoption.id,
                actor_type=SHELTER,
                actor_id=input_dto.shelter_id,
                pet_id=pet.id,
                client_id=adoption.client_id,
                reason="pet_returned",
            )
        )
        self.uow.publish_event(
            PetReleasedEvent(
                aggregate_id=pet.id,
                actor_type=SHELTER,
                actor_id=input_dto.shelter_id,
                shelter_id=pet.shelter_id,
                adoption_id=adoption.id,
            )
        )


# =============================================================================
# CONSULTAS DOS PAINÉIS
# =============================================================================

class ClientAdoptionHistoryService:
    """Use Case: Solicitações feitas pelo cliente, com pet e abrigo."""

    def __init__(self, query_repo: AdoptionQueryRepository):
        self.query_repo = query_repo

    def execute(self, client_id: str) -> List[ClientAdoptionViewDTO]:
        return self.query_repo.list_client_adoptions(client_id)


class ShelterAdoptionRequestsService:
    """Use Case: Solicitações recebidas pelo abrigo, com contato do cliente."""

    def __init__(self, query_repo: AdoptionQueryRepository):
        self.query_repo = query_repo

    def execute(self, shelter_id: str) -> List[ShelterAdoptionViewDTO]:
        return self.query_repo.list_shelter_adoptions(shelter_id)
