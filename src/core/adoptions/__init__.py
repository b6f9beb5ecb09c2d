"""
Domínio de Adoções - Pets e Solicitações.

Este módulo contém o ciclo de vida das solicitações de adoção:
- Entidades (PetEntity, AdoptionEntity e seus status)
- Use Cases (pedir, cancelar, aprovar, rejeitar, finalizar)
- Domain Events (um por linha gravada no log de ações)
- DTOs e Ports (repositórios de escrita e de consulta)

Características do Domínio:
- Pet e solicitação mudam de estado juntos, na mesma transação
- Transições de status controladas por tabela nas entidades
- Cada abrigo só enxerga e altera os próprios pets
"""

from .entities import (
    PetEntity,
    PetStatus,
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
)
from .ports import PetRepository, AdoptionRepository, AdoptionQueryRepository
from .use_cases import (
    AddPetService,
    DeletePetService,
    MarkPetAdoptedService,
    ListShelterPetsService,
    ListAvailablePetsService,
    RequestAdoptionService,
    CancelAdoptionService,
    ApproveAdoptionService,
    RejectAdoptionService,
    FinalizeAdoptionService,
    ClientAdoptionHistoryService,
    ShelterAdoptionRequestsService,
)

__all__ = [
    # Entities
    "PetEntity",
    "PetStatus",
    "PetGender",
    "AdoptionEntity",
    "AdoptionStatus",
    "FinalizeOutcome",
    # DTOs
    "AddPetInputDTO",
    "PetActionInputDTO",
    "RequestAdoptionInputDTO",
    "CancelAdoptionInputDTO",
    "ApproveAdoptionInputDTO",
    "RejectAdoptionInputDTO",
    "FinalizeAdoptionInputDTO",
    "PetOutputDTO",
    "AdoptionOutputDTO",
    # Ports
    "PetRepository",
    "AdoptionRepository",
    "AdoptionQueryRepository",
    # Use Cases
    "AddPetService",
    "DeletePetService",
    "MarkPetAdoptedService",
    "ListShelterPetsService",
    "ListAvailablePetsService",
    "RequestAdoptionService",
    "CancelAdoptionService",
    "ApproveAdoptionService",
    "RejectAdoptionService",
    "FinalizeAdoptionService",
    "ClientAdoptionHistoryService",
    "ShelterAdoptionRequestsService",
]
