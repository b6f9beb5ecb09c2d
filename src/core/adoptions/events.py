"""
Domain Events do Domínio de Adoções.

Eventos de pet (tabela "pet"):
- PetAddedEvent: INSERT
- PetDeletedEvent: DELETE
- PetPlacedOnHoldEvent: HOLD
- PetAdoptedEvent: ADOPTED
- PetReleasedEvent: AVAILABLE

Eventos de solicitação (tabela "adoption"):
- AdoptionRequestedEvent: REQUEST
- AdoptionCancelledEvent: CANCEL
- AdoptionApprovedEvent: APPROVE
- AdoptionRejectedEvent: REJECT
- AdoptionCompletedEvent: COMPLETE

Uso:
    with uow:
        adoption.approve(pet, ...)
        adoption_repo.save(adoption)
        pet_repo.save(pet)
        uow.publish_event(AdoptionApprovedEvent(aggregate_id=adoption.id, ...))
        uow.publish_event(PetPlacedOnHoldEvent(aggregate_id=pet.id, ...))
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.events import DomainEvent


# =============================================================================
# EVENTOS DE PET
# =============================================================================

@dataclass
class _PetEvent(DomainEvent):
    shelter_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "pet"


@dataclass
class PetAddedEvent(_PetEvent):
    """
    Evento: Abrigo cadastrou um pet.

    Attributes:
        name: Nome do pet
        species: Espécie
    """

    name: str = ""
    species: str = ""

    @property
    def action_type(self) -> str:
        return "INSERT"


@dataclass
class PetDeletedEvent(_PetEvent):
    name: str = ""

    @property
    def action_type(self) -> str:
        return "DELETE"


@dataclass
class PetPlacedOnHoldEvent(_PetEvent):
    """Evento: Pet reservado por uma adoção aprovada."""

    adoption_id: str = ""

    @property
    def action_type(self) -> str:
        return "HOLD"


@dataclass
class PetAdoptedEvent(_PetEvent):
    """
    Evento: Pet foi adotado.

    adoption_id fica vazio quando o abrigo marca o pet como adotado
    sem uma solicitação pelo sistema.
    """

    adoption_id: Optional[str] = None

    @property
    def action_type(self) -> str:
        return "ADOPTED"


@dataclass
class PetReleasedEvent(_PetEvent):
    """Evento: Pet voltou a ficar disponível após adoção não concluída."""

    adoption_id: str = ""

    @property
    def action_type(self) -> str:
        return "AVAILABLE"


# =============================================================================
# EVENTOS DE SOLICITAÇÃO DE ADOÇÃO
# =============================================================================

@dataclass
class _AdoptionEvent(DomainEvent):
    pet_id: str = ""
    client_id: str = ""

    @property
    def aggregate_type(self) -> str:
        return "adoption"


@dataclass
class AdoptionRequestedEvent(_AdoptionEvent):
    """Evento: Cliente solicitou adoção."""

    @property
    def action_type(self) -> str:
        return "REQUEST"


@dataclass
class AdoptionCancelledEvent(_AdoptionEvent):
    @property
    def action_type(self) -> str:
        return "CANCEL"


@dataclass
class AdoptionApprovedEvent(_AdoptionEvent):
    """
    Evento: Abrigo aprovou solicitação.

    Attributes:
        visit_date: Data combinada para visita (ISO)
    """

    visit_date: Optional[str] = None

    @property
    def action_type(self) -> str:
        return "APPROVE"


@dataclass
class AdoptionRejectedEvent(_AdoptionEvent):
    """
    Evento: Solicitação rejeitada.

    Attributes:
        reason: Por que foi rejeitada ("shelter_decision", "pet_returned"
            ou "pet_unavailable")
    """

    reason: str = "shelter_decision"

    @property
    def action_type(self) -> str:
        return "REJECT"


@dataclass
class AdoptionCompletedEvent(_AdoptionEvent):
    @property
    def action_type(self) -> str:
        return "COMPLETE"
