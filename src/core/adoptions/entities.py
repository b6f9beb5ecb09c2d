"""
Entidades do Domínio de Adoções.

Este módulo define os pets e as solicitações de adoção, e mantém
os dois estados sincronizados.

Entidades:
- PetEntity: Pet cadastrado por um abrigo
- AdoptionEntity: Solicitação de adoção de um cliente para um pet
- PetStatus / AdoptionStatus: Estados possíveis
- FinalizeOutcome: Decisão do abrigo após a visita

Regras de Negócio Encapsuladas:
- Só se solicita adoção de pet disponível
- Aprovar uma solicitação coloca o pet em espera (Hold)
- Concluir a adoção marca o pet como adotado
- Devolver o pet ao abrigo o torna disponível de novo
- Transições de status controladas por tabela
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional
import uuid

from src.core.shared.exceptions import (
    ValidationError,
    BusinessRuleViolationError,
)


def _from_string(enum_cls, value: str, label: str):
    """Busca membro do enum pelo nome ou pelo valor, sem diferenciar maiúsculas."""
    text = str(value or "").strip()

    try:
        return enum_cls[text.upper().replace(" ", "_")]
    except KeyError:
        pass

    for member in enum_cls:
        if member.value.lower() == text.lower():
            return member

    raise ValueError(f"{label} inválido: {value}")


class PetStatus(Enum):
    """
    Estados possíveis de um pet.

    Fluxo de Estados:
        AVAILABLE ──aprovação──▶ ON_HOLD ──conclusão──▶ ADOPTED
            ▲                       │
            └──────devolução────────┘

        AVAILABLE ──marcado como adotado──▶ ADOPTED
    """

    AVAILABLE = "Available"
    ON_HOLD = "Hold"
    ADOPTED = "Adopted"

    @classmethod
    def from_string(cls, value: str) -> "PetStatus":
        return _from_string(cls, value, "Status do pet")


class PetGender(Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"

    @classmethod
    def from_string(cls, value: str) -> "PetGender":
        if not value:
            return cls.UNKNOWN
        return _from_string(cls, value, "Sexo")


class AdoptionStatus(Enum):
    """
    Estados de uma solicitação de adoção.

    Fluxo de Estados:
        PENDING ──aprovar──▶ APPROVED ──concluir──▶ COMPLETED
           │                    └─────devolver────▶ REJECTED
           ├──rejeitar──▶ REJECTED
           └──cancelar (cliente)──▶ CANCELLED
    """

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @property
    def is_open(self) -> bool:
        """Solicitação ainda aguarda decisão do abrigo."""
        return self in (AdoptionStatus.PENDING, AdoptionStatus.APPROVED)

    @property
    def is_final(self) -> bool:
        return not self.is_open

    @classmethod
    def from_string(cls, value: str) -> "AdoptionStatus":
        return _from_string(cls, value, "Status da adoção")


class FinalizeOutcome(Enum):
    """
    Decisão do abrigo ao finalizar uma adoção aprovada.

    ADOPTED: pet foi para a nova família
    RETURNED: pet volta a ficar disponível
    """

    ADOPTED = "Adopted"
    RETURNED = "Available"

    @classmethod
    def from_string(cls, value: str) -> "FinalizeOutcome":
        return _from_string(cls, value, "Resultado")


@dataclass
class PetEntity:
    """
    Entidade de Domínio: Pet.

    Invariantes:
    - Nome e espécie obrigatórios
    - Idade entre 0 e 40 anos (quando informada)
    - Pet sempre pertence a um abrigo
    - Mudanças de status seguem o fluxo de PetStatus

    Example:
        pet = PetEntity.create(
            shelter_id=shelter.id,
            name="Rex",
            species="Dog",
            breed="Vira-lata",
            age=3,
        )
        pet.place_on_hold()
        pet.mark_adopted()
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    shelter_id: str = ""

    name: str = ""
    species: str = ""
    breed: str = ""
    age: Optional[int] = None
    gender: PetGender = field(default=PetGender.UNKNOWN)
    description: str = ""
    pet_image: str = ""

    status: PetStatus = field(default=PetStatus.AVAILABLE)
    arrival_date: date = field(default_factory=date.today)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    NAME_MAX_LENGTH: int = 100
    SPECIES_MAX_LENGTH: int = 50
    BREED_MAX_LENGTH: int = 100
    DESCRIPTION_MAX_LENGTH: int = 2000
    IMAGE_MAX_LENGTH: int = 500
    AGE_MAX: int = 40

    _TRANSITIONS = {
        PetStatus.AVAILABLE: (PetStatus.ON_HOLD, PetStatus.ADOPTED),
        PetStatus.ON_HOLD: (PetStatus.AVAILABLE, PetStatus.ADOPTED),
        PetStatus.ADOPTED: (),
    }

    @classmethod
    def create(
        cls,
        shelter_id: str,
        name: str,
        species: str,
        breed: str = "",
        age: Optional[int] = None,
        gender: PetGender = PetGender.UNKNOWN,
        description: str = "",
        pet_image: str = "",
        arrival_date: Optional[date] = None,
    ) -> "PetEntity":
        """
        Factory method para cadastrar pet com validações.

        O pet nasce disponível, com data de chegada igual a hoje
        quando não informada.

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        if not shelter_id:
            raise ValidationError("Abrigo é obrigatório", field="shelter_id")

        return cls(
            shelter_id=shelter_id,
            name=cls._required(name, "name", "Nome do pet", cls.NAME_MAX_LENGTH),
            species=cls._required(species, "species", "Espécie", cls.SPECIES_MAX_LENGTH),
            breed=cls._optional(breed, "breed", "Raça", cls.BREED_MAX_LENGTH),
            age=cls._validate_age(age),
            gender=gender,
            description=cls._optional(
                description, "description", "Descrição", cls.DESCRIPTION_MAX_LENGTH
            ),
            pet_image=cls._validate_image(pet_image),
            status=PetStatus.AVAILABLE,
            arrival_date=arrival_date or date.today(),
        )

    @staticmethod
    def _required(value: str, field_name: str, label: str, max_length: int) -> str:
        if not value or not value.strip():
            raise ValidationError(f"{label} é obrigatório", field=field_name)
        cleaned = value.strip()
        if len(cleaned) > max_length:
            raise ValidationError(
                f"{label} deve ter no máximo {max_length} caracteres",
                field=field_name
            )
        return cleaned

    @staticmethod
    def _optional(value: str, field_name: str, label: str, max_length: int) -> str:
        cleaned = (value or "").strip()
        if len(cleaned) > max_length:
            raise ValidationError(
                f"{label} deve ter no máximo {max_length} caracteres",
                field=field_name
            )
        return cleaned

    @classmethod
    def _validate_age(cls, age: Optional[int]) -> Optional[int]:
        if age is None or age == "":
            return None
        try:
            age = int(age)
        except (TypeError, ValueError):
            raise ValidationError(f"Idade inválida: {age}", field="age")
        if age < 0 or age > cls.AGE_MAX:
            raise ValidationError(
                f"Idade deve estar entre 0 e {cls.AGE_MAX} anos",
                field="age"
            )
        return age

    @classmethod
    def _validate_image(cls, pet_image: str) -> str:
        cleaned = (pet_image or "").strip()
        if not cleaned:
            return ""
        if len(cleaned) > cls.IMAGE_MAX_LENGTH:
            raise ValidationError("URL da imagem muito longa", field="pet_image")
        if not cleaned.startswith(("http://", "https://", "/")):
            raise ValidationError(
                "Imagem deve ser uma URL http(s) ou um caminho absoluto",
                field="pet_image"
            )
        return cleaned

    def _transition_to(self, new_status: PetStatus) -> None:
        if new_status not in self._TRANSITIONS[self.status]:
            raise BusinessRuleViolationError(
                f"Pet {self.name} não pode passar de {self.status.value} para {new_status.value}",
                rule="transicao_status_pet_invalida"
            )
        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)

    def place_on_hold(self) -> None:
        """
        Reserva o pet para uma adoção aprovada.

        Raises:
            BusinessRuleViolationError: Se pet não está disponível
        """
        if not self.is_available:
            raise BusinessRuleViolationError(
                f"Pet {self.name} não está disponível ({self.status.value})",
                rule="pet_indisponivel"
            )
        self._transition_to(PetStatus.ON_HOLD)

    def release(self) -> None:
        """Devolve pet em espera para a lista de disponíveis."""
        self._transition_to(PetStatus.AVAILABLE)

    def mark_adopted(self) -> None:
        """
        Marca pet como adotado.

        Raises:
            BusinessRuleViolationError: Se pet já foi adotado
        """
        if self.status == PetStatus.ADOPTED:
            raise BusinessRuleViolationError(
                f"Pet {self.name} já foi adotado",
                rule="pet_ja_adotado"
            )
        self._transition_to(PetStatus.ADOPTED)

    def ensure_deletable(self) -> None:
        """
        Verifica se o pet pode ser removido.

        Raises:
            BusinessRuleViolationError: Se há adoção aprovada em andamento
        """
        if self.status == PetStatus.ON_HOLD:
            raise BusinessRuleViolationError(
                "Não é possível remover um pet com adoção aprovada em andamento",
                rule="pet_em_espera"
            )

    def belongs_to(self, shelter_id: str) -> bool:
        return self.shelter_id == shelter_id

    def matches(self, search: Optional[str]) -> bool:
        """
        Busca textual sem diferenciar maiúsculas em nome, espécie e raça.

        Busca vazia casa com qualquer pet.
        """
        term = (search or "").strip().lower()
        if not term:
            return True
        return any(term in value.lower() for value in (self.name, self.species, self.breed))

    @property
    def is_available(self) -> bool:
        return self.status == PetStatus.AVAILABLE

    def __repr__(self) -> str:
        return (
            f"PetEntity("
            f"id={self.id[:8]}..., "
            f"name='{self.name}', "
            f"status={self.status.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PetEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class AdoptionEntity:
    """
    Entidade de Domínio: Solicitação de Adoção.

    Liga um cliente a um pet e acompanha a decisão do abrigo.
    Métodos que mexem no pet recebem a PetEntity correspondente
    para manter os dois estados consistentes.

    Invariantes:
    - Criada sempre como PENDING, para pet disponível
    - Apenas o cliente que pediu pode cancelar
    - Aprovação exige pet disponível e o coloca em espera
    - Conclusão e devolução só a partir de APPROVED

    Example:
        adoption = AdoptionEntity.request(pet, client_id="c1", client_reason="Tenho quintal")
        adoption.approve(pet, shelter_response="Venha no sábado", visit_date=date(2024, 5, 4))
        adoption.complete(pet)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    pet_id: str = ""
    client_id: str = ""

    status: AdoptionStatus = field(default=AdoptionStatus.PENDING)
    client_reason: str = ""
    shelter_response: str = ""

    request_date: date = field(default_factory=date.today)
    visit_date: Optional[date] = None
    approval_date: Optional[date] = None
    completion_date: Optional[date] = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    REASON_MAX_LENGTH: int = 1000
    RESPONSE_MAX_LENGTH: int = 1000

    _TRANSITIONS = {
        AdoptionStatus.PENDING: (
            AdoptionStatus.APPROVED,
            AdoptionStatus.REJECTED,
            AdoptionStatus.CANCELLED,
        ),
        AdoptionStatus.APPROVED: (
            AdoptionStatus.COMPLETED,
            AdoptionStatus.REJECTED,
        ),
        AdoptionStatus.REJECTED: (),
        AdoptionStatus.COMPLETED: (),
        AdoptionStatus.CANCELLED: (),
    }

    @classmethod
    def request(cls, pet: PetEntity, client_id: str, client_reason: str = "") -> "AdoptionEntity":
        """
        Factory method para abrir solicitação de adoção.

        O pet continua disponível: vários clientes podem pedir o
        mesmo pet até que o abrigo aprove um deles.

        Raises:
            ValidationError: Se cliente ausente ou motivo longo demais
            BusinessRuleViolationError: Se pet não está disponível
        """
        if not client_id:
            raise ValidationError("Cliente é obrigatório", field="client_id")

        if not pet.is_available:
            raise BusinessRuleViolationError(
                f"Pet {pet.name} não está disponível para adoção",
                rule="pet_indisponivel"
            )

        return cls(
            pet_id=pet.id,
            client_id=client_id,
            client_reason=cls._clean_text(
                client_reason, "client_reason", "Motivo", cls.REASON_MAX_LENGTH
            ),
            status=AdoptionStatus.PENDING,
        )

    @staticmethod
    def _clean_text(value: Optional[str], field_name: str, label: str, max_length: int) -> str:
        cleaned = (value or "").strip()
        if len(cleaned) > max_length:
            raise ValidationError(
                f"{label} deve ter no máximo {max_length} caracteres",
                field=field_name
            )
        return cleaned

    def _transition_to(self, new_status: AdoptionStatus) -> None:
        if new_status not in self._TRANSITIONS[self.status]:
            raise BusinessRuleViolationError(
                f"Transição de {self.status.value} para {new_status.value} não é permitida",
                rule="transicao_status_adocao_invalida"
            )
        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)

    def _ensure_same_pet(self, pet: PetEntity) -> None:
        if pet.id != self.pet_id:
            raise BusinessRuleViolationError(
                "Pet informado não corresponde à solicitação",
                rule="pet_divergente"
            )

    def approve(
        self,
        pet: PetEntity,
        shelter_response: str = "",
        visit_date: Optional[date] = None,
        approval_date: Optional[date] = None,
    ) -> None:
        """
        Aprova a solicitação e reserva o pet.

        Raises:
            BusinessRuleViolationError: Se solicitação não está pendente
                ou pet não está disponível
        """
        self._ensure_same_pet(pet)
        response = self._clean_text(
            shelter_response, "shelter_response", "Resposta", self.RESPONSE_MAX_LENGTH
        )
        if self.status != AdoptionStatus.PENDING:
            raise BusinessRuleViolationError(
                f"Apenas solicitações pendentes podem ser aprovadas ({self.status.value})",
                rule="apenas_pendente_pode_aprovar"
            )

        pet.place_on_hold()
        self._transition_to(AdoptionStatus.APPROVED)
        self.shelter_response = response
        self.visit_date = visit_date
        self.approval_date = approval_date or date.today()

    def reject(self, shelter_response: str = "") -> None:
        """
        Rejeita solicitação pendente.

        Raises:
            BusinessRuleViolationError: Se solicitação não está pendente
        """
        response = self._clean_text(
            shelter_response, "shelter_response", "Resposta", self.RESPONSE_MAX_LENGTH
        )
        if self.status != AdoptionStatus.PENDING:
            raise BusinessRuleViolationError(
                f"Apenas solicitações pendentes podem ser rejeitadas ({self.status.value})",
                rule="apenas_pendente_pode_rejeitar"
            )
        self._transition_to(AdoptionStatus.REJECTED)
        if response:
            self.shelter_response = response

    def cancel(self, client_id: str) -> None:
        """
        Cancela solicitação a pedido do cliente.

        Raises:
            BusinessRuleViolationError: Se não é o dono ou não está pendente
        """
        if not self.is_requested_by(client_id):
            raise BusinessRuleViolationError(
                "Apenas o cliente que fez a solicitação pode cancelá-la",
                rule="apenas_solicitante_pode_cancelar"
            )
        if self.status != AdoptionStatus.PENDING:
            raise BusinessRuleViolationError(
                f"Apenas solicitações pendentes podem ser canceladas ({self.status.value})",
                rule="apenas_pendente_pode_cancelar"
            )
        self._transition_to(AdoptionStatus.CANCELLED)

    def complete(self, pet: PetEntity, completion_date: Optional[date] = None) -> None:
        """
        Conclui a adoção: pet vai para a nova família.

        Raises:
            BusinessRuleViolationError: Se solicitação não está aprovada
        """
        self._ensure_same_pet(pet)
        if self.status != AdoptionStatus.APPROVED:
            raise BusinessRuleViolationError(
                "Apenas adoções aprovadas podem ser concluídas",
                rule="apenas_aprovada_pode_concluir"
            )
        pet.mark_adopted()
        self._transition_to(AdoptionStatus.COMPLETED)
        self.completion_date = completion_date or date.today()

    def return_pet(self, pet: PetEntity) -> None:
        """
        Encerra adoção aprovada sem sucesso: pet volta a ficar disponível.

        Raises:
            BusinessRuleViolationError: Se solicitação não está aprovada
        """
        self._ensure_same_pet(pet)
        if self.status != AdoptionStatus.APPROVED:
            raise BusinessRuleViolationError(
                "Apenas adoções aprovadas podem ser encerradas com devolução",
                rule="apenas_aprovada_pode_devolver"
            )
        pet.release()
        self._transition_to(AdoptionStatus.REJECTED)

    def is_requested_by(self, client_id: str) -> bool:
        return self.client_id == client_id

    @property
    def is_pending(self) -> bool:
        return self.status == AdoptionStatus.PENDING

    def __repr__(self) -> str:
        return (
            f"AdoptionEntity("
            f"id={self.id[:8]}..., "
            f"pet_id={self.pet_id[:8]}..., "
            f"status={self.status.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdoptionEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
