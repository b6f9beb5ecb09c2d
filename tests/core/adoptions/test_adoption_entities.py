"""
Testes Unitários para Entidades do Domínio de Adoções.

Coverage:
- PetEntity: criação, validações, transições de status, busca
- AdoptionEntity: solicitação, aprovação, rejeição, cancelamento,
  conclusão e devolução
- Enums: conversão a partir de texto
"""

from datetime import date

import pytest

from src.core.adoptions.entities import (
    PetEntity,
    PetStatus,
    PetGender,
    AdoptionEntity,
    AdoptionStatus,
    FinalizeOutcome,
)
from src.core.shared.exceptions import ValidationError, BusinessRuleViolationError


@pytest.fixture
def pet():
    return PetEntity.create(shelter_id="shelter-1", name="Rex", species="Dog", breed="Labrador", age=3)


@pytest.fixture
def adoption(pet):
    return AdoptionEntity.request(pet, client_id="client-1", client_reason="Tenho quintal")


class TestEnums:

    @pytest.mark.parametrize("value,expected", [
        ("Hold", PetStatus.ON_HOLD),
        ("on_hold", PetStatus.ON_HOLD),
        ("available", PetStatus.AVAILABLE),
        ("ADOPTED", PetStatus.ADOPTED),
    ])
    def test_pet_status_from_string(self, value, expected):
        assert PetStatus.from_string(value) == expected

    def test_genero_vazio_vira_desconhecido(self):
        assert PetGender.from_string("") == PetGender.UNKNOWN

    def test_resultado_devolucao(self):
        """'Available' significa devolver o pet ao abrigo."""
        assert FinalizeOutcome.from_string("Available") == FinalizeOutcome.RETURNED
        assert FinalizeOutcome.from_string("adopted") == FinalizeOutcome.ADOPTED

    def test_status_invalido(self):
        with pytest.raises(ValueError):
            AdoptionStatus.from_string("Talvez")

    def test_status_aberto(self):
        assert AdoptionStatus.PENDING.is_open
        assert AdoptionStatus.APPROVED.is_open
        assert AdoptionStatus.COMPLETED.is_final


class TestPetEntity:

    def test_create_nasce_disponivel(self, pet):
        assert pet.status == PetStatus.AVAILABLE
        assert pet.arrival_date == date.today()
        assert pet.is_available

    def test_create_sem_nome(self):
        with pytest.raises(ValidationError) as exc:
            PetEntity.create(shelter_id="s", name="  ", species="Dog")
        assert exc.value.field == "name"

    def test_create_sem_especie(self):
        with pytest.raises(ValidationError) as exc:
            PetEntity.create(shelter_id="s", name="Rex", species="")
        assert exc.value.field == "species"

    @pytest.mark.parametrize("age", [-1, 41, "velho"])
    def test_idade_invalida(self, age):
        with pytest.raises(ValidationError) as exc:
            PetEntity.create(shelter_id="s", name="Rex", species="Dog", age=age)
        assert exc.value.field == "age"

    def test_idade_texto_numerico(self):
        assert PetEntity.create(shelter_id="s", name="Rex", species="Dog", age="4").age == 4

    def test_imagem_precisa_ser_url(self):
        with pytest.raises(ValidationError):
            PetEntity.create(shelter_id="s", name="Rex", species="Dog", pet_image="foto.png")

    def test_fluxo_espera_e_adocao(self, pet):
        pet.place_on_hold()
        assert pet.status == PetStatus.ON_HOLD

        pet.mark_adopted()
        assert pet.status == PetStatus.ADOPTED

    def test_devolucao_volta_a_disponivel(self, pet):
        pet.place_on_hold()
        pet.release()
        assert pet.is_available

    def test_adotado_e_final(self, pet):
        pet.mark_adopted()

        with pytest.raises(BusinessRuleViolationError):
            pet.mark_adopted()
        with pytest.raises(BusinessRuleViolationError):
            pet.release()
        with pytest.raises(BusinessRuleViolationError):
            pet.place_on_hold()

    def test_nao_remove_pet_em_espera(self, pet):
        pet.place_on_hold()
        with pytest.raises(BusinessRuleViolationError) as exc:
            pet.ensure_deletable()
        assert exc.value.rule == "pet_em_espera"

    @pytest.mark.parametrize("term,expected", [
        ("rex", True),
        ("DOG", True),
        ("labra", True),
        ("", True),
        ("gato", False),
    ])
    def test_busca(self, pet, term, expected):
        assert pet.matches(term) is expected


class TestAdoptionEntity:

    def test_request_pendente_e_pet_continua_disponivel(self, pet, adoption):
        assert adoption.status == AdoptionStatus.PENDING
        assert adoption.pet_id == pet.id
        assert adoption.request_date == date.today()
        assert pet.is_available

    def test_request_pet_indisponivel(self, pet):
        pet.place_on_hold()
        with pytest.raises(BusinessRuleViolationError) as exc:
            AdoptionEntity.request(pet, client_id="client-2")
        assert exc.value.rule == "pet_indisponivel"

    def test_request_motivo_longo(self, pet):
        with pytest.raises(ValidationError):
            AdoptionEntity.request(pet, client_id="c", client_reason="x" * 1001)

    def test_approve_coloca_pet_em_espera(self, pet, adoption):
        adoption.approve(pet, shelter_response="Venha sábado", visit_date=date(2024, 5, 4),
                         approval_date=date(2024, 5, 1))

        assert adoption.status == AdoptionStatus.APPROVED
        assert adoption.visit_date == date(2024, 5, 4)
        assert adoption.approval_date == date(2024, 5, 1)
        assert adoption.shelter_response == "Venha sábado"
        assert pet.status == PetStatus.ON_HOLD

    def test_approve_segunda_solicitacao_falha(self, pet, adoption):
        other = AdoptionEntity.request(pet, client_id="client-2")
        adoption.approve(pet)

        with pytest.raises(BusinessRuleViolationError):
            other.approve(pet)
        assert other.status == AdoptionStatus.PENDING

    def test_approve_pet_divergente(self, adoption):
        other_pet = PetEntity.create(shelter_id="shelter-1", name="Mia", species="Cat")
        with pytest.raises(BusinessRuleViolationError) as exc:
            adoption.approve(other_pet)
        assert exc.value.rule == "pet_divergente"

    def test_reject(self, adoption):
        adoption.reject("Já adotado")
        assert adoption.status == AdoptionStatus.REJECTED
        assert adoption.shelter_response == "Já adotado"

    def test_reject_aprovada_falha(self, pet, adoption):
        adoption.approve(pet)
        with pytest.raises(BusinessRuleViolationError):
            adoption.reject()

    def test_cancel_pelo_solicitante(self, adoption):
        adoption.cancel("client-1")
        assert adoption.status == AdoptionStatus.CANCELLED

    def test_cancel_por_outro_cliente(self, adoption):
        with pytest.raises(BusinessRuleViolationError) as exc:
            adoption.cancel("client-2")
        assert exc.value.rule == "apenas_solicitante_pode_cancelar"

    def test_cancel_aprovada_falha(self, pet, adoption):
        adoption.approve(pet)
        with pytest.raises(BusinessRuleViolationError):
            adoption.cancel("client-1")

    def test_complete(self, pet, adoption):
        adoption.approve(pet)
        adoption.complete(pet, completion_date=date(2024, 6, 1))

        assert adoption.status == AdoptionStatus.COMPLETED
        assert adoption.completion_date == date(2024, 6, 1)
        assert pet.status == PetStatus.ADOPTED

    def test_complete_sem_aprovacao(self, pet, adoption):
        with pytest.raises(BusinessRuleViolationError):
            adoption.complete(pet)
        assert pet.is_available

    def test_return_pet(self, pet, adoption):
        adoption.approve(pet)
        adoption.return_pet(pet)

        assert adoption.status == AdoptionStatus.REJECTED
        assert pet.is_available

    @pytest.mark.parametrize("status", [
        AdoptionStatus.REJECTED,
        AdoptionStatus.COMPLETED,
        AdoptionStatus.CANCELLED,
    ])
    def test_estados_finais(self, pet, adoption, status):
        adoption.status = status
        with pytest.raises(BusinessRuleViolationError):
            adoption.approve(pet)
        with pytest.raises(BusinessRuleViolationError):
            adoption.reject()
