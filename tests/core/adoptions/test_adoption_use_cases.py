"""
Testes Unitários para Use Cases do Domínio de Adoções.

Estratégia de Teste:
- Repositórios em memória (pets, solicitações, contas)
- InMemoryUnitOfWork gravando no log de ações em memória
- Verifica estado persistido, log e eventos publicados

Coverage:
- AddPetService, DeletePetService, MarkPetAdoptedService
- RequestAdoptionService, CancelAdoptionService
- ApproveAdoptionService, RejectAdoptionService, FinalizeAdoptionService
- Consultas: vitrine, histórico do cliente, pedidos do abrigo
"""

from datetime import date

import pytest

from src.core.accounts.entities import ClientEntity, ShelterEntity
from src.core.adoptions.use_cases import (
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
    UNAVAILABLE_RESPONSE,
)
from src.core.adoptions.dtos import (
    AddPetInputDTO,
    PetActionInputDTO,
    RequestAdoptionInputDTO,
    CancelAdoptionInputDTO,
    ApproveAdoptionInputDTO,
    RejectAdoptionInputDTO,
    FinalizeAdoptionInputDTO,
)
from src.core.adoptions.entities import AdoptionStatus, PetStatus
from src.core.audit.entities import ActionType, AuditTable
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


@pytest.fixture
def shelter(shelter_repo):
    shelter = ShelterEntity.register(
        shelter_name="Patinhas", email="ola@patinhas.org", password_hash="h", location="SP"
    )
    shelter_repo.save(shelter)
    return shelter


@pytest.fixture
def other_shelter(shelter_repo):
    shelter = ShelterEntity.register(shelter_name="Outro Abrigo", email="o@x.org", password_hash="h")
    shelter_repo.save(shelter)
    return shelter


@pytest.fixture
def maria(client_repo):
    client = ClientEntity.register(full_name="Maria Silva", email="maria@x.com", password_hash="h")
    client_repo.save(client)
    return client


@pytest.fixture
def joao(client_repo):
    client = ClientEntity.register(full_name="João Souza", email="joao@x.com", password_hash="h")
    client_repo.save(client)
    return client


@pytest.fixture
def add_pet(pet_repo, uow):
    return AddPetService(pet_repo, uow)


@pytest.fixture
def rex(add_pet, shelter):
    return add_pet.execute(
        AddPetInputDTO(shelter_id=shelter.id, name="Rex", species="Dog", breed="Labrador", age=3)
    )


@pytest.fixture
def request_adoption(pet_repo, adoption_repo, uow):
    return RequestAdoptionService(pet_repo, adoption_repo, uow)


@pytest.fixture
def approve(pet_repo, adoption_repo, uow):
    return ApproveAdoptionService(pet_repo, adoption_repo, uow)


@pytest.fixture
def finalize(pet_repo, adoption_repo, uow):
    return FinalizeAdoptionService(pet_repo, adoption_repo, uow)


@pytest.fixture
def cancel(pet_repo, adoption_repo, uow):
    return CancelAdoptionService(pet_repo, adoption_repo, uow)


@pytest.fixture
def maria_request(request_adoption, rex, maria):
    return request_adoption.execute(
        RequestAdoptionInputDTO(pet_id=rex.id, client_id=maria.id, client_reason="Tenho quintal")
    )


@pytest.fixture
def joao_request(request_adoption, rex, joao):
    return request_adoption.execute(RequestAdoptionInputDTO(pet_id=rex.id, client_id=joao.id))


def actions(log_repo, table):
    """Ações registradas para uma tabela, da mais antiga para a mais recente."""
    return [e.action_type for e in reversed(log_repo.list_recent(table_name=table))]


# =============================================================================
# Pets
# =============================================================================

class TestAddPetService:

    def test_cadastra_pet_disponivel(self, add_pet, shelter, pet_repo, log_repo):
        output = add_pet.execute(
            AddPetInputDTO(shelter_id=shelter.id, name="Mia", species="Cat", gender="female")
        )

        stored = pet_repo.get_by_id(output.id)
        assert stored.status == PetStatus.AVAILABLE
        assert output.gender == "Female"
        assert output.status == "Available"

        [entry] = log_repo.list_recent()
        assert entry.table_name == AuditTable.PET
        assert entry.action_type == ActionType.INSERT
        assert entry.actor_id == shelter.id

    def test_sexo_invalido(self, add_pet, shelter):
        with pytest.raises(ValidationError) as exc:
            add_pet.execute(AddPetInputDTO(shelter_id=shelter.id, name="Mia", species="Cat", gender="X"))
        assert exc.value.field == "gender"

    def test_dados_invalidos_nao_registram_log(self, add_pet, shelter, log_repo):
        with pytest.raises(ValidationError):
            add_pet.execute(AddPetInputDTO(shelter_id=shelter.id, name="", species="Cat"))
        assert log_repo.count() == 0


class TestDeletePetService:

    def test_remove_pet_e_solicitacoes(self, pet_repo, adoption_repo, uow, shelter, rex,
                                       maria_request, log_repo):
        DeletePetService(pet_repo, uow).execute(PetActionInputDTO(pet_id=rex.id, shelter_id=shelter.id))

        assert pet_repo.get_by_id(rex.id) is None
        assert adoption_repo.get_by_id(maria_request.id) is None
        assert actions(log_repo, AuditTable.PET) == [ActionType.INSERT, ActionType.DELETE]

    def test_pet_de_outro_abrigo(self, pet_repo, uow, other_shelter, rex):
        """Pet de outro abrigo é tratado como inexistente."""
        with pytest.raises(EntityNotFoundError):
            DeletePetService(pet_repo, uow).execute(
                PetActionInputDTO(pet_id=rex.id, shelter_id=other_shelter.id)
            )
        assert pet_repo.get_by_id(rex.id) is not None

    def test_pet_em_espera(self, pet_repo, uow, approve, shelter, rex, maria_request):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        with pytest.raises(BusinessRuleViolationError):
            DeletePetService(pet_repo, uow).execute(PetActionInputDTO(pet_id=rex.id, shelter_id=shelter.id))


class TestMarkPetAdoptedService:

    def test_marca_adotado_e_rejeita_pendentes(self, pet_repo, adoption_repo, uow, shelter, rex,
                                               maria_request, joao_request):
        output = MarkPetAdoptedService(pet_repo, adoption_repo, uow).execute(
            PetActionInputDTO(pet_id=rex.id, shelter_id=shelter.id)
        )

        assert output.status == "Adopted"
        for adoption_id in (maria_request.id, joao_request.id):
            adoption = adoption_repo.get_by_id(adoption_id)
            assert adoption.status == AdoptionStatus.REJECTED
            assert adoption.shelter_response == UNAVAILABLE_RESPONSE

    def test_pet_em_espera_nao_pode_ser_marcado(self, pet_repo, adoption_repo, uow, approve,
                                                shelter, rex, maria_request):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        with pytest.raises(BusinessRuleViolationError) as exc:
            MarkPetAdoptedService(pet_repo, adoption_repo, uow).execute(
                PetActionInputDTO(pet_id=rex.id, shelter_id=shelter.id)
            )
        assert exc.value.rule == "apenas_disponivel_pode_ser_marcado"


class TestListShelterPetsService:

    def test_lista_apenas_pets_do_abrigo(self, pet_repo, add_pet, shelter, other_shelter, rex):
        add_pet.execute(AddPetInputDTO(shelter_id=other_shelter.id, name="Mia", species="Cat"))

        pets = ListShelterPetsService(pet_repo).execute(shelter.id)

        assert [p.id for p in pets] == [rex.id]


# =============================================================================
# Solicitações
# =============================================================================

class TestRequestAdoptionService:

    def test_cria_pendente(self, maria_request, pet_repo, rex, log_repo, maria):
        assert maria_request.status == "Pending"
        assert maria_request.client_reason == "Tenho quintal"
        assert pet_repo.get_by_id(rex.id).is_available

        entry = log_repo.list_recent(table_name=AuditTable.ADOPTION)[0]
        assert entry.action_type == ActionType.REQUEST
        assert entry.actor_type == "client"
        assert entry.actor_id == maria.id
        assert entry.details["pet_id"] == rex.id

    def test_pedido_repetido(self, request_adoption, rex, maria, maria_request):
        with pytest.raises(BusinessRuleViolationError) as exc:
            request_adoption.execute(RequestAdoptionInputDTO(pet_id=rex.id, client_id=maria.id))
        assert exc.value.rule == "solicitacao_duplicada"

    def test_pedido_repetido_mesmo_apos_cancelar(self, request_adoption, cancel,
                                                 rex, maria, maria_request):
        cancel.execute(
            CancelAdoptionInputDTO(adoption_id=maria_request.id, client_id=maria.id)
        )
        with pytest.raises(BusinessRuleViolationError):
            request_adoption.execute(RequestAdoptionInputDTO(pet_id=rex.id, client_id=maria.id))

    def test_pet_inexistente(self, request_adoption, maria):
        with pytest.raises(EntityNotFoundError):
            request_adoption.execute(RequestAdoptionInputDTO(pet_id="nao-existe", client_id=maria.id))

    def test_varios_clientes_mesmo_pet(self, maria_request, joao_request, adoption_repo, rex):
        assert len(adoption_repo.list_by_pet(rex.id, statuses=[AdoptionStatus.PENDING])) == 2


class TestCancelAdoptionService:

    def test_cancela(self, cancel, maria, maria_request, log_repo):
        output = cancel.execute(
            CancelAdoptionInputDTO(adoption_id=maria_request.id, client_id=maria.id)
        )

        assert output.status == "Cancelled"
        assert actions(log_repo, AuditTable.ADOPTION)[-1] == ActionType.CANCEL

    def test_solicitacao_de_outro_cliente(self, cancel, joao, maria_request):
        with pytest.raises(EntityNotFoundError):
            cancel.execute(
                CancelAdoptionInputDTO(adoption_id=maria_request.id, client_id=joao.id)
            )

    def test_apos_aprovacao(self, cancel, approve, shelter, maria, maria_request):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        with pytest.raises(BusinessRuleViolationError):
            cancel.execute(
                CancelAdoptionInputDTO(adoption_id=maria_request.id, client_id=maria.id)
            )


class TestApproveAdoptionService:

    def test_aprova_e_coloca_pet_em_espera(self, approve, pet_repo, shelter, rex,
                                           maria_request, joao_request, adoption_repo, log_repo):
        output = approve.execute(
            ApproveAdoptionInputDTO(
                adoption_id=maria_request.id,
                shelter_id=shelter.id,
                shelter_response="Venha no sábado",
                visit_date=date(2024, 5, 4),
            ),
            today=date(2024, 5, 1),
        )

        assert output.status == "Approved"
        assert output.approval_date == date(2024, 5, 1)
        assert output.visit_date == date(2024, 5, 4)
        assert pet_repo.get_by_id(rex.id).status == PetStatus.ON_HOLD
        assert adoption_repo.get_by_id(joao_request.id).status == AdoptionStatus.PENDING

        assert actions(log_repo, AuditTable.PET)[-1] == ActionType.HOLD
        approve_entry = log_repo.list_recent(action_type=ActionType.APPROVE)[0]
        assert approve_entry.details["visit_date"] == "2024-05-04"

    def test_abrigo_errado(self, approve, other_shelter, maria_request, adoption_repo):
        with pytest.raises(EntityNotFoundError):
            approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=other_shelter.id))
        assert adoption_repo.get_by_id(maria_request.id).status == AdoptionStatus.PENDING

    def test_segunda_aprovacao_do_mesmo_pet(self, approve, shelter, maria_request, joao_request):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        with pytest.raises(BusinessRuleViolationError):
            approve.execute(ApproveAdoptionInputDTO(adoption_id=joao_request.id, shelter_id=shelter.id))

    def test_falha_nao_grava_log(self, approve, shelter, maria_request, joao_request, log_repo):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))
        before = log_repo.count()

        with pytest.raises(BusinessRuleViolationError):
            approve.execute(ApproveAdoptionInputDTO(adoption_id=joao_request.id, shelter_id=shelter.id))

        assert log_repo.count() == before


class TestRejectAdoptionService:

    def test_rejeita(self, pet_repo, adoption_repo, uow, shelter, rex, maria_request):
        output = RejectAdoptionService(pet_repo, adoption_repo, uow).execute(
            RejectAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id,
                                   shelter_response="Perfil não compatível")
        )

        assert output.status == "Rejected"
        assert output.shelter_response == "Perfil não compatível"
        assert pet_repo.get_by_id(rex.id).is_available

    def test_solicitacao_inexistente(self, pet_repo, adoption_repo, uow, shelter):
        with pytest.raises(EntityNotFoundError):
            RejectAdoptionService(pet_repo, adoption_repo, uow).execute(
                RejectAdoptionInputDTO(adoption_id="nao-existe", shelter_id=shelter.id)
            )


class TestFinalizeAdoptionService:

    @pytest.fixture
    def approved(self, approve, shelter, maria_request, joao_request):
        """Maria aprovada; o pedido do João continua pendente."""
        return approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

    def test_conclui_adocao(self, finalize, pet_repo, adoption_repo, shelter, rex, approved,
                            joao_request, log_repo):
        output = finalize.execute(
            FinalizeAdoptionInputDTO(
                adoption_id=approved.id,
                shelter_id=shelter.id,
                outcome="Adopted",
                completion_date=date(2024, 6, 1),
            )
        )

        assert output.status == "Completed"
        assert output.completion_date == date(2024, 6, 1)
        assert pet_repo.get_by_id(rex.id).status == PetStatus.ADOPTED

        other = adoption_repo.get_by_id(joao_request.id)
        assert other.status == AdoptionStatus.REJECTED
        assert other.shelter_response == UNAVAILABLE_RESPONSE

        assert ActionType.COMPLETE in actions(log_repo, AuditTable.ADOPTION)
        assert actions(log_repo, AuditTable.PET)[-1] == ActionType.ADOPTED

    def test_devolve_pet(self, finalize, pet_repo, shelter, rex, approved, joao_request, adoption_repo):
        output = finalize.execute(
            FinalizeAdoptionInputDTO(adoption_id=approved.id, shelter_id=shelter.id, outcome="Available")
        )

        assert output.status == "Rejected"
        assert pet_repo.get_by_id(rex.id).is_available
        assert adoption_repo.get_by_id(joao_request.id).status == AdoptionStatus.PENDING

    def test_pendente_nao_pode_ser_finalizada(self, finalize, shelter, maria_request):
        with pytest.raises(BusinessRuleViolationError):
            finalize.execute(
                FinalizeAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id, outcome="Adopted")
            )

    def test_resultado_invalido(self, finalize, shelter, approved):
        with pytest.raises(ValidationError) as exc:
            finalize.execute(
                FinalizeAdoptionInputDTO(adoption_id=approved.id, shelter_id=shelter.id, outcome="Talvez")
            )
        assert exc.value.field == "outcome"


# =============================================================================
# Trava do pet
# =============================================================================

class TestTravaDoPet:
    """Mudanças de estado leem o pet com trava de linha."""

    @pytest.fixture
    def locked(self, pet_repo, monkeypatch):
        ids = []
        original = pet_repo.get_for_update

        def tracking(pet_id):
            ids.append(pet_id)
            return original(pet_id)

        monkeypatch.setattr(pet_repo, "get_for_update", tracking)
        return ids

    def test_solicitar(self, request_adoption, rex, maria, locked):
        request_adoption.execute(RequestAdoptionInputDTO(pet_id=rex.id, client_id=maria.id))

        assert locked == [rex.id]

    def test_aprovar(self, approve, shelter, rex, maria_request, locked):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        assert locked == [rex.id]

    def test_recusar(self, pet_repo, adoption_repo, uow, shelter, rex, maria_request, locked):
        RejectAdoptionService(pet_repo, adoption_repo, uow).execute(
            RejectAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id)
        )

        assert locked == [rex.id]

    def test_finalizar(self, approve, finalize, shelter, rex, maria_request, locked):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        finalize.execute(
            FinalizeAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id, outcome="Adopted")
        )

        assert locked == [rex.id, rex.id]

    def test_cancelar(self, cancel, maria, rex, maria_request, locked):
        cancel.execute(CancelAdoptionInputDTO(adoption_id=maria_request.id, client_id=maria.id))

        assert locked == [rex.id]

    def test_marcar_adotado_e_remover(self, pet_repo, adoption_repo, uow, shelter, rex, locked):
        MarkPetAdoptedService(pet_repo, adoption_repo, uow).execute(
            PetActionInputDTO(pet_id=rex.id, shelter_id=shelter.id)
        )
        DeletePetService(pet_repo, uow).execute(PetActionInputDTO(pet_id=rex.id, shelter_id=shelter.id))

        assert locked == [rex.id, rex.id]


# =============================================================================
# Consultas
# =============================================================================

class TestConsultas:

    def test_vitrine_com_busca(self, query_repo, add_pet, shelter, rex):
        add_pet.execute(AddPetInputDTO(shelter_id=shelter.id, name="Mia", species="Cat"))
        service = ListAvailablePetsService(query_repo)

        assert {p.name for p in service.execute()} == {"Rex", "Mia"}
        [found] = service.execute("  LABRADOR ")
        assert found.id == rex.id
        assert found.shelter_name == "Patinhas"
        assert found.to_dict()["shelter"]["location"] == "SP"
        assert found.to_dict()["shelter_name"] == "Patinhas"

    def test_vitrine_oculta_pet_em_espera(self, query_repo, approve, shelter, maria_request):
        approve.execute(ApproveAdoptionInputDTO(adoption_id=maria_request.id, shelter_id=shelter.id))

        assert ListAvailablePetsService(query_repo).execute() == []

    def test_historico_do_cliente(self, query_repo, maria, maria_request, joao_request):
        [view] = ClientAdoptionHistoryService(query_repo).execute(maria.id)

        assert view.id == maria_request.id
        assert view.pet_name == "Rex"
        assert view.shelter_name == "Patinhas"
        assert view.can_cancel

    def test_pedidos_do_abrigo(self, query_repo, shelter, other_shelter, maria_request, joao_request):
        views = ShelterAdoptionRequestsService(query_repo).execute(shelter.id)

        assert {v.client_name for v in views} == {"Maria Silva", "João Souza"}
        assert all(v.can_review for v in views)
        assert ShelterAdoptionRequestsService(query_repo).execute(other_shelter.id) == []

    def test_busca_longa_demais(self, query_repo):
        with pytest.raises(ValidationError) as exc:
            ListAvailablePetsService(query_repo).execute("a" * 101)
        assert exc.value.field == "search"

    def test_busca_no_limite(self, query_repo, rex):
        assert ListAvailablePetsService(query_repo).execute("  " + "a" * 100 + "  ") == []
