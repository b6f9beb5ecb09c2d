"""
Testes Unitários para Use Cases do Domínio de Contas.

Estratégia de Teste:
- Repositórios em memória
- InMemoryUnitOfWork gravando no log de ações em memória
- Hasher previsível (PlainHasher do conftest)
"""

import pytest

from src.core.accounts.use_cases import (
    RegisterClientService,
    RegisterShelterService,
    LoginService,
    LogoutService,
    ResolveAccountService,
    ListAccountsService,
)
from src.core.accounts.dtos import (
    RegisterClientInputDTO,
    RegisterShelterInputDTO,
    LoginInputDTO,
)
from src.core.accounts.entities import AccountRole, AdminAccount
from src.core.audit.entities import ActionType, AuditTable
from src.core.shared.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    ValidationError,
)


@pytest.fixture
def admin_account(hasher):
    return AdminAccount(email="admin@site.com", password_hash=hasher.hash("admin-secret"))


@pytest.fixture
def register_client(client_repo, hasher, uow):
    return RegisterClientService(client_repo, hasher, uow)


@pytest.fixture
def register_shelter(shelter_repo, hasher, uow):
    return RegisterShelterService(shelter_repo, hasher, uow)


@pytest.fixture
def login(client_repo, shelter_repo, hasher, admin_account, uow):
    return LoginService(client_repo, shelter_repo, hasher, admin_account, uow)


@pytest.fixture
def maria(register_client):
    return register_client.execute(
        RegisterClientInputDTO(full_name="Maria Silva", email="maria@example.com", password="senha-forte")
    )


@pytest.fixture
def patinhas(register_shelter):
    return register_shelter.execute(
        RegisterShelterInputDTO(shelter_name="Patinhas", email="ola@patinhas.org", password="senha-forte")
    )


class TestRegisterClientService:

    def test_cadastra_e_registra_no_log(self, register_client, client_repo, log_repo):
        """Deve persistir com hash da senha e gravar REGISTER no log."""
        output = register_client.execute(
            RegisterClientInputDTO(
                full_name="Maria Silva",
                email="Maria@Example.com",
                password="senha-forte",
            )
        )

        stored = client_repo.get_by_id(output.id)
        assert stored.email == "maria@example.com"
        assert stored.password_hash == "plain$senha-forte"
        assert "password_hash" not in output.to_dict()

        [entry] = log_repo.list_recent()
        assert entry.table_name == AuditTable.CLIENT
        assert entry.action_type == ActionType.REGISTER
        assert entry.record_id == output.id

    def test_email_duplicado(self, register_client, maria, log_repo):
        with pytest.raises(DuplicateEntityError) as exc:
            register_client.execute(
                RegisterClientInputDTO(full_name="Outra", email="MARIA@example.com", password="senha-forte")
            )

        assert exc.value.field == "email"
        assert log_repo.count() == 1

    def test_senha_curta(self, register_client, client_repo):
        with pytest.raises(ValidationError):
            register_client.execute(
                RegisterClientInputDTO(full_name="Maria", email="m@x.com", password="123")
            )
        assert client_repo.count() == 0


class TestRegisterShelterService:

    def test_nome_duplicado_sem_diferenciar_maiusculas(self, register_shelter, patinhas):
        with pytest.raises(DuplicateEntityError) as exc:
            register_shelter.execute(
                RegisterShelterInputDTO(shelter_name="PATINHAS", email="outro@x.com", password="senha-forte")
            )
        assert exc.value.field == "shelter_name"

    def test_email_duplicado(self, register_shelter, patinhas):
        with pytest.raises(DuplicateEntityError) as exc:
            register_shelter.execute(
                RegisterShelterInputDTO(shelter_name="Outro", email="ola@patinhas.org", password="senha-forte")
            )
        assert exc.value.field == "email"


class TestLoginService:

    def test_login_cliente(self, login, maria, log_repo):
        account = login.execute(LoginInputDTO(role="client", email=" MARIA@example.com", password="senha-forte"))

        assert account.id == maria.id
        assert account.role == AccountRole.CLIENT
        assert account.name == "Maria Silva"

        entry = log_repo.list_recent(action_type=ActionType.LOGIN)[0]
        assert entry.table_name == AuditTable.CLIENT
        assert entry.actor_id == maria.id

    def test_login_abrigo(self, login, patinhas):
        account = login.execute(LoginInputDTO(role="shelter", email="ola@patinhas.org", password="senha-forte"))
        assert account.is_shelter

    def test_papel_errado_nao_autentica(self, login, maria):
        """Cliente não entra pela tela de abrigo."""
        with pytest.raises(AuthenticationError):
            login.execute(LoginInputDTO(role="shelter", email="maria@example.com", password="senha-forte"))

    def test_senha_errada_e_email_desconhecido_mesma_mensagem(self, login, maria):
        with pytest.raises(AuthenticationError) as wrong_password:
            login.execute(LoginInputDTO(role="client", email="maria@example.com", password="errada123"))
        with pytest.raises(AuthenticationError) as unknown:
            login.execute(LoginInputDTO(role="client", email="ninguem@example.com", password="senha-forte"))

        assert wrong_password.value.message == unknown.value.message

    def test_login_admin(self, login, log_repo):
        account = login.execute(LoginInputDTO(role="admin", email="admin@site.com", password="admin-secret"))

        assert account.is_admin
        assert log_repo.list_recent()[0].table_name == AuditTable.ADMIN

    def test_admin_nao_configurado(self, client_repo, shelter_repo, hasher, uow):
        service = LoginService(client_repo, shelter_repo, hasher, AdminAccount(), uow)
        with pytest.raises(AuthenticationError):
            service.execute(LoginInputDTO(role="admin", email="admin@site.com", password="admin-secret"))

    def test_campos_vazios(self, login):
        with pytest.raises(ValidationError):
            login.execute(LoginInputDTO(role="client", email="", password=""))

    def test_papel_invalido(self, login):
        with pytest.raises(ValidationError) as exc:
            login.execute(LoginInputDTO(role="root", email="a@b.com", password="x"))
        assert exc.value.field == "role"


class TestLogoutService:

    def test_registra_logout(self, login, maria, uow, log_repo):
        account = login.execute(LoginInputDTO(role="client", email="maria@example.com", password="senha-forte"))

        LogoutService(uow).execute(account)

        assert log_repo.list_recent(limit=1)[0].action_type == ActionType.LOGOUT


class TestResolveAccountService:

    def test_resolve_cliente(self, client_repo, shelter_repo, admin_account, login, maria):
        account = login.execute(LoginInputDTO(role="client", email="maria@example.com", password="senha-forte"))
        service = ResolveAccountService(client_repo, shelter_repo, admin_account)

        assert service.execute(account.to_session()) == account

    def test_conta_removida(self, client_repo, shelter_repo, admin_account, login, maria):
        account = login.execute(LoginInputDTO(role="client", email="maria@example.com", password="senha-forte"))
        client_repo.clear()

        service = ResolveAccountService(client_repo, shelter_repo, admin_account)
        assert service.execute(account.to_session()) is None

    def test_admin_forjado(self, client_repo, shelter_repo):
        """Sessão de admin não vale quando o admin não está configurado."""
        service = ResolveAccountService(client_repo, shelter_repo, AdminAccount())
        assert service.execute({"id": "1", "role": "admin"}) is None


class TestListAccountsService:

    def test_lista_contas_sem_hash(self, client_repo, shelter_repo, maria, patinhas):
        result = ListAccountsService(client_repo, shelter_repo).execute()

        assert [c.id for c in result["clients"]] == [maria.id]
        assert [s.id for s in result["shelters"]] == [patinhas.id]
        assert "password_hash" not in result["clients"][0].to_dict()
