"""
Use Cases (Application Services) do Domínio de Contas.

Use Cases implementados:
- RegisterClientService: Cadastra cliente
- RegisterShelterService: Cadastra abrigo
- LoginService: Autentica cliente, abrigo ou administrador
- LogoutService: Registra logout
- ResolveAccountService: Recarrega a conta guardada na sessão
- ListAccountsService: Lista clientes e abrigos (painel do admin)

A sessão em si (cookie, rotação de chave) é responsabilidade do
adapter web; os use cases apenas validam, persistem e registram eventos.
"""

from typing import Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    ValidationError,
)

from .ports import ClientRepository, ShelterRepository, PasswordHasher
from .entities import (
    AccountRole,
    AdminAccount,
    ClientEntity,
    ShelterEntity,
    normalize_email,
    validate_password,
)
from .dtos import (
    RegisterClientInputDTO,
    RegisterShelterInputDTO,
    LoginInputDTO,
    ClientOutputDTO,
    ShelterOutputDTO,
    AuthenticatedAccountDTO,
)
from .events import (
    ClientRegisteredEvent,
    ShelterRegisteredEvent,
    AccountLoggedInEvent,
    AccountLoggedOutEvent,
)


class RegisterClientService:
    """
    Use Case: Cadastrar cliente.

    Fluxo:
    1. Validar senha e email
    2. Garantir email único
    3. Criar entidade com hash da senha
    4. Persistir e disparar ClientRegistered

    Example:
        service = RegisterClientService(client_repo, hasher, uow)
        output = service.execute(RegisterClientInputDTO(
            full_name="Maria Souza",
            email="maria@example.com",
            password="senha-segura",
        ))
    """

    def __init__(self, client_repo: ClientRepository, hasher: PasswordHasher, uow: UnitOfWork):
        self.client_repo = client_repo
        self.hasher = hasher
        self.uow = uow

    def execute(self, input_dto: RegisterClientInputDTO) -> ClientOutputDTO:
        """
        Executa cadastro em transação atômica.

        Raises:
            ValidationError: Se dados inválidos
            DuplicateEntityError: Se email já cadastrado
        """
        validate_password(input_dto.password)
        email = normalize_email(input_dto.email)

        with self.uow:
            if self.client_repo.exists_by_email(email):
                raise DuplicateEntityError(
                    "Já existe um cliente cadastrado com este email",
                    field="email"
                )

            client = ClientEntity.register(
                full_name=input_dto.full_name,
                email=email,
                password_hash=self.hasher.hash(input_dto.password),
                phone_number=input_dto.phone_number,
                address=input_dto.address,
            )

            self.client_repo.save(client)

            self.uow.publish_event(
                ClientRegisteredEvent(
                    aggregate_id=client.id,
                    actor_type=AccountRole.CLIENT.value,
                    actor_id=client.id,
                    email=client.email,
                )
            )

        return ClientOutputDTO.from_entity(client)


class RegisterShelterService:
    """
    Use Case: Cadastrar abrigo.

    Nome do abrigo e email são únicos.
    """

    def __init__(self, shelter_repo: ShelterRepository, hasher: PasswordHasher, uow: UnitOfWork):
        self.shelter_repo = shelter_repo
        self.hasher = hasher
        self.uow = uow

    def execute(self, input_dto: RegisterShelterInputDTO) -> ShelterOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
            DuplicateEntityError: Se nome ou email já cadastrados
        """
        validate_password(input_dto.password)
        email = normalize_email(input_dto.email)

        with self.uow:
            shelter = ShelterEntity.register(
                shelter_name=input_dto.shelter_name,
                email=email,
                password_hash=self.hasher.hash(input_dto.password),
                location=input_dto.location,
                contact_number=input_dto.contact_number,
            )

            if self.shelter_repo.exists_by_name(shelter.shelter_name):
                raise DuplicateEntityError(
                    "Já existe um abrigo com este nome",
                    field="shelter_name"
                )

            if self.shelter_repo.exists_by_email(email):
                raise DuplicateEntityError(
                    "Já existe um abrigo cadastrado com este email",
                    field="email"
                )

            self.shelter_repo.save(shelter)

            self.uow.publish_event(
                ShelterRegisteredEvent(
                    aggregate_id=shelter.id,
                    actor_type=AccountRole.SHELTER.value,
                    actor_id=shelter.id,
                    shelter_name=shelter.shelter_name,
                    email=shelter.email,
                )
            )

        return ShelterOutputDTO.from_entity(shelter)


class LoginService:
    """
    Use Case: Autenticar conta.

    Cada papel procura em sua própria origem:
    - client: tabela de clientes
    - shelter: tabela de abrigos
    - admin: credenciais configuradas

    Email desconhecido e senha incorreta geram o mesmo
    AuthenticationError, sem indicar qual dos dois falhou.
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        shelter_repo: ShelterRepository,
        hasher: PasswordHasher,
        admin_account: AdminAccount,
        uow: UnitOfWork,
    ):
        self.client_repo = client_repo
        self.shelter_repo = shelter_repo
        self.hasher = hasher
        self.admin_account = admin_account
        self.uow = uow

    def execute(self, input_dto: LoginInputDTO) -> AuthenticatedAccountDTO:
        """
        Executa login.

        Returns:
            Identidade a ser guardada na sessão

        Raises:
            ValidationError: Se papel inválido ou campos vazios
            AuthenticationError: Se credenciais inválidas
        """
        try:
            role = AccountRole.from_string(input_dto.role)
        except ValueError:
            raise ValidationError(f"Papel inválido: {input_dto.role}", field="role")

        if not input_dto.email or not input_dto.password:
            raise ValidationError("Email e senha são obrigatórios", field="email")

        account = self._authenticate(role, input_dto.email.strip().lower(), input_dto.password)

        with self.uow:
            self.uow.publish_event(
                AccountLoggedInEvent(
                    aggregate_id=account.id,
                    actor_type=role.value,
                    actor_id=account.id,
                    role=role.value,
                )
            )

        return account

    def _authenticate(self, role: AccountRole, email: str, password: str) -> AuthenticatedAccountDTO:
        if role == AccountRole.ADMIN:
            admin = self.admin_account
            if admin.matches_email(email) and self.hasher.verify(password, admin.password_hash):
                return AuthenticatedAccountDTO.from_admin(admin)
            raise AuthenticationError()

        if role == AccountRole.CLIENT:
            client = self.client_repo.get_by_email(email)
            if client and self.hasher.verify(password, client.password_hash):
                return AuthenticatedAccountDTO.from_client(client)
            raise AuthenticationError()

        shelter = self.shelter_repo.get_by_email(email)
        if shelter and self.hasher.verify(password, shelter.password_hash):
            return AuthenticatedAccountDTO.from_shelter(shelter)
        raise AuthenticationError()


class LogoutService:
    """Use Case: Registrar logout da conta autenticada."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def execute(self, account: AuthenticatedAccountDTO) -> None:
        with self.uow:
            self.uow.publish_event(
                AccountLoggedOutEvent(
                    aggregate_id=account.id,
                    actor_type=account.role.value,
                    actor_id=account.id,
                    role=account.role.value,
                )
            )


class ResolveAccountService:
    """
    Use Case: Recarregar a conta guardada na sessão.

    Garante que contas removidas ou sessões adulteradas não
    continuem autenticadas.
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        shelter_repo: ShelterRepository,
        admin_account: AdminAccount,
    ):
        self.client_repo = client_repo
        self.shelter_repo = shelter_repo
        self.admin_account = admin_account

    def execute(self, session_data: Optional[dict]) -> Optional[AuthenticatedAccountDTO]:
        """
        Args:
            session_data: Dicionário guardado na sessão (ou None)

        Returns:
            Identidade atualizada ou None se a conta não existe mais
        """
        stored = AuthenticatedAccountDTO.from_session(session_data)
        if stored is None:
            return None

        if stored.role == AccountRole.CLIENT:
            client = self.client_repo.get_by_id(stored.id)
            return AuthenticatedAccountDTO.from_client(client) if client else None

        if stored.role == AccountRole.SHELTER:
            shelter = self.shelter_repo.get_by_id(stored.id)
            return AuthenticatedAccountDTO.from_shelter(shelter) if shelter else None

        if self.admin_account.is_configured and stored.id == self.admin_account.id:
            return AuthenticatedAccountDTO.from_admin(self.admin_account)
        return None


class ListAccountsService:
    """
    Use Case: Listar contas cadastradas.

    Returns:
        Dict com listas "clients" e "shelters" (DTOs sem hash de senha)
    """

    def __init__(self, client_repo: ClientRepository, shelter_repo: ShelterRepository):
        self.client_repo = client_repo
        self.shelter_repo = shelter_repo

    def execute(self) -> dict:
        return {
            "clients": [ClientOutputDTO.from_entity(c) for c in self.client_repo.list_all()],
            "shelters": [ShelterOutputDTO.from_entity(s) for s in self.shelter_repo.list_all()],
        }
