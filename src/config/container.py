"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, hasher, publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Credenciais do administrador e limites vindos do settings

Imports dos adapters Django são feitos sob demanda, para que o
container possa ser importado antes do registro de apps estar pronto.
"""

from importlib import import_module
from typing import Optional

from dependency_injector import containers, providers


def _lazy(module_path: str, class_name: str):
    """
    Retorna callable que importa a classe só quando o provider é usado.

    Example:
        providers.Singleton(_lazy('src.adapters...repositories', 'DjangoPetRepository'))
    """
    def build(*args, **kwargs):
        return getattr(import_module(module_path), class_name)(*args, **kwargs)
    build.__name__ = class_name
    return build


ACCOUNTS_REPOS = 'src.adapters.django_app.accounts.repositories'
ADOPTIONS_REPOS = 'src.adapters.django_app.adoptions.repositories'
AUDIT_REPOS = 'src.adapters.django_app.audit.repositories'
ACCOUNTS_USE_CASES = 'src.core.accounts.use_cases'
ADOPTIONS_USE_CASES = 'src.core.adoptions.use_cases'
AUDIT_USE_CASES = 'src.core.audit.use_cases'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Settings do Django
    - Infrastructure: Publisher, Event Store (log de ações), hasher
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        service = get_container().request_adoption_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        _lazy('src.adapters.django_app.events.publishers', 'LoggingEventPublisher')
    )

    action_log_repository = providers.Singleton(
        _lazy(AUDIT_REPOS, 'DjangoActionLogRepository')
    )

    event_store = providers.Singleton(
        _lazy('src.core.audit.ports', 'ActionLogEventStore'),
        log_repo=action_log_repository,
    )

    password_hasher = providers.Singleton(
        _lazy('src.adapters.django_app.accounts.hashers', 'DjangoPasswordHasher')
    )

    admin_account = providers.Singleton(
        _lazy('src.core.accounts.entities', 'AdminAccount'),
        email=config.admin_email,
        password_hash=config.admin_password_hash,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    client_repository = providers.Singleton(_lazy(ACCOUNTS_REPOS, 'DjangoClientRepository'))
    shelter_repository = providers.Singleton(_lazy(ACCOUNTS_REPOS, 'DjangoShelterRepository'))
    pet_repository = providers.Singleton(_lazy(ADOPTIONS_REPOS, 'DjangoPetRepository'))
    adoption_repository = providers.Singleton(_lazy(ADOPTIONS_REPOS, 'DjangoAdoptionRepository'))
    adoption_query_repository = providers.Singleton(
        _lazy(ADOPTIONS_REPOS, 'DjangoAdoptionQueryRepository')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work', 'DjangoUnitOfWork'),
        event_publisher=event_publisher,
        event_store=event_store,
    )

    # =========================================================================
    # Services - Contas
    # =========================================================================

    register_client_service = providers.Factory(
        _lazy(ACCOUNTS_USE_CASES, 'RegisterClientService'),
        client_repo=client_repository,
        hasher=password_hasher,
        uow=unit_of_work,
    )

    register_shelter_service = providers.Factory(
        _lazy(ACCOUNTS_USE_CASES, 'RegisterShelterService'),
        shelter_repo=shelter_repository,
        hasher=password_hasher,
        uow=unit_of_work,
    )

    login_service = providers.Factory(
        _lazy(ACCOUNTS_USE_CASES, 'LoginService'),
        client_repo=client_repository,
        shelter_repo=shelter_repository,
        hasher=password_hasher,
        admin_account=admin_account,
        uow=unit_of_work,
    )

    logout_service = providers.Factory(
        _lazy(ACCOUNTS_USE_CASES, 'LogoutService'),
        uow=unit_of_work,
    )

    # Sem UoW - leitura
    resolve_account_service = providers.Factory(
        _lazy(ACCOUNTS_USE_CASES, 'ResolveAccountService'),
        client_repo=client_repository,
        shelter_repo=shelter_repository,
        admin_account=admin_account,
    )

    list_accounts_service = providers.Factory(
        _lazy(ACCOUNTS_USE_CASES, 'ListAccountsService'),
        client_repo=client_repository,
        shelter_repo=shelter_repository,
    )

    # =========================================================================
    # Services - Pets
    # =========================================================================

    add_pet_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'AddPetService'),
        pet_repo=pet_repository,
        uow=unit_of_work,
    )

    delete_pet_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'DeletePetService'),
        pet_repo=pet_repository,
        uow=unit_of_work,
    )

    mark_pet_adopted_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'MarkPetAdoptedService'),
        pet_repo=pet_repository,
        adoption_repo=adoption_repository,
        uow=unit_of_work,
    )

    list_shelter_pets_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'ListShelterPetsService'),
        pet_repo=pet_repository,
    )

    list_available_pets_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'ListAvailablePetsService'),
        query_repo=adoption_query_repository,
    )

    # =========================================================================
    # Services - Solicitações de adoção
    # =========================================================================

    request_adoption_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'RequestAdoptionService'),
        pet_repo=pet_repository,
        adoption_repo=adoption_repository,
        uow=unit_of_work,
    )

    cancel_adoption_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'CancelAdoptionService'),
        pet_repo=pet_repository,
        adoption_repo=adoption_repository,
        uow=unit_of_work,
    )

    approve_adoption_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'ApproveAdoptionService'),
        pet_repo=pet_repository,
        adoption_repo=adoption_repository,
        uow=unit_of_work,
    )

    reject_adoption_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'RejectAdoptionService'),
        pet_repo=pet_repository,
        adoption_repo=adoption_repository,
        uow=unit_of_work,
    )

    finalize_adoption_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'FinalizeAdoptionService'),
        pet_repo=pet_repository,
        adoption_repo=adoption_repository,
        uow=unit_of_work,
    )

    client_adoption_history_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'ClientAdoptionHistoryService'),
        query_repo=adoption_query_repository,
    )

    shelter_adoption_requests_service = providers.Factory(
        _lazy(ADOPTIONS_USE_CASES, 'ShelterAdoptionRequestsService'),
        query_repo=adoption_query_repository,
    )

    # =========================================================================
    # Services - Auditoria
    # =========================================================================

    list_action_log_service = providers.Factory(
        _lazy(AUDIT_USE_CASES, 'ListActionLogService'),
        log_repo=action_log_repository,
        default_limit=config.action_log_limit,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), carregando a
    configuração a partir do settings do Django.
    """
    global _container

    if _container is None:
        from django.conf import settings

        container = Container()
        container.config.from_dict({
            'admin_email': settings.ADMIN_EMAIL,
            'admin_password_hash': settings.ADMIN_PASSWORD_HASH,
            'action_log_limit': getattr(settings, 'ACTION_LOG_LIMIT', 100),
        })
        _container = container

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo, relendo o settings.
    """
    global _container
    _container = None
