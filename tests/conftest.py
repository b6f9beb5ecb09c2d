"""
Configurações globais do Pytest para PetAdoption Manager.

Este arquivo é carregado automaticamente pelo pytest e:
- Configura o Django (SQLite em memória, hasher rápido)
- Fornece fixtures compartilhadas (repositórios em memória,
  contas de exemplo, clientes HTTP autenticados)
"""

from pathlib import Path

import pytest


ADMIN_EMAIL = 'admin@petadoption.test'
ADMIN_PASSWORD = 'admin-secret'
DEFAULT_PASSWORD = 'senha-forte'


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=False,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.accounts',
                'src.adapters.django_app.adoptions',
                'src.adapters.django_app.audit',
            ],
            MIDDLEWARE=[
                'django.contrib.sessions.middleware.SessionMiddleware',
                'django.middleware.common.CommonMiddleware',
                'django.middleware.csrf.CsrfViewMiddleware',
                'django.contrib.auth.middleware.AuthenticationMiddleware',
                'django.contrib.messages.middleware.MessageMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            TEMPLATES=[
                {
                    'BACKEND': 'django.template.backends.django.DjangoTemplates',
                    'DIRS': [],
                    'APP_DIRS': True,
                    'OPTIONS': {
                        'context_processors': [
                            'django.template.context_processors.request',
                            'django.contrib.auth.context_processors.auth',
                            'django.contrib.messages.context_processors.messages',
                            'src.adapters.django_app.shared.context_processors.current_account',
                        ],
                    },
                },
            ],
            PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'],
            SESSION_ENGINE='django.contrib.sessions.backends.db',
            SESSION_COOKIE_SECURE=False,
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            LANGUAGE_CODE='pt-br',
            ADMIN_EMAIL=ADMIN_EMAIL,
            ADMIN_PASSWORD_HASH='',
            ACTION_LOG_LIMIT=100,
        )
        django.setup()

        from django.contrib.auth.hashers import make_password
        settings.ADMIN_PASSWORD_HASH = make_password(ADMIN_PASSWORD)

    config.addinivalue_line(
        "markers", "integration: fluxo completo passando pelas camadas HTTP, Core e banco"
    )


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def fresh_container():
    """
    Reset do container entre testes.

    Garante que cada teste lê o settings atual (admin, limites).
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


# =============================================================================
# Fixtures do Core (em memória)
# =============================================================================

@pytest.fixture
def client_repo():
    from src.core.accounts.ports import InMemoryClientRepository
    return InMemoryClientRepository()


@pytest.fixture
def shelter_repo():
    from src.core.accounts.ports import InMemoryShelterRepository
    return InMemoryShelterRepository()


@pytest.fixture
def adoption_repo():
    from src.core.adoptions.ports import InMemoryAdoptionRepository
    return InMemoryAdoptionRepository()


@pytest.fixture
def pet_repo(adoption_repo):
    from src.core.adoptions.ports import InMemoryPetRepository
    return InMemoryPetRepository(adoption_repo=adoption_repo)


@pytest.fixture
def query_repo(pet_repo, adoption_repo, client_repo, shelter_repo):
    from src.core.adoptions.ports import InMemoryAdoptionQueryRepository
    return InMemoryAdoptionQueryRepository(pet_repo, adoption_repo, client_repo, shelter_repo)


@pytest.fixture
def log_repo():
    from src.core.audit.ports import InMemoryActionLogRepository
    return InMemoryActionLogRepository()


@pytest.fixture
def uow(log_repo):
    """Unit of Work em memória que grava o log de ações."""
    from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    from src.core.audit.ports import ActionLogEventStore

    return InMemoryUnitOfWork(event_store=ActionLogEventStore(log_repo))


class PlainHasher:
    """Hasher previsível para testes do Core."""

    def hash(self, raw_password: str) -> str:
        return f"plain${raw_password}"

    def verify(self, raw_password: str, password_hash: str) -> bool:
        return bool(raw_password) and password_hash == f"plain${raw_password}"


@pytest.fixture
def hasher():
    return PlainHasher()


# =============================================================================
# Fixtures Django (banco de teste)
# =============================================================================

@pytest.fixture
def services():
    """Container real (repositórios Django)."""
    from src.config.container import get_container
    return get_container()


@pytest.fixture
def shelter_account(db, services):
    from src.core.accounts.dtos import RegisterShelterInputDTO

    return services.register_shelter_service().execute(
        RegisterShelterInputDTO(
            shelter_name='Abrigo Patinhas',
            email='abrigo@patinhas.org',
            password=DEFAULT_PASSWORD,
            location='São Paulo',
            contact_number='11 99999-0000',
        )
    )


@pytest.fixture
def other_shelter_account(db, services):
    from src.core.accounts.dtos import RegisterShelterInputDTO

    return services.register_shelter_service().execute(
        RegisterShelterInputDTO(
            shelter_name='Lar dos Bichos',
            email='contato@lardosbichos.org',
            password=DEFAULT_PASSWORD,
        )
    )


@pytest.fixture
def client_account(db, services):
    from src.core.accounts.dtos import RegisterClientInputDTO

    return services.register_client_service().execute(
        RegisterClientInputDTO(
            full_name='Maria Silva',
            email='maria@example.com',
            password=DEFAULT_PASSWORD,
            phone_number='11 98888-0000',
        )
    )


@pytest.fixture
def available_pet(shelter_account, services):
    from src.core.adoptions.dtos import AddPetInputDTO

    return services.add_pet_service().execute(
        AddPetInputDTO(
            shelter_id=shelter_account.id,
            name='Rex',
            species='Dog',
            breed='Labrador',
            age=3,
            gender='Male',
        )
    )


def _login(http_client, role: str, email: str, password: str = DEFAULT_PASSWORD):
    response = http_client.post(
        f'/api/{role}/login/',
        data={'email': email, 'password': password},
        content_type='application/json',
    )
    assert response.status_code == 200, response.content
    return http_client


@pytest.fixture
def logged_client(client, client_account):
    """Cliente HTTP autenticado como cliente (adotante)."""
    return _login(client, 'client', client_account.email)


@pytest.fixture
def logged_shelter(client, shelter_account):
    """Cliente HTTP autenticado como abrigo."""
    return _login(client, 'shelter', shelter_account.email)


@pytest.fixture
def logged_admin(client, db):
    """Cliente HTTP autenticado como administrador."""
    return _login(client, 'admin', ADMIN_EMAIL, ADMIN_PASSWORD)
