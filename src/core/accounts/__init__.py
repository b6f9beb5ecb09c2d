"""
Domínio de Contas - Clientes, Abrigos e Administrador.

Este módulo contém a lógica de cadastro e autenticação:
- Entidades (ClientEntity, ShelterEntity, AdminAccount, AccountRole)
- Use Cases (RegisterClient, RegisterShelter, Login, Logout)
- Domain Events (ClientRegistered, ShelterRegistered, AccountLoggedIn/Out)
- Ports (repositórios e hasher de senha)
"""

from .entities import AccountRole, ClientEntity, ShelterEntity, AdminAccount
from .dtos import (
    RegisterClientInputDTO,
    RegisterShelterInputDTO,
    LoginInputDTO,
    ClientOutputDTO,
    ShelterOutputDTO,
    AuthenticatedAccountDTO,
)
from .ports import ClientRepository, ShelterRepository, PasswordHasher
from .use_cases import (
    RegisterClientService,
    RegisterShelterService,
    LoginService,
    LogoutService,
    ResolveAccountService,
    ListAccountsService,
)

__all__ = [
    # Entities
    "AccountRole",
    "ClientEntity",
    "ShelterEntity",
    "AdminAccount",
    # DTOs
    "RegisterClientInputDTO",
    "RegisterShelterInputDTO",
    "LoginInputDTO",
    "ClientOutputDTO",
    "ShelterOutputDTO",
    "AuthenticatedAccountDTO",
    # Ports
    "ClientRepository",
    "ShelterRepository",
    "PasswordHasher",
    # Use Cases
    "RegisterClientService",
    "RegisterShelterService",
    "LoginService",
    "LogoutService",
    "ResolveAccountService",
    "ListAccountsService",
]
