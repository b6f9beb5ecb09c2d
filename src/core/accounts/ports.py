"""
Ports (Interfaces) do Domínio de Contas.

Tipos de Ports:
- ClientRepository: Persistência de clientes
- ShelterRepository: Persistência de abrigos
- PasswordHasher: Geração e verificação de hash de senha

Implementações em memória ficam neste módulo para uso em testes.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import ClientEntity, ShelterEntity


@runtime_checkable
class ClientRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoClientRepository (ORM)
    - InMemoryClientRepository (para testes)
    """

    def save(self, client: ClientEntity) -> None:
        """Persiste cliente (create ou update)."""
        ...

    def get_by_id(self, client_id: str) -> Optional[ClientEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[ClientEntity]:
        """
        Busca cliente pelo email normalizado.

        Args:
            email: Email já em minúsculas

        Returns:
            Entidade encontrada ou None
        """
        ...

    def exists_by_email(self, email: str) -> bool:
        ...

    def list_all(self) -> List[ClientEntity]:
        """Lista clientes ordenados por nome."""
        ...

    def count(self) -> int:
        ...


@runtime_checkable
class ShelterRepository(Protocol):
    """
    Interface para persistência de Abrigos.

    Implementações:
    - DjangoShelterRepository (ORM)
    - InMemoryShelterRepository (para testes)
    """

    def save(self, shelter: ShelterEntity) -> None:
        ...

    def get_by_id(self, shelter_id: str) -> Optional[ShelterEntity]:
        ...

    def get_by_email(self, email: str) -> Optional[ShelterEntity]:
        ...

    def exists_by_email(self, email: str) -> bool:
        ...

    def exists_by_name(self, shelter_name: str) -> bool:
        """Verifica nome do abrigo sem diferenciar maiúsculas."""
        ...

    def list_all(self) -> List[ShelterEntity]:
        """Lista abrigos ordenados por nome."""
        ...

    def count(self) -> int:
        ...


@runtime_checkable
class PasswordHasher(Protocol):
    """
    Interface para hash de senhas.

    O core nunca conhece o algoritmo: o adapter Django usa
    django.contrib.auth.hashers.
    """

    def hash(self, raw_password: str) -> str:
        ...

    def verify(self, raw_password: str, password_hash: str) -> bool:
        ...


class InMemoryClientRepository:
    """
    Implementação em memória do ClientRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!
    """

    def __init__(self):
        self._clients: dict[str, ClientEntity] = {}

    def save(self, client: ClientEntity) -> None:
        self._clients[client.id] = client

    def get_by_id(self, client_id: str) -> Optional[ClientEntity]:
        return self._clients.get(client_id)

    def get_by_email(self, email: str) -> Optional[ClientEntity]:
        for client in self._clients.values():
            if client.email == email:
                return client
        return None

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def list_all(self) -> List[ClientEntity]:
        return sorted(self._clients.values(), key=lambda c: c.full_name.lower())

    def count(self) -> int:
        return len(self._clients)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._clients.clear()


class InMemoryShelterRepository:
    """Implementação em memória do ShelterRepository."""

    def __init__(self):
        self._shelters: dict[str, ShelterEntity] = {}

    def save(self, shelter: ShelterEntity) -> None:
        self._shelters[shelter.id] = shelter

    def get_by_id(self, shelter_id: str) -> Optional[ShelterEntity]:
        return self._shelters.get(shelter_id)

    def get_by_email(self, email: str) -> Optional[ShelterEntity]:
        for shelter in self._shelters.values():
            if shelter.email == email:
                return shelter
        return None

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def exists_by_name(self, shelter_name: str) -> bool:
        wanted = shelter_name.strip().lower()
        return any(s.shelter_name.lower() == wanted for s in self._shelters.values())

    def list_all(self) -> List[ShelterEntity]:
        return sorted(self._shelters.values(), key=lambda s: s.shelter_name.lower())

    def count(self) -> int:
        return len(self._shelters)

    def clear(self) -> None:
        self._shelters.clear()
