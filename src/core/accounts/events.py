"""
Domain Events do Domínio de Contas.

Eventos:
- ClientRegisteredEvent: Cliente se cadastrou (client/REGISTER)
- ShelterRegisteredEvent: Abrigo se cadastrou (shelter/REGISTER)
- AccountLoggedInEvent: Login de qualquer papel (<papel>/LOGIN)
- AccountLoggedOutEvent: Logout de qualquer papel (<papel>/LOGOUT)
"""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass
class ClientRegisteredEvent(DomainEvent):
    """
    Evento: Cliente se cadastrou.

    Attributes:
        email: Email cadastrado
    """

    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "client"

    @property
    def action_type(self) -> str:
        return "REGISTER"


@dataclass
class ShelterRegisteredEvent(DomainEvent):
    """
    Evento: Abrigo se cadastrou.

    Attributes:
        shelter_name: Nome do abrigo
        email: Email cadastrado
    """

    shelter_name: str = ""
    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "shelter"

    @property
    def action_type(self) -> str:
        return "REGISTER"


@dataclass
class AccountLoggedInEvent(DomainEvent):
    """
    Evento: Conta fez login.

    A tabela registrada no log é o próprio papel da conta
    (client, shelter ou admin).
    """

    role: str = ""

    @property
    def aggregate_type(self) -> str:
        return self.role

    @property
    def action_type(self) -> str:
        return "LOGIN"


@dataclass
class AccountLoggedOutEvent(DomainEvent):
    """Evento: Conta fez logout."""

    role: str = ""

    @property
    def aggregate_type(self) -> str:
        return self.role

    @property
    def action_type(self) -> str:
        return "LOGOUT"
