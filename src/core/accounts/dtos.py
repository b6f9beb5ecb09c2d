"""
Data Transfer Objects (DTOs) do Domínio de Contas.

Tipos de DTOs:
- Input DTOs: Cadastro e login (de Forms/APIs)
- Output DTOs: Dados públicos das contas (sem hash de senha)
- AuthenticatedAccountDTO: Identidade guardada na sessão
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import AccountRole, ClientEntity, ShelterEntity, AdminAccount


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class RegisterClientInputDTO:
    """
    DTO de entrada para cadastro de cliente.

    Attributes:
        full_name: Nome completo
        email: Email de login
        password: Senha em texto puro (vira hash no use case)
        phone_number: Telefone opcional
        address: Endereço opcional
    """

    full_name: str
    email: str
    password: str
    phone_number: str = ""
    address: str = ""

    def to_dict(self) -> dict:
        """Converte para dicionário (sem a senha)."""
        return {
            "full_name": self.full_name,
            "email": self.email,
            "phone_number": self.phone_number,
            "address": self.address,
        }


@dataclass(frozen=True)
class RegisterShelterInputDTO:
    """DTO de entrada para cadastro de abrigo."""

    shelter_name: str
    email: str
    password: str
    location: str = ""
    contact_number: str = ""

    def to_dict(self) -> dict:
        return {
            "shelter_name": self.shelter_name,
            "email": self.email,
            "location": self.location,
            "contact_number": self.contact_number,
        }


@dataclass(frozen=True)
class LoginInputDTO:
    """
    DTO de entrada para login.

    Attributes:
        role: Papel pretendido ("client", "shelter" ou "admin")
        email: Email de login
        password: Senha em texto puro
    """

    role: str
    email: str
    password: str

    def to_dict(self) -> dict:
        return {"role": self.role, "email": self.email}


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ClientOutputDTO:
    id: str
    full_name: str
    email: str
    phone_number: str
    address: str
    created_at: Optional[datetime]

    @classmethod
    def from_entity(cls, entity: ClientEntity) -> "ClientOutputDTO":
        return cls(
            id=entity.id,
            full_name=entity.full_name,
            email=entity.email,
            phone_number=entity.phone_number,
            address=entity.address,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "phone_number": self.phone_number,
            "address": self.address,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class ShelterOutputDTO:
    id: str
    shelter_name: str
    email: str
    location: str
    contact_number: str
    created_at: Optional[datetime]

    @classmethod
    def from_entity(cls, entity: ShelterEntity) -> "ShelterOutputDTO":
        return cls(
            id=entity.id,
            shelter_name=entity.shelter_name,
            email=entity.email,
            location=entity.location,
            contact_number=entity.contact_number,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "shelter_name": self.shelter_name,
            "email": self.email,
            "location": self.location,
            "contact_number": self.contact_number,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AuthenticatedAccountDTO:
    """
    Identidade autenticada.

    É o que fica guardado na sessão após o login. Apenas id e papel
    são usados para recarregar a conta; nome e email servem para
    exibição sem ida ao banco.

    Example:
        request.session["account"] = account.to_session()
        account = AuthenticatedAccountDTO.from_session(request.session["account"])
    """

    id: str
    role: AccountRole
    name: str
    email: str

    @classmethod
    def from_client(cls, client: ClientEntity) -> "AuthenticatedAccountDTO":
        return cls(id=client.id, role=AccountRole.CLIENT, name=client.full_name, email=client.email)

    @classmethod
    def from_shelter(cls, shelter: ShelterEntity) -> "AuthenticatedAccountDTO":
        return cls(id=shelter.id, role=AccountRole.SHELTER, name=shelter.shelter_name, email=shelter.email)

    @classmethod
    def from_admin(cls, admin: AdminAccount) -> "AuthenticatedAccountDTO":
        return cls(id=admin.id, role=AccountRole.ADMIN, name=admin.name, email=admin.email)

    @classmethod
    def from_session(cls, data: Optional[dict]) -> Optional["AuthenticatedAccountDTO"]:
        """
        Reconstrói identidade a partir dos dados da sessão.

        Returns:
            DTO ou None se os dados estiverem ausentes ou corrompidos
        """
        if not isinstance(data, dict):
            return None
        try:
            return cls(
                id=str(data["id"]),
                role=AccountRole.from_string(data["role"]),
                name=data.get("name", ""),
                email=data.get("email", ""),
            )
        except (KeyError, ValueError):
            return None

    def to_session(self) -> dict:
        return {
            "id": self.id,
            "role": self.role.value,
            "name": self.name,
            "email": self.email,
        }

    def to_dict(self) -> dict:
        return self.to_session()

    @property
    def is_client(self) -> bool:
        return self.role == AccountRole.CLIENT

    @property
    def is_shelter(self) -> bool:
        return self.role == AccountRole.SHELTER

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN
