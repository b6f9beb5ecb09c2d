"""
Entidades do Domínio de Contas.

Este módulo define as contas que podem se autenticar no sistema.

Entidades:
- AccountRole: Papéis de acesso (cliente, abrigo, administrador)
- ClientEntity: Pessoa interessada em adotar um pet
- ShelterEntity: Abrigo que cadastra pets e avalia solicitações
- AdminAccount: Operador único, configurado por variáveis de ambiente

Regras de Negócio Encapsuladas:
- Email normalizado (minúsculas, sem espaços) e validado
- Senha com tamanho mínimo antes do hash
- Nomes com tamanho mínimo e máximo
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
import re
import uuid

from src.core.shared.exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
EMAIL_MAX_LENGTH = 254
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128


class AccountRole(Enum):
    """
    Papéis de acesso.

    O valor do enum é também o nome da tabela registrada no
    log de ações para login/logout.
    """

    CLIENT = "client"
    SHELTER = "shelter"
    ADMIN = "admin"

    @classmethod
    def from_string(cls, value: str) -> "AccountRole":
        """
        Converte string para enum.

        Raises:
            ValueError: Se valor inválido
        """
        try:
            return cls[value.upper()]
        except (KeyError, AttributeError):
            pass

        for role in cls:
            if role.value == str(value).lower():
                return role

        raise ValueError(f"Papel inválido: {value}")


def normalize_email(email: str) -> str:
    """
    Normaliza e valida email.

    Args:
        email: Email informado pelo usuário

    Returns:
        Email em minúsculas, sem espaços nas pontas

    Raises:
        ValidationError: Se email vazio ou em formato inválido
    """
    if not email or not email.strip():
        raise ValidationError("Email é obrigatório", field="email")

    normalized = email.strip().lower()

    if len(normalized) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(normalized):
        raise ValidationError(f"Email inválido: {email}", field="email")

    return normalized


def validate_password(password: str) -> None:
    """Valida senha em texto puro antes de gerar o hash."""
    if not password:
        raise ValidationError("Senha é obrigatória", field="password")

    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Senha deve ter pelo menos {PASSWORD_MIN_LENGTH} caracteres",
            field="password"
        )

    if len(password) > PASSWORD_MAX_LENGTH:
        raise ValidationError(
            f"Senha deve ter no máximo {PASSWORD_MAX_LENGTH} caracteres",
            field="password"
        )


def _validate_text(value: str, field_name: str, label: str, min_length: int, max_length: int) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} é obrigatório", field=field_name)

    cleaned = value.strip()

    if len(cleaned) < min_length:
        raise ValidationError(
            f"{label} deve ter pelo menos {min_length} caracteres",
            field=field_name
        )

    if len(cleaned) > max_length:
        raise ValidationError(
            f"{label} deve ter no máximo {max_length} caracteres",
            field=field_name
        )

    return cleaned


def _validate_optional(value: str, field_name: str, label: str, max_length: int) -> str:
    cleaned = (value or "").strip()
    if len(cleaned) > max_length:
        raise ValidationError(
            f"{label} deve ter no máximo {max_length} caracteres",
            field=field_name
        )
    return cleaned


@dataclass
class ClientEntity:
    """
    Entidade de Domínio: Cliente.

    Invariantes:
    - Nome completo entre 2 e 100 caracteres
    - Email válido e normalizado
    - Apenas o hash da senha é guardado

    Example:
        client = ClientEntity.register(
            full_name="Maria Souza",
            email="maria@example.com",
            password_hash=hasher.hash("senha-segura"),
        )
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    full_name: str = ""
    email: str = ""
    password_hash: str = field(default="", repr=False)
    phone_number: str = ""
    address: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    NAME_MIN_LENGTH: int = 2
    NAME_MAX_LENGTH: int = 100
    PHONE_MAX_LENGTH: int = 20
    ADDRESS_MAX_LENGTH: int = 255

    @classmethod
    def register(
        cls,
        full_name: str,
        email: str,
        password_hash: str,
        phone_number: str = "",
        address: str = "",
    ) -> "ClientEntity":
        """
        Factory method para cadastrar cliente com validações.

        Args:
            full_name: Nome completo
            email: Email de login
            password_hash: Hash já calculado da senha
            phone_number: Telefone (opcional)
            address: Endereço (opcional)

        Returns:
            Nova instância de ClientEntity

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        if not password_hash:
            raise ValidationError("Senha é obrigatória", field="password")

        return cls(
            full_name=_validate_text(
                full_name, "full_name", "Nome completo",
                cls.NAME_MIN_LENGTH, cls.NAME_MAX_LENGTH,
            ),
            email=normalize_email(email),
            password_hash=password_hash,
            phone_number=_validate_optional(
                phone_number, "phone_number", "Telefone", cls.PHONE_MAX_LENGTH
            ),
            address=_validate_optional(
                address, "address", "Endereço", cls.ADDRESS_MAX_LENGTH
            ),
        )

    @property
    def role(self) -> AccountRole:
        return AccountRole.CLIENT

    @property
    def display_name(self) -> str:
        return self.full_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class ShelterEntity:
    """
    Entidade de Domínio: Abrigo.

    Invariantes:
    - Nome do abrigo entre 2 e 100 caracteres (único no sistema)
    - Email válido e normalizado (único no sistema)
    - Apenas o hash da senha é guardado
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    shelter_name: str = ""
    email: str = ""
    password_hash: str = field(default="", repr=False)
    location: str = ""
    contact_number: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    NAME_MIN_LENGTH: int = 2
    NAME_MAX_LENGTH: int = 100
    LOCATION_MAX_LENGTH: int = 255
    CONTACT_MAX_LENGTH: int = 20

    @classmethod
    def register(
        cls,
        shelter_name: str,
        email: str,
        password_hash: str,
        location: str = "",
        contact_number: str = "",
    ) -> "ShelterEntity":
        """
        Factory method para cadastrar abrigo com validações.

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        if not password_hash:
            raise ValidationError("Senha é obrigatória", field="password")

        return cls(
            shelter_name=_validate_text(
                shelter_name, "shelter_name", "Nome do abrigo",
                cls.NAME_MIN_LENGTH, cls.NAME_MAX_LENGTH,
            ),
            email=normalize_email(email),
            password_hash=password_hash,
            location=_validate_optional(
                location, "location", "Localização", cls.LOCATION_MAX_LENGTH
            ),
            contact_number=_validate_optional(
                contact_number, "contact_number", "Telefone de contato",
                cls.CONTACT_MAX_LENGTH,
            ),
        )

    @property
    def role(self) -> AccountRole:
        return AccountRole.SHELTER

    @property
    def display_name(self) -> str:
        return self.shelter_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShelterEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class AdminAccount:
    """
    Conta do administrador.

    Não existe tabela de administradores: email e hash da senha vêm
    da configuração (ADMIN_EMAIL / ADMIN_PASSWORD_HASH). Sem hash
    configurado, o login de administrador fica desabilitado.
    """

    email: str = ""
    password_hash: str = field(default="", repr=False)
    id: str = "1"
    name: str = "Administrador"

    @property
    def is_configured(self) -> bool:
        return bool(self.email and self.password_hash)

    def matches_email(self, email: str) -> bool:
        return self.is_configured and self.email.strip().lower() == (email or "").strip().lower()
