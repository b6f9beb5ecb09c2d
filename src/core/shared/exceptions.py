"""
Exceções de Domínio do PetAdoption Manager.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    ├── EntityNotFoundError (entidade não existe)
    ├── DuplicateEntityError (valor único já cadastrado)
    ├── BusinessRuleViolationError (regra de negócio violada)
    ├── AuthenticationError (credenciais inválidas)
    └── PermissionDeniedError (papel sem acesso ao recurso)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            adoption.approve(pet)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento.

    Example:
        if len(name) < 1:
            raise ValidationError("Nome do pet é obrigatório", field="name")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado, ou quando
    o registro existe mas não pertence a quem está pedindo.

    Example:
        pet = repo.get_by_id(pet_id)
        if not pet:
            raise EntityNotFoundError(f"Pet {pet_id} não encontrado")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class DuplicateEntityError(DomainException):
    """
    Valor que deveria ser único já está cadastrado.

    Example:
        if client_repo.exists_by_email(email):
            raise DuplicateEntityError("Email já cadastrado", field="email")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message, "DUPLICATE_ENTITY")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.

    Example:
        if pet.status != PetStatus.AVAILABLE:
            raise BusinessRuleViolationError(
                "Pet não está disponível para adoção",
                rule="pet_indisponivel",
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class AuthenticationError(DomainException):
    """Credenciais inválidas (email desconhecido ou senha incorreta)."""

    def __init__(self, message: str = "Email ou senha inválidos"):
        super().__init__(message, "AUTHENTICATION_FAILED")


class PermissionDeniedError(DomainException):
    """
    Conta autenticada sem permissão para a operação.

    Example:
        if account.role != AccountRole.SHELTER:
            raise PermissionDeniedError("Apenas abrigos podem cadastrar pets")
    """

    def __init__(self, message: str):
        super().__init__(message, "PERMISSION_DENIED")
