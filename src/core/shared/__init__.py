"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Base class para Domain Events
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    BusinessRuleViolationError,
    AuthenticationError,
    PermissionDeniedError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher, EventStore

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "BusinessRuleViolationError",
    "AuthenticationError",
    "PermissionDeniedError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
    "EventStore",
]
