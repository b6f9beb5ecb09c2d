"""
Domain Events - Fatos relevantes do domínio.

Este módulo define a infraestrutura base para Domain Events.
Todo evento do PetAdoption Manager corresponde a uma linha do
log de ações (action_log): a tabela afetada vem de `aggregate_type`
e a ação registrada vem de `action_type`.

Características:
- Auto-geração de ID e timestamp (UTC)
- Serializáveis para persistência/logging
- Rastreáveis via aggregate_id e ator (quem executou a ação)

Fluxo:
    - Use case enfileira evento no UoW
    - UoW grava o evento no Event Store dentro da transação
    - Após commit, o EventPublisher é notificado
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import uuid


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DomainEvent(ABC):
    """
    Classe base abstrata para Domain Events.

    Um Domain Event representa algo significativo que aconteceu
    no domínio: um cadastro, um login, uma aprovação de adoção.

    Características:
    - Nomeados no passado (AdoptionApproved, não ApproveAdoption)
    - Representam fatos históricos
    - Contêm os dados necessários para a trilha de auditoria

    Attributes:
        event_id: Identificador único do evento
        aggregate_id: ID do registro afetado
        occurred_at: Momento em que o evento ocorreu
        version: Versão do schema do evento
        actor_type: Papel de quem executou a ação (client, shelter, admin)
        actor_id: ID de quem executou a ação

    Example:
        @dataclass
        class PetAddedEvent(DomainEvent):
            shelter_id: str = ""

            @property
            def aggregate_type(self) -> str:
                return "pet"

            @property
            def action_type(self) -> str:
                return "INSERT"
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    aggregate_id: str = ""
    occurred_at: datetime = field(default_factory=_utcnow)
    version: int = 1
    actor_type: Optional[str] = None
    actor_id: Optional[str] = None

    def __post_init__(self):
        """Validação após inicialização."""
        if not self.aggregate_id:
            raise ValueError("aggregate_id é obrigatório")

    @property
    @abstractmethod
    def aggregate_type(self) -> str:
        """
        Retorna a tabela afetada pelo evento.

        Returns:
            Nome da tabela (ex: "pet", "adoption")
        """
        ...

    @property
    @abstractmethod
    def action_type(self) -> str:
        """
        Retorna a ação registrada no log (ex: "APPROVE", "HOLD").
        """
        ...

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializa evento para dicionário.

        Returns:
            Dicionário com dados do evento
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "action_type": self.action_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "actor_type": self.actor_type,
            "actor_id": self.actor_id,
            "data": self.get_event_data(),
        }

    def get_event_data(self) -> Dict[str, Any]:
        """
        Retorna os campos específicos do evento.

        Datas são convertidas para ISO 8601 para que o resultado
        possa ser gravado em colunas JSON.
        """
        base_fields = {
            "event_id", "aggregate_id", "occurred_at", "version",
            "actor_type", "actor_id",
        }
        data = {}
        for key, value in self.__dict__.items():
            if key in base_fields or key.startswith("_"):
                continue
            if hasattr(value, "isoformat"):
                value = value.isoformat()
            data[key] = value
        return data

    def __repr__(self) -> str:
        return (
            f"{self.event_type}("
            f"event_id={self.event_id[:8]}..., "
            f"aggregate_id={self.aggregate_id}, "
            f"action={self.aggregate_type}/{self.action_type}"
            f")"
        )
