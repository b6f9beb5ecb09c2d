"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): UnitOfWork, EventPublisher, EventStore
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import List

from .events import DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que múltiplas operações de persistência sejam
    executadas como uma única unidade: ou todas são persistidas
    ou nenhuma é. No PetAdoption Manager isso mantém pet, adoção
    e log de ações sempre consistentes entre si.

    Pattern: Context Manager
        with uow:
            pet_repo.save(pet)
            adoption_repo.save(adoption)
            uow.publish_event(event)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Responsabilidades:
    - Gerenciar início/fim de transação
    - Commit/Rollback coordenado
    - Enfileirar eventos para publicação pós-commit
    - Garantir que eventos só são publicados após commit bem-sucedido
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self) -> "UnitOfWork":
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    @abstractmethod
    def _begin_transaction(self) -> None:
        """
        Inicia uma nova transação.

        Deve ser implementado pelo adapter específico
        (Django: transaction.atomic())
        """
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Ordem de execução:
        1. Gravação dos eventos no Event Store (mesma transação)
        2. Commit da transação no banco
        3. Publicação de eventos enfileirados
        4. Limpeza de estado interno
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError

    def publish_event(self, event: DomainEvent) -> None:
        """
        Enfileira evento para publicação após commit.

        Args:
            event: Evento de domínio a ser publicado

        Example:
            with uow:
                pet = PetEntity.create(...)
                repo.save(pet)
                uow.publish_event(PetAddedEvent(aggregate_id=pet.id))
            # Evento publicado aqui, após commit
        """
        self._events.append(event)

    def collect_events(self) -> List[DomainEvent]:
        """Retorna eventos enfileirados (para testing/debugging)."""
        return list(self._events)

    def clear_events(self) -> None:
        """Limpa fila de eventos."""
        self._events.clear()


class EventPublisher(ABC):
    """
    Interface para publicação de eventos.

    Adapters implementam para integrar com diferentes destinos
    (logging, coleta em memória para testes, etc.)
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publica evento para consumidores.

        Args:
            event: Evento de domínio a ser publicado
        """
        raise NotImplementedError

    def publish_batch(self, events: List[DomainEvent]) -> None:
        """
        Publica múltiplos eventos em sequência.

        Args:
            events: Lista de eventos a serem publicados
        """
        for event in events:
            self.publish(event)


class EventStore(ABC):
    """
    Interface para persistência de eventos.

    O Event Store é chamado pelo UoW dentro da transação, antes do
    commit. Se a gravação falhar, a operação inteira é desfeita.
    """

    @abstractmethod
    def append(self, event: DomainEvent) -> None:
        """
        Adiciona evento ao store.

        Args:
            event: Evento a ser persistido
        """
        raise NotImplementedError
