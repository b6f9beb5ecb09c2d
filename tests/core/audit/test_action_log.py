"""
Testes Unitários para o log de ações.

Coverage:
- ActionLogEntry.from_event
- ActionLogEventStore + InMemoryActionLogRepository
- ListActionLogService (filtros e limites)
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from src.core.accounts.events import AccountLoggedInEvent
from src.core.adoptions.events import AdoptionApprovedEvent, PetAddedEvent
from src.core.audit.dtos import ListActionLogQueryDTO
from src.core.audit.entities import ActionLogEntry, ActionType, AuditTable
from src.core.audit.ports import ActionLogEventStore
from src.core.audit.use_cases import ListActionLogService
from src.core.shared.exceptions import ValidationError


def pet_added(name="Rex", **kwargs):
    return PetAddedEvent(
        aggregate_id=kwargs.pop("aggregate_id", "pet-1"),
        actor_type="shelter",
        actor_id="shelter-1",
        shelter_id="shelter-1",
        name=name,
        species="Dog",
        **kwargs,
    )


class TestActionLogEntry:

    def test_from_event(self):
        event = AdoptionApprovedEvent(
            aggregate_id="adoption-1",
            actor_type="shelter",
            actor_id="shelter-1",
            pet_id="pet-1",
            client_id="client-1",
            visit_date="2024-05-04",
        )

        entry = ActionLogEntry.from_event(event)

        assert entry.id == event.event_id
        assert entry.table_name == AuditTable.ADOPTION
        assert entry.action_type == ActionType.APPROVE
        assert entry.record_id == "adoption-1"
        assert entry.actor_type == "shelter"
        assert entry.details == {"pet_id": "pet-1", "client_id": "client-1", "visit_date": "2024-05-04"}

    def test_login_usa_papel_como_tabela(self):
        event = AccountLoggedInEvent(aggregate_id="1", actor_type="admin", actor_id="1", role="admin")
        entry = ActionLogEntry.from_event(event)

        assert entry.table_name == AuditTable.ADMIN
        assert entry.action_type == ActionType.LOGIN

    def test_entrada_imutavel(self):
        entry = ActionLogEntry.from_event(pet_added())
        with pytest.raises(FrozenInstanceError):
            entry.record_id = "outro"


class TestActionLogEventStore:

    def test_grava_uma_entrada_por_evento(self, log_repo):
        store = ActionLogEventStore(log_repo)
        event = pet_added()

        store.append(event)
        store.append(event)

        assert log_repo.count() == 1
        assert log_repo.list_for_record(AuditTable.PET, "pet-1")[0].id == event.event_id


class TestListActionLogService:

    @pytest.fixture
    def populated(self, log_repo):
        store = ActionLogEventStore(log_repo)
        base = datetime(2024, 5, 1, tzinfo=timezone.utc)
        for i in range(5):
            store.append(pet_added(name=f"Pet {i}", aggregate_id=f"pet-{i}", occurred_at=base + timedelta(minutes=i)))
        store.append(
            AccountLoggedInEvent(
                aggregate_id="c1", actor_type="client", actor_id="c1", role="client",
                occurred_at=base + timedelta(minutes=10),
            )
        )
        return log_repo

    def test_mais_recentes_primeiro(self, populated):
        entries = ListActionLogService(populated).execute()

        assert len(entries) == 6
        assert entries[0].action_type == "LOGIN"
        assert entries[1].record_id == "pet-4"
        assert entries[0].to_dict()["timestamp"].startswith("2024-05-01T00:10")

    def test_filtros(self, populated):
        service = ListActionLogService(populated)

        pets = service.execute(ListActionLogQueryDTO(table_name="PET"))
        logins = service.execute(ListActionLogQueryDTO(action_type="login"))

        assert {e.table_name for e in pets} == {"pet"}
        assert [e.record_id for e in logins] == ["c1"]

    def test_limite(self, populated):
        entries = ListActionLogService(populated).execute(ListActionLogQueryDTO(limit=2))
        assert len(entries) == 2

    def test_limite_padrao(self, populated):
        service = ListActionLogService(populated, default_limit=3)
        assert len(service.execute()) == 3

    @pytest.mark.parametrize("query,field", [
        (ListActionLogQueryDTO(limit=0), "limit"),
        (ListActionLogQueryDTO(limit=501), "limit"),
        (ListActionLogQueryDTO(table_name="users"), "table_name"),
        (ListActionLogQueryDTO(action_type="UPDATE"), "action_type"),
    ])
    def test_filtros_invalidos(self, populated, query, field):
        with pytest.raises(ValidationError) as exc:
            ListActionLogService(populated).execute(query)
        assert exc.value.field == field
