from datetime import datetime

import pytest
from pydantic import ValidationError

from bizdesk.models import (
    EVENT_STATUSES,
    TABLES,
    CompanyUserLink,
    Event,
    find_link_conflicts,
)


def _event(**overrides):
    data = {
        "service_id": 1,
        "client_first_name": "Ana",
        "client_last_name": "Popescu",
        "client_email": "ana@example.com",
        "client_phone": "+37360000000",
        "start_time": datetime(2026, 2, 1, 9, 0),
        "end_time": datetime(2026, 2, 1, 10, 0),
    }
    data.update(overrides)
    return Event(**data)


def test_event_defaults_to_scheduled():
    ev = _event()
    assert ev.status == "scheduled"
    assert ev.notes is None


@pytest.mark.parametrize("status", EVENT_STATUSES)
def test_event_accepts_every_status(status):
    assert _event(status=status).status == status


def test_event_rejects_unknown_status():
    with pytest.raises(ValidationError):
        _event(status="postponed")


def test_event_column_lengths():
    _event(client_phone="1" * 20)
    with pytest.raises(ValidationError):
        _event(client_phone="1" * 21)
    with pytest.raises(ValidationError):
        _event(client_first_name="x" * 101)
    with pytest.raises(ValidationError):
        _event(client_email="a" * 250 + "@b.com")


def test_link_defaults_active():
    link = CompanyUserLink(company_id=1, user_id=2, role_id=3)
    assert link.is_active is True


def test_find_link_conflicts():
    links = [
        CompanyUserLink(company_id=1, user_id=1, role_id=1),
        CompanyUserLink(company_id=1, user_id=2, role_id=1),
        CompanyUserLink(company_id=1, user_id=1, role_id=2),
        CompanyUserLink(company_id=1, user_id=1, role_id=3),
    ]
    assert find_link_conflicts(links) == [(1, 1)]


def test_table_contracts_match_models():
    link = TABLES["companies_users_link"]
    assert link.unique == [("company_id", "user_id")]
    assert {fk.column: fk.on_delete for fk in link.foreign_keys} == {
        "company_id": "cascade",
        "user_id": "cascade",
        "role_id": "restrict",
    }
    events = TABLES["events"]
    assert ("start_time", "end_time") in events.indexes
    assert "client_email" in events.columns
    assert events.foreign_keys[0].references == "services.id"
