"""Row models for the company membership and event booking tables.

These mirror the database migrations so rows can be validated before they
reach the persistence layer. They carry no ORM behaviour.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field

EventStatus = Literal["scheduled", "confirmed", "in_progress", "completed", "cancelled", "no_show"]

EVENT_STATUSES: List[str] = [
    "scheduled",
    "confirmed",
    "in_progress",
    "completed",
    "cancelled",
    "no_show",
]


class CompanyUserLink(BaseModel):
    id: Optional[int] = None
    company_id: int
    user_id: int
    role_id: int
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Event(BaseModel):
    id: Optional[int] = None
    service_id: int
    client_first_name: str = Field(max_length=100)
    client_last_name: str = Field(max_length=100)
    client_email: str = Field(max_length=255)
    client_phone: str = Field(max_length=20)
    start_time: datetime
    end_time: datetime
    status: EventStatus = "scheduled"
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ForeignKey(BaseModel):
    column: str
    references: str
    on_delete: Literal["cascade", "restrict"] = "restrict"


class TableContract(BaseModel):
    name: str
    columns: List[str]
    unique: List[Tuple[str, ...]] = Field(default_factory=list)
    indexes: List[Tuple[str, ...]] = Field(default_factory=list)
    foreign_keys: List[ForeignKey] = Field(default_factory=list)


TABLES: Dict[str, TableContract] = {
    "companies_users_link": TableContract(
        name="companies_users_link",
        columns=list(CompanyUserLink.model_fields),
        unique=[("company_id", "user_id")],
        indexes=[("company_id",), ("user_id",), ("role_id",), ("is_active",)],
        foreign_keys=[
            ForeignKey(column="company_id", references="companies.id", on_delete="cascade"),
            ForeignKey(column="user_id", references="users.id", on_delete="cascade"),
            ForeignKey(column="role_id", references="roles.id"),
        ],
    ),
    "events": TableContract(
        name="events",
        columns=list(Event.model_fields),
        indexes=[
            ("service_id",),
            ("status",),
            ("start_time",),
            ("end_time",),
            ("client_email",),
            ("start_time", "end_time"),
        ],
        foreign_keys=[
            ForeignKey(column="service_id", references="services.id", on_delete="cascade"),
        ],
    ),
}


def find_link_conflicts(links: Iterable[CompanyUserLink]) -> List[Tuple[int, int]]:
    """Return ``(company_id, user_id)`` pairs that appear more than once."""
    seen = set()
    conflicts: List[Tuple[int, int]] = []
    for link in links:
        pair = (link.company_id, link.user_id)
        if pair in seen and pair not in conflicts:
            conflicts.append(pair)
        seen.add(pair)
    return conflicts
