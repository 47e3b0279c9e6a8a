"""Event booking form and list."""
from __future__ import annotations

import logging
from datetime import datetime, time, timedelta

import streamlit as st
from pydantic import ValidationError

from bizdesk.models import EVENT_STATUSES, Event
from core.i18n import Translator

logger = logging.getLogger(__name__)


def status_label(tr: Translator, status: str) -> str:
    # section keys resolve to dicts
    return str(tr.t(f"events.status.{status}"))


def _field(tr: Translator, name: str) -> str:
    return str(tr.t(f"events.fields.{name}"))


def render_event_form(tr: Translator) -> None:
    """Booking form; valid events are appended to ``st.session_state.events``."""
    st.session_state.setdefault("events", [])
    with st.form("event_form", clear_on_submit=False):
        st.markdown(f"**{tr.t('events.new')}**")
        c1, c2 = st.columns(2)
        service_id = c1.number_input(_field(tr, "service_id"), min_value=1, value=1, step=1, key="event_service_id")
        status = c2.selectbox(
            _field(tr, "status"),
            EVENT_STATUSES,
            format_func=lambda s: status_label(tr, s),
            key="event_status",
        )
        first = c1.text_input(_field(tr, "client_first_name"), key="event_first_name")
        last = c2.text_input(_field(tr, "client_last_name"), key="event_last_name")
        email = c1.text_input(_field(tr, "client_email"), key="event_email")
        phone = c2.text_input(_field(tr, "client_phone"), key="event_phone")
        day = c1.date_input(_field(tr, "date"), key="event_day")
        start = c2.time_input(_field(tr, "start_time"), value=time(9, 0), key="event_start")
        minutes = c2.number_input(_field(tr, "duration"), min_value=5, value=60, step=5, key="event_minutes")
        notes = st.text_area(_field(tr, "notes"), key="event_notes")
        submitted = st.form_submit_button(tr.t("events.submit"))

    if not submitted:
        return
    start_dt = datetime.combine(day, start)
    try:
        event = Event(
            service_id=int(service_id),
            client_first_name=first,
            client_last_name=last,
            client_email=email,
            client_phone=phone,
            start_time=start_dt,
            end_time=start_dt + timedelta(minutes=int(minutes)),
            status=status,
            notes=notes or None,
        )
    except ValidationError as exc:
        logger.info("Rejected event booking: %s", exc.errors())
        st.error(tr.t("events.invalid"))
        for err in exc.errors():
            loc = ".".join(str(p) for p in err["loc"])
            st.caption(f"{_field(tr, loc)}: {err['msg']}")
        return
    st.session_state["events"].append(event.model_dump(mode="json"))
    st.success(tr.t("events.saved"))


def render_event_list(tr: Translator) -> None:
    events = st.session_state.get("events", [])
    st.subheader(tr.t("events.title"))
    if not events:
        st.info(tr.t("events.empty"))
        return
    rows = []
    for ev in events:
        rows.append(
            {
                _field(tr, "client_first_name"): ev["client_first_name"],
                _field(tr, "client_last_name"): ev["client_last_name"],
                _field(tr, "client_email"): ev["client_email"],
                _field(tr, "start_time"): ev["start_time"],
                _field(tr, "end_time"): ev["end_time"],
                _field(tr, "status"): status_label(tr, ev["status"]),
            }
        )
    st.table(rows)


def render_events(tr: Translator) -> None:
    render_event_form(tr)
    render_event_list(tr)
