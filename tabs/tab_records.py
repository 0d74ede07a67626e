"""Tab 3: Records: data upload, manual check-in/out, soft delete, calendar settings."""

import streamlit as st
from datetime import datetime

from data.loader import load_file, parse_events, parse_member_names, events_to_df
from data.validator import validate_events
from data.sample_data import generate_events_df
from data.session_store import (
    get_events, set_events, set_data_loaded, get_members, set_member_names,
    get_calendar_config, set_calendar_config,
)
from components.tables import render_events_table
from engine.records import add_record, delete_record, RecordNotFoundError
from config.defaults import EVENT_TYPES

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _load_and_validate(events_df):
    """Validate and store uploaded events."""
    result = validate_events(events_df)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False

    for w in result.warnings:
        st.warning(w)

    events = parse_events(events_df)
    set_events(events)
    set_member_names(parse_member_names(events_df))
    set_data_loaded(True)

    deleted = sum(1 for e in events if e.deleted)
    members = len({e.member_id for e in events})
    st.success(f"Data loaded: {len(events)} events for {members} members ({deleted} soft-deleted)")
    return True


def _render_upload():
    st.subheader("Data Upload")
    st.caption(
        "CSV or `.xlsx` with columns **Member ID**, **Type** (`in`/`out`), **Timestamp**; "
        "optional **Record ID**, **Duration (min)**, **Deleted**, **Name**."
    )
    uploaded = st.file_uploader("Events file", type=["csv", "xlsx"], key="upload_events")

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload"):
            if uploaded is None:
                st.error("Choose a file first.")
            else:
                try:
                    _load_and_validate(load_file(uploaded))
                except ValueError as e:
                    st.error(str(e))
    with col_sample:
        if st.button("Load Sample Data", key="btn_sample"):
            _load_and_validate(generate_events_df())


def _render_manual_entry():
    st.subheader("Record Check-in / Check-out")
    with st.form("manual_entry"):
        col1, col2, col3 = st.columns(3)
        member_id = col1.text_input("Member ID")
        event_type = col2.selectbox("Type", EVENT_TYPES)
        use_now = col3.checkbox("Use current time", value=True)
        col4, col5 = st.columns(2)
        day = col4.date_input("Date")
        clock = col5.time_input("Time")
        submitted = st.form_submit_button("Record")

    if submitted:
        if not member_id.strip():
            st.error("Member ID is required.")
            return
        timestamp = datetime.now() if use_now else datetime.combine(day, clock)
        record, events = add_record(get_events(), member_id.strip(), event_type, timestamp)
        set_events(events)
        set_data_loaded(True)
        if record.is_check_out:
            st.success(f"Checked out {record.member_id}: {record.duration} min"
                       + (" (crosses days)" if record.crosses_days else ""))
        else:
            st.success(f"Checked in {record.member_id} at {record.timestamp:%Y-%m-%d %H:%M}")


def _render_records_table():
    st.subheader("Records")
    members = get_members()
    if not members:
        st.caption("No records.")
        return

    member_filter = st.selectbox("Show member", ["All"] + members, key="records_member_filter")
    events = get_events()
    shown = events if member_filter == "All" else [e for e in events if e.member_id == member_filter]
    render_events_table(events_to_df(sorted(shown, key=lambda e: e.timestamp, reverse=True)))

    col1, col2 = st.columns([3, 1])
    record_id = col1.text_input("Record ID to delete", key="delete_record_id")
    if col2.button("Delete", key="btn_delete"):
        try:
            set_events(delete_record(events, record_id.strip()))
            st.success(f"Record {record_id} deleted.")
        except RecordNotFoundError:
            st.error(f"No record with ID {record_id!r}.")


def _render_calendar_settings():
    st.subheader("Calendar Settings")
    cfg = dict(get_calendar_config())
    col1, col2 = st.columns(2)
    first_weekday = col1.selectbox(
        "Week starts on",
        options=list(range(7)),
        index=cfg.get("first_weekday", 6),
        format_func=lambda d: WEEKDAY_NAMES[d],
        key="cfg_first_weekday",
    )
    min_days = col2.number_input(
        "Week 1 contains January",
        min_value=1, max_value=7,
        value=cfg.get("first_week_min_days", 1),
        key="cfg_min_days",
    )
    weekend = st.multiselect(
        "Weekend days",
        options=list(range(7)),
        default=cfg.get("weekend_days", [5, 6]),
        format_func=lambda d: WEEKDAY_NAMES[d],
        key="cfg_weekend",
    )
    if st.button("Save Calendar Settings", key="btn_save_calendar"):
        set_calendar_config({
            "first_weekday": first_weekday,
            "first_week_min_days": int(min_days),
            "weekend_days": list(weekend),
        })
        st.success("Calendar settings saved.")


def render(sidebar_state):
    """Render the Records tab."""
    st.header("Records")
    _render_upload()
    st.divider()
    _render_manual_entry()
    st.divider()
    _render_records_table()
    st.divider()
    _render_calendar_settings()
