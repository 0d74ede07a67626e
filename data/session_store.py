"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import Dict, List

from models.event import Event
from models.calendar import CalendarPolicy
from engine.records import active_events
from config.defaults import DEFAULT_FIRST_WEEKDAY, DEFAULT_FIRST_WEEK_MIN_DAYS, DEFAULT_WEEKEND_DAYS


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "events": [],
        "member_names": {},
        "data_loaded": False,
        "calendar_config": {
            "first_weekday": DEFAULT_FIRST_WEEKDAY,
            "first_week_min_days": DEFAULT_FIRST_WEEK_MIN_DAYS,
            "weekend_days": list(DEFAULT_WEEKEND_DAYS),
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_events() -> List[Event]:
    """All events, soft-deleted ones included."""
    return st.session_state.get("events", [])


def get_active_events() -> List[Event]:
    return active_events(get_events())


def get_members() -> List[str]:
    return sorted({e.member_id for e in get_events()})


def get_member_names() -> Dict[str, str]:
    return st.session_state.get("member_names", {})


def get_calendar_config() -> dict:
    return st.session_state.get("calendar_config", {})


def get_calendar_policy() -> CalendarPolicy:
    return CalendarPolicy.from_config(get_calendar_config())


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_events(events: List[Event]):
    st.session_state["events"] = events


def set_member_names(names: Dict[str, str]):
    st.session_state["member_names"] = names


def set_calendar_config(config: dict):
    st.session_state["calendar_config"] = config


def set_data_loaded(loaded: bool):
    st.session_state["data_loaded"] = loaded
