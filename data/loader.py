"""File upload parsing: CSV/XLSX into Event lists."""

import logging
import uuid
import pandas as pd
from datetime import datetime
from typing import Dict, List, Optional

from models.event import Event
from engine.records import active_events

logger = logging.getLogger(__name__)

TRUE_STRINGS = {"true", "yes", "y", "1"}


def _parse_deleted(value) -> bool:
    if pd.isna(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def parse_timestamp(value) -> Optional[datetime]:
    """Naive local datetime for a cell, or None if it cannot be parsed.

    Values carrying a UTC offset are converted to the local clock and the
    offset dropped, so every event compares against naive period bounds.
    """
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return None
    moment = ts.to_pydatetime()
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


def parse_duration(value) -> Optional[float]:
    """Minutes as float, None for an empty cell. Raises ValueError if not numeric."""
    if pd.isna(value):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid duration {value!r}")


def parse_events(df: pd.DataFrame) -> List[Event]:
    """Convert an events DataFrame into Event objects.

    Rows with an unparseable timestamp or duration are skipped with a
    warning; run validate_events first to report them to the user.
    """
    has_ids = "Record ID" in df.columns
    has_duration = "Duration (min)" in df.columns
    has_deleted = "Deleted" in df.columns

    events = []
    for idx, row in df.iterrows():
        timestamp = parse_timestamp(row["Timestamp"])
        if timestamp is None:
            logger.warning("Row %s: unparseable timestamp %r, skipped", idx, row["Timestamp"])
            continue

        duration = None
        if has_duration:
            try:
                duration = parse_duration(row["Duration (min)"])
            except ValueError as e:
                logger.warning("Row %s: %s, skipped", idx, e)
                continue

        record_id = uuid.uuid4().hex
        if has_ids and pd.notna(row.get("Record ID")):
            record_id = str(row["Record ID"]).strip()

        events.append(Event(
            id=record_id,
            member_id=str(row["Member ID"]).strip(),
            type=str(row["Type"]).strip().lower(),
            timestamp=timestamp,
            duration=duration,
            deleted=_parse_deleted(row["Deleted"]) if has_deleted else False,
        ))
    logger.info("Parsed %d events from %d rows", len(events), len(df))
    return events


def parse_member_names(df: pd.DataFrame) -> Dict[str, str]:
    """Member ID -> display name from the optional 'Name' column.

    The last non-empty name seen for a member wins.
    """
    if "Name" not in df.columns:
        return {}
    names = {}
    for _, row in df.iterrows():
        if pd.notna(row.get("Name")) and str(row["Name"]).strip():
            names[str(row["Member ID"]).strip()] = str(row["Name"]).strip()
    return names


def load_active_events(df: pd.DataFrame) -> List[Event]:
    """Parse and drop soft-deleted rows, giving the input the engine expects."""
    return active_events(parse_events(df))


def events_to_df(events: List[Event]) -> pd.DataFrame:
    """Inverse of parse_events, for tables and downloads."""
    return pd.DataFrame([
        {
            "Record ID": e.id,
            "Member ID": e.member_id,
            "Type": e.type,
            "Timestamp": e.timestamp,
            "Duration (min)": e.duration,
            "Deleted": e.deleted,
        }
        for e in events
    ], columns=["Record ID", "Member ID", "Type", "Timestamp", "Duration (min)", "Deleted"])


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
