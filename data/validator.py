"""Schema validation for uploaded event files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import EVENT_TYPES, CHECK_OUT_TYPE
from data.loader import parse_timestamp


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


EVENT_REQUIRED_COLUMNS = [
    "Member ID",
    "Type",
    "Timestamp",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_events(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, EVENT_REQUIRED_COLUMNS, "Events")
    if not result.is_valid:
        return result

    types = df["Type"].astype(str).str.strip().str.lower()
    unknown = sorted(set(types[~types.isin(EVENT_TYPES)]))
    if unknown:
        result.is_valid = False
        result.errors.append(f"Events: Unknown event types {unknown}. Use one of {EVENT_TYPES}.")

    timestamps = df["Timestamp"].map(parse_timestamp)
    bad_rows = df.index[timestamps.isna()].tolist()
    if bad_rows:
        result.is_valid = False
        result.errors.append(f"Events: Unparseable timestamps in rows {bad_rows}.")

    if "Record ID" in df.columns:
        ids = df["Record ID"].dropna()
        dupes = ids[ids.duplicated()].unique().tolist()
        if dupes:
            result.is_valid = False
            result.errors.append(f"Events: Duplicate record IDs: {dupes}")

    if "Duration (min)" in df.columns:
        raw = df["Duration (min)"]
        durations = pd.to_numeric(raw, errors="coerce")
        non_numeric = df.index[durations.isna() & raw.notna()].tolist()
        if non_numeric:
            result.is_valid = False
            result.errors.append(f"Events: Non-numeric durations in rows {non_numeric}.")
        if (durations < 0).any():
            result.warnings.append("Events: Negative durations found; unmatched check-outs count them as 0.")
        missing_duration = (types == CHECK_OUT_TYPE) & raw.isna()
    else:
        missing_duration = types == CHECK_OUT_TYPE

    if missing_duration.any():
        result.warnings.append(
            f"Events: {int(missing_duration.sum())} check-out(s) without a duration. "
            "These will be ignored in statistics."
        )

    return result
