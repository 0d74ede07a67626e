"""Generate synthetic check-in/check-out datasets for the Attendance Tracker."""

import pandas as pd
import random
import os
from datetime import date, datetime, timedelta
from typing import Optional

MEMBER_NAMES = {
    "alice": "Alice Moreau",
    "bob": "Bob Tanaka",
    "chen": "Chen Wei",
    "dana": "Dana Okafor",
    "emeka": "Emeka Eze",
}
MEMBERS = list(MEMBER_NAMES)


def generate_events_df(
    days: int = 60,
    end_date: Optional[date] = None,
    seed: int = 42,
) -> pd.DataFrame:
    """Generate ``days`` days of events for the sample members.

    Includes overnight stays, check-outs without a check-in and a few
    soft-deleted rows so every aggregation path is exercised.
    """
    rng = random.Random(seed)
    end_date = end_date or date.today()
    start_date = end_date - timedelta(days=days - 1)

    rows = []
    counter = 0

    def add_row(member, event_type, ts, duration=None, deleted=False):
        nonlocal counter
        counter += 1
        rows.append({
            "Record ID": f"r{counter:05d}",
            "Member ID": member,
            "Name": MEMBER_NAMES[member],
            "Type": event_type,
            "Timestamp": ts.strftime("%Y-%m-%d %H:%M:%S"),
            "Duration (min)": duration,
            "Deleted": deleted,
        })

    for member in MEMBERS:
        attendance_rate = rng.uniform(0.4, 0.9)
        for offset in range(days):
            day = start_date + timedelta(days=offset)
            if rng.random() > attendance_rate:
                continue

            check_in = datetime.combine(day, datetime.min.time()) + timedelta(
                hours=rng.randint(7, 20), minutes=rng.randint(0, 59)
            )
            stay = timedelta(minutes=rng.randint(30, 9 * 60))
            if rng.random() < 0.08:
                stay += timedelta(hours=rng.randint(4, 12))  # overnight
            check_out = check_in + stay
            duration = round(stay.total_seconds() / 60)

            if rng.random() < 0.05:
                # Missed check-in: only the check-out with its recorded duration
                add_row(member, "out", check_out, duration)
                continue

            add_row(member, "in", check_in)
            add_row(member, "out", check_out, duration, deleted=rng.random() < 0.03)

    return pd.DataFrame(rows)


def generate_sample_csv(output_dir: str):
    """Write the sample events CSV to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_events_df().to_csv(os.path.join(output_dir, "events.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write the sample events as a single-sheet Excel file."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "events.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_events_df().to_excel(writer, sheet_name="Events", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
