"""Writing a schedule to a comma-separated file."""

from __future__ import annotations

from .scheduler import Schedule

HEADER = ("Hari", "Shift", "Dokter")
EMPTY_DOCTOR = "NULL"


def schedule_rows(schedule: Schedule) -> list[tuple[int, str, str]]:
    """Rows of (day, shift name, doctor name) for every slot, in order."""
    return [
        (slot.day, slot.shift.name, slot.doctor.name if slot.doctor is not None else EMPTY_DOCTOR)
        for slot in schedule.slots
    ]


def write_schedule(schedule: Schedule, path) -> None:
    """Write the schedule with a header line to ``path``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(",".join(HEADER) + "\n")
        for day, shift, doctor in schedule_rows(schedule):
            handle.write(f"{day},{shift},{doctor}\n")