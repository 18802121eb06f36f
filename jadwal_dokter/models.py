"""Core data types: shifts, doctors and schedule slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_NAME = 50
MAX_DOCTORS = 100
DAYS = 30
SHIFTS_PER_DAY = 3
TOTAL_SLOTS = DAYS * SHIFTS_PER_DAY
SCHEDULE_MONTH = 6
SCHEDULE_YEAR = 2025


class Shift(IntEnum):
    """The three shifts of a day, in the order they occur."""

    PAGI = 0
    SIANG = 1
    MALAM = 2

    @property
    def label(self) -> str:
        """Name used in human-readable tables (e.g. ``Pagi``)."""
        return self.name.capitalize()


def parse_shift(text: str) -> Shift:
    """Return the shift named exactly ``PAGI``, ``SIANG`` or ``MALAM``."""
    try:
        return Shift[text]
    except KeyError:
        raise ValueError(f"invalid shift preference: {text!r}") from None


@dataclass(eq=False)
class Doctor:
    """A doctor with a weekly shift limit and a preferred shift.

    Doctors compare by identity, so two entries with the same name stay distinct.
    """

    name: str
    max_shift_per_week: int
    preference: Shift
    total_shifts: int = 0
    violations: int = 0


@dataclass
class Slot:
    """One shift on one day of the schedule."""

    day: int
    shift: Shift
    month: int = SCHEDULE_MONTH
    year: int = SCHEDULE_YEAR
    doctor: Doctor | None = field(default=None)

    def is_empty(self) -> bool:
        """True when no doctor is assigned to this slot."""
        return self.doctor is None