"""Loading doctors and building the 30-day shift schedule."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import (
    DAYS,
    MAX_DOCTORS,
    MAX_NAME,
    SHIFTS_PER_DAY,
    TOTAL_SLOTS,
    Doctor,
    Shift,
    Slot,
    parse_shift,
)

WEEK_SLOTS = 7 * SHIFTS_PER_DAY
SCHEDULE_WEEKS = 5
DISPLAY_WEEKS = 4
EMPTY_LABEL = "(Kosong)"

_SHORT_RULE = "-" * 31
_LONG_RULE = "-" * 49
_INFO_RULE = "-" * 39
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LINE_END = re.compile(r"[\r\n]")


class NoDoctorsError(ValueError):
    """Raised when a roster file yields no usable doctors."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def load_doctors(path) -> list[Doctor]:
    """Read up to MAX_DOCTORS doctors from a roster file.

    Rows with fewer than three fields or an unknown shift preference are skipped.
    """
    doctors: list[Doctor] = []
    with open(path, encoding="utf-8", newline="") as handle:
        next(handle, None)
        for line in handle:
            if len(doctors) >= MAX_DOCTORS:
                break
            line = _LINE_END.split(line, maxsplit=1)[0]
            tokens = [token for token in line.split(";") if token]
            if len(tokens) < 3:
                continue
            name, max_shift, pref = tokens[:3]
            try:
                preference = parse_shift(pref)
            except ValueError:
                continue
            doctors.append(Doctor(name[: MAX_NAME - 1], _atoi(max_shift), preference))
    return doctors


def _allowed(doctor: Doctor, size: int) -> int:
    if size < WEEK_SLOTS:
        return (doctor.max_shift_per_week * size + WEEK_SLOTS - 1) // WEEK_SLOTS
    return doctor.max_shift_per_week


def _taken(week: list[Slot], doctor: Doctor) -> int:
    return sum(1 for slot in week if slot.doctor is doctor)


def build_schedule(doctors: list[Doctor]) -> Schedule:
    """Assign doctors to the 90 slots, week by week.

    Preferred shifts are filled first, then remaining gaps go to any doctor with
    capacity left that week; such assignments count as preference violations.
    """
    for doctor in doctors:
        doctor.total_shifts = 0
        doctor.violations = 0

    slots = [Slot(day=i // SHIFTS_PER_DAY + 1, shift=Shift(i % SHIFTS_PER_DAY)) for i in range(TOTAL_SLOTS)]

    for week_index in range(SCHEDULE_WEEKS):
        start = week_index * WEEK_SLOTS
        week = slots[start : min(start + WEEK_SLOTS, TOTAL_SLOTS)]
        size = len(week)

        for shift in Shift:
            for slot in week:
                if slot.shift is not shift or not slot.is_empty():
                    continue
                for doctor in doctors:
                    if doctor.preference is shift and _taken(week, doctor) < _allowed(doctor, size):
                        slot.doctor = doctor
                        doctor.total_shifts += 1
                        break

        for slot in week:
            if not slot.is_empty():
                continue
            for doctor in doctors:
                if _taken(week, doctor) < _allowed(doctor, size):
                    slot.doctor = doctor
                    doctor.total_shifts += 1
                    if doctor.preference is not slot.shift:
                        doctor.violations += 1
                    break

    return Schedule(doctors=list(doctors), slots=slots)


def generate_schedule(path) -> Schedule:
    """Load doctors from ``path`` and build their schedule."""
    doctors = load_doctors(path)
    if not doctors:
        raise NoDoctorsError("Tidak ada data dokter yang berhasil dimuat dari file.")
    return build_schedule(doctors)


def _doctor_name(slot: Slot) -> str:
    return slot.doctor.name if slot.doctor is not None else EMPTY_LABEL


@dataclass
class Schedule:
    """A 30-day schedule of three shifts per day."""

    doctors: list[Doctor]
    slots: list[Slot]

    def day(self, day: int) -> tuple[Slot, ...]:
        """The three slots of a day (1-30)."""
        if not 1 <= day <= DAYS:
            raise ValueError("Hari harus antara 1-30")
        start = (day - 1) * SHIFTS_PER_DAY
        return tuple(self.slots[start : start + SHIFTS_PER_DAY])

    def week(self, week: int) -> list[Slot]:
        """The slots of a displayable week (1-4)."""
        if not 1 <= week <= DISPLAY_WEEKS:
            raise ValueError("Minggu harus antara 1-4")
        first = (week - 1) * 7 + 1
        last = min(week * 7, DAYS)
        return [slot for d in range(first, last + 1) for slot in self.day(d)]

    def format_daily(self, day: int) -> str:
        """Table of one day's shifts."""
        slots = self.day(day)
        lines = ["", f"Jadwal Hari ke-{day}:", _SHORT_RULE, "Shift     | Dokter", _SHORT_RULE]
        lines.extend(f"{slot.shift.label:<9} | {_doctor_name(slot)}" for slot in slots)
        lines.append(_SHORT_RULE)
        return "\n".join(lines) + "\n"

    def format_weekly(self, week: int) -> str:
        """Table of one week's shifts."""
        slots = self.week(week)
        lines = ["", f"Jadwal Mingguan ke-{week}:", _LONG_RULE, "Hari | Shift     | Dokter", _LONG_RULE]
        lines.extend(f"{slot.day:4d} | {slot.shift.label:<9} | {_doctor_name(slot)}" for slot in slots)
        lines.append(_LONG_RULE)
        return "\n".join(lines) + "\n"

    def format_monthly(self) -> str:
        """Table of all 30 days, with a rule after every seventh day."""
        lines = ["", "Jadwal Bulanan (30 Hari):", _LONG_RULE, "Hari | Shift     | Dokter", _LONG_RULE]
        for d in range(1, DAYS + 1):
            lines.extend(f"{slot.day:4d} | {slot.shift.label:<9} | {_doctor_name(slot)}" for slot in self.day(d))
            if d % 7 == 0:
                lines.append(_LONG_RULE)
        lines.append(_LONG_RULE)
        return "\n".join(lines) + "\n"

    def format_shift_totals(self) -> str:
        """Table of the number of shifts each doctor works."""
        lines = ["", "Info Shift Dokter:", _INFO_RULE, f"{'Nama':<20} | Total Shift", _INFO_RULE]
        lines.extend(f"{d.name:<20} | {d.total_shifts}" for d in self.doctors)
        lines.append(_INFO_RULE)
        return "\n".join(lines) + "\n"

    def format_violations(self) -> str:
        """Table of how often each doctor works outside their preferred shift."""
        lines = ["", "Info Pelanggaran Preferensi:", _INFO_RULE, f"{'Nama':<20} | Pelanggaran", _INFO_RULE]
        lines.extend(f"{d.name:<20} | {d.violations}" for d in self.doctors)
        lines.append(_INFO_RULE)
        return "\n".join(lines) + "\n"