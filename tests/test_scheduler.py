import pytest

from jadwal_dokter.models import (
    DAYS,
    MAX_DOCTORS,
    MAX_NAME,
    SHIFTS_PER_DAY,
    TOTAL_SLOTS,
    Doctor,
    Shift,
)
from jadwal_dokter.scheduler import (
    EMPTY_LABEL,
    NoDoctorsError,
    build_schedule,
    generate_schedule,
    load_doctors,
)

HEADER = "Nama;MaxShift;Preferensi\n"
WEEK = 21


def write(tmp_path, body):
    path = tmp_path / "dokter.csv"
    path.write_text(HEADER + body, encoding="utf-8", newline="")
    return path


def weeks(schedule):
    return [schedule.slots[i : i + WEEK] for i in range(0, TOTAL_SLOTS, WEEK)]


def test_load_doctors_parses_rows(tmp_path):
    path = write(tmp_path, "Budi;5;PAGI\r\nSari;3;MALAM\n")
    doctors = load_doctors(path)
    assert [(d.name, d.max_shift_per_week, d.preference) for d in doctors] == [
        ("Budi", 5, Shift.PAGI),
        ("Sari", 3, Shift.MALAM),
    ]


def test_load_doctors_skips_invalid_preference(tmp_path):
    path = write(tmp_path, "Budi;5;pagi\nSari;3;SORE\nAni;2;SIANG\n")
    assert [d.name for d in load_doctors(path)] == ["Ani"]


def test_load_doctors_lenient_number(tmp_path):
    path = write(tmp_path, "Budi;5abc;PAGI\nSari;x;MALAM\n")
    assert [d.max_shift_per_week for d in load_doctors(path)] == [5, 0]


def test_load_doctors_truncates_name(tmp_path):
    path = write(tmp_path, "A" * 80 + ";5;PAGI\n")
    (doctor,) = load_doctors(path)
    assert doctor.name == "A" * (MAX_NAME - 1)


def test_load_doctors_limit(tmp_path):
    body = "".join(f"Dr{i};5;PAGI\n" for i in range(MAX_DOCTORS + 5))
    assert len(load_doctors(write(tmp_path, body))) == MAX_DOCTORS


def test_generate_schedule_without_doctors(tmp_path):
    with pytest.raises(NoDoctorsError):
        generate_schedule(write(tmp_path, "Budi;5;SORE\n"))


def test_slot_layout():
    schedule = build_schedule([Doctor("Budi", 5, Shift.PAGI)])
    assert len(schedule.slots) == TOTAL_SLOTS
    for d in (1, 15, DAYS):
        slots = schedule.day(d)
        assert [s.day for s in slots] == [d] * SHIFTS_PER_DAY
        assert [s.shift for s in slots] == list(Shift)
    assert {(s.month, s.year) for s in schedule.slots} == {(6, 2025)}


def test_single_doctor_only_takes_preferred_shift_up_to_limit():
    budi = Doctor("Budi", 7, Shift.PAGI)
    schedule = build_schedule([budi])
    for week in weeks(schedule)[:4]:
        assert all(s.doctor is budi for s in week if s.shift is Shift.PAGI)
        assert all(s.is_empty() for s in week if s.shift is not Shift.PAGI)
    assert budi.violations == 0
    assert budi.total_shifts == sum(1 for s in schedule.slots if s.doctor is budi)


def test_high_limit_fills_everything_and_counts_violations():
    budi = Doctor("Budi", 21, Shift.PAGI)
    schedule = build_schedule([budi])
    assert all(s.doctor is budi for s in schedule.slots)
    assert budi.total_shifts == TOTAL_SLOTS
    assert budi.violations == sum(1 for s in schedule.slots if s.shift is not Shift.PAGI)


def test_preferences_are_served_first():
    malam = Doctor("Sari", 21, Shift.MALAM)
    pagi = Doctor("Budi", 21, Shift.PAGI)
    schedule = build_schedule([malam, pagi])
    assert all(s.doctor is pagi for s in schedule.slots if s.shift is Shift.PAGI)
    assert all(s.doctor is malam for s in schedule.slots if s.shift is Shift.MALAM)
    assert pagi.violations == 0


def test_weekly_limits_and_counters_are_consistent():
    doctors = [
        Doctor("A", 4, Shift.PAGI),
        Doctor("B", 6, Shift.SIANG),
        Doctor("C", 3, Shift.MALAM),
        Doctor("D", 5, Shift.PAGI),
    ]
    schedule = build_schedule(doctors)
    for week in weeks(schedule)[:4]:
        for d in doctors:
            assert sum(1 for s in week if s.doctor is d) <= d.max_shift_per_week
    for d in doctors:
        assigned = [s for s in schedule.slots if s.doctor is d]
        assert d.total_shifts == len(assigned)
        assert d.violations == sum(1 for s in assigned if s.shift is not d.preference)


def test_rebuild_resets_counters():
    budi = Doctor("Budi", 21, Shift.PAGI)
    build_schedule([budi])
    first = (budi.total_shifts, budi.violations)
    build_schedule([budi])
    assert (budi.total_shifts, budi.violations) == first


def test_zero_limit_leaves_schedule_empty():
    schedule = build_schedule([Doctor("Budi", 0, Shift.PAGI)])
    assert all(s.is_empty() for s in schedule.slots)
    assert EMPTY_LABEL in schedule.format_daily(1)


@pytest.mark.parametrize("day", [0, DAYS + 1, -3])
def test_day_out_of_range(day):
    schedule = build_schedule([])
    with pytest.raises(ValueError):
        schedule.day(day)
    with pytest.raises(ValueError):
        schedule.format_daily(day)


@pytest.mark.parametrize("week", [0, 5])
def test_week_out_of_range(week):
    with pytest.raises(ValueError):
        build_schedule([]).week(week)


def test_week_slots():
    schedule = build_schedule([])
    slots = schedule.week(2)
    assert [s.day for s in slots[::SHIFTS_PER_DAY]] == list(range(8, 15))


def test_formatting_mentions_doctors():
    budi = Doctor("Budi", 21, Shift.PAGI)
    schedule = build_schedule([budi])
    assert "Jadwal Hari ke-3:" in schedule.format_daily(3)
    assert "Jadwal Mingguan ke-2:" in schedule.format_weekly(2)
    monthly = schedule.format_monthly()
    assert monthly.count("| Budi") == TOTAL_SLOTS
    assert f"{'Budi':<20} | {budi.total_shifts}" in schedule.format_shift_totals()
    assert f"{'Budi':<20} | {budi.violations}" in schedule.format_violations()