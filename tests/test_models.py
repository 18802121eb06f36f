import pytest

from jadwal_dokter.models import (
    Doctor,
    Shift,
    Slot,
    parse_shift,
)


@pytest.mark.parametrize("name", ["PAGI", "SIANG", "MALAM"])
def test_parse_shift_accepts_exact_names(name):
    assert parse_shift(name).name == name


@pytest.mark.parametrize("text", ["pagi", "Malam", "", "SORE", " PAGI"])
def test_parse_shift_rejects_other_text(text):
    with pytest.raises(ValueError):
        parse_shift(text)


@pytest.mark.parametrize(
    ("text", "value", "member"),
    [("PAGI", 0, Shift.PAGI), ("SIANG", 1, Shift.SIANG), ("MALAM", 2, Shift.MALAM)],
)
def test_parse_shift_values(text, value, member):
    shift = parse_shift(text)
    assert shift is member
    assert shift.value == value


@pytest.mark.parametrize(
    ("text", "label"),
    [("PAGI", "Pagi"), ("SIANG", "Siang"), ("MALAM", "Malam")],
)
def test_parsed_shift_labels(text, label):
    assert parse_shift(text).label == label


def test_slot_empty_until_assigned():
    slot = Slot(day=1, shift=Shift.PAGI)
    assert slot.is_empty()
    slot.doctor = Doctor("Budi", 5, Shift.PAGI)
    assert not slot.is_empty()


def test_doctors_compare_by_identity():
    a = Doctor("Budi", 5, Shift.PAGI)
    b = Doctor("Budi", 5, Shift.PAGI)
    assert a != b
    assert a == a


def test_doctor_counters_start_at_zero():
    d = Doctor("Sari", 3, Shift.MALAM)
    assert (d.total_shifts, d.violations) == (0, 0)