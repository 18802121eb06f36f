# jadwal_dokter

Builds a 30-day, three-shift schedule for doctors. Each doctor has a weekly shift limit and a preferred shift. The doctors are read from a plain roster file.

## Roster file

The roster is a semicolon-separated text file. The first line is a header and is skipped. Each line after it holds three fields:

- a name
- the maximum number of shifts per week
- a preferred shift, which is `PAGI`, `SIANG` or `MALAM`

```
Nama;MaxShift;Preferensi
Andi;5;PAGI
Budi;4;MALAM
Citra;6;SIANG
```

Lines with fewer than three fields are ignored. A line whose preference is not exactly one of the three shift names is also skipped during scheduling. At most 100 doctors are loaded, and names longer than 49 characters are cut short.

## Installing

```
pip install .
```

## Interactive use

```
jadwal-dokter
```

The program first asks for two files:

- the roster file
- the schedule output file

Both files must already exist. If a file cannot be opened, the program asks for it again.

The main menu lets you:

- add a doctor. The preference you type is converted to upper case.
- remove a doctor. Every line with that name is removed, and the header is kept.
- list the roster

The main menu also opens a second menu. When you enter it, the schedule is generated from the roster. In the second menu you can:

- view a single day (1–30)
- view a week (1–4)
- view the whole month
- see each doctor's shift total
- see how many assigned shifts went against each doctor's preference
- save the schedule to the output file

The saved schedule is CSV with the header `Hari,Shift,Dokter`. An unfilled slot is written as `NULL`.

Menu choices that are not numbers count as invalid.

## How shifts are assigned

The month is split into blocks of 21 shifts, which is 7 days. Each block is filled in two passes:

1. The morning slots of the block are filled first, then the afternoon slots, then the night slots. Each slot goes to the first doctor who prefers that shift and is still under their weekly limit for the block.
2. Any slot that is still empty goes to the first doctor who is still under their limit. If the slot is not the doctor's preferred shift, it counts as a violation.

The last block covers only days 29–30. For that block the weekly limit is scaled down in proportion to the block's length, rounded up. A slot stays empty when no doctor has capacity left.

## Library use

```python
from jadwal_dokter.scheduler import generate_schedule
from jadwal_dokter.export import write_schedule

schedule = generate_schedule("daftar_dokter.csv")
print(schedule.format_daily(1))
print(schedule.format_shift_totals())
write_schedule(schedule, "jadwal.csv")
```

### Scheduling and export

- `generate_schedule` raises `NoDoctorsError`, a subclass of `ValueError`, when the roster yields no usable doctors.
- `load_doctors` and `build_schedule` in `jadwal_dokter.scheduler` do the two steps of `generate_schedule` separately.
- `Schedule.day(day)` and `Schedule.week(week)` return the slots themselves. They raise `ValueError` when the day or week is out of range.
- `schedule_rows` in `jadwal_dokter.export` gives the rows that `write_schedule` writes, without the header.

### Roster files

`jadwal_dokter.roster` reads and edits roster files:

- `read_roster_rows`
- `format_roster`
- `add_doctor`
- `remove_doctor`, which returns whether anything was removed

## Running the tests

```
pip install .[test]
pytest
```