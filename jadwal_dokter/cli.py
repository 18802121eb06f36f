"""Interactive menu for managing doctors and viewing their shift schedule."""

from __future__ import annotations

import argparse
import os
import re
import sys
import time

from .export import write_schedule
from .models import MAX_NAME
from .roster import add_doctor, format_roster, remove_doctor
from .scheduler import NoDoctorsError, Schedule, build_schedule, generate_schedule

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

MAIN_MENU = (
    "\n--- MENU DATA DOKTER ---\n"
    "1. Tambah Dokter\n"
    "2. Hapus Dokter\n"
    "3. Tampilkan Daftar Dokter\n"
    "4. Masuk ke Menu Pengaturan Jadwal\n"
    "0. Keluar\n"
    "Pilihan: "
)

SCHEDULE_MENU = (
    "\n--- MENU PENGATURAN JADWAL ---\n"
    "1. Tampilkan Jadwal Harian\n"
    "2. Tampilkan Jadwal Mingguan\n"
    "3. Tampilkan Jadwal Bulanan\n"
    "4. Tampilkan Info Shift per Dokter\n"
    "5. Tampilkan Info Pelanggaran Preferensi\n"
    "6. Simpan Jadwal ke File\n"
    "0. Kembali ke Menu Utama\n"
    "Pilihan: "
)


def pause(seconds: int) -> None:
    """Wait for the given number of seconds."""
    time.sleep(seconds)


def _report(message: str, error: OSError) -> None:
    print(f"{message}: {error.strerror or error}", file=sys.stderr)


class _Console:
    """Line-oriented prompts over the current standard streams."""

    def _ask(self, prompt: str) -> str:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        while True:
            line = sys.stdin.readline()
            if not line:
                raise EOFError
            if line.strip():
                return line.rstrip("\r\n")

    def token(self, prompt: str) -> str:
        return self._ask(prompt).split()[0]

    def text(self, prompt: str) -> str:
        return self._ask(prompt).lstrip()

    def integer(self, prompt: str) -> int | None:
        match = _LEADING_INT.match(self._ask(prompt))
        return int(match.group(1)) if match else None


def _ask_existing_file(console: _Console, prompt: str) -> str:
    while True:
        name = console.token(prompt)
        try:
            with open(name, encoding="utf-8"):
                return name
        except OSError as error:
            _report("Gagal membuka file, coba lagi!", error)
        pause(2)


def _add(console: _Console, roster: str) -> None:
    name = console.text("  -> Nama Dokter: ")[: MAX_NAME - 1]
    max_shift = console.integer("  -> Maksimal shift per minggu: ")
    preference = console.text("  -> Preferensi shift (PAGI/SIANG/MALAM): ")[:19].upper()
    try:
        add_doctor(roster, name, max_shift if max_shift is not None else 0, preference)
    except OSError as error:
        _report("Gagal membuka file", error)
    else:
        print("Data berhasil ditambahkan.")
    pause(1)


def _remove(console: _Console, roster: str) -> None:
    name = console.text("  -> Nama Dokter yang akan dihapus: ")[: MAX_NAME - 1]
    try:
        removed = remove_doctor(roster, name)
    except OSError as error:
        _report("Gagal membuka file", error)
    else:
        if removed:
            print(f"Data dokter '{name}' berhasil dihapus.")
        else:
            print(f"Data dokter '{name}' tidak ditemukan.")
    pause(1)


def _show_roster(roster: str) -> None:
    try:
        sys.stdout.write(format_roster(roster))
    except OSError as error:
        _report("Gagal membuka file", error)
    pause(1)


def _load_schedule(roster: str) -> Schedule:
    print("\nMemuat data dokter dan men-generate jadwal...")
    try:
        return generate_schedule(roster)
    except NoDoctorsError as error:
        print(error)
    except OSError as error:
        _report("Gagal membuka file CSV", error)
    return build_schedule([])


def _print_ranged(render, value: int | None) -> None:
    try:
        sys.stdout.write(render(value if value is not None else 0))
    except ValueError as error:
        print(error)


def _schedule_menu(console: _Console, roster: str, output: str) -> None:
    schedule = _load_schedule(roster)
    pause(3)
    while True:
        choice = console.integer(SCHEDULE_MENU)
        if choice == 1:
            _print_ranged(schedule.format_daily, console.integer("  -> Hari ke (1-30): "))
        elif choice == 2:
            _print_ranged(schedule.format_weekly, console.integer("  -> Minggu ke (1-4): "))
        elif choice == 3:
            sys.stdout.write(schedule.format_monthly())
        elif choice == 4:
            sys.stdout.write(schedule.format_shift_totals())
        elif choice == 5:
            sys.stdout.write(schedule.format_violations())
        elif choice == 6:
            try:
                write_schedule(schedule, output)
            except OSError as error:
                _report("Gagal membuka file", error)
            print(f"Jadwal telah disimpan ke file '{output}'")
        elif choice == 0:
            print("Kembali ke Menu Utama...")
            pause(2)
            return
        else:
            print("Pilihan tidak valid!")
        pause(1)


def _run(console: _Console) -> None:
    print("Selamat datang di Sistem Penjadwalan Dokter!")
    roster = _ask_existing_file(console, "Masukkan nama file data dokter (e.g., daftar_dokter.csv): ")
    output = _ask_existing_file(console, "Masukkan nama file output jadwal (e.g., jadwal.csv): ")

    while True:
        choice = console.integer(MAIN_MENU)
        if choice == 1:
            _add(console, roster)
        elif choice == 2:
            _remove(console, roster)
        elif choice == 3:
            _show_roster(roster)
        elif choice == 4:
            _schedule_menu(console, roster, output)
        elif choice == 0:
            print("Terima kasih telah menggunakan program ini. Keluar...")
            pause(4)
            return
        else:
            print("Pilihan tidak valid!")
            pause(1)


def main(argv=None) -> int:
    """Run the interactive doctor scheduling menu."""
    parser = argparse.ArgumentParser(
        prog="jadwal",
        description="Interactive doctor shift scheduling.",
    )
    parser.parse_args(argv)
    try:
        _run(_Console())
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write(os.linesep)
    return 0


if __name__ == "__main__":
    sys.exit(main())