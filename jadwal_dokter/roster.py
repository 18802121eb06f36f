"""Reading and editing the semicolon-separated doctor roster file."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import NamedTuple

_RULE = "=" * 42


class RosterRow(NamedTuple):
    """One raw row of the roster file."""

    name: str
    max_shift: str
    preference: str


def _tokens(line: str) -> list[str]:
    return [token for token in line.split(";") if token]


def read_roster_rows(path) -> list[RosterRow]:
    """Return the data rows of a roster file, skipping the header and incomplete rows."""
    rows = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            tokens = _tokens(line.rstrip("\n"))
            if len(tokens) >= 3:
                rows.append(RosterRow(*tokens[:3]))
    return rows


def format_roster(path) -> str:
    """Render the roster file as a table."""
    lines = [
        "",
        _RULE,
        "           DAFTAR DOKTER TERDAFTAR        ",
        _RULE,
        f"| {'Nama Dokter':<20} | {'Max Shift':<10} | {'Pref Shift':<10} |",
        "-" * 62,
    ]
    lines.extend(
        f"| {row.name:<20} | {row.max_shift:<10} | {row.preference:<10} |"
        for row in read_roster_rows(path)
    )
    return "\n".join(lines) + "\n"


def add_doctor(path, name: str, max_shift: int, preference: str) -> None:
    """Append a doctor to the roster file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name};{max_shift};{preference}\n")


def remove_doctor(path, name: str) -> bool:
    """Remove every row whose name field equals ``name``.

    Returns True if at least one row was removed; the file is left untouched otherwise.
    The header line is always kept.
    """
    path = Path(path)
    with open(path, encoding="utf-8", newline="") as handle:
        lines = handle.readlines()
    if not lines:
        return False

    header, body = lines[0], lines[1:]
    kept = [header]
    found = False
    for line in body:
        tokens = _tokens(line)
        if tokens and tokens[0] == name:
            found = True
        else:
            kept.append(line)

    if not found:
        return False

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".csv")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.writelines(kept)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise
    return True