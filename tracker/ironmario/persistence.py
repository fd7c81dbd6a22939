"""Tracker file persistence.

Small user files that survive restarts:
  attempts.txt        total attempt count (one integer)
  pb_stars.txt        personal-best star count (one integer)
  attempts_data.csv   one row per finished attempt
  warp_log.json       warp map of every finished attempt
  song_info.txt       current location and song title (two lines)

Reads never raise: anything missing or unparseable reads as 0 / empty.
An unparseable warp log is renamed aside before it is rewritten.
Writes report failures on stderr and return False so the tracker keeps
running with its in-memory values; the next persistence point retries.
"""

import csv
import json
import sys
from dataclasses import dataclass, astuple, fields
from pathlib import Path

from .config import CSV_HEADER


@dataclass
class AttemptRow:
    """One attempts_data.csv record. Field order is the column order."""
    AttemptNumber: int
    SeedKey: str
    TimeStamp: int
    Stars: int
    TimeTaken: int
    EndLevel: str
    EndCause: str
    StarsCollected: str

    @staticmethod
    def columns() -> list[str]:
        return [f.name for f in fields(AttemptRow)]


def _report(action: str, path: Path, err: Exception) -> None:
    print(f'[Persist] Failed to {action} {path}: {err}', file=sys.stderr)


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def read_counter(path: str | Path) -> int:
    """Read a single-integer counter file; 0 if absent, empty or invalid."""
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            content = f.readline().strip()
    except (OSError, UnicodeDecodeError):
        return 0
    digits = content[1:] if content[:1] in '+-' else content
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(content)


def write_counter(path: str | Path, value: int) -> bool:
    """Overwrite a counter file with ``value``."""
    path = Path(path)
    try:
        _ensure_parent(path)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(str(int(value)))
    except OSError as e:
        _report('write counter', path, e)
        return False
    return True


def ensure_csv_header(path: str | Path, header: str = CSV_HEADER) -> bool:
    """Create the CSV file with its header line unless it already exists.

    An existing file is never touched, so rows from earlier sessions are
    kept.
    """
    path = Path(path)
    if path.exists():
        return True
    try:
        _ensure_parent(path)
        with open(path, 'x', encoding='utf-8', newline='') as f:
            f.write(header + '\n')
    except FileExistsError:
        return True
    except OSError as e:
        _report('create', path, e)
        return False
    return True


def append_attempt_row(path: str | Path, row: AttemptRow) -> bool:
    """Append one attempt record."""
    path = Path(path)
    try:
        _ensure_parent(path)
        with open(path, 'a', encoding='utf-8', newline='') as f:
            csv.writer(f, lineterminator='\n').writerow(astuple(row))
    except OSError as e:
        _report('append to', path, e)
        return False
    return True


def read_attempt_rows(path: str | Path) -> list[dict]:
    """All attempt records as dicts keyed by column name (header skipped)."""
    path = Path(path)
    try:
        with open(path, encoding='utf-8', newline='') as f:
            return list(csv.DictReader(f))
    except (OSError, UnicodeDecodeError, csv.Error):
        return []


def _load_warp_log(path: Path) -> list | None:
    """Parsed log entries; [] if absent, None if present but not a JSON list."""
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return []
    except ValueError:
        return None
    return data if isinstance(data, list) else None


def read_warp_log(path: str | Path) -> list:
    try:
        return _load_warp_log(Path(path)) or []
    except OSError:
        return []


def _set_aside(path: Path) -> Path:
    """Rename an unreadable file to <name>.corrupt[.N] and return the new path."""
    target = path.with_name(path.name + '.corrupt')
    n = 1
    while target.exists():
        target = path.with_name(f'{path.name}.corrupt.{n}')
        n += 1
    path.replace(target)
    return target


def append_warp_log(path: str | Path, attempt: int, seed: int,
                    warp_map: dict) -> bool:
    """Add one attempt's warp map to the JSON log.

    JSON object keys are strings, so level ids are written as their
    decimal string. An existing log that cannot be parsed is renamed
    aside before a new one is started.
    """
    path = Path(path)
    try:
        entries = _load_warp_log(path)
    except OSError as e:
        _report('read warp log', path, e)
        return False
    if entries is None:
        try:
            kept = _set_aside(path)
        except OSError as e:
            _report('set aside unreadable', path, e)
            return False
        print(f'[Persist] Unreadable warp log moved to {kept}', file=sys.stderr)
        entries = []
    entries.append({
        'attempt': attempt,
        'seed': seed,
        'warps': {str(k): v for k, v in sorted(warp_map.items())},
    })
    try:
        _ensure_parent(path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(entries, f, indent=2)
    except OSError as e:
        _report('write warp log', path, e)
        return False
    return True


def write_song_info(path: str | Path, location: str, song_title: str) -> bool:
    """Write the location and song title for stream text sources."""
    path = Path(path)
    try:
        _ensure_parent(path)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(f'{location}\n{song_title}\n')
    except OSError as e:
        _report('write song info', path, e)
        return False
    return True
