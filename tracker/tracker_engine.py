"""IronMario Tracker Engine — main entry point.

Polls emulator memory once per tick, updates run counters, and pushes
overlay state to the overlay server via HTTP POST.

The emulator side dumps RDRAM (and once, the ROM) to files; the engine
reloads the RDRAM dump every tick. Without --rdram the engine runs
against all-zero memory.

Usage:
    python tracker_engine.py --rdram dumps/rdram.bin --rom dumps/rom.z64 \
        --server http://localhost:5124 --interval 0.5

Args:
    --rdram: RDRAM dump file, reread every tick
    --rom: ROM file (ROM signature check)
    --usr-dir: Directory for attempts/PB/CSV/warp log files
    --server: Overlay server base URL (omit to disable pushing)
    --interval: Seconds between ticks
    --ticks: Stop after N ticks (0 = until interrupted)
"""

import argparse
import sys
import time

import requests

from ironmario.config import (
    DOMAIN_RDRAM, DOMAIN_ROM, DEFAULT_USR_DIR, SHOW_SONG_TITLE, TRACKER_VERSION,
    TrackerFiles,
)
from ironmario.memory import BufferMemory, ZeroMemory
from ironmario.overlay import load_background, render_overlay, write_overlay
from ironmario.session import TrackerSession


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='IronMario Tracker Engine')
    parser.add_argument('--rdram', default=None, help='RDRAM dump file')
    parser.add_argument('--rom', default=None, help='ROM file')
    parser.add_argument('--usr-dir', default=DEFAULT_USR_DIR,
                        help='User data directory')
    parser.add_argument('--server', default=None,
                        help='Overlay server URL, e.g. http://localhost:5124')
    parser.add_argument('--interval', type=float, default=0.5,
                        help='Seconds between ticks')
    parser.add_argument('--ticks', type=int, default=0,
                        help='Stop after N ticks (0 = run until interrupted)')
    parser.add_argument('--show-song-title', action='store_true',
                        default=SHOW_SONG_TITLE,
                        help='Always include the song title')
    parser.add_argument('--overlay-out', default=None,
                        help='Write a PNG overlay preview here every tick')
    parser.add_argument('--background', default='(None)',
                        help='Overlay background name')
    parser.add_argument('--background-dir', default='backgrounds',
                        help='Directory holding <name>.png backgrounds')
    return parser.parse_args(argv)


def build_reader(args):
    """BufferMemory over the dump files, or ZeroMemory without them."""
    if not args.rdram and not args.rom:
        print('[Tracker] No memory dumps given, reading zeros', file=sys.stderr)
        return ZeroMemory()
    reader = BufferMemory()
    if args.rom:
        reader.load_file(DOMAIN_ROM, args.rom)
    if args.rdram:
        reader.load_file(DOMAIN_RDRAM, args.rdram)
    return reader


def push_delta(api_url: str, summary: dict, prev_sent: dict) -> dict:
    """POST keys that changed since the last push. Returns what was sent."""
    delta = {k: v for k, v in summary.items() if prev_sent.get(k) != v}
    if not delta:
        return {}
    try:
        requests.post(api_url, json=delta, timeout=1)
    except requests.RequestException as e:
        print(f'[Tracker] Push failed: {e}', file=sys.stderr)
        return {}
    prev_sent.update(delta)
    return delta


def main(argv=None):
    args = parse_args(argv)
    files = TrackerFiles.in_dir(args.usr_dir)
    reader = build_reader(args)
    session = TrackerSession(reader, files,
                             show_song_title=args.show_song_title)
    background = load_background(args.background, args.background_dir)

    api_url = f'{args.server}/api/tracker' if args.server else None
    prev_sent = {}
    start_time = time.time()

    print(f'[Tracker] IronMario Tracker v{TRACKER_VERSION}', file=sys.stderr)
    print(f'[Tracker] ROM valid: {session.rom_valid}', file=sys.stderr)
    print(f'[Tracker] Attempts: {session.recorder.attempts}, '
          f'PB: {session.recorder.pb_stars}', file=sys.stderr)

    # ── Main loop ──
    try:
        while args.ticks <= 0 or session.tick_count < args.ticks:
            if args.rdram:
                reader.load_file(DOMAIN_RDRAM, args.rdram)

            summary = session.tick()

            if api_url:
                push_delta(api_url, summary, prev_sent)

            if args.overlay_out:
                write_overlay(args.overlay_out,
                              render_overlay(summary, background))

            if session.tick_count % 120 == 0:
                elapsed = time.time() - start_time
                print(f'[Tracker] {session.tick_count} ticks in {elapsed:.0f}s, '
                      f'level: {summary["level_abbr"]}, '
                      f'run: {summary["run_status"]}', file=sys.stderr)

            time.sleep(args.interval)
    except KeyboardInterrupt:
        print('[Tracker] Interrupted', file=sys.stderr)
    finally:
        session.close()
        print('[Tracker] Counters saved', file=sys.stderr)


if __name__ == '__main__':
    main()
