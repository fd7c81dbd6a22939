"""Tracker session: one state holder, one memory reader, one recorder.

The session is the object the engine drives once per tick and the
overlay reads after each tick. Nothing here is process-global; tests
build as many sessions as they like.
"""

import sys

from .config import DOMAIN_RDRAM, TrackerFiles, SHOW_SONG_TITLE
from .game_state import StateHolder, RunStatus, now_seconds
from .level_data import level_name, level_abbr
from .memory import MemoryReader
from .music_data import song_name
from .overlay import build_summary
from .persistence import write_song_info
from .run_recorder import RunRecorder
from .run_rules import RunRule, NoOpRunRule
from .state_updater import refresh_from_memory, check_rom_signature


class TrackerSession:
    """Drives the read-update-persist cycle.

    Args:
        reader: Emulator memory access.
        files: User file locations.
        rule: Star/warp/run-boundary rule; defaults to NoOpRunRule.
        show_song_title: Always include the song in the summary.
    """

    def __init__(self, reader: MemoryReader, files: TrackerFiles,
                 rule: RunRule | None = None,
                 show_song_title: bool = SHOW_SONG_TITLE):
        self.reader = reader
        self.files = files
        self.rule = rule or NoOpRunRule()
        self.show_song_title = show_song_title
        self.holder = StateHolder()
        self.recorder = RunRecorder(files)
        self.rom_valid = check_rom_signature(reader)
        self.tick_count = 0
        if not self.rom_valid:
            print('[Tracker] ROM signature mismatch: not IronMario 64',
                  file=sys.stderr)

    @property
    def state(self):
        return self.holder.current

    def refresh_from_memory(self, now: int | None = None) -> None:
        self.reader.use_domain(DOMAIN_RDRAM)
        refresh_from_memory(self.holder, self.reader, self.rule, now=now)

    def tick(self, now: int | None = None) -> dict:
        """One poll cycle. Returns the overlay summary."""
        ts = now_seconds() if now is None else now
        self.refresh_from_memory(ts)
        self.tick_count += 1

        if self.state.run.status == RunStatus.PENDING:
            self.recorder.record_run(
                self.state.run, level_abbr(self.state.game.level_id))

        if self.holder.level_changed() or self.holder.song_changed():
            game = self.state.game
            write_song_info(self.files.song_info, level_name(game.level_id),
                            song_name(game.song))

        return self.summary()

    def summary(self) -> dict:
        return build_summary(self.state, self.recorder.attempts,
                             self.recorder.pb_stars, self.rom_valid,
                             self.show_song_title)

    # Run boundaries driven from outside (hotkeys, a custom RunRule)

    def start_run(self, now: int | None = None) -> None:
        """Begin a new attempt, recording any attempt still in progress."""
        run = self.state.run
        if run.status == RunStatus.ACTIVE:
            self.end_run(now, end_cause='reset')
        elif run.status == RunStatus.PENDING:
            self.recorder.record_run(run, level_abbr(self.state.game.level_id))
        run.start(now)

    def end_run(self, now: int | None = None, end_cause: str = '') -> bool:
        """End the active run and record it immediately."""
        run = self.state.run
        abbr = level_abbr(self.state.game.level_id)
        if not run.end(now, end_level=abbr, end_cause=end_cause):
            return False
        return self.recorder.record_run(run, abbr)

    def toggle_music(self) -> None:
        self.state.input.toggle_music()

    def close(self) -> None:
        """Persist counters at exit, recording a run left PENDING."""
        if self.state.run.status == RunStatus.PENDING:
            self.recorder.record_run(
                self.state.run, level_abbr(self.state.game.level_id))
        self.recorder.flush()
