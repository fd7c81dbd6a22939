"""Tracker state records.

State is the aggregate the tick routine refreshes from memory and the
overlay reads. The tracker keeps exactly two: the current tick's values
and a deep copy of the previous tick's, used for edge detection
("did the level change this tick").
"""

import copy
import time
from dataclasses import dataclass, field, asdict
from enum import IntEnum


def now_seconds() -> int:
    return int(time.time())


class RunStatus(IntEnum):
    """Lifecycle of one attempt."""
    INACTIVE = 0   # no run started
    ACTIVE = 1     # run in progress
    PENDING = 2    # run ended, data not yet written
    COMPLETE = 3   # run data written


@dataclass
class InputState:
    music_toggle_pressed: bool = False

    def toggle_music(self) -> None:
        self.music_toggle_pressed = not self.music_toggle_pressed


@dataclass
class MarioState:
    """Raw mirror of Mario's struct fields."""
    action: int = 0                # u32
    flags: int = 0                 # u32
    hp: int = 0                    # u16, HUD health
    input: int = 0                 # u16
    pos: tuple = (0.0, 0.0, 0.0)
    hurt_counter: int = 0          # u8


@dataclass
class RunState:
    """One attempt: status, stars and warp/star bookkeeping.

    ``warp_map`` maps intended destination level id -> actual level id.
    ``star_map`` maps level id -> stars collected there.
    """
    status: RunStatus = RunStatus.INACTIVE
    stars: int = 0
    warp_map: dict = field(default_factory=dict)
    star_map: dict = field(default_factory=dict)
    start_time: int = field(default_factory=now_seconds)
    last_updated_time: int = field(default_factory=now_seconds)
    end_time: int = field(default_factory=now_seconds)
    seed: int = 0                  # u32
    end_level: str = ''
    end_cause: str = ''

    def start(self, now: int | None = None) -> None:
        """Begin a fresh attempt."""
        ts = now_seconds() if now is None else now
        self.status = RunStatus.ACTIVE
        self.stars = 0
        self.warp_map = {}
        self.star_map = {}
        self.start_time = ts
        self.last_updated_time = ts
        self.end_time = ts
        self.end_level = ''
        self.end_cause = ''

    def touch(self, now: int | None = None) -> None:
        ts = now_seconds() if now is None else now
        self.last_updated_time = max(ts, self.start_time)

    def end(self, now: int | None = None, end_level: str = '',
            end_cause: str = '') -> bool:
        """Close an active attempt; it waits as PENDING until recorded."""
        if self.status != RunStatus.ACTIVE:
            return False
        ts = now_seconds() if now is None else now
        self.touch(ts)
        self.end_time = max(ts, self.start_time)
        self.end_level = end_level
        self.end_cause = end_cause
        self.status = RunStatus.PENDING
        return True

    def complete(self) -> bool:
        if self.status != RunStatus.PENDING:
            return False
        self.status = RunStatus.COMPLETE
        return True

    @property
    def time_taken(self) -> int:
        return self.end_time - self.start_time

    def record_star(self, level_id: int, count: int = 1) -> None:
        self.stars += count
        self.star_map[level_id] = self.star_map.get(level_id, 0) + count

    def record_warp(self, intended_level_id: int, actual_level_id: int) -> None:
        self.warp_map[intended_level_id] = actual_level_id


@dataclass
class GameState:
    """Raw mirror of the level/warp/music globals."""
    delayed_warp_op: int = 0       # u16
    intended_level_id: int = 0     # u32
    level_id: int = 1              # u16
    song: int = 0                  # u16


@dataclass
class State:
    input: InputState = field(default_factory=InputState)
    mario: MarioState = field(default_factory=MarioState)
    run: RunState = field(default_factory=RunState)
    game: GameState = field(default_factory=GameState)
    last_updated_time: int = field(default_factory=now_seconds)

    def snapshot(self) -> 'State':
        """Fully independent copy; no nested record or dict is shared."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return asdict(self)


class StateHolder:
    """Owns the current and previous State for one tracker session."""

    def __init__(self, current: State | None = None):
        self.current = current if current is not None else State()
        self.previous = self.current.snapshot()

    def level_changed(self) -> bool:
        return self.current.game.level_id != self.previous.game.level_id

    def song_changed(self) -> bool:
        return self.current.game.song != self.previous.game.song

    def run_became(self, status: RunStatus) -> bool:
        return (self.current.run.status == status
                and self.previous.run.status != status)
