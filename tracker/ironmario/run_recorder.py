"""Run recording: attempt and personal-best counters, end-of-run writes.

RunRecorder owns the user counters for the session. They are loaded once
at startup; after that the in-memory values are authoritative and the
files are rewritten at each persistence point (run end, exit).
"""

import json
import sys

from .config import CSV_HEADER, TrackerFiles
from .game_state import RunState, RunStatus
from .persistence import (
    AttemptRow, read_counter, write_counter, ensure_csv_header,
    append_attempt_row, append_warp_log,
)


def format_seed(seed: int) -> str:
    return f'{seed & 0xFFFFFFFF:08X}'


class RunRecorder:
    """Persists finished runs and tracks attempts / PB stars.

    Args:
        files: Where the user files live.
    """

    def __init__(self, files: TrackerFiles):
        self.files = files
        self.attempts: int = read_counter(files.attempt_count)
        self.pb_stars: int = read_counter(files.pb_count)
        ensure_csv_header(files.attempt_data, CSV_HEADER)

    def build_row(self, run: RunState, end_level: str = '') -> AttemptRow:
        stars_collected = json.dumps(
            {str(k): v for k, v in sorted(run.star_map.items())},
            separators=(',', ':'),
        )
        return AttemptRow(
            AttemptNumber=self.attempts,
            SeedKey=format_seed(run.seed),
            TimeStamp=run.end_time,
            Stars=run.stars,
            TimeTaken=run.time_taken,
            EndLevel=run.end_level or end_level,
            EndCause=run.end_cause,
            StarsCollected=stars_collected,
        )

    def record_run(self, run: RunState, end_level: str = '') -> bool:
        """Write a PENDING run and mark it COMPLETE.

        Returns True if the run was recorded. A run in any other status is
        left alone. Write failures are reported by the persistence layer;
        the counters keep their new values and are written again at the
        next persistence point.
        """
        if run.status != RunStatus.PENDING:
            return False

        self.attempts += 1
        write_counter(self.files.attempt_count, self.attempts)

        if run.stars > self.pb_stars:
            print(f'[Tracker] New PB: {run.stars} stars (was {self.pb_stars})',
                  file=sys.stderr)
            self.pb_stars = run.stars
            write_counter(self.files.pb_count, self.pb_stars)

        row = self.build_row(run, end_level)
        ensure_csv_header(self.files.attempt_data, CSV_HEADER)
        append_attempt_row(self.files.attempt_data, row)
        append_warp_log(self.files.warp_log, self.attempts, run.seed,
                        run.warp_map)

        run.complete()
        print(f'[Tracker] Recorded attempt {self.attempts}: {run.stars} stars, '
              f'{run.time_taken}s, ended in {row.EndLevel or "?"}',
              file=sys.stderr)
        return True

    def flush(self) -> bool:
        """Write both counters."""
        ok = write_counter(self.files.attempt_count, self.attempts)
        return write_counter(self.files.pb_count, self.pb_stars) and ok
