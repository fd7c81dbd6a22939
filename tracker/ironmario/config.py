"""Tracker configuration: version, display options and user file layout.

All user files live under a single ``usr`` directory (relative to the
working directory by default). ``TrackerFiles`` resolves the five file
paths against whichever directory the engine was started with.
"""

from dataclasses import dataclass
from pathlib import Path

TRACKER_VERSION = '1.1.1'
FONT_FACE = 'Lucida Console'
SHOW_SONG_TITLE = False            # overlay shows song title when True
BACKGROUND_IMAGE = '(None)'

ROM_SIGNATURE = 'IronMario 64'

# Memory domain names as exposed by the emulator
DOMAIN_RDRAM = 'RDRAM'
DOMAIN_ROM = 'ROM'

CSV_HEADER = ('AttemptNumber,SeedKey,TimeStamp,Stars,TimeTaken,'
              'EndLevel,EndCause,StarsCollected')

DEFAULT_USR_DIR = 'usr'


@dataclass(frozen=True)
class TrackerFiles:
    """Paths of the user data files for one tracker install."""
    attempt_count: Path
    attempt_data: Path
    pb_count: Path
    song_info: Path
    warp_log: Path

    @classmethod
    def in_dir(cls, usr_dir: str | Path = DEFAULT_USR_DIR) -> 'TrackerFiles':
        base = Path(usr_dir)
        return cls(
            attempt_count=base / 'attempts.txt',
            attempt_data=base / 'attempts_data.csv',
            pb_count=base / 'pb_stars.txt',
            song_info=base / 'song_info.txt',
            warp_log=base / 'warp_log.json',
        )


FILES = TrackerFiles.in_dir()
