"""Overlay presentation: summary dict and a rendered overlay image.

The summary is what the engine pushes to the overlay server; the image is
an optional local preview (written as PNG, like a browser-source
fallback). Layout is one text line per field over an optional background.
"""

import sys
from pathlib import Path

import cv2
import numpy as np

from .config import SHOW_SONG_TITLE, TRACKER_VERSION
from .game_state import State
from .level_data import level_name, level_abbr
from .music_data import song_name
from .run_recorder import format_seed

BACKGROUND_IMAGES = [
    '(None)', 'Cave', 'City', 'Desert', 'Fire', 'Forest', 'Mountains',
    'Ocean', 'Pattern', 'Sky', 'Storm',
]

OVERLAY_SIZE = (480, 270)          # (w, h)
_FONT = cv2.FONT_HERSHEY_SIMPLEX
_TEXT_COLOR = (255, 255, 255)
_WARN_COLOR = (0, 0, 255)
_BG_COLOR = (24, 24, 24)


def build_summary(state: State, attempts: int, pb_stars: int,
                  rom_valid: bool,
                  show_song_title: bool = SHOW_SONG_TITLE) -> dict:
    """Display values for the overlay.

    The song is included when enabled in config or toggled on by the
    music input.
    """
    game = state.game
    summary = {
        'version': TRACKER_VERSION,
        'rom_valid': rom_valid,
        'level': level_name(game.level_id),
        'level_abbr': level_abbr(game.level_id),
        'stars': state.run.stars,
        'pb_stars': pb_stars,
        'attempts': attempts,
        'run_status': state.run.status.name,
        'seed': format_seed(state.run.seed),
        'hp': state.mario.hp,
    }
    if show_song_title or state.input.music_toggle_pressed:
        summary['song'] = song_name(game.song)
    return summary


def summary_lines(summary: dict) -> list[str]:
    lines = [
        f"Attempt: {summary['attempts']}",
        f"Stars: {summary['stars']}  PB: {summary['pb_stars']}",
        f"Level: {summary['level']}",
        f"Seed: {summary['seed']}",
    ]
    if 'song' in summary:
        lines.append(f"Song: {summary['song']}")
    return lines


def load_background(name: str, image_dir: str | Path) -> np.ndarray | None:
    """Load a named background image (``<image_dir>/<name>.png``)."""
    if name == '(None)' or name not in BACKGROUND_IMAGES:
        return None
    img = cv2.imread(str(Path(image_dir) / f'{name}.png'))
    return img


def render_overlay(summary: dict, background: np.ndarray | None = None,
                   size: tuple[int, int] = OVERLAY_SIZE) -> np.ndarray:
    """Draw the summary onto a BGR image of ``size`` (w, h)."""
    w, h = size
    if background is not None:
        canvas = cv2.resize(background, (w, h), interpolation=cv2.INTER_AREA)
    else:
        canvas = np.full((h, w, 3), _BG_COLOR, dtype=np.uint8)

    y = 30
    if not summary.get('rom_valid', True):
        cv2.putText(canvas, 'INVALID ROM', (10, y), _FONT, 0.8,
                    _WARN_COLOR, 2, cv2.LINE_AA)
        y += 34

    for line in summary_lines(summary):
        cv2.putText(canvas, line, (10, y), _FONT, 0.6, _TEXT_COLOR, 1,
                    cv2.LINE_AA)
        y += 28

    cv2.putText(canvas, f"v{summary.get('version', TRACKER_VERSION)}",
                (w - 70, h - 10), _FONT, 0.4, _TEXT_COLOR, 1, cv2.LINE_AA)
    return canvas


def write_overlay(path: str | Path, image: np.ndarray) -> bool:
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        ok = bool(cv2.imwrite(str(path), image))
    except (cv2.error, OSError) as e:
        print(f'[Overlay] Failed to write {path}: {e}', file=sys.stderr)
        return False
    if not ok:
        print(f'[Overlay] Failed to write {path}', file=sys.stderr)
    return ok
