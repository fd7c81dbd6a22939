"""Tests for counter, CSV, warp log and song info files."""
import json

import pytest

from ironmario.config import CSV_HEADER
from ironmario.persistence import (
    AttemptRow, read_counter, write_counter, ensure_csv_header,
    append_attempt_row, read_attempt_rows, append_warp_log, read_warp_log,
    write_song_info,
)


def _row(n=1, **overrides):
    values = dict(AttemptNumber=n, SeedKey='CAFEBABE', TimeStamp=1700000000,
                  Stars=7, TimeTaken=321, EndLevel='BoB', EndCause='death',
                  StarsCollected='{"9":7}')
    values.update(overrides)
    return AttemptRow(**values)


# ── Counters ──────────────────────────────────────────────────────────────────

class TestReadCounter:

    def test_missing_file(self, tmp_path):
        assert read_counter(tmp_path / 'nope.txt') == 0

    def test_integer(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_text('42')
        assert read_counter(path) == 42

    def test_non_integer(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_text('abc')
        assert read_counter(path) == 0

    def test_empty(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_text('')
        assert read_counter(path) == 0

    def test_whitespace_and_newline(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_text('  17 \nignored\n')
        assert read_counter(path) == 17

    def test_directory_path(self, tmp_path):
        assert read_counter(tmp_path) == 0

    def test_binary_garbage(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_bytes(b'\xff\xfe\x00')
        assert read_counter(path) == 0

    @pytest.mark.parametrize('text', ['4_2', '\u0664\u0662', '1.5', '+', '0x10'])
    def test_loose_int_syntax_rejected(self, tmp_path, text):
        path = tmp_path / 'attempts.txt'
        path.write_text(text, encoding='utf-8')
        assert read_counter(path) == 0

    def test_signed(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_text('-3')
        assert read_counter(path) == -3


class TestWriteCounter:

    @pytest.mark.parametrize('value', [0, 1, 42, 123456789])
    def test_round_trip(self, tmp_path, value):
        path = tmp_path / 'pb_stars.txt'
        assert write_counter(path, value) is True
        assert read_counter(path) == value

    def test_truncates_previous_content(self, tmp_path):
        path = tmp_path / 'attempts.txt'
        path.write_text('999999\nold\n')
        write_counter(path, 5)
        assert path.read_text() == '5'

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / 'usr' / 'attempts.txt'
        assert write_counter(path, 3) is True
        assert path.read_text() == '3'

    def test_failure_is_reported_not_raised(self, tmp_path, capsys):
        blocker = tmp_path / 'usr'
        blocker.write_text('a file, not a directory')
        assert write_counter(blocker / 'attempts.txt', 3) is False
        assert '[Persist]' in capsys.readouterr().err


# ── CSV ───────────────────────────────────────────────────────────────────────

class TestCsvHeader:

    def test_creates_with_header(self, tmp_path):
        path = tmp_path / 'attempts_data.csv'
        ensure_csv_header(path, CSV_HEADER)
        assert path.read_text() == CSV_HEADER + '\n'

    def test_second_call_keeps_single_header(self, tmp_path):
        path = tmp_path / 'attempts_data.csv'
        ensure_csv_header(path, CSV_HEADER)
        ensure_csv_header(path, CSV_HEADER)
        lines = path.read_text().splitlines()
        assert lines == [CSV_HEADER]

    def test_existing_rows_preserved(self, tmp_path):
        path = tmp_path / 'attempts_data.csv'
        ensure_csv_header(path, CSV_HEADER)
        append_attempt_row(path, _row(1))
        ensure_csv_header(path, 'something,else')
        lines = path.read_text().splitlines()
        assert lines[0] == CSV_HEADER
        assert len(lines) == 2

    def test_header_matches_row_columns(self):
        assert CSV_HEADER.split(',') == AttemptRow.columns()


class TestAttemptRows:

    def test_append_and_read_back(self, tmp_path):
        path = tmp_path / 'attempts_data.csv'
        ensure_csv_header(path)
        append_attempt_row(path, _row(1))
        append_attempt_row(path, _row(2, Stars=12))
        rows = read_attempt_rows(path)
        assert [r['AttemptNumber'] for r in rows] == ['1', '2']
        assert rows[1]['Stars'] == '12'
        assert rows[0]['StarsCollected'] == '{"9":7}'

    def test_column_order(self, tmp_path):
        path = tmp_path / 'attempts_data.csv'
        append_attempt_row(path, _row(3, StarsCollected='{}'))
        assert path.read_text() == '3,CAFEBABE,1700000000,7,321,BoB,death,{}\n'

    def test_missing_file_reads_empty(self, tmp_path):
        assert read_attempt_rows(tmp_path / 'none.csv') == []


# ── Warp log ──────────────────────────────────────────────────────────────────

class TestWarpLog:

    def test_appends_entries(self, tmp_path):
        path = tmp_path / 'warp_log.json'
        append_warp_log(path, 1, 0xAB, {24: 9, 9: 12})
        append_warp_log(path, 2, 0xCD, {})
        entries = json.loads(path.read_text())
        assert entries == [
            {'attempt': 1, 'seed': 0xAB, 'warps': {'9': 12, '24': 9}},
            {'attempt': 2, 'seed': 0xCD, 'warps': {}},
        ]

    def test_corrupt_log_starts_over(self, tmp_path):
        path = tmp_path / 'warp_log.json'
        path.write_text('{not json')
        append_warp_log(path, 1, 0, {5: 6})
        assert read_warp_log(path) == [{'attempt': 1, 'seed': 0, 'warps': {'5': 6}}]

    def test_truncated_log_is_kept_aside(self, tmp_path, capsys):
        path = tmp_path / 'warp_log.json'
        truncated = '[{"attempt": 1, "seed": 0, "warps": {}}, {"attempt": 2'
        path.write_text(truncated)
        assert append_warp_log(path, 3, 0, {}) is True
        assert (tmp_path / 'warp_log.json.corrupt').read_text() == truncated
        assert read_warp_log(path) == [{'attempt': 3, 'seed': 0, 'warps': {}}]
        assert 'warp_log.json.corrupt' in capsys.readouterr().err

    def test_earlier_corrupt_copy_not_overwritten(self, tmp_path):
        path = tmp_path / 'warp_log.json'
        (tmp_path / 'warp_log.json.corrupt').write_text('first')
        path.write_text('second')
        append_warp_log(path, 1, 0, {})
        assert (tmp_path / 'warp_log.json.corrupt').read_text() == 'first'
        assert (tmp_path / 'warp_log.json.corrupt.1').read_text() == 'second'

    def test_non_list_log_starts_over(self, tmp_path):
        path = tmp_path / 'warp_log.json'
        path.write_text('{"a": 1}')
        assert read_warp_log(path) == []
        append_warp_log(path, 1, 0, {})
        assert (tmp_path / 'warp_log.json.corrupt').read_text() == '{"a": 1}'


class TestSongInfo:

    def test_two_lines(self, tmp_path):
        path = tmp_path / 'song_info.txt'
        write_song_info(path, 'Bob-Omb Battlefield', 'Super Mario 64 - Endless Stairs')
        assert path.read_text(encoding='utf-8').splitlines() == [
            'Bob-Omb Battlefield', 'Super Mario 64 - Endless Stairs',
        ]
