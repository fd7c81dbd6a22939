"""Pytest fixtures for tracker tests."""
import struct
import sys
from pathlib import Path

import pytest

TRACKER_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(TRACKER_DIR))

from ironmario.config import TrackerFiles

RDRAM_SIZE = 0x200000   # 2 MiB covers every mapped address
ROM_SIZE = 0x1000


class RamBuilder:
    """Writes big-endian values into a zeroed buffer."""

    def __init__(self, size: int):
        self.data = bytearray(size)

    def u8(self, addr: int, value: int) -> 'RamBuilder':
        self.data[addr] = value
        return self

    def u16(self, addr: int, value: int) -> 'RamBuilder':
        struct.pack_into('>H', self.data, addr, value)
        return self

    def u32(self, addr: int, value: int) -> 'RamBuilder':
        struct.pack_into('>I', self.data, addr, value)
        return self

    def f32(self, addr: int, value: float) -> 'RamBuilder':
        struct.pack_into('>f', self.data, addr, value)
        return self

    def raw(self, addr: int, value: bytes) -> 'RamBuilder':
        self.data[addr:addr + len(value)] = value
        return self

    def bytes(self) -> bytes:
        return bytes(self.data)


@pytest.fixture
def rdram():
    return RamBuilder(RDRAM_SIZE)


@pytest.fixture
def rom():
    builder = RamBuilder(ROM_SIZE)
    builder.raw(0x20, b'IronMario 64')
    return builder


@pytest.fixture
def files(tmp_path):
    return TrackerFiles.in_dir(tmp_path / 'usr')
