"""Emulator memory access.

The tracker never talks to an emulator directly; it reads through a
MemoryReader. Every typed read is built on one primitive, ``_read_raw``,
which returns the raw bytes for (domain, address, size) or None when the
read cannot be satisfied. A failed read never raises: it yields 0, 0.0
or zero bytes, and is reported once per (domain, address).

Implementations:
  ZeroMemory    every read returns zero (no emulator attached)
  BufferMemory  numpy-backed domains loaded from bytes or dump files

All multi-byte reads are big-endian, matching the N64's memory layout as
the emulator exposes it.
"""

import sys
from pathlib import Path

import numpy as np

from .config import DOMAIN_RDRAM

_U16_BE = np.dtype('>u2')
_U32_BE = np.dtype('>u4')
_F32_BE = np.dtype('>f4')


class MemoryReader:
    """Typed big-endian reads at absolute addresses within a domain.

    Subclasses implement ``_read_raw``. ``use_domain`` selects the domain
    that subsequent reads target.
    """

    def __init__(self, domain: str = DOMAIN_RDRAM):
        self.domain = domain
        self._reported: set[tuple[str, int]] = set()

    def use_domain(self, domain: str) -> None:
        self.domain = domain

    def _read_raw(self, address: int, size: int) -> bytes | None:
        raise NotImplementedError

    def _read_checked(self, address: int, size: int) -> bytes | None:
        try:
            raw = self._read_raw(address, size)
        except Exception as e:
            self._report(address, size, str(e))
            return None
        if raw is None or len(raw) != size:
            self._report(address, size, 'out of range')
            return None
        return raw

    def _report(self, address: int, size: int, reason: str) -> None:
        key = (self.domain, address)
        if key in self._reported:
            return
        self._reported.add(key)
        print(f'[Memory] Read of {size} bytes at {self.domain}:0x{address:X} '
              f'failed ({reason}), using default', file=sys.stderr)

    def read_u8(self, address: int) -> int:
        raw = self._read_checked(address, 1)
        return raw[0] if raw is not None else 0

    def read_u16_be(self, address: int) -> int:
        raw = self._read_checked(address, 2)
        if raw is None:
            return 0
        return int(np.frombuffer(raw, dtype=_U16_BE)[0])

    def read_u32_be(self, address: int) -> int:
        raw = self._read_checked(address, 4)
        if raw is None:
            return 0
        return int(np.frombuffer(raw, dtype=_U32_BE)[0])

    def read_float_be(self, address: int) -> float:
        raw = self._read_checked(address, 4)
        if raw is None:
            return 0.0
        return float(np.frombuffer(raw, dtype=_F32_BE)[0])

    def read_bytes(self, address: int, count: int) -> bytes:
        raw = self._read_checked(address, count)
        return raw if raw is not None else bytes(count)


class ZeroMemory(MemoryReader):
    """Stand-in reader for running without an emulator: all memory is zero."""

    def _read_raw(self, address: int, size: int) -> bytes | None:
        return bytes(size)


class BufferMemory(MemoryReader):
    """Reader over in-memory copies of emulator domains.

    Args:
        domains: Optional mapping of domain name -> raw bytes.
        domain: Initially selected domain.
    """

    def __init__(self, domains: dict[str, bytes] | None = None,
                 domain: str = DOMAIN_RDRAM):
        super().__init__(domain)
        self.domains: dict[str, np.ndarray] = {}
        for name, data in (domains or {}).items():
            self.load(name, data)

    def load(self, domain: str, data: bytes) -> None:
        """Replace a domain's contents."""
        self.domains[domain] = np.frombuffer(bytes(data), dtype=np.uint8)

    def load_file(self, domain: str, path: str | Path) -> bool:
        """Replace a domain's contents from a dump file.

        Returns False (and keeps the previous contents) if the file cannot
        be read, e.g. while the emulator is mid-write.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            print(f'[Memory] Could not read {domain} dump {path}: {e}',
                  file=sys.stderr)
            return False
        self.load(domain, data)
        return True

    def _read_raw(self, address: int, size: int) -> bytes | None:
        buf = self.domains.get(self.domain)
        if buf is None or address < 0 or address + size > buf.shape[0]:
            return None
        return buf[address:address + size].tobytes()


def read3float(reader: MemoryReader, base: int) -> tuple[float, float, float]:
    """Read three consecutive big-endian floats (e.g. an x, y, z vector)."""
    return (
        reader.read_float_be(base),
        reader.read_float_be(base + 4),
        reader.read_float_be(base + 8),
    )
