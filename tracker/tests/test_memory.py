"""Tests for MemoryReader implementations."""
import math

import pytest

from ironmario.memory import BufferMemory, ZeroMemory, MemoryReader, read3float


class TestZeroMemory:

    def test_all_reads_are_zero(self):
        mem = ZeroMemory()
        assert mem.read_u8(0x10) == 0
        assert mem.read_u16_be(0x18FD78) == 0
        assert mem.read_u32_be(0x1CDF80) == 0
        assert mem.read_float_be(0x1A037C) == 0.0
        assert mem.read_bytes(0x20, 12) == bytes(12)

    def test_domain_selection(self):
        mem = ZeroMemory()
        assert mem.domain == 'RDRAM'
        mem.use_domain('ROM')
        assert mem.domain == 'ROM'


class TestBufferMemoryReads:

    def test_big_endian_u16(self):
        mem = BufferMemory({'RDRAM': b'\x00\x12\x34\x00'})
        assert mem.read_u16_be(1) == 0x1234

    def test_big_endian_u32(self):
        mem = BufferMemory({'RDRAM': b'\xde\xad\xbe\xef'})
        assert mem.read_u32_be(0) == 0xDEADBEEF

    def test_u32_is_unsigned(self):
        mem = BufferMemory({'RDRAM': b'\xff\xff\xff\xff'})
        assert mem.read_u32_be(0) == 0xFFFFFFFF

    def test_u8(self):
        mem = BufferMemory({'RDRAM': b'\x00\x7f\xff'})
        assert mem.read_u8(2) == 255

    def test_float(self, rdram):
        rdram.f32(0x100, -1234.5)
        mem = BufferMemory({'RDRAM': rdram.bytes()})
        assert mem.read_float_be(0x100) == pytest.approx(-1234.5)

    def test_read_bytes(self):
        mem = BufferMemory({'ROM': b'....IronMario 64'}, domain='ROM')
        assert mem.read_bytes(4, 12) == b'IronMario 64'

    def test_reads_return_python_ints(self):
        mem = BufferMemory({'RDRAM': b'\x00\x01\x00\x00\x00\x02'})
        assert type(mem.read_u16_be(0)) is int
        assert type(mem.read_u32_be(2)) is int

    def test_read3float(self, rdram):
        rdram.f32(0x40, 1.0).f32(0x44, 2.5).f32(0x48, -3.0)
        mem = BufferMemory({'RDRAM': rdram.bytes()})
        assert read3float(mem, 0x40) == (1.0, 2.5, -3.0)

    def test_domains_are_independent(self):
        mem = BufferMemory({'RDRAM': b'\x00\x01', 'ROM': b'\x00\x02'})
        assert mem.read_u16_be(0) == 1
        mem.use_domain('ROM')
        assert mem.read_u16_be(0) == 2

    def test_reload_replaces_contents(self):
        mem = BufferMemory({'RDRAM': b'\x00\x01'})
        mem.load('RDRAM', b'\x00\x05')
        assert mem.read_u16_be(0) == 5


class TestFailedReadsDefault:

    def test_past_end_reads_zero(self):
        mem = BufferMemory({'RDRAM': b'\x01\x02\x03'})
        assert mem.read_u16_be(2) == 0
        assert mem.read_u32_be(0) == 0
        assert mem.read_float_be(0) == 0.0
        assert mem.read_bytes(1, 8) == bytes(8)

    def test_negative_address_reads_zero(self):
        mem = BufferMemory({'RDRAM': b'\x01\x02'})
        assert mem.read_u8(-1) == 0

    def test_missing_domain_reads_zero(self):
        mem = BufferMemory({'RDRAM': b'\x01\x02'}, domain='ROM')
        assert mem.read_u16_be(0) == 0

    def test_failure_reported_once_per_address(self, capsys):
        mem = BufferMemory({})
        mem.read_u16_be(0x10)
        mem.read_u16_be(0x10)
        mem.read_u16_be(0x20)
        err = capsys.readouterr().err
        assert err.count('RDRAM:0x10 ') == 1
        assert err.count('RDRAM:0x20 ') == 1

    def test_reader_exception_becomes_default(self):
        class Broken(MemoryReader):
            def _read_raw(self, address, size):
                raise RuntimeError('emulator gone')

        mem = Broken()
        assert mem.read_u32_be(0) == 0
        assert mem.read_bytes(0, 4) == bytes(4)

    def test_nan_float_passes_through(self):
        mem = BufferMemory({'RDRAM': b'\x7f\xc0\x00\x00'})
        assert math.isnan(mem.read_float_be(0))


class TestLoadFile:

    def test_load_file(self, tmp_path):
        path = tmp_path / 'rdram.bin'
        path.write_bytes(b'\x00\x2a')
        mem = BufferMemory()
        assert mem.load_file('RDRAM', path) is True
        assert mem.read_u16_be(0) == 42

    def test_missing_file_keeps_previous_contents(self, tmp_path, capsys):
        mem = BufferMemory({'RDRAM': b'\x00\x07'})
        assert mem.load_file('RDRAM', tmp_path / 'missing.bin') is False
        assert mem.read_u16_be(0) == 7
        assert '[Memory]' in capsys.readouterr().err
