import pytest

from bitstream import BitReader, BitWriter


def test_bits_are_packed_msb_first_and_zero_padded():
    w = BitWriter()
    for bit in (1, 0, 1):
        w.write_bit(bit)
    assert w.getvalue() == b'\xa0'
    assert w.bit_count == 3


def test_write_byte_and_uint32_big_endian():
    w = BitWriter()
    w.write_byte(0xA5)
    w.write_uint32(0x01020304)
    assert w.getvalue() == b'\xa5\x01\x02\x03\x04'
    assert w.bit_count == 40


def test_write_uint32_rejects_out_of_range():
    w = BitWriter()
    with pytest.raises(ValueError):
        w.write_uint32(1 << 32)
    with pytest.raises(ValueError):
        w.write_uint32(-1)


def test_getvalue_does_not_commit_padding():
    w = BitWriter()
    w.write_bit(1)
    assert w.getvalue() == b'\x80'
    w.write_code('0000001')
    assert w.getvalue() == b'\x81'


def test_unaligned_byte_spans_two_output_bytes():
    w = BitWriter()
    w.write_code('1')
    w.write_byte(0xFF)
    assert w.getvalue() == b'\xff\x80'


def test_reader_reads_what_writer_wrote():
    w = BitWriter()
    w.write_uint32(123456789)
    w.write_bit(1)
    w.write_byte(0x7E)
    w.write_code('011')
    r = BitReader(w.getvalue())
    assert r.read_uint32() == 123456789
    assert r.read_bit() == 1
    assert r.read_byte() == 0x7E
    assert [r.read_bit() for _ in range(3)] == [0, 1, 1]
    # four padding bits are left
    assert r.bits_remaining == 4


def test_reading_past_end_raises_eof():
    r = BitReader(b'\xff')
    assert r.read_byte() == 0xFF
    with pytest.raises(EOFError):
        r.read_bit()


def test_read_uint32_on_short_buffer_raises_eof():
    r = BitReader(b'\x00\x00\x01')
    with pytest.raises(EOFError):
        r.read_uint32()
