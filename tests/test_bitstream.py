import io

import pytest

from huffcodec.bitstream import HEADER_SIZE, read_header, read_table, write_header, write_table
from huffcodec.errors import MalformedStreamError


def test_header_and_table():
    f = io.BytesIO()
    write_header(f, table_len=2, count=10)
    write_table(f, [(97, 7), (98, 3)])
    f.seek(0)
    h = read_header(f)
    assert h == {"flags": 0, "table_len": 2, "count": 10}
    assert read_table(f, h["table_len"]) == [(97, 7), (98, 3)]


def test_bad_magic():
    with pytest.raises(MalformedStreamError, match="magic"):
        read_header(io.BytesIO(b"NOPE" + b"\x00" * (HEADER_SIZE - 4)))


def test_bad_version():
    f = io.BytesIO()
    write_header(f, table_len=0, count=0)
    raw = bytearray(f.getvalue())
    raw[4] = 99
    with pytest.raises(MalformedStreamError, match="version"):
        read_header(io.BytesIO(bytes(raw)))


def test_truncated():
    with pytest.raises(MalformedStreamError):
        read_header(io.BytesIO(b"HUFC"))
    with pytest.raises(MalformedStreamError):
        read_table(io.BytesIO(b"\x61\x01"), 1)


def test_table_range_checks():
    with pytest.raises(MalformedStreamError):
        write_table(io.BytesIO(), [(256, 1)])
    with pytest.raises(MalformedStreamError):
        write_table(io.BytesIO(), [(1, -1)])
