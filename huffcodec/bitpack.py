from __future__ import annotations
from typing import Optional, Protocol, Union

class BitSink(Protocol):
    def write_bit(self, bit: bool) -> None: ...

class BitSource(Protocol):
    def read_bit(self) -> Optional[bool]: ...

class BitWriter:
    """MSB-first bit packer. Completed bytes are forwarded to `f` if given."""

    def __init__(self, f=None):
        self._f = f
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)

    def write_bit(self, bit: bool):
        self._cur = (self._cur << 1) | (1 if bit else 0)
        self._nbits += 1
        if self._nbits == 8:
            self._emit(self._cur)
            self._cur = 0
            self._nbits = 0

    def _emit(self, byte: int):
        self._buf.append(byte)
        if self._f is not None:
            self._f.write(bytes((byte,)))

    @property
    def bits_written(self) -> int:
        return len(self._buf) * 8 + self._nbits

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._emit(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: Union[bytes, bytearray, memoryview, object]):
        if isinstance(data, (bytes, bytearray, memoryview)):
            self._f = None
            self.data = bytes(data)
        else:
            self._f = data
            self.data = b""
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def _fill(self) -> bool:
        if self.i < len(self.data):
            return True
        if self._f is None:
            return False
        chunk = self._f.read(4096)
        if not chunk:
            return False
        self.data = chunk
        self.i = 0
        return True

    def read_bit(self) -> Optional[bool]:
        """Next bit, or None at end of input."""
        if not self._fill():
            return None
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return bool(b)
