import struct
from typing import List, Tuple

from huffcodec.errors import MalformedStreamError

MAGIC = b"HUFC"   # 4 bytes
VERSION = 1       # 1 byte

# Header (little-endian):
# magic(4) version(1) flags(1) table_len(u16) count(u32)
HEADER_FMT = "<4sBBHI"
HEADER_SIZE = struct.calcsize(HEADER_FMT)

# Weight table entry:
# symbol(u8) weight(u32)
TBL_FMT = "<BI"
TBL_SIZE = struct.calcsize(TBL_FMT)

def write_header(f, *, flags: int = 0, table_len: int, count: int):
    if not (0 <= table_len <= 0xFFFF):
        raise MalformedStreamError("table_len out of range")
    if not (0 <= count <= 0xFFFFFFFF):
        raise MalformedStreamError("count out of range")
    f.write(struct.pack(HEADER_FMT, MAGIC, VERSION, flags, table_len, count))

def read_header(f):
    data = f.read(HEADER_SIZE)
    if len(data) != HEADER_SIZE:
        raise MalformedStreamError("Malformed stream: header too short")
    magic, ver, flags, table_len, count = struct.unpack(HEADER_FMT, data)
    if magic != MAGIC:
        raise MalformedStreamError("Bad magic number (not HUFC)")
    if ver != VERSION:
        raise MalformedStreamError(f"Unsupported version: {ver}")
    return {
        "flags": flags,
        "table_len": table_len,
        "count": count,
    }

def write_table(f, entries: List[Tuple[int, int]]):
    for sym, weight in entries:
        if not (0 <= sym <= 255): raise MalformedStreamError("symbol out of range")
        if not (0 <= weight <= 0xFFFFFFFF): raise MalformedStreamError("weight out of range")
        f.write(struct.pack(TBL_FMT, int(sym), int(weight)))

def read_table(f, table_len: int) -> List[Tuple[int, int]]:
    out = []
    for _ in range(table_len):
        data = f.read(TBL_SIZE)
        if len(data) != TBL_SIZE:
            raise MalformedStreamError("Malformed stream: table truncated")
        sym, weight = struct.unpack(TBL_FMT, data)
        out.append((int(sym), int(weight)))
    return out
