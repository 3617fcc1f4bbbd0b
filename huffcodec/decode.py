import argparse, os

from huffcodec.bitpack import BitReader
from huffcodec.bitstream import read_header, read_table
from huffcodec.builder import HuffBuilder
from huffcodec.errors import MalformedStreamError
from huffcodec.reader import HuffReader

def decode_file(src: str, dst: str) -> bytes:
    with open(src, "rb") as f:
        h = read_header(f)
        table = read_table(f, h["table_len"])
        tree = HuffBuilder().add_table(table).build()

        if tree is None:
            if h["count"] != 0:
                raise MalformedStreamError("Malformed stream: symbols without a table")
            out = b""
        else:
            # remaining bytes are the payload
            out = bytes(HuffReader(tree, BitReader(f)).read_many(h["count"]))

    os.makedirs(os.path.dirname(dst) or ".", exist_ok=True)
    with open(dst, "wb") as f:
        f.write(out)
    return out

def main(argv=None):
    ap = argparse.ArgumentParser(description="Decode a .huf file")
    ap.add_argument("--input", required=True, help="path to .huf")
    ap.add_argument("--output", required=True, help="path to decoded file")
    args = ap.parse_args(argv)

    out = decode_file(args.input, args.output)
    print(f"[decode] wrote {args.output} bytes={len(out)}")

if __name__ == "__main__":
    main()
