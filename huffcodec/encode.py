import argparse, os

from huffcodec.bitpack import BitWriter
from huffcodec.bitstream import write_header, write_table
from huffcodec.builder import HuffBuilder
from huffcodec.stats import average_code_length, byte_frequencies, entropy
from huffcodec.writer import HuffWriter

def encode_file(src: str, dst: str):
    with open(src, "rb") as f:
        data = f.read()

    freqs = byte_frequencies(data)
    table = list(freqs.items())
    tree = HuffBuilder().add_table(table).build()

    os.makedirs(os.path.dirname(dst) or ".", exist_ok=True)
    with open(dst, "wb") as f:
        write_header(f, table_len=len(table), count=len(data))
        write_table(f, table)
        if tree is not None:
            bw = BitWriter(f)
            HuffWriter(tree, bw).write_all(data)
            bw.finish()
    return data, freqs, tree

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-encode a file byte by byte")
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .huf")
    args = ap.parse_args(argv)

    data, freqs, tree = encode_file(args.input, args.output)

    print(f"[encode] wrote {args.output}")
    print(f"[encode] bytes={len(data)}, symbols={len(freqs)}, out={os.path.getsize(args.output)}B")
    if tree is not None:
        print(f"[encode] entropy={entropy(freqs):.4f} avg_len={average_code_length(tree, freqs):.4f} bits/sym")

if __name__ == "__main__":
    main()
