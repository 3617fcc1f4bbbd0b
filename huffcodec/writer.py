from __future__ import annotations
from typing import Iterable

from huffcodec.bitpack import BitSink
from huffcodec.errors import UnencodableSymbolError
from huffcodec.tree import Code, Tree, encoding

class HuffWriter:
    def __init__(self, tree: Tree, sink: BitSink):
        self.encoding = encoding(tree)
        self.sink = sink

    def code_for(self, symbol) -> Code:
        try:
            return self.encoding[symbol]
        except KeyError:
            raise UnencodableSymbolError(symbol) from None

    def write(self, symbol):
        """Emit the code for `symbol`. Nothing is written if it is not in the tree."""
        for bit in self.code_for(symbol):
            self.sink.write_bit(bit)

    def write_all(self, symbols: Iterable):
        for sym in symbols:
            self.write(sym)
