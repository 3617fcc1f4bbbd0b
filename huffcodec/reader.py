from __future__ import annotations
from typing import List

from huffcodec.bitpack import BitSource
from huffcodec.errors import UnexpectedEndOfInputError
from huffcodec.tree import Leaf, Tree

class HuffReader:
    def __init__(self, tree: Tree, source: BitSource):
        self.tree = tree
        self.source = source

    def read(self):
        """
        Decode one symbol by walking from the root.
        A single-leaf tree returns its value without consuming input.
        Running out of bits mid-code raises UnexpectedEndOfInputError;
        the next call starts again at the root.
        """
        cur = self.tree
        while not isinstance(cur, Leaf):
            b = self.source.read_bit()
            if b is None:
                raise UnexpectedEndOfInputError("Unexpected end of bitstream")
            cur = cur.right if b else cur.left
        return cur.value

    def read_many(self, count: int) -> List:
        return [self.read() for _ in range(count)]
