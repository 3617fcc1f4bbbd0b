from huffcodec.builder import HuffBuilder
from huffcodec.errors import (
    BuilderConsumedError,
    HuffmanError,
    MalformedStreamError,
    UnencodableSymbolError,
    UnexpectedEndOfInputError,
)
from huffcodec.reader import HuffReader
from huffcodec.tree import Leaf, Node, code_lengths, encoding, new_leaf, new_node
from huffcodec.writer import HuffWriter
