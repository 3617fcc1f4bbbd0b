class HuffmanError(Exception):
    pass

class UnencodableSymbolError(HuffmanError, ValueError):
    def __init__(self, symbol):
        super().__init__(f"Symbol not in Huffman tree: {symbol!r}")
        self.symbol = symbol

class UnexpectedEndOfInputError(HuffmanError, EOFError):
    pass

class BuilderConsumedError(HuffmanError, RuntimeError):
    pass

class MalformedStreamError(HuffmanError, ValueError):
    pass
