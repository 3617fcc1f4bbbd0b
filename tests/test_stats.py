import pytest

from huffcodec.builder import HuffBuilder
from huffcodec.stats import average_code_length, byte_frequencies, efficiency, entropy


def test_byte_frequencies():
    assert byte_frequencies(b"abca") == {97: 2, 98: 1, 99: 1}
    assert list(byte_frequencies(b"zzya")) == [ord('a'), ord('y'), ord('z')]
    assert byte_frequencies(b"") == {}


def test_entropy():
    assert entropy([1, 1, 1, 1]) == pytest.approx(2.0)
    assert entropy({'a': 3, 'b': 0}) == pytest.approx(0.0)
    assert entropy([]) == 0.0


def test_dyadic_weights_are_fully_efficient():
    weights = {'a': 8, 'b': 4, 'c': 2, 'd': 2}
    tree = HuffBuilder().add_table(weights).build()
    assert average_code_length(tree, weights) == pytest.approx(1.75)
    assert efficiency(tree, weights) == pytest.approx(1.0)


def test_degenerate_efficiency():
    weights = {'a': 5}
    tree = HuffBuilder().add_table(weights).build()
    assert average_code_length(tree, weights) == 0.0
    assert efficiency(tree, weights) == 1.0
