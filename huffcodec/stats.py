from __future__ import annotations
from typing import Dict, Iterable, Mapping, Union

import numpy as np

from huffcodec.tree import Tree, code_lengths

Weights = Union[Mapping[object, float], Iterable[float]]

def _as_array(weights: Weights) -> np.ndarray:
    if isinstance(weights, Mapping):
        weights = list(weights.values())
    return np.asarray(list(weights), dtype=np.float64)

def byte_frequencies(data: bytes) -> Dict[int, int]:
    """Byte value -> count, non-zero counts only, ascending byte order."""
    counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=256)
    return {int(b): int(counts[b]) for b in np.flatnonzero(counts)}

def entropy(weights: Weights) -> float:
    """Shannon entropy (bits/symbol) of the normalised weights."""
    w = _as_array(weights)
    w = w[w > 0]
    if w.size == 0:
        return 0.0
    p = w / w.sum()
    return float(-np.sum(p * np.log2(p)))

def average_code_length(tree: Tree, weights: Mapping[object, float]) -> float:
    lengths = code_lengths(tree)
    w = np.array([float(weights[s]) for s in lengths], dtype=np.float64)
    L = np.array([lengths[s] for s in lengths], dtype=np.float64)
    total = w.sum()
    if total == 0.0:
        return 0.0
    return float(np.dot(w, L) / total)

def efficiency(tree: Tree, weights: Mapping[object, float]) -> float:
    avg = average_code_length(tree, weights)
    if avg == 0.0:
        return 1.0
    return entropy(weights) / avg
