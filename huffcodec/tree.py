from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Generic, Hashable, List, Tuple, TypeVar, Union

V = TypeVar("V", bound=Hashable)

@dataclass(frozen=True)
class Leaf(Generic[V]):
    value: V

@dataclass(frozen=True)
class Node(Generic[V]):
    left: "Tree[V]"
    right: "Tree[V]"

Tree = Union[Leaf[V], Node[V]]
Code = Tuple[bool, ...]

def new_leaf(value) -> Leaf:
    return Leaf(value)

def new_node(left: Tree, right: Tree) -> Node:
    return Node(left, right)

def _walk(tree: Tree):
    # depth-first, left subtree before right; yields (leaf, path)
    stack: List[Tuple[Tree, Code]] = [(tree, ())]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            yield node, path
        else:
            stack.append((node.right, path + (True,)))
            stack.append((node.left, path + (False,)))

def encoding(tree: Tree) -> Dict[object, Code]:
    """
    Map every leaf value to its root-to-leaf path
    (False = left, True = right). Duplicate values keep the path
    of the rightmost leaf.
    """
    out: Dict[object, Code] = {}
    for leaf, path in _walk(tree):
        out[leaf.value] = path
    return out

def code_lengths(tree: Tree) -> Dict[object, int]:
    return {v: len(path) for v, path in encoding(tree).items()}

def leaves(tree: Tree) -> List[object]:
    return [leaf.value for leaf, _ in _walk(tree)]
