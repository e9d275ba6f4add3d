"""
Shared type-checking helpers (duck-typing).
"""
from .utypes import Kind


def is_dict_like(node):
    """
    True if node is dict-like: has .keys() and __getitem__.
    """
    return (
        hasattr(node, 'keys') and callable(node.keys)
        and hasattr(node, '__getitem__')
    )


def is_list_like(node):
    """
    True if node is list-like: has __getitem__ and __len__, not str/bytes, not dict-like.
    """
    return (
        hasattr(node, '__getitem__') and hasattr(node, '__len__')
        and not isinstance(node, (str, bytes, bytearray))
        and not is_dict_like(node)
    )


def kind_of(node):
    """
    Classify node as a mapping, a sequence or a scalar leaf
    >>> kind_of({'a': 1})
    <Kind.MAPPING: 'mapping'>
    >>> kind_of((1, 2))
    <Kind.SEQUENCE: 'sequence'>
    >>> kind_of('hello')
    <Kind.SCALAR: 'scalar'>
    """
    if is_dict_like(node):
        return Kind.MAPPING
    if is_list_like(node):
        return Kind.SEQUENCE
    return Kind.SCALAR


def is_empty(node):
    """
    True for None or an empty sequence/mapping.
    """
    if node is None:
        return True
    return kind_of(node) is not Kind.SCALAR and len(node) == 0


def type_name(node):
    return type(node).__name__
