"""
Non-mutating helpers over sequences and mappings.

Every helper returns a new container of the same class as its input
(list stays list, tuple stays tuple, dict subclasses keep their class).
ABSENT results from mapping functions drop the corresponding item.
"""
import copy
import itertools

from .utypes import ABSENT


def _seq_class(node):
    if isinstance(node, (list, tuple)) and not hasattr(node, '_fields'):
        return node.__class__
    return tuple if isinstance(node, tuple) else list


def like(node, items):
    """
    Build a sequence of node's class from items
    >>> like((1, 2), [3])
    (3,)
    """
    return _seq_class(node)(items)


def empty_like(node):
    return like(node, ())


def like_mapping(node, pairs):
    """
    Build a mapping of node's class from (key, value) pairs
    """
    if isinstance(node, dict):
        out = copy.copy(node)
        out.clear()
        out.update(pairs)
        return out
    return dict(pairs)


# ---- sequences ----

def map_seq(fn, node):
    """
    Apply fn to each element, dropping ABSENT results
    >>> map_seq(lambda v: ABSENT if v == 2 else v * 10, [1, 2, 3])
    [10, 30]
    """
    return like(node, (r for r in (fn(v) for v in node) if r is not ABSENT))


def flat_map(fn, items):
    """
    Concatenate the list results of fn over items, skipping ABSENT results
    """
    acc = []
    for v in items:
        result = fn(v)
        if result is not ABSENT:
            acc.extend(result)
    return acc


def concat(a, b):
    return like(a, list(a) + list(b))


def cons(val, node):
    """
    Prepend val
    >>> cons(0, [1, 2])
    [0, 1, 2]
    """
    return like(node, [val, *node])


def conj(node, val):
    """
    Append val
    >>> conj((1, 2), 3)
    (1, 2, 3)
    """
    return like(node, [*node, val])


def insert_at(index, val, node):
    """
    Insert val before index, shifting later elements right
    >>> insert_at(1, 'x', [1, 2])
    [1, 'x', 2]
    """
    items = list(node)
    items.insert(index, val)
    return like(node, items)


def normalize_index(index, node):
    """
    Resolve a possibly negative index against node; None if out of range.
    """
    size = len(node)
    if index < 0:
        index += size
    return index if 0 <= index < size else None


def nth_of(node, index):
    """
    Element at index, or None when out of range
    """
    idx = normalize_index(index, node)
    return None if idx is None else node[idx]


def update_at(index, fn, node):
    """
    Replace the element at index with fn(element); ABSENT deletes it.
    An index past either end writes a new element at that end.
    >>> update_at(1, lambda v: v + 1, [1, 2, 3])
    [1, 3, 3]
    >>> update_at(0, lambda v: ABSENT, [1, 2, 3])
    [2, 3]
    >>> update_at(5, lambda v: 9, [1])
    [1, 9]
    """
    idx = normalize_index(index, node)
    result = fn(None if idx is None else node[idx])
    items = list(node)
    if idx is None:
        if result is ABSENT:
            return like(node, items)
        if index < 0:
            items.insert(0, result)
        else:
            items.append(result)
        return like(node, items)
    if result is ABSENT:
        del items[idx]
    else:
        items[idx] = result
    return like(node, items)


# ---- mappings ----

def pick(keys, node):
    """
    Sub-mapping of the keys present in node
    >>> pick(['a', 'c'], {'a': 1, 'b': 2})
    {'a': 1}
    """
    return like_mapping(node, ((k, node[k]) for k in keys if k in node))


def omit(keys, node):
    """
    Mapping without keys
    >>> omit(['a'], {'a': 1, 'b': 2})
    {'b': 2}
    """
    keys = set(keys)
    return like_mapping(node, ((k, v) for k, v in node.items() if k not in keys))


def merge(a, b):
    """
    Shallow merge, b wins
    >>> merge({'a': 1}, {'a': 2, 'b': 3})
    {'a': 2, 'b': 3}
    """
    return like_mapping(a, itertools.chain(a.items(), b.items()))


def assoc(key, val, node):
    return merge(node, {key: val})


def map_values(fn, node):
    return like_mapping(node, (
        (k, r) for k, r in ((k, fn(v)) for k, v in node.items()) if r is not ABSENT))


def map_keys(fn, node):
    """
    Rename keys through fn; ABSENT drops the entry, later collisions win
    >>> map_keys(str.upper, {'a': 1, 'b': 2})
    {'A': 1, 'B': 2}
    """
    return like_mapping(node, (
        (r, v) for r, v in ((fn(k), v) for k, v in node.items()) if r is not ABSENT))


def map_entries(fn, node):
    """
    Rebuild from fn((key, value)) pairs; ABSENT drops the entry
    """
    return like_mapping(node, (
        tuple(r) for r in (fn(item) for item in node.items()) if r is not ABSENT))
