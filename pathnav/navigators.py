"""
Single-focus navigators: each calls its continuation once and hands back
what it produced.
"""
from . import containers, utils
from .base import Navigator
from .utypes import ABSENT, Kind


class Key(Navigator):
    """
    Value at a mapping key. A missing key, or a node that is not a mapping,
    is a None focus on select; transforming to ABSENT removes the key.
    A None node is written as an empty mapping.
    """
    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def select(self, nxt):
        def select_key(node):
            if utils.kind_of(node) is not Kind.MAPPING:
                return nxt(None)
            return nxt(node.get(self.key))
        return select_key

    def transform(self, nxt):
        def transform_key(node):
            if node is None:
                node = {}
            self.expect(node, Kind.MAPPING)
            result = nxt(node.get(self.key))
            if result is ABSENT:
                return containers.omit((self.key,), node)
            return containers.assoc(self.key, result, node)
        return transform_key


class Nth(Navigator):
    """
    Element at a sequence index; negative indices count from the end.
    Out of range, or on a node that is not a sequence, select sees None.
    """
    def __init__(self, index):
        super().__init__(index)
        self.index = index

    def select(self, nxt):
        def select_nth(node):
            if utils.kind_of(node) is not Kind.SEQUENCE:
                return nxt(None)
            return nxt(containers.nth_of(node, self.index))
        return select_nth

    def transform(self, nxt):
        def transform_nth(node):
            if node is None:
                node = []
            self.expect(node, Kind.SEQUENCE)
            return containers.update_at(self.index, nxt, node)
        return transform_nth


class Pred(Navigator):
    """
    Continue only when fn(node) is truthy; otherwise stop (select) or keep
    node as is (transform).
    """
    def __init__(self, fn):
        super().__init__(fn)
        self.fn = fn

    def select(self, nxt):
        return lambda node: nxt(node) if self.fn(node) else []

    def transform(self, nxt):
        return lambda node: nxt(node) if self.fn(node) else node


class View(Navigator):
    """
    Navigate to fn(node). The transform result replaces node.
    """
    def __init__(self, fn):
        super().__init__(fn)
        self.fn = fn

    def select(self, nxt):
        return lambda node: nxt(self.fn(node))

    transform = select


class Parser(Navigator):
    """
    Navigate to parse(node); transformed values are written back with unparse.
    >>> import json, pathnav
    >>> pathnav.transform([Parser(json.loads, json.dumps), 'n'], lambda v: v + 1, '{"n": 1}')
    '{"n": 2}'
    """
    def __init__(self, parse, unparse):
        super().__init__(parse, unparse)
        self.parse = parse
        self.unparse = unparse

    def select(self, nxt):
        return lambda node: nxt(self.parse(node))

    def transform(self, nxt):
        def transform_parsed(node):
            result = nxt(self.parse(node))
            return ABSENT if result is ABSENT else self.unparse(result)
        return transform_parsed


class Submap(Navigator):
    """
    Navigate to the sub-mapping holding `keys`. On transform the result is
    merged back in place of those keys, so keys it drops are removed.
    """
    def __init__(self, keys):
        keys = tuple(keys)
        super().__init__(keys)
        self.keys = keys

    def select(self, nxt):
        def select_submap(node):
            if node is None:
                node = {}
            self.expect(node, Kind.MAPPING)
            return nxt(containers.pick(self.keys, node))
        return select_submap

    def transform(self, nxt):
        def transform_submap(node):
            if node is None:
                node = {}
            self.expect(node, Kind.MAPPING)
            result = nxt(containers.pick(self.keys, node))
            rest = containers.omit(self.keys, node)
            if result is ABSENT:
                return rest
            return containers.merge(rest, result)
        return transform_submap


key = Key
nth = Nth
pred = Pred
view = View
parser = Parser


def submap(*keys):
    """
    submap('a', 'b') or submap(['a', 'b'])
    """
    if len(keys) == 1 and isinstance(keys[0], (list, tuple)):
        keys = keys[0]
    return Submap(keys)
