"""
Multi-focus and insertion-point navigators.

Insertion is expressed as navigation to a void focus: the continuation
receives an empty value (an empty sequence for BEGINNING/END, ABSENT for
the *_ELEM and BeforeIndex voids) and whatever it returns is spliced in.
"""
from . import containers, utils
from .base import COLLECTIONS, Navigator
from .utypes import ABSENT, Kind


class All(Navigator):
    """
    Every element of a sequence, or every (key, value) pair of a mapping.
    Transforming to ABSENT drops the element or entry.
    """
    name = 'ALL'

    def select(self, nxt):
        def select_all(node):
            if self.expect(node, *COLLECTIONS) is Kind.MAPPING:
                return containers.flat_map(nxt, node.items())
            return containers.flat_map(nxt, node)
        return select_all

    def transform(self, nxt):
        def transform_all(node):
            if self.expect(node, *COLLECTIONS) is Kind.MAPPING:
                return containers.map_entries(nxt, node)
            return containers.map_seq(nxt, node)
        return transform_all


class MapVals(Navigator):
    name = 'MAP_VALS'

    def select(self, nxt):
        def select_vals(node):
            self.expect(node, Kind.MAPPING)
            return containers.flat_map(nxt, node.values())
        return select_vals

    def transform(self, nxt):
        def transform_vals(node):
            self.expect(node, Kind.MAPPING)
            return containers.map_values(nxt, node)
        return transform_vals


class MapKeys(Navigator):
    name = 'MAP_KEYS'

    def select(self, nxt):
        def select_keys(node):
            self.expect(node, Kind.MAPPING)
            return containers.flat_map(nxt, node.keys())
        return select_keys

    def transform(self, nxt):
        def transform_keys(node):
            self.expect(node, Kind.MAPPING)
            return containers.map_keys(nxt, node)
        return transform_keys


class _Edge(Navigator):
    """
    One end of a sequence; stops on an empty sequence or None.
    """
    index = None

    def select(self, nxt):
        def select_edge(node):
            if utils.is_empty(node):
                return []
            self.expect(node, Kind.SEQUENCE)
            return nxt(node[self.index])
        return select_edge

    def transform(self, nxt):
        def transform_edge(node):
            if utils.is_empty(node):
                return node
            self.expect(node, Kind.SEQUENCE)
            return containers.update_at(self.index, nxt, node)
        return transform_edge


class First(_Edge):
    name = 'FIRST'
    index = 0


class Last(_Edge):
    name = 'LAST'
    index = -1


class _Boundary(Navigator):
    """
    The empty sequence before or after all elements. A sequence result is
    spliced in at that boundary, any other value is added as one element.
    """
    def splice(self, node, result):
        raise NotImplementedError

    def select(self, nxt):
        def select_boundary(node):
            if node is None:
                node = []
            self.expect(node, Kind.SEQUENCE)
            return nxt(containers.empty_like(node))
        return select_boundary

    def transform(self, nxt):
        def transform_boundary(node):
            if node is None:
                node = []
            self.expect(node, Kind.SEQUENCE)
            result = nxt(containers.empty_like(node))
            if result is ABSENT:
                return node
            return self.splice(node, result)
        return transform_boundary


class Beginning(_Boundary):
    name = 'BEGINNING'

    def splice(self, node, result):
        if utils.is_list_like(result):
            return containers.concat(containers.like(node, result), node)
        return containers.cons(result, node)


class End(_Boundary):
    name = 'END'

    def splice(self, node, result):
        if utils.is_list_like(result):
            return containers.concat(node, result)
        return containers.conj(node, result)


class _Void(Navigator):
    """
    The void position at `position(node)`. The continuation receives ABSENT;
    a non-ABSENT result is inserted there as a single element.
    """
    def position(self, node):
        raise NotImplementedError

    def select(self, nxt):
        def select_void(node):
            if node is None:
                node = []
            self.expect(node, Kind.SEQUENCE)
            return nxt(ABSENT)
        return select_void

    def transform(self, nxt):
        def transform_void(node):
            if node is None:
                node = []
            self.expect(node, Kind.SEQUENCE)
            result = nxt(ABSENT)
            if result is ABSENT:
                return node
            return containers.insert_at(self.position(node), result, node)
        return transform_void


class BeforeElem(_Void):
    name = 'BEFORE_ELEM'

    def position(self, node):
        return 0


class AfterElem(_Void):
    name = 'AFTER_ELEM'

    def position(self, node):
        return len(node)


class BeforeIndex(_Void):
    """
    The void before `index`; inserting there shifts later elements right.
    """
    def __init__(self, index):
        super().__init__(index)
        self.index = index

    def position(self, node):
        return self.index


ALL = All()
MAP_VALS = MapVals()
MAP_KEYS = MapKeys()
FIRST = First()
LAST = Last()
BEGINNING = Beginning()
END = End()
BEFORE_ELEM = BeforeElem()
AFTER_ELEM = AfterElem()

before_index = BeforeIndex
