"""
Navigator protocol.

A navigator turns a continuation `nxt` (everything deeper in the path)
into a function over the current node, once for reading (select) and
once for rebuilding (transform). select functions return a list of foci;
transform functions return the rebuilt node or ABSENT.
"""
from . import utils
from .errors import UnresolvedStepError
from .utypes import SELECT, TRANSFORM, Kind


class Navigator:
    """
    Base navigator.
    Subclasses implement select(nxt) and transform(nxt); construction
    arguments live in `args` and drive repr, equality and hashing.
    """
    name = None

    def __init__(self, *args):
        self.args = tuple(args)

    def __repr__(self):
        name = self.name or self.__class__.__name__
        if not self.args:
            return name
        return f'{name}({", ".join(repr(a) for a in self.args)})'

    def __hash__(self):
        return hash((self.__class__, self.args))

    def __eq__(self, other):
        return self.__class__ == other.__class__ and self.args == other.args

    def select(self, nxt):
        raise NotImplementedError

    def transform(self, nxt):
        raise NotImplementedError

    def operation(self, op):
        """
        Return the select or transform builder for operation name `op`.
        """
        if op == SELECT:
            return self.select
        if op == TRANSFORM:
            return self.transform
        raise ValueError(f"Unknown operation {op!r}; expected '{SELECT}' or '{TRANSFORM}'")

    def expect(self, node, *kinds):
        """
        Return node's Kind, raising TypeError unless it is one of `kinds`.
        """
        kind = utils.kind_of(node)
        if kind not in kinds:
            raise TypeError(f'{self!r} cannot navigate {utils.type_name(node)}')
        return kind


class Custom(Navigator):
    """
    Navigator from two user functions with the same shape as
    Navigator.select and Navigator.transform: nxt -> (node -> result).
    """
    def __init__(self, select, transform):
        super().__init__(select, transform)
        self.select_fn = select
        self.transform_fn = transform

    def select(self, nxt):
        return self.select_fn(nxt)

    def transform(self, nxt):
        return self.transform_fn(nxt)


def navigator(select, transform):
    """
    Build a custom navigator
    >>> import pathnav
    >>> double = navigator(
    ...     select=lambda nxt: lambda node: nxt(node * 2),
    ...     transform=lambda nxt: lambda node: nxt(node * 2) // 2)
    >>> pathnav.select([double], 4)
    [8]
    >>> pathnav.transform([double], lambda v: v + 2, 4)
    5
    """
    return Custom(select, transform)


class Unresolved(Navigator):
    """
    Stand-in for a path step that is none of the recognized kinds.
    Fails when the compiled path is invoked, not when it is compiled.
    """
    def __init__(self, step):
        super().__init__(step)
        self.step = step

    def __hash__(self):
        return id(self)

    def __eq__(self, other):
        return self is other

    def select(self, nxt):
        raise UnresolvedStepError(self.step)

    transform = select


COLLECTIONS = (Kind.SEQUENCE, Kind.MAPPING)
