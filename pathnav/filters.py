"""
Structural filter: narrows a sequence to the elements in which a nested
path finds at least one focus.
"""
from . import containers, engine, utils
from .base import Navigator
from .errors import UnresolvedStepError
from .utypes import ABSENT, Kind


class Filterer(Navigator):
    """
    Navigate to the subsequence of elements for which `path` selects
    at least one value other than None. On transform the continuation sees
    that subsequence once; its output is realigned slot by slot with the original positions, and
    a missing or ABSENT slot drops the original element. Elements the
    nested path cannot navigate (TypeError) do not match.
    >>> import pathnav
    >>> data = [{'a': 1}, {'b': 2}, {'a': 3}]
    >>> pathnav.select([Filterer(['a']), pathnav.ALL, 'a'], data)
    [1, 3]
    """
    def __init__(self, path):
        path = engine.compile(path)
        super().__init__(path)
        self.path = path

    def matches(self, elem):
        # a None focus is a missing key or index, not a find
        try:
            found = self.path.select(elem)
        except UnresolvedStepError:
            raise
        except TypeError:
            return False
        return any(v is not None for v in found)

    def select(self, nxt):
        def select_filtered(node):
            self.expect(node, Kind.SEQUENCE)
            return nxt(containers.like(node, (v for v in node if self.matches(v))))
        return select_filtered

    def transform(self, nxt):
        def transform_filtered(node):
            self.expect(node, Kind.SEQUENCE)
            mapping = {}
            filtered = []
            for i, elem in enumerate(node):
                if self.matches(elem):
                    mapping[i] = len(filtered)
                    filtered.append(elem)

            transformed = nxt(containers.like(node, filtered))
            if transformed is ABSENT or not utils.is_list_like(transformed):
                transformed = ()

            result = []
            for i, elem in enumerate(node):
                j = mapping.get(i)
                if j is None:
                    result.append(elem)
                elif j < len(transformed) and transformed[j] is not ABSENT:
                    result.append(transformed[j])
            return containers.like(node, result)
        return transform_filtered


filterer = Filterer
