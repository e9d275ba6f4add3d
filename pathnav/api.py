"""
Main api
"""
from .engine import Path, compile


def select(path, node):
    """
    All foci of `path` in `node`, in traversal order
    >>> from pathnav import ALL, MAP_VALS
    >>> select(['a'], {'a': 1, 'b': 2})
    [1]
    >>> select([ALL, 'x'], [{'x': 1}, {'x': 2}])
    [1, 2]
    >>> select([MAP_VALS, lambda v: v > 1], {'a': 1, 'b': 2, 'c': 3})
    [2, 3]
    """
    return compiled_select(compile(path), node)


def compiled_select(compiled_path, node):
    return compiled_path.select(node)


def select_one(path, node, default=None):
    """
    The single focus of `path` in `node`; `default` when there is none.
    Raises MultipleFocusError when the path selects more than one value.
    >>> select_one(['a', 'b'], {'a': {'b': 7}})
    7
    >>> from pathnav import ALL
    >>> select_one([ALL], [], default='n/a')
    'n/a'
    """
    return compiled_select_one(compile(path), node, default)


def compiled_select_one(compiled_path, node, default=None):
    return compiled_path.select_one(node, default)


def transform(path, update, node):
    """
    Rebuild `node` with every focus of `path` replaced by update(focus).
    Returning ABSENT from `update` removes the focus.
    >>> from pathnav import ALL, ABSENT
    >>> transform([ALL], lambda v: v * 2, [1, 2, 3])
    [2, 4, 6]
    >>> transform([ALL], lambda v: ABSENT if v == 2 else v, [1, 2, 3])
    [1, 3]
    >>> transform(['a', 'b'], str, {'a': {'b': 7}})
    {'a': {'b': '7'}}
    """
    return compiled_transform(compile(path), update, node)


def compiled_transform(compiled_path, update, node):
    return compiled_path.transform(update, node)


def setval(path, value, node):
    """
    Set every focus of `path` to `value`
    >>> setval(['a'], 9, {'a': 1, 'b': 2})
    {'a': 9, 'b': 2}
    >>> setval(['a', 'b'], 1, {})
    {'a': {'b': 1}}
    """
    return compiled_setval(compile(path), value, node)


def compiled_setval(compiled_path, value, node):
    return compiled_path.setval(value, node)


__all__ = [
    'Path', 'compile', 'select', 'compiled_select', 'select_one', 'compiled_select_one',
    'transform', 'compiled_transform', 'setval', 'compiled_setval',
]


if __name__ == '__main__':
    import doctest
    doctest.testmod()
