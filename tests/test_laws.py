import copy

import pytest
import pathnav
from pathnav import ALL, MAP_VALS, MAP_KEYS, FIRST, LAST, filterer, submap, view

STRUCTS = [
    {'a': [{'b': 1, 'c': 2}, {'b': 3}], 'd': {'e': [4, 5, 6]}},
    [{'a': 1}, {'b': 2}, {'a': 3}],
    [[1, 2], [3], []],
]

PATHS = [
    (['a', ALL, 'b'], 0),
    (['d', 'e', ALL], 0),
    (['d', MAP_VALS, LAST], 0),
    ([MAP_KEYS], 0),
    ([ALL], 0),
    ([submap('a', 'd'), MAP_VALS], 0),
    ([filterer(['a']), ALL, 'a'], 1),
    ([ALL, ALL], 2),
    ([ALL, FIRST], 2),
    ([ALL, lambda v: len(v) > 1], 2),
    ([view(lambda v: v)], 2),
]


@pytest.mark.parametrize('path, idx', PATHS)
def test_identity_law(path, idx):
    struct = STRUCTS[idx]
    before = copy.deepcopy(struct)
    r = pathnav.transform(path, lambda v: v, struct)
    assert r == struct
    assert struct == before


@pytest.mark.parametrize('path, idx', PATHS)
def test_select_and_transform_visit_the_same_foci(path, idx):
    struct = STRUCTS[idx]
    visited = []

    def record(v):
        visited.append(v)
        return v

    pathnav.transform(path, record, struct)
    assert visited == pathnav.select(path, struct)
