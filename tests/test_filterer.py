import pytest
import pathnav
from pathnav import ABSENT, ALL, FIRST, LAST, filterer

DATA = [{'a': 1}, {'b': 2}, {'a': 3}]


def test_filterer_select_composition():
    r = pathnav.select([filterer(['a']), ALL, 'a'], DATA)
    assert r == [1, 3]


def test_filterer_select_subsequence():
    r = pathnav.select([filterer(['a'])], DATA)
    assert r == [[{'a': 1}, {'a': 3}]]

    r = pathnav.select([filterer(lambda v: v % 2 == 0)], (1, 2, 3, 4))
    assert r == [(2, 4)]


def test_filterer_skips_none_foci():
    data = [{'a': None}, {'a': 0}, {'b': 1}]
    r = pathnav.select([filterer(['a'])], data)
    assert r == [[{'a': 0}]]


def test_filterer_transform():
    r = pathnav.transform([filterer(['a']), ALL, 'a'], lambda v: v * 10, DATA)
    assert r == [{'a': 10}, {'b': 2}, {'a': 30}]
    assert DATA == [{'a': 1}, {'b': 2}, {'a': 3}]


def test_filterer_transform_last():
    r = pathnav.transform([filterer(lambda v: v % 2 == 0), LAST], lambda v: v * 100, [1, 2, 3, 4, 5])
    assert r == [1, 2, 3, 400, 5]


def test_filterer_drops_missing_slots():
    r = pathnav.setval([filterer(lambda v: v > 2)], [], [1, 3, 2, 4])
    assert r == [1, 2]

    r = pathnav.setval([filterer(lambda v: v > 2)], ABSENT, [1, 3, 2, 4])
    assert r == [1, 2]


def test_filterer_realigns_by_position():
    r = pathnav.transform([filterer(lambda v: v > 2), FIRST], lambda v: ABSENT, [1, 3, 2, 4])
    assert r == [1, 4, 2]


def test_filterer_ignores_extra_slots():
    r = pathnav.setval([filterer(lambda v: v > 2)], ['x', 'y', 'z'], [1, 3, 2, 4])
    assert r == [1, 'x', 2, 'y']


def test_filterer_multi_focus_nested_path():
    data = [[1], [], [2, 3]]
    assert pathnav.select([filterer([ALL])], data) == [[[1], [2, 3]]]

    r = pathnav.transform([filterer([ALL]), ALL, ALL], lambda v: v + 1, data)
    assert r == [[2], [], [3, 4]]


def test_filterer_no_matches():
    calls = []

    def update(v):
        calls.append(v)
        return v

    r = pathnav.transform([filterer(['a', lambda v: v]), ALL], update, [{'a': 0}])
    assert r == [{'a': 0}]
    assert calls == []


def test_filterer_compiles_once():
    f = filterer(['a'])
    assert isinstance(f.path, pathnav.Path)
    assert f == filterer(['a'])


def test_filterer_mixed_elements():
    data = [{'a': 1}, 5, 'x', [1], None]
    assert pathnav.select([filterer(['a'])], data) == [[{'a': 1}]]

    r = pathnav.transform([filterer(['a']), ALL, 'a'], lambda v: v + 1, data)
    assert r == [{'a': 2}, 5, 'x', [1], None]

    r = pathnav.select([filterer([ALL])], [1, [2], 'x'])
    assert r == [[[2]]]


def test_filterer_unresolved_path_still_fails():
    with pytest.raises(pathnav.UnresolvedStepError):
        pathnav.select([filterer([1.5])], [[1]])


def test_filterer_scalar_result_drops_matches():
    r = pathnav.setval([filterer(['a'])], 5, DATA)
    assert r == [{'b': 2}]
