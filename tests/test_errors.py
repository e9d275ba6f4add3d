import pytest
import pathnav
from pathnav import ALL, errors


def test_error_hierarchy():
    assert issubclass(errors.UnresolvedStepError, errors.PathNavError)
    assert issubclass(errors.UnresolvedStepError, TypeError)
    assert issubclass(errors.MultipleFocusError, errors.PathNavError)
    assert issubclass(errors.MultipleFocusError, ValueError)


def test_unresolved_message():
    e = errors.UnresolvedStepError(1.5)
    assert e.step == 1.5
    assert 'float' in str(e)


def test_multiple_focus_message():
    with pytest.raises(errors.MultipleFocusError, match='selected 3 values'):
        pathnav.select_one([ALL], [1, 2, 3])


def test_errors_abort_the_call():
    def boom(v):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError):
        pathnav.transform([ALL], boom, [1])
