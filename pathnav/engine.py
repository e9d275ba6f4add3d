"""
Path resolution and compilation.

A path is folded right-to-left into a chain of stages. Every stage takes
the operation name and the terminal continuation as arguments, so a
compiled Path holds no per-call state and can be shared, reused and
re-entered freely.
"""
import functools
import logging
import os

from . import base, navigators
from .errors import MultipleFocusError
from .utypes import ABSENT, SELECT, TRANSFORM

logger = logging.getLogger(__name__)

CACHE_SIZE_ENV_VAR = 'PATHNAV_CACHE_SIZE'
DEFAULT_CACHE_SIZE = 300


def _cache_size():
    raw = os.getenv(CACHE_SIZE_ENV_VAR)
    if raw is None or not raw.strip():
        return DEFAULT_CACHE_SIZE
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"Invalid {CACHE_SIZE_ENV_VAR} '{raw}'. Expected an integer.") from None


CACHE_SIZE = _cache_size()


def resolve(step):
    """
    Resolve one path step to a navigator
    >>> resolve('a')
    Key('a')
    >>> resolve(-1)
    Nth(-1)
    """
    if isinstance(step, base.Navigator):
        return step
    if isinstance(step, str):
        return navigators.Key(step)
    if isinstance(step, int) and not isinstance(step, bool):
        return navigators.Nth(step)
    if callable(step):
        return navigators.Pred(step)
    return base.Unresolved(step)


def collect(focus):
    """
    Terminal continuation for select: one focus per visit, void foci skipped.
    """
    return [] if focus is ABSENT else [focus]


def _terminal_stage(op, terminal):
    return terminal


def _stage(nav, inner):
    def stage(op, terminal):
        return nav.operation(op)(inner(op, terminal))
    return stage


class Path:
    """
    Compiled path: callable as path(op, terminal, node).
    """
    def __init__(self, navs):
        self.navigators = tuple(navs)
        chain = _terminal_stage
        for nav in reversed(self.navigators):
            chain = _stage(nav, chain)
        self._chain = chain

    def __call__(self, op, terminal, node):
        return self._chain(op, terminal)(node)

    def __repr__(self):
        return f'{self.__class__.__name__}({list(self.navigators)})'

    def __hash__(self):
        return hash(self.navigators)

    def __eq__(self, other):
        return isinstance(other, Path) and self.navigators == other.navigators

    def __len__(self):
        return len(self.navigators)

    def __iter__(self):
        return iter(self.navigators)

    def select(self, node):
        return self(SELECT, collect, node)

    def select_one(self, node, default=None):
        found = self.select(node)
        if not found:
            return default
        if len(found) > 1:
            raise MultipleFocusError(self, len(found))
        return found[0]

    def transform(self, update, node):
        return self(TRANSFORM, update, node)

    def setval(self, value, node):
        return self(TRANSFORM, lambda _: value, node)


def _steps(path):
    if isinstance(path, (list, tuple)):
        return tuple(path)
    return (path,)


def _is_hashable(steps):
    try:
        hash(steps)
    except TypeError:
        return False
    return True


def _navigators(steps):
    for step in steps:
        if isinstance(step, Path):
            yield from step.navigators
        else:
            yield resolve(step)


def build(steps):
    """
    Compile steps without caching. Compiled paths among the steps are spliced in.
    """
    return Path(_navigators(steps))


def _cache_key(steps):
    # 1, 1.0 and True hash and compare equal but resolve differently
    return tuple((type(step), step) for step in steps)


@functools.lru_cache(CACHE_SIZE)
def _compile(key):
    steps = tuple(step for _, step in key)
    logger.debug('compiling path of %d step(s): %r', len(steps), steps)
    return build(steps)


def compile(path):
    """
    Compile a step, a list of steps, or return an already compiled Path.
    Hashable paths are memoised.
    >>> compile(['a', 0])
    Path([Key('a'), Nth(0)])
    """
    if isinstance(path, Path):
        return path
    steps = _steps(path)
    if _is_hashable(steps):
        return _compile(_cache_key(steps))
    logger.debug('compiling uncacheable path of %d step(s)', len(steps))
    return build(steps)
