"""
Composable navigators for querying and rebuilding nested data.
"""
from .api import (
    compile, select, compiled_select, select_one, compiled_select_one,
    transform, compiled_transform, setval, compiled_setval,
)
from .base import Navigator, Custom, navigator
from .engine import Path, resolve
from .errors import PathNavError, UnresolvedStepError, MultipleFocusError
from .filters import Filterer, filterer
from .navigators import Key, Nth, Pred, View, Parser, Submap, key, nth, pred, view, parser, submap
from .positional import (
    All, MapVals, MapKeys, First, Last, Beginning, End, BeforeElem, AfterElem, BeforeIndex,
    ALL, MAP_VALS, MAP_KEYS, FIRST, LAST, BEGINNING, END, BEFORE_ELEM, AFTER_ELEM,
    before_index,
)
from .utypes import ABSENT, SELECT, TRANSFORM, Kind
