"""
Sentinels, operation names and structural kinds for the navigator system.
"""
import enum


class MetaAbsent(type):
    def __repr__(cls):
        return '<ABSENT>'


class ABSENT(metaclass=MetaAbsent):
    """
    Marks a removed focus or an empty insertion point.
    Returned from a transform update it always means "delete this focus".
    """
    def __new__(cls):
        raise TypeError('ABSENT is a marker and cannot be instantiated')


SELECT = 'select'
TRANSFORM = 'transform'
OPERATIONS = (SELECT, TRANSFORM)


class Kind(enum.Enum):
    """
    Structural kind of a visited node.
    """
    SCALAR = 'scalar'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
