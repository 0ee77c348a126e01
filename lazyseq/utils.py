"""Miscellaneous tools for internal use."""

import logging
import numbers
from collections.abc import Mapping
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


class EmptyType(object):
    """Type of :data:`EMPTY`, the result of consumers with nothing to return.

    There is only one instance, it evaluates to false and survives copy and
    pickling as the same object.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "EMPTY"

    def __reduce__(self):
        return EmptyType, ()

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


EMPTY = EmptyType()


def is_indexable(sequence):
    """Return wether `sequence` supports O(1) :code:`len` and integer indexing.

    Mappings also implement both but their keys are not positions.
    """
    return hasattr(sequence, '__len__') \
        and hasattr(sequence, '__getitem__') \
        and not isinstance(sequence, Mapping)

