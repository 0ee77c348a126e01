"""Turn enumerable things into sequences."""

import enum
import math

from .errors import ValidationError
from .utils import get_logger


logger = get_logger(__name__)


class SourceKind(enum.Enum):
    """Shapes of input understood by :func:`adapt`, in probing order."""

    SEQUENCE = 1
    PRODUCER = 2
    CURSOR = 3
    PROPERTY_BAG = 4
    UNSUPPORTED = 5


def is_sequence(s):
    """Return wether `s` can produce cursors, i.e. is iterable."""
    return hasattr(type(s), '__iter__')


def source_kind(s):
    """Classify `s` by probing its capabilities."""
    if is_sequence(s):
        return SourceKind.SEQUENCE
    elif callable(s):
        return SourceKind.PRODUCER
    elif hasattr(s, '__next__'):
        return SourceKind.CURSOR
    elif hasattr(s, '__dict__'):
        return SourceKind.PROPERTY_BAG
    else:
        return SourceKind.UNSUPPORTED


class Producer(object):
    def __init__(self, producer):
        self.producer = producer

    def __iter__(self):
        cursor = self.producer()
        if not hasattr(cursor, '__next__'):
            cursor = iter(cursor)

        while True:
            try:
                value = next(cursor)
            except StopIteration:
                return

            yield value


class Snapshot(object):
    def __init__(self, cursor):
        values = []
        while True:
            try:
                values.append(next(cursor))
            except StopIteration:
                break

        logger.debug("drained %d values from %s",
                     len(values), cursor.__class__.__name__)

        self.values = tuple(values)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, key):
        return self.values[key]

    def __iter__(self):
        return iter(self.values)


def _is_field(value):
    return not callable(value) and not hasattr(value, '__get__')


class PropertyBag(object):
    def __init__(self, obj, all_properties=False):
        self.obj = obj
        self.all_properties = all_properties

    def __iter__(self):
        seen = set()
        for key, value in vars(self.obj).items():
            seen.add(key)
            yield key, value

        if not self.all_properties:
            return

        for cls in type(self.obj).__mro__[:-1]:
            for key, value in vars(cls).items():
                if key in seen or key.startswith('__') or not _is_field(value):
                    continue
                seen.add(key)
                yield key, value


def adapt(source, all_properties=False):
    """Return a sequence over the values of `source`.

    The following kinds of sources are recognized, in that order:

    - Anything iterable is returned unchanged. Note that iterators and
      generator objects can only be traversed once.
    - A callable is invoked without arguments every time a traversal starts
      and must return an iterator, generator functions work well here.
    - An iterator which is not iterable (it only has :code:`__next__`) is
      **drained immediately** and its values are stored, this is the only
      eager adaptation.
    - Any other object with attributes (a property bag) is converted to a
      lazy sequence of `(name, value)` pairs. With `all_properties` set,
      data attributes inherited from the class hierarchy are included after
      the instance attributes.

    Args:
        source (Any): the thing to adapt.
        all_properties (bool): include inherited attributes of property bags
            (default False).

    Raises:
        ValidationError: if `source` is none of the above.

    Example:

        >>> class Point:
        ...     z = 0
        ...     def __init__(self, x, y):
        ...         self.x, self.y = x, y
        >>> list(adapt(Point(1, 2)))
        [('x', 1), ('y', 2)]
        >>> list(adapt(Point(1, 2), all_properties=True))
        [('x', 1), ('y', 2), ('z', 0)]
    """
    kind = source_kind(source)

    if kind is SourceKind.SEQUENCE:
        return source
    elif kind is SourceKind.PRODUCER:
        return Producer(source)
    elif kind is SourceKind.CURSOR:
        return Snapshot(source)
    elif kind is SourceKind.PROPERTY_BAG:
        return PropertyBag(source, all_properties)
    else:
        raise ValidationError("unsupported source kind")


class KeyProjection(object):
    def __init__(self, container):
        self.container = container

    def __iter__(self):
        return iter(self.container.keys())


class ValueProjection(object):
    def __init__(self, container):
        self.container = container

    def __iter__(self):
        return iter(self.container.values())


def project_keys(x):
    """Return a sequence over the keys of a mapping-like container.

    Raises:
        ValidationError: if `x` has no :code:`keys()` method.
    """
    if not callable(getattr(x, 'keys', None)):
        raise ValidationError("not key-projectable")

    return KeyProjection(x)


def project_values(x):
    """Return a sequence over the values of a mapping-like container.

    Raises:
        ValidationError: if `x` has no :code:`values()` method.
    """
    if not callable(getattr(x, 'values', None)):
        raise ValidationError("not value-projectable")

    return ValueProjection(x)


class Range(object):
    def __init__(self, start, stop, step):
        self.start = start
        self.stop = stop
        self.step = abs(step) or 1

    def __iter__(self):
        n = self.start
        if self.stop < self.start:
            while n > self.stop:
                yield n
                n -= self.step
        else:
            while n < self.stop:
                yield n
                n += self.step

    def __repr__(self):
        return "{}({!r}, {!r}, {!r})".format(
            self.__class__.__name__, self.start, self.stop, self.step)


def range(start=0, stop=math.inf, step=1):
    """Return a sequence of numbers from `start` (included) to `stop`.

    Unlike the built-in :class:`python:range`, the direction is deduced from
    the bounds and the sign of `step` is ignored. A null step is replaced by
    1. The sequence is unbounded by default.

    Example:

        >>> list(lazyseq.range(2, 5))
        [2, 3, 4]
        >>> list(lazyseq.range(3, -3, 2))
        [3, 1, -1]
        >>> list(lazyseq.take(3, lazyseq.range(100, step=100)))
        [100, 200, 300]
    """
    return Range(start, stop, step)


class CodeUnits(object):
    def __init__(self, text):
        self.text = text

    def __iter__(self):
        for char in self.text:
            code = ord(char)
            if code > 0xFFFF:
                code -= 0x10000
                yield 0xD800 + (code >> 10)
                yield 0xDC00 + (code & 0x3FF)
            else:
                yield code


def code_units(text):
    """Return the sequence of UTF-16 code units of `text`.

    Characters outside of the basic multilingual plane produce two values
    (a surrogate pair).

    Example:

        >>> list(lazyseq.code_units("a\\U0001F600"))
        [97, 55357, 56832]
    """
    return CodeUnits(text)
