"""Operations which read sequences to compute a result."""

from .errors import ValidationError
from .utils import EMPTY, get_logger, is_indexable, isint


logger = get_logger(__name__)


def fold(f, s, initial=EMPTY):
    """Accumulate values of `s` from left to right.

    Computes :code:`f(...f(f(initial, s[0]), s[1])..., s[n-1])`.

    Args:
        f (Callable[[Any, Any], Any]): takes the accumulator and a value,
            returns the new accumulator.
        s (Iterable): the values.
        initial (Any): starting value of the accumulator, if omitted the
            first value of `s` is used instead.

    Returns:
        The accumulated value, :data:`EMPTY` when `s` is empty and no
        `initial` value is given.

    Example:

        >>> lazyseq.fold(lambda acc, v: acc + v, [1, 2, 3])
        6
        >>> lazyseq.fold(lambda acc, v: acc + v, [])
        EMPTY
    """
    cursor = iter(s)
    acc = initial
    if acc is EMPTY:
        try:
            acc = next(cursor)
        except StopIteration:
            return EMPTY

    for value in cursor:
        acc = f(acc, value)

    return acc


def fold_right(f, s, initial=EMPTY):
    """Accumulate values of `s` from right to left.

    Same as :code:`fold(f, reverse(s), initial)`: when given, `initial` is
    combined with the **last** value first, the first value of `s` is
    consumed last. Some right folds elsewhere apply the initial value last
    instead, which gives a different result for non-commutative `f`:

        >>> lazyseq.fold_right(lambda a, v: "({}{})".format(a, v), [1, 2, 3], 0)
        '(((03)2)1)'

    The values are buffered instead of using recursion so long sequences
    are not a problem.
    """
    stack = list(s)
    acc = initial
    if acc is EMPTY:
        if len(stack) == 0:
            return EMPTY
        acc = stack.pop()

    while stack:
        acc = f(acc, stack.pop())

    return acc


class IndexedReversal(object):
    def __init__(self, sequence):
        self.sequence = sequence

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        i = len(self.sequence)
        while i > 0:
            i -= 1
            yield self.sequence[i]

    def __getitem__(self, key):
        if not isint(key):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers, not "
                + key.__class__.__name__)

        if key < 0 or key >= len(self):
            raise IndexError(
                self.__class__.__name__ + " index out of range")

        return self.sequence[len(self.sequence) - 1 - key]


class BufferedReversal(object):
    def __init__(self, sequence):
        self.sequence = sequence

    def __iter__(self):
        stack = list(self.sequence)
        logger.debug("buffered %d values for reversal", len(stack))
        while stack:
            yield stack.pop()


def reverse(s):
    """Return the values of `s` in reverse order.

    Sequences supporting :code:`len()` and integer indexing (lists, tuples,
    arrays, strings...) are read backward directly and the result supports
    :code:`len()` and non-negative integer indexing too. Other sequences are fully read into a buffer when
    iteration starts, not when this function is called.

    Example:

        >>> r = lazyseq.reverse([1, 2, 3, 4])
        >>> list(r), len(r), r[0]
        ([4, 3, 2, 1], 4, 4)
        >>> list(lazyseq.reverse({'a': 1, 'b': 2}))
        ['b', 'a']
    """
    if is_indexable(s):
        return IndexedReversal(s)
    else:
        return BufferedReversal(s)


def any(f, s):
    """Return wether `f` is true for some value, stops at the first one."""
    for value in s:
        if f(value):
            return True

    return False


def all(f, s):
    """Return wether `f` is true for every value, stops at the first false."""
    for value in s:
        if not f(value):
            return False

    return True


def is_empty(s):
    """Return wether a fresh traversal of `s` yields nothing."""
    try:
        next(iter(s))
    except StopIteration:
        return True

    return False


def nth(n, s):
    """Return the value at position `n` (starting from 0) or :data:`EMPTY`.

    Raises:
        ValidationError: if `n` is negative.
    """
    if n < 0:
        raise ValidationError("nth index must be non-negative")

    cursor = iter(s)
    while n > 0:
        try:
            next(cursor)
        except StopIteration:
            return EMPTY
        n -= 1

    try:
        return next(cursor)
    except StopIteration:
        return EMPTY


def apply(f, s):
    """Call `f` on every value of `s`."""
    for value in s:
        f(value)


def join(glue, s):
    """Return the string representations of the values separated by `glue`.

    An empty sequence gives an empty string.
    """
    return glue.join(str(value) for value in s)


def collect(s):
    """Return a list with all the values of `s`."""
    return list(s)


def _or_zero(result):
    return 0 if result is EMPTY else result


def min(s):
    """Return the smallest number in `s`, or 0 if `s` is empty."""
    return _or_zero(fold(lambda acc, v: acc if acc < v else v, s))


def max(s):
    """Return the largest number in `s`, or 0 if `s` is empty."""
    return _or_zero(fold(lambda acc, v: v if acc < v else acc, s))


def sum(s):
    """Return the total of numbers in `s`, or 0 if `s` is empty."""
    return _or_zero(fold(lambda acc, v: acc + v, s))


def avg(s):
    """Return a running average of the numbers in `s`, or 0 if `s` is empty.

    Each value is averaged with the accumulated result of the previous ones:
    :code:`acc = (acc + v) / 2`. This is **not** the arithmetic mean, later
    values weigh more.

    Example:

        >>> lazyseq.avg([1, 2, 3])
        2.25
    """
    return _or_zero(fold(lambda acc, v: (acc + v) / 2, s))
