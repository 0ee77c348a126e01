"""Lazy operations which wrap sequences into new sequences.

None of these functions read any value from their inputs when called, the
work is done while the result is iterated.
"""

from .errors import ValidationError, format_stack, reraise_evaluation_error


def _check_callable(f):
    if not callable(f):
        raise ValidationError("f must be callable")


class Mapping(object):
    def __init__(self, f, sequence):
        _check_callable(f)
        self.f = f
        self.sequence = sequence
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for value in self.sequence:
                yield self.f(value)
                i += 1

        except Exception as error:
            reraise_evaluation_error(error, i, self)


def map(f, s):
    """Return a sequence of `f` applied to each value of `s`.

    Equivalent to :code:`(f(x) for x in s)` except the result can be
    iterated several times if `s` can.

    Example:

        >>> def do(x):
        ...     print("computing now")
        ...     return x + 2
        ...
        >>> m = lazyseq.map(do, [1, 2])
        >>> list(m)
        computing now
        computing now
        [3, 4]
    """
    return Mapping(f, s)


class Filtering(object):
    def __init__(self, f, sequence):
        _check_callable(f)
        self.f = f
        self.sequence = sequence
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for value in self.sequence:
                if self.f(value):
                    yield value
                i += 1

        except Exception as error:
            reraise_evaluation_error(error, i, self)


def filter(f, s):
    """Return the values of `s` for which `f` returns a true value."""
    return Filtering(f, s)


class Zipping(object):
    def __init__(self, f, sequences, pair_f=None):
        if len(sequences) < 2:
            raise ValidationError("requires at least two input sequences")
        _check_callable(f)

        self.f = f
        self.pair_f = f if pair_f is None else pair_f
        self.sequences = sequences
        self.stack = format_stack(2)

    def iter_pairs(self):
        f = self.pair_f
        i1 = iter(self.sequences[0])
        i2 = iter(self.sequences[1])
        while True:
            try:
                v1 = next(i1)
                v2 = next(i2)
            except StopIteration:
                return

            yield f(v1, v2)

    def iter_tuples(self):
        f = self.f
        cursors = [iter(s) for s in self.sequences]
        while True:
            values = []
            for cursor in cursors:
                try:
                    values.append(next(cursor))
                except StopIteration:
                    return

            yield f(*values)

    def __iter__(self):
        # the two sequences case is the most frequent, it gets its own loop
        values = self.iter_pairs() if len(self.sequences) == 2 \
            else self.iter_tuples()

        i = 0
        try:
            for value in values:
                yield value
                i += 1

        except Exception as error:
            reraise_evaluation_error(error, i, self)


def _pack(*values):
    return values


def _pack_pair(v1, v2):
    return v1, v2


def zipf(f, *sequences):
    """Combine values at the same position in sequences with `f`.

    Iteration stops as soon as one of the sequences is exhausted.

    Args:
        f (Callable): called with one value from each sequence.
        sequences (Iterable): at least two sequences.

    Raises:
        ValidationError: if less than two sequences are given.

    Example:

        >>> list(lazyseq.zipf(lambda a, b, c: a + b * c,
        ...                   [1, 2, 3], [4, 5, 6], [2, 2]))
        [9, 12]
    """
    return Zipping(f, sequences)


def zip(*sequences):
    """Return tuples of values at the same position in sequences.

    Same as :func:`zipf` with tuple creation as combining function.

    Example:

        >>> list(lazyseq.zip([1, 2, 3], ['a', 'b']))
        [(1, 'a'), (2, 'b')]
    """
    return Zipping(_pack, sequences, pair_f=_pack_pair)


class Taking(object):
    def __init__(self, count, sequence):
        self.count = count
        self.sequence = sequence

    def __iter__(self):
        remaining = self.count
        if remaining <= 0:
            return

        for value in self.sequence:
            yield value
            remaining -= 1
            if remaining <= 0:
                return


def take(n, s):
    """Return the first `n` values of `s`, or less if `s` is too short.

    The upstream cursor is simply abandoned after the n-th value, which
    makes it possible to bound infinite sequences:

        >>> list(lazyseq.take(4, lazyseq.range()))
        [0, 1, 2, 3]
    """
    return Taking(n, s)


class Dropping(object):
    def __init__(self, count, sequence):
        self.count = count
        self.sequence = sequence

    def __iter__(self):
        cursor = iter(self.sequence)
        remaining = self.count
        while remaining > 0:
            try:
                next(cursor)
            except StopIteration:
                return
            remaining -= 1

        while True:
            try:
                value = next(cursor)
            except StopIteration:
                return

            yield value


def drop(n, s):
    """Return the values of `s` after the first `n` ones."""
    return Dropping(n, s)
