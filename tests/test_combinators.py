import random

import pytest
import lazyseq
from lazyseq import ValidationError
from lazyseq.combinators import Zipping


def counting(f):
    def do(*args):
        do.call_cnt += 1
        return f(*args)

    do.call_cnt = 0
    return do


def test_map():
    n = 100
    data = [random.random() for _ in range(n)]
    do = counting(lambda x: x + 1)

    result = lazyseq.map(do, data)
    assert do.call_cnt == 0
    assert list(result) == [x + 1 for x in data]
    assert do.call_cnt == n
    assert list(result) == [x + 1 for x in data]
    assert do.call_cnt == 2 * n

    with pytest.raises(ValidationError):
        lazyseq.map(None, data)


def test_map_over_containers():
    users = {
        'bobby': {'name': 'Bob', 'age': 28},
        'ann3': {'name': 'Anne', 'age': 29},
        'rob': {'name': 'Robin', 'age': 33}}

    names = lazyseq.map(lambda p: p['name'],
                        lazyseq.project_values(users))
    assert list(names) == ['Bob', 'Anne', 'Robin']

    assert sorted(lazyseq.map(lambda x: -x, {1, 2, 3})) == [-3, -2, -1]


def test_filter():
    data = [random.randint(0, 100) for _ in range(100)]
    do = counting(lambda x: x % 2 == 0)

    result = lazyseq.filter(do, data)
    assert do.call_cnt == 0
    assert list(result) == [x for x in data if x % 2 == 0]
    assert do.call_cnt == len(data)

    with pytest.raises(ValidationError):
        lazyseq.filter(3, data)


@pytest.mark.timeout(3)
def test_pipeline_is_lazy():
    f = counting(lambda x: x * 3)
    p = counting(lambda x: x % 2 == 1)
    pipeline = lazyseq.take(5, lazyseq.filter(p, lazyseq.map(f, lazyseq.range())))
    assert f.call_cnt == 0
    assert p.call_cnt == 0
    assert list(pipeline) == [3, 9, 15, 21, 27]
    assert f.call_cnt == 10
    assert p.call_cnt == 10


def test_zip():
    assert list(lazyseq.zip([1, 2, 3], ['a', 'b'])) == [(1, 'a'), (2, 'b')]
    assert list(lazyseq.zip([1, 2], ['a', 'b', 'c'])) == [(1, 'a'), (2, 'b')]
    assert list(lazyseq.zip([1, 2, 3], ['a', 'b', 'c'], [.1, .2])) == \
        [(1, 'a', .1), (2, 'b', .2)]
    assert list(lazyseq.zip([], [1])) == []

    z = lazyseq.zip(lazyseq.range(), "abc")
    assert list(z) == [(0, 'a'), (1, 'b'), (2, 'c')]
    assert list(z) == [(0, 'a'), (1, 'b'), (2, 'c')]


def test_zipf():
    z = lazyseq.zipf(lambda a, b: a * b, [1, 2, 3], [4, 5, 6])
    assert list(z) == [4, 10, 18]

    z = lazyseq.zipf(lambda y, c, n: "{} at {} in {}".format(n, c, y),
                     [1975, 1976, 1998],
                     ["Microsoft", "Apple", "Google"],
                     ["Bob", "Anne"])
    assert list(z) == ["Bob at Microsoft in 1975", "Anne at Apple in 1976"]


@pytest.mark.parametrize("n", [2, 3, 5])
def test_zip_arities_agree(n):
    sequences = [[random.random() for _ in range(random.randint(0, 20))]
                 for _ in range(n)]

    assert list(lazyseq.zip(*sequences)) == list(zip(*sequences))
    assert list(lazyseq.zipf(lambda *v: sum(v), *sequences)) == \
        [sum(v) for v in zip(*sequences)]

    if n == 2:
        zipping = Zipping(lambda *v: v, sequences)
        assert list(zipping.iter_pairs()) == list(zipping.iter_tuples())


def test_zip_stops_pulling():
    pulls = []

    def source(name, n):
        def gen():
            for i in range(n):
                pulls.append(name)
                yield i
        return lazyseq.adapt(gen)

    list(lazyseq.zip(source('a', 1), source('b', 5)))
    assert pulls == ['a', 'b']

    del pulls[:]
    list(lazyseq.zip(source('a', 1), source('b', 5), source('c', 5)))
    assert pulls == ['a', 'b', 'c']


def test_zip_arity():
    for f in [lambda *s: lazyseq.zip(*s),
              lambda *s: lazyseq.zipf(lambda *v: v, *s)]:
        with pytest.raises(ValidationError) as excinfo:
            f([1, 2])
        assert "requires at least two input sequences" in str(excinfo.value)

        with pytest.raises(ValidationError):
            f()


@pytest.mark.parametrize("n", [0, 1, 3, 10, 11, 50])
def test_take_drop(n):
    data = [random.random() for _ in range(10)]

    assert len(list(lazyseq.take(n, data))) == min(n, len(data))
    assert list(lazyseq.take(n, data)) == data[:n]
    assert list(lazyseq.drop(n, data)) == data[n:]
    assert list(lazyseq.take(n, data)) + list(lazyseq.drop(n, data)) == data


def test_take_negative():
    assert list(lazyseq.take(-1, [1, 2, 3])) == []
    assert list(lazyseq.drop(-1, [1, 2, 3])) == [1, 2, 3]


def test_take_does_not_overread():
    pulled = []

    def gen():
        for i in range(10):
            pulled.append(i)
            yield i

    assert list(lazyseq.take(3, lazyseq.adapt(gen))) == [0, 1, 2]
    assert pulled == [0, 1, 2]

    del pulled[:]
    assert list(lazyseq.take(0, lazyseq.adapt(gen))) == []
    assert pulled == []


def test_take_single_use():
    generator = (i for i in range(6))
    t = lazyseq.take(3, generator)
    assert list(t) == [0, 1, 2]
    assert list(t) == [3, 4, 5]
    assert list(t) == []


def test_sticky_cursors():
    for s in [lazyseq.map(str, [1]),
              lazyseq.filter(bool, [1]),
              lazyseq.zip([1], [2]),
              lazyseq.zip([1], [2], [3]),
              lazyseq.take(1, [1, 2]),
              lazyseq.drop(1, [1, 2])]:
        it = iter(s)
        next(it)
        for _ in range(3):
            with pytest.raises(StopIteration):
                next(it)
