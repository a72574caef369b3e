import pytest

from lazyseq import IndexOutOfRangeError, seq

SOURCE = [1, 2, 3, 4, 5]


def test_take():
    s = seq(SOURCE)
    assert s.take(2).to_list() == [1, 2]
    assert s.take(0).to_list() == []
    assert s.take(10).to_list() == SOURCE
    assert s.take(7, pad=True, fill=0).to_list() == [1, 2, 3, 4, 5, 0, 0]


def test_take_negative():
    s = seq(SOURCE)
    assert s.take(-2).to_list() == [4, 5]
    assert s.take(-2, left_on_negative=True).to_list() == [1, 2, 3]
    assert s.take(-7, pad=True, fill=0).to_list() == [1, 2, 3, 4, 5, 0, 0]
    assert s.take(-7, left_on_negative=True).to_list() == []


def test_take_does_not_pull_past_n(counting):
    source = counting(range(10))
    assert seq(source).take(3).to_list() == [0, 1, 2]
    assert source.pulls == 3


def test_take_from_infinite_generator():
    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    assert seq(naturals).take(4).to_list() == [0, 1, 2, 3]


def test_take_while():
    s = seq([1, 2, 5, 1])
    assert s.take(lambda x, *_: x < 3).to_list() == [1, 2]
    assert s.take(lambda _, i, __: i < 3).to_list() == [1, 2, 5]
    assert s.take(lambda x, *_: x < 3).length_hint is None


def test_window_predicate_sees_the_window():
    seen = []

    def upto_three(x, i, window):
        seen.append(window)
        return i < 3

    taken = seq([1, 2, 5, 1]).take(upto_three)
    assert taken.to_list() == [1, 2, 5]
    assert seen and all(w is taken for w in seen)

    seen.clear()
    skipped = seq([1, 2, 5, 1]).skip(upto_three)
    assert skipped.to_list() == [1]
    assert seen and all(w is skipped for w in seen)

    # the window is a sequence, so the predicate can inspect it
    assert seq([3, 1, 2]).take(lambda x, _, w: x <= w.source.first()).to_list() == [3, 1, 2]


def test_take_hints():
    s = seq(SOURCE)
    assert s.take(2).length_hint == 2
    assert s.take(10).length_hint == 5
    assert s.take(10, pad=True).length_hint == 10
    assert s.take(-2).length_hint == 2
    assert s.take(-2, left_on_negative=True).length_hint == 3
    assert s.take(-2, pad=True, left_on_negative=True).length_hint == 3
    assert s.where(None).take(2).length_hint is None


def test_skip():
    s = seq(SOURCE)
    assert s.skip(2).to_list() == [3, 4, 5]
    assert s.skip(10).to_list() == []
    assert s.skip(-2).to_list() == [1, 2, 3]
    assert s.skip(-2, left_on_negative=True).to_list() == [4, 5]
    assert s.skip(lambda x, *_: x < 3).to_list() == [3, 4, 5]
    assert seq([1, 5, 1]).skip(lambda x, *_: x < 3).to_list() == [5, 1]


def test_skip_hints():
    s = seq(SOURCE)
    assert s.skip(2).length_hint == 3
    assert s.skip(10).length_hint == 0
    assert s.skip(-2).length_hint == 3
    assert s.skip(-2, left_on_negative=True).length_hint == 2
    assert s.skip(lambda x, *_: True).length_hint is None


def test_negative_window_materialises_once(counting):
    source = counting(SOURCE)
    assert seq(source).take(-2).to_list() == [4, 5]
    assert source.starts == 1


def test_take_after_skip_is_a_window():
    s = seq(range(10))
    assert s.take(3).to_list() + s.skip(3).take(4).to_list() == list(range(7))


def test_slice():
    s = seq(range(10))
    assert s.slice(2, 3).to_list() == [2, 3, 4]
    assert s.slice(-3, 2).to_list() == [7, 8]
    assert s.slice(2, -2).to_list() == [2, 3, 4, 5, 6, 7]
    assert s.slice(5, -2, left_on_negative=True).to_list() == [3, 4]
    assert s.slice(1, -3, left_on_negative=True).to_list() == [0]
    assert s.slice(-2, -3, left_on_negative=True).to_list() == [5, 6, 7]
    assert s.slice(8, 4, pad=True, fill=-1).to_list() == [8, 9, -1, -1]


def test_chunk():
    s = seq(SOURCE)
    assert [c.to_list() for c in s.chunk(2)] == [[1, 2], [3, 4], [5]]
    assert [c.to_list() for c in s.chunk(2, pad=True, fill=0)] == [[1, 2], [3, 4], [5, 0]]
    assert [c.to_list() for c in s.chunk(5)] == [SOURCE]
    assert s.chunk(2).length_hint == 3
    assert seq([]).chunk(3).to_list() == []
    with pytest.raises(ValueError):
        s.chunk(0)


def test_insert():
    s = seq([1, 2, 3])
    assert s.insert(0, 12).to_list() == [12, 1, 2, 3]
    assert s.insert(-1, 12).to_list() == [1, 2, 12, 3]
    assert s.insert(None, 12).to_list() == [1, 2, 3, 12]
    assert s.insert(1, 12).to_list() == [1, 12, 2, 3]
    assert s.insert(-2, 12).to_list() == [1, 12, 2, 3]
    assert s.insert(3, 12).to_list() == [1, 2, 3, 12]
    assert s.prepend(0).to_list() == [0, 1, 2, 3]
    assert s.append(4).to_list() == [1, 2, 3, 4]


def test_insert_out_of_range():
    s = seq([1, 2, 3])
    with pytest.raises(IndexOutOfRangeError):
        s.insert(5, 0).to_list()
    with pytest.raises(IndexOutOfRangeError):
        s.insert(-4, 0).to_list()


def test_insert_hints():
    s = seq([1, 2, 3])
    assert s.append(4).length_hint == 4
    assert s.insert(3, 0).length_hint == 4
    assert s.insert(-3, 0).length_hint == 4
    assert s.insert(4, 0).length_hint is None
    assert s.insert(-4, 0).length_hint is None


def test_remove_at():
    s = seq([1, 2, 3])
    assert s.remove_at(0).to_list() == [2, 3]
    assert s.remove_at(-1).to_list() == [1, 2]
    assert s.remove_at(1).length_hint == 2
    assert s.remove_at(3).length_hint is None
    with pytest.raises(IndexOutOfRangeError):
        s.remove_at(3).to_list()
    with pytest.raises(IndexOutOfRangeError):
        s.remove_at(-4).to_list()


def test_window_nodes_keep_fluent_methods():
    s = seq(SOURCE)
    assert s.take(2).fill(0).to_list() == [0, 0]
    assert s.take(7, pad=True).fill(1).count() == 7
    assert s.slice(1, 2).fill("x").to_list() == ["x", "x"]
    assert s.chunk(2).fill(None).to_list() == [None, None, None]
    assert s.skip(3).exclude([4]).to_list() == [5]
    assert s.take(3).chunk(2).select(len).to_list() == [2, 1]
