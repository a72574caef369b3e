import random

import pytest
from kungfu import Nothing, Some

from lazyseq import seq


def test_select_keeps_the_hint():
    s = seq([1, 2, 3]).select(lambda x: x * 2)
    assert s.to_list() == [2, 4, 6]
    assert s.length_hint == 3


def test_select_is_lazy(counting):
    source = counting([1, 2, 3])
    s = seq(source).select(lambda x: x + 1)
    assert source.starts == 0
    assert s.first() == 2
    assert source.pulls == 1


def test_select_many():
    assert seq([1, 2]).select_many(lambda x: [x] * x).to_list() == [1, 2, 2]
    assert seq([[1], [], [2, 3]]).select_many().to_list() == [1, 2, 3]


def test_select_where():
    out = seq([1, 2, 3]).select_where(lambda x: Some(x + 2) if x % 2 else Nothing())
    assert out.to_list() == [3, 5]


def test_enumerate_fill_tap():
    assert seq("ab").enumerate().to_list() == [(0, "a"), (1, "b")]
    assert seq("ab").enumerate(1).length_hint == 2
    assert seq("abc").fill(0).to_list() == [0, 0, 0]
    seen = []
    assert seq([1, 2]).tap(seen.append).to_list() == [1, 2]
    assert seen == [1, 2]


def test_where():
    s = seq(range(10))
    assert s.where(lambda x: x % 3 == 0).to_list() == [0, 3, 6, 9]
    assert seq([0, 1, "", "a", None]).where().to_list() == [1, "a"]
    assert s.where(lambda x: x < 2).or_(lambda x: x > 8).to_list() == [0, 1, 9]
    assert s.where(lambda x: x < 2).length_hint is None


def test_of_type():
    assert seq([1, "a", 2.5, "b"]).of_type(str).to_list() == ["a", "b"]


def test_case_diverts_matching_elements():
    odd = []
    assert seq(range(6)).case(lambda x: x % 2, odd.append).to_list() == [0, 2, 4]
    assert odd == [1, 3, 5]


def test_distinct():
    assert seq([1, 2, 1, 3, 2]).distinct().to_list() == [1, 2, 3]
    assert seq(["a", "B", "A", "b"]).distinct(str.lower).to_list() == ["a", "B"]


def test_intersect_and_exclude():
    s = seq([1, 2, 3, 4])
    assert s.intersect([2, 4, 6]).to_list() == [2, 4]
    assert s.exclude([2, 4, 6]).to_list() == [1, 3]
    assert seq(["a", "bb"]).intersect([2], len).to_list() == ["bb"]


def test_merge_and_concat():
    s = seq([1, 2])
    assert s.merge([3]).to_list() == [1, 2, 3]
    assert s.merge([3], flip=True).to_list() == [3, 1, 2]
    assert s.concat([3], (4, 5)).to_list() == [1, 2, 3, 4, 5]
    assert s.concat([3], (4, 5)).length_hint == 5


def test_reverse_and_shuffle():
    assert seq([1, 2, 3]).where().reverse().to_list() == [3, 2, 1]
    shuffled = seq(range(20)).shuffle(random.Random(3)).to_list()
    assert sorted(shuffled) == list(range(20))
    assert seq(range(20)).shuffle().length_hint == 20


def test_wrap_and_default():
    s = seq([1, 2])
    assert s.wrap().to_list() == [s]
    assert s.wrap().length_hint == 1
    assert seq([]).default(0).to_list() == [0]
    assert seq([]).default(0).length_hint == 1
    assert s.default(0).to_list() == [1, 2]
    assert s.where().default(0).length_hint is None


def test_repeat(counting):
    source = counting([1, 2])
    s = seq(source).repeat(3)
    assert s.to_list() == [1, 2, 1, 2, 1, 2]
    assert source.starts == 3
    assert seq([1, 2]).repeat(3).length_hint == 6
    assert seq([1]).repeat(0).to_list() == []
    with pytest.raises(ValueError):
        seq([1]).repeat(-1)


def test_on_first_runs_once_per_traversal():
    firsts = []
    s = seq([1, 2, 3]).on_first(firsts.append)
    s.for_each()
    s.for_each()
    assert firsts == [1, 1]


def test_on_finish_runs_when_abandoned():
    finished = []
    s = seq([1, 2, 3]).on_finish(finished.append)
    assert s.first() == 1
    assert finished == [s]
    s.for_each()
    assert finished == [s, s]


def test_intersect_then_exclude():
    s = seq([1, 2, 3, 4])
    assert s.intersect([1, 2, 3]).exclude([2]).to_list() == [1, 3]
    assert s.exclude([1]).intersect([1, 2]).to_list() == [2]
    assert s.intersect([4]).fill(0).to_list() == [0]
