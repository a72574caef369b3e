from dataclasses import dataclass

from lazyseq import Grouping, seq
from lazyseq.ordering import buckets_of

SOURCE = [7, 4, 3, 2, 5, 6, 1]


@dataclass
class Box:
    x: int
    tag: str = ""


def test_sort():
    s = seq(SOURCE)
    assert s.sort().to_list() == [1, 2, 3, 4, 5, 6, 7]
    assert s.sort(desc=True).to_list() == [7, 6, 5, 4, 3, 2, 1]
    assert s.sort(lambda a, b: b - a).to_list() == [7, 6, 5, 4, 3, 2, 1]
    assert s.sort(lambda a, b: b - a, desc=True).to_list() == [1, 2, 3, 4, 5, 6, 7]
    assert s.sort().length_hint == 7


def test_sort_by():
    wrapped = seq(SOURCE).select(Box)
    assert wrapped.sort_by(lambda b: b.x).select(lambda b: b.x).to_list() == [1, 2, 3, 4, 5, 6, 7]
    assert wrapped.sort_by(lambda b: b.x, desc=True).reverse().select(lambda b: b.x).to_list() == [1, 2, 3, 4, 5, 6, 7]
    assert wrapped.sort(lambda a, b: a.x - b.x).select(lambda b: b.x).to_list() == [1, 2, 3, 4, 5, 6, 7]


def test_sort_is_stable_and_keeps_identity():
    items = [Box(2, "a"), Box(1, "b"), Box(2, "c"), Box(1, "d")]
    out = seq(items).sort_by(lambda b: b.x).to_list()
    assert [b.tag for b in out] == ["b", "d", "a", "c"]
    assert all(any(o is i for i in items) for o in out)


def test_sort_groups_duplicates():
    out = seq([3, 1, 3, 2, 1, 3]).sort().to_list()
    assert out == [1, 1, 2, 3, 3, 3]


def test_sort_unhashable_values():
    out = seq([[2], [1], [2], [0]]).sort().to_list()
    assert out == [[0], [1], [2], [2]]


def test_sorting_again_makes_the_new_order_primary():
    words = seq(["bb", "a", "ccc", "b", "aa"])
    by_len = words.sort_by(len)
    assert by_len.to_list() == ["a", "b", "bb", "aa", "ccc"]
    assert by_len.sort().to_list() == ["a", "aa", "b", "bb", "ccc"]
    assert by_len.sort_by(lambda w: w[0], desc=True).to_list() == ["ccc", "b", "bb", "a", "aa"]


def test_then_breaks_ties():
    words = seq(["bb", "a", "ccc", "b", "aa"])
    assert words.sort_by(len).then().to_list() == ["a", "b", "aa", "bb", "ccc"]
    assert words.sort_by(len).then(desc=True).to_list() == ["b", "a", "bb", "aa", "ccc"]
    assert words.sort_by(len, desc=True).then_by(lambda w: w).to_list() == ["ccc", "aa", "bb", "a", "b"]


def test_buckets_in_first_seen_order():
    assert buckets_of([1, 2, 1, 2, 3]) == [[1, 1], [2, 2], [3]]


def test_group_by():
    groups = seq([1, 2, 1, 2, 3]).group_by(lambda x: x).to_list()
    assert [g.key for g in groups] == [1, 2, 3]
    assert [g.to_list() for g in groups] == [[1, 1], [2, 2], [3]]
    assert all(isinstance(g, Grouping) for g in groups)


def test_group_by_with_group_key():
    source = seq(range(1, 5)).select(Box)

    by_mod = source.group_by(lambda b: b.x % 3).to_list()
    assert [(g.key, [b.x for b in g]) for g in by_mod] == [(1, [1, 4]), (2, [2]), (0, [3])]

    by_value = source.group_by(lambda b: b.x, lambda k: k % 3).to_list()
    assert [(g.key, [b.x for b in g]) for g in by_value] == [(1, [1, 4]), (2, [2]), (3, [3])]


def test_groups_are_retraversable():
    group = seq("abab").group_by(str.upper).first()
    assert group.to_list() == ["a", "a"]
    assert group.to_list() == ["a", "a"]
    assert group.length_hint == 2


def test_grouping_pipe_keeps_the_key():
    group = seq([1, 2, 3]).group_by(lambda x: x % 2).first()
    piped = group.pipe(lambda g: g.select(lambda x: x * 10))
    assert piped.key == 1
    assert piped.to_list() == [10, 30]


def test_lookup():
    table = seq(range(1, 5)).select(Box).lookup(lambda b: b.x + 2, lambda k: k % 3)
    group = table[1]
    assert group.key == 4
    assert group.to_list() == [Box(2)]
