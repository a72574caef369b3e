from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from lazyseq import JoinMode, seq

# ---------- Strategies ----------

INTS = st.lists(st.integers(min_value=-20, max_value=20), max_size=30)
COUNT = st.integers(min_value=0, max_value=40)
MODES = st.sampled_from([JoinMode.INNER, JoinMode.LEFT, JoinMode.RIGHT, JoinMode.OUTER])


# ---------- Properties ----------


@given(a=INTS, b=INTS)
def test_zip_length_follows_mode(a, b):
    s = seq(a)
    assert s.zip(b, mode=JoinMode.INNER).count() == min(len(a), len(b))
    assert s.zip(b, mode=JoinMode.OUTER).count() == max(len(a), len(b))
    assert s.zip(b, mode=JoinMode.LEFT).count() == len(a)
    assert s.zip(b, mode=JoinMode.RIGHT).count() == len(b)


@given(a=INTS, b=INTS, mode=MODES)
def test_zip_hint_matches_traversal(a, b, mode):
    zipped = seq(a).zip(b, mode=mode)
    assert zipped.length_hint == zipped.count()


@given(a=INTS, b=INTS, mode=MODES)
def test_join_hint_matches_traversal(a, b, mode):
    joined = seq(a).join(b, mode=mode)
    assert joined.length_hint == joined.count()


@given(items=INTS, n=COUNT, m=COUNT)
def test_take_then_skip_take_is_a_prefix(items, n, m):
    s = seq(items)
    assert s.take(n).to_list() + s.skip(n).take(m).to_list() == items[: n + m]


@given(items=INTS, n=st.integers(min_value=-40, max_value=40))
def test_windows_match_list_slicing(items, n):
    s = seq(items)
    if n >= 0:
        assert s.take(n).to_list() == items[:n]
        assert s.skip(n).to_list() == items[n:]
    else:
        assert s.take(n).to_list() == items[n:]
        assert s.take(n, left_on_negative=True).to_list() == items[:n]
        assert s.skip(n).to_list() == items[:n]
        assert s.skip(n, left_on_negative=True).to_list() == items[n:]


@given(items=INTS, n=st.integers(min_value=-40, max_value=40), left=st.booleans(), pad=st.booleans())
def test_window_hints_match_traversal(items, n, left, pad):
    s = seq(items)
    taken = s.take(n, pad=pad, left_on_negative=left)
    skipped = s.skip(n, left_on_negative=left)
    assert taken.length_hint == taken.count()
    assert skipped.length_hint == skipped.count()


@given(items=INTS)
def test_sort_matches_sorted(items):
    assert seq(items).sort().to_list() == sorted(items)
    assert seq(items).sort(desc=True).to_list() == sorted(items, reverse=True)


@given(items=INTS)
def test_sort_is_idempotent(items):
    once = seq(items).sort().to_list()
    assert seq(once).sort().to_list() == once


@given(items=INTS)
def test_sort_keeps_duplicates_contiguous(items):
    out = seq(items).sort().to_list()
    assert Counter(out) == Counter(items)
    starts = [i for i, x in enumerate(out) if i == 0 or out[i - 1] != x]
    assert len(starts) == len(set(items))


@given(items=st.lists(st.tuples(st.integers(0, 3), st.integers()), max_size=30, unique=True))
def test_sort_by_is_stable(items):
    assert seq(items).sort_by(lambda t: t[0]).to_list() == sorted(items, key=lambda t: t[0])


@given(items=INTS)
def test_group_by_partitions_in_first_seen_order(items):
    groups = seq(items).group_by(lambda x: x % 3).to_list()
    keys = [g.key for g in groups]
    assert keys == list(dict.fromkeys(x % 3 for x in items))
    assert [x for g in groups for x in g] == sorted(items, key=lambda x: keys.index(x % 3))


@given(items=INTS)
def test_cache_pulls_each_element_once(items):
    pulls = []
    cached = seq(items).tap(pulls.append).cache()
    assert cached.to_list() == items
    assert cached.to_list() == items
    assert pulls == items


@given(items=INTS, index=st.integers(min_value=-35, max_value=35))
def test_insert_matches_list_insert(items, index):
    if -len(items) <= index <= len(items):
        expected = list(items)
        expected.insert(index, 99)
        assert seq(items).insert(index, 99).to_list() == expected
