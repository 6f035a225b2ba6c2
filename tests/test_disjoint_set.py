import pytest

from kruskal_trace.topology import DisjointSet


def test_union_reports_cycles_and_merges_components():
    ds = DisjointSet(5)
    assert ds.components() == 5

    assert ds.union(0, 1) is True
    assert ds.union(1, 2) is True
    assert ds.union(3, 4) is True
    # already connected -> cycle signal
    assert ds.union(0, 2) is False

    assert ds.connected(0, 2)
    assert not ds.connected(2, 3)
    assert ds.components() == 2


def test_union_by_rank_keeps_higher_rank_root():
    ds = DisjointSet(4)
    ds.union(0, 1)
    root = ds.find(0)
    assert ds.rank[root] == 1

    ds.union(2, root)
    assert ds.find(2) == root
    assert ds.rank[root] == 1


def test_find_compresses_path():
    ds = DisjointSet(4)
    # build a chain 3 -> 2 -> 1 -> 0 by hand
    ds.parent = [0, 0, 1, 2]
    assert ds.find(3) == 0
    assert ds.parent == [0, 0, 0, 0]


def test_make_set_reinitializes():
    ds = DisjointSet(3)
    ds.union(0, 1)
    ds.union(1, 2)
    ds.make_set(3)
    assert ds.parent == [0, 1, 2]
    assert ds.rank == [0, 0, 0]
    assert ds.components() == 3

    ds.make_set(6)
    assert len(ds) == 6


@pytest.mark.parametrize("bad", [-1, 3, 100])
def test_out_of_range_index_fails_fast(bad):
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(bad)
    with pytest.raises(IndexError):
        ds.union(0, bad)


def test_matches_naive_transitive_closure():
    pairs = [(0, 5), (5, 7), (2, 3), (8, 9), (3, 9), (1, 1)]
    ds = DisjointSet(10)
    for a, b in pairs:
        ds.union(a, b)

    # naive closure by repeated relabeling
    label = list(range(10))
    changed = True
    while changed:
        changed = False
        for a, b in pairs:
            lo = min(label[a], label[b])
            if label[a] != lo or label[b] != lo:
                label[a] = label[b] = lo
                changed = True

    for i in range(10):
        for j in range(10):
            assert ds.connected(i, j) == (label[i] == label[j])
