from fluentdocker.utils.util import iter_leafs, join_strs


def test_iter_leafs():
    data = {"a": 1, "b": {"c": 2, "d": {"e": [3]}}, "f": {}}
    assert sorted(iter_leafs(data)) == [(["a"], 1), (["b", "c"], 2), (["b", "d", "e"], [3])]


def test_join_strs():
    assert join_strs(["a"]) == "a"
    assert join_strs(["a", "b", "c"], "or") == "a, b or c"
