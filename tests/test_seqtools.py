import pytest

from ingotkit.seqtools import add, into_list, into_map, is_unique, max_by, min_by, sub


def chars(text):
    return tuple(text)


def test_is_unique():
    assert is_unique([1, 2, 3])
    assert not is_unique([1, 2, 1])
    assert is_unique([])


def test_min_by_keeps_ties_in_order():
    items = ["bb", "a", "c", "dd"]
    assert min_by(items, lambda s, i: len(s)) == ["a", "c"]


def test_max_by_keeps_ties_in_order():
    items = ["bb", "a", "c", "dd"]
    assert max_by(items, lambda s, i: len(s)) == ["bb", "dd"]


def test_min_max_use_index():
    items = ["x", "y", "z"]
    assert min_by(items, lambda s, i: i) == ["x"]
    assert max_by(items, lambda s, i: i) == ["z"]


def test_min_max_empty():
    assert min_by([], lambda s, i: s) == []
    assert max_by([], lambda s, i: s) == []


def test_into_map_indexes_every_part():
    result = into_map(["ab", "bc"], chars)
    assert result == {"a": ["ab"], "b": ["ab", "bc"], "c": ["bc"]}


def test_into_map_rejects_duplicates():
    with pytest.raises(ValueError):
        into_map(["ab", "ab"], chars)


def test_into_list_round_trip():
    items = ["ab", "bc", "cd"]
    assert into_list(into_map(items, chars), chars) == items


def test_into_list_removes_duplicates():
    mapping = {"a": ["ab"], "b": ["ab", "bc"]}
    result = into_list(mapping, chars)
    assert result == ["ab", "bc"]
    assert is_unique(result)


def test_add_merges_without_duplicates():
    am = into_map(["ab", "bc"], chars)
    bm = into_map(["bc", "cd"], chars)
    assert add(am, bm, chars) == into_map(["ab", "bc", "cd"], chars)


def test_add_with_empty():
    am = into_map(["ab"], chars)
    assert add(am, {}, chars) == am
    assert add({}, am, chars) == am


def test_sub_removes_shared_objects():
    am = into_map(["ab", "bc"], chars)
    bm = into_map(["bc", "cd"], chars)
    assert sub(am, bm, chars) == into_map(["ab"], chars)


def test_sub_of_itself_is_empty():
    am = into_map(["ab", "bc"], chars)
    assert sub(am, am, chars) == {}