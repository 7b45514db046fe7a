from iterkit.chain import chain_from_iterable
from iterkit.sorted import sorted_view


def test_sorted_chain_from_iterable():
    assert list(sorted_view(chain_from_iterable([[2, 4, 6]]))) == [2, 4, 6]


def test_sorted_chain_from_iterable_unsorted():
    view = sorted_view(chain_from_iterable([[9, 1], [5], [3, 7]]))
    assert list(view) == [1, 3, 5, 7, 9]


def test_custom_less():
    view = sorted_view([3, 1, 2], lambda a, b: a > b)
    assert list(view) == [3, 2, 1]


def test_less_on_key():
    words = ["ccc", "a", "bb"]
    view = sorted_view(words, lambda a, b: len(a) < len(b))
    assert list(view) == ["a", "bb", "ccc"]


def test_can_be_iterated_twice_over_generator():
    view = sorted_view(x for x in [5, 2, 8])
    assert list(view) == [2, 5, 8]
    assert list(view) == [2, 5, 8]


def test_sorting_is_deferred_until_iteration():
    data = [3, 1]
    view = sorted_view(data)
    data.append(0)
    assert list(view) == [0, 1, 3]


def test_source_is_not_modified():
    data = [3, 1, 2]
    assert list(sorted_view(data)) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_empty_iterable():
    assert list(sorted_view([])) == []


def test_len():
    assert len(sorted_view("cab")) == 3


def test_elements_are_not_copied():
    items = [[2], [1]]
    result = list(sorted_view(items))
    assert result[0] is items[1]
    assert result[1] is items[0]