import string

import pytest

from adtkit.arraylist import ArrayList


def test_empty_list_format_and_state():
    empty = ArrayList()
    assert str(empty) == "[  ]"
    assert len(empty) == 0
    assert empty.is_empty()


def test_append_and_format():
    items = ArrayList()
    for value in (1, 2, 3):
        items.append(value)
    assert str(items) == "[ 1, 2, 3 ]"
    assert len(items) == 3
    assert not items.is_empty()


def test_insert_shifts_items_like_builtin_list():
    items = ArrayList([1, 2, 3])
    model = [1, 2, 3]
    items.insert(4, 1)
    model.insert(1, 4)
    assert list(items) == model
    assert items[1] == 4


def test_insert_at_ends():
    items = ArrayList([5, 6])
    items.insert(0, 0)
    items.insert(9, len(items))
    assert items[0] == 0
    assert items[len(items) - 1] == 9


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_out_of_range_raises(position):
    items = ArrayList([1, 2, 3])
    with pytest.raises(IndexError):
        items.insert(7, position)
    assert list(items) == [1, 2, 3]


def test_setitem_replaces_value():
    items = ArrayList([1, 4, 2, 3])
    items[2] = 10
    assert items[2] == 10
    assert len(items) == 4


def test_remove_drops_item():
    items = ArrayList([1, 4, 10, 3])
    items.remove(1)
    assert list(items) == [1, 10, 3]


@pytest.mark.parametrize("position", [-1, 3, 100])
def test_access_out_of_range_raises(position):
    items = ArrayList([1, 2, 3])
    with pytest.raises(IndexError):
        items[position]
    with pytest.raises(IndexError):
        items[position] = 0
    with pytest.raises(IndexError):
        items.remove(position)


def test_remove_from_empty_raises():
    with pytest.raises(IndexError):
        ArrayList().remove(0)


def test_non_integer_position_raises():
    with pytest.raises(TypeError):
        ArrayList([1, 2])["0"]


def test_concatenation_leaves_operands_unchanged():
    left = ArrayList([1, 2, 3])
    right = ArrayList([1, 10, 3])
    joined = left + right
    assert list(joined) == list(left) + list(right)
    assert len(joined) == len(left) + len(right)
    assert list(left) == [1, 2, 3]
    assert list(right) == [1, 10, 3]


def test_concatenation_with_other_type_raises():
    with pytest.raises(TypeError):
        ArrayList([1]) + [2]


def test_copy_is_independent():
    original = ArrayList([1, 2, 3])
    duplicate = original.copy()
    assert duplicate == original
    duplicate[0] = 99
    duplicate.append(4)
    assert original[0] == 1
    assert len(original) == 3


def test_clear_empties_list():
    items = ArrayList([1, 2, 3])
    items.clear()
    assert items.is_empty()
    assert str(items) == "[  ]"


def test_grows_past_initial_capacity():
    letters = ArrayList()
    for char in string.ascii_lowercase[:7]:
        letters.append(char)
    snapshot = letters.copy()
    for char in string.ascii_lowercase[7:]:
        letters.append(char)
    full = letters.copy()
    letters.remove(19)
    assert len(snapshot) == 7
    assert "".join(full) == string.ascii_lowercase
    assert "".join(letters) == string.ascii_lowercase.replace("t", "")
    assert str(snapshot) == "[ " + ", ".join(string.ascii_lowercase[:7]) + " ]"


def test_equality():
    assert ArrayList([1, 2]) == ArrayList([1, 2])
    assert not ArrayList([1, 2]) == ArrayList([2, 1])
    assert ArrayList() == ArrayList([])


def test_strings_print_plainly():
    words = ArrayList(["awesome!", "is"])
    assert str(words) == "[ awesome!, is ]"