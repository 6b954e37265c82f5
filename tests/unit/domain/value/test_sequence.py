"""Unit tests for OrderedItems."""

from devconnector.domain.value import OrderedItems


class TestOrderedItems:
    """Tests for the prepend-ordered collection."""

    def test_insert_front_puts_newest_first(self):
        items = OrderedItems[int]().insert_front(1).insert_front(2).insert_front(3)

        assert list(items) == [3, 2, 1]

    def test_operations_leave_original_untouched(self):
        original = OrderedItems[int]((2, 1))

        grown = original.insert_front(3)
        shrunk = original.remove_where(lambda x: x == 2)

        assert list(original) == [2, 1]
        assert list(grown) == [3, 2, 1]
        assert list(shrunk) == [1]

    def test_remove_where_without_match_keeps_everything(self):
        items = OrderedItems[int]((3, 2, 1))

        assert list(items.remove_where(lambda x: x > 10)) == [3, 2, 1]

    def test_find_returns_most_recent_match(self):
        items = OrderedItems[str](("b2", "a", "b1"))

        assert items.find(lambda x: x.startswith("b")) == "b2"
        assert items.find(lambda x: x == "z") is None

    def test_contains_and_len(self):
        items = OrderedItems[int]((5, 4))

        assert items.contains(lambda x: x == 4)
        assert not items.contains(lambda x: x == 1)
        assert len(items) == 2
        assert items[0] == 5
