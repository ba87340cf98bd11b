"""
Unit tests for the node label allocator.
"""

import pytest

from pathviz.graph import ALL_LABELS, LabelAllocator


@pytest.fixture
def allocator():
    return LabelAllocator()


class TestEnumeration:
    """Test the fixed label order."""

    def test_has_156_labels(self):
        """26 letters, two cases, three suffix tiers."""
        assert len(ALL_LABELS) == 156
        assert len(set(ALL_LABELS)) == 156

    def test_tier_order(self):
        """Uppercase tiers come before lowercase, plain before marked."""
        assert ALL_LABELS[0] == "A"
        assert ALL_LABELS[25] == "Z"
        assert ALL_LABELS[26] == "A'"
        assert ALL_LABELS[52] == "A''"
        assert ALL_LABELS[78] == "a"
        assert ALL_LABELS[-1] == "z''"

    @pytest.mark.parametrize("label", ["A", "z", "B'", "q''"])
    def test_valid_labels(self, label):
        assert LabelAllocator.is_valid(label)

    @pytest.mark.parametrize("label", ["", "AB", "A'''", "1", "START", "'A", "B\n", "a'\n"])
    def test_invalid_labels(self, label):
        assert not LabelAllocator.is_valid(label)


class TestAllocation:
    """Test allocate / release / reserve."""

    def test_allocates_in_order(self, allocator):
        """Fresh allocator hands out A, B, C..."""
        assert [allocator.allocate() for _ in range(3)] == ["A", "B", "C"]

    def test_exhaustion_returns_none(self, allocator):
        """Allocating 156 labels then one more fails."""
        labels = [allocator.allocate() for _ in range(156)]
        assert labels == list(ALL_LABELS)
        assert allocator.allocate() is None
        assert allocator.issued == allocator.capacity == 156

    def test_freed_label_is_reissued(self, allocator):
        """Freeing a label and re-requesting returns exactly that label."""
        for _ in range(156):
            allocator.allocate()
        allocator.release("Q'")
        assert allocator.allocate() == "Q'"

    def test_lowest_free_label_wins(self, allocator):
        """With several holes the lowest one is filled first."""
        for _ in range(10):
            allocator.allocate()
        allocator.release("H")
        allocator.release("C")
        assert allocator.allocate() == "C"
        assert allocator.allocate() == "H"
        assert allocator.allocate() == "K"

    def test_reserve(self, allocator):
        """A reserved label is skipped by allocate and cannot be reserved twice."""
        assert allocator.reserve("A")
        assert not allocator.reserve("A")
        assert allocator.is_taken("A")
        assert allocator.allocate() == "B"

    def test_reserve_unknown_label(self, allocator):
        assert not allocator.reserve("AA")

    def test_release_unknown_label_is_ignored(self, allocator):
        allocator.release("not a label")
        assert allocator.issued == 0

    def test_clear(self, allocator):
        allocator.allocate()
        allocator.allocate()
        allocator.clear()
        assert allocator.issued == 0
        assert allocator.allocate() == "A"

    def test_allocators_are_independent(self):
        """Two allocators share no state."""
        first, second = LabelAllocator(), LabelAllocator()
        first.allocate()
        assert second.allocate() == "A"
