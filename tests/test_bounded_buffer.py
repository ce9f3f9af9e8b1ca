"""
Tests for the FIFO ring buffer
"""

import pytest

from lead_intel.shared.helpers import BoundedBuffer


class TestBoundedBuffer:
    def test_keeps_most_recent_items(self):
        buffer = BoundedBuffer(3)
        for i in range(5):
            buffer.append(i)

        assert buffer.to_list() == [2, 3, 4]
        assert len(buffer) == 3
        assert buffer.evicted == 2

    def test_append_returns_dropped_item(self):
        buffer = BoundedBuffer(2, items=["a", "b"])

        assert buffer.append("c") == "a"
        assert BoundedBuffer(2).append("x") is None

    def test_tail(self):
        buffer = BoundedBuffer(10, items=range(6))

        assert buffer.tail(2) == [4, 5]
        assert buffer.tail(100) == [0, 1, 2, 3, 4, 5]
        assert buffer.tail(0) == []

    def test_clear_resets_eviction_counter(self):
        buffer = BoundedBuffer(1, items=[1, 2, 3])
        buffer.clear()

        assert not buffer
        assert buffer.evicted == 0

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            BoundedBuffer(0)
