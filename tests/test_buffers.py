"""Unit tests for GrowableBuffer."""

import pytest

from lsh_shell.exceptions import AllocationError, FatalError
from lsh_shell.utils.buffers import GrowableBuffer


class ExhaustedList(list):
    """Backing list that cannot grow."""

    def extend(self, items):
        raise MemoryError


class TestGrowableBufferCreation:
    """Tests for GrowableBuffer initialization."""

    def test_starts_empty(self):
        buffer = GrowableBuffer(4)
        assert len(buffer) == 0
        assert not buffer
        assert buffer.capacity == 4
        assert buffer.items() == []

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            GrowableBuffer(0)


class TestGrowableBufferGrowth:
    """Tests for append() and capacity doubling."""

    def test_append_within_capacity(self):
        buffer = GrowableBuffer(4)
        for char in "abc":
            buffer.append(char)
        assert buffer.capacity == 4
        assert buffer.join() == "abc"

    def test_capacity_doubles_when_full(self):
        buffer = GrowableBuffer(2)
        for char in "abcde":
            buffer.append(char)
        assert buffer.capacity == 8
        assert len(buffer) == 5
        assert buffer.join() == "abcde"

    def test_items_returns_copy(self):
        buffer = GrowableBuffer(2)
        buffer.append("x")
        items = buffer.items()
        items.append("y")
        assert buffer.items() == ["x"]

    def test_join_with_separator(self):
        buffer = GrowableBuffer(1)
        for word in ("ls", "-l"):
            buffer.append(word)
        assert buffer.join(" ") == "ls -l"


class TestGrowableBufferExhaustion:
    """Tests for allocation failure during growth."""

    def test_memory_error_becomes_allocation_error(self):
        buffer = GrowableBuffer(1)
        buffer._items = ExhaustedList([None])
        buffer.append("a")

        with pytest.raises(AllocationError) as exc_info:
            buffer.append("b")

        assert isinstance(exc_info.value, FatalError)
        assert isinstance(exc_info.value.__cause__, MemoryError)
        assert str(exc_info.value) == "allocation error"
