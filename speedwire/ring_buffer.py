"""Fixed-capacity ring buffer that replaces its oldest element once full."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar, overload

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Ring buffer holding at most ``capacity`` elements.

    Index 0 addresses the oldest element and index ``len(buffer) - 1`` the
    newest one. Adding to a full buffer overwrites the oldest element.
    A buffer created with capacity 0 grows to hold a single element.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._data: list[T] = []
        self._write = 0

    def clear(self) -> None:
        """Remove all elements."""
        self._data.clear()
        self._write = 0

    def capacity(self) -> int:
        """Maximum number of elements the buffer can hold."""
        return self._capacity

    def set_capacity(self, capacity: int) -> None:
        """Clear the buffer and change its maximum number of elements."""
        _check_capacity(capacity)
        self.clear()
        self._capacity = capacity

    def add(self, value: T) -> None:
        """Add a new element, replacing the oldest one if the buffer is full."""
        if self._write < len(self._data):
            self._data[self._write] = value
        else:
            self._data.append(value)
            self._capacity = max(self._capacity, len(self._data))
        self._write += 1
        if self._write >= self._capacity:
            self._write = 0

    def remove(self, offset: int, count: int) -> int:
        """Remove ``count`` elements starting at ``offset``.

        Elements that do not exist are silently ignored.
        Returns the number of elements actually removed.
        """
        if offset < 0 or count < 0:
            raise ValueError("offset and count must not be negative")
        items = list(self)
        kept = items[:offset] + items[offset + count:]
        self._data = kept
        self._write = 0 if len(kept) >= self._capacity else len(kept)
        return len(items) - len(kept)

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._data[self._resolve(i)] for i in range(*index.indices(len(self)))]
        return self._data[self._resolve(index)]

    def __iter__(self) -> Iterator[T]:
        yield from self._data[self._write:]
        yield from self._data[:self._write]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, items={list(self)!r})"

    def newest(self) -> T:
        """Return the most recently added element."""
        return self[-1]

    def oldest(self) -> T:
        """Return the oldest element."""
        return self[0]

    def write_pointer(self) -> int:
        """Position in the underlying storage that the next element is written to."""
        return self._write

    def data_vector_index(self, index: int) -> int:
        """Map a ring buffer index to the position in the underlying storage."""
        return self._resolve(index)

    def ring_buffer_index(self, data_index: int) -> int:
        """Map a position in the underlying storage to a ring buffer index."""
        size = len(self._data)
        if not 0 <= data_index < size:
            raise IndexError("storage index out of range")
        return (data_index - self._write) % size

    def _resolve(self, index: int) -> int:
        size = len(self._data)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("ring buffer index out of range")
        return (self._write + index) % size


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")