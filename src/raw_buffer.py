"""
Raw owned storage for the array-backed containers.

RawBuffer is a fixed-capacity slot array: it never grows by itself. Growth is
always an explicit reallocation performed by BufferRegion on behalf of a
growth policy, so every copy and every in-place shift is visible and counted.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 1


class RawBuffer:
    def __init__(self, capacity):
        if not isinstance(capacity, int) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._capacity = capacity
        self._data = np.empty(capacity, dtype=object)

    def at(self, index):
        if index < 0 or index >= self._capacity:
            raise IndexError("RawBuffer.at: slot out of range")
        return self._data[index]

    def set_at(self, index, value):
        if index < 0 or index >= self._capacity:
            raise IndexError("RawBuffer.set_at: slot out of range")
        self._data[index] = value

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value):
        self._data[index] = value

    def capacity(self):
        return self._capacity

    def copy_to(self, other, src_start, dst_start, count):
        other._data[dst_start:dst_start + count] = self._data[src_start:src_start + count]

    def move(self, src_start, dst_start, count):
        # numpy resolves overlapping slice assignment as if through a copy
        self._data[dst_start:dst_start + count] = self._data[src_start:src_start + count]

    def clear(self, start, count):
        self._data[start:start + count] = None

    def __len__(self):
        return self._capacity


class BufferRegion:
    """One RawBuffer plus the live window ``[offset, offset + size)``.

    ``reallocations`` and ``moves`` count allocation events and element
    copies so the cost of a growth policy can be observed from tests.
    """

    def __init__(self, capacity=INITIAL_CAPACITY):
        self.buffer = RawBuffer(capacity)
        self.size = 0
        self.offset = 0
        self.reallocations = 0
        self.moves = 0

    @property
    def capacity(self):
        return self.buffer.capacity()

    def free_back(self):
        return self.capacity - self.offset - self.size

    def free_front(self):
        return self.offset

    def load_factor(self):
        if self.capacity == 0:
            return 0.0
        return self.size / self.capacity

    def append(self, value):
        self.buffer[self.offset + self.size] = value
        self.size += 1

    def prepend(self, value):
        self.offset -= 1
        self.buffer[self.offset] = value
        self.size += 1

    def take_back(self):
        self.size -= 1
        slot = self.offset + self.size
        value = self.buffer[slot]
        self.buffer[slot] = None
        return value

    def take_front(self):
        value = self.buffer[self.offset]
        self.buffer[self.offset] = None
        self.offset += 1
        self.size -= 1
        return value

    def reallocate(self, capacity, offset):
        if offset < 0 or offset + self.size > capacity:
            raise ValueError(
                f"cannot place {self.size} live slots at offset {offset} "
                f"in capacity {capacity}"
            )
        new_buffer = RawBuffer(capacity)
        self.buffer.copy_to(new_buffer, self.offset, offset, self.size)
        logger.debug(
            "reallocate %d -> %d slots, %d live moved to offset %d",
            self.capacity, capacity, self.size, offset,
        )
        self.buffer = new_buffer
        self.offset = offset
        self.reallocations += 1
        self.moves += self.size

    def shift(self, offset):
        if offset == self.offset:
            return
        if offset < 0 or offset + self.size > self.capacity:
            raise ValueError(
                f"cannot shift {self.size} live slots to offset {offset} "
                f"in capacity {self.capacity}"
            )
        old = self.offset
        self.buffer.move(old, offset, self.size)
        if offset < old:
            start = max(offset + self.size, old)
            self.buffer.clear(start, old + self.size - start)
        else:
            self.buffer.clear(old, min(old + self.size, offset) - old)
        logger.debug("shift %d live slots from offset %d to %d", self.size, old, offset)
        self.offset = offset
        self.moves += self.size

    def occupancy(self):
        return [self.offset <= i < self.offset + self.size for i in range(self.capacity)]

    def rebase(self):
        if self.size == 0:
            self.offset = 0

    def render_cells(self):
        return "".join("x|" if live else " |" for live in self.occupancy())

    def render(self):
        return "|" + self.render_cells()

    def render_mirrored(self):
        return "".join("|x" if live else "| " for live in reversed(self.occupancy()))
