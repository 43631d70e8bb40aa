"""Single-buffer double-ended queue.

The live elements occupy ``[offset, offset + size)`` of one RawBuffer; both
ends share that buffer, so front operations either consume the slack before
``offset`` or ask the growth policy to make room.
"""

from container_errors import ContainerUnderflowError, check_index
from growth_policy import (
    DEFAULT_LOAD_THRESHOLD,
    ConservativeGrowth,
    NaiveGrowth,
    ReclaimingGrowth,
)
from raw_buffer import BufferRegion


def queue_slot(offset, index):
    """Physical slot of logical ``index`` in a buffer whose live window starts at ``offset``."""
    return offset + index


class ArrayQueue:
    def __init__(self, policy):
        self._policy = policy
        self._region = BufferRegion()

    @property
    def policy(self):
        return self._policy

    @property
    def region(self):
        return self._region

    def _name(self):
        return type(self).__name__

    def at(self, index):
        check_index(self._name(), index, self._region.size)
        return self._region.buffer[queue_slot(self._region.offset, index)]

    def set_at(self, index, value):
        check_index(self._name(), index, self._region.size)
        self._region.buffer[queue_slot(self._region.offset, index)] = value

    def __getitem__(self, index):
        return self.at(index)

    def __setitem__(self, index, value):
        self.set_at(index, value)

    def front(self):
        if self._region.size == 0:
            raise ContainerUnderflowError(self._name(), "front")
        return self.at(0)

    def back(self):
        if self._region.size == 0:
            raise ContainerUnderflowError(self._name(), "back")
        return self.at(self._region.size - 1)

    def size(self):
        return self._region.size

    def capacity(self):
        return self._region.capacity

    def offset(self):
        return self._region.offset

    def is_empty(self):
        return self._region.size == 0

    def load_factor(self):
        return self._region.load_factor()

    def reserve_back(self, count):
        self._policy.reserve_back(self._region, count)

    def reserve_front(self, count):
        self._policy.reserve_front(self._region, count)

    def push_back(self, value):
        if self._region.free_back() < 1:
            self._policy.grow_back(self._region)
        self._region.append(value)

    def pop_back(self):
        if self._region.size == 0:
            raise ContainerUnderflowError(self._name(), "pop_back")
        return self._region.take_back()

    def push_front(self, value):
        if self._region.free_front() < 1:
            self._policy.grow_front(self._region)
        self._region.prepend(value)

    def pop_front(self):
        if self._region.size == 0:
            raise ContainerUnderflowError(self._name(), "pop_front")
        value = self._region.take_front()
        self._policy.compact_front(self._region)
        return value

    def draw(self):
        return self._region.render()

    def to_list(self):
        return [self.at(i) for i in range(self._region.size)]

    def __len__(self):
        return self._region.size

    def __repr__(self):
        return f"{self._name()}({self.to_list()!r})"


class QueueNaive(ArrayQueue):
    def __init__(self):
        super().__init__(NaiveGrowth())


class QueueReclaiming(ArrayQueue):
    def __init__(self):
        super().__init__(ReclaimingGrowth())


class QueueConservative(ArrayQueue):
    def __init__(self, threshold=DEFAULT_LOAD_THRESHOLD, inclusive=True):
        super().__init__(ConservativeGrowth(threshold, inclusive))
