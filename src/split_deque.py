"""Double-buffer deque.

Two independent BufferRegions meet at a split point. The back region holds
the elements after the split in forward order; the front region holds the
elements before it in reverse, so ``push_front`` is an append on its own
array. The growth policy runs separately on each side and the two arrays
never copy into one another.

A side that runs empty borrows from the other side's slack: a push on the
empty side lands in the slot just below the opposite side's live window when
that slot is free, and a pop on the empty side takes the opposite side's
lowest live slot.
"""

from container_errors import ContainerUnderflowError, check_index
from growth_policy import (
    DEFAULT_LOAD_THRESHOLD,
    ConservativeGrowth,
    NaiveGrowth,
    ReclaimingGrowth,
)
from raw_buffer import BufferRegion

FRONT = "front"
BACK = "back"


def deque_slot(front_size, front_offset, back_offset, index):
    """Translate a logical index into ``(side, physical_slot)``.

    Logical indexes below ``front_size`` live in the front buffer, stored
    back to front; the rest live in the back buffer in order.
    """
    if index < front_size:
        return FRONT, (front_size - index) + front_offset - 1
    return BACK, (index - front_size) + back_offset


class SplitDeque:
    def __init__(self, policy):
        self._policy = policy
        self._front_side = BufferRegion()
        self._back_side = BufferRegion()

    @property
    def policy(self):
        return self._policy

    @property
    def front_region(self):
        return self._front_side

    @property
    def back_region(self):
        return self._back_side

    def _name(self):
        return type(self).__name__

    def _locate(self, index):
        check_index(self._name(), index, self.size())
        side, slot = deque_slot(
            self._front_side.size, self._front_side.offset, self._back_side.offset, index
        )
        region = self._front_side if side == FRONT else self._back_side
        return region, slot

    def at(self, index):
        region, slot = self._locate(index)
        return region.buffer[slot]

    def set_at(self, index, value):
        region, slot = self._locate(index)
        region.buffer[slot] = value

    def __getitem__(self, index):
        return self.at(index)

    def __setitem__(self, index, value):
        self.set_at(index, value)

    def front(self):
        if self.is_empty():
            raise ContainerUnderflowError(self._name(), "front")
        return self.at(0)

    def back(self):
        if self.is_empty():
            raise ContainerUnderflowError(self._name(), "back")
        return self.at(self.size() - 1)

    def size(self):
        return self._front_side.size + self._back_side.size

    def capacity(self):
        return self._front_side.capacity + self._back_side.capacity

    def is_empty(self):
        return self.size() == 0

    def load_factor(self):
        capacity = self.capacity()
        if capacity == 0:
            return 0.0
        return self.size() / capacity

    def reserve_back(self, count):
        self._policy.reserve_back(self._back_side, count)

    def reserve_front(self, count):
        self._policy.reserve_back(self._front_side, count)

    def push_back(self, value):
        self._push(self._back_side, self._front_side, value)

    def push_front(self, value):
        self._push(self._front_side, self._back_side, value)

    def pop_back(self):
        return self._pop(self._back_side, self._front_side, "pop_back")

    def pop_front(self):
        return self._pop(self._front_side, self._back_side, "pop_front")

    def _push(self, side, other, value):
        if side.size == 0:
            if other.free_front() > 0:
                other.prepend(value)
                return
            side.rebase()
        if side.free_back() < 1:
            self._policy.grow_back(side)
        side.append(value)

    def _pop(self, side, other, operation):
        if side.size > 0:
            return side.take_back()
        if other.size == 0:
            raise ContainerUnderflowError(self._name(), operation)
        value = other.take_front()
        self._policy.compact_front(other)
        return value

    def draw(self):
        return self._front_side.render_mirrored() + ":" + self._back_side.render_cells()

    def to_list(self):
        return [self.at(i) for i in range(self.size())]

    def __len__(self):
        return self.size()

    def __repr__(self):
        return f"{self._name()}({self.to_list()!r})"


class DequeNaive(SplitDeque):
    def __init__(self):
        super().__init__(NaiveGrowth())


class DequeReclaiming(SplitDeque):
    def __init__(self):
        super().__init__(ReclaimingGrowth())


class DequeConservative(SplitDeque):
    def __init__(self, threshold=DEFAULT_LOAD_THRESHOLD, inclusive=True):
        super().__init__(ConservativeGrowth(threshold, inclusive))
