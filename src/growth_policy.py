"""
Growth policies for array-backed double-ended containers.

A policy decides what happens to one BufferRegion when a push finds no free
slot on the side it needs, when capacity is reserved up front, and when an
element leaves the low end of the live window. Both container topologies
(single buffer and split pair of buffers) delegate to the same policy
objects; the split deque only ever grows its regions at the physical back.

    Naive         exact-size reallocation, offset pinned at 0
    Reclaiming    capacity doubling, vacated slots reused, never shifts
    Conservative  doubles only when the load factor is high, shifts otherwise
"""

import logging

from container_errors import check_count

logger = logging.getLogger(__name__)

DEFAULT_LOAD_THRESHOLD = 0.5


def _doubled(capacity: int, required: int) -> int:
    capacity = max(capacity, 1)
    while capacity < required:
        capacity *= 2
    return capacity


class GrowthPolicy:
    """Contract shared by every policy.

    ``grow_back`` / ``grow_front`` are push-triggered and may size the new
    buffer generously. ``reserve_back`` / ``reserve_front`` size it for the
    whole requested count at once and leave the region untouched when it
    already has that many free slots on the requested side.
    """

    name = "policy"

    def grow_back(self, region, count=1):
        raise NotImplementedError

    def grow_front(self, region, count=1):
        raise NotImplementedError

    def reserve_back(self, region, count):
        check_count(count)
        if region.free_back() >= count:
            return
        self._reserve_back(region, count)

    def reserve_front(self, region, count):
        check_count(count)
        if region.free_front() >= count:
            return
        self._reserve_front(region, count)

    def compact_front(self, region):
        pass

    def _reserve_back(self, region, count):
        raise NotImplementedError

    def _reserve_front(self, region, count):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class NaiveGrowth(GrowthPolicy):
    """Reallocate to exactly the required size; never keep an offset."""

    name = "naive"

    def grow_back(self, region, count=1):
        region.reallocate(region.size + count, 0)

    def grow_front(self, region, count=1):
        if region.capacity - region.size >= count:
            region.shift(count)
        else:
            region.reallocate(region.size + count, count)

    def reserve_front(self, region, count):
        # front pushes shift in place, so any free slot serves them
        check_count(count)
        if region.capacity - region.size >= count:
            return
        region.reallocate(region.size + count, 0)

    def compact_front(self, region):
        region.shift(0)

    def _reserve_back(self, region, count):
        region.reallocate(region.size + count, 0)


class ReclaimingGrowth(GrowthPolicy):
    """Double on overflow and reuse slots vacated by pops."""

    name = "reclaiming"

    def grow_back(self, region, count=1):
        region.reallocate(_doubled(region.capacity * 2, region.size + count), 0)

    def grow_front(self, region, count=1):
        capacity = region.capacity
        new_capacity = max(capacity, 1) * 2
        while region.offset + new_capacity - capacity < count:
            new_capacity *= 2
        region.reallocate(new_capacity, region.offset + new_capacity - capacity)

    def _reserve_back(self, region, count):
        region.reallocate(region.offset + region.size + count, region.offset)

    def _reserve_front(self, region, count):
        region.reallocate(count + region.size + region.free_back(), count)


class ConservativeGrowth(GrowthPolicy):
    """Shift live data inside the buffer unless it is already well occupied.

    Args:
        threshold: load factor at which a back overflow doubles capacity
            instead of compacting the live window to offset 0
        inclusive: compare with ``>=`` when True, ``>`` when False
    """

    name = "conservative"

    def __init__(self, threshold: float = DEFAULT_LOAD_THRESHOLD, inclusive: bool = True):
        if not 0.0 < threshold <= 1.0:
            raise ValueError("threshold must be in (0, 1]")
        self.threshold = threshold
        self.inclusive = inclusive

    def should_double(self, load_factor: float) -> bool:
        if self.inclusive:
            return load_factor >= self.threshold
        return load_factor > self.threshold

    def grow_back(self, region, count=1):
        fits_after_shift = region.capacity - region.size >= count
        load_factor = region.load_factor()
        if fits_after_shift and not self.should_double(load_factor):
            logger.debug(
                "load factor %.3f under threshold %.3f, compacting in place",
                load_factor, self.threshold,
            )
            region.shift(0)
            return
        region.reallocate(_doubled(region.capacity * 2, region.size + count), 0)

    def grow_front(self, region, count=1):
        self._reserve_front(region, count)

    def _reserve_back(self, region, count):
        if region.capacity - region.size >= count:
            region.shift(0)
        else:
            region.reallocate(region.size + count, 0)

    def _reserve_front(self, region, count):
        if region.capacity - region.size >= count:
            region.shift(count)
        else:
            region.reallocate(region.size + count, count)

    def __repr__(self):
        return (
            f"ConservativeGrowth(threshold={self.threshold}, "
            f"inclusive={self.inclusive})"
        )
