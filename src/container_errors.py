"""Errors raised by the array-backed containers.

Both concrete errors also derive from IndexError so callers that treat the
containers like built-in sequences keep working.
"""

from numbers import Integral


class ContainerError(Exception):
    """Base class for container precondition violations."""


class ContainerUnderflowError(ContainerError, IndexError):
    """Pop or peek on an empty container."""

    def __init__(self, container, operation):
        self.container = container
        self.operation = operation
        super().__init__(f"{container}.{operation}: container is empty")


class IndexOutOfBoundsError(ContainerError, IndexError):
    """Logical index outside [0, length)."""

    def __init__(self, container, index, length):
        self.container = container
        self.index = index
        self.length = length
        super().__init__(
            f"{container}: index {index} out of range for length {length}"
        )


def check_index(container, index, length):
    if not isinstance(index, Integral) or isinstance(index, bool):
        raise TypeError("index must be an integer")
    if index < 0 or index >= length:
        raise IndexOutOfBoundsError(container, index, length)


def check_count(count):
    if not isinstance(count, Integral) or isinstance(count, bool) or count < 0:
        raise ValueError("count must be a non-negative integer")
