"""Reference containers that expose the same push/pop/index contract.

VectorBaseline is a plain doubling dynamic array whose front operations
insert and erase at slot 0. DequeBaseline wraps collections.deque and
ListBaseline is a doubly linked list; neither reports a load factor or
accepts a reservation.
"""

from collections import deque

from container_errors import ContainerUnderflowError, check_count, check_index


class VectorBaseline:
    def __init__(self):
        self._size = 0
        self._capacity = 0
        self._data = []

    def at(self, index):
        check_index("VectorBaseline", index, self._size)
        return self._data[index]

    def set_at(self, index, value):
        check_index("VectorBaseline", index, self._size)
        self._data[index] = value

    def __getitem__(self, index):
        return self.at(index)

    def __setitem__(self, index, value):
        self.set_at(index, value)

    def size(self):
        return self._size

    def capacity(self):
        return self._capacity

    def is_empty(self):
        return self._size == 0

    def load_factor(self):
        if self._capacity == 0:
            return 0.0
        return self._size / self._capacity

    def _reallocate(self, new_cap):
        new_data = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
        self._capacity = new_cap

    def reserve_back(self, count):
        check_count(count)
        if self._size + count > self._capacity:
            self._reallocate(self._size + count)

    def _grow_if_full(self):
        if self._size == self._capacity:
            self._reallocate(1 if self._capacity == 0 else self._capacity * 2)

    def push_back(self, value):
        self._grow_if_full()
        self._data[self._size] = value
        self._size += 1

    def pop_back(self):
        if self._size == 0:
            raise ContainerUnderflowError("VectorBaseline", "pop_back")
        self._size -= 1
        value = self._data[self._size]
        self._data[self._size] = None
        return value

    def push_front(self, value):
        self._grow_if_full()
        for i in range(self._size, 0, -1):
            self._data[i] = self._data[i - 1]
        self._data[0] = value
        self._size += 1

    def pop_front(self):
        if self._size == 0:
            raise ContainerUnderflowError("VectorBaseline", "pop_front")
        value = self._data[0]
        for i in range(1, self._size):
            self._data[i - 1] = self._data[i]
        self._size -= 1
        self._data[self._size] = None
        return value

    def to_list(self):
        return self._data[:self._size]

    def __len__(self):
        return self._size


class DequeBaseline:
    def __init__(self):
        self._data = deque()

    def at(self, index):
        check_index("DequeBaseline", index, len(self._data))
        return self._data[index]

    def set_at(self, index, value):
        check_index("DequeBaseline", index, len(self._data))
        self._data[index] = value

    def __getitem__(self, index):
        return self.at(index)

    def __setitem__(self, index, value):
        self.set_at(index, value)

    def size(self):
        return len(self._data)

    def is_empty(self):
        return not self._data

    def push_back(self, value):
        self._data.append(value)

    def pop_back(self):
        if not self._data:
            raise ContainerUnderflowError("DequeBaseline", "pop_back")
        return self._data.pop()

    def push_front(self, value):
        self._data.appendleft(value)

    def pop_front(self):
        if not self._data:
            raise ContainerUnderflowError("DequeBaseline", "pop_front")
        return self._data.popleft()

    def to_list(self):
        return list(self._data)

    def __len__(self):
        return len(self._data)


class ListBaseline:
    class Node:
        def __init__(self, value):
            self.value = value
            self.prev = None
            self.next = None

    def __init__(self):
        self._head = None
        self._tail = None
        self._size = 0

    def push_front(self, value):
        node = self.Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value):
        node = self.Node(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self):
        if self._head is None:
            raise ContainerUnderflowError("ListBaseline", "pop_front")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def pop_back(self):
        if self._tail is None:
            raise ContainerUnderflowError("ListBaseline", "pop_back")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def _node_at(self, index):
        check_index("ListBaseline", index, self._size)
        # walk from whichever end is closer
        if index < self._size // 2:
            current = self._head
            for _ in range(index):
                current = current.next
        else:
            current = self._tail
            for _ in range(self._size - 1 - index):
                current = current.prev
        return current

    def at(self, index):
        return self._node_at(index).value

    def set_at(self, index, value):
        self._node_at(index).value = value

    def __getitem__(self, index):
        return self.at(index)

    def __setitem__(self, index, value):
        self.set_at(index, value)

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def to_list(self):
        values = []
        current = self._head
        while current is not None:
            values.append(current.value)
            current = current.next
        return values

    def __len__(self):
        return self._size
