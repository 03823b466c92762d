# filename: min_heap.py

HEAP_CAPACITY = 64


class HeapError(Exception):
    pass


class HeapFullError(HeapError):
    pass


class HeapEmptyError(HeapError):
    pass


class IndexedMinHeap:
    """Binary min-heap of integer handles.

    The heap never stores weights itself. Every comparison goes through
    ``weight_of(handle)``, so it always sees the caller's current table.
    Equal weights are ordered by the smaller handle.
    """

    def __init__(self, weight_of, capacity=HEAP_CAPACITY):
        if capacity < 1:
            raise ValueError("heap capacity must be at least 1")
        self.weight_of = weight_of
        self.capacity = capacity
        self.data = []

    def __len__(self):
        return len(self.data)

    def handles(self):
        return list(self.data)

    def _before(self, a, b):
        wa = self.weight_of(a)
        wb = self.weight_of(b)
        return wa < wb or (wa == wb and a < b)

    def push(self, handle):
        if len(self.data) >= self.capacity:
            raise HeapFullError(
                f"heap full ({self.capacity} slots), cannot push handle {handle}"
            )
        self.data.append(handle)
        self._sift_up(len(self.data) - 1)

    def peek(self):
        if not self.data:
            raise HeapEmptyError("peek on empty heap")
        return self.data[0]

    def pop(self):
        if not self.data:
            raise HeapEmptyError("pop on empty heap")
        smallest = self.data[0]
        last = self.data.pop()
        if self.data:
            self.data[0] = last
            self._sift_down(0)
        return smallest

    def _sift_up(self, pos):
        data = self.data
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._before(data[pos], data[parent]):
                break
            data[pos], data[parent] = data[parent], data[pos]
            pos = parent

    def _sift_down(self, pos):
        data = self.data
        size = len(data)
        while True:
            left = 2 * pos + 1
            right = left + 1
            smallest = pos
            if left < size and self._before(data[left], data[smallest]):
                smallest = left
            if right < size and self._before(data[right], data[smallest]):
                smallest = right
            if smallest == pos:
                break
            data[pos], data[smallest] = data[smallest], data[pos]
            pos = smallest
