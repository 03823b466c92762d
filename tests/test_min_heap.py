import heapq
import random

import pytest

from min_heap import HEAP_CAPACITY, HeapEmptyError, HeapError, HeapFullError, IndexedMinHeap


def _drain(heap):
	out = []
	while len(heap):
		out.append(heap.pop())
	return out


def test_pops_lightest_first_with_handle_tiebreak():
	weights = [5, 3, 3, 1, 3]
	heap = IndexedMinHeap(weights.__getitem__)
	for h in range(len(weights)):
		heap.push(h)
	assert _drain(heap) == [3, 1, 2, 4, 0]


def test_push_order_does_not_change_pop_order():
	weights = [2, 2, 2, 1, 2]
	heap = IndexedMinHeap(weights.__getitem__)
	for h in (4, 2, 0, 3, 1):
		heap.push(h)
	assert _drain(heap) == [3, 0, 1, 2, 4]


def test_random_weights_match_heapq_tuple_order():
	rng = random.Random(1234)
	for _ in range(50):
		n = rng.randint(1, HEAP_CAPACITY)
		weights = [rng.randint(0, 6) for _ in range(n)]
		heap = IndexedMinHeap(weights.__getitem__)
		handles = list(range(n))
		rng.shuffle(handles)
		for h in handles:
			heap.push(h)

		reference = [(weights[h], h) for h in handles]
		heapq.heapify(reference)
		expected = [heapq.heappop(reference)[1] for _ in range(n)]

		popped = _drain(heap)
		assert popped == expected
		keys = [(weights[h], h) for h in popped]
		assert keys == sorted(keys)


def test_heap_reads_weights_through_accessor():
	weights = [4, 2]
	heap = IndexedMinHeap(weights.__getitem__)
	heap.push(0)
	heap.push(1)
	assert heap.peek() == 1

	# the heap sees entries the caller adds after construction
	weights.append(1)
	heap.push(2)
	assert heap.peek() == 2
	assert _drain(heap) == [2, 1, 0]


def test_heap_follows_weights_changed_in_place():
	weights = [3, 5, 4]
	heap = IndexedMinHeap(weights.__getitem__)
	for h in range(3):
		heap.push(h)
	assert heap.peek() == 0

	# handle 1 sits below the root; the sift after the next pop must see its new weight
	weights[1] = 0
	assert _drain(heap) == [0, 1, 2]


def test_heap_follows_weight_raised_in_place():
	weights = [1, 2, 3, 4]
	heap = IndexedMinHeap(weights.__getitem__)
	for h in range(4):
		heap.push(h)
	assert heap.pop() == 0

	# raising handle 2 in place moves it below handle 3 on the next sift
	weights[2] = 10
	assert heap.pop() == 1
	assert _drain(heap) == [3, 2]


def test_interleaved_push_and_pop():
	weights = [3, 1, 2]
	heap = IndexedMinHeap(weights.__getitem__)
	for h in range(3):
		heap.push(h)
	a = heap.pop()
	b = heap.pop()
	weights.append(weights[a] + weights[b])
	heap.push(3)
	assert (a, b) == (1, 2)
	assert _drain(heap) == [0, 3]


def test_push_beyond_capacity_raises():
	heap = IndexedMinHeap(lambda h: h, capacity=2)
	heap.push(0)
	heap.push(1)
	with pytest.raises(HeapFullError):
		heap.push(2)
	assert heap.handles() == [0, 1]


def test_pop_and_peek_on_empty_raise():
	heap = IndexedMinHeap(lambda h: h)
	with pytest.raises(HeapEmptyError):
		heap.pop()
	with pytest.raises(HeapEmptyError):
		heap.peek()
	assert issubclass(HeapEmptyError, HeapError)
	assert issubclass(HeapFullError, HeapError)


def test_single_element():
	heap = IndexedMinHeap(lambda h: 0)
	heap.push(7)
	assert len(heap) == 1
	assert heap.pop() == 7
	assert not heap


def test_invalid_capacity():
	with pytest.raises(ValueError):
		IndexedMinHeap(lambda h: h, capacity=0)
