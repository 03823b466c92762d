# filename: huffman_core.py

import string

from min_heap import HEAP_CAPACITY, IndexedMinHeap

MAX_NODES = 64
ALPHABET = string.ascii_lowercase


class NodeTableFullError(Exception):
    pass


class LeafNode:
    is_leaf = True

    def __init__(self, symbol, weight):
        self.symbol = symbol
        self.weight = weight

    def __repr__(self):
        return f"LeafNode({self.symbol!r}, {self.weight})"


class InternalNode:
    is_leaf = False

    def __init__(self, left, right, weight):
        self.left = left
        self.right = right
        self.weight = weight

    def __repr__(self):
        return f"InternalNode({self.left}, {self.right}, {self.weight})"


class NodeTable:
    """Append-only arena of tree nodes addressed by integer handles."""

    def __init__(self, capacity=MAX_NODES):
        if capacity < 1:
            raise ValueError("node table capacity must be at least 1")
        self.capacity = capacity
        self.nodes = []

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, handle):
        return self.nodes[handle]

    def weight(self, handle):
        return self.nodes[handle].weight

    def _append(self, node):
        if len(self.nodes) >= self.capacity:
            raise NodeTableFullError(
                f"ran out of node space ({self.capacity} nodes) while building tree"
            )
        self.nodes.append(node)
        return len(self.nodes) - 1

    def add_leaf(self, symbol, weight):
        return self._append(LeafNode(symbol, weight))

    def add_internal(self, left, right):
        return self._append(
            InternalNode(left, right, self.weight(left) + self.weight(right))
        )

    def leaf_count(self):
        return sum(1 for node in self.nodes if node.is_leaf)


class HuffmanLogic:
    def __init__(self, capacity=MAX_NODES, heap_capacity=HEAP_CAPACITY):
        self.capacity = capacity
        self.heap_capacity = heap_capacity

    def create_leaf_nodes(self, frequencies):
        # Handles follow alphabetical order of the present letters
        for symbol in frequencies:
            if not isinstance(symbol, str) or len(symbol) != 1 or symbol not in ALPHABET:
                raise ValueError(f"unsupported symbol {symbol!r}")

        nodes = NodeTable(self.capacity)
        for symbol in sorted(frequencies):
            freq = frequencies[symbol]
            if freq < 0:
                raise ValueError(f"negative frequency for {symbol!r}: {freq}")
            if freq > 0:
                nodes.add_leaf(symbol, freq)
        return nodes

    def build_encoding_tree(self, nodes):
        """Merge the two lightest nodes until one root remains.

        Returns the root handle, or None when the table holds no leaves.
        The first node popped becomes the left child.
        """
        heap = IndexedMinHeap(nodes.weight, self.heap_capacity)
        for handle in range(len(nodes)):
            heap.push(handle)

        if not heap:
            return None

        while len(heap) > 1:
            left = heap.pop()
            right = heap.pop()
            heap.push(nodes.add_internal(left, right))

        return heap.pop()

    def build_tree(self, frequencies):
        nodes = self.create_leaf_nodes(frequencies)
        return nodes, self.build_encoding_tree(nodes)

    def generate_codes(self, nodes, root):
        codes = {}
        if root is None:
            return codes

        stack = [(root, "")]
        while stack:
            handle, path = stack.pop()
            node = nodes[handle]
            if node.is_leaf:
                # A lone root leaf still needs a one-bit code
                codes[node.symbol] = path or "0"
                continue
            stack.append((node.right, path + "1"))
            stack.append((node.left, path + "0"))
        return codes
