# filename: huffman_service.py

from huffman_core import MAX_NODES, HuffmanLogic
from letter_frequency import count_letters, encode_letters, read_input

TABLE_HEADER = "Character : Code"
MESSAGE_HEADER = "Encoded message:"


class EncodingResult:
    def __init__(self, frequencies, leaf_count, codes, encoded):
        self.frequencies = frequencies
        self.leaf_count = leaf_count
        self.codes = codes
        self.encoded = encoded

    def to_dict(self):
        return {
            "leaf_count": self.leaf_count,
            "frequencies": dict(sorted(self.frequencies.items())),
            "codes": dict(sorted(self.codes.items())),
            "encoded": self.encoded,
        }


class HuffmanService:
    def __init__(self, capacity=MAX_NODES):
        self.logic = HuffmanLogic(capacity=capacity, heap_capacity=capacity)

    def encode(self, data):
        freqs = count_letters(data)
        nodes, root = self.logic.build_tree(freqs)
        codes = self.logic.generate_codes(nodes, root)
        return EncodingResult(freqs, nodes.leaf_count(), codes, encode_letters(data, codes))

    def encode_file(self, path):
        return self.encode(read_input(path))


def render_status(leaf_count):
    return [
        "Frequency table built successfully.",
        f"Created {leaf_count} leaf nodes.",
    ]


def render_table(codes):
    lines = [TABLE_HEADER]
    for letter in sorted(codes):
        lines.append(f"{letter} : {codes[letter]}")
    return lines


def render(result):
    """Full text report for one run, one entry per output line."""
    return (
        render_status(result.leaf_count)
        + render_table(result.codes)
        + ["", MESSAGE_HEADER, result.encoded]
    )


def render_headers(leaf_count):
    # Printed even when the run aborts, with no table rows and no message
    return render_status(leaf_count) + render_table({}) + ["", MESSAGE_HEADER, ""]
