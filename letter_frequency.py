# filename: letter_frequency.py

from collections import Counter


def read_input(path):
    with open(path, "rb") as f:
        return f.read()


def fold_letters(data):
    """Yield each ASCII letter of ``data`` in lowercase, skipping everything else."""
    if isinstance(data, str):
        data = data.encode("latin-1", errors="ignore")
    for byte in data:
        if 65 <= byte <= 90:
            byte += 32
        if 97 <= byte <= 122:
            yield chr(byte)


def count_letters(data):
    return Counter(fold_letters(data))


def encode_letters(data, codes):
    return "".join(codes[letter] for letter in fold_letters(data))
