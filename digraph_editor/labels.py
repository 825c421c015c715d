"""
Vertex identifier sequence.

Identifiers run A..Z and then continue like spreadsheet columns:
AA, AB, ..., AZ, BA, ..., ZZ, AAA, ...
"""

import string
from typing import Iterator

ALPHABET = string.ascii_uppercase


def vertex_label(index: int) -> str:
    """Return the label at position `index` (0 -> 'A', 25 -> 'Z', 26 -> 'AA')."""
    if index < 0:
        raise ValueError(f"Label index must be non-negative, got {index}")

    label = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, len(ALPHABET))
        label = ALPHABET[rem] + label
    return label


def label_sequence(start: int = 0) -> Iterator[str]:
    index = start
    while True:
        yield vertex_label(index)
        index += 1
