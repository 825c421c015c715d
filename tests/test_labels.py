import itertools

import pytest

from digraph_editor.labels import vertex_label, label_sequence


def test_single_letters():
    assert [vertex_label(i) for i in range(26)] == [chr(ord('A') + i) for i in range(26)]


def test_continues_spreadsheet_style_after_z():
    assert vertex_label(25) == 'Z'
    assert vertex_label(26) == 'AA'
    assert vertex_label(27) == 'AB'
    assert vertex_label(51) == 'AZ'
    assert vertex_label(52) == 'BA'
    assert vertex_label(701) == 'ZZ'
    assert vertex_label(702) == 'AAA'


def test_labels_are_unique():
    labels = [vertex_label(i) for i in range(2000)]
    assert len(set(labels)) == len(labels)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        vertex_label(-1)


def test_label_sequence_matches_vertex_label():
    assert list(itertools.islice(label_sequence(), 3)) == ['A', 'B', 'C']
    assert list(itertools.islice(label_sequence(start=25), 3)) == ['Z', 'AA', 'AB']
