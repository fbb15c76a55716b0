import pytest

from ..intervals import (label_offset, label_semitones, offset_label, simple_degree, parse_degree_label,
                         parse_degree_string, interval_family, interval_color, offset_color, family_colors)
from ..qualities import IntervalFamily
from .testing_tools import compare

def test_degree_labels():
    compare(parse_degree_label('b7'), (-1, 7))
    compare(parse_degree_label('R'), (0, 1))
    compare(label_offset('b7'), 10)
    compare(label_offset('bb7'), 9)
    compare(label_semitones('9'), 14)
    compare(label_offset('9'), 2)
    compare(label_offset('#5'), 8)
    compare(offset_label(3), 'b3')
    compare(offset_label(12), 'R')
    compare(simple_degree('11'), 4)
    compare(parse_degree_string('1, b3, 5'), ['R', 'b3', '5'])

    with pytest.raises(ValueError):
        parse_degree_label('x5')
    with pytest.raises(ValueError):
        parse_degree_label('b27')

def test_families():
    compare(interval_family('R'), IntervalFamily.ROOT)
    compare(interval_family('b3'), IntervalFamily.THIRD)
    compare(interval_family('b5'), IntervalFamily.FIFTH)
    compare(interval_family('bb7'), IntervalFamily.SEVENTH)
    compare(interval_family('9'), IntervalFamily.EXTENSION)
    compare(interval_family('6'), IntervalFamily.EXTENSION)

    # colours are a pure function of the family:
    compare(interval_color('R'), '#ef4444')
    compare(interval_color('3'), interval_color('b3'))
    compare(offset_color(7), interval_color('5'))
    compare(len(family_colors()), len(IntervalFamily))

def unit_test():
    test_degree_labels()
    test_families()
