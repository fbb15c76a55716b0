import pytest

from ..parsing import parse_out_note_names, parse_out_frets, fret_string, note_split, preferred_name, parse_octavenote_name
from .testing_tools import compare

def test_note_names():
    compare(parse_out_note_names('DADGAD'), ['D', 'A', 'D', 'G', 'A', 'D'])
    compare(parse_out_note_names('EbAbDbGbBbEb'), ['Eb', 'Ab', 'Db', 'Gb', 'Bb', 'Eb'])
    compare(parse_out_note_names('C-E-G'), ['C', 'E', 'G'])
    compare(parse_out_note_names('CHG', graceful_fail=True), False)

    compare(note_split('F#sus4'), ('F#', 'sus4'))
    compare(note_split('Bbmaj7'), ('Bb', 'maj7'))
    compare(parse_octavenote_name('C#3'), ('C#', 3))

    compare(preferred_name(1), 'C#')
    compare(preferred_name(1, prefer_sharps=False), 'Db')
    compare(preferred_name(13), 'C#')

    with pytest.raises(ValueError):
        parse_octavenote_name('C#')

def test_frets():
    compare(parse_out_frets('x32010'), [None, 3, 2, 0, 1, 0])
    compare(parse_out_frets('X32010'), [None, 3, 2, 0, 1, 0])
    compare(parse_out_frets('x(10)(12)(12)(11)x'), [None, 10, 12, 12, 11, None])
    compare(parse_out_frets('8-10-10-9-8-8'), [8, 10, 10, 9, 8, 8])
    compare(parse_out_frets([None, 'x', -1, 0, '3', 5]), [None, None, None, 0, 3, 5])

    compare(fret_string([None, 10, 12, 12, 11, None]), 'x(10)(12)(12)(11)x')
    compare(fret_string(parse_out_frets('x32010')), 'x32010')

    with pytest.raises(ValueError):
        parse_out_frets('x3201')
    with pytest.raises(ValueError):
        parse_out_frets('x3201q')
    with pytest.raises(TypeError):
        parse_out_frets(32010)

def unit_test():
    test_note_names()
    test_frets()
