import pytest

from ..notes import Note, OctaveNote, PlayedNoteSet, cast_pitch_class
from .testing_tools import compare

def test_notes():
    compare(Note('C#').position, 1)
    compare(Note('Db'), Note('C#'))
    compare(Note('Db').name, 'Db')
    compare(Note(position=1, prefer_sharps=False).name, 'Db')
    compare(Note('c#', case_sensitive=False).name, 'C#')
    compare(Note('C') + 4, Note('E'))
    compare(Note('C') - 1, Note('B'))
    compare(Note('E') - Note('C'), 4)
    compare(Note('B#').position, 0)

    with pytest.raises(ValueError):
        Note('H')
    with pytest.raises(ValueError):
        # an octave note name passed to Note by mistake
        Note('C4')

def test_octave_notes():
    compare(OctaveNote('E2').value, 40)
    compare(OctaveNote('C4').value, 60)
    compare(OctaveNote('B#3').value, 60)
    compare(OctaveNote('Cb4').value, 59)
    compare(OctaveNote(value=61).name, 'C#4')
    compare(OctaveNote(value=61, prefer_sharps=False).name, 'Db4')
    compare(OctaveNote('E2') + 5, OctaveNote('A2'))
    compare(OctaveNote('A2') - OctaveNote('E2'), 5)
    compare(OctaveNote('E2').note, Note('E'))
    compare(Note('E').in_octave(2), OctaveNote('E2'))

def test_played_notes():
    played = PlayedNoteSet(['C', 'E', 'G', 'C'])
    compare(played.pitch_classes, (0, 4, 7))
    compare(played.bass, None)
    compare(len(played), 3)
    compare('E' in played, True)

    # open C major, read off the strings in standard tuning:
    c_major = PlayedNoteSet.from_frets('x32010')
    compare(c_major.pitch_classes, (0, 4, 7))
    compare(c_major.bass_pc, 0)
    compare(c_major.names, ['C', 'E', 'G'])

    # the same shape with the low E string sounding is in first inversion:
    c_over_e = PlayedNoteSet.from_frets('032010')
    compare(c_over_e.pitch_classes, (4, 0, 7))
    compare(c_over_e.bass_pc, 4)

    compare(PlayedNoteSet.from_frets('xxxxxx').pitch_classes, ())
    compare(PlayedNoteSet('CEG', bass='E'), PlayedNoteSet(['C', 'E', 'G'], bass='E'))

    compare(cast_pitch_class('Bb'), 10)
    compare(cast_pitch_class(13), 1)
    compare(cast_pitch_class(OctaveNote('E2')), 4)

def unit_test():
    test_notes()
    test_octave_notes()
    test_played_notes()
