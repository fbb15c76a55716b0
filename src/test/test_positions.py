import pytest

from ..positions import (scale_positions, scale_notes, position_notes, playback_notes,
                         three_note_positions, box_positions, blues_positions, anchor_degree)
from ..qualities import ScaleType
from ..tuning import Tuning, get_tuning
from .testing_tools import compare

def test_three_notes_per_string():
    positions = scale_positions('C', 'major')
    compare(len(positions), 7)
    compare([p.number for p in positions], [1, 2, 3, 4, 5, 6, 7])
    for p in positions:
        compare(len(p.notes), 18)
        compare(sorted(p.strings().keys()), [0, 1, 2, 3, 4, 5])
        compare([len(frets) for frets in p.strings().values()], [3]*6)

    # position 1 starts inside the practical fret band, on F:
    compare(anchor_degree(0, ScaleType.MAJOR.offsets, get_tuning(), 0), (3, 1))
    first = positions[0]
    compare(first.notes[0].note, 'F')
    compare(first.strings()[0], [1, 3, 5])
    compare(first.strings()[1], [2, 3, 5])
    # later positions climb the neck from there:
    compare([p.notes[0].fret for p in positions], [1, 3, 5, 7, 8, 10, 12])

    # every note is labelled by its degree, and coloured by its family:
    for n in first.notes:
        compare(n.is_root, n.interval == 'R')
    roots = [n for n in first.notes if n.is_root]
    compare(len(roots) > 0, True)
    compare(roots[0].color, '#ef4444')

    # a key's relative minor shares its shapes:
    compare(len(three_note_positions('A', 'minor')), 7)

def test_pentatonic_boxes():
    boxes = scale_positions('A', 'minor pentatonic')
    compare(len(boxes), 5)
    first = boxes[0]
    compare(first.strings(), {0: [5, 8], 1: [5, 7], 2: [5, 7], 3: [5, 7], 4: [5, 8], 5: [5, 8]})
    compare((first.start_fret, first.end_fret), (5, 8))
    for box in boxes:
        compare(len(box.notes), 12)
        compare([len(frets) for frets in box.strings().values()], [2]*6)
    # each box starts on the next degree up the low string:
    compare([box.notes[0].fret for box in boxes], [5, 8, 10, 12, 15])
    compare(box_positions('A', ScaleType.MINOR_PENTATONIC), boxes)

def test_blues_boxes():
    blues = scale_positions('A', 'blues')
    compare(len(blues), 5)
    first = blues[0]
    compare(len(first.notes), 13)
    blue_notes = [n for n in first.notes if n.interval == 'b5']
    compare([(n.string_index, n.fret) for n in blue_notes], [(1, 6)])
    compare(blue_notes[0].note, 'D#')
    compare(blues_positions('A'), blues)

def test_full_fretboard():
    full = scale_positions('C', 'major', mode='full')
    compare(len(full), 1)
    compare(full[0].number, 0)
    compare((full[0].start_fret, full[0].end_fret), (0, 12))
    compare(all([n.interval in ScaleType.MAJOR.intervals for n in full[0].notes]), True)
    compare(len(full[0].notes), len(scale_notes('C', 'major')))
    compare(len(scale_positions('C', 'major', mode='full', max_fret=5)[0].notes), len(scale_notes('C', 'major', max_fret=5)))

    with pytest.raises(ValueError):
        scale_positions('C', 'major', mode='boxes')

    # undetermined strings have no notes:
    unknown_high = Tuning(['E2', 'A2', 'D3', 'G3', 'B3', '??'])
    compare(any([n.string_index == 5 for n in scale_notes('C', 'major', unknown_high)]), False)
    for p in scale_positions('C', 'major', unknown_high):
        compare(5 in p.strings(), False)

def test_position_notes_and_playback():
    box1 = scale_positions('A', 'minor pentatonic')[0]
    compare(position_notes('A', 'minor pentatonic', number=1), list(box1.notes))
    compare(position_notes('A', 'minor pentatonic', number=9), [])
    compare(len(position_notes('A', 'minor pentatonic', number=0)), len(scale_notes('A', 'minor pentatonic')))

    ascending = ['A2', 'C3', 'D3', 'E3', 'G3', 'A3', 'C4', 'D4', 'E4', 'G4', 'A4', 'C5']
    compare(playback_notes(box1.notes), ascending)
    compare(playback_notes(box1.notes, direction='descending'), list(reversed(ascending)))
    # repeated pitches are only played once:
    compare(playback_notes(list(box1.notes) + list(box1.notes)), ascending)

    with pytest.raises(ValueError):
        playback_notes(box1.notes, direction='sideways')

def unit_test():
    test_three_notes_per_string()
    test_pentatonic_boxes()
    test_blues_boxes()
    test_full_fretboard()
    test_position_notes_and_playback()
