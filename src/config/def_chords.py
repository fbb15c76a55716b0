from dataclasses import dataclass, field
from ..qualities import ChordQuality


### chord qualities and their names - for example, 'm7' and 'sus4' and 'add9' are defined in this module.
### every member of qualities.ChordQuality must have exactly one definition here,
### which is checked when this module is imported.

@dataclass(frozen=True)
class ChordDef:
    intervals: str     # comma-separated degree labels from the root, written as in chord spelling
    symbol: str        # the suffix that follows the root in a chord name, e.g. 'm7' in 'Am7'
    db_suffix: str     # the suffix used to key this quality in chords-db voicing tables
    aliases: tuple = field(default_factory=tuple) # other names that parse to this quality

# note that the degree labels are the chord's own spelling, so that e.g. a
# diminished 7th is written with a 'bb7' rather than a '6', and a 9th chord
# is written with a '9' rather than a '2'.
chord_defs = {
    ChordQuality.MAJOR:            ChordDef('R, 3, 5',        '',      'major',  ('maj', 'major triad')),
    ChordQuality.MINOR:            ChordDef('R, b3, 5',       'm',     'minor',  ('min', '-', 'minor triad')),
    ChordQuality.DOMINANT7:        ChordDef('R, 3, 5, b7',    '7',     '7',      ('dom7', 'dominant')),
    ChordQuality.MAJOR7:           ChordDef('R, 3, 5, 7',     'maj7',  'maj7',   ('M7', 'Δ7', 'Δ')),
    ChordQuality.MINOR7:           ChordDef('R, b3, 5, b7',   'm7',    'm7',     ('min7', '-7')),
    ChordQuality.DIMINISHED:       ChordDef('R, b3, b5',      'dim',   'dim',    ('°', 'o')),
    ChordQuality.AUGMENTED:        ChordDef('R, 3, #5',       'aug',   'aug',    ('+',)),
    ChordQuality.SUS2:             ChordDef('R, 2, 5',        'sus2',  'sus2',   ()),
    ChordQuality.SUS4:             ChordDef('R, 4, 5',        'sus4',  'sus4',   ('sus',)),
    ChordQuality.POWER5:           ChordDef('R, 5',           '5',     '5',      ('power',)),
    ChordQuality.DIMINISHED7:      ChordDef('R, b3, b5, bb7', 'dim7',  'dim7',   ('°7', 'o7')),
    ChordQuality.HALF_DIMINISHED7: ChordDef('R, b3, b5, b7',  'm7b5',  'm7b5',   ('ø', 'ø7', 'hdim7')),
    ChordQuality.MINOR_MAJOR7:     ChordDef('R, b3, 5, 7',    'mMaj7', 'mmaj7',  ('mM7', 'minmaj7')),
    ChordQuality.AUGMENTED7:       ChordDef('R, 3, #5, b7',   'aug7',  'aug7',   ('7#5', '+7')),
    ChordQuality.MAJOR6:           ChordDef('R, 3, 5, 6',     '6',     '6',      ('maj6',)),
    ChordQuality.MINOR6:           ChordDef('R, b3, 5, 6',    'm6',    'm6',     ('min6',)),
    ChordQuality.ADD9:             ChordDef('R, 3, 5, 9',     'add9',  'add9',   ('add2',)),
    ChordQuality.MINOR_ADD9:       ChordDef('R, b3, 5, 9',    'madd9', 'madd9',  ('madd2',)),
    ChordQuality.DOMINANT9:        ChordDef('R, 3, 5, b7, 9', '9',     '9',      ('dom9',)),
    ChordQuality.MAJOR9:           ChordDef('R, 3, 5, 7, 9',  'maj9',  'maj9',   ('M9',)),
    ChordQuality.MINOR9:           ChordDef('R, b3, 5, b7, 9', 'm9',   'm9',     ('min9',)),
    ChordQuality.DOMINANT7_SUS4:   ChordDef('R, 4, 5, b7',    '7sus4', '7sus4',  ('7sus',)),
    }

assert set(chord_defs) == set(ChordQuality), f'chord definitions missing for: {set(ChordQuality) - set(chord_defs)}'


### interval patterns of the minimal recognised shapes:
### triads are the complete three-note chords,
### shells are the seventh chords with their fifth left out.
triad_qualities = [ChordQuality.MAJOR, ChordQuality.MINOR, ChordQuality.DIMINISHED, ChordQuality.AUGMENTED]

shell_patterns = {ChordQuality.MAJOR7:    'R, 3, 7',
                  ChordQuality.MINOR7:    'R, b3, b7',
                  ChordQuality.DOMINANT7: 'R, 3, b7'}


### chords-db tables key their roots by name, with sharps written out:
db_root_keys = ['C', 'Csharp', 'D', 'Eb', 'E', 'F', 'Fsharp', 'G', 'Ab', 'A', 'Bb', 'B']
