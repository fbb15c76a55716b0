from dataclasses import dataclass
from ..qualities import TuningCategory


### named tunings for a six-string guitar, with their open-string pitches from
### the lowest string to the highest. where two presets share the same pitches
### (e.g. Open C and CGCGCE), a tuning is named after whichever comes first.

@dataclass(frozen=True)
class TuningPreset:
    name: str
    notes: tuple
    category: TuningCategory

S, D, O, M, X = TuningCategory.STANDARD, TuningCategory.DROP, TuningCategory.OPEN, TuningCategory.MODAL, TuningCategory.SPECIAL

tuning_presets = [
    TuningPreset('Standard',       ('E2',  'A2',  'D3',  'G3',  'B3',  'E4' ), S),
    TuningPreset('Half-step Down', ('Eb2', 'Ab2', 'Db3', 'Gb3', 'Bb3', 'Eb4'), S), # the GnR tuning
    TuningPreset('D Standard',     ('D2',  'G2',  'C3',  'F3',  'A3',  'D4' ), S),
    TuningPreset('C Standard',     ('C2',  'F2',  'Bb2', 'Eb3', 'G3',  'C4' ), S),
    TuningPreset('B Standard',     ('B1',  'E2',  'A2',  'D3',  'Gb3', 'B3' ), S),

    TuningPreset('Drop D',         ('D2',  'A2',  'D3',  'G3',  'B3',  'E4' ), D),
    TuningPreset('Drop C',         ('C2',  'G2',  'C3',  'F3',  'A3',  'D4' ), D),
    TuningPreset('Drop B',         ('B1',  'Gb2', 'B2',  'E3',  'Ab3', 'Db4'), D),
    TuningPreset('Drop A',         ('A1',  'E2',  'A2',  'D3',  'Gb3', 'B3' ), D),
    TuningPreset('Double Drop D',  ('D2',  'A2',  'D3',  'G3',  'B3',  'D4' ), D),

    TuningPreset('Open D',         ('D2',  'A2',  'D3',  'F#3', 'A3',  'D4' ), O),
    TuningPreset('Open E',         ('E2',  'B2',  'E3',  'G#3', 'B3',  'E4' ), O),
    TuningPreset('Open G',         ('D2',  'G2',  'D3',  'G3',  'B3',  'D4' ), O),
    TuningPreset('Open A',         ('E2',  'A2',  'E3',  'A3',  'C#4', 'E4' ), O),
    TuningPreset('Open C',         ('C2',  'G2',  'C3',  'G3',  'C4',  'E4' ), O),

    TuningPreset('DADGAD',         ('D2',  'A2',  'D3',  'G3',  'A3',  'D4' ), M), # aka celtic, or open Dsus4
    TuningPreset('DADGBD',         ('D2',  'A2',  'D3',  'G3',  'B3',  'D4' ), M),
    TuningPreset('CGCGCE',         ('C2',  'G2',  'C3',  'G3',  'C4',  'E4' ), M),

    # the high-strung set of a twelve-string guitar, strung on a six-string:
    TuningPreset('Nashville',      ('E3',  'A3',  'D4',  'G4',  'B3',  'E4' ), X),
    TuningPreset('All Fourths',    ('E2',  'A2',  'D3',  'G3',  'C4',  'F4' ), X),
    ]

assert all([len(p.notes) == 6 for p in tuning_presets])
assert set([p.category for p in tuning_presets]) == set(TuningCategory)

# other names that the presets answer to:
tuning_aliases = {'Standard': ['standard', 'EADGBE', 'E standard'],
                  'Half-step Down': ['half-step', 'Eb standard'],
                  'DADGAD': ['celtic', 'open Dsus4'],
                  }

# the tuning that curated voicing tables are written for:
STANDARD = 'Standard'

# name given to any tuning that matches no preset:
CUSTOM = 'Custom'
