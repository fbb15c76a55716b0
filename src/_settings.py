
############# preference settings:

### DEFAULT_SHARPS controls whether accidental ('black') notes are spelled
### with sharps or flats by default in the absence of other information.
### the fretboard itself carries no key information, so notes read off
### the strings (and the chord/scale/key names built from them) are spelled
### according to this setting unless a function is told otherwise.
DEFAULT_SHARPS = True

### PREFER_UNICODE_ACCIDENTALS controls whether the default behaviour
### when printing sharp and flat signs are the normal keyboard-typable
### characters '#' and 'b' (if False)
### or the unicode characters '♯' and '♭' (if True)
PREFER_UNICODE_ACCIDENTALS = False
### both are treated as valid input options in either case,
### this only affects what the program outputs to screen


############# fretboard settings:

### the instrument is always a six-string guitar, indexed from the lowest string (0)
### to the highest string (5):
NUM_STRINGS = 6

### MAX_FRET is the highest fret any computation may produce. a transposed
### fret above this (or below 0) is treated as out of range, never clamped.
MAX_FRET = 24

### FRET_COUNT is the number of frets shown by default, and the default upper
### bound for the chord solver and for full-fretboard scale displays:
FRET_COUNT = 12

### HAND_SPAN is the largest spread between the lowest and highest fretted
### (non-open) notes of a chord shape that a hand can hold without repositioning:
HAND_SPAN = 4

### practical band of frets on the low string that 3-notes-per-string
### scale position 1 tries to start in:
PRACTICAL_FRET_BAND = (1, 5)


############# analysis settings:

### identification functions need at least this many distinct notes:
MIN_NOTES = 2

### maximum number of ranked results returned by the identifiers:
MAX_SUGGESTIONS = 8

### default number of voicings returned by the voicing generator:
MAX_VOICINGS = 12


### scoring weights. every ranking function accepts a 'weights' dict
### that is merged over these defaults.

CHORD_SCORE_WEIGHTS = {'base': 50,          # every candidate starts here
                       'per_tone': 10,      # per played note that is a chord tone
                       'bass_root': 30,     # candidate root is the bass note
                       'missing': 10,       # flat penalty if any chord tone is absent
                       'rootless': 20,      # candidate root is not played at all
                       'unmatched': 20,     # per played note outside the chord
                      }

SCALE_SCORE_WEIGHTS = {'base': 50,          # no chromatic notes
                       'chromatic_base': 30, # one passing tone
                       'per_extra': 10,     # penalty per note outside the scale
                       'per_match': 10,     # per note inside the scale
                       'bass_root': 30,     # scale root is the bass note
                       'pentatonic': 5,     # pentatonic/blues bonus ...
                       'pentatonic_coverage': 40, # ... when coverage is at least this (%)
                      }

KEY_SCORE_WEIGHTS = {'base': 50,            # every played note is diatonic
                     'bass_tonic': 50,      # tonic is the bass note
                     'chord_root_tonic': 30, # tonic is the supplied chord root
                     'chord_root_in_key': 10, # supplied chord root is diatonic
                     'per_note': 2,         # per played note
                    }

### playability weights used by the chord solver to choose its best shapes:
SOLVER_SCORE_WEIGHTS = {'open_position': 100, # every fret at or below OPEN_POSITION_MAX_FRET
                        'open_string': 15,    # per open string
                        'per_fret': 8,        # penalty per fret of the lowest played fret
                        'root_bass': 25,      # chord root in the bass
                        'full_strings': 20,   # 4-6 sounding strings
                        'three_strings': 10,  # exactly 3 sounding strings
                        'per_span': 3,        # penalty per fret of span
                        'contiguous': 10,     # no muted strings between sounding strings
                       }
OPEN_POSITION_MAX_FRET = 4


############# theme settings:

### colours for notes on the fretboard, keyed by interval family:
INTERVAL_COLORS = {'root':      '#ef4444',  # red
                   'third':     '#3b82f6',  # blue
                   'fifth':     '#22c55e',  # green
                   'seventh':   '#eab308',  # gold
                   'extension': '#a1a1aa',  # neutral
                  }


### MARKERS are the unicode identifiers prefixed to the string methods of note objects:
MARKERS = {'Note': '♩',
           'OctaveNote': '♪',
          }

### BRACKETS are used in string methods, placed around the objects they contain:
BRACKETS = { 'NoteSet': ['𝄃', ' 𝄂'],
             'Voicing': ['〚', ' 〛'],
            'Position': ['⟨', '⟩'],
            }


def merge_weights(defaults, overrides):
    """returns a copy of a default weights dict with any overriding values swapped in"""
    merged = dict(defaults)
    if overrides is not None:
        unknown = set(overrides) - set(defaults)
        if len(unknown) > 0:
            raise KeyError(f'unknown scoring weights: {sorted(unknown)}')
        merged.update(overrides)
    return merged
