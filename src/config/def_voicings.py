from ..qualities import ChordQuality
from .def_chords import db_root_keys


### a curated table of standard-tuning chord voicings in the chords-db schema:
###     {'main': {...}, 'tunings': {...}, 'keys': [...], 'suffixes': [...],
###      'chords': {root_key: [{'key': ..., 'suffix': ..., 'positions': [...]}]}}
### where each position is {'frets': [6 ints], 'baseFret': int, 'barres': [ints]},
### and its frets are relative to baseFret (1 is the baseFret itself),
### with 0 for an open string and -1 for a muted one.
### the table is built from open-position shapes plus movable barre shapes,
### and any other table in the same schema can be used in its place.

STANDARD_NOTES = ['E2', 'A2', 'D3', 'G3', 'B3', 'E4']
_open_pcs = [4, 9, 2, 7, 11, 4] # pitch classes of the standard open strings


# open-position shapes, as absolute frets in standard tuning, keyed by (root, db suffix):
open_shapes = {
    ('C', 'major'): ['x32010'],   ('A', 'major'): ['x02220'],   ('G', 'major'): ['320003', '320033'],
    ('E', 'major'): ['022100'],   ('D', 'major'): ['xx0232'],
    ('A', 'minor'): ['x02210'],   ('E', 'minor'): ['022000'],   ('D', 'minor'): ['xx0231'],

    ('A', '7'): ['x02020'],       ('B', '7'): ['x21202'],       ('C', '7'): ['x32310'],
    ('D', '7'): ['xx0212'],       ('E', '7'): ['020100'],       ('G', '7'): ['320001'],
    ('A', 'maj7'): ['x02120'],    ('C', 'maj7'): ['x32000'],    ('D', 'maj7'): ['xx0222'],
    ('E', 'maj7'): ['021100'],    ('F', 'maj7'): ['xx3210'],
    ('A', 'm7'): ['x02010'],      ('B', 'm7'): ['x20202'],      ('D', 'm7'): ['xx0211'],
    ('E', 'm7'): ['020000', '022030'],

    ('A', 'sus2'): ['x02200'],    ('D', 'sus2'): ['xx0230'],
    ('A', 'sus4'): ['x02230'],    ('D', 'sus4'): ['xx0233'],    ('E', 'sus4'): ['022200'],
    ('E', '5'): ['022xxx'],       ('A', '5'): ['x022xx'],       ('D', '5'): ['xx023x'],

    ('C', 'aug'): ['x3211x'],
    ('A', '6'): ['x02222'],       ('D', '6'): ['xx0202'],       ('E', '6'): ['022120'],
    ('G', '6'): ['320000'],
    ('A', 'm6'): ['x02212'],      ('D', 'm6'): ['xx0201'],      ('E', 'm6'): ['022020'],
    ('C', 'add9'): ['x32030'],    ('E', 'add9'): ['024100'],
    ('E', 'madd9'): ['024000'],
    ('E', '9'): ['020102'],       ('E', 'm9'): ['020002'],
    ('A', '7sus4'): ['x02030'],   ('D', '7sus4'): ['xx0213'],   ('E', '7sus4'): ['020200'],
    ('B', 'm7b5'): ['x2323x'],
    ('A', 'mmaj7'): ['x02110'],   ('E', 'mmaj7'): ['021000'],
    ('E', 'aug7'): ['0x0110'],
    }


# movable shapes, as fret offsets from the root's fret on the root string:
# E-form shapes have their root on the lowest string, A-form shapes on the second.
x = None
movable_shapes = {
    'E': {'major': [0, 2, 2, 1, 0, 0],
          'minor': [0, 2, 2, 0, 0, 0],
          '7':     [0, 2, 0, 1, 0, 0],
          'maj7':  [0, x, 1, 1, 0, x],
          'm7':    [0, 2, 0, 0, 0, 0],
          'sus4':  [0, 2, 2, 2, 0, 0],
          '7sus4': [0, 2, 0, 2, 0, 0],
          '5':     [0, 2, 2, x, x, x],
          'dim':   [0, 1, 2, 0, x, x],
          'aug':   [0, 3, 2, 1, 1, 0],
          'm7b5':  [0, x, 0, 0,-1, x],
          'dim7':  [0, x,-1, 0,-1, x],
          '6':     [0, 2, 2, 1, 2, 0],
          'm6':    [0, 2, 2, 0, 2, 0],
          'mmaj7': [0, 2, 1, 0, 0, 0],
          '9':     [0, 2, 0, 1, 0, 2],
          },
    'A': {'major': [x, 0, 2, 2, 2, 0],
          'minor': [x, 0, 2, 2, 1, 0],
          '7':     [x, 0, 2, 0, 2, 0],
          'maj7':  [x, 0, 2, 1, 2, 0],
          'm7':    [x, 0, 2, 0, 1, 0],
          'sus2':  [x, 0, 2, 2, 0, 0],
          'sus4':  [x, 0, 2, 2, 3, 0],
          '7sus4': [x, 0, 2, 0, 3, 0],
          '5':     [x, 0, 2, 2, x, x],
          'dim':   [x, 0, 1, 2, 1, x],
          'aug':   [x, 0, 3, 2, 2, 1],
          'm7b5':  [x, 0, 1, 0, 1, x],
          'dim7':  [x, 0, 1,-1, 1, x],
          '6':     [x, 0, 2, 2, 2, 2],
          'm6':    [x, 0, 2, 2, 1, 2],
          'add9':  [x, 0, 2, 4, 2, 0],
          'madd9': [x, 0, 2, 4, 1, 0],
          '9':     [x, 0,-1, 0, 0, 0],
          'maj9':  [x, 0,-1, 1, 0, x],
          'm9':    [x, 0,-2, 0, 0, x],
          'mmaj7': [x, 0, 2, 1, 1, 0],
          'aug7':  [x, 0, 3, 0, 2, 1],
          },
    }
movable_root_strings = {'E': 0, 'A': 1}

db_suffixes = [q.db_suffix for q in ChordQuality]
assert all([s in db_suffixes for shapes in movable_shapes.values() for s in shapes])
assert all([s in db_suffixes for (r, s) in open_shapes])


def _compact_frets(fret_str):
    """'x32010' -> [None, 3, 2, 0, 1, 0]"""
    return [None if c == 'x' else int(c) for c in fret_str]

def to_db_position(frets):
    """converts a list of absolute frets (None for muted) to a chords-db position,
    with frets relative to the lowest fretted fret if the shape sits above the nut"""
    fretted = [f for f in frets if f is not None and f > 0]
    base_fret = min(fretted) if (len(fretted) > 0 and max(fretted) > 4) else 1
    rel_frets = [-1 if f is None else (0 if f == 0 else f - base_fret + 1) for f in frets]
    # a barre lies across the lowest fret wherever it is held on three or more strings:
    barres = []
    if len(fretted) > 0 and all([f != 0 for f in frets if f is not None]):
        lowest = min(fretted)
        if frets.count(lowest) >= 3:
            barres = [lowest - base_fret + 1]
    return {'frets': rel_frets, 'baseFret': base_fret, 'barres': barres}

def movable_frets(form, suffix, root_pc):
    """absolute frets of a movable shape placed so that its root sounds root_pc,
    at the lowest position where every offset stays above the nut"""
    offsets = movable_shapes[form][suffix]
    string_idx = movable_root_strings[form]
    lowest_offset = min([o for o in offsets if o is not None])
    root_fret = (root_pc - _open_pcs[string_idx]) % 12
    while root_fret + lowest_offset < 1:
        root_fret += 12
    return [None if o is None else root_fret + o for o in offsets]

def build_table():
    """assembles the bundled chords-db table from the open and movable shapes"""
    chords = {}
    for root_pc, root_key in enumerate(db_root_keys):
        entries = []
        for suffix in db_suffixes:
            shapes = []
            for (root_name, shape_suffix), fret_strs in open_shapes.items():
                if shape_suffix == suffix and root_key == _db_key(root_name):
                    shapes.extend([_compact_frets(f) for f in fret_strs])
            for form in movable_shapes:
                if suffix in movable_shapes[form]:
                    shapes.append(movable_frets(form, suffix, root_pc))
            positions = []
            for frets in shapes:
                pos = to_db_position(frets)
                if pos not in positions:
                    positions.append(pos)
            if len(positions) > 0:
                entries.append({'key': root_key, 'suffix': suffix, 'positions': positions})
        chords[root_key] = entries

    return {'main': {'strings': 6, 'fretsOnChord': 4, 'name': 'guitar'},
            'tunings': {'standard': [n.rstrip('0123456789') for n in STANDARD_NOTES]},
            'keys': list(db_root_keys),
            'suffixes': db_suffixes,
            'chords': chords}

def _db_key(root_name):
    return root_name.replace('#', 'sharp') if root_name in ('C#', 'F#') else root_name


chords_db = build_table()
