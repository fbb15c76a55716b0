#### string parsing functions
from .util import unpack_and_reverse_dict, log
from . import _settings

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮', 'N'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

def accidental_value(acc):
    return accidental_offsets[acc]

if _settings.PREFER_UNICODE_ACCIDENTALS:
    fl = flat = '♭'
    sh = sharp = '♯'
    nat = '♮'
else:
    fl = flat = 'b'
    sh = sharp = '#'
    nat = 'N'

def is_sharp_ish(acc):
    """returns True for sharps and double sharps"""
    return (acc in accidental_offsets) and (accidental_value(acc) >= 1)
def is_flat_ish(acc):
    """returns True for flats and double flats"""
    return (acc in accidental_offsets) and (accidental_value(acc) <= -1)


################### roman numerals

numerals_roman = {1: 'I', 2: 'II', 3: 'III', 4: 'IV',
                  5: 'V', 6: 'VI', 7: 'VII'}

# marks appended to numerals of chords whose quality isn't plainly major or minor:
numeral_marks = {'dim': '°', 'aug': '+', 'dim7': '°7', 'hdim7': 'ø7', 'aug7': '+7'}


################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# map every spelling of every note to its keyboard position (where C is 0),
# i.e. a surjective mapping: C#, Db, B𝄪 all map to 1
note_positions = {}
note_names_by_accidental = {acc: {} for acc in accidental_offsets.keys()}
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            acc_note_name = f'{n}{acc}' # e.g C# or D𝄫
            acc_position = (natural_positions[n] + offset) % 12
            note_positions[acc_note_name] = acc_position
            note_names_by_accidental[acc][acc_position] = acc_note_name

# the preferred (display) name of each position, by accidental preference,
# using natural names for white notes and the preferred accidental for black notes:
preferred_note_names = {}
for preference in '#', 'b':
    acc_notes = note_names_by_accidental[preference]
    nat_notes = note_names_by_accidental['']
    names = [nat_notes[p] if p in nat_notes else acc_notes[p] for p in range(12)]
    # swap in the preferred display characters:
    display_acc = sh if preference == '#' else fl
    preferred_note_names[preference] = [name.replace(preference, display_acc) for name in names]

sharp_note_names = preferred_note_names['#']
flat_note_names = preferred_note_names['b']
valid_note_names = set(note_positions.keys())

def preferred_name(position, prefer_sharps=None):
    """returns the display name of the note at a keyboard position (0-11)
    by sharp/flat preference, falling back on the global default"""
    if prefer_sharps is None:
        prefer_sharps = _settings.DEFAULT_SHARPS
    names = sharp_note_names if prefer_sharps else flat_note_names
    return names[position % 12]

def is_valid_note_name(name, case_sensitive=True):
    """returns True if string can be cast to a Note, and False if it cannot"""
    if not isinstance(name, str) or not (0 < len(name) < 4):
        return False
    if not case_sensitive:
        # force first char to upper case and rest to lower, in case we've been
        # given e.g. lowercase 'c' or 'eb'
        name = name[0].upper() + name[1:].lower()
    return name in note_positions

def begins_with_valid_note_name(name):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the longest valid note name found there, or False if none."""
    for length in (3, 2, 1):
        if len(name) >= length and is_valid_note_name(name[:length]):
            return length
    return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first one to three characters
    (like the name of a chord, e.g. F#sus4)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_out_note_names(note_string, graceful_fail=False):
    """for some string of valid note letters, of undetermined length,
    such as e.g.: 'DADGAD' or 'EbAbDbGbBbEb', parse out the individual notes
    and return them as a list of strings.
    if graceful_fail, returns False upon failure to parse, instead of error."""

    if not isinstance(note_string, str):
        raise TypeError(f'parse_out_note_names expected str input but got: {type(note_string)}')

    # try looking for obvious split chars first before attempting char-wise split:
    for char in '-, ':
        if char in note_string:
            note_list = [n for n in note_string.split(char) if len(n) > 0]
            if len(note_list) >= 2 and all([is_valid_note_name(n) for n in note_list]):
                return note_list

    note_list = []
    rest = note_string
    while len(rest) > 0:
        # only take single accidentals here, so that e.g. 'Bb' is never read as 'B𝄫':
        if len(rest) >= 2 and is_valid_note_name(rest[:2]):
            note_list.append(rest[:2])
            rest = rest[2:]
        elif is_valid_note_name(rest[0]):
            note_list.append(rest[0])
            rest = rest[1:]
        else:
            if graceful_fail:
                return False
            raise ValueError(f'Could not parse note names out of: {note_string}')
    return note_list

def parse_octavenote_name(name, case_sensitive=True):
    """Takes the name of an OctaveNote as a string,
    for example 'C4' or 'A#3' or 'Gb1',
    and extracts the note and octave components.
    raises ValueError if the name cannot be parsed."""
    if not isinstance(name, str):
        raise TypeError(f'expected str for OctaveNote name but got: {type(name)}')
    name = name.strip()
    note_name = name.rstrip('0123456789')
    octave_str = name[len(note_name):]
    # allow negative octaves, e.g. 'C-1':
    if note_name.endswith('-') and len(octave_str) > 0:
        note_name = note_name[:-1]
        octave_str = '-' + octave_str

    if len(octave_str) == 0 or octave_str == '-':
        raise ValueError(f'Could not parse OctaveNote name: {name!r} has no octave number')

    if not case_sensitive and len(note_name) > 0:
        note_name = note_name[0].upper() + note_name[1:].lower()

    if not is_valid_note_name(note_name):
        raise ValueError(f'Could not parse OctaveNote name: {name!r} is not a valid note')
    return note_name, int(octave_str)


################### fret parsing

def parse_out_frets(frets, expected_len=_settings.NUM_STRINGS):
    """accepts a string or list of fret numbers and returns a strict list of
    integers (or None for muted strings).
    strings can be written compactly, e.g. 'x32010',
    with bracketed double-digit frets, e.g. 'x(10)(12)(12)(11)x',
    or with separators, e.g. '8-10-10-9-8-8'.
    lists can contain ints, None, or the characters 'x' / 'X' / '-1' for mutes."""
    if isinstance(frets, (list, tuple)):
        fret_list = [_parse_fret(f) for f in frets]
    elif isinstance(frets, str):
        frets = frets.strip()
        separated = None
        for char in '-, ':
            if char in frets:
                separated = [f for f in frets.split(char) if len(f) > 0]
                break
        if separated is not None and len(separated) == expected_len:
            fret_list = [_parse_fret(f) for f in separated]
        else:
            fret_list = []
            i = 0
            while i < len(frets):
                char = frets[i]
                if char == '(':
                    end = frets.index(')', i)
                    fret_list.append(_parse_fret(frets[i+1:end]))
                    i = end + 1
                else:
                    fret_list.append(_parse_fret(char))
                    i += 1
    else:
        raise TypeError(f'Expected list or string of frets, but got {type(frets)}')

    if expected_len is not None and len(fret_list) != expected_len:
        raise ValueError(f'Expected {expected_len} frets but parsed {len(fret_list)} from: {frets}')
    return fret_list

def _parse_fret(fret):
    """casts a single fret token to int, or None for a muted string"""
    if fret is None:
        return None
    if isinstance(fret, bool):
        raise TypeError(f'invalid fret value: {fret}')
    if isinstance(fret, int):
        return None if fret < 0 else fret
    if isinstance(fret, str):
        if fret in ('x', 'X', '-1'):
            return None
        if fret.isdigit():
            return int(fret)
    raise ValueError(f'invalid fret value: {fret!r}')

def fret_string(frets):
    """inverse of parse_out_frets: renders a fret list compactly, like 'x32010',
    with brackets around double-digit frets"""
    return ''.join(['x' if f is None else (str(f) if f < 10 else f'({f})') for f in frets])
