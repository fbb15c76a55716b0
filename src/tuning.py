### the tuning model: what each open string of a six-string guitar sounds,
### and the pitch arithmetic of frets on those strings.
### all pitches here are MIDI note values (see conversion.py), and pitch classes are 0-11.

from .notes import Note, OctaveNote
from .config.def_tunings import tuning_presets, tuning_aliases, STANDARD, CUSTOM
from .qualities import TuningCategory
from .util import log
from . import parsing, _settings


def _slug(name):
    """lowercase a tuning name and strip its separators, so that
    'Drop D', 'drop-d' and 'dropD' all look the same"""
    return ''.join([c for c in name.lower() if c not in ' -_'])

# presets keyed by name and alias slugs:
presets_by_slug = {}
for preset in tuning_presets:
    presets_by_slug.setdefault(_slug(preset.name), preset)
for name, aliases in tuning_aliases.items():
    for alias in aliases:
        presets_by_slug.setdefault(_slug(alias), [p for p in tuning_presets if p.name == name][0])


class Tuning:
    """the open-string pitches of a six-string guitar, from the lowest string
    (index 0) to the highest (index 5).

    initialised from a sequence of six OctaveNote names like ('E2', 'A2', ...).
    an entry that can't be parsed is kept as 'undetermined' (None), and the strings
    it belongs to are treated as muted wherever the tuning is used."""
    def __init__(self, notes, name=None):
        if isinstance(notes, str):
            # a preset name or compact note string:
            notes = get_tuning(notes)
        if isinstance(notes, Tuning):
            notes, name = notes.strings, notes._preset_name if name is None else name
        notes = list(notes)
        if len(notes) != _settings.NUM_STRINGS:
            raise ValueError(f'A tuning needs exactly {_settings.NUM_STRINGS} strings, but got {len(notes)}: {notes}')

        strings = []
        for i, n in enumerate(notes):
            strings.append(self._parse_string(i, n))
        self.strings = tuple(strings)
        self._preset_name = name

    @staticmethod
    def _parse_string(idx, note):
        if note is None:
            return None
        if isinstance(note, OctaveNote):
            return note
        try:
            return OctaveNote(note)
        except (ValueError, TypeError) as e:
            log(f'Could not parse tuning of string {idx} ({note!r}), treating as undetermined: {e}')
            return None

    #### pitch arithmetic:

    @property
    def open_values(self):
        """MIDI value of each open string, or None where undetermined"""
        return tuple([s.value if s is not None else None for s in self.strings])

    def is_determined(self, string_idx):
        return self.strings[string_idx] is not None

    def pitch_at(self, string_idx, fret):
        """absolute pitch (MIDI value) sounded by a fret on a string,
        or None if the string is undetermined or the fret is muted"""
        open_string = self.strings[string_idx]
        if open_string is None or fret is None:
            return None
        return open_string.value + fret

    def pitch_class_at(self, string_idx, fret):
        """pitch class (0-11) sounded by a fret on a string, or None"""
        pitch = self.pitch_at(string_idx, fret)
        return pitch % 12 if pitch is not None else None

    def note_at(self, string_idx, fret, prefer_sharps=None):
        """OctaveNote sounded by a fret on a string, or None"""
        pitch = self.pitch_at(string_idx, fret)
        return OctaveNote(value=pitch, prefer_sharps=prefer_sharps) if pitch is not None else None

    def frets_of(self, string_idx, pitch_class, max_fret=_settings.MAX_FRET, min_fret=0):
        """all frets on a string (between min_fret and max_fret) that sound some pitch class"""
        open_string = self.strings[string_idx]
        if open_string is None:
            return []
        first = (pitch_class - open_string.position) % 12
        while first < min_fret:
            first += 12
        return list(range(first, max_fret+1, 12))

    def distance_from(self, other):
        """how many semitones each string of this tuning lies above the same string of another tuning,
        e.g. Drop D distance_from Standard is [-2, 0, 0, 0, 0, 0].
        None for strings undetermined in either tuning"""
        other = get_tuning(other)
        return [(a - b) if (a is not None and b is not None) else None for a, b in zip(self.open_values, other.open_values)]

    #### naming:

    @property
    def name(self):
        """name of the preset this tuning matches, or 'Custom'"""
        if self._preset_name is not None:
            return self._preset_name
        return tuning_name(self)

    @property
    def is_standard(self):
        return self.open_values == get_tuning(STANDARD).open_values

    @property
    def note_names(self):
        """names of the open strings with octaves, like ['E2', 'A2', ...], with None for undetermined strings"""
        return [s.name if s is not None else None for s in self.strings]

    @property
    def chromas(self):
        """compact tuning string like 'EADGBE', with '?' for undetermined strings"""
        return ''.join([s.chroma if s is not None else '?' for s in self.strings])

    #### magic methods:

    def __getitem__(self, idx):
        return self.strings[idx]

    def __iter__(self):
        return iter(self.strings)

    def __len__(self):
        return len(self.strings)

    def __eq__(self, other):
        if isinstance(other, Tuning):
            return self.open_values == other.open_values
        return False

    def __hash__(self):
        return hash(self.open_values)

    def __str__(self):
        return f'{self.name} tuning ({self.chromas})'

    def __repr__(self):
        return str(self)


#### module-level functions:

def get_tuning(tuning=None):
    """casts any tuning-like input to a Tuning object. accepts:
        - None (for standard tuning)
        - an existing Tuning object
        - a preset name or alias, like 'Drop D' or 'dropD' or 'standard'
        - a sequence of six OctaveNote names, like ['D2', 'A2', 'D3', 'G3', 'B3', 'E4']
        - a compact string of six note names, like 'DADGAD' or 'EbAbDbGbBbEb',
            whose octaves are assigned in ascending order starting from octave 2
    raises ValueError for strings that are none of these."""
    if tuning is None:
        tuning = STANDARD
    if isinstance(tuning, Tuning):
        return tuning
    if isinstance(tuning, str):
        slug = _slug(tuning)
        if slug in presets_by_slug:
            preset = presets_by_slug[slug]
            return Tuning(preset.notes, name=preset.name)
        note_names = parsing.parse_out_note_names(tuning, graceful_fail=True)
        if note_names is False or len(note_names) != _settings.NUM_STRINGS:
            raise ValueError(f'Could not interpret {tuning!r} as a tuning name or a string of {_settings.NUM_STRINGS} notes')
        return Tuning(ascending_octave_notes(note_names))
    if isinstance(tuning, (list, tuple)):
        return Tuning(tuning)
    raise TypeError(f'Expected a Tuning, preset name, or list of notes, but got: {type(tuning)}')

def ascending_octave_notes(note_names, start_octave=2):
    """places a series of pitch classes into octaves so that each is the lowest pitch
    above the one before, starting from start_octave: e.g. EADGBE -> E2 A2 D3 G3 B3 E4"""
    octave_notes = []
    for name in note_names:
        note = Note.from_cache(name)
        if len(octave_notes) == 0:
            octave_notes.append(note.in_octave(start_octave))
        else:
            prev = octave_notes[-1]
            next_note = note.in_octave(prev.octave)
            while next_note.value <= prev.value:
                next_note = next_note + 12
            octave_notes.append(next_note)
    return octave_notes

def tuning_name(notes):
    """returns the name of the preset that some tuning (or list of note names) matches exactly,
    or 'Custom' if it matches none"""
    if not isinstance(notes, Tuning):
        try:
            notes = Tuning(notes)
        except ValueError:
            return CUSTOM
    for preset in tuning_presets:
        if Tuning(preset.notes).open_values == notes.open_values:
            return preset.name
    return CUSTOM

def tunings_by_category(category):
    """all tuning presets in some category (Standard, Drop, Open, Modal or Special)"""
    category = TuningCategory.cast(category)
    return [p for p in tuning_presets if p.category is category]

def pitch_at(string_idx, fret, tuning=None):
    """absolute pitch (MIDI value) of a fret on a string, or None if undetermined"""
    return get_tuning(tuning).pitch_at(string_idx, fret)

def pitch_class_at(string_idx, fret, tuning=None):
    """pitch class (0-11) of a fret on a string, or None if undetermined"""
    return get_tuning(tuning).pitch_class_at(string_idx, fret)

def note_at(string_idx, fret, tuning=None):
    return get_tuning(tuning).note_at(string_idx, fret)

def transpose_fret(old_fret, old_open_pitch, new_open_pitch, max_fret=_settings.MAX_FRET):
    """returns the fret that sounds the same absolute pitch on a string retuned
    from old_open_pitch to new_open_pitch, or None if that fret would fall
    outside [0, max_fret]. frets are never clamped into range."""
    if old_fret is None or old_open_pitch is None or new_open_pitch is None:
        return None
    new_fret = old_fret + (old_open_pitch - new_open_pitch)
    if new_fret < 0 or new_fret > max_fret:
        return None
    return new_fret

def adapt_frets(frets, old_tuning, new_tuning):
    """transposes every fretted string of a fret list so that it keeps sounding
    the same pitch after retuning from old_tuning to new_tuning.
    strings that fall out of range, or whose tuning is undetermined, become muted.
    e.g. an open A major [None,0,2,2,2,0] in Standard becomes [None,4,6,6,6,4] in C Standard"""
    old_tuning, new_tuning = get_tuning(old_tuning), get_tuning(new_tuning)
    frets = parsing.parse_out_frets(frets)
    adapted = []
    for string_idx, fret in enumerate(frets):
        new_fret = transpose_fret(fret, old_tuning.open_values[string_idx], new_tuning.open_values[string_idx])
        if fret is not None and new_fret is None:
            log(f'String {string_idx} fret {fret} falls out of range after retuning, muting it')
        adapted.append(new_fret)
    return adapted


standard_tuning = get_tuning(STANDARD)
