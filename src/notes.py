### this module contains the Note, OctaveNote, and PlayedNoteSet classes.
### Notes are abstract pitch classes in no particular octave, such as the note C.
### OctaveNotes are specific pitches like the frets of a guitar string, such as E2 (the low E string).
### PlayedNoteSets are the unique pitch classes sounding on a fretboard, along with their bass note.

from .util import log, unique_in_order
from . import parsing, _settings
from . import conversion as conv


class Note:
    """a note/chroma/pitch-class defined in the abstract,
    i.e. not associated with a specific note inside an octave,
    such as: C or D#"""
    def __init__(self, name=None, position=None, prefer_sharps=None, case_sensitive=True):
        """a Note can be initialised in one of two ways:
            1. by passing to 'name' a valid note name, such as C or D# or Ebb
            2. by passing to 'position' an integer between 0 and 11 (inclusive),
                denoting a semitone offset from C.
                i.e. position 0 is C, 1 is C#, 2 is D... 11 is B

        optional args:
        'prefer_sharps':
            if True, this note will be displayed with sharps where applicable.
            if False, will be displayed with flats where applicable.
            if None (default), will infer sharp/flat preference from 'name' arg,
                or else fall back on global default (defined in _settings module)
        'case_sensitive':
            if True (default), requires note names to be capitalised and will
                throw an error otherwise.
            if False, will accept lowercase chromas like 'c#'
        """
        if isinstance(name, Note):
            # accept re-casting: just take the input note's name
            name, prefer_sharps = name.chroma, (name.prefer_sharps if prefer_sharps is None else prefer_sharps)
        elif isinstance(name, int) and not isinstance(name, bool):
            # we've been passed a position int instead of a name, silently correct:
            position = name
            name = None

        # detect if we've been fed an OctaveNote name by accident:
        if isinstance(name, str) and len(name) > 0 and name[-1].isdigit():
            raise ValueError(f"Looks like an OctaveNote name has mistakenly been passed to Note init: {name}")

        # set main object attributes from init args:
        self.chroma, self.position, self.prefer_sharps = self._parse_input(name, position, prefer_sharps, case_sensitive)
        # 'chroma' is the string denoting pitch class: ('C#', 'Db', 'E', etc.)

        # store sharp and flat names of this note in case they are needed:
        self.sharp_name = parsing.preferred_name(self.position, prefer_sharps=True)
        self.flat_name = parsing.preferred_name(self.position, prefer_sharps=False)

    #### main input/arg-parsing private method:
    @staticmethod
    def _parse_input(name, position, prefer_sharps, case_sensitive):
        # check that exactly one has been provided:
        if (name is not None) + (position is not None) != 1:
            raise TypeError("Argument to Note init must include exactly one of: name or position")

        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise Note object')
            if not case_sensitive and len(name) > 0:
                # cast to proper case:
                name = name[0].upper() + name[1:].lower()
            if not parsing.is_valid_note_name(name):
                raise ValueError(f'Invalid note name: {name!r}')

            # detect if sharp or flat:
            if prefer_sharps is None:
                # if no preference is set then we infer from the name argument supplied
                if parsing.is_sharp_ish(name[1:]):
                    prefer_sharps = True
                elif parsing.is_flat_ish(name[1:]):
                    prefer_sharps = False
                else: # fallback on global default
                    prefer_sharps = _settings.DEFAULT_SHARPS

            position = parsing.note_positions[name]
        else:
            if prefer_sharps is None:
                prefer_sharps = _settings.DEFAULT_SHARPS # global default
            position = int(position) % 12

        name = parsing.preferred_name(position, prefer_sharps=prefer_sharps)
        return name, position, prefer_sharps

    @staticmethod
    def from_cache(name=None, position=None, prefer_sharps=None):
        """efficient note init by cache of names/positions to note objects"""
        if isinstance(name, Note):
            return name
        if isinstance(name, int):
            position, name = name, None
        key = (name, prefer_sharps) if name is not None else (position % 12, prefer_sharps)
        if key in cached_notes:
            return cached_notes[key]
        return Note(name=name, position=position, prefer_sharps=prefer_sharps)

    #### magic methods and note constructors:
    def __add__(self, other):
        """addition with an integer is simple transposition"""
        if isinstance(other, int):
            return Note.from_cache(position=(self.position + other) % 12, prefer_sharps=self.prefer_sharps)
        else:
            raise TypeError(f'Notes can only be added with integers, not {type(other)}')

    def __sub__(self, other):
        """if 'other' is an integer, returns a new Note that is shifted down by that many semitones.
        if 'other' is another Note, return the upward semitone distance from other to this note,
        i.e. this note's offset (0-11) with other as the root."""
        if isinstance(other, int):
            return Note.from_cache(position=(self.position - other) % 12, prefer_sharps=self.prefer_sharps)
        elif isinstance(other, (Note, str)):
            other = Note.from_cache(other)
            return (self.position - other.position) % 12
        else:
            raise TypeError(f'Only integers and other Notes can be subtracted from Notes, not {type(other)}')

    def in_octave(self, octave=4):
        """instantiates an OctaveNote object corresponding to this Note played in a specific octave"""
        return OctaveNote(value=conv.oct_pos_to_value(int(octave), self.position), prefer_sharps=self.prefer_sharps)

    # quick accessor for in_octave method defined above:
    def __getitem__(self, octave):
        """returns OctaveNote in the specified octave"""
        assert isinstance(octave, int)
        return self.in_octave(octave)

    ## comparison operators:
    def __eq__(self, other):
        """Enharmonic equality comparison between Notes, returns True if
        they have the same chroma (by comparing Note.position)."""
        if isinstance(other, str) and parsing.is_valid_note_name(other):
            # cast string to Note if possible
            other = Note.from_cache(other)
        if isinstance(other, Note):
            return self.position == other.position
        return False

    def __hash__(self):
        """note and octavenote hash-equivalence is based on position alone, not value"""
        return hash(f'Note:{self.position}')

    def __lt__(self, other):
        """comparison between abstract Notes treats C as the 'lowest' note,
        and B as the 'highest'"""
        if type(other) == Note:
            return self.position < other.position
        else:
            raise TypeError(f'< operation for Notes only defined over other Notes, not {type(other)}')

    @property
    def name(self):
        return f'{self.chroma}'

    def is_natural(self):
        """True if this is a white note, False otherwise"""
        return self.chroma in parsing.natural_note_names

    def __str__(self):
        # e.g. '♩C#'
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    # Note object unicode identifier:
    _marker = _settings.MARKERS['Note']



#### subclass for specific notes at specific pitches
class OctaveNote(Note):
    """a note in a specific octave, such as C4 or D#2.

    this class inherits from Note,
    except it also has .octave and .value attrs defined on top,
    and its addition/subtraction operators respect octave/value as well as position.
    """

    def __init__(self, name=None, value=None, prefer_sharps=None):
        """initialises an OctaveNote object from one of the following:
        name: a string denoting a specific note, like 'C#3'
        value: an integer MIDI note number, where C4 is 60 and E2 is 40."""

        # set main object attributes from init args:
        self.chroma, self.value, self.prefer_sharps = self._parse_input(name, value, prefer_sharps)
        # compute octave and position:
        self.octave, self.position = conv.oct_pos(self.value)
        self.sharp_name = parsing.preferred_name(self.position, prefer_sharps=True)
        self.flat_name = parsing.preferred_name(self.position, prefer_sharps=False)

    #### main input/arg-parsing private method:
    @staticmethod
    def _parse_input(name, value, prefer_sharps):
        """parses name and value input args (and sharp preference)
        returns correct chroma and value"""
        if isinstance(name, OctaveNote):
            return name.chroma, name.value, name.prefer_sharps
        elif isinstance(name, Note):
            raise TypeError('Note object incorrectly passed to OctaveNote init method')

        if isinstance(name, int) and not isinstance(name, bool):
            # auto detect initialisation with note value as first arg:
            value, name = name, None

        if (name is not None) + (value is not None) != 1:
            raise TypeError("Argument to OctaveNote init must include exactly one of: name or value")

        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str for OctaveNote name but got: {type(name)}')
            chroma, octave = parsing.parse_octavenote_name(name)
            # detect if sharp or flat:
            if prefer_sharps is None:
                if parsing.is_sharp_ish(chroma[1:]):
                    prefer_sharps = True
                elif parsing.is_flat_ish(chroma[1:]):
                    prefer_sharps = False
                else: # fallback on global default
                    prefer_sharps = _settings.DEFAULT_SHARPS
            value = conv.name_to_value(name)
        else:
            value = int(value)
            if prefer_sharps is None:
                prefer_sharps = _settings.DEFAULT_SHARPS

        position = value % 12
        chroma = parsing.preferred_name(position, prefer_sharps=prefer_sharps)
        return chroma, value, prefer_sharps

    #### operators & magic methods:
    def __add__(self, interval):
        """returns a new OctaveNote that is shifted up by some integer number of semitones."""
        if not isinstance(interval, int):
            raise TypeError("Only integers can be added or subtracted to an OctaveNote")
        return OctaveNote(value=self.value + interval, prefer_sharps=self.prefer_sharps)

    def __sub__(self, other):
        """if 'other' is an integer, returns a new OctaveNote that is shifted down by that many semitones.
        if 'other' is another OctaveNote, return the signed semitone distance between them."""
        if isinstance(other, int):
            return OctaveNote(value=self.value - other, prefer_sharps=self.prefer_sharps)
        elif isinstance(other, OctaveNote):
            return self.value - other.value
        else:
            raise TypeError("Only integers and OctaveNotes can be subtracted from an OctaveNote")

    def __lt__(self, other):
        assert isinstance(other, OctaveNote), "OctaveNotes can only be greater or less than other OctaveNotes"
        return self.value < other.value

    def __eq__(self, other):
        """OctaveNotes are equal to other OctaveNotes that share their position and octave."""
        if isinstance(other, str):
            try:
                other = OctaveNote(other)
            except ValueError:
                return False
        if isinstance(other, OctaveNote):
            return self.value == other.value
        return False

    def __hash__(self):
        return hash(f'OctaveNote:{self.value}')

    @property
    def name(self):
        return f'{self.chroma}{self.octave}'

    @property
    def note(self):
        """returns the parent class Note object
        associated with this OctaveNote"""
        return Note.from_cache(position=self.position, prefer_sharps=self.prefer_sharps)

    # OctaveNote object unicode identifier:
    _marker = _settings.MARKERS['OctaveNote']


class PlayedNoteSet:
    """the set of unique pitch classes sounding on a fretboard, in order of
    first-sounding string (lowest string first), along with the bass note:
    the pitch class of the lowest-indexed sounding string.

    can be initialised directly from a list of notes, e.g.
        PlayedNoteSet(['C', 'E', 'G'], bass='E')
    or from a set of frets under some tuning, e.g.
        PlayedNoteSet.from_frets('x32010', 'standard')"""
    def __init__(self, notes, bass=None):
        if isinstance(notes, str):
            notes = parsing.parse_out_note_names(notes)
        cast_notes = [Note.from_cache(n) if not isinstance(n, OctaveNote) else n.note for n in notes]
        self.notes = tuple(unique_in_order(cast_notes))

        if bass is not None:
            bass = bass.note if isinstance(bass, OctaveNote) else Note.from_cache(bass)
        self.bass = bass

    @classmethod
    def from_frets(cls, frets, tuning=None):
        """reads the sounding notes off a fret list (one entry per string, low to high,
        None for muted strings) under some tuning.
        strings whose tuning is undetermined are treated as muted."""
        from .tuning import get_tuning # lazy import
        tuning = get_tuning(tuning)
        frets = parsing.parse_out_frets(frets)
        notes = []
        for string_idx, fret in enumerate(frets):
            if fret is None:
                continue
            pc = tuning.pitch_class_at(string_idx, fret)
            if pc is None:
                log(f'String {string_idx} has an undetermined tuning, treating as muted')
                continue
            notes.append(Note.from_cache(position=pc))
        bass = notes[0] if len(notes) > 0 else None
        return cls(notes, bass=bass)

    @property
    def pitch_classes(self):
        return tuple([n.position for n in self.notes])

    @property
    def names(self):
        """note names, spelled by global sharp preference"""
        return [parsing.preferred_name(n.position) for n in self.notes]

    @property
    def bass_pc(self):
        return self.bass.position if self.bass is not None else None

    def __len__(self):
        return len(self.notes)

    def __iter__(self):
        return iter(self.notes)

    def __contains__(self, item):
        return Note.from_cache(item) in self.notes

    def __eq__(self, other):
        if isinstance(other, PlayedNoteSet):
            return (self.pitch_classes == other.pitch_classes) and (self.bass_pc == other.bass_pc)
        return False

    def __hash__(self):
        return hash((self.pitch_classes, self.bass_pc))

    def __str__(self):
        lb, rb = self._brackets
        bass_str = f' / {self.bass.name}' if self.bass is not None else ''
        return f'{lb}{", ".join(self.names)}{bass_str}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['NoteSet']


def cast_pitch_class(note):
    """accepts a note name, Note, OctaveNote or integer and returns its pitch class (0-11)"""
    if isinstance(note, Note):
        return note.position
    elif isinstance(note, int) and not isinstance(note, bool):
        return note % 12
    elif isinstance(note, str):
        return Note.from_cache(note).position
    raise TypeError(f'Cannot cast {type(note)} to a pitch class')


# note cache by name for efficient init:
cached_notes = {(n,s): Note(n, prefer_sharps=s) for n in parsing.valid_note_names for s in [None, False, True]}
cached_notes.update({(p,s) : Note(position=p, prefer_sharps=s) for p in range(12) for s in [None, False, True]})
