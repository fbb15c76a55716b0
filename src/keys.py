### keys: a tonic plus a major or minor scale, used both as a thing to identify
### from played notes, and as a context that chord suggestions can be filtered by.

from dataclasses import dataclass

import numpy as np

from .notes import Note, PlayedNoteSet
from .qualities import ChordQuality, KeyType, core_qualities
from .util import log, stable_ranking
from . import parsing, _settings


# major keys whose signatures are written with flats:
flat_major_tonics = [5, 10, 3, 8, 1, 6] # F, Bb, Eb, Ab, Db, Gb

# shorthand suffixes accepted after a tonic in key names like 'Am':
key_type_suffixes = {'': KeyType.MAJOR, 'M': KeyType.MAJOR, 'maj': KeyType.MAJOR,
                     'm': KeyType.MINOR, 'min': KeyType.MINOR}

# chords built on the fifth degree that every key allows, whether or not they are diatonic,
# since the minor key borrows its dominant from the harmonic minor:
dominant_qualities = [ChordQuality.MAJOR, ChordQuality.DOMINANT7]

# numeral marks for qualities that aren't written with their plain chord symbol:
quality_marks = {ChordQuality.DIMINISHED: parsing.numeral_marks['dim'],
                 ChordQuality.AUGMENTED: parsing.numeral_marks['aug'],
                 ChordQuality.DIMINISHED7: parsing.numeral_marks['dim7'],
                 ChordQuality.HALF_DIMINISHED7: parsing.numeral_marks['hdim7'],
                 ChordQuality.AUGMENTED7: parsing.numeral_marks['aug7']}


def is_minorish(quality):
    """qualities with a minor third are written as lower case numerals"""
    return 'b3' in ChordQuality.cast(quality).intervals


class Key:
    """a key, defined by its tonic and whether it is major or minor.

    can be initialised from a tonic and key type, e.g. Key('A', 'minor'),
    or from a key name, e.g. Key('Am') or Key('A minor') or Key('C').
    notes are spelled with flats for keys whose signatures have flats,
    unless a sharp/flat preference is given (or implied by the tonic's name)."""
    def __init__(self, tonic, key_type=None, prefer_sharps=None):
        if isinstance(tonic, Key):
            prefer_sharps = tonic.prefer_sharps if prefer_sharps is None else prefer_sharps
            tonic, key_type = tonic.tonic, (tonic.type if key_type is None else key_type)

        if isinstance(tonic, str):
            tonic_name, key_type, prefer_sharps = self._parse_name(tonic, key_type, prefer_sharps)
            tonic = Note.from_cache(tonic_name)
        else:
            tonic = Note.from_cache(tonic)

        self.type = KeyType.cast(key_type) if key_type is not None else KeyType.MAJOR
        self.scale_type = self.type.scale_type
        if prefer_sharps is None:
            relative_major = tonic.position if self.type is KeyType.MAJOR else (tonic.position + 3) % 12
            prefer_sharps = relative_major not in flat_major_tonics
        self.prefer_sharps = prefer_sharps
        self.tonic = Note.from_cache(position=tonic.position, prefer_sharps=prefer_sharps)

        self.offsets = tuple(self.scale_type.offsets)
        self.pitch_classes = tuple([(self.tonic.position + o) % 12 for o in self.offsets])

    @staticmethod
    def _parse_name(name, key_type, prefer_sharps):
        """splits a key name like 'F#m' or 'Eb major' into its tonic name, KeyType,
        and the sharp preference implied by the tonic's spelling"""
        tonic_name, suffix = parsing.note_split(name.strip())
        if key_type is None:
            if suffix in key_type_suffixes:
                key_type = key_type_suffixes[suffix]
            else:
                key_type = KeyType.cast(suffix)
        if prefer_sharps is None and len(tonic_name) > 1:
            acc = tonic_name[1:]
            if parsing.is_sharp_ish(acc):
                prefer_sharps = True
            elif parsing.is_flat_ish(acc):
                prefer_sharps = False
        return tonic_name, key_type, prefer_sharps

    #### notes of the key:

    @property
    def notes(self):
        """names of this key's scale notes, starting from the tonic"""
        return [parsing.preferred_name(pc, self.prefer_sharps) for pc in self.pitch_classes]

    def note_name(self, note):
        """spells any pitch class by this key's sharp/flat preference"""
        return parsing.preferred_name(Note.from_cache(note).position, self.prefer_sharps)

    def contains(self, note):
        """True if a note (or pitch class) is diatonic to this key"""
        return Note.from_cache(note).position in self.pitch_classes

    def __contains__(self, note):
        return self.contains(note)

    def degree_of(self, note):
        """the scale degree (1-7) of a diatonic note, or None"""
        pc = Note.from_cache(note).position
        if pc in self.pitch_classes:
            return self.pitch_classes.index(pc) + 1
        return None

    @property
    def dominant(self):
        return Note.from_cache(position=self.tonic.position + 7, prefer_sharps=self.prefer_sharps)

    #### chords in the key:

    def allows(self, root, quality):
        """True if a chord fits in this key: its root and all of its tones are diatonic,
        or it is the major/dominant 7th chord on the fifth degree"""
        root_pc = Note.from_cache(root).position
        quality = ChordQuality.cast(quality)
        if root_pc == self.dominant.position and quality in dominant_qualities:
            return True
        if root_pc not in self.pitch_classes:
            return False
        return all([((root_pc + o) % 12) in self.pitch_classes for o in quality.offsets])

    def diatonic_chords(self, qualities=None):
        """every (root name, quality) pair this key allows, by degree and then by quality"""
        if qualities is None:
            qualities = core_qualities
        chords = []
        for pc in self.pitch_classes:
            for quality in qualities:
                if self.allows(pc, quality):
                    chords.append((self.note_name(pc), ChordQuality.cast(quality)))
        return chords

    def filter_suggestions(self, suggestions):
        """keeps only the chord suggestions whose chords this key allows"""
        return [s for s in suggestions if self.allows(s.root, s.quality)]

    def roman_numeral(self, root, quality):
        """the numeral of a chord in this key, e.g. in C major:
            ('G', '7') -> 'V7', ('A', 'm') -> 'vi', ('B', 'dim') -> 'vii°', ('Bb', '') -> 'bVII'"""
        root_pc = Note.from_cache(root).position
        quality = ChordQuality.cast(quality)
        offset = (root_pc - self.tonic.position) % 12

        if offset in self.offsets:
            prefix, degree = '', self.offsets.index(offset) + 1
        elif ((offset + 1) % 12) in self.offsets:
            # a flattened degree, like the bVII of a major key
            prefix, degree = parsing.fl, self.offsets.index((offset + 1) % 12) + 1
        else:
            prefix, degree = parsing.sh, self.offsets.index((offset - 1) % 12) + 1

        numeral = parsing.numerals_roman[degree]
        minorish = is_minorish(quality)
        if minorish:
            numeral = numeral.lower()

        if quality in quality_marks:
            suffix = quality_marks[quality]
        elif minorish and quality.symbol.startswith('m'):
            suffix = quality.symbol[1:]
        else:
            suffix = quality.symbol
        return f'{prefix}{numeral}{suffix}'

    #### magic methods:

    @property
    def name(self):
        """display name, e.g. 'C Major' or 'A Minor'"""
        return f'{self.tonic.name} {self.type.display_name}'

    def __eq__(self, other):
        if isinstance(other, Key):
            return (self.tonic.position == other.tonic.position) and (self.type is other.type)
        return False

    def __hash__(self):
        return hash((self.tonic.position, self.type))

    def __str__(self):
        return f'𝄞{self.name}'

    def __repr__(self):
        return str(self)


@dataclass(frozen=True)
class KeySuggestion:
    root: str
    type: KeyType
    display: str                # e.g. 'C Major'
    score: int
    reason: str                 # the strongest signal for this key

    @property
    def key(self):
        return Key(self.root, self.type)

    def __str__(self):
        return f'{self.display} ({self.score}: {self.reason})'


#### key identification:

key_types = list(KeyType)
# membership grid of every candidate key: one row per (root, key type),
# with roots in order C to B, and a 1 in each column whose pitch class is diatonic
key_candidates = [(root_pc, kt) for root_pc in range(12) for kt in key_types]
key_grid = np.zeros((len(key_candidates), 12), dtype=int)
for i, (root_pc, kt) in enumerate(key_candidates):
    for offset in kt.scale_type.offsets:
        key_grid[i, (root_pc + offset) % 12] = 1

def matching_keys(notes, bass=None, chord_root=None, weights=None,
                  max_results=_settings.MAX_SUGGESTIONS, prefer_sharps=None, display=False):
    """ranks the keys that every played note is diatonic to.

    a key scores higher when its tonic is the bass note, or the root of the
    chord being played (if one is given as chord_root), and a little higher still
    when that chord root is at least diatonic to it.
    returns an empty list for fewer than two distinct notes."""
    if not isinstance(notes, PlayedNoteSet):
        notes = PlayedNoteSet(notes, bass=bass)
    elif bass is not None:
        notes = PlayedNoteSet(notes.notes, bass=bass)
    pcs = list(notes.pitch_classes)
    if len(pcs) < _settings.MIN_NOTES:
        return []
    w = _settings.merge_weights(_settings.KEY_SCORE_WEIGHTS, weights)
    bass_pc = notes.bass_pc
    chord_root_pc = Note.from_cache(chord_root).position if chord_root is not None else None

    # keys that contain every played note:
    diatonic = key_grid[:, pcs].sum(axis=1) == len(pcs)

    suggestions = []
    for i in np.flatnonzero(diatonic):
        root_pc, kt = key_candidates[i]
        root_name = parsing.preferred_name(root_pc, prefer_sharps)
        score = w['base'] + (w['per_note'] * len(pcs))
        reason = 'All notes diatonic'
        if chord_root_pc is not None:
            if chord_root_pc == root_pc:
                score += w['chord_root_tonic']
                reason = f'{root_name} is the chord root'
            elif key_grid[i, chord_root_pc]:
                score += w['chord_root_in_key']
        if bass_pc is not None and bass_pc == root_pc:
            score += w['bass_tonic']
            reason = f'{root_name} is the bass note'
        suggestions.append(KeySuggestion(root = root_name,
                                         type = kt,
                                         display = f'{root_name} {kt.display_name}',
                                         score = int(score),
                                         reason = reason))

    ranked = stable_ranking(suggestions, score_key=lambda s: s.score, max_results=max_results)
    log(f'{len(suggestions)} keys contain all of {notes}, keeping {len(ranked)}')

    if display:
        from .display import key_table # lazy import
        print(f'Key matches for notes: {notes}')
        key_table(ranked)
    return ranked
