### chord naming and identification: from a set of sounding notes, find the chord
### in the catalog of qualities that they spell, and name it (as a slash chord
### if something other than its root is in the bass).

from dataclasses import dataclass

from .notes import Note, PlayedNoteSet
from .qualities import ChordQuality
from .util import log
from .intervals import label_offset
from . import parsing, _settings


@dataclass(frozen=True)
class IdentifiedChord:
    name: str                   # e.g. 'Am7' or 'C/E', or 'C-D-F#' if nothing matched
    alternatives: tuple         # up to three other names for the same notes
    bass_note: str              # pitch class name of the lowest sounding note, or None
    is_slash_chord: bool        # True when the bass is not the chord's root
    pitch_classes: tuple        # the identified pitch classes, in played order
    root: str = None            # None if no catalog chord matched
    quality: ChordQuality = None

    def __str__(self):
        alts = f' (or: {", ".join(self.alternatives)})' if len(self.alternatives) > 0 else ''
        return f'{self.name}{alts}'


#### naming:

def chord_name(root, quality, bass=None, prefer_sharps=None):
    """the name of a chord from its root and quality, e.g. ('A', MINOR7) -> 'Am7',
    as a slash chord if a bass note other than the root is given, e.g. 'C/E'"""
    root = Note.from_cache(root)
    quality = ChordQuality.cast(quality)
    name = f'{parsing.preferred_name(root.position, prefer_sharps)}{quality.symbol}'
    if bass is not None:
        bass = Note.from_cache(bass)
        if bass.position != root.position:
            name = f'{name}/{parsing.preferred_name(bass.position, prefer_sharps)}'
    return name

def chord_tones(root, quality, prefer_sharps=None):
    """the note names of a chord, in the order of its intervals, e.g. ('C', 'Major') -> ['C', 'E', 'G']"""
    root = Note.from_cache(root)
    quality = ChordQuality.cast(quality)
    return [parsing.preferred_name(root.position + offset, prefer_sharps) for offset in quality.offsets]

# chord symbols to qualities, matched case-sensitively before anything else:
symbol_qualities = {q.symbol: q for q in ChordQuality}

def parse_chord_name(name):
    """splits a chord name like 'C#m7/E' into its root name, ChordQuality, and bass
    name (or None if not a slash chord): ('C#', ChordQuality.MINOR7, 'E').
    raises ValueError for names that aren't recognised."""
    if not isinstance(name, str):
        raise TypeError(f'Expected chord name as str, but got: {type(name)}')
    bass = None
    if '/' in name:
        name, bass = name.rsplit('/', 1)
        bass = bass.strip()
        if not parsing.is_valid_note_name(bass):
            raise ValueError(f'Invalid bass note in chord name: {bass!r}')
    split = parsing.note_split(name.strip(), graceful_fail=True)
    if split is False:
        raise ValueError(f'Chord name does not begin with a note: {name!r}')
    root, suffix = split
    if suffix in symbol_qualities:
        quality = symbol_qualities[suffix]
    else:
        try:
            quality = ChordQuality.cast(suffix)
        except ValueError:
            raise ValueError(f'Unknown chord quality {suffix!r} in chord name: {name!r}')
    return root, quality, bass


#### identification:

def match_quality(played_offsets, quality):
    """checks a set of semitone offsets from a candidate root against a quality's tones.
    returns 'exact' if they match exactly, 'omitted' if they match with only an optional
    fifth left out (and at least three tones still sounding), or None otherwise"""
    quality_offsets = set(quality.offsets)
    if played_offsets == quality_offsets:
        return 'exact'
    if played_offsets < quality_offsets and len(played_offsets) >= 3:
        optional = set([label_offset(iv) for iv in quality.optional_intervals])
        if (quality_offsets - played_offsets) <= optional:
            return 'omitted'
    return None

def identify_chord(notes, bass=None, prefer_sharps=None, qualities=None):
    """names the chord spelled by some notes.

    notes can be a PlayedNoteSet (whose bass is used unless one is given here),
    or any list of notes / note names.

    returns an IdentifiedChord, whose name falls back on the played note names
    joined by '-' if no chord in the catalog matches, or None if fewer than
    two distinct notes are given."""
    if not isinstance(notes, PlayedNoteSet):
        notes = PlayedNoteSet(notes, bass=bass)
    if bass is None:
        bass = notes.bass
    else:
        bass = Note.from_cache(bass)

    pcs = notes.pitch_classes
    if len(pcs) < _settings.MIN_NOTES:
        log(f'Only {len(pcs)} distinct notes, not identifying chord')
        return None

    if qualities is None:
        qualities = list(ChordQuality)

    bass_pc = bass.position if bass is not None else None
    bass_name = parsing.preferred_name(bass_pc, prefer_sharps) if bass is not None else None

    candidates = []
    for order, root_pc in enumerate(pcs):
        played_offsets = set([(pc - root_pc) % 12 for pc in pcs])
        for quality in qualities:
            match = match_quality(played_offsets, quality)
            if match is None:
                continue
            # rank: exact matches first, then root in the bass, then simpler qualities, then played order
            rank = (match != 'exact', root_pc != bass_pc, quality.complexity, order)
            candidates.append((rank, root_pc, quality))

    if len(candidates) == 0:
        log(f'No chord matches {notes}, falling back on note names')
        names = [parsing.preferred_name(pc, prefer_sharps) for pc in pcs]
        return IdentifiedChord(name='-'.join(names), alternatives=(), bass_note=bass_name,
                               is_slash_chord=False, pitch_classes=pcs)

    candidates = sorted(candidates, key=lambda x: x[0])
    names = []
    for rank, root_pc, quality in candidates:
        name = chord_name(root_pc, quality, bass=bass, prefer_sharps=prefer_sharps)
        if name not in names:
            names.append(name)

    best_rank, best_root, best_quality = candidates[0]
    log(f'Identified {notes} as {names[0]} from {len(candidates)} candidates')
    return IdentifiedChord(name=names[0],
                           alternatives=tuple(names[1:4]),
                           bass_note=bass_name,
                           is_slash_chord=(bass_pc is not None and bass_pc != best_root),
                           pitch_classes=pcs,
                           root=parsing.preferred_name(best_root, prefer_sharps),
                           quality=best_quality)
