### scale positions: the fingering patterns that a scale is practised in.
### seven-note scales are laid out three notes per string, pentatonic scales in
### two-notes-per-string boxes, and the blues scale as pentatonic boxes with the
### blue note added wherever it fits inside the box.

from dataclasses import dataclass

from .notes import Note
from .qualities import ScaleType
from .intervals import label_offset, interval_color
from .tuning import get_tuning
from .config.def_scales import blue_note
from .util import log, rotate_list
from . import parsing, _settings


@dataclass(frozen=True)
class HighlightedNote:
    string_index: int
    fret: int
    note: str           # pitch class name
    interval: str       # degree label from the scale root, e.g. 'R' or 'b3'
    is_root: bool
    color: str          # from the interval's family

    def __str__(self):
        return f'{self.note}({self.interval})@{self.string_index}:{self.fret}'


@dataclass(frozen=True)
class ScalePosition:
    number: int         # 1-based, or 0 for the whole fretboard
    start_fret: int
    end_fret: int
    notes: tuple        # HighlightedNotes ordered by string, then fret

    def strings(self):
        """the frets of this position's notes on each string, as a dict keyed by string index"""
        frets = {}
        for n in self.notes:
            frets.setdefault(n.string_index, []).append(n.fret)
        return frets

    def __str__(self):
        lb, rb = _settings.BRACKETS['Position']
        return f'{lb}Position {self.number}: frets {self.start_fret}-{self.end_fret}, {len(self.notes)} notes{rb}'

    def __repr__(self):
        return str(self)


position_modes = ['positions', 'full']
playback_directions = ['ascending', 'descending']


def _scale_labels(scale_type):
    """maps each semitone offset of a scale to its degree label"""
    scale_type = ScaleType.cast(scale_type)
    return {label_offset(iv): iv for iv in scale_type.intervals}

def highlight(string_idx, fret, root_pc, tuning, labels, prefer_sharps=None):
    """a HighlightedNote for a fret, labelled by its degree above root_pc"""
    pc = tuning.pitch_class_at(string_idx, fret)
    label = labels[(pc - root_pc) % 12]
    return HighlightedNote(string_index = string_idx,
                           fret = fret,
                           note = parsing.preferred_name(pc, prefer_sharps),
                           interval = label,
                           is_root = (pc == root_pc),
                           color = interval_color(label))

def _make_position(number, notes):
    notes = sorted(notes, key=lambda n: (n.string_index, n.fret))
    frets = [n.fret for n in notes]
    return ScalePosition(number = number,
                         start_fret = min(frets) if len(frets) > 0 else 0,
                         end_fret = max(frets) if len(frets) > 0 else 0,
                         notes = tuple(notes))

def _determined_strings(tuning):
    return [i for i in range(len(tuning)) if tuning.is_determined(i)]

def scale_notes(root, scale_type, tuning=None, max_fret=_settings.FRET_COUNT, min_fret=0, prefer_sharps=None):
    """every occurrence of a scale's notes on the fretboard between min_fret and max_fret,
    ordered by string and then by fret. undetermined strings have no notes."""
    tuning = get_tuning(tuning)
    root_pc = Note.from_cache(root).position
    labels = _scale_labels(scale_type)
    notes = []
    for string_idx in _determined_strings(tuning):
        for fret in range(min_fret, max_fret+1):
            if (tuning.pitch_class_at(string_idx, fret) - root_pc) % 12 in labels:
                notes.append(highlight(string_idx, fret, root_pc, tuning, labels, prefer_sharps))
    return notes

def _lowest_fret(tuning, string_idx, pc, min_fret=0):
    """first fret at or above min_fret on a string that sounds some pitch class"""
    return tuning.frets_of(string_idx, pc, max_fret=min_fret+11, min_fret=min_fret)[0]


#### three-notes-per-string positions:

def anchor_degree(root_pc, offsets, tuning, anchor_string):
    """chooses the scale degree (as an index into offsets) that position 1 starts on,
    and the fret it starts at on the anchor string.

    every degree is placed at its lowest fret on the anchor string, and the one closest
    to the practical fret band wins, with the root preferred when it is in or near the band."""
    band_lo, band_hi = _settings.PRACTICAL_FRET_BAND
    best = None
    for idx, offset in enumerate(offsets):
        fret = _lowest_fret(tuning, anchor_string, (root_pc + offset) % 12)
        if band_lo <= fret <= band_hi:
            distance = 0
        else:
            distance = min(abs(fret - band_lo), abs(fret - band_hi))
        if offset == 0 and distance <= 1:
            # the root gets a bonus in or next to the band
            distance -= 1.5
        if best is None or distance < best[0]:
            best = (distance, idx, fret)
    log(f'3NPS anchor: degree {best[1]+1} at fret {best[2]}')
    return best[1], best[2]

def three_note_positions(root, scale_type, tuning=None, prefer_sharps=None):
    """the seven three-notes-per-string positions of a seven-note scale.

    each position walks up the scale from its starting degree, taking the next
    three scale tones on each string in turn, so that each string picks up where
    the last one left off. notes that would fall beyond the last fret are dropped."""
    tuning = get_tuning(tuning)
    scale_type = ScaleType.cast(scale_type)
    root_pc = Note.from_cache(root).position
    labels = _scale_labels(scale_type)
    offsets = scale_type.offsets
    strings = _determined_strings(tuning)
    if len(strings) == 0:
        return []
    anchor_string = strings[0]

    first_idx, first_fret = anchor_degree(root_pc, offsets, tuning, anchor_string)
    degree_order = rotate_list(list(range(len(offsets))), first_idx)

    positions = []
    for num, deg_idx in enumerate(degree_order):
        deg_pc = (root_pc + offsets[deg_idx]) % 12
        if num == 0:
            start_fret = first_fret
        else:
            start_fret = _lowest_fret(tuning, anchor_string, deg_pc, min_fret=first_fret)
        pitch = tuning.pitch_at(anchor_string, start_fret)

        notes = []
        for string_idx in strings:
            open_pitch = tuning.pitch_at(string_idx, 0)
            for n in range(3):
                if n > 0 or string_idx != anchor_string:
                    pitch = _next_scale_pitch(pitch, root_pc, labels)
                fret = pitch - open_pitch
                if 0 <= fret <= _settings.MAX_FRET:
                    notes.append(highlight(string_idx, fret, root_pc, tuning, labels, prefer_sharps))
        positions.append(_make_position(num+1, notes))
    return positions

def _next_scale_pitch(pitch, root_pc, labels):
    """the next absolute pitch above some pitch that belongs to a scale"""
    pitch += 1
    while (pitch - root_pc) % 12 not in labels:
        pitch += 1
    return pitch


#### pentatonic boxes:

def box_positions(root, scale_type, tuning=None, prefer_sharps=None):
    """the five two-notes-per-string boxes of a pentatonic scale.
    box n starts on degree n, anchored at its first occurrence on the lowest string
    (at or above the root's), and every string contributes the two scale tones at
    or just above that anchor fret."""
    tuning = get_tuning(tuning)
    scale_type = ScaleType.cast(scale_type)
    root_pc = Note.from_cache(root).position
    labels = _scale_labels(scale_type)
    offsets = scale_type.offsets
    strings = _determined_strings(tuning)
    if len(strings) == 0:
        return []
    anchor_string = strings[0]

    root_fret = _lowest_fret(tuning, anchor_string, root_pc)
    positions = []
    for num, offset in enumerate(offsets):
        anchor_fret = _lowest_fret(tuning, anchor_string, (root_pc + offset) % 12, min_fret=root_fret)
        notes = []
        for string_idx in strings:
            frets = [f for f in range(anchor_fret, _settings.MAX_FRET+1)
                     if (tuning.pitch_class_at(string_idx, f) - root_pc) % 12 in labels]
            notes.extend([highlight(string_idx, f, root_pc, tuning, labels, prefer_sharps) for f in frets[:2]])
        positions.append(_make_position(num+1, notes))
    return positions

def blues_positions(root, tuning=None, prefer_sharps=None):
    """the minor pentatonic boxes, each with the blue note added wherever it falls
    strictly inside the box's fret span, at most once per pitch"""
    tuning = get_tuning(tuning)
    root_pc = Note.from_cache(root).position
    labels = _scale_labels(ScaleType.BLUES)
    blue_pc = (root_pc + label_offset(blue_note)) % 12

    positions = []
    for box in box_positions(root, ScaleType.MINOR_PENTATONIC, tuning, prefer_sharps):
        pitches = set([tuning.pitch_at(n.string_index, n.fret) for n in box.notes])
        notes = list(box.notes)
        for string_idx in _determined_strings(tuning):
            for fret in range(box.start_fret+1, box.end_fret):
                pitch = tuning.pitch_at(string_idx, fret)
                if pitch % 12 == blue_pc and pitch not in pitches:
                    notes.append(highlight(string_idx, fret, root_pc, tuning, labels, prefer_sharps))
                    pitches.add(pitch)
        positions.append(_make_position(box.number, notes))
    return positions


#### the main interface:

def scale_positions(root, scale_type, tuning=None, mode='positions', max_fret=_settings.FRET_COUNT, prefer_sharps=None):
    """the fingering positions of a scale under some tuning.

    in 'positions' mode, seven-note scales give 7 three-notes-per-string positions,
    pentatonic scales give 5 boxes, and the blues scale gives 5 boxes plus blue notes.
    in 'full' mode, a single position numbered 0 holds every scale tone up to max_fret."""
    scale_type = ScaleType.cast(scale_type)
    if mode not in position_modes:
        raise ValueError(f'Unknown position mode: {mode!r}, expected one of {position_modes}')
    tuning = get_tuning(tuning)

    if mode == 'full':
        notes = scale_notes(root, scale_type, tuning, max_fret=max_fret, prefer_sharps=prefer_sharps)
        return [ScalePosition(number=0, start_fret=0, end_fret=max_fret, notes=tuple(notes))]
    elif scale_type is ScaleType.BLUES:
        return blues_positions(root, tuning, prefer_sharps)
    elif scale_type.size == 5:
        return box_positions(root, scale_type, tuning, prefer_sharps)
    else:
        return three_note_positions(root, scale_type, tuning, prefer_sharps)

def position_notes(root, scale_type, tuning=None, number=0, prefer_sharps=None):
    """the notes of one numbered position, or of the whole fretboard for number 0.
    an empty list if there is no such position."""
    if number == 0:
        return scale_notes(root, scale_type, tuning, prefer_sharps=prefer_sharps)
    for position in scale_positions(root, scale_type, tuning, prefer_sharps=prefer_sharps):
        if position.number == number:
            return list(position.notes)
    return []

def playback_notes(notes, tuning=None, direction='ascending'):
    """the distinct pitches of some HighlightedNotes as OctaveNote names,
    sorted low to high (or high to low if direction is 'descending')"""
    if direction not in playback_directions:
        raise ValueError(f'Unknown playback direction: {direction!r}, expected one of {playback_directions}')
    tuning = get_tuning(tuning)
    pitches = {}
    for n in notes:
        pitch = tuning.pitch_at(n.string_index, n.fret)
        if pitch is not None and pitch not in pitches:
            pitches[pitch] = tuning.note_at(n.string_index, n.fret).name
    ordered = sorted(pitches, reverse=(direction == 'descending'))
    return [pitches[p] for p in ordered]
