### matching functions: rank the chords and scales that a set of played notes could belong to.
### chord suggestions come with a classification of the shape being played
### (triad, shell, full, partial), and scale suggestions tolerate one passing tone.

from dataclasses import dataclass

import numpy as np

from .notes import Note, PlayedNoteSet
from .qualities import ChordQuality, VoicingType, ScaleType, core_qualities
from .intervals import label_offset, offset_label, parse_degree_string
from .config.def_chords import triad_qualities, shell_patterns
from .chords import chord_name
from .util import log, stable_ranking
from . import parsing, _settings


@dataclass(frozen=True)
class ChordSuggestion:
    root: str
    quality: ChordQuality
    voicing_type: VoicingType
    score: int
    present_intervals: tuple    # degree labels of the chord's tones that are being played
    missing_intervals: tuple    # degree labels of the chord's tones that are not
    bass_note: str = None
    is_inversion: bool = False  # bass note is not the root
    display_name: str = ''
    extra_intervals: tuple = () # degree labels of played notes outside the chord (at most one)

    def __str__(self):
        return f'{self.display_name} ({self.voicing_type}, {self.score})'


@dataclass(frozen=True)
class VoicingAnalysis:
    pitch_classes: tuple        # played note names
    bass_note: str
    voicing_type: VoicingType   # of the best suggestion, or None
    suggestions: tuple


@dataclass(frozen=True)
class ScaleSuggestion:
    root: str
    type: ScaleType
    display: str                # e.g. 'A Minor Pentatonic'
    score: int
    coverage: int               # percentage of the scale's notes being played
    matched_notes: tuple
    extra_notes: tuple          # played notes outside the scale (at most one)

    def __str__(self):
        return f'{self.display} ({self.coverage}%, {self.score})'


def _cast_played(notes, bass):
    """accepts a PlayedNoteSet or a list of notes, and returns a PlayedNoteSet with its bass"""
    if not isinstance(notes, PlayedNoteSet):
        notes = PlayedNoteSet(notes, bass=bass)
    elif bass is not None:
        notes = PlayedNoteSet(notes.notes, bass=bass)
    return notes


#### voicing classification:

# the shape recognised for a chord's tones depends on which of them are played:
shell_types = {ChordQuality.MAJOR7: VoicingType.SHELL_MAJOR,
               ChordQuality.MINOR7: VoicingType.SHELL_MINOR,
               ChordQuality.DOMINANT7: VoicingType.SHELL_DOMINANT}
assert set(shell_types) == set(shell_patterns)

shell_offsets = {q: set([label_offset(iv) for iv in parse_degree_string(degrees)]) for q, degrees in shell_patterns.items()}

# how specific each voicing type is, for choosing the best classification of a shape:
type_specificity = [VoicingType.TRIAD, VoicingType.SHELL_MAJOR, VoicingType.SHELL_MINOR,
                    VoicingType.SHELL_DOMINANT, VoicingType.FULL,
                    VoicingType.PARTIAL, VoicingType.UNKNOWN]
assert set(type_specificity) == set(VoicingType)

def _voicing_type(played_offsets, quality):
    """classifies a set of semitone offsets from a candidate root
    against one chord quality"""
    quality_offsets = set(quality.offsets)
    if len(played_offsets - quality_offsets) > 0:
        # something is being played that isn't in the chord
        return VoicingType.UNKNOWN
    if 0 not in played_offsets:
        # rootless shapes are always partial
        return VoicingType.PARTIAL
    if played_offsets == quality_offsets:
        if quality in triad_qualities:
            return VoicingType.TRIAD
        # sevenths and the complete sus/power shapes
        return VoicingType.FULL
    if quality in shell_offsets and played_offsets == shell_offsets[quality]:
        return shell_types[quality]
    return VoicingType.PARTIAL

def classify_voicing(pitch_classes, root, qualities=None):
    """the most specific voicing type that some pitch classes form above a root,
    across all core chord qualities"""
    root_pc = root.position if isinstance(root, Note) else Note.from_cache(root).position
    pcs = [Note.from_cache(pc).position for pc in pitch_classes]
    if len(pcs) < _settings.MIN_NOTES:
        return VoicingType.UNKNOWN
    played_offsets = set([(pc - root_pc) % 12 for pc in pcs])
    if qualities is None:
        qualities = core_qualities
    types = [_voicing_type(played_offsets, q) for q in qualities]
    return sorted(types, key=lambda t: type_specificity.index(t))[0]


#### chord suggestions:

def _quality_labels(quality):
    """maps each of a quality's semitone offsets to its own degree label"""
    return {label_offset(iv): iv for iv in quality.intervals}

def score_chord(matched, unmatched, missing, bass_root, root_played, weights=None):
    """scores a candidate chord by its tone coverage, with a bonus for a root in the bass
    and penalties for missing tones, a missing root, and tones outside the chord"""
    w = _settings.merge_weights(_settings.CHORD_SCORE_WEIGHTS, weights)
    score = w['base'] + (w['per_tone'] * matched)
    if bass_root:
        score += w['bass_root']
    if missing > 0:
        score -= w['missing']
    if not root_played:
        score -= w['rootless']
    score -= w['unmatched'] * unmatched
    return score

def matching_chords(notes, bass=None, qualities=None, weights=None,
                    max_results=_settings.MAX_SUGGESTIONS, prefer_sharps=None, display=False):
    """ranks every (root, quality) combination against some played notes.

    a candidate needs at least two of its tones played, and at most one played note outside it.
    suggestions are sorted by score, with ties broken by the complexity of the quality
    and then by root. returns an empty list for fewer than two distinct notes.
    if display, also prints the suggestions as a table."""
    notes = _cast_played(notes, bass)
    pcs = notes.pitch_classes
    if len(pcs) < _settings.MIN_NOTES:
        return []
    if qualities is None:
        qualities = core_qualities
    bass_pc = notes.bass_pc
    bass_name = parsing.preferred_name(bass_pc, prefer_sharps) if bass_pc is not None else None

    suggestions = []
    for root_pc in range(12):
        played_offsets = [(pc - root_pc) % 12 for pc in pcs]
        root_played = 0 in played_offsets
        for quality in qualities:
            labels = _quality_labels(quality)
            matched = [o for o in played_offsets if o in labels]
            unmatched = [o for o in played_offsets if o not in labels]
            if len(matched) < 2 or len(unmatched) > 1:
                continue
            missing = [iv for iv in quality.intervals if label_offset(iv) not in played_offsets]
            score = score_chord(len(matched), len(unmatched), len(missing),
                                bass_root=(bass_pc == root_pc), root_played=root_played, weights=weights)
            root_name = parsing.preferred_name(root_pc, prefer_sharps)
            suggestions.append(ChordSuggestion(
                root = root_name,
                quality = quality,
                voicing_type = _voicing_type(set(played_offsets), quality),
                score = int(score),
                present_intervals = tuple([iv for iv in quality.intervals if label_offset(iv) in matched]),
                missing_intervals = tuple(missing),
                bass_note = bass_name,
                is_inversion = (bass_pc is not None and bass_pc != root_pc),
                display_name = chord_name(root_pc, quality, prefer_sharps=prefer_sharps),
                extra_intervals = tuple([offset_label(o) for o in unmatched]),
                ))

    ranked = stable_ranking(suggestions, score_key=lambda s: s.score,
                            tiebreak_key=lambda s: (s.quality.complexity, parsing.note_positions[s.root]),
                            max_results=max_results)
    log(f'{len(suggestions)} chord candidates for {notes}, keeping {len(ranked)}')

    if display:
        from .display import suggestion_table # lazy import
        print(f'Chord matches for notes: {notes}')
        suggestion_table(ranked)
    return ranked

def analyse_voicing(notes, bass=None, qualities=None, weights=None,
                    max_results=_settings.MAX_SUGGESTIONS, prefer_sharps=None):
    """classifies the shape being played and ranks the chords it could belong to.
    the overall voicing type is that of the best suggestion, or failing that,
    the shape's classification with its bass note as root.
    fewer than two distinct notes give no suggestions and no voicing type."""
    notes = _cast_played(notes, bass)
    names = tuple(notes.names)
    bass_name = parsing.preferred_name(notes.bass_pc, prefer_sharps) if notes.bass is not None else None
    if len(notes) < _settings.MIN_NOTES:
        return VoicingAnalysis(pitch_classes=names, bass_note=bass_name, voicing_type=None, suggestions=())

    suggestions = matching_chords(notes, qualities=qualities, weights=weights,
                                  max_results=max_results, prefer_sharps=prefer_sharps)
    if len(suggestions) > 0:
        voicing_type = suggestions[0].voicing_type
    elif notes.bass is not None:
        voicing_type = classify_voicing(notes.pitch_classes, notes.bass, qualities=qualities)
    else:
        voicing_type = VoicingType.UNKNOWN
    return VoicingAnalysis(pitch_classes=names, bass_note=bass_name,
                           voicing_type=voicing_type, suggestions=tuple(suggestions))


#### scale suggestions:

scale_types = list(ScaleType)
# membership grid of every candidate scale: one row per (root, scale type),
# with roots in order C to B, and a 1 in each column whose pitch class is in the scale
scale_candidates = [(root_pc, st) for root_pc in range(12) for st in scale_types]
scale_grid = np.zeros((len(scale_candidates), 12), dtype=int)
for i, (root_pc, st) in enumerate(scale_candidates):
    for offset in st.offsets:
        scale_grid[i, (root_pc + offset) % 12] = 1
scale_sizes = scale_grid.sum(axis=1)

def matching_scales(notes, bass=None, weights=None,
                    max_results=_settings.MAX_SUGGESTIONS, prefer_sharps=None, display=False):
    """ranks every (root, scale type) combination against some played notes,
    tolerating at most one passing tone outside the scale.
    returns an empty list for fewer than two distinct notes."""
    notes = _cast_played(notes, bass)
    pcs = list(notes.pitch_classes)
    if len(pcs) < _settings.MIN_NOTES:
        return []
    w = _settings.merge_weights(_settings.SCALE_SCORE_WEIGHTS, weights)
    bass_pc = notes.bass_pc

    # how many played notes fall inside each candidate scale:
    membership = scale_grid[:, pcs]
    matched_counts = membership.sum(axis=1)
    extra_counts = len(pcs) - matched_counts
    coverages = matched_counts / scale_sizes * 100

    scores = np.where(extra_counts == 0, w['base'], w['chromatic_base'])
    scores = scores - (w['per_extra'] * extra_counts) + (w['per_match'] * matched_counts)
    roots = np.array([root_pc for root_pc, st in scale_candidates])
    if bass_pc is not None:
        scores = scores + np.where(roots == bass_pc, w['bass_root'], 0)
    pentatonic = np.array([st.is_pentatonic for root_pc, st in scale_candidates])
    scores = scores + np.where(pentatonic & (coverages >= w['pentatonic_coverage']), w['pentatonic'], 0)

    valid = (matched_counts >= 2) & (extra_counts <= 1)

    suggestions = []
    for i in np.flatnonzero(valid):
        root_pc, st = scale_candidates[i]
        root_name = parsing.preferred_name(root_pc, prefer_sharps)
        suggestions.append(ScaleSuggestion(
            root = root_name,
            type = st,
            display = f'{root_name} {st.display_name}',
            score = int(scores[i]),
            coverage = int(round(matched_counts[i] / scale_sizes[i] * 100)),
            matched_notes = tuple([parsing.preferred_name(pc, prefer_sharps) for pc, m in zip(pcs, membership[i]) if m]),
            extra_notes = tuple([parsing.preferred_name(pc, prefer_sharps) for pc, m in zip(pcs, membership[i]) if not m]),
            ))

    ranked = stable_ranking(suggestions, score_key=lambda s: s.score, max_results=max_results)
    log(f'{len(suggestions)} scale candidates for {notes}, keeping {len(ranked)}')

    if display:
        from .display import scale_table # lazy import
        print(f'Scale matches for notes: {notes}')
        scale_table(ranked)
    return ranked

def format_matched_notes(suggestion):
    """display text for the played notes inside a suggested scale"""
    if len(suggestion.matched_notes) == 0:
        return ''
    return ', '.join(suggestion.matched_notes)

def format_extra_notes(suggestion):
    """display text for the passing tone outside a suggested scale, if there is one"""
    if len(suggestion.extra_notes) == 0:
        return ''
    return f'Passing: {", ".join(suggestion.extra_notes)}'
