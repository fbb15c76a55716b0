### chord voicings: concrete fret shapes for a chosen chord under any tuning.
### voicings come from one of two sources behind the same interface:
### a curated table of standard-tuning shapes (transposed string-by-string to
### other tunings), or a solver that searches the fretboard for playable shapes.

from dataclasses import dataclass
from itertools import product

from .notes import Note
from .qualities import ChordQuality, VoicingFilter, IntervalFamily
from .intervals import label_offset, interval_family
from .tuning import get_tuning, standard_tuning, transpose_fret
from .config.def_chords import db_root_keys
from .config.def_voicings import chords_db
from .util import log, stable_ranking
from . import parsing, _settings


@dataclass(frozen=True)
class Voicing:
    frets: tuple                # one per string, low to high, None for muted
    lowest_fret: int            # of the sounding strings, open strings included
    highest_fret: int
    note_names: tuple           # sounding notes with octaves, low to high, e.g. ('C3', 'E3', ...)
    bass_note: str              # pitch class of the lowest sounding string
    is_inversion: bool          # bass note is not the chord root

    @property
    def span(self):
        """distance between the lowest and highest fretted (non-open) frets"""
        fretted = [f for f in self.frets if f is not None and f > 0]
        return (max(fretted) - min(fretted)) if len(fretted) > 0 else 0

    @property
    def num_strings(self):
        return len([f for f in self.frets if f is not None])

    @property
    def fret_string(self):
        return parsing.fret_string(self.frets)

    def __str__(self):
        lb, rb = _settings.BRACKETS['Voicing']
        return f'{lb}{self.fret_string}{rb}'

    def __repr__(self):
        return str(self)


def make_voicing(frets, root, tuning=None, prefer_sharps=None):
    """builds a Voicing from a list of absolute frets under some tuning"""
    tuning = get_tuning(tuning)
    root_pc = Note.from_cache(root).position
    frets = tuple(frets)
    played = [f for f in frets if f is not None]
    note_names = []
    bass_pc = None
    for string_idx, fret in enumerate(frets):
        note = tuning.note_at(string_idx, fret, prefer_sharps=prefer_sharps)
        if note is not None:
            note_names.append(note.name)
            if bass_pc is None:
                bass_pc = note.position
    return Voicing(frets = frets,
                   lowest_fret = min(played) if len(played) > 0 else 0,
                   highest_fret = max(played) if len(played) > 0 else 0,
                   note_names = tuple(note_names),
                   bass_note = parsing.preferred_name(bass_pc, prefer_sharps) if bass_pc is not None else None,
                   is_inversion = (bass_pc is not None and bass_pc != root_pc))

def sounding_pitch_classes(frets, tuning):
    return set([tuning.pitch_class_at(i, f) for i, f in enumerate(frets) if f is not None and tuning.is_determined(i)])


#### the chord tones each voicing filter asks for:

def triad_intervals(quality):
    """a quality's root, third (or suspension) and fifth"""
    return ChordQuality.cast(quality).intervals[:3]

def shell_intervals(quality):
    """a quality's root, third and seventh, or None if it lacks either"""
    ivs = ChordQuality.cast(quality).intervals
    families = [interval_family(iv) for iv in ivs]
    if IntervalFamily.THIRD not in families or IntervalFamily.SEVENTH not in families:
        return None
    return [iv for iv, fam in zip(ivs, families) if fam in (IntervalFamily.ROOT, IntervalFamily.THIRD, IntervalFamily.SEVENTH)]

def target_offsets(quality, voicing_filter):
    """the semitone offsets from the root that a voicing may sound, and those it must sound,
    as an (allowed, required) pair of sets. None if the filter has no shape for this quality."""
    quality = ChordQuality.cast(quality)
    voicing_filter = VoicingFilter.cast(voicing_filter)
    all_offsets = set(quality.offsets)
    if voicing_filter is VoicingFilter.ALL:
        optional = set([label_offset(iv) for iv in quality.optional_intervals])
        return all_offsets, all_offsets - optional
    elif voicing_filter is VoicingFilter.FULL:
        return all_offsets, all_offsets
    elif voicing_filter is VoicingFilter.TRIADS:
        triad = set([label_offset(iv) for iv in triad_intervals(quality)])
        return triad, triad
    elif voicing_filter is VoicingFilter.SHELLS:
        shell = shell_intervals(quality)
        if shell is None:
            return None
        shell = set([label_offset(iv) for iv in shell])
        return shell, shell

def fits_target(pitch_classes, root_pc, target):
    """True if some sounding pitch classes lie within a target's allowed tones and cover its required ones"""
    allowed, required = target
    offsets = set([(pc - root_pc) % 12 for pc in pitch_classes])
    return offsets <= allowed and required <= offsets


class VoicingSource:
    """interface of everything that produces chord voicings"""
    name = None

    def voicings(self, root, quality, tuning=None, voicing_filter='all', prefer_sharps=None):
        """returns a list of Voicings of a chord under some tuning, which may be empty"""
        raise NotImplementedError

    def __str__(self):
        return f'{type(self).__name__}'


class DatabaseVoicings(VoicingSource):
    """voicings looked up in a chords-db table of standard-tuning shapes,
    with each fretted string transposed to keep its pitch under other tunings"""
    name = 'database'

    def __init__(self, table=None):
        self.table = table if table is not None else chords_db

    def lookup(self, root, quality):
        """the raw chords-db positions for a chord, or an empty list"""
        root_key = db_root_keys[Note.from_cache(root).position]
        suffix = ChordQuality.cast(quality).db_suffix
        for entry in self.table['chords'].get(root_key, []):
            if entry['suffix'] == suffix:
                return entry['positions']
        return []

    @staticmethod
    def convert_position(position):
        """absolute frets of a chords-db position, whose stored frets are relative to its baseFret"""
        base = position['baseFret']
        return [None if f < 0 else (0 if f == 0 else base + f - 1) for f in position['frets']]

    @staticmethod
    def adapt_to_tuning(frets, tuning):
        """moves every fretted string of a standard-tuning shape by the difference between
        the standard open string and the new one. out-of-range and undetermined strings become muted."""
        return [transpose_fret(fret, standard_tuning.open_values[i], tuning.open_values[i]) for i, fret in enumerate(frets)]

    def voicings(self, root, quality, tuning=None, voicing_filter='all', prefer_sharps=None):
        tuning = get_tuning(tuning)
        root_pc = Note.from_cache(root).position
        target = target_offsets(quality, voicing_filter)
        if target is None:
            return []

        voicings, seen = [], set()
        for position in self.lookup(root, quality):
            frets = self.convert_position(position)
            if tuning != standard_tuning:
                frets = self.adapt_to_tuning(frets, tuning)
            pcs = sounding_pitch_classes(frets, tuning)
            if not fits_target(pcs, root_pc, target):
                # lost a chord tone in retuning, or doesn't suit the filter
                continue
            if tuple(frets) in seen:
                continue
            seen.add(tuple(frets))
            voicings.append(make_voicing(frets, root_pc, tuning, prefer_sharps))

        voicings = sorted(voicings, key=lambda v: v.lowest_fret)
        log(f'{len(voicings)} database voicings for {root} {ChordQuality.cast(quality)} in {tuning}')
        return voicings


class SolverVoicings(VoicingSource):
    """voicings found by searching every window of hand_span frets up to max_fret
    for shapes that sound exactly the chord tones asked for"""
    name = 'solver'

    def __init__(self, max_fret=_settings.FRET_COUNT, hand_span=_settings.HAND_SPAN,
                 limit=_settings.MAX_VOICINGS, weights=None):
        self.max_fret = max_fret
        self.hand_span = hand_span
        self.limit = limit
        self.weights = _settings.merge_weights(_settings.SOLVER_SCORE_WEIGHTS, weights)

    @staticmethod
    def is_playable_shape(frets):
        """rejects shapes with two or more adjacent muted strings between sounding ones"""
        sounding = [i for i, f in enumerate(frets) if f is not None]
        if len(sounding) == 0:
            return False
        consecutive_muted = 0
        for fret in frets[sounding[0]:sounding[-1]+1]:
            if fret is None:
                consecutive_muted += 1
                if consecutive_muted > 1:
                    return False
            else:
                consecutive_muted = 0
        return True

    def string_options(self, tuning, string_idx, allowed_pcs, window_start):
        """the frets a string can play inside a window: muted, open, or any chord tone in the window"""
        if not tuning.is_determined(string_idx):
            return [None]
        lo, hi = max(window_start, 1), min(window_start + self.hand_span, self.max_fret)
        candidates = [0] + list(range(lo, hi+1))
        return [None] + [f for f in candidates if tuning.pitch_class_at(string_idx, f) in allowed_pcs]

    def solve(self, root, quality, tuning=None, voicing_filter='all'):
        """every distinct playable shape for a chord, unranked"""
        tuning = get_tuning(tuning)
        root_pc = Note.from_cache(root).position
        target = target_offsets(quality, voicing_filter)
        if target is None:
            return []
        allowed_pcs = set([(root_pc + o) % 12 for o in target[0]])

        shapes = {}
        for window_start in range(0, self.max_fret - self.hand_span + 2):
            options = [self.string_options(tuning, i, allowed_pcs, window_start) for i in range(len(tuning))]
            for frets in product(*options):
                if len([f for f in frets if f is not None]) < 3:
                    continue
                if frets in shapes:
                    continue
                fretted = [f for f in frets if f is not None and f > 0]
                if len(fretted) > 0 and (max(fretted) - min(fretted)) > self.hand_span:
                    continue
                if not self.is_playable_shape(frets):
                    continue
                if not fits_target(sounding_pitch_classes(frets, tuning), root_pc, target):
                    continue
                shapes[frets] = True
        return list(shapes)

    def score(self, voicing):
        """playability of a voicing: favours open position, open strings, a root in the bass,
        four to six strings, a small stretch and no gaps"""
        w = self.weights
        score = 0
        if voicing.highest_fret <= _settings.OPEN_POSITION_MAX_FRET:
            score += w['open_position']
        score += w['open_string'] * len([f for f in voicing.frets if f == 0])
        score -= w['per_fret'] * voicing.lowest_fret
        if not voicing.is_inversion:
            score += w['root_bass']
        if 4 <= voicing.num_strings <= 6:
            score += w['full_strings']
        elif voicing.num_strings == 3:
            score += w['three_strings']
        score -= w['per_span'] * (voicing.highest_fret - voicing.lowest_fret)
        sounding = [i for i, f in enumerate(voicing.frets) if f is not None]
        if None not in voicing.frets[sounding[0]:sounding[-1]+1]:
            score += w['contiguous']
        return score

    def voicings(self, root, quality, tuning=None, voicing_filter='all', prefer_sharps=None, limit=None):
        tuning = get_tuning(tuning)
        root_pc = Note.from_cache(root).position
        if limit is None:
            limit = self.limit
        shapes = self.solve(root, quality, tuning, voicing_filter)
        voicings = [make_voicing(frets, root_pc, tuning, prefer_sharps) for frets in shapes]
        best = stable_ranking(voicings, score_key=self.score, max_results=limit)
        log(f'Solver found {len(shapes)} shapes for {root} {ChordQuality.cast(quality)} in {tuning}, keeping {len(best)}')
        return sorted(best, key=lambda v: (v.lowest_fret, v.span))


voicing_strategies = {DatabaseVoicings.name: DatabaseVoicings,
                      SolverVoicings.name: SolverVoicings}

def get_voicing_source(strategy):
    """casts a strategy name ('database' or 'solver') or VoicingSource object to a VoicingSource"""
    if isinstance(strategy, VoicingSource):
        return strategy
    if strategy in voicing_strategies:
        return voicing_strategies[strategy]()
    raise ValueError(f'Unknown voicing strategy: {strategy!r}, expected one of {list(voicing_strategies)}')

def get_voicings(root, quality, tuning=None, voicing_filter='all', strategy=None,
                 limit=_settings.MAX_VOICINGS, prefer_sharps=None):
    """voicings of a chord under some tuning, at most 'limit' of them.

    if no strategy is given, triads are always solved for, and everything else
    is looked up in the database first and solved for only if that finds nothing.
    returns an empty list if the chord can't be voiced at all."""
    quality = ChordQuality.cast(quality)
    voicing_filter = VoicingFilter.cast(voicing_filter)
    tuning = get_tuning(tuning)

    if strategy is not None:
        source = get_voicing_source(strategy)
        voicings = source.voicings(root, quality, tuning, voicing_filter, prefer_sharps=prefer_sharps)
    elif voicing_filter is VoicingFilter.TRIADS:
        voicings = SolverVoicings(limit=limit).voicings(root, quality, tuning, voicing_filter, prefer_sharps=prefer_sharps)
    else:
        voicings = DatabaseVoicings().voicings(root, quality, tuning, voicing_filter, prefer_sharps=prefer_sharps)
        if len(voicings) == 0:
            log(f'No database voicings for {root} {quality} ({voicing_filter}), falling back on solver')
            voicings = SolverVoicings(limit=limit).voicings(root, quality, tuning, voicing_filter, prefer_sharps=prefer_sharps)
    return voicings[:limit]

def is_in_database(root, quality, table=None):
    """True if the voicing table has any shapes for a chord"""
    return len(DatabaseVoicings(table).lookup(root, quality)) > 0

def find_matching_voicing(frets, voicings):
    """the voicing sharing the most fretted positions with some frets,
    or None if none share any"""
    frets = parsing.parse_out_frets(frets)
    best, best_shared = None, 0
    for voicing in voicings:
        shared = len([1 for a, b in zip(frets, voicing.frets) if a is not None and a == b])
        if shared > best_shared:
            best, best_shared = voicing, shared
    return best
