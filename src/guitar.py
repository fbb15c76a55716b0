### the guitar: a tuning, and everything that can be asked of a set of frets under it.
### Guitar objects are thin wrappers around the module-level engine functions,
### while a FretboardRequest bundles frets, tuning and filters into one immutable query.

from dataclasses import dataclass, replace

from .notes import Note, PlayedNoteSet
from .qualities import ChordQuality, ScaleType, VoicingFilter
from .tuning import get_tuning, adapt_frets
from .chords import identify_chord
from .matching import matching_chords, analyse_voicing, matching_scales
from .keys import Key, matching_keys
from .voicings import get_voicings, find_matching_voicing
from .positions import scale_positions, scale_notes
from .display import Fretboard, fret_diagram, voicing_diagram, position_diagram, voicing_table
from .util import log
from . import parsing, _settings


class Guitar:
    """a six-string guitar in some tuning, which can be played by passing it frets:
        g = Guitar('Drop D')
        g['000232'] -> the notes sounding on those frets
        g('000232') -> prints the notes, the chord they make, and a fret diagram

    tuning can be anything get_tuning accepts: a preset name, a compact string like
    'DADGAD', a list of six note names, or a Tuning object."""
    def __init__(self, tuning=None, prefer_sharps=None):
        self.tuning = get_tuning(tuning)
        self.prefer_sharps = prefer_sharps
        log(f'Initialised guitar in {self.tuning}')

    @property
    def open_strings(self):
        return list(self.tuning.strings)

    @property
    def num_strings(self):
        return len(self.tuning)

    def distance_from_standard(self):
        return self.tuning.distance_from('standard')

    def retune(self, tuning):
        """returns a new Guitar in another tuning"""
        return Guitar(tuning, prefer_sharps=self.prefer_sharps)

    #### what the frets sound:

    def fret(self, frets):
        """simulates plucking each string according to a fret list, low string first
        (None or 'x' for muted strings), and returns the sounding notes as a PlayedNoteSet"""
        return PlayedNoteSet.from_frets(frets, self.tuning)

    def __getitem__(self, frets):
        return self.fret(frets)

    def note_names(self, frets):
        """the sounding notes of some frets with their octaves, low string first"""
        frets = parsing.parse_out_frets(frets)
        names = []
        for s, f in enumerate(frets):
            note = self.tuning.note_at(s, f, prefer_sharps=self.prefer_sharps)
            if note is not None:
                names.append(note.name)
        return names

    def request(self, frets, voicing_filter='all', key=None):
        """a FretboardRequest for some frets on this guitar"""
        return FretboardRequest(frets, self.tuning, voicing_filter=voicing_filter, key=key)

    #### identification:

    def identify(self, frets):
        """the chord sounded by some frets, or None for fewer than two distinct notes"""
        return identify_chord(self.fret(frets), prefer_sharps=self.prefer_sharps)

    def matching_chords(self, frets, key=None, **kwargs):
        """the chord suggestions for some frets, keeping only chords in a key if one is given"""
        suggestions = matching_chords(self.fret(frets), prefer_sharps=self.prefer_sharps, **kwargs)
        if key is not None:
            suggestions = Key(key).filter_suggestions(suggestions)
        return suggestions

    def analyse(self, frets, **kwargs):
        """the VoicingAnalysis of some frets"""
        return analyse_voicing(self.fret(frets), prefer_sharps=self.prefer_sharps, **kwargs)

    def matching_scales(self, frets, **kwargs):
        return matching_scales(self.fret(frets), prefer_sharps=self.prefer_sharps, **kwargs)

    def matching_keys(self, frets, **kwargs):
        """the keys some frets could be in, giving extra weight to the root of the chord they sound"""
        notes = self.fret(frets)
        chord = identify_chord(notes)
        chord_root = chord.root if chord is not None else None
        return matching_keys(notes, chord_root=chord_root, prefer_sharps=self.prefer_sharps, **kwargs)

    def query(self, frets):
        """displays the sounded notes, the detected chord, and the resulting fret diagram,
        and returns the detected chord"""
        notes = self.fret(frets)
        print(f'Sounded notes: {notes}')
        chord = identify_chord(notes, prefer_sharps=self.prefer_sharps)
        print(f'Detected chord: {chord}')
        self.show_frets(frets, title=f'Frets: {parsing.fret_string(parsing.parse_out_frets(frets))}')
        return chord

    def __call__(self, frets):
        return self.query(frets)

    #### generation:

    def voicings(self, root, quality, voicing_filter='all', **kwargs):
        """playable voicings of a chord on this guitar"""
        return get_voicings(root, quality, self.tuning, voicing_filter, prefer_sharps=self.prefer_sharps, **kwargs)

    def chord_voicings(self, chord_name, voicing_filter='all', **kwargs):
        """voicings of a chord given by name, like 'Am7' or 'F#'"""
        from .chords import parse_chord_name # lazy import
        root, quality, bass = parse_chord_name(chord_name)
        voicings = self.voicings(root, quality, voicing_filter, **kwargs)
        if bass is not None:
            # slash chords keep only the voicings with the right bass note:
            bass_pc = Note.from_cache(bass).position
            voicings = [v for v in voicings if parsing.note_positions[v.bass_note] == bass_pc]
        return voicings

    def positions(self, root, scale_type, mode='positions', **kwargs):
        """the fingering positions of a scale on this guitar"""
        return scale_positions(root, scale_type, self.tuning, mode=mode, prefer_sharps=self.prefer_sharps, **kwargs)

    def adapt(self, frets, old_tuning='standard'):
        """transposes frets written for another tuning to sound the same pitches on this guitar"""
        return adapt_frets(frets, old_tuning, self.tuning)

    def locate_note(self, note, min_fret=0, max_fret=_settings.FRET_COUNT):
        """every (string, fret) location where some pitch class sounds"""
        pc = Note.from_cache(note).position
        locs = []
        for s in range(self.num_strings):
            if self.tuning.is_determined(s):
                locs.extend([(s, f) for f in self.tuning.frets_of(s, pc, max_fret=max_fret, min_fret=min_fret)])
        return locs

    #### displaying things as frets:

    def show_frets(self, frets, labels='notes', root=None, title=None, **kwargs):
        fret_diagram(frets, self.tuning, labels=labels, root=root, title=title).disp(**kwargs)

    def show_note(self, note, min_fret=0, max_fret=_settings.FRET_COUNT, **kwargs):
        note = Note.from_cache(note)
        cells = {loc: note.name for loc in self.locate_note(note, min_fret, max_fret)}
        Fretboard(cells, index=self.tuning.note_names, title=f'Note: {note.name} on {self.tuning}').disp(
            start_fret=max(min_fret, 1), end_fret=max_fret, **kwargs)

    def show_voicings(self, root, quality, voicing_filter='all', labels='notes', max_shown=None, **kwargs):
        """prints a table of a chord's voicings, then a diagram of each"""
        voicings = self.voicings(root, quality, voicing_filter, **kwargs)
        quality = ChordQuality.cast(quality)
        print(f'Voicings of {parsing.preferred_name(Note.from_cache(root).position, self.prefer_sharps)}{quality.symbol} in {self.tuning}:')
        voicing_table(voicings)
        for v in voicings[:max_shown]:
            print()
            voicing_diagram(v, self.tuning, root=root, labels=labels).disp()

    def show_positions(self, root, scale_type, mode='positions', labels='intervals', **kwargs):
        """prints a diagram of each of a scale's positions"""
        scale_type = ScaleType.cast(scale_type)
        for position in self.positions(root, scale_type, mode=mode, **kwargs):
            if mode == 'full':
                position_diagram(position, self.tuning, labels=labels).disp(start_fret=1, end_fret=position.end_fret)
            else:
                position_diagram(position, self.tuning, labels=labels).disp()
            print()

    def show_key(self, key, labels='notes', max_fret=_settings.FRET_COUNT, **kwargs):
        """prints every note of a key on the fretboard, with its tonic highlighted"""
        key = Key(key)
        notes = scale_notes(key.tonic, key.scale_type, self.tuning, max_fret=max_fret, prefer_sharps=key.prefer_sharps)
        cells = {(n.string_index, n.fret): (n.note if labels == 'notes' else n.interval) for n in notes}
        roots = [(n.string_index, n.fret) for n in notes if n.is_root and n.fret > 0]
        Fretboard(cells, index=self.tuning.note_names, highlight=roots, title=f'{key} on {self.tuning}').disp(
            start_fret=1, end_fret=max_fret, **kwargs)

    def show(self, obj, *args, **kwargs):
        """displays whatever it is passed as appropriately as it can:
        a Key, a ScalePosition, a Voicing, or a list of frets"""
        from .voicings import Voicing # lazy import
        from .positions import ScalePosition # lazy import
        if isinstance(obj, Key):
            self.show_key(obj, *args, **kwargs)
        elif isinstance(obj, ScalePosition):
            position_diagram(obj, self.tuning, *args, **kwargs).disp()
        elif isinstance(obj, Voicing):
            voicing_diagram(obj, self.tuning, *args, **kwargs).disp()
        else:
            self.show_frets(obj, *args, **kwargs)

    #### magic methods:

    @property
    def name(self):
        return self.tuning.name

    def __eq__(self, other):
        return isinstance(other, Guitar) and self.tuning == other.tuning

    def __hash__(self):
        return hash(self.tuning)

    def __str__(self):
        return f'Guitar: {self.tuning}'

    def __repr__(self):
        return str(self)


@dataclass(frozen=True)
class FretboardAnalysis:
    """everything the engine can say about one FretboardRequest"""
    notes: PlayedNoteSet
    chord: object               # IdentifiedChord, or None
    voicing: object             # VoicingAnalysis
    scales: tuple
    keys: tuple


@dataclass(frozen=True)
class FretboardRequest:
    """an immutable query: the frets being held, the tuning they're held in,
    the voicing filter applied to generated chord shapes, and an optional key
    context that chord suggestions are filtered by"""
    frets: tuple
    tuning: object = None
    voicing_filter: VoicingFilter = VoicingFilter.ALL
    key: object = None

    def __post_init__(self):
        # normalise inputs; frozen dataclasses are set through object.__setattr__
        object.__setattr__(self, 'frets', tuple(parsing.parse_out_frets(self.frets)))
        object.__setattr__(self, 'tuning', get_tuning(self.tuning))
        object.__setattr__(self, 'voicing_filter', VoicingFilter.cast(self.voicing_filter))
        if self.key is not None and not isinstance(self.key, Key):
            object.__setattr__(self, 'key', Key(self.key))

    @property
    def notes(self):
        return PlayedNoteSet.from_frets(self.frets, self.tuning)

    def identify(self):
        return identify_chord(self.notes)

    def suggestions(self):
        """chord suggestions for these frets, filtered by the request's key if it has one"""
        suggestions = matching_chords(self.notes)
        if self.key is not None:
            suggestions = self.key.filter_suggestions(suggestions)
        return suggestions

    def analyse(self):
        """identifies the chord, voicing, scales and keys of these frets all at once"""
        notes = self.notes
        chord = identify_chord(notes)
        voicing = analyse_voicing(notes)
        if self.key is not None:
            voicing = replace(voicing, suggestions=tuple(self.key.filter_suggestions(voicing.suggestions)))
        chord_root = chord.root if chord is not None else None
        return FretboardAnalysis(notes = notes,
                                 chord = chord,
                                 voicing = voicing,
                                 scales = tuple(matching_scales(notes)),
                                 keys = tuple(matching_keys(notes, chord_root=chord_root)))

    def voicings(self, root, quality, **kwargs):
        """voicings of some chord under this request's tuning and voicing filter"""
        return get_voicings(root, quality, self.tuning, self.voicing_filter, **kwargs)

    def matching_voicing(self, root, quality):
        """the generated voicing of some chord that these frets are closest to, if any"""
        return find_matching_voicing(self.frets, self.voicings(root, quality))

    def retuned(self, tuning, adapt=True):
        """the same request in another tuning, with its frets transposed to keep sounding
        the same pitches if adapt is True, or kept as they are otherwise"""
        frets = adapt_frets(self.frets, self.tuning, tuning) if adapt else self.frets
        return FretboardRequest(frets, tuning, voicing_filter=self.voicing_filter, key=self.key)

    def __str__(self):
        key_str = f', {self.key.name}' if self.key is not None else ''
        return f'{parsing.fret_string(self.frets)} in {self.tuning.name} ({self.voicing_filter.value}{key_str})'
