### the fretboard engine: chord identification and suggestion, scale and key matching,
### voicing generation, scale positions, and text diagrams of all of the above.

from .notes import Note, OctaveNote, PlayedNoteSet
from .qualities import ChordQuality, ScaleType, KeyType, VoicingType, VoicingFilter
from .tuning import Tuning, get_tuning, tuning_name, adapt_frets
from .chords import identify_chord, chord_name, parse_chord_name
from .matching import matching_chords, analyse_voicing, matching_scales
from .keys import Key, matching_keys
from .voicings import Voicing, get_voicings, find_matching_voicing
from .positions import scale_positions, position_notes, playback_notes
from .display import Fretboard, fret_diagram
from .guitar import Guitar, FretboardRequest
