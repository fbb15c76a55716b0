### closed enumerations of the musical categories this library reasons about:
### chord qualities, voicing shapes, voicing filters, scale types, key types,
### interval families and tuning categories.
### the enums themselves only carry names; everything they mean is defined in the
### config tables (config/def_chords.py etc.), which are checked at import time
### to cover every member.

from enum import Enum, unique
from . import _settings


class _CastableEnum(Enum):
    """enum that can also be looked up (case-insensitively) by member name,
    value, or any alias registered in the config tables"""
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.strip()
            # exact matches first, so that e.g. 'M7' and 'm7' stay distinct:
            for member in cls:
                if value in [member.name, member.value] + member._aliases():
                    return member
            key = value.lower()
            for member in cls:
                names = [member.name.lower(), member.value.lower()] + [a.lower() for a in member._aliases()]
                if key in names:
                    return member
        return None

    @classmethod
    def cast(cls, value):
        """returns the member corresponding to value, raising ValueError if there is none"""
        if isinstance(value, cls):
            return value
        return cls(value)

    def _aliases(self):
        return []

    def __str__(self):
        return self.value


@unique
class ChordQuality(_CastableEnum):
    # core qualities, in order of increasing complexity:
    MAJOR = 'Major'
    MINOR = 'Minor'
    DOMINANT7 = 'Dominant 7'
    MAJOR7 = 'Major 7'
    MINOR7 = 'Minor 7'
    DIMINISHED = 'Diminished'
    AUGMENTED = 'Augmented'
    SUS2 = 'Sus2'
    SUS4 = 'Sus4'
    POWER5 = 'Power (5)'
    # extended catalog:
    DIMINISHED7 = 'Diminished 7'
    HALF_DIMINISHED7 = 'Minor 7b5'
    MINOR_MAJOR7 = 'Minor-Major 7'
    AUGMENTED7 = 'Augmented 7'
    MAJOR6 = 'Major 6'
    MINOR6 = 'Minor 6'
    ADD9 = 'Add 9'
    MINOR_ADD9 = 'Minor Add 9'
    DOMINANT9 = 'Dominant 9'
    MAJOR9 = 'Major 9'
    MINOR9 = 'Minor 9'
    DOMINANT7_SUS4 = '7sus4'

    @property
    def _def(self):
        from .config.def_chords import chord_defs # lazy import
        return chord_defs[self]

    def _aliases(self):
        symbol = [self._def.symbol] if self._def.symbol != '' else []
        return symbol + list(self._def.aliases) + [self._def.db_suffix]

    @property
    def intervals(self):
        """degree labels of this quality's tones, e.g. ['R', 'b3', '5', 'b7']"""
        from .intervals import parse_degree_string # lazy import
        return parse_degree_string(self._def.intervals)

    @property
    def offsets(self):
        """semitone offsets (0-11) of this quality's tones from the root"""
        from .intervals import label_offset # lazy import
        return [label_offset(iv) for iv in self.intervals]

    @property
    def optional_intervals(self):
        """a perfect fifth can be left out of any chord that has a third,
        as long as at least three other tones remain to identify it"""
        ivs = self.intervals
        if '5' in ivs and ('3' in ivs or 'b3' in ivs) and len(ivs) >= 4:
            return ['5']
        return []

    @property
    def symbol(self):
        """the suffix that follows the root in this quality's chord names, e.g. 'm7'"""
        return self._def.symbol

    @property
    def db_suffix(self):
        """this quality's suffix in chords-db voicing tables"""
        return self._def.db_suffix

    @property
    def complexity(self):
        """rank of this quality in the fixed complexity order (core qualities first)"""
        return list(ChordQuality).index(self) + 1

    @property
    def is_core(self):
        return self in core_qualities


core_qualities = [ChordQuality.MAJOR, ChordQuality.MINOR,
                  ChordQuality.DOMINANT7, ChordQuality.MAJOR7, ChordQuality.MINOR7,
                  ChordQuality.DIMINISHED, ChordQuality.AUGMENTED,
                  ChordQuality.SUS2, ChordQuality.SUS4, ChordQuality.POWER5]


@unique
class VoicingType(_CastableEnum):
    TRIAD = 'triad'
    SHELL_MAJOR = 'shell-major'
    SHELL_MINOR = 'shell-minor'
    SHELL_DOMINANT = 'shell-dominant'
    FULL = 'full'
    PARTIAL = 'partial'
    UNKNOWN = 'unknown'

    @property
    def is_shell(self):
        return self in (VoicingType.SHELL_MAJOR, VoicingType.SHELL_MINOR, VoicingType.SHELL_DOMINANT)


@unique
class VoicingFilter(_CastableEnum):
    ALL = 'all'
    TRIADS = 'triads'
    SHELLS = 'shells'
    FULL = 'full'


@unique
class ScaleType(_CastableEnum):
    MAJOR = 'major'
    MINOR = 'minor'
    MAJOR_PENTATONIC = 'major-pentatonic'
    MINOR_PENTATONIC = 'minor-pentatonic'
    BLUES = 'blues'

    @property
    def _def(self):
        from .config.def_scales import scale_defs # lazy import
        return scale_defs[self]

    def _aliases(self):
        return [self._def.display] + list(self._def.aliases)

    @property
    def intervals(self):
        """degree labels of this scale's tones, e.g. ['R', '2', 'b3', ...]"""
        from .intervals import parse_degree_string # lazy import
        return parse_degree_string(self._def.intervals)

    @property
    def offsets(self):
        from .intervals import label_offset # lazy import
        return [label_offset(iv) for iv in self.intervals]

    @property
    def display_name(self):
        return self._def.display

    @property
    def size(self):
        return len(self.intervals)

    @property
    def is_pentatonic(self):
        """pentatonic-family scales, including the blues scale"""
        return self in (ScaleType.MAJOR_PENTATONIC, ScaleType.MINOR_PENTATONIC, ScaleType.BLUES)


@unique
class KeyType(_CastableEnum):
    MAJOR = 'major'
    MINOR = 'minor'

    @property
    def scale_type(self):
        from .config.def_scales import key_scales # lazy import
        return key_scales[self]

    @property
    def display_name(self):
        return self.value.capitalize()


@unique
class IntervalFamily(_CastableEnum):
    ROOT = 'root'
    THIRD = 'third'
    FIFTH = 'fifth'
    SEVENTH = 'seventh'
    EXTENSION = 'extension'

    @property
    def color(self):
        return _settings.INTERVAL_COLORS[self.value]


@unique
class TuningCategory(_CastableEnum):
    STANDARD = 'Standard'
    DROP = 'Drop'
    OPEN = 'Open'
    MODAL = 'Modal'
    SPECIAL = 'Special'
