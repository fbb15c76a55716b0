from dataclasses import dataclass, field
from ..qualities import ScaleType, KeyType


### the scales that can be identified from played notes and laid out as fretboard positions.
### as with chords, every member of qualities.ScaleType must be defined here.
### scales are written as degrees from the tonic, in ascending order.

@dataclass(frozen=True)
class ScaleDef:
    intervals: str      # comma-separated degrees from the tonic
    display: str        # name used in suggestion displays, e.g. 'C Major Pentatonic'
    aliases: tuple = field(default_factory=tuple)

scale_defs = {
    #### heptatonic scales:
    ScaleType.MAJOR:            ScaleDef('1,  2,  3,  4,  5,  6,  7', 'Major', ('natural major', 'ionian')),
    ScaleType.MINOR:            ScaleDef('1,  2, b3,  4,  5, b6, b7', 'Natural Minor', ('natural minor', 'aeolian')),

    #### pentatonic scales:
    ScaleType.MAJOR_PENTATONIC: ScaleDef('1,  2,  3,  5,  6',         'Major Pentatonic', ('pentatonic',)),
    ScaleType.MINOR_PENTATONIC: ScaleDef('1, b3,  4,  5, b7',         'Minor Pentatonic', ()),

    #### minor pentatonic with its 'blue note':
    ScaleType.BLUES:            ScaleDef('1, b3,  4, b5,  5, b7',     'Blues', ('minor blues',)),
    }

assert set(scale_defs) == set(ScaleType), f'scale definitions missing for: {set(ScaleType) - set(scale_defs)}'

# the degree that the blues scale adds to the minor pentatonic:
blue_note = 'b5'

# the scale each key type is diatonic to:
key_scales = {KeyType.MAJOR: ScaleType.MAJOR,
              KeyType.MINOR: ScaleType.MINOR}

assert set(key_scales) == set(KeyType)
