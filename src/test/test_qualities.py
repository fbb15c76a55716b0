import pytest

from ..qualities import ChordQuality, ScaleType, KeyType, VoicingFilter, TuningCategory, core_qualities
from .testing_tools import compare

def test_chord_qualities():
    compare(ChordQuality.cast('m7'), ChordQuality.MINOR7)
    # case matters between symbols that differ only by case:
    compare(ChordQuality.cast('M7'), ChordQuality.MAJOR7)
    compare(ChordQuality.cast('maj7'), ChordQuality.MAJOR7)
    compare(ChordQuality.cast('minor'), ChordQuality.MINOR)
    compare(ChordQuality.cast('Dominant 7'), ChordQuality.DOMINANT7)
    compare(ChordQuality.cast(ChordQuality.SUS4), ChordQuality.SUS4)

    compare(ChordQuality.MINOR7.offsets, [0, 3, 7, 10])
    compare(ChordQuality.DIMINISHED7.intervals, ['R', 'b3', 'b5', 'bb7'])
    # the fifth can only be left out of chords with four or more tones:
    compare(ChordQuality.MAJOR.optional_intervals, [])
    compare(ChordQuality.MINOR.optional_intervals, [])
    compare(ChordQuality.DOMINANT7.optional_intervals, ['5'])
    compare(ChordQuality.MINOR7.optional_intervals, ['5'])
    compare(ChordQuality.POWER5.optional_intervals, [])
    compare(ChordQuality.SUS4.optional_intervals, [])
    compare(ChordQuality.MINOR7.symbol, 'm7')
    compare(ChordQuality.MINOR_MAJOR7.db_suffix, 'mmaj7')

    # core qualities come first, in order of complexity:
    compare([q.complexity for q in core_qualities], list(range(1, 11)))
    compare(ChordQuality.DIMINISHED7.is_core, False)

    with pytest.raises(ValueError):
        ChordQuality.cast('xyz')

def test_other_enums():
    compare(ScaleType.cast('minor pentatonic'), ScaleType.MINOR_PENTATONIC)
    compare(ScaleType.cast('aeolian'), ScaleType.MINOR)
    compare(ScaleType.BLUES.offsets, [0, 3, 5, 6, 7, 10])
    compare(ScaleType.MAJOR.size, 7)
    compare(ScaleType.BLUES.is_pentatonic, True)
    compare(ScaleType.MINOR.is_pentatonic, False)

    compare(KeyType.cast('Minor'), KeyType.MINOR)
    compare(KeyType.MINOR.scale_type, ScaleType.MINOR)
    compare(KeyType.MAJOR.display_name, 'Major')

    compare(VoicingFilter.cast('shells'), VoicingFilter.SHELLS)
    compare(TuningCategory.cast('drop'), TuningCategory.DROP)

    with pytest.raises(ValueError):
        VoicingFilter.cast('sevenths')

def unit_test():
    test_chord_qualities()
    test_other_enums()
