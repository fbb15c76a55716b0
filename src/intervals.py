### degree labels ('R', 'b3', '5', 'b7', '9' and so on) are how this library names
### intervals: both in chord and scale definitions, and in every result it reports.
### this module converts between those labels and semitone distances,
### and buckets them into the interval families used for colouring.

from .parsing import accidental_offsets
from .qualities import IntervalFamily
from . import _settings


# how many semitones each (major/perfect) scale degree lies above the root:
default_degree_intervals = {
                1: 0, # unison
                2: 2, # maj2
                3: 4, # maj3
                4: 5, # per4
                5: 7, # per5
                6: 9, # maj6
                7: 11, # maj7
                }
# defaults of degrees in higher octaves, for extensions like 9ths and 13ths:
higher_defaults = {k+(7*o):v+(12*o) for k,v in default_degree_intervals.items() for o in range(1,3)}
default_degree_intervals.update(higher_defaults)

# the label used to display each semitone distance (mod 12) from a root,
# where a chord or scale doesn't spell it some other way:
offset_labels = {0: 'R',
                 1: 'b2',
                 2: '2',
                 3: 'b3',
                 4: '3',
                 5: '4',
                 6: 'b5',
                 7: '5',
                 8: '#5',
                 9: '6',
                 10: 'b7',
                 11: '7'}

# interval families by (simple) degree:
degree_families = {1: IntervalFamily.ROOT,
                   3: IntervalFamily.THIRD,
                   5: IntervalFamily.FIFTH,
                   7: IntervalFamily.SEVENTH}


def parse_degree_label(label):
    """splits a degree label like 'b7' or '#11' or 'R' into its accidental offset
    and degree number, returning e.g. (-1, 7).
    raises ValueError for anything that isn't a degree label"""
    if not isinstance(label, str):
        raise TypeError(f'expected str degree label but got: {type(label)}')
    label = label.strip()
    if label in ('R', '1', 'P1'):
        return 0, 1
    digits = label.lstrip('b#♭♯𝄫𝄪')
    accidental = label[:len(label)-len(digits)]
    if not digits.isdigit() or accidental not in accidental_offsets:
        raise ValueError(f'Invalid degree label: {label!r}')
    degree = int(digits)
    if degree not in default_degree_intervals:
        raise ValueError(f'Degree out of range in label: {label!r}')
    return accidental_offsets[accidental], degree

def label_semitones(label):
    """semitone distance of a degree label above the root, e.g. 'b7' -> 10, '9' -> 14"""
    offset, degree = parse_degree_label(label)
    return default_degree_intervals[degree] + offset

def label_offset(label):
    """semitone distance of a degree label above the root, within one octave (0-11)"""
    return label_semitones(label) % 12

def offset_label(offset):
    """default degree label for a semitone distance from the root, e.g. 3 -> 'b3'"""
    return offset_labels[offset % 12]

def simple_degree(label):
    """the degree of a label within one octave, so that a 9th is a 2nd and so on"""
    offset, degree = parse_degree_label(label)
    return ((degree - 1) % 7) + 1

def parse_degree_string(degree_string):
    """parses a comma-separated string of degrees like '1, b3, 5' into a list of
    degree labels like ['R', 'b3', '5']"""
    labels = []
    for item in degree_string.split(','):
        item = item.strip()
        if len(item) == 0:
            continue
        parse_degree_label(item) # validate
        labels.append('R' if item in ('1', 'P1') else item)
    return labels


#### interval families and colours

def interval_family(label):
    """the family (root/third/fifth/seventh/extension) that a degree label belongs to.
    extensions are everything else: 2nds, 4ths, 6ths and their compound forms"""
    offset, degree = parse_degree_label(label)
    if degree > 7:
        # 9ths, 11ths and 13ths are always extensions
        return IntervalFamily.EXTENSION
    return degree_families.get(degree, IntervalFamily.EXTENSION)

def interval_color(label):
    """colour tag of a degree label, a pure function of its interval family"""
    return interval_family(label).color

def offset_color(offset):
    """colour tag of a semitone distance from the root, using its default label"""
    return interval_color(offset_label(offset))

def family_colors():
    """the colour of every interval family, keyed by family"""
    return {family: _settings.INTERVAL_COLORS[family.value] for family in IntervalFamily}
