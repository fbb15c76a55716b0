from .parsing import parse_octavenote_name, natural_positions, accidental_offsets


#### name-value conversion functions for OctaveNotes
### values are MIDI note numbers, where C4 (middle C) is 60, E2 (the low string
### of a standard-tuned guitar) is 40, and C-1 is 0

# get octave and position from note value:
def oct_pos(value): # equivalent to div_mod
    value = int(value)
    oct, pos = divmod(value, 12)
    return oct - 1, pos

# get note value from octave and position
def oct_pos_to_value(oct, pos):
    value = (12 * (oct + 1)) + pos
    return value

### name-value conversion:
def name_to_value(name):
    """returns the value of an OctaveNote name, e.g. 'E2' -> 40.
    raises ValueError for anything that is not a note name with an octave"""
    # get pitch class and octave
    note_name, oct = parse_octavenote_name(name)
    # the octave number belongs to the letter, so Cb4 is the key below C4
    # and B#3 is the same key as C4:
    natural, accidental = note_name[0], note_name[1:]
    return oct_pos_to_value(oct, natural_positions[natural]) + accidental_offsets[accidental]
