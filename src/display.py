from . import parsing, _settings
from .util import log


class Fretboard:
    ### a guitar fretboard display class that is initialised with its data
    ### and then called to display that data with some display parameters

    # example:
    ### open chord: x32010
    #    E4 ‖   ¦   ¦   ¦
    #    B3 ‖ C ¦   ¦   ¦
    #    G3 ‖   ¦   ¦   ¦
    #    D3 ‖   ¦ E ¦   ¦
    #    A2 ‖   ¦   ¦ C ¦
    #    E2 X   ¦   ¦   ¦
    #          1   2   3
    #
    ### high chord: x5453x
    #    E4 X ¦   ¦   ¦
    #    B3   ¦ C ¦   ¦
    #    G3   ¦   ¦ C ¦
    #    D3   ¦ F#¦   ¦
    #    A2   ¦   ¦ D ¦
    #    E2 X ¦   ¦   ¦
    #          3   4   5

    def __init__(self, cells, index=None, highlight=None, mute=None, title=None, num_strings=_settings.NUM_STRINGS):
        """args:
        cells: a dict that keys (string,fret) tuples to the contents of what should be displayed in that fret.
            strings are indexed from 0 (the lowest string) and fret 0 is the open string.
        index: labels to display at left of fretboard, one per string from lowest to highest.
            the standard tuning's open strings by default.
        highlight: a list of (string,fret) tuples to highlight
            in addition to whatever contents they might or might not have.
        mute: list of strings to display mute markers (X) next to."""

        if index is None:
            index = ['E2', 'A2', 'D3', 'G3', 'B3', 'E4']
        self.index = [str(i) if i is not None else '?' for i in index]
        self.mute = [] if mute is None else mute

        self.title = title
        self.num_strings = num_strings

        self.cells = cells
        if len(cells) > 0:
            self.strings_used, self.frets_used = zip(*self.cells.keys())
        else:
            self.strings_used, self.frets_used = (), (0,)
        self.all_contents = [str(c) for c in self.cells.values()]

        # we expect highlight to be a list of integer tuples,
        # but if we've been passed a pair of ints by accident, quietly re-cast them:
        if highlight is not None and len(highlight) > 0 and isinstance(highlight[0], int):
            self.highlight = [highlight]
        elif highlight is not None:
            self.highlight = list(highlight)
        else:
            self.highlight = []

        ### get min and max extent of fretting positions, but be sensitive to all 0s:
        self.max_fret = max(self.frets_used)
        fretted = [f for f in self.frets_used if f != 0]
        self.min_fret = min(fretted) if len(fretted) > 0 else 0 # minimum nonzero fret

    def render(self, start_fret=None, end_fret=None, fret_size=None, fret_labels=True, fret_sep_char='¦', title=True):
        """returns the diagram between start_fret and end_fret (detected from the data if either is None)
        as a string, leaving fret_size characters between each vertical fret bar.
        open strings are shown to the left of the nut."""

        ############## determine length of diagram:

        if start_fret is None:
            # for e.g. open chords:
            if self.max_fret <= 4:
                start_fret = 1
            # for e.g. chords high on the neck, truncate the diagram to start on the minimum fret:
            elif self.min_fret >= 4:
                start_fret = self.min_fret
            # for whole fretboard diagrams:
            else:
                start_fret = 1

        if end_fret is None:
            end_fret = max([self.max_fret, start_fret+2]) # at least 3 frets
        num_frets_shown = (end_fret - start_fret) + 1
        log(f'Start fret: {start_fret}, end fret: {end_fret}')

        if fret_size is None:
            # use the max of the string data, or 3, whichever is greater:
            maxlen = max([len(c) for c in self.all_contents] + [0])
            fret_size = max([maxlen, 3])

        index_width = max([len(i) for i in self.index]) + 1
        open_width = max([len(str(self.cells[s,0])) for s in range(self.num_strings) if (s,0) in self.cells] + [1])

        assert len(fret_sep_char) == 1
        hl_left, hl_right = '⟦⟧'
        nut = '‖' if start_fret == 1 else ' '

        ############## start piecing together contents

        rows = []
        for s in range(self.num_strings):
            if s in self.mute:
                open_cell = 'X'
            elif (s,0) in self.cells:
                open_cell = str(self.cells[s,0])
            else:
                open_cell = ' '
            row_nut = hl_left if (s, start_fret) in self.highlight else nut
            row = [f'{self.index[s]:{index_width}}{open_cell:{open_width}}{row_nut}']

            for f in range(num_frets_shown):
                fret_num = start_fret + f
                cell_key = (s, fret_num)
                content = str(self.cells[cell_key]) if cell_key in self.cells else ''
                # centre the content, filling right before left:
                left_space = (fret_size - len(content)) // 2
                this_cell = f'{" "*left_space}{content:{fret_size - left_space}}'

                # highlighted cells get bracketed instead of separated:
                if cell_key in self.highlight:
                    sep_char = hl_right
                elif (s, fret_num+1) in self.highlight:
                    sep_char = hl_left
                else:
                    sep_char = fret_sep_char
                row.append(this_cell + sep_char)
            rows.append(''.join(row))

        # the highest string goes at the top:
        rows = list(reversed(rows))

        if title and (self.title is not None):
            rows = [str(self.title)] + rows

        # and finally put fret labels on the bottom if needed:
        if fret_labels:
            footer_leftmargin = ' ' * (index_width + open_width + 1)
            footer_cells = [f'{start_fret + f:^{fret_size}}' for f in range(num_frets_shown)]
            rows.append(footer_leftmargin + ' '.join(footer_cells))
        return '\n'.join(rows)

    def disp(self, **kwargs):
        print(self.render(**kwargs))


#### fretboard diagrams of the library's results:

def fret_diagram(frets, tuning=None, labels='notes', root=None, title=None):
    """a Fretboard of a fret list under some tuning, with each sounding fret labelled
    by its note name, or by its degree above a root if labels='intervals'"""
    from .tuning import get_tuning # lazy import
    tuning = get_tuning(tuning)
    frets = parsing.parse_out_frets(frets)
    root_pc = parsing.note_positions[root] if isinstance(root, str) else root
    cells, mute = {}, []
    for s, fret in enumerate(frets):
        pc = tuning.pitch_class_at(s, fret)
        if pc is None:
            mute.append(s)
            continue
        if labels == 'intervals' and root_pc is not None:
            from .intervals import offset_label # lazy import
            cells[s, fret] = offset_label(pc - root_pc)
        else:
            cells[s, fret] = parsing.preferred_name(pc)
    return Fretboard(cells, index=tuning.note_names, mute=mute, title=title)

def voicing_diagram(voicing, tuning=None, root=None, labels='notes'):
    """a Fretboard of a Voicing, titled with its frets and bass note"""
    title = f'{voicing} bass: {voicing.bass_note}' + (' (inversion)' if voicing.is_inversion else '')
    return fret_diagram(voicing.frets, tuning, labels=labels, root=root, title=title)

def position_diagram(position, tuning=None, labels='intervals'):
    """a Fretboard of a ScalePosition, with its notes labelled by scale degree (or note name),
    and its roots highlighted"""
    from .tuning import get_tuning # lazy import
    tuning = get_tuning(tuning)
    cells = {}
    for n in position.notes:
        cells[n.string_index, n.fret] = n.interval if labels == 'intervals' else n.note
    roots = [(n.string_index, n.fret) for n in position.notes if n.is_root and n.fret > 0]
    mute = [s for s in range(len(tuning)) if not tuning.is_determined(s)]
    return Fretboard(cells, index=tuning.note_names, highlight=roots, mute=mute, title=str(position))


class DataFrame:
    def __init__(self, colnames):
        self.column_names = colnames
        self.num_columns = len(colnames)
        self.column_data = {i:[] for i in range(self.num_columns)}

        self.row_data = []
        self.num_rows = 0

    def append(self, data_lst):
        """add a row of data to this dataframe, which we store as objects"""
        assert len(data_lst) == self.num_columns, f"tried to append row of length {len(data_lst)} but dataframe has {self.num_columns} columns"
        row = data_lst
        self.row_data.append(row)
        self.num_rows += 1

        for i, item in enumerate(row):
            self.column_data[i].append(item)

    def __len__(self):
        """DataFrame length is the number of rows"""
        return self.num_rows

    def column_widths(self, up_to_row=None):
        """return the max str size in each column, up to a specified row"""
        widths = []
        for col_num, col in self.column_data.items():
            col_strs = [str(c) for c in col[:up_to_row]]
            str_lens = [len(s) for s in col_strs] + [len(self.column_names[col_num])]
            widths.append(max(str_lens))
        return widths

    def render(self, margin=' ', header_border=True, max_rows=None):
        margin_size = len(margin)
        printed_rows = []
        widths = self.column_widths(up_to_row=max_rows)
        # make header:
        header_row = [f'{self.column_names[i]:{widths[i]}}' for i in range(self.num_columns)]
        printed_rows.append(margin.join(header_row).rstrip())
        if header_border:
            total_width = sum(widths) + (self.num_columns-1)*margin_size
            printed_rows.append('='*total_width)
        # make rows:
        for row in self.row_data[:max_rows]:
            this_row = [f'{str(row[i]):{widths[i]}}' for i in range(self.num_columns)]
            printed_rows.append(margin.join(this_row).rstrip())
        return '\n'.join(printed_rows)

    def show(self, **kwargs):
        print(self.render(**kwargs))


#### result tables:

def suggestion_table(suggestions, max_results=None, **kwargs):
    """prints a table of ChordSuggestions"""
    df = DataFrame(['Chord', 'Voicing', 'Score', 'Present', 'Missing', 'Bass'])
    for s in suggestions:
        bass = s.bass_note if s.bass_note is not None else ''
        if s.is_inversion:
            bass = f'{bass} (inv.)'
        df.append([s.display_name, str(s.voicing_type), s.score,
                   ', '.join(s.present_intervals), ', '.join(s.missing_intervals), bass])
    df.show(max_rows=max_results, **kwargs)
    return df

def scale_table(suggestions, max_results=None, **kwargs):
    """prints a table of ScaleSuggestions"""
    from .matching import format_matched_notes, format_extra_notes # lazy import
    df = DataFrame(['Scale', 'Score', 'Coverage', 'Notes', ''])
    for s in suggestions:
        df.append([s.display, s.score, f'{s.coverage}%', format_matched_notes(s), format_extra_notes(s)])
    df.show(max_rows=max_results, **kwargs)
    return df

def key_table(suggestions, max_results=None, **kwargs):
    """prints a table of KeySuggestions"""
    df = DataFrame(['Key', 'Score', 'Reason'])
    for s in suggestions:
        df.append([s.display, s.score, s.reason])
    df.show(max_rows=max_results, **kwargs)
    return df

def voicing_table(voicings, max_results=None, **kwargs):
    """prints a table of Voicings"""
    df = DataFrame(['Frets', 'Lowest', 'Highest', 'Notes', 'Bass'])
    for v in voicings:
        bass = v.bass_note if not v.is_inversion else f'{v.bass_note} (inv.)'
        df.append([v.fret_string, v.lowest_fret, v.highest_fret, ' '.join(v.note_names), bass])
    df.show(max_rows=max_results, **kwargs)
    return df
