'''
Fold markers are comments, as rendered by Pygments, that delimit a collapsible region of a code
listing:

    //FOLD
    ...hidden code...
    //ENDFOLD

By the time we see them, the highlighter has already turned each one into a 'c1' (single-line
comment) span. We replace the opening one with a <details> element (whose <summary> is a '...'
placeholder), and the closing one with </details>.

This is purely literal string replacement over highlighted HTML. Nothing checks that the markers
pair up; count_markers() exists so that callers can warn about it if they choose.
'''

from __future__ import annotations
from dataclasses import dataclass


START_MARKER = '<span class="c1">//FOLD</span>'
END_MARKER   = '<span class="c1">//ENDFOLD</span>'

START_HTML = '<details><summary><span class="c1">...</span></summary>'
END_HTML   = '</details>'


def fold_markers(html: str) -> str:
    return html.replace(START_MARKER, START_HTML).replace(END_MARKER, END_HTML)


@dataclass(frozen = True)
class FoldCount:
    starts: int = 0
    ends: int = 0
    first_unmatched_end: int | None = None  # Character index, if any

    @property
    def balanced(self) -> bool:
        return self.starts == self.ends and self.first_unmatched_end is None


def count_markers(html: str) -> FoldCount:
    '''
    Counts the start and end markers in a rendered block, and finds the first end marker (if
    any) that has no preceding start marker to close.
    '''
    starts = 0
    ends = 0
    depth = 0
    first_unmatched_end = None

    # Each marker is searched for again only once the previous match has been consumed.
    start_index = html.find(START_MARKER)
    end_index = html.find(END_MARKER)

    while start_index != -1 or end_index != -1:
        if end_index == -1 or (start_index != -1 and start_index < end_index):
            starts += 1
            depth += 1
            start_index = html.find(START_MARKER, start_index + len(START_MARKER))

        else:
            ends += 1
            if depth == 0:
                if first_unmatched_end is None:
                    first_unmatched_end = end_index
            else:
                depth -= 1
            end_index = html.find(END_MARKER, end_index + len(END_MARKER))

    return FoldCount(starts, ends, first_unmatched_end)
