'''
Collapsible regions in highlighted code blocks, for Python Markdown.

Load the 'foldhighlight.ext.fold_highlight' extension (or 'foldhighlight.fold_highlight', via its
entry point), or use the formatters in foldhighlight.lib.fenced_blocks with SuperFences directly.
'''

from .lib.folding import fold_markers, count_markers, FoldCount
