'''
# Fold Highlight Extension

This extension lets authors collapse parts of a code listing. Within a 'fold_highlight' fence,
comment lines '//FOLD' and '//ENDFOLD' delimit a region that is rendered as a <details> element,
initially collapsed, with a '...' summary:

    ```fold_highlight lang="java"
    public class Point {
        //FOLD
        private final int x, y;
        //ENDFOLD
    }
    ```

The block is otherwise highlighted just like an ordinary fenced code block ('lang' gives the
language), so any highlighting options (hl_lines, linenums, title) still work. The markers must
come out of the highlighter as single-line comments, so the language needs '//' comments.

pymdownx.superfences is loaded automatically. Since SuperFences only keeps one set of custom
fences, any others you need should be given via this extension's 'custom_fences' option.

Do not also list pymdownx.superfences after this extension. A later SuperFences registration
replaces ours, along with its custom fences, and 'fold_highlight' fences then go unrecognised.
If that happens, a warning is issued when the document is converted.
'''

from foldhighlight.lib import fenced_blocks
from foldhighlight.lib.progress import Progress
import markdown


class FenceCheckPreprocessor(markdown.preprocessors.Preprocessor):
    def __init__(self, md, fence_name, progress):
        super().__init__(md)
        self.fence_name = fence_name
        self.progress = progress

    def run(self, lines):
        try:
            fences = self.md.preprocessors['fenced_code_block'].extension.superfences
        except (KeyError, AttributeError):
            fences = []

        if not any(fence.get('name') == self.fence_name for fence in fences):
            self.progress.warning(
                fenced_blocks.NAME,
                msg = (f'The "{self.fence_name}" fence is not registered with pymdownx.superfences, '
                       f'so it will not be folded. (Was pymdownx.superfences loaded after this '
                       f'extension? If so, pass its custom fences via "custom_fences" instead.)'))

        return lines


class FoldHighlightExtension(markdown.Extension):
    def __init__(self, **kwargs):
        self.config = {
            'progress': [
                Progress(),
                'An object accepting progress messages.'
            ],
            'fence_name': [
                fenced_blocks.NAME,
                'Name of the fence (as in ```fold_highlight) whose fold markers will be expanded.'
            ],
            'css_class': [
                'fold-highlight',
                'CSS class added to the highlighted block, alongside the highlighter\'s own.'
            ],
            'default_lang': [
                '',
                'Language to highlight with, for fences lacking a "lang" option.'
            ],
            'warn_unbalanced': [
                True,
                'Whether to warn about //FOLD and //ENDFOLD markers that do not pair up.'
            ],
            'custom_fences': [
                [],
                'Other pymdownx.superfences custom fences, to be registered alongside this one.'
            ],
        }
        super().__init__(**kwargs)


    def extendMarkdown(self, md):
        fence = fenced_blocks.fold_fence(
            name = self.getConfig('fence_name'),
            css_class = self.getConfig('css_class'),
            progress = self.getConfig('progress'),
            default_lang = self.getConfig('default_lang'),
            warn_unbalanced = self.getConfig('warn_unbalanced'))

        md.registerExtensions(
            ['pymdownx.superfences'],
            {'pymdownx.superfences': {
                'custom_fences': [*self.getConfig('custom_fences'), fence]
            }})

        # Runs before SuperFences (priority 25), once all extensions are loaded.
        md.preprocessors.register(
            FenceCheckPreprocessor(md, self.getConfig('fence_name'), self.getConfig('progress')),
            'fold-highlight-check', 35)


def makeExtension(**kwargs):
    return FoldHighlightExtension(**kwargs)
