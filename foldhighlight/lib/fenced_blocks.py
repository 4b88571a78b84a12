'''
Formatters for pymdownx.superfences custom fences.

A 'fold_highlight' fence is highlighted exactly as an ordinary fenced code block would be (by
SuperFences' own default formatter), and the resulting HTML is then passed through
folding.fold_markers(). Formatters are built up by decoration, each wrapping a base formatter.
'''

from __future__ import annotations
from . import folding
from .progress import Progress

from pymdownx.superfences import SuperFencesException, highlight_validator
from typing import Any, Protocol


NAME = 'fold_highlight'  # Progress/warning messages
LANG_OPTION = 'lang'


class FoldHighlightError(SuperFencesException):
    pass


class Formatter(Protocol):
    def __call__(self,
                 source: str, language: str, css_class: str, options: dict[Any, Any], md,
                 *, classes = [], id_value = '', attrs = {}, **kwargs):
        ...


def default_highlighter(md):
    '''
    Retrieves SuperFences' default formatter; i.e., the one that syntax-highlights ordinary
    fenced code blocks.
    '''
    try:
        entry = md.preprocessors['fenced_code_block'].extension.superfences[0]
    except (KeyError, AttributeError, IndexError) as e:
        raise FoldHighlightError(
            f'"{NAME}" fences require the pymdownx.superfences extension') from e

    if entry.get('name') != 'superfences' or entry.get('formatter') is None:
        # The default fence has been overridden with a '*' custom fence.
        raise FoldHighlightError(
            f'"{NAME}" fences need the default pymdownx.superfences highlighter, but it has been '
            f'replaced by custom fence "{entry.get("name")}"')

    return entry['formatter']


def fold_validator(language, inputs, options, attrs, md):
    if LANG_OPTION in inputs:
        options[LANG_OPTION] = inputs.pop(LANG_OPTION)
    return highlight_validator(language, inputs, options, attrs, md)


def highlight_formatter(default_lang: str = '') -> Formatter:
    def formatter(source, language, css_class, options, md,
                  classes = None, id_value = '', attrs = None, **kwargs):

        # The fence's own name stands in for the language, so the real one comes from 'lang'.
        options = dict(options or {})
        lang = options.pop(LANG_OPTION, None) or default_lang

        highlight = default_highlighter(md)
        return highlight(src = source,
                         language = lang,
                         options = options,
                         md = md,
                         classes = [*([css_class] if css_class else []), *(classes or [])],
                         id_value = id_value,
                         attrs = attrs or {},
                         **kwargs)

    return formatter


def _marker_lines(source: str) -> set[int]:
    return {
        line_number
        for line_number, line in enumerate(source.splitlines(), start = 1)
        if '//FOLD' in line or '//ENDFOLD' in line
    }


def fold_formatter(base_formatter: Formatter,
                   progress: Progress | None = None,
                   warn_unbalanced: bool = True) -> Formatter:
    def formatter(source, language, css_class, options, md, **kwargs):
        html = base_formatter(source, language, css_class, options, md, **kwargs)

        if progress is not None and warn_unbalanced:
            count = folding.count_markers(html)
            if not count.balanced:
                progress.warning(
                    NAME,
                    msg = (f'Unbalanced fold markers ({count.starts} x //FOLD, '
                           f'{count.ends} x //ENDFOLD); the output may contain unclosed or '
                           f'stray <details> tags'),
                    code = source,
                    highlight_lines = _marker_lines(source))

        return folding.fold_markers(html)

    return formatter


def fold_fence(name: str = NAME,
               css_class: str = 'fold-highlight',
               progress: Progress | None = None,
               default_lang: str = '',
               warn_unbalanced: bool = True) -> dict[str, Any]:
    '''
    Builds a 'custom_fences' entry for the pymdownx.superfences config.
    '''
    return {
        'name': name,
        'class': css_class,
        'format': fold_formatter(highlight_formatter(default_lang),
                                 progress = progress,
                                 warn_unbalanced = warn_unbalanced),
        'validator': fold_validator,
    }
