from foldhighlight.lib import folding
from foldhighlight.lib.folding import START_MARKER, END_MARKER, START_HTML, END_HTML

import unittest
from hamcrest import *


SAMPLES = [
    '',
    'plain text',
    '<span class="k">int</span> <span class="n">x</span>;',
    f'{START_MARKER}content{END_MARKER}',
    f'{START_MARKER}content',
    f'content{END_MARKER}',
    f'{END_MARKER}a{START_MARKER}b',
    f'{START_MARKER}{START_MARKER}inner{END_MARKER}outer{END_MARKER}',
    f'a{START_MARKER}b{END_MARKER}c{START_MARKER}d{END_MARKER}e',
    f'{START_MARKER}{END_MARKER}' * 20,
    '<span class="c1">//FOLD</span',
    START_HTML + END_HTML,
]


class FoldingTestCase(unittest.TestCase):

    def test_empty(self):
        assert_that(folding.fold_markers(''), is_(''))


    def test_single_pair(self):
        assert_that(
            folding.fold_markers(
                '<span class="c1">//FOLD</span>content<span class="c1">//ENDFOLD</span>'),
            is_('<details><summary><span class="c1">...</span></summary>content</details>'))


    def test_unmatched_start(self):
        assert_that(
            folding.fold_markers('<span class="c1">//FOLD</span>content'),
            is_('<details><summary><span class="c1">...</span></summary>content'))


    def test_unmatched_end(self):
        assert_that(
            folding.fold_markers('content<span class="c1">//ENDFOLD</span>more'),
            is_('content</details>more'))


    def test_multiple_pairs(self):
        html = (f'<span class="k">class</span> A {{\n'
                f'    {START_MARKER}\n'
                f'    <span class="kt">int</span> x;\n'
                f'    {END_MARKER}\n'
                f'    <span class="kt">int</span> y;\n'
                f'    {START_MARKER}\n'
                f'    <span class="kt">int</span> z;\n'
                f'    {END_MARKER}\n'
                f'}}')

        assert_that(
            folding.fold_markers(html),
            is_(f'<span class="k">class</span> A {{\n'
                f'    {START_HTML}\n'
                f'    <span class="kt">int</span> x;\n'
                f'    {END_HTML}\n'
                f'    <span class="kt">int</span> y;\n'
                f'    {START_HTML}\n'
                f'    <span class="kt">int</span> z;\n'
                f'    {END_HTML}\n'
                f'}}'))


    def test_near_misses(self):
        for html in [
            '//FOLD content //ENDFOLD',
            '<span class="c1">//fold</span>',
            '<span class="c1">// FOLD</span>',
            '<span class="cm">//FOLD</span>',
            '<span class="c1">#FOLD</span>',
            "<span class='c1'>//FOLD</span>",
            '<span class="c1">//FOLDER</span>',
            '<span class="c1">//ENDFOLDS</span>',
            '<span class="c1">/*FOLD*/</span>',
        ]:
            assert_that(folding.fold_markers(html), is_(html))


    def test_literal_matching(self):
        # Regex metacharacters in the surrounding text have no special meaning.
        html = f'.*+?[](){{}}^$|\\{START_MARKER}.*{END_MARKER}\\1'
        assert_that(
            folding.fold_markers(html),
            is_(f'.*+?[](){{}}^$|\\{START_HTML}.*{END_HTML}\\1'))


    def test_identity_without_markers(self):
        for html in SAMPLES:
            if START_MARKER not in html and END_MARKER not in html:
                assert_that(folding.fold_markers(html), is_(html))


    def test_replacement_counts(self):
        for html in SAMPLES:
            result = folding.fold_markers(html)
            assert_that(
                result.count('<details>') - html.count('<details>'),
                is_(html.count(START_MARKER)))
            assert_that(
                result.count('</details>') - html.count('</details>'),
                is_(html.count(END_MARKER)))
            assert_that(result, not_(contains_string(START_MARKER)))
            assert_that(result, not_(contains_string(END_MARKER)))


    def test_idempotent(self):
        for html in SAMPLES:
            once = folding.fold_markers(html)
            assert_that(folding.fold_markers(once), is_(once))


    def test_order_independent(self):
        for html in SAMPLES:
            reversed_order = html.replace(END_MARKER, END_HTML).replace(START_MARKER, START_HTML)
            assert_that(folding.fold_markers(html), is_(reversed_order))


    def test_count_markers(self):
        for html,                                             starts, ends, unmatched, balanced in [
            ('',                                              0,      0,    None,      True),
            ('no markers',                                    0,      0,    None,      True),
            (f'{START_MARKER}x{END_MARKER}',                  1,      1,    None,      True),
            (f'{START_MARKER}{START_MARKER}{END_MARKER}{END_MARKER}',
                                                              2,      2,    None,      True),
            (f'{START_MARKER}x',                              1,      0,    None,      False),
            (f'x{END_MARKER}',                                0,      1,    1,         False),
            (f'ab{END_MARKER}{START_MARKER}',                 1,      1,    2,         False),
            (f'{START_MARKER}{END_MARKER}{END_MARKER}',       1,      2,
                len(START_MARKER) + len(END_MARKER),                              False),
        ]:
            count = folding.count_markers(html)
            assert_that(count.starts, is_(starts))
            assert_that(count.ends, is_(ends))
            assert_that(count.first_unmatched_end, is_(unmatched))
            assert_that(count.balanced, is_(balanced))


    def test_count_markers_does_not_alter_output(self):
        html = f'{START_MARKER}x'
        folding.count_markers(html)
        assert_that(folding.fold_markers(html), is_(f'{START_HTML}x'))


    def test_count_markers_many_ends(self):
        n = 20000
        count = folding.count_markers(f'x{END_MARKER}' * n)
        assert_that(count.starts, is_(0))
        assert_that(count.ends, is_(n))
        assert_that(count.first_unmatched_end, is_(1))

        count = folding.count_markers(f'{START_MARKER}x' * n + f'{END_MARKER}x' * n)
        assert_that(count.starts, is_(n))
        assert_that(count.ends, is_(n))
        assert_that(count.balanced, is_(True))
