import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(
    name = 'foldhighlight',
    version = '0.1',
    description = 'A Python Markdown extension for collapsible regions within highlighted code blocks.',
    long_description = read('README.md'),
    long_description_content_type = 'text/markdown',
    license = 'MIT',
    keywords = 'markdown',
    python_requires = '>=3.8',
    install_requires=[
        'markdown', 'pymdown-extensions', 'pygments'
    ],
    extras_require = {
        'test': ['pytest', 'PyHamcrest'],
    },
    packages = [
        'foldhighlight', 'foldhighlight.lib', 'foldhighlight.ext'
    ],
    entry_points = {
        'markdown.extensions': [
            'foldhighlight.fold_highlight = foldhighlight.ext.fold_highlight:FoldHighlightExtension',
        ]
    },
    classifiers = [
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Documentation',
        'Topic :: Text Processing :: Markup :: Markdown',
    ]
)
