# Configuration file for the Sphinx documentation builder.
#
# For the full list of options see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import sys
import inspect

__location__ = os.path.join(os.getcwd(), os.path.dirname(
    inspect.getfile(inspect.currentframe())))

# add 'polyoptics/src' to path
sys.path.insert(0, os.path.join(__location__, '../../src'))

# -- Project information -----------------------------------------------------

project = u'polyoptics'
copyright = u'2026, polyoptics developers'
author = u'polyoptics developers'

version = ''
release = ''
try:
    from polyoptics import __version__ as version
except ImportError:
    pass
else:
    release = version

# -- General configuration ---------------------------------------------------

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.intersphinx',
              'sphinx.ext.autosummary', 'sphinx.ext.viewcode',
              'sphinx.ext.mathjax', 'sphinx.ext.napoleon']

# Napoleon settings
napoleon_google_docstring = True
napoleon_numpy_docstring = False

templates_path = ['_templates']

exclude_patterns = ['Thumbs.db', '.DS_Store', 'tests']

master_doc = 'index'

add_module_names = False
autodoc_member_order = 'bysource'

pygments_style = 'friendly'

rst_prolog = """
.. |DataFrame| replace:: :class:`pandas.DataFrame`
"""

# A list of ignored prefixes for module index sorting.
modindex_common_prefix = ['polyoptics.']

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
html_theme_options = {
    'navigation_depth': 4,
}

# -- External mapping --------------------------------------------------------
python_version = '.'.join(map(str, sys.version_info[0:2]))
intersphinx_mapping = {
    'python': ('https://docs.python.org/' + python_version, None),
    'matplotlib': ('https://matplotlib.org/stable', None),
    'numpy': ('https://numpy.org/doc/stable', None),
    'pandas': ('https://pandas.pydata.org/pandas-docs/stable', None),
    'opticalglass': ('https://opticalglass.readthedocs.io/en/latest', None),
}
