import os
import sys

sys.path.insert(0, os.path.abspath('../../src'))

project = 'algeff'
copyright = '2026, algeff contributors'
author = 'algeff contributors'
version = ''
release = '0.1.0'
source_suffix = ['.rst', '.md']
master_doc = 'index'
extensions = ['recommonmark', 'sphinx.ext.autodoc', 'sphinx.ext.napoleon', 'sphinx_autodoc_typehints', 'sphinx_rtd_theme']
html_theme = 'sphinx_rtd_theme'
