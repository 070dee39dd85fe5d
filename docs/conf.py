# Copyright 2023, QC Design GmbH and the pauligroup contributors
# SPDX-License-Identifier: Apache-2.0
# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

# If extensions (or modules to document with autodoc) are in another directory,
# add these directories to sys.path here. If the directory is relative to the
# documentation root, use os.path.abspath to make it absolute, like shown here.
#
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).absolute().parent.parent / "src"))


# -- Project information -----------------------------------------------------

project = "pauligroup"
copyright = "2023, QC Design GmbH"
author = "QC Design GmbH"


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx_copybutton",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

autodoc_member_order = "groupwise"

# List of patterns, relative to source directory, that match files and
# directories to ignore when looking for source files.
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]


# -- Options for HTML output -------------------------------------------------

html_theme = "furo"

# See https://www.sphinx-doc.org/en/master/usage/configuration.html#confval-nitpicky
nitpicky = True
nitpick_ignore_regex = [
    ("py:class", r"(enum|numpy)\..*"),
]

autodoc_default_options = {
    # Note: To disable an option, just comment the line. Changing `None` to something
    # else will not have an effect.
    "members": True,
    "undoc-members": None,
    "special-members": True,  # __special__
    "show-inheritance": None,
    # __init__ is excluded here because a class docstring should contain
    # ".. automethod:: __init__", so that it shows above all other methods.
    "exclude-members": (
        "__annotations__,__dict__,__hash__,__init__,__module__,__slots__,"
        "__weakref__,__str__,__repr__"
    ),
}

# copybutton customisations - exclude line-numbers, prompt characters, and outpus
copybutton_exclude = ".linenos, .gp, .go"

html_show_sourcelink = True
