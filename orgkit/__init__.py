"""Parsers for the elements and objects of Org-mode documents."""

__version__ = "0.1.0"