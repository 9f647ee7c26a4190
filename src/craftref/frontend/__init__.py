"""Textual browser for craftref."""
