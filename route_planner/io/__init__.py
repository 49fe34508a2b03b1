"""Input/output helpers for the interactive session.

This subpackage holds the re-prompting input loops and the text
formatting of listings and routes. Neither touches files.
"""
