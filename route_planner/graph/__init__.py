"""Graph-related utilities for representing the transport network.

This subpackage contains the in-memory graph store, the validation
rules for interactive edits and the path-finding algorithm.
"""
