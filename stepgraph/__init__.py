"""Stepgraph: watch graph algorithms run one reversible step at a time."""

__version__ = "0.1.0"
