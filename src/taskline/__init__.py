"""taskline: line-oriented task tracker with flat-file persistence."""

__version__ = "0.1.0"
