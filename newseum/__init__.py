"""newseum: aggregate RSS/Atom feeds into one searchable, time-ordered list."""

__version__ = "0.1.0"
