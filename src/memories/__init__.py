"""memories — a small personal journal: daily mood ratings, nutshells and reflections."""

__version__ = "0.1.0"
