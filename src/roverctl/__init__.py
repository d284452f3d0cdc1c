"""roverctl — simulate rovers moving on a bounded grid."""

__version__ = "0.1.0"
